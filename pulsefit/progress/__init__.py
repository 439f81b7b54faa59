# -*- coding: utf-8 -*-
"""
Trend & progress analytics

Pure aggregation over a trailing window of workout sessions and nutrition entries, plus
the coach layer that turns a report into tips.
"""

from .analyzer import analyze_progress

__all__ = ['analyze_progress']
