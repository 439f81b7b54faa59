# -*- coding: utf-8 -*-
"""
Live GPS tracking

Active tracking state lives in storage rather than process memory: one row per user in
`tracking_sessions`, and an ordered, de-duplicated point log in `tracking_points`.
"""

from .service import add_point, end_tracking, start_tracking, tracking_status

__all__ = ['add_point', 'end_tracking', 'start_tracking', 'tracking_status']
