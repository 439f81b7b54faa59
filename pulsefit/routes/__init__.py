# -*- coding: utf-8 -*-
"""
Route metrics

Distance, speed and elevation aggregates over an ordered GPS trace.
"""

from .metrics import compute_route_metrics, distance_m
from .models import LocationSample, RouteMetrics

__all__ = [
    'LocationSample',
    'RouteMetrics',
    'compute_route_metrics',
    'distance_m',
]
