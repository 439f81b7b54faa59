# -*- coding: utf-8 -*-
"""
Geospatial route metrics.

Distances are great-circle (haversine, R = 6371 km) between *adjacent* samples only,
summed in capture order.
"""

from __future__ import annotations

import math
from typing import Sequence, Tuple

import numpy as np

from .models import LocationSample, RouteMetrics

EARTH_RADIUS_KM = 6371.0


def distance_m(a: LocationSample, b: LocationSample) -> float:
    """Haversine distance between two samples, in meters."""
    lat1 = math.radians(a.latitude)
    lat2 = math.radians(b.latitude)
    d_lat = lat2 - lat1
    d_lon = math.radians(b.longitude - a.longitude)
    h = math.sin(d_lat / 2) ** 2 + math.cos(lat1) * math.cos(lat2) * math.sin(d_lon / 2) ** 2
    h = min(max(h, 0.0), 1.0)
    c = 2 * math.atan2(math.sqrt(h), math.sqrt(1 - h))
    return EARTH_RADIUS_KM * c * 1000


def _segment_distances_m(samples: Sequence[LocationSample]) -> np.ndarray:
    lat = np.radians(np.array([s.latitude for s in samples], dtype=float))
    lon = np.radians(np.array([s.longitude for s in samples], dtype=float))
    d_lat = np.diff(lat)
    d_lon = np.diff(lon)
    h = np.sin(d_lat / 2) ** 2 + np.cos(lat[:-1]) * np.cos(lat[1:]) * np.sin(d_lon / 2) ** 2
    h = np.clip(h, 0.0, 1.0)
    c = 2 * np.arctan2(np.sqrt(h), np.sqrt(1 - h))
    return EARTH_RADIUS_KM * c * 1000


def _elevation_changes(samples: Sequence[LocationSample]) -> Tuple[float, float]:
    alt = np.array(
        [s.altitude if s.altitude is not None else np.nan for s in samples],
        dtype=float,
    )
    delta = np.diff(alt)
    # A NaN delta means one side of the pair has no altitude: skip, never interpolate.
    known = ~np.isnan(delta)
    gain = float(delta[known & (delta > 0)].sum())
    loss = float(np.abs(delta[known & (delta < 0)]).sum())
    return gain, loss


def compute_route_metrics(samples: Sequence[LocationSample]) -> RouteMetrics:
    """
    Aggregate an ordered trace into distance / speed / elevation metrics.

    Fewer than two samples is a defined boundary case: every field is zero.
    Speeds are averaged over samples that report one; samples without a speed are not zeros.
    All numeric fields are rounded to 2 decimals.
    """
    if samples is None or len(samples) < 2:
        return RouteMetrics()

    total_distance = float(_segment_distances_m(samples).sum())

    # The first sample's speed counts too: every sample that reports a speed is used.
    speeds = [s.speed for s in samples if s.speed is not None]
    average_speed = float(np.mean(speeds)) if speeds else 0.0
    max_speed = max([0.0, *speeds])

    gain, loss = _elevation_changes(samples)

    return RouteMetrics(
        total_distance=round(total_distance, 2),
        average_speed=round(average_speed, 2),
        max_speed=round(max_speed, 2),
        elevation_gain=round(gain, 2),
        elevation_loss=round(loss, 2),
        total_points=len(samples),
    )
