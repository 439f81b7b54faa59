# -*- coding: utf-8 -*-

from __future__ import annotations

import math
import unittest
from datetime import datetime, timedelta, timezone

from pulsefit.routes import LocationSample, compute_route_metrics, distance_m

T0 = datetime(2024, 5, 1, 7, 0, tzinfo=timezone.utc)


def _sample(lat: float, lon: float, i: int = 0, **extra) -> LocationSample:
    return LocationSample(latitude=lat, longitude=lon, timestamp=T0 + timedelta(seconds=10 * i), **extra)


class TestDistance(unittest.TestCase):
    def test_symmetric(self) -> None:
        a = _sample(52.5200, 13.4050)
        b = _sample(48.8566, 2.3522)
        self.assertAlmostEqual(distance_m(a, b), distance_m(b, a), places=6)

    def test_one_degree_of_latitude(self) -> None:
        a = _sample(0.0, 0.0)
        b = _sample(1.0, 0.0)
        # 6371 km × π / 180
        self.assertAlmostEqual(distance_m(a, b), 111194.93, places=1)


class TestRouteMetrics(unittest.TestCase):
    def test_degenerate_routes_are_zero(self) -> None:
        for samples in ([], [_sample(1.0, 1.0, speed=3.0, altitude=10.0)]):
            metrics = compute_route_metrics(samples)
            self.assertEqual(metrics.total_distance, 0)
            self.assertEqual(metrics.average_speed, 0)
            self.assertEqual(metrics.max_speed, 0)
            self.assertEqual(metrics.elevation_gain, 0)
            self.assertEqual(metrics.elevation_loss, 0)
            self.assertEqual(metrics.total_points, 0)

    def test_identical_points_have_zero_distance(self) -> None:
        metrics = compute_route_metrics([_sample(10.0, 10.0, 0), _sample(10.0, 10.0, 1)])
        self.assertEqual(metrics.total_distance, 0)
        self.assertEqual(metrics.total_points, 2)

    def test_distance_sums_adjacent_segments_only(self) -> None:
        # Out and back: adjacent sum is twice the leg, not the 0 m start-to-end gap.
        route = [_sample(0.0, 0.0, 0), _sample(0.001, 0.0, 1), _sample(0.0, 0.0, 2)]
        leg = distance_m(route[0], route[1])
        metrics = compute_route_metrics(route)
        self.assertAlmostEqual(metrics.total_distance, round(2 * leg, 2), places=2)

    def test_speeds_skip_missing_values(self) -> None:
        route = [
            _sample(0.0, 0.0, 0, speed=2.0),
            _sample(0.0001, 0.0, 1),
            _sample(0.0002, 0.0, 2, speed=4.0),
            _sample(0.0003, 0.0, 3, speed=3.333),
        ]
        metrics = compute_route_metrics(route)
        self.assertEqual(metrics.average_speed, round((2.0 + 4.0 + 3.333) / 3, 2))
        self.assertEqual(metrics.max_speed, 4.0)

    def test_elevation_skips_pairs_missing_altitude(self) -> None:
        route = [
            _sample(0.0, 0.0, 0, altitude=100.0),
            _sample(0.0001, 0.0, 1, altitude=105.5),
            _sample(0.0002, 0.0, 2),
            _sample(0.0003, 0.0, 3, altitude=90.0),
            _sample(0.0004, 0.0, 4, altitude=87.25),
        ]
        metrics = compute_route_metrics(route)
        self.assertEqual(metrics.elevation_gain, 5.5)
        self.assertEqual(metrics.elevation_loss, 2.75)
        self.assertEqual(metrics.total_points, 5)

    def test_no_speeds_gives_zero(self) -> None:
        metrics = compute_route_metrics([_sample(0.0, 0.0, 0), _sample(0.001, 0.001, 1)])
        self.assertEqual(metrics.average_speed, 0)
        self.assertEqual(metrics.max_speed, 0)
        self.assertGreater(metrics.total_distance, 0)

    def test_first_sample_speed_is_counted(self) -> None:
        metrics = compute_route_metrics([_sample(0.0, 0.0, 0, speed=10.0), _sample(0.001, 0.0, 1, speed=2.0)])
        self.assertEqual(metrics.average_speed, 6.0)
        self.assertEqual(metrics.max_speed, 10.0)

    def test_flat_or_unknown_altitude_has_positive_zero_loss(self) -> None:
        for route in (
            [_sample(0.0, 0.0, 0), _sample(0.001, 0.0, 1)],
            [_sample(0.0, 0.0, 0, altitude=5.0), _sample(0.001, 0.0, 1, altitude=9.0)],
        ):
            metrics = compute_route_metrics(route)
            self.assertEqual(math.copysign(1.0, metrics.elevation_loss), 1.0)
            self.assertNotIn("-0.0", metrics.model_dump_json())


if __name__ == "__main__":
    unittest.main()
