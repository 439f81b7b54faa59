# -*- coding: utf-8 -*-

from __future__ import annotations

import unittest

from pulsefit.errors import InvalidRatingError, ValidationError
from pulsefit.ratings import RatingAggregate


class TestRatingAggregate(unittest.TestCase):
    def test_single_rating(self) -> None:
        agg = RatingAggregate().add_rating(3.5)
        self.assertEqual(agg.average, 3.5)
        self.assertEqual(agg.count, 1)

    def test_running_mean(self) -> None:
        agg = RatingAggregate()
        agg.add_rating(4)
        agg.add_rating(5)
        self.assertEqual(agg.average, 4.5)
        self.assertEqual(agg.count, 2)
        self.assertEqual(agg.distribution[4], 1)
        self.assertEqual(agg.distribution[5], 1)

    def test_bounds_are_inclusive(self) -> None:
        agg = RatingAggregate()
        agg.add_rating(1.0)
        agg.add_rating(5.0)
        self.assertEqual(agg.count, 2)
        self.assertEqual(agg.distribution[1], 1)

    def test_out_of_range_leaves_aggregate_unchanged(self) -> None:
        agg = RatingAggregate().add_rating(4.0)
        before = agg.model_dump()
        for bad in (0.99, 5.01, -1.0, 10.0):
            with self.assertRaises(InvalidRatingError):
                agg.add_rating(bad)
        self.assertEqual(agg.model_dump(), before)

    def test_invalid_rating_is_a_validation_error(self) -> None:
        with self.assertRaises(ValidationError) as ctx:
            RatingAggregate().add_rating(6)
        self.assertEqual(ctx.exception.status_code, 400)

    def test_half_star_rounds_up_in_distribution(self) -> None:
        agg = RatingAggregate().add_rating(2.5)
        self.assertEqual(agg.distribution[3], 1)
        self.assertEqual(agg.distribution[2], 0)

    def test_round_trips_through_json(self) -> None:
        agg = RatingAggregate().add_rating(4.0)
        again = RatingAggregate.model_validate_json(agg.model_dump_json())
        self.assertEqual(again.distribution[4], 1)


if __name__ == "__main__":
    unittest.main()
