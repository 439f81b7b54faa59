# -*- coding: utf-8 -*-

from __future__ import annotations

import unittest
from datetime import date

from pulsefit.physiology import calculator
from pulsefit.physiology.calculator import WorkoutType
from pulsefit.profiles.models import Profile, profile_metrics
from pulsefit.profiles.stats import record_workout_completion


class TestPhysiologicalCalculator(unittest.TestCase):
    def test_bmi(self) -> None:
        self.assertAlmostEqual(calculator.bmi(175, 70), 22.857, places=3)
        self.assertIsNone(calculator.bmi(None, 70))
        self.assertIsNone(calculator.bmi(175, None))
        self.assertIsNone(calculator.bmi(0, 70))

    def test_age_is_calendar_year_difference(self) -> None:
        # Birthday not reached yet this year still counts.
        self.assertEqual(calculator.age(date(1990, 12, 31), today=date(2024, 1, 1)), 34)
        self.assertIsNone(calculator.age(None, today=date(2024, 1, 1)))

    def test_bmr_male_female(self) -> None:
        self.assertEqual(calculator.bmr(70, 175, 30, "male"), 1648.75)
        self.assertEqual(calculator.bmr(70, 175, 30, "female"), 1482.75)

    def test_bmr_undefined_for_other_sex_or_missing_inputs(self) -> None:
        self.assertIsNone(calculator.bmr(70, 175, 30, "other"))
        self.assertIsNone(calculator.bmr(70, 175, 30, None))
        self.assertIsNone(calculator.bmr(None, 175, 30, "male"))
        self.assertIsNone(calculator.bmr(70, 175, None, "male"))

    def test_tdee_multipliers(self) -> None:
        self.assertAlmostEqual(calculator.tdee(1000, "sedentary"), 1200)
        self.assertAlmostEqual(calculator.tdee(1000, "low"), 1375)
        self.assertAlmostEqual(calculator.tdee(1000, "moderate"), 1550)
        self.assertAlmostEqual(calculator.tdee(1000, "high"), 1725)
        self.assertAlmostEqual(calculator.tdee(1000, "very_high"), 1900)

    def test_tdee_unrecognized_tier_uses_sedentary_multiplier(self) -> None:
        self.assertAlmostEqual(calculator.tdee(1000, "couch_potato"), 1200)
        self.assertIsNone(calculator.tdee(None, "high"))

    def test_workout_calories(self) -> None:
        # strength: 6 METs × 80 kg × 1 h
        self.assertEqual(calculator.estimate_workout_calories(80, 60, "strength"), 480.0)
        # unknown tag falls back to 5 METs
        self.assertEqual(calculator.estimate_workout_calories(80, 30, "pilates"), 200.0)
        self.assertEqual(calculator.estimate_workout_calories(None, 30, "hiit"), 200.0)
        self.assertIs(WorkoutType.from_tag("HIIT"), WorkoutType.HIIT)


class TestProfileMetrics(unittest.TestCase):
    def test_profile_metrics_rounding(self) -> None:
        profile = Profile(
            height_cm=175,
            weight_kg=70,
            date_of_birth=date(1994, 6, 1),
            sex="male",
            activity_level="moderate",
        )
        metrics = profile_metrics(profile, today=date(2024, 3, 1))
        self.assertEqual(metrics.age, 30)
        self.assertEqual(metrics.bmi, 22.9)
        self.assertEqual(metrics.bmr, 1648.75)
        self.assertEqual(metrics.tdee, round(1648.75 * 1.55, 2))

    def test_profile_metrics_absent_inputs(self) -> None:
        metrics = profile_metrics(Profile(height_cm=175), today=date(2024, 3, 1))
        self.assertIsNone(metrics.bmi)
        self.assertIsNone(metrics.bmr)
        self.assertIsNone(metrics.tdee)

    def test_workout_completion_updates_stats(self) -> None:
        profile = Profile()
        record_workout_completion(profile, calories_estimate=300.0, duration_min=45)
        record_workout_completion(profile, calories_estimate=None, duration_min=None)
        stats = profile.stats
        self.assertEqual(stats.total_workouts, 2)
        self.assertEqual(stats.total_calories_burned, 500.0)
        # (45 * 1 + 60) // 2
        self.assertEqual(stats.average_workout_duration, 52)
        self.assertEqual(stats.current_streak, 2)
        self.assertEqual(stats.longest_streak, 2)


if __name__ == "__main__":
    unittest.main()
