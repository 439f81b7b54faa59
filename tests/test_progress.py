# -*- coding: utf-8 -*-

from __future__ import annotations

import unittest
from datetime import date, datetime, timedelta, timezone
from typing import List, Optional

from pulsefit.nutrition.models import Macros, NutritionEntry
from pulsefit.profiles.models import Profile
from pulsefit.progress.analyzer import (
    analyze_progress,
    endurance_progress,
    goal_adjustments,
    muscle_gain_progress,
    nutrition_aggregate,
    weight_loss_progress,
    workout_aggregate,
)
from pulsefit.progress.smoothing import rolling_calories
from pulsefit.records import RecordMeta
from pulsefit.workouts.models import WorkoutSession

NOW = datetime(2024, 6, 30, 12, 0, tzinfo=timezone.utc)
TODAY = NOW.date()


def _session(days_ago: float, *, session_type: str = "cardio", duration: Optional[int] = 30,
             calories: Optional[float] = None) -> WorkoutSession:
    return WorkoutSession(
        meta=RecordMeta(created_at=NOW - timedelta(days=days_ago)),
        session_type=session_type,
        duration=duration,
        total_calories_burned=calories,
    )


def _entry(days_ago: int, calories: Optional[float] = 2000.0, protein: Optional[float] = 100.0) -> NutritionEntry:
    return NutritionEntry(
        date=TODAY - timedelta(days=days_ago),
        calories=calories,
        macros=Macros(protein=protein, carbs=250.0, fat=70.0),
    )


def _athlete(**fields) -> Profile:
    base = dict(
        height_cm=175,
        weight_kg=70,
        date_of_birth=date(1994, 1, 1),
        sex="male",
        activity_level="sedentary",
    )
    base.update(fields)
    return Profile(**base)


class TestAggregates(unittest.TestCase):
    def test_workout_aggregate(self) -> None:
        sessions = [_session(i, duration=d, calories=c) for i, (d, c) in enumerate(
            [(30, 200.0), (45, None), (None, 100.5), (60, 300.0), (20, None), (None, None), (40, 10.0)]
        )]
        agg = workout_aggregate(sessions)
        self.assertEqual(agg.total_sessions, 7)
        self.assertEqual(agg.weekly_average, 1)
        self.assertEqual(agg.average_duration, 39.0)
        self.assertEqual(agg.total_calories_burned, 610.5)

    def test_empty_aggregates_are_absent_not_zero(self) -> None:
        agg = workout_aggregate([])
        self.assertEqual(agg.total_sessions, 0)
        self.assertIsNone(agg.average_duration)
        nutrition = nutrition_aggregate([])
        self.assertIsNone(nutrition.average_calories)
        self.assertIsNone(nutrition.average_protein)

    def test_nutrition_mean_skips_missing_values(self) -> None:
        agg = nutrition_aggregate([_entry(1, 1800.0, 90.0), _entry(2, None, 120.0), _entry(3, 2100.0, None)])
        self.assertEqual(agg.entries_count, 3)
        self.assertEqual(agg.average_calories, 1950.0)
        self.assertEqual(agg.average_protein, 105.0)


class TestTrends(unittest.TestCase):
    def test_trend_omitted_below_threshold(self) -> None:
        sessions = [_session(1) for _ in range(13)]
        entries = [_entry(1) for _ in range(13)]
        report = analyze_progress(_athlete(), sessions, entries, now=NOW)
        self.assertIsNone(report.trends.workout_frequency)
        self.assertIsNone(report.trends.nutrition_consistency)

    def test_increasing_and_declining(self) -> None:
        sessions = [_session(2) for _ in range(10)] + [_session(20) for _ in range(4)]
        entries = [_entry(3) for _ in range(4)] + [_entry(20) for _ in range(10)]
        report = analyze_progress(_athlete(), sessions, entries, now=NOW)
        self.assertEqual(report.trends.workout_frequency, "increasing")
        self.assertEqual(report.trends.nutrition_consistency, "declining")

    def test_stable_when_halves_match(self) -> None:
        sessions = [_session(3) for _ in range(7)] + [_session(25) for _ in range(7)]
        report = analyze_progress(_athlete(), sessions, [], now=NOW)
        self.assertEqual(report.trends.workout_frequency, "stable")

    def test_records_outside_window_are_ignored(self) -> None:
        sessions = [_session(1), _session(31), _session(45)]
        entries = [_entry(0), _entry(30), _entry(60)]
        report = analyze_progress(_athlete(), sessions, entries, now=NOW)
        self.assertEqual(report.workouts.total_sessions, 1)
        self.assertEqual(report.nutrition.entries_count, 1)


class TestGoalProgress(unittest.TestCase):
    def test_weight_loss_projection(self) -> None:
        profile = _athlete(fitness_goals=["weight_loss"])
        sessions = [_session(1, calories=300.0), _session(2, calories=300.0)]
        entries = [_entry(1, 1700.0), _entry(2, 1900.0)]
        progress = weight_loss_progress(profile, sessions, entries, TODAY)
        # tdee = 1648.75 * 1.2 = 1978.5; deficit = 1978.5 - 1800 + 600 / 30
        self.assertEqual(progress.estimated_weekly_weight_change, round(198.5 * 7 / 3500, 2))
        self.assertEqual(progress.average_daily_calories, 1800.0)

    def test_weight_loss_uses_fallback_tdee(self) -> None:
        profile = Profile(fitness_goals=["weight_loss"])
        progress = weight_loss_progress(profile, [], [_entry(1, 1650.0)], TODAY)
        self.assertEqual(progress.estimated_weekly_weight_change, 0.7)

    def test_weight_loss_without_intake_is_absent(self) -> None:
        progress = weight_loss_progress(_athlete(), [], [], TODAY)
        self.assertIsNone(progress.estimated_weekly_weight_change)

    def test_muscle_gain_threshold(self) -> None:
        seven = [_session(i, session_type="Strength") for i in range(7)]
        self.assertFalse(muscle_gain_progress(seven).on_track)
        self.assertTrue(muscle_gain_progress(seven + [_session(8, session_type="strength")]).on_track)

    def test_endurance_compares_first_and_latest_cardio(self) -> None:
        sessions = [
            _session(1, duration=50),
            _session(10, session_type="strength", duration=90),
            _session(20, duration=30),
        ]
        progress = endurance_progress(sessions)
        self.assertEqual(progress.cardio_sessions_count, 2)
        self.assertEqual(progress.duration_improvement, 20)
        self.assertEqual(progress.endurance_improvement, "improving")

    def test_endurance_needs_two_sessions(self) -> None:
        progress = endurance_progress([_session(1)])
        self.assertIsNone(progress.endurance_improvement)
        self.assertIsNone(progress.duration_improvement)

    def test_only_listed_goals_are_reported(self) -> None:
        profile = _athlete(fitness_goals=["Strength"])
        report = analyze_progress(profile, [_session(1, session_type="strength")], [], now=NOW)
        self.assertIsNotNone(report.goal_progress.strength)
        self.assertEqual(report.goal_progress.strength.progress_trend, "needs_improvement")
        self.assertIsNone(report.goal_progress.weight_loss)
        self.assertIsNone(report.goal_progress.muscle_gain)

    def test_goal_adjustments(self) -> None:
        profile = _athlete(weight_kg=110, target_weight_kg=80)
        adjustments = goal_adjustments(profile, workout_aggregate([_session(1)] * 7))
        self.assertIsNotNone(adjustments.workout_frequency)
        self.assertIsNotNone(adjustments.weight_goal)
        calm = goal_adjustments(_athlete(target_weight_kg=65), workout_aggregate([_session(1)] * 8))
        self.assertIsNone(calm.workout_frequency)
        self.assertIsNone(calm.weight_goal)


class TestRollingCalories(unittest.TestCase):
    def test_one_row_per_day_with_rolling_mean(self) -> None:
        entries: List[NutritionEntry] = [_entry(0, 2000.0), _entry(0, 500.0), _entry(1, 1500.0), _entry(9, 1800.0)]
        rows = rolling_calories(entries, TODAY, 30)
        self.assertEqual(len(rows), 30)
        self.assertEqual(rows[-1].date, TODAY)
        self.assertEqual(rows[-1].calories, 2500.0)
        self.assertEqual(rows[-1].rolling_mean_7d, 2000.0)
        self.assertIsNone(rows[-3].calories)
        # Day -9 is alone in its 7-day window.
        self.assertEqual(rows[-10].rolling_mean_7d, 1800.0)
        self.assertIsNone(rows[0].rolling_mean_7d)


if __name__ == "__main__":
    unittest.main()
