# -*- coding: utf-8 -*-
"""Running workout statistics kept on the profile."""

from __future__ import annotations

from typing import Optional

from .models import Profile

DEFAULT_COMPLETION_CALORIES = 200.0
DEFAULT_COMPLETION_DURATION = 60


def record_workout_completion(
    profile: Profile,
    *,
    calories_estimate: Optional[float],
    duration_min: Optional[int],
) -> Profile:
    stats = profile.stats
    done = stats.total_workouts
    calories = calories_estimate if calories_estimate is not None else DEFAULT_COMPLETION_CALORIES
    duration = duration_min if duration_min is not None else DEFAULT_COMPLETION_DURATION

    stats.total_calories_burned += calories
    # Integer running mean.
    stats.average_workout_duration = (stats.average_workout_duration * done + duration) // (done + 1)
    stats.total_workouts = done + 1
    stats.current_streak += 1
    stats.longest_streak = max(stats.longest_streak, stats.current_streak)
    return profile
