# -*- coding: utf-8 -*-
"""Workout plan eligibility and scoring."""

from __future__ import annotations

from typing import Iterable, List, Optional

from ..profiles.models import Profile
from ..workouts.models import WorkoutPlan
from .ranking import Ranked, rank

MAX_DURATION_GAP_MIN = 30


def is_workout_suitable(plan: WorkoutPlan, profile: Profile) -> bool:
    if profile.experience == "beginner" and plan.difficulty == "advanced":
        return False
    if profile.workout_duration is not None and plan.duration is not None:
        if abs(profile.workout_duration - plan.duration) > MAX_DURATION_GAP_MIN:
            return False
    return True


def _matching_goal_count(plan: WorkoutPlan, profile: Profile) -> int:
    tags = [t.lower() for t in plan.tags if t]
    return sum(
        1 for goal in profile.fitness_goals
        if goal and any(goal.lower() in tag for tag in tags)
    )


def workout_score(plan: WorkoutPlan, profile: Profile) -> float:
    score = plan.ratings.average * 20
    score += min(plan.completed_count / 10.0, 20)
    if profile.experience is not None and profile.experience == plan.difficulty:
        score += 15
    if profile.workout_duration is not None and plan.duration is not None:
        gap = abs(profile.workout_duration - plan.duration)
        score += max(0.0, 10 - gap / 10.0)
    score += 5 * _matching_goal_count(plan, profile)
    return score


def recommend_workouts(
    plans: Iterable[WorkoutPlan],
    profile: Profile,
    limit: Optional[int] = None,
) -> List[Ranked[WorkoutPlan]]:
    return rank(
        plans,
        eligible=lambda p: is_workout_suitable(p, profile),
        score=lambda p: workout_score(p, profile),
        limit=limit,
    )


def public_workouts(plans: Iterable[WorkoutPlan], limit: Optional[int] = None) -> List[WorkoutPlan]:
    """Best rated first, then most completed."""
    ordered = sorted(
        plans,
        key=lambda p: (p.ratings.average, p.completed_count),
        reverse=True,
    )
    if limit is not None:
        ordered = ordered[: max(limit, 0)]
    return ordered
