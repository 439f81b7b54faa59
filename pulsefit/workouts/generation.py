# -*- coding: utf-8 -*-
"""Generated workout plans, with a goal-based template when text generation is unavailable."""

from __future__ import annotations

import logging
from typing import Dict, List, Optional, Tuple

from ..agent_service import generate_with_fallback
from ..physiology import WorkoutType, estimate_workout_calories
from ..profiles.models import Profile
from .models import PlanExercise, WorkoutPlan

logger = logging.getLogger(__name__)

DEFAULT_PLAN_DURATION = 45
MAX_DESCRIPTION_CHARS = 200

# Checked in order: the first keyword found in the generated text decides the type.
TYPE_KEYWORDS: Tuple[Tuple[WorkoutType, Tuple[str, ...]], ...] = (
    (WorkoutType.HIIT, ("hiit", "high intensity")),
    (WorkoutType.STRENGTH, ("strength", "weight")),
    (WorkoutType.CARDIO, ("cardio", "running")),
)

GOAL_TYPES: Dict[str, WorkoutType] = {
    "weight_loss": WorkoutType.HIIT,
    "muscle_gain": WorkoutType.STRENGTH,
    "strength": WorkoutType.STRENGTH,
    "endurance": WorkoutType.CARDIO,
}

DEFAULT_EXERCISES: Dict[WorkoutType, List[PlanExercise]] = {
    WorkoutType.STRENGTH: [
        PlanExercise(name="Push-ups", sets=3, reps=12, notes="Focus on proper form"),
        PlanExercise(name="Squats", sets=3, reps=15, notes="Keep knees aligned with toes"),
        PlanExercise(name="Plank", sets=3, duration_seconds=30, notes="Hold for specified duration"),
        PlanExercise(name="Lunges", sets=3, reps=10, notes="Alternate legs"),
    ],
    WorkoutType.CARDIO: [
        PlanExercise(name="Jumping Jacks", sets=3, reps=20, notes="Full body movement"),
        PlanExercise(name="High Knees", sets=3, duration_seconds=30, notes="Lift knees to chest level"),
        PlanExercise(name="Burpees", sets=3, reps=8, notes="Full body explosive movement"),
    ],
    WorkoutType.HIIT: [
        PlanExercise(name="Mountain Climbers", sets=4, duration_seconds=20, notes="High intensity"),
        PlanExercise(name="Jump Squats", sets=4, reps=12, notes="Explosive movement"),
        PlanExercise(name="Push-up to T", sets=4, reps=10, notes="Add rotation at top"),
    ],
    WorkoutType.GENERAL: [
        PlanExercise(name="Bodyweight Squats", sets=3, reps=15, notes="Basic movement pattern"),
        PlanExercise(name="Modified Push-ups", sets=3, reps=10, notes="Knee or wall modification if needed"),
        PlanExercise(name="Seated Leg Extensions", sets=3, reps=12, notes="Chair-based exercise"),
    ],
}


def infer_workout_type(text: str) -> WorkoutType:
    lowered = (text or "").lower()
    for workout_type, keywords in TYPE_KEYWORDS:
        if any(k in lowered for k in keywords):
            return workout_type
    return WorkoutType.GENERAL


def goal_workout_type(profile: Profile) -> WorkoutType:
    for goal in profile.fitness_goals:
        found = GOAL_TYPES.get((goal or "").lower())
        if found is not None:
            return found
    return WorkoutType.GENERAL


def default_exercises(workout_type: WorkoutType) -> List[PlanExercise]:
    return [e.model_copy() for e in DEFAULT_EXERCISES.get(workout_type, DEFAULT_EXERCISES[WorkoutType.GENERAL])]


def _workout_prompt(profile: Profile) -> str:
    return (
        "Create a personalized workout plan for:\n"
        f"- Fitness Goals: {', '.join(profile.fitness_goals) or 'general fitness'}\n"
        f"- Experience Level: {profile.experience or 'unknown'}\n"
        f"- Activity Level: {profile.activity_level or 'unknown'}\n"
        f"- Preferred Duration: {profile.workout_duration or DEFAULT_PLAN_DURATION} minutes\n"
        f"- Workout Frequency: {profile.workout_frequency or 'unknown'} times per week\n"
        f"- Age: {profile.age() or 'unknown'}, Sex: {profile.sex or 'unknown'}\n\n"
        "Provide a workout name and description, 5-8 exercises with sets, reps and rest, "
        "target muscle groups, equipment needed (bodyweight if none) and safety tips."
    )


def _describe(text: Optional[str], workout_type: WorkoutType, duration: int) -> str:
    if not text:
        return f"A {duration}-minute {workout_type.value} session matched to your goals."
    if len(text) > MAX_DESCRIPTION_CHARS:
        return text[:MAX_DESCRIPTION_CHARS] + "..."
    return text


def generate_workout_plan(profile: Profile) -> WorkoutPlan:
    """
    A private plan sized to the profile: duration from the preferred session length,
    difficulty from experience, calories from METs. Without generated text the type comes
    from the first recognized fitness goal.
    """
    text = generate_with_fallback(_workout_prompt(profile))
    if text:
        workout_type = infer_workout_type(text)
    else:
        workout_type = goal_workout_type(profile)
        logger.info("Using template %s workout plan", workout_type.value)
    duration = profile.workout_duration or DEFAULT_PLAN_DURATION
    return WorkoutPlan(
        name="Personalized Workout Plan",
        description=_describe(text, workout_type, duration),
        workout_type=workout_type.value,
        difficulty=profile.experience,
        duration=duration,
        tags=[g for g in profile.fitness_goals if g],
        exercises=default_exercises(workout_type),
        calories_burned_estimate=estimate_workout_calories(profile.weight_kg, duration, workout_type.value),
        is_public=False,
        ai_generated=bool(text),
    )
