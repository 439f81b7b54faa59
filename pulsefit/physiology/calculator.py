# -*- coding: utf-8 -*-
"""
Physiological calculator

Pure functions over a profile snapshot. Missing inputs yield ``None`` ("cannot compute"),
never zero and never an exception.
"""

from __future__ import annotations

from datetime import date
from enum import Enum
from typing import Optional


class ActivityLevel(Enum):
    """活动水平 (ordered tiers)"""
    SEDENTARY = "sedentary"
    LOW = "low"
    MODERATE = "moderate"
    HIGH = "high"
    VERY_HIGH = "very_high"


ACTIVITY_MULTIPLIERS = {
    ActivityLevel.SEDENTARY: 1.2,
    ActivityLevel.LOW: 1.375,
    ActivityLevel.MODERATE: 1.55,
    ActivityLevel.HIGH: 1.725,
    ActivityLevel.VERY_HIGH: 1.9,
}
DEFAULT_ACTIVITY_MULTIPLIER = 1.2


class WorkoutType(Enum):
    """Workout type tags with their MET values; GENERAL covers unrecognized tags."""
    HIIT = "hiit"
    STRENGTH = "strength"
    CARDIO = "cardio"
    YOGA = "yoga"
    GENERAL = "general"

    @classmethod
    def from_tag(cls, tag: Optional[str]) -> "WorkoutType":
        try:
            return cls((tag or "").strip().lower())
        except ValueError:
            return cls.GENERAL

    @property
    def mets(self) -> float:
        return _METS[self]


_METS = {
    WorkoutType.HIIT: 8.0,
    WorkoutType.STRENGTH: 6.0,
    WorkoutType.CARDIO: 7.0,
    WorkoutType.YOGA: 3.0,
    WorkoutType.GENERAL: 5.0,
}

DEFAULT_WORKOUT_CALORIES = 200.0


def bmi(height_cm: Optional[float], weight_kg: Optional[float]) -> Optional[float]:
    """
    计算体质指数 (BMI)

    Args:
        height_cm: 身高 (cm)
        weight_kg: 体重 (kg)

    Returns:
        weight / (height/100)^2, or None when either input is missing or non-positive.
    """
    if height_cm is None or weight_kg is None or height_cm <= 0 or weight_kg <= 0:
        return None
    height_m = height_cm / 100.0
    return weight_kg / (height_m * height_m)


def age(date_of_birth: Optional[date], today: Optional[date] = None) -> Optional[int]:
    """Calendar-year difference; birthdays later in the year are not taken into account."""
    if date_of_birth is None:
        return None
    today = today or date.today()
    return today.year - date_of_birth.year


def bmr(
    weight_kg: Optional[float],
    height_cm: Optional[float],
    age_years: Optional[int],
    sex: Optional[str],
) -> Optional[float]:
    """
    Mifflin–St Jeor 公式计算 BMR

    male:   10·w + 6.25·h − 5·a + 5
    female: 10·w + 6.25·h − 5·a − 161

    Any other sex value (or a missing input) gives None.
    """
    if weight_kg is None or height_cm is None or age_years is None or not sex:
        return None
    base = 10 * weight_kg + 6.25 * height_cm - 5 * age_years
    key = sex.strip().lower()
    if key == "male":
        return base + 5
    if key == "female":
        return base - 161
    return None


def activity_multiplier(activity_level: Optional[str]) -> float:
    try:
        level = ActivityLevel((activity_level or "").strip().lower())
    except ValueError:
        return DEFAULT_ACTIVITY_MULTIPLIER
    return ACTIVITY_MULTIPLIERS[level]


def tdee(bmr_kcal: Optional[float], activity_level: Optional[str]) -> Optional[float]:
    if bmr_kcal is None or activity_level is None:
        return None
    return bmr_kcal * activity_multiplier(activity_level)


def estimate_workout_calories(
    weight_kg: Optional[float],
    duration_min: Optional[float],
    workout_type: Optional[str],
) -> float:
    """MET × weight × hours, rounded; 200 kcal when weight or duration is unknown."""
    if weight_kg is None or duration_min is None:
        return DEFAULT_WORKOUT_CALORIES
    hours = duration_min / 60.0
    return float(round(WorkoutType.from_tag(workout_type).mets * weight_kg * hours))
