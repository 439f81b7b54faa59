# -*- coding: utf-8 -*-
"""Profiles — Pydantic models."""

from __future__ import annotations

from datetime import date
from typing import List, Optional

from pydantic import BaseModel, Field

from ..physiology import calculator
from ..records import RecordMeta


class WorkoutStats(BaseModel):
    total_workouts: int = Field(0, ge=0)
    total_calories_burned: float = Field(0.0, ge=0)
    average_workout_duration: int = Field(0, ge=0)
    current_streak: int = Field(0, ge=0)
    longest_streak: int = Field(0, ge=0)


class ProfileFields(BaseModel):
    email: Optional[str] = Field(None, max_length=254)
    display_name: Optional[str] = Field(None, max_length=128)
    height_cm: Optional[float] = Field(None, gt=0)
    weight_kg: Optional[float] = Field(None, gt=0)
    target_weight_kg: Optional[float] = Field(None, gt=0)
    date_of_birth: Optional[date] = None
    sex: Optional[str] = Field(None, description="male | female | other")
    activity_level: Optional[str] = Field(None, description="sedentary | low | moderate | high | very_high")
    experience: Optional[str] = Field(None, description="beginner | intermediate | advanced")
    fitness_goals: List[str] = Field(default_factory=list)
    dietary_restrictions: List[str] = Field(default_factory=list)
    allergies: List[str] = Field(default_factory=list)
    cuisine_preferences: List[str] = Field(default_factory=list)
    workout_duration: Optional[int] = Field(None, ge=0, description="Preferred session length (minutes)")
    workout_frequency: Optional[int] = Field(None, ge=0, description="Preferred sessions per week")


class Profile(ProfileFields):
    meta: RecordMeta = Field(default_factory=RecordMeta)
    stats: WorkoutStats = Field(default_factory=WorkoutStats)

    def bmi(self) -> Optional[float]:
        return calculator.bmi(self.height_cm, self.weight_kg)

    def age(self, today: Optional[date] = None) -> Optional[int]:
        return calculator.age(self.date_of_birth, today)

    def bmr(self, today: Optional[date] = None) -> Optional[float]:
        return calculator.bmr(self.weight_kg, self.height_cm, self.age(today), self.sex)

    def tdee(self, today: Optional[date] = None) -> Optional[float]:
        return calculator.tdee(self.bmr(today), self.activity_level)


class ProfileMetrics(BaseModel):
    bmi: Optional[float] = None
    age: Optional[int] = None
    bmr: Optional[float] = None
    tdee: Optional[float] = None


def profile_metrics(profile: Profile, today: Optional[date] = None) -> ProfileMetrics:
    value = profile.bmi()
    bmr_kcal = profile.bmr(today)
    tdee_kcal = profile.tdee(today)
    return ProfileMetrics(
        bmi=round(value, 1) if value is not None else None,
        age=profile.age(today),
        bmr=round(bmr_kcal, 2) if bmr_kcal is not None else None,
        tdee=round(tdee_kcal, 2) if tdee_kcal is not None else None,
    )
