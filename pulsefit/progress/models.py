# -*- coding: utf-8 -*-
"""Progress — Pydantic models."""

from __future__ import annotations

from datetime import date
from typing import List, Optional

from pydantic import BaseModel, Field


class WorkoutAggregate(BaseModel):
    total_sessions: int = 0
    weekly_average: int = Field(0, description="total_sessions // 4")
    average_duration: Optional[float] = Field(None, description="minutes; None when no session carries a duration")
    total_calories_burned: float = 0.0


class NutritionAggregate(BaseModel):
    entries_count: int = 0
    average_calories: Optional[float] = None
    average_protein: Optional[float] = None
    average_carbs: Optional[float] = None
    average_fat: Optional[float] = None


class Trends(BaseModel):
    """A label is omitted (None) when its series has fewer than 14 records in the window."""
    workout_frequency: Optional[str] = Field(None, description="increasing | decreasing | stable")
    nutrition_consistency: Optional[str] = Field(None, description="improving | declining | stable")


class WeightLossProgress(BaseModel):
    total_calories_burned: float
    average_daily_calories: Optional[float] = None
    estimated_weekly_weight_change: Optional[float] = Field(None, description="lb per week")


class MuscleGainProgress(BaseModel):
    strength_sessions_count: int
    recommended_weekly_strength_sessions: int = 3
    on_track: bool


class EnduranceProgress(BaseModel):
    cardio_sessions_count: int
    endurance_improvement: Optional[str] = Field(None, description="improving | stable")
    duration_improvement: Optional[int] = Field(None, description="minutes, latest minus first")


class StrengthProgress(BaseModel):
    strength_sessions_count: int
    progress_trend: str = Field(..., description="good | needs_improvement")


class GoalProgress(BaseModel):
    weight_loss: Optional[WeightLossProgress] = None
    muscle_gain: Optional[MuscleGainProgress] = None
    endurance: Optional[EnduranceProgress] = None
    strength: Optional[StrengthProgress] = None


class GoalAdjustments(BaseModel):
    workout_frequency: Optional[str] = None
    weight_goal: Optional[str] = None


class DailyCalories(BaseModel):
    date: date
    calories: Optional[float] = None
    rolling_mean_7d: Optional[float] = None


class ProgressReport(BaseModel):
    window_days: int
    workouts: WorkoutAggregate
    nutrition: NutritionAggregate
    trends: Trends
    goal_progress: GoalProgress
    goal_adjustments: GoalAdjustments
    rolling_calories: List[DailyCalories] = Field(default_factory=list)


class CoachRecommendations(BaseModel):
    workout_recommendations: List[str]
    nutrition_recommendations: List[str]
    motivational_message: str
    goal_adjustments: GoalAdjustments


class ChatRequest(BaseModel):
    message: str = Field(..., min_length=1, max_length=2000)


class ChatReply(BaseModel):
    reply: str
