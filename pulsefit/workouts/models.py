# -*- coding: utf-8 -*-
"""Workouts — Pydantic models."""

from __future__ import annotations

from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, Field

from ..ratings import RatingAggregate
from ..records import RecordMeta
from ..routes import LocationSample

SESSION_CREATED = "CREATED"
SESSION_IN_PROGRESS = "IN_PROGRESS"
SESSION_GPS_TRACKING = "GPS_TRACKING"
SESSION_COMPLETED = "COMPLETED"


class SessionFields(BaseModel):
    workout_plan_id: Optional[str] = None
    session_type: Optional[str] = Field(None, description="hiit | strength | cardio | yoga | ...")
    session_name: Optional[str] = Field(None, max_length=200)
    duration: Optional[int] = Field(None, ge=0, description="minutes")
    total_calories_burned: Optional[float] = Field(None, ge=0)
    average_heart_rate: Optional[float] = Field(None, gt=0)
    max_heart_rate: Optional[float] = Field(None, gt=0)
    mood: Optional[str] = None
    perceived_exertion: Optional[int] = Field(None, ge=1, le=10)
    notes: Optional[str] = None
    completed: bool = False


class WorkoutSession(SessionFields):
    meta: RecordMeta = Field(default_factory=RecordMeta)
    status: str = SESSION_CREATED
    start_time: Optional[datetime] = None
    end_time: Optional[datetime] = None
    gps_route: List[LocationSample] = Field(default_factory=list)

    @property
    def created_at(self) -> datetime:
        return self.meta.created_at


class PlanExercise(BaseModel):
    name: str = Field(..., min_length=1)
    sets: Optional[int] = Field(None, ge=1)
    reps: Optional[int] = Field(None, ge=1)
    duration_seconds: Optional[int] = Field(None, ge=1)
    notes: Optional[str] = None


class PlanFields(BaseModel):
    name: str = Field(..., min_length=1, max_length=200)
    description: Optional[str] = None
    workout_type: Optional[str] = None
    difficulty: Optional[str] = Field(None, description="beginner | intermediate | advanced")
    duration: Optional[int] = Field(None, ge=0, description="minutes")
    tags: List[str] = Field(default_factory=list)
    equipment: List[str] = Field(default_factory=list)
    exercises: List[PlanExercise] = Field(default_factory=list)
    calories_burned_estimate: Optional[float] = Field(None, ge=0)
    is_public: bool = True


class WorkoutPlan(PlanFields):
    meta: RecordMeta = Field(default_factory=RecordMeta)
    ratings: RatingAggregate = Field(default_factory=RatingAggregate)
    completed_count: int = Field(0, ge=0)
    ai_generated: bool = False


class RateRequest(BaseModel):
    rating: float


class RecommendedWorkout(BaseModel):
    plan: WorkoutPlan
    score: Optional[float] = None

