# -*- coding: utf-8 -*-
"""Tracking — Pydantic models."""

from __future__ import annotations

from datetime import datetime
from typing import Optional

from pydantic import BaseModel

from ..routes import RouteMetrics
from ..workouts.models import WorkoutSession


class ActiveTracking(BaseModel):
    user_id: str
    session_id: str
    started_at: datetime


class TrackingStatus(BaseModel):
    active: bool
    session_id: Optional[str] = None
    started_at: Optional[datetime] = None


class PointAck(BaseModel):
    session_id: str
    accepted: bool
    total_points: int


class TrackingResult(BaseModel):
    session: WorkoutSession
    metrics: RouteMetrics
