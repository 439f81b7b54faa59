# -*- coding: utf-8 -*-
"""Workouts — API endpoints (sessions, plans, GPS tracking)."""

from __future__ import annotations

from typing import List

from fastapi import APIRouter, Depends, Query

from ..deps import get_current_user_id
from ..profiles.storage import get_profile, require_profile
from ..recommend import public_workouts, recommend_workouts
from ..routes import LocationSample
from ..tracking import add_point, end_tracking, start_tracking, tracking_status
from ..tracking.models import ActiveTracking, PointAck, TrackingResult, TrackingStatus
from .generation import generate_workout_plan
from .models import (
    PlanFields,
    RateRequest,
    RecommendedWorkout,
    SessionFields,
    WorkoutPlan,
    WorkoutSession,
)
from .storage import (
    complete_plan,
    create_plan,
    create_session,
    gps_sessions,
    list_public_plans,
    list_sessions,
    list_user_plans,
    rate_plan,
    save_generated_plan,
)

router = APIRouter(prefix="/api/workouts", tags=["Workouts"])


# ---------- Sessions ----------

@router.post("/sessions", response_model=WorkoutSession, summary="Log a workout session")
def post_session(request: SessionFields, user_id: str = Depends(get_current_user_id)):
    return create_session(user_id, request)


@router.get("/sessions", response_model=List[WorkoutSession], summary="Workout sessions, newest first")
def get_sessions(user_id: str = Depends(get_current_user_id)):
    return list_sessions(user_id)


@router.get("/sessions/gps", response_model=List[WorkoutSession], summary="Sessions with a recorded route")
def get_gps_sessions(
    limit: int = Query(default=20, ge=1, le=200),
    user_id: str = Depends(get_current_user_id),
):
    return gps_sessions(user_id, limit=limit)


# ---------- GPS tracking ----------

@router.post(
    "/sessions/{session_id}/tracking/start",
    response_model=ActiveTracking,
    summary="Start live GPS tracking for a session",
)
def post_tracking_start(session_id: str, user_id: str = Depends(get_current_user_id)):
    return start_tracking(user_id, session_id)


@router.post(
    "/sessions/{session_id}/tracking/points",
    response_model=PointAck,
    summary="Append one location sample",
)
def post_tracking_point(
    session_id: str,
    sample: LocationSample,
    user_id: str = Depends(get_current_user_id),
):
    return add_point(user_id, session_id, sample)


@router.post(
    "/sessions/{session_id}/tracking/end",
    response_model=TrackingResult,
    summary="End tracking and compute route metrics",
)
def post_tracking_end(session_id: str, user_id: str = Depends(get_current_user_id)):
    return end_tracking(user_id, session_id)


@router.get("/tracking/status", response_model=TrackingStatus, summary="Active tracking session, if any")
def get_tracking_status(user_id: str = Depends(get_current_user_id)):
    return tracking_status(user_id)


# ---------- Plans ----------

@router.post("/plans", response_model=WorkoutPlan, summary="Create a workout plan")
def post_plan(request: PlanFields, user_id: str = Depends(get_current_user_id)):
    return create_plan(user_id, request)


@router.get("/plans", response_model=List[WorkoutPlan], summary="Current user's plans, newest first")
def get_plans(user_id: str = Depends(get_current_user_id)):
    return list_user_plans(user_id)


@router.post("/plans/generate", response_model=WorkoutPlan, summary="Generate and save a personal plan")
def post_generate_plan(user_id: str = Depends(get_current_user_id)):
    return save_generated_plan(user_id, generate_workout_plan(require_profile(user_id)))


@router.get(
    "/plans/recommendations",
    response_model=List[RecommendedWorkout],
    summary="Public plans ranked for the current user",
)
def get_recommendations(
    limit: int = Query(default=10, ge=1, le=100),
    user_id: str = Depends(get_current_user_id),
):
    candidates = list_public_plans()
    profile = get_profile(user_id)
    if profile is None:
        return [RecommendedWorkout(plan=p) for p in public_workouts(candidates, limit=limit)]
    return [
        RecommendedWorkout(plan=r.item, score=round(r.score, 2))
        for r in recommend_workouts(candidates, profile, limit=limit)
    ]


@router.post("/plans/{plan_id}/rate", response_model=WorkoutPlan, summary="Rate a plan (1.0 - 5.0)")
def post_rate(plan_id: str, request: RateRequest, user_id: str = Depends(get_current_user_id)):
    return rate_plan(plan_id, request.rating)


@router.post("/plans/{plan_id}/complete", response_model=WorkoutPlan, summary="Record a plan completion")
def post_complete(plan_id: str, user_id: str = Depends(get_current_user_id)):
    return complete_plan(user_id, plan_id)
