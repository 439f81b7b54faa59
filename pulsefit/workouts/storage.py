# -*- coding: utf-8 -*-
"""Workouts — record storage helpers."""

from __future__ import annotations

import logging
from typing import List, Optional

from ..physiology import estimate_workout_calories
from ..profiles.stats import record_workout_completion
from ..profiles.storage import get_profile, profiles
from ..records import RecordMeta, RecordStore
from .models import SESSION_COMPLETED, PlanFields, SessionFields, WorkoutPlan, WorkoutSession

logger = logging.getLogger(__name__)

sessions: RecordStore[WorkoutSession] = RecordStore("workout_session", WorkoutSession)
plans: RecordStore[WorkoutPlan] = RecordStore("workout_plan", WorkoutPlan)


def create_session(user_id: str, fields: SessionFields) -> WorkoutSession:
    session = WorkoutSession(meta=RecordMeta(owner_id=user_id), **fields.model_dump())
    if session.completed:
        session.status = SESSION_COMPLETED
    saved = sessions.persist(session)
    logger.info("Workout session created with ID: %s", saved.meta.id)
    return saved


def list_sessions(user_id: str) -> List[WorkoutSession]:
    """Newest first."""
    return list(reversed(sessions.fetch_records(user_id)))


def create_plan(user_id: str, fields: PlanFields) -> WorkoutPlan:
    plan = WorkoutPlan(meta=RecordMeta(owner_id=user_id), **fields.model_dump())
    if plan.calories_burned_estimate is None:
        profile = get_profile(user_id)
        if profile is not None:
            plan.calories_burned_estimate = estimate_workout_calories(
                profile.weight_kg, plan.duration, plan.workout_type
            )
    saved = plans.persist(plan)
    logger.info("Workout plan created with ID: %s", saved.meta.id)
    return saved


def save_generated_plan(user_id: str, plan: WorkoutPlan) -> WorkoutPlan:
    plan.meta = RecordMeta(owner_id=user_id)
    saved = plans.persist(plan)
    logger.info("Generated workout plan saved for user %s (ai_generated=%s)", user_id, saved.ai_generated)
    return saved


def list_user_plans(user_id: str) -> List[WorkoutPlan]:
    return sorted(plans.fetch_records(user_id), key=lambda p: p.meta.created_at, reverse=True)


def list_public_plans() -> List[WorkoutPlan]:
    return [p for p in plans.fetch_all() if p.is_public]


def rate_plan(plan_id: str, rating: float) -> WorkoutPlan:
    plan = plans.require(plan_id)
    plan.ratings.add_rating(rating)
    return plans.persist(plan)


def complete_plan(user_id: str, plan_id: str) -> WorkoutPlan:
    plan = plans.require(plan_id)
    plan.completed_count += 1
    plans.persist(plan)

    profile = get_profile(user_id)
    if profile is not None:
        record_workout_completion(
            profile,
            calories_estimate=plan.calories_burned_estimate,
            duration_min=plan.duration,
        )
        profiles.persist(profile)
    logger.info("Workout completion recorded for user %s, plan %s", user_id, plan_id)
    return plan


def get_user_session(user_id: str, session_id: str) -> WorkoutSession:
    return sessions.require(session_id, owner_id=user_id)


def save_session(session: WorkoutSession) -> WorkoutSession:
    return sessions.persist(session)


def gps_sessions(user_id: str, limit: Optional[int] = None) -> List[WorkoutSession]:
    """Sessions with a recorded route, newest first."""
    found = [s for s in list_sessions(user_id) if s.gps_route]
    return found[:limit] if limit is not None else found

