# -*- coding: utf-8 -*-
"""
Trend & progress analyzer

All functions are pure over records the caller has already fetched; `now` is passed in
so results are reproducible.
"""

from __future__ import annotations

from datetime import date, datetime, timedelta, timezone
from typing import Iterable, List, Optional, Sequence

from ..nutrition.models import NutritionEntry
from ..profiles.models import Profile
from ..workouts.models import WorkoutSession
from .models import (
    EnduranceProgress,
    GoalAdjustments,
    GoalProgress,
    MuscleGainProgress,
    NutritionAggregate,
    ProgressReport,
    StrengthProgress,
    Trends,
    WeightLossProgress,
    WorkoutAggregate,
)
from .smoothing import rolling_calories

WINDOW_DAYS = 30
WEEKS_PER_WINDOW = 4
MIN_TREND_RECORDS = 14
ON_TRACK_STRENGTH_SESSIONS = 8
FALLBACK_TDEE = 2000.0
KCAL_PER_POUND = 3500.0
LOW_FREQUENCY_WEEKLY = 2
LARGE_WEIGHT_GAP_KG = 20


def _aware(value: datetime) -> datetime:
    return value if value.tzinfo is not None else value.replace(tzinfo=timezone.utc)


def _mean(values: Iterable[Optional[float]]) -> Optional[float]:
    present = [v for v in values if v is not None]
    if not present:
        return None
    return sum(present) / len(present)


def _round2(value: Optional[float]) -> Optional[float]:
    return round(value, 2) if value is not None else None


def _is_type(session: WorkoutSession, session_type: str) -> bool:
    return (session.session_type or "").lower() == session_type


# ---------- Window ----------

def sessions_in_window(
    sessions: Iterable[WorkoutSession], now: datetime, days: int = WINDOW_DAYS
) -> List[WorkoutSession]:
    cutoff = _aware(now) - timedelta(days=days)
    return [s for s in sessions if _aware(s.created_at) > cutoff]


def entries_in_window(
    entries: Iterable[NutritionEntry], today: date, days: int = WINDOW_DAYS
) -> List[NutritionEntry]:
    cutoff = today - timedelta(days=days)
    return [e for e in entries if e.date > cutoff]


# ---------- Aggregates ----------

def workout_aggregate(sessions: Sequence[WorkoutSession]) -> WorkoutAggregate:
    count = len(sessions)
    calories = [s.total_calories_burned for s in sessions if s.total_calories_burned is not None]
    return WorkoutAggregate(
        total_sessions=count,
        weekly_average=count // WEEKS_PER_WINDOW,
        average_duration=_round2(_mean(s.duration for s in sessions)),
        total_calories_burned=round(sum(calories), 2),
    )


def nutrition_aggregate(entries: Sequence[NutritionEntry]) -> NutritionAggregate:
    return NutritionAggregate(
        entries_count=len(entries),
        average_calories=_round2(_mean(e.calories for e in entries)),
        average_protein=_round2(_mean(e.macros.protein for e in entries)),
        average_carbs=_round2(_mean(e.macros.carbs for e in entries)),
        average_fat=_round2(_mean(e.macros.fat for e in entries)),
    )


# ---------- Trends ----------

def _direction(recent: int, earlier: int, up: str, down: str) -> str:
    if recent > earlier:
        return up
    if recent < earlier:
        return down
    return "stable"


def workout_frequency_trend(
    sessions: Sequence[WorkoutSession], now: datetime, window_days: int = WINDOW_DAYS
) -> Optional[str]:
    if len(sessions) < MIN_TREND_RECORDS:
        return None
    now = _aware(now)
    start = now - timedelta(days=window_days)
    middle = now - timedelta(days=window_days / 2)
    recent = sum(1 for s in sessions if _aware(s.created_at) >= middle)
    earlier = sum(1 for s in sessions if start < _aware(s.created_at) < middle)
    return _direction(recent, earlier, "increasing", "decreasing")


def nutrition_consistency_trend(
    entries: Sequence[NutritionEntry], today: date, window_days: int = WINDOW_DAYS
) -> Optional[str]:
    if len(entries) < MIN_TREND_RECORDS:
        return None
    start = today - timedelta(days=window_days)
    middle = today - timedelta(days=window_days // 2)
    recent = sum(1 for e in entries if e.date >= middle)
    earlier = sum(1 for e in entries if start < e.date < middle)
    return _direction(recent, earlier, "improving", "declining")


# ---------- Goals ----------

def weight_loss_progress(
    profile: Profile,
    sessions: Sequence[WorkoutSession],
    entries: Sequence[NutritionEntry],
    today: Optional[date] = None,
    window_days: int = WINDOW_DAYS,
) -> WeightLossProgress:
    burned = sum(s.total_calories_burned for s in sessions if s.total_calories_burned is not None)
    intake = _mean(e.calories for e in entries)
    weekly: Optional[float] = None
    if intake is not None:
        tdee = profile.tdee(today)
        if tdee is None:
            tdee = FALLBACK_TDEE
        deficit = tdee - intake + burned / window_days
        weekly = round(deficit * 7 / KCAL_PER_POUND, 2)
    return WeightLossProgress(
        total_calories_burned=round(burned, 2),
        average_daily_calories=_round2(intake),
        estimated_weekly_weight_change=weekly,
    )


def muscle_gain_progress(sessions: Sequence[WorkoutSession]) -> MuscleGainProgress:
    strength = sum(1 for s in sessions if _is_type(s, "strength"))
    return MuscleGainProgress(
        strength_sessions_count=strength,
        on_track=strength >= ON_TRACK_STRENGTH_SESSIONS,
    )


def endurance_progress(sessions: Sequence[WorkoutSession]) -> EnduranceProgress:
    cardio = sorted(
        (s for s in sessions if _is_type(s, "cardio")),
        key=lambda s: _aware(s.created_at),
    )
    progress = EnduranceProgress(cardio_sessions_count=len(cardio))
    if len(cardio) >= 2:
        first, latest = cardio[0], cardio[-1]
        if first.duration is not None and latest.duration is not None:
            improvement = latest.duration - first.duration
            progress.duration_improvement = improvement
            progress.endurance_improvement = "improving" if improvement > 0 else "stable"
    return progress


def strength_progress(sessions: Sequence[WorkoutSession]) -> StrengthProgress:
    strength = sum(1 for s in sessions if _is_type(s, "strength"))
    return StrengthProgress(
        strength_sessions_count=strength,
        progress_trend="good" if strength >= ON_TRACK_STRENGTH_SESSIONS else "needs_improvement",
    )


def goal_progress(
    profile: Profile,
    sessions: Sequence[WorkoutSession],
    entries: Sequence[NutritionEntry],
    today: Optional[date] = None,
    window_days: int = WINDOW_DAYS,
) -> GoalProgress:
    progress = GoalProgress()
    for goal in profile.fitness_goals:
        key = (goal or "").lower()
        if key == "weight_loss":
            progress.weight_loss = weight_loss_progress(profile, sessions, entries, today, window_days)
        elif key == "muscle_gain":
            progress.muscle_gain = muscle_gain_progress(sessions)
        elif key == "endurance":
            progress.endurance = endurance_progress(sessions)
        elif key == "strength":
            progress.strength = strength_progress(sessions)
    return progress


def goal_adjustments(profile: Profile, workouts: WorkoutAggregate) -> GoalAdjustments:
    adjustments = GoalAdjustments()
    if workouts.weekly_average < LOW_FREQUENCY_WEEKLY:
        adjustments.workout_frequency = (
            "Consider setting a more achievable goal of 2 workouts per week initially"
        )
    if profile.weight_kg is not None and profile.target_weight_kg is not None:
        if abs(profile.weight_kg - profile.target_weight_kg) > LARGE_WEIGHT_GAP_KG:
            adjustments.weight_goal = "Consider setting intermediate weight goals for better motivation"
    return adjustments


# ---------- Report ----------

def analyze_progress(
    profile: Profile,
    sessions: Iterable[WorkoutSession],
    entries: Iterable[NutritionEntry],
    now: Optional[datetime] = None,
    window_days: int = WINDOW_DAYS,
) -> ProgressReport:
    now = _aware(now or datetime.now(timezone.utc))
    today = now.date()
    recent_sessions = sessions_in_window(sessions, now, window_days)
    recent_entries = entries_in_window(entries, today, window_days)

    workouts = workout_aggregate(recent_sessions)
    return ProgressReport(
        window_days=window_days,
        workouts=workouts,
        nutrition=nutrition_aggregate(recent_entries),
        trends=Trends(
            workout_frequency=workout_frequency_trend(recent_sessions, now, window_days),
            nutrition_consistency=nutrition_consistency_trend(recent_entries, today, window_days),
        ),
        goal_progress=goal_progress(profile, recent_sessions, recent_entries, today, window_days),
        goal_adjustments=goal_adjustments(profile, workouts),
        rolling_calories=rolling_calories(recent_entries, today, window_days),
    )
