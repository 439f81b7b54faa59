# -*- coding: utf-8 -*-
"""Progress / coach — API endpoints."""

from __future__ import annotations

from fastapi import APIRouter, Depends

from ..config import settings
from ..deps import get_current_user_id
from ..nutrition.storage import list_entries
from ..profiles.models import Profile
from ..profiles.storage import require_profile
from ..workouts.storage import list_sessions
from .analyzer import analyze_progress
from .coach import coach_recommendations, coach_reply
from .models import ChatReply, ChatRequest, CoachRecommendations, ProgressReport

router = APIRouter(prefix="/api", tags=["Progress"])


def _report(user_id: str, profile: Profile) -> ProgressReport:
    return analyze_progress(
        profile,
        list_sessions(user_id),
        list_entries(user_id),
        window_days=settings.progress_window_days,
    )


@router.get("/progress", response_model=ProgressReport, summary="Trailing-window progress analysis")
def get_progress(user_id: str = Depends(get_current_user_id)):
    profile = require_profile(user_id)
    return _report(user_id, profile)


@router.get("/coach/recommendations", response_model=CoachRecommendations, summary="Coach tips")
def get_coach_recommendations(user_id: str = Depends(get_current_user_id)):
    profile = require_profile(user_id)
    return coach_recommendations(profile, _report(user_id, profile))


@router.post("/coach/chat", response_model=ChatReply, summary="Chat with the coach")
def post_coach_chat(request: ChatRequest, user_id: str = Depends(get_current_user_id)):
    profile = require_profile(user_id)
    return ChatReply(reply=coach_reply(profile, _report(user_id, profile), request.message))
