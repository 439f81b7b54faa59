# -*- coding: utf-8 -*-
"""Profiles — API endpoints."""

from __future__ import annotations

from fastapi import APIRouter, Depends

from ..deps import get_current_user_id
from .models import Profile, ProfileFields, ProfileMetrics, profile_metrics
from .storage import require_profile, upsert_profile

router = APIRouter(prefix="/api/profile", tags=["Profile"])


@router.get("", response_model=Profile, summary="Current user's profile")
def read_profile(user_id: str = Depends(get_current_user_id)):
    return require_profile(user_id)


@router.put("", response_model=Profile, summary="Create or replace the profile")
def write_profile(request: ProfileFields, user_id: str = Depends(get_current_user_id)):
    return upsert_profile(user_id, request)


@router.get("/metrics", response_model=ProfileMetrics, summary="BMI / age / BMR / TDEE")
def read_metrics(user_id: str = Depends(get_current_user_id)):
    return profile_metrics(require_profile(user_id))
