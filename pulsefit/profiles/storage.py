# -*- coding: utf-8 -*-
"""Profiles — record storage helpers."""

from __future__ import annotations

from typing import Optional

from ..errors import NotFoundError
from ..records import RecordMeta, RecordStore
from .models import Profile, ProfileFields

profiles: RecordStore[Profile] = RecordStore("profile", Profile)


def get_profile(user_id: str) -> Optional[Profile]:
    found = profiles.fetch_records(user_id)
    return found[-1] if found else None


def require_profile(user_id: str) -> Profile:
    profile = get_profile(user_id)
    if profile is None:
        raise NotFoundError("User profile not found")
    return profile


def upsert_profile(user_id: str, fields: ProfileFields) -> Profile:
    existing = get_profile(user_id)
    if existing is None:
        profile = Profile(meta=RecordMeta(owner_id=user_id), **fields.model_dump())
    else:
        profile = existing.model_copy(update=fields.model_dump())
    return profiles.persist(profile)
