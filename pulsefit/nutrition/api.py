# -*- coding: utf-8 -*-
"""Nutrition — API endpoints."""

from __future__ import annotations

from datetime import date
from typing import List, Optional

from fastapi import APIRouter, Depends, Query

from ..deps import get_current_user_id
from .models import NutritionEntry, NutritionFields
from .storage import delete_entry, list_entries, log_entry

router = APIRouter(prefix="/api/nutrition", tags=["Nutrition"])


@router.post("/entries", response_model=NutritionEntry, summary="Log a nutrition entry")
def post_entry(request: NutritionFields, user_id: str = Depends(get_current_user_id)):
    return log_entry(user_id, request)


@router.get("/entries", response_model=List[NutritionEntry], summary="Nutrition entries by date")
def get_entries(
    start: Optional[date] = Query(default=None, description="YYYY-MM-DD"),
    end: Optional[date] = Query(default=None, description="YYYY-MM-DD"),
    user_id: str = Depends(get_current_user_id),
):
    return list_entries(user_id, start=start, end=end)


@router.delete("/entries/{entry_id}", summary="Delete a nutrition entry")
def remove_entry(entry_id: str, user_id: str = Depends(get_current_user_id)):
    delete_entry(user_id, entry_id)
    return {"ok": True}
