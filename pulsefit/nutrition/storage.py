# -*- coding: utf-8 -*-
"""Nutrition — record storage helpers."""

from __future__ import annotations

from datetime import date
from typing import List, Optional

from ..records import RecordMeta, RecordStore
from .models import NutritionEntry, NutritionFields

entries: RecordStore[NutritionEntry] = RecordStore("nutrition_entry", NutritionEntry)


def log_entry(user_id: str, fields: NutritionFields) -> NutritionEntry:
    entry = NutritionEntry(meta=RecordMeta(owner_id=user_id), **fields.model_dump())
    return entries.persist(entry)


def list_entries(
    user_id: str,
    *,
    start: Optional[date] = None,
    end: Optional[date] = None,
) -> List[NutritionEntry]:
    """Entries ordered by calendar date, optionally restricted to [start, end]."""
    found = entries.fetch_records(user_id)
    if start is not None:
        found = [e for e in found if e.date >= start]
    if end is not None:
        found = [e for e in found if e.date <= end]
    return sorted(found, key=lambda e: e.date)


def delete_entry(user_id: str, entry_id: str) -> None:
    entries.require(entry_id, owner_id=user_id)
    entries.delete(entry_id)
