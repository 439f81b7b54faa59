# -*- coding: utf-8 -*-
"""Nutrition — Pydantic models."""

from __future__ import annotations

from datetime import date
from typing import Optional

from pydantic import BaseModel, Field

from ..records import RecordMeta


class Macros(BaseModel):
    """Grams, except sodium (mg)."""
    protein: Optional[float] = Field(None, ge=0)
    carbs: Optional[float] = Field(None, ge=0)
    fat: Optional[float] = Field(None, ge=0)
    fiber: Optional[float] = Field(None, ge=0)
    sugar: Optional[float] = Field(None, ge=0)
    sodium: Optional[float] = Field(None, ge=0)


class NutritionFields(BaseModel):
    date: date
    meal_type: Optional[str] = Field(None, description="breakfast | lunch | dinner | snack")
    food_name: Optional[str] = Field(None, max_length=200)
    quantity: Optional[float] = Field(None, ge=0)
    unit: Optional[str] = None
    calories: Optional[float] = Field(None, ge=0)
    macros: Macros = Field(default_factory=Macros)
    notes: Optional[str] = None


class NutritionEntry(NutritionFields):
    meta: RecordMeta = Field(default_factory=RecordMeta)
