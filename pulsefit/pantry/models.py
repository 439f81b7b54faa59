# -*- coding: utf-8 -*-
"""Pantry — Pydantic models."""

from __future__ import annotations

from datetime import date
from typing import Dict, List, Optional

from pydantic import BaseModel, Field

from ..records import RecordMeta


class NutritionPer100g(BaseModel):
    calories: Optional[float] = Field(None, ge=0)
    protein: Optional[float] = Field(None, ge=0)
    carbs: Optional[float] = Field(None, ge=0)
    fat: Optional[float] = Field(None, ge=0)


class PantryFields(BaseModel):
    name: str = Field(..., min_length=1, max_length=200)
    brand: Optional[str] = None
    category: Optional[str] = None
    quantity: Optional[float] = Field(None, ge=0)
    unit: Optional[str] = None
    minimum_quantity: Optional[float] = Field(None, ge=0)
    purchase_date: Optional[date] = None
    expiry_date: Optional[date] = None
    location: Optional[str] = Field(None, description="fridge | freezer | pantry | ...")
    barcode: Optional[str] = None
    notes: Optional[str] = None


class PantryUpdate(BaseModel):
    """Partial update; fields left as None are kept."""
    name: Optional[str] = Field(None, min_length=1, max_length=200)
    brand: Optional[str] = None
    category: Optional[str] = None
    quantity: Optional[float] = Field(None, ge=0)
    unit: Optional[str] = None
    minimum_quantity: Optional[float] = Field(None, ge=0)
    purchase_date: Optional[date] = None
    expiry_date: Optional[date] = None
    location: Optional[str] = None
    notes: Optional[str] = None


class PantryItem(PantryFields):
    meta: RecordMeta = Field(default_factory=RecordMeta)
    image_url: Optional[str] = None
    nutrition_per_100g: Optional[NutritionPer100g] = None
    estimated_value: Optional[float] = Field(None, ge=0)
    finished: bool = False


class Freshness(BaseModel):
    days_until_expiry: Optional[int] = Field(None, description="None: never expires")
    expired: bool
    near_expiry: bool
    running_low: bool


class PantryItemView(BaseModel):
    item: PantryItem
    freshness: Freshness


class ScanRequest(BaseModel):
    barcode: str


class ShoppingList(BaseModel):
    items: List[str]


class PantryAnalytics(BaseModel):
    total_items: int
    expired_items: int
    expiring_within_week: int
    low_stock_items: int
    category_breakdown: Dict[str, int] = Field(default_factory=dict)
    estimated_total_value: float = 0.0


class ExpiryAlert(BaseModel):
    item_id: Optional[str] = None
    item_name: str
    alert_type: str = Field(..., description="expired | expires_tomorrow | expires_soon")
    days_until_expiry: int
    sent: bool
