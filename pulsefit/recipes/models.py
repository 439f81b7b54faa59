# -*- coding: utf-8 -*-
"""Recipes — Pydantic models."""

from __future__ import annotations

from typing import List, Optional

from pydantic import BaseModel, Field

from ..ratings import RatingAggregate
from ..records import RecordMeta


class RecipeIngredient(BaseModel):
    name: str = Field(..., min_length=1)
    quantity: Optional[float] = Field(None, ge=0)
    unit: Optional[str] = None
    optional: bool = False


class RecipeFields(BaseModel):
    title: str = Field(..., min_length=1, max_length=200)
    description: Optional[str] = None
    image_url: Optional[str] = None
    difficulty: Optional[str] = Field(None, description="beginner | intermediate | advanced")
    prep_time: Optional[int] = Field(None, ge=0, description="minutes")
    cook_time: Optional[int] = Field(None, ge=0, description="minutes")
    servings: Optional[int] = Field(None, ge=1)
    ingredients: List[RecipeIngredient] = Field(default_factory=list)
    instructions: List[str] = Field(default_factory=list)
    tags: List[str] = Field(default_factory=list)
    cuisine_type: Optional[str] = None
    meal_type: Optional[str] = Field(None, description="breakfast | lunch | dinner | snack")
    is_public: bool = True


class Recipe(RecipeFields):
    meta: RecordMeta = Field(default_factory=RecordMeta)
    ratings: RatingAggregate = Field(default_factory=RatingAggregate)
    view_count: int = Field(0, ge=0)
    save_count: int = Field(0, ge=0)
    made_count: int = Field(0, ge=0)
    ai_generated: bool = False

    @property
    def total_time(self) -> int:
        return (self.prep_time or 0) + (self.cook_time or 0)

    def ingredient_names(self) -> List[str]:
        return [i.name for i in self.ingredients]


class RateRequest(BaseModel):
    rating: float


class RecipeRequest(BaseModel):
    """Preferences for a generated recipe."""
    meal_type: str = Field("dinner", description="breakfast | lunch | dinner | snack")
    cuisine_type: Optional[str] = None
    difficulty: Optional[str] = Field(None, description="beginner | intermediate | advanced")
    max_time: int = Field(45, ge=1, description="prep + cook minutes")


class RecommendedRecipe(BaseModel):
    recipe: Recipe
    score: float


class MealSuggestions(BaseModel):
    meal_type: str
    suggestions: List[str]
    generated: bool = Field(False, description="False when the built-in defaults were used")
