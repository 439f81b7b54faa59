# -*- coding: utf-8 -*-
"""Recipes — record storage helpers."""

from __future__ import annotations

import logging
from typing import List, Optional

from ..records import RecordMeta, RecordStore
from .models import Recipe, RecipeFields

logger = logging.getLogger(__name__)

recipes: RecordStore[Recipe] = RecordStore("recipe", Recipe)


def create_recipe(user_id: str, fields: RecipeFields) -> Recipe:
    recipe = Recipe(meta=RecordMeta(owner_id=user_id), **fields.model_dump())
    saved = recipes.persist(recipe)
    logger.info("Recipe created with ID: %s", saved.meta.id)
    return saved


def save_generated_recipe(user_id: str, recipe: Recipe) -> Recipe:
    recipe.meta = RecordMeta(owner_id=user_id)
    saved = recipes.persist(recipe)
    logger.info("Generated recipe saved with ID: %s (ai_generated=%s)", saved.meta.id, saved.ai_generated)
    return saved


def list_user_recipes(user_id: str) -> List[Recipe]:
    return recipes.fetch_records(user_id)


def list_public_recipes(meal_type: Optional[str] = None) -> List[Recipe]:
    found = [r for r in recipes.fetch_all() if r.is_public]
    if meal_type:
        wanted = meal_type.lower()
        found = [r for r in found if (r.meal_type or "").lower() == wanted]
    return found


def search_recipes(query: str, limit: int) -> List[Recipe]:
    needle = (query or "").strip().lower()
    out: List[Recipe] = []
    for recipe in list_public_recipes():
        haystack = [recipe.title, recipe.description or "", *recipe.tags, *recipe.ingredient_names()]
        if not needle or any(needle in h.lower() for h in haystack):
            out.append(recipe)
        if len(out) >= limit:
            break
    return out


def get_recipe(recipe_id: str) -> Recipe:
    recipe = recipes.require(recipe_id)
    recipe.view_count += 1
    return recipes.persist(recipe)


def save_recipe(recipe_id: str) -> Recipe:
    recipe = recipes.require(recipe_id)
    recipe.save_count += 1
    return recipes.persist(recipe)


def mark_recipe_made(recipe_id: str) -> Recipe:
    recipe = recipes.require(recipe_id)
    recipe.made_count += 1
    return recipes.persist(recipe)


def rate_recipe(recipe_id: str, rating: float) -> Recipe:
    recipe = recipes.require(recipe_id)
    recipe.ratings.add_rating(rating)
    return recipes.persist(recipe)
