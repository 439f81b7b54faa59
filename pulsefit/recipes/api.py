# -*- coding: utf-8 -*-
"""Recipes — API endpoints."""

from __future__ import annotations

from typing import List, Optional

from fastapi import APIRouter, Depends, Query

from ..deps import get_current_user_id
from ..pantry.service import user_items
from ..profiles.storage import get_profile, require_profile
from ..recommend import popular_recipes, recommend_recipes
from .generation import generate_recipe, recipes_from_pantry
from .models import MealSuggestions, RateRequest, Recipe, RecipeFields, RecipeRequest, RecommendedRecipe
from .storage import (
    create_recipe,
    get_recipe,
    list_public_recipes,
    list_user_recipes,
    mark_recipe_made,
    rate_recipe,
    save_generated_recipe,
    save_recipe,
    search_recipes,
)
from .suggestions import suggest_meals

router = APIRouter(prefix="/api/recipes", tags=["Recipes"])

MEAL_PLAN_LIMIT = 5


@router.post("", response_model=Recipe, summary="Create a recipe")
def post_recipe(request: RecipeFields, user_id: str = Depends(get_current_user_id)):
    return create_recipe(user_id, request)


@router.get("/mine", response_model=List[Recipe], summary="Recipes created by the current user")
def get_my_recipes(user_id: str = Depends(get_current_user_id)):
    return list_user_recipes(user_id)


@router.get("/recommendations", response_model=List[RecommendedRecipe], summary="Personalized recipe ranking")
def get_recommendations(
    limit: int = Query(default=10, ge=1, le=100),
    user_id: str = Depends(get_current_user_id),
):
    candidates = list_public_recipes()
    profile = get_profile(user_id)
    if profile is None:
        ranked = popular_recipes(candidates, limit=limit)
    else:
        ranked = recommend_recipes(candidates, profile, limit=limit)
    return [RecommendedRecipe(recipe=r.item, score=round(r.score, 2)) for r in ranked]


@router.get("/popular", response_model=List[RecommendedRecipe], summary="Most popular public recipes")
def get_popular(limit: int = Query(default=10, ge=1, le=100)):
    return [
        RecommendedRecipe(recipe=r.item, score=round(r.score, 2))
        for r in popular_recipes(list_public_recipes(), limit=limit)
    ]


@router.get("/search", response_model=List[Recipe], summary="Search public recipes")
def get_search(
    q: str = Query(default="", description="matches title, description, tags or ingredients"),
    limit: int = Query(default=20, ge=1, le=100),
):
    return search_recipes(q, limit)


@router.get("/meal-plan", response_model=List[RecommendedRecipe], summary="Top recipes for a meal type")
def get_meal_plan(
    meal_type: str = Query(..., description="breakfast | lunch | dinner | snack"),
    user_id: str = Depends(get_current_user_id),
):
    profile = require_profile(user_id)
    ranked = recommend_recipes(list_public_recipes(meal_type), profile, limit=MEAL_PLAN_LIMIT)
    return [RecommendedRecipe(recipe=r.item, score=round(r.score, 2)) for r in ranked]


@router.get("/meal-suggestions", response_model=MealSuggestions, summary="Generated meal ideas")
def get_meal_suggestions(
    meal_type: str = Query(..., description="breakfast | lunch | dinner | snack"),
    target_calories: Optional[float] = Query(default=None, gt=0),
    user_id: str = Depends(get_current_user_id),
):
    return suggest_meals(require_profile(user_id), meal_type, target_calories)


@router.post("/generate", response_model=Recipe, summary="Generate and save a recipe")
def post_generate(request: RecipeRequest, user_id: str = Depends(get_current_user_id)):
    recipe = generate_recipe(require_profile(user_id), request)
    return save_generated_recipe(user_id, recipe)


@router.post("/from-pantry", response_model=List[Recipe], summary="Recipe ideas from pantry items")
def post_from_pantry(request: RecipeRequest, user_id: str = Depends(get_current_user_id)):
    profile = require_profile(user_id)
    return recipes_from_pantry(profile, user_items(user_id), request)


@router.get("/{recipe_id}", response_model=Recipe, summary="Recipe detail")
def get_one(recipe_id: str, user_id: str = Depends(get_current_user_id)):
    return get_recipe(recipe_id)


@router.post("/{recipe_id}/save", response_model=Recipe, summary="Save a recipe")
def post_save(recipe_id: str, user_id: str = Depends(get_current_user_id)):
    return save_recipe(recipe_id)


@router.post("/{recipe_id}/made", response_model=Recipe, summary="Mark a recipe as made")
def post_made(recipe_id: str, user_id: str = Depends(get_current_user_id)):
    return mark_recipe_made(recipe_id)


@router.post("/{recipe_id}/rate", response_model=Recipe, summary="Rate a recipe (1.0 - 5.0)")
def post_rate(recipe_id: str, request: RateRequest, user_id: str = Depends(get_current_user_id)):
    return rate_recipe(recipe_id, request.rating)
