# -*- coding: utf-8 -*-
"""Recipe eligibility and scoring."""

from __future__ import annotations

from typing import Iterable, List, Optional

from ..profiles.models import Profile
from ..recipes.models import Recipe
from .ranking import Ranked, rank

LONG_RECIPE_MINUTES = 60


def _contains_any(needles: Iterable[str], haystack: Iterable[str]) -> bool:
    lowered = [h.lower() for h in haystack if h]
    for needle in needles:
        if not needle:
            continue
        n = needle.lower()
        if any(n in h for h in lowered):
            return True
    return False


def is_recipe_suitable(recipe: Recipe, profile: Profile) -> bool:
    """
    Excluded when a dietary restriction is a substring of any recipe tag, or an allergy
    is a substring of any ingredient name (both case-insensitive). With cuisine
    preferences set, a recipe that declares a cuisine must match one of them exactly
    (case-insensitive).
    """
    if _contains_any(profile.dietary_restrictions, recipe.tags):
        return False
    if _contains_any(profile.allergies, recipe.ingredient_names()):
        return False
    if profile.cuisine_preferences and recipe.cuisine_type:
        cuisine = recipe.cuisine_type.lower()
        return any(pref.lower() == cuisine for pref in profile.cuisine_preferences)
    return True


def recipe_score(recipe: Recipe, profile: Profile) -> float:
    score = recipe.ratings.average * 20
    score += min(recipe.made_count / 10.0, 15)
    score += min(recipe.save_count / 5.0, 10)
    if profile.experience is not None and profile.experience == recipe.difficulty:
        score += 15
    if recipe.cuisine_type is not None and recipe.cuisine_type in profile.cuisine_preferences:
        score += 10
    total_time = recipe.total_time
    if total_time is not None and total_time > LONG_RECIPE_MINUTES:
        score -= 5
    return score


def recommend_recipes(
    recipes: Iterable[Recipe],
    profile: Profile,
    limit: Optional[int] = None,
) -> List[Ranked[Recipe]]:
    return rank(
        recipes,
        eligible=lambda r: is_recipe_suitable(r, profile),
        score=lambda r: recipe_score(r, profile),
        limit=limit,
    )


def popular_recipes(recipes: Iterable[Recipe], limit: Optional[int] = None) -> List[Ranked[Recipe]]:
    """Ranking used when there is no profile to personalize against."""
    return rank(
        recipes,
        eligible=lambda r: True,
        score=lambda r: r.ratings.average * 0.6 + r.made_count * 0.3 + r.save_count * 0.1,
        limit=limit,
    )
