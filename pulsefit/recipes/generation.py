# -*- coding: utf-8 -*-
"""
Generated recipes

A single recipe for the profile's preferences, or a few recipes built from what is in the
pantry. When the text generator is unavailable or its answer has no recognizable recipe,
a fixed template is returned instead (``ai_generated`` stays False on those).
"""

from __future__ import annotations

import logging
import re
from datetime import date
from typing import Iterable, List, Optional, Sequence

from ..agent_service import generate_with_fallback
from ..errors import ValidationError
from ..pantry.freshness import expiry_sort_key, is_expired
from ..pantry.models import PantryItem
from ..profiles.models import Profile
from .models import Recipe, RecipeIngredient, RecipeRequest
from .suggestions import LIST_MARKER, default_meal_suggestions

logger = logging.getLogger(__name__)

# "Recipe: Name", "Recipe 2: Name", "Title: Name", optionally wrapped in markdown emphasis.
_TITLE = re.compile(r"^(?:recipe|title)(?:\s*\d+)?\s*[:.\-]\s*(.+)$", re.IGNORECASE)

MAX_PANTRY_RECIPES = 3
TEMPLATE_MAX_INGREDIENTS = 5
TEMPLATE_PREP_MIN = 15
TEMPLATE_COOK_MIN = 30


def _mentions_any(name: str, needles: Iterable[str]) -> bool:
    lowered = name.lower()
    return any(n and n.lower() in lowered for n in needles)


def pantry_ingredients(
    items: Iterable[PantryItem],
    today: date,
    avoid: Sequence[str] = (),
) -> List[str]:
    """Names of unfinished, unexpired items, soonest expiry first; allergens left out."""
    usable = [i for i in items if not i.finished and not is_expired(i, today)]
    usable.sort(key=lambda i: expiry_sort_key(i, today))
    names: List[str] = []
    for item in usable:
        if item.name in names or _mentions_any(item.name, avoid):
            continue
        names.append(item.name)
    return names


def parse_generated_recipes(text: str, known_ingredients: Sequence[str] = ()) -> List[Recipe]:
    """
    Split generated text into recipes.

    Each recipe starts at a ``Recipe: <name>`` line. List-item lines below it become the
    instructions, the first plain line the description. Ingredients are the known names the
    block mentions.
    """
    blocks: List[List[str]] = []
    for raw in (text or "").splitlines():
        line = raw.strip()
        if not line:
            continue
        heading = _TITLE.match(line.strip("#* "))
        if heading:
            blocks.append([heading.group(1).strip("* ")])
        elif blocks:
            blocks[-1].append(line)

    recipes: List[Recipe] = []
    for title, *lines in blocks:
        if not title:
            continue
        steps = [LIST_MARKER.sub("", l, count=1) for l in lines if LIST_MARKER.match(l)]
        plain = [l for l in lines if not LIST_MARKER.match(l)]
        body = " ".join(lines).lower()
        recipes.append(
            Recipe(
                title=title[:200],
                description=plain[0] if plain else None,
                ingredients=[RecipeIngredient(name=n) for n in known_ingredients if n.lower() in body],
                instructions=steps,
                ai_generated=True,
            )
        )
    return recipes


def template_recipe(meal_type: str, ingredients: Sequence[str] = ()) -> Recipe:
    if ingredients:
        names = list(ingredients)[:TEMPLATE_MAX_INGREDIENTS]
        title = f"Pantry {meal_type.lower()} skillet"
        description = "Made with what is already in your pantry: " + ", ".join(names)
        steps = [
            "Wash and chop " + ", ".join(names),
            "Cook in a skillet with a little olive oil over medium heat until tender",
            "Season to taste and serve",
        ]
    else:
        names = []
        title = default_meal_suggestions(meal_type)[0]
        description = "A simple, balanced option"
        steps = ["Prepare the ingredients", "Cook and season to taste", "Serve"]
    return Recipe(
        title=title,
        description=description,
        difficulty="beginner",
        prep_time=TEMPLATE_PREP_MIN,
        cook_time=TEMPLATE_COOK_MIN,
        servings=2,
        ingredients=[RecipeIngredient(name=n) for n in names],
        instructions=steps,
        meal_type=meal_type,
        is_public=False,
    )


def _preference_lines(profile: Profile, request: RecipeRequest) -> str:
    return (
        f"- Meal type: {request.meal_type}\n"
        f"- Cuisine: {request.cuisine_type or 'any'}\n"
        f"- Difficulty: {request.difficulty or profile.experience or 'any'}\n"
        f"- Max prep + cook time: {request.max_time} minutes\n"
        f"- Dietary restrictions: {', '.join(profile.dietary_restrictions) or 'none'}\n"
        f"- Allergies: {', '.join(profile.allergies) or 'none'}\n"
        f"- Fitness goals: {', '.join(profile.fitness_goals) or 'none'}\n"
    )


_FORMAT_HINT = (
    "Start each recipe with a line 'Recipe: <name>', then a one-line description, "
    "then numbered steps."
)


def _finish(recipe: Recipe, request: RecipeRequest) -> Recipe:
    recipe.meal_type = recipe.meal_type or request.meal_type
    recipe.cuisine_type = recipe.cuisine_type or request.cuisine_type
    recipe.difficulty = recipe.difficulty or request.difficulty
    recipe.is_public = False
    return recipe


def generate_recipe(profile: Profile, request: RecipeRequest) -> Recipe:
    prompt = f"Create a detailed recipe:\n{_preference_lines(profile, request)}\n{_FORMAT_HINT}"
    text = generate_with_fallback(prompt)
    drafts = parse_generated_recipes(text) if text else []
    if not drafts:
        logger.info("Using template recipe for %s", request.meal_type)
        return _finish(template_recipe(request.meal_type), request)
    return _finish(drafts[0], request)


def recipes_from_pantry(
    profile: Profile,
    items: Iterable[PantryItem],
    request: RecipeRequest,
    today: Optional[date] = None,
) -> List[Recipe]:
    today = today or date.today()
    ingredients = pantry_ingredients(items, today, avoid=profile.allergies)
    if not ingredients:
        raise ValidationError("No usable pantry items")
    prompt = (
        f"Create 2-3 recipes using these pantry ingredients: {', '.join(ingredients)}\n\n"
        f"User preferences:\n{_preference_lines(profile, request)}\n"
        "Prioritize pantry items and use the first-listed (soonest expiring) ones first.\n"
        f"{_FORMAT_HINT}"
    )
    text = generate_with_fallback(prompt)
    drafts = parse_generated_recipes(text, ingredients) if text else []
    if not drafts:
        logger.info("Using template pantry recipe for %d ingredients", len(ingredients))
        return [_finish(template_recipe(request.meal_type, ingredients), request)]
    return [_finish(r, request) for r in drafts[:MAX_PANTRY_RECIPES]]
