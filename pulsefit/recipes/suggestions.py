# -*- coding: utf-8 -*-
"""Meal suggestions from the text generator, with fixed defaults per meal type."""

from __future__ import annotations

import logging
import re
from typing import Dict, List, Optional

from ..agent_service import generate_text
from ..errors import UpstreamUnavailableError
from ..profiles.models import Profile
from .models import MealSuggestions

logger = logging.getLogger(__name__)

DEFAULT_MEALS: Dict[str, List[str]] = {
    "breakfast": [
        "Greek yogurt with berries and granola",
        "Oatmeal with banana and almonds",
        "Scrambled eggs with whole grain toast",
    ],
    "lunch": [
        "Grilled chicken salad with mixed vegetables",
        "Quinoa bowl with roasted vegetables",
        "Turkey and avocado wrap",
    ],
    "dinner": [
        "Baked salmon with sweet potato and broccoli",
        "Lean beef stir-fry with brown rice",
        "Lentil soup with whole grain bread",
    ],
    "snack": [
        "Apple with almond butter",
        "Greek yogurt with nuts",
        "Hummus with carrot sticks",
    ],
}
GENERAL_MEALS: List[str] = [
    "Balanced meal with lean protein, complex carbs, and vegetables",
    "Focus on whole, unprocessed foods",
    "Include a variety of colorful fruits and vegetables",
]

LIST_MARKER = re.compile(r"^(\d+[.)]|[-*•])\s*")
MIN_SUGGESTION_LENGTH = 10


def default_meal_suggestions(meal_type: Optional[str]) -> List[str]:
    return list(DEFAULT_MEALS.get((meal_type or "").strip().lower(), GENERAL_MEALS))


def parse_meal_suggestions(text: str) -> List[str]:
    """Numbered / bulleted lines or `name: description` lines, markers stripped."""
    meals: List[str] = []
    for raw in text.splitlines():
        line = raw.strip()
        if len(line) <= MIN_SUGGESTION_LENGTH:
            continue
        if LIST_MARKER.match(line) or ":" in line:
            meals.append(LIST_MARKER.sub("", line, count=1))
    return meals


def _meal_prompt(profile: Profile, meal_type: str, target_calories: Optional[float]) -> str:
    calories = f"{target_calories:.0f}" if target_calories is not None else "not specified"
    return (
        f"Suggest 3 healthy {meal_type} meals for:\n"
        f"- Target Calories: {calories}\n"
        f"- Fitness Goals: {', '.join(profile.fitness_goals) or 'none'}\n"
        f"- Dietary Restrictions: {', '.join(profile.dietary_restrictions) or 'none'}\n"
        f"- Activity Level: {profile.activity_level or 'unknown'}\n\n"
        "Provide meal names with brief descriptions. Focus on nutritious, balanced options "
        "that support their fitness goals."
    )


def suggest_meals(
    profile: Profile,
    meal_type: str,
    target_calories: Optional[float] = None,
) -> MealSuggestions:
    try:
        text = generate_text(_meal_prompt(profile, meal_type, target_calories))
    except UpstreamUnavailableError as exc:
        logger.warning("Meal suggestions unavailable, using defaults: %s", exc.message)
        return MealSuggestions(meal_type=meal_type, suggestions=default_meal_suggestions(meal_type))
    meals = parse_meal_suggestions(text)
    if not meals:
        logger.info("No parsable meal suggestions in generated text, using defaults")
        return MealSuggestions(meal_type=meal_type, suggestions=default_meal_suggestions(meal_type))
    return MealSuggestions(meal_type=meal_type, suggestions=meals, generated=True)
