# -*- coding: utf-8 -*-
"""
Recommendation scoring

Recipe and workout scorers share one shape: filter for eligibility, then rank by a
weighted score, descending, keeping upstream order between equal scores.
"""

from .ranking import Ranked, rank
from .recipes import is_recipe_suitable, popular_recipes, recipe_score, recommend_recipes
from .workouts import is_workout_suitable, public_workouts, recommend_workouts, workout_score

__all__ = [
    'Ranked',
    'rank',
    'is_recipe_suitable',
    'popular_recipes',
    'recipe_score',
    'recommend_recipes',
    'is_workout_suitable',
    'public_workouts',
    'recommend_workouts',
    'workout_score',
]
