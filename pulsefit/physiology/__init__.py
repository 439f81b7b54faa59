# -*- coding: utf-8 -*-
"""
生理指标计算模块

BMI, age, BMR (Mifflin–St Jeor), TDEE and MET-based calorie estimates.
"""

from .calculator import (
    ActivityLevel,
    WorkoutType,
    age,
    bmi,
    bmr,
    estimate_workout_calories,
    tdee,
)

__all__ = [
    'ActivityLevel',
    'WorkoutType',
    'age',
    'bmi',
    'bmr',
    'estimate_workout_calories',
    'tdee',
]
