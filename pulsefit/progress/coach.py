# -*- coding: utf-8 -*-
"""Coach recommendations built on a progress report."""

from __future__ import annotations

import logging
import random
from datetime import date
from typing import List, Optional

from ..agent_service import generate_text
from ..errors import UpstreamUnavailableError
from ..profiles.models import Profile
from .models import CoachRecommendations, ProgressReport

logger = logging.getLogger(__name__)

FALLBACK_MOTIVATION = [
    "Keep pushing forward! Every workout brings you closer to your goals.",
    "Consistency is key! You're building great habits.",
    "Your dedication is inspiring. Stay strong!",
    "Progress isn't always visible, but it's happening. Keep going!",
    "You're stronger than you think. Keep up the amazing work!",
]
CHAT_FALLBACK = (
    "I'm having trouble connecting right now. Please try again later or check out your "
    "progress analytics for insights!"
)

TARGET_WEEKLY_WORKOUTS = 3
TARGET_MIN_DURATION = 30
LOW_INTAKE_RATIO = 0.8
HIGH_INTAKE_RATIO = 1.2
PROTEIN_G_PER_KG = 1.2


def workout_recommendations(profile: Profile, report: ProgressReport) -> List[str]:
    tips: List[str] = []
    workouts = report.workouts
    if workouts.weekly_average < TARGET_WEEKLY_WORKOUTS:
        tips.append("Try to increase your workout frequency to 3-4 times per week for optimal results")
    if workouts.average_duration is not None and workouts.average_duration < TARGET_MIN_DURATION:
        tips.append("Consider extending your workouts to 30-45 minutes for better fitness gains")
    goals = {g.lower() for g in profile.fitness_goals if g}
    if "weight_loss" in goals:
        tips.append("Focus on high-intensity interval training (HIIT) to maximize calorie burn")
    if "muscle_gain" in goals:
        tips.append("Incorporate more strength training with progressive overload")
    return tips


def nutrition_recommendations(
    profile: Profile, report: ProgressReport, today: Optional[date] = None
) -> List[str]:
    tips: List[str] = []
    nutrition = report.nutrition
    target = profile.tdee(today)
    if nutrition.average_calories is not None and target is not None:
        if nutrition.average_calories < target * LOW_INTAKE_RATIO:
            tips.append("You're eating below your target calories. Consider adding healthy snacks")
        elif nutrition.average_calories > target * HIGH_INTAKE_RATIO:
            tips.append("You're exceeding your calorie target. Focus on portion control")
    if nutrition.average_protein is not None and profile.weight_kg is not None:
        if nutrition.average_protein < PROTEIN_G_PER_KG * profile.weight_kg:
            tips.append("Increase your protein intake to support your fitness goals")
    return tips


def _motivation_prompt(profile: Profile, report: ProgressReport) -> str:
    return (
        "Generate a personalized motivational message for a fitness app user:\n"
        f"- Goals: {', '.join(profile.fitness_goals) or 'none'}\n"
        f"- Recent workouts completed: {report.workouts.total_sessions}\n"
        f"- Current streak: {profile.stats.current_streak} days\n"
        f"- Experience level: {profile.experience or 'unknown'}\n\n"
        "Create an encouraging, specific message (2-3 sentences) that acknowledges their "
        "progress and motivates continued effort. Be positive and specific to their goals."
    )


def motivational_message(profile: Profile, report: ProgressReport) -> str:
    try:
        return generate_text(_motivation_prompt(profile, report))
    except UpstreamUnavailableError as exc:
        logger.warning("Failed to generate motivational message, using fallback: %s", exc.message)
        return random.choice(FALLBACK_MOTIVATION)


def coach_recommendations(
    profile: Profile, report: ProgressReport, today: Optional[date] = None
) -> CoachRecommendations:
    return CoachRecommendations(
        workout_recommendations=workout_recommendations(profile, report),
        nutrition_recommendations=nutrition_recommendations(profile, report, today),
        motivational_message=motivational_message(profile, report),
        goal_adjustments=report.goal_adjustments,
    )


def coach_reply(profile: Profile, report: ProgressReport, message: str) -> str:
    context = {
        "profile": profile.model_dump(mode="json", exclude={"meta", "email"}),
        "progress": report.model_dump(mode="json", exclude={"rolling_calories"}),
    }
    prompt = (
        "You are the user's personal fitness coach. Using their profile and recent progress, "
        f"answer their message helpfully and concisely.\n\nUser message:\n{message}"
    )
    try:
        return generate_text(prompt, context)
    except UpstreamUnavailableError as exc:
        logger.warning("Coach chat unavailable, using fallback: %s", exc.message)
        return CHAT_FALLBACK
