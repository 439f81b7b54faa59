# -*- coding: utf-8 -*-

from __future__ import annotations

import unittest
from datetime import datetime, timezone
from unittest import mock

from pulsefit import agent_service
from pulsefit.progress import coach
from pulsefit.recipes import suggestions
from pulsefit.config import settings
from pulsefit.errors import UpstreamUnavailableError
from pulsefit.profiles.models import Profile
from pulsefit.progress.analyzer import analyze_progress
from pulsefit.progress.coach import (
    CHAT_FALLBACK,
    FALLBACK_MOTIVATION,
    coach_recommendations,
    coach_reply,
    nutrition_recommendations,
    workout_recommendations,
)
from pulsefit.recipes.suggestions import (
    DEFAULT_MEALS,
    GENERAL_MEALS,
    default_meal_suggestions,
    parse_meal_suggestions,
    suggest_meals,
)

NOW = datetime(2024, 6, 30, 12, 0, tzinfo=timezone.utc)


def _unavailable(*args, **kwargs):
    raise UpstreamUnavailableError("down")


class TestAgentService(unittest.TestCase):
    def test_missing_api_key_is_unavailable(self) -> None:
        with mock.patch.object(settings, "llm_api_key", None):
            with self.assertRaises(UpstreamUnavailableError):
                agent_service.generate_text("hello")

    def test_generate_text_extracts_answer(self) -> None:
        payload = {"choices": [{"message": {"content": "  Drink water.  "}}]}
        with mock.patch.object(agent_service, "call_agent", return_value=payload) as call:
            self.assertEqual(agent_service.generate_text("tip?", {"steps": 1}), "Drink water.")
        messages = call.call_args[0][0]
        self.assertEqual(messages[0]["role"], "system")
        self.assertIn('"steps": 1', messages[1]["content"])

    def test_empty_answer_is_unavailable(self) -> None:
        payload = {"choices": [{"message": {"content": "   "}}]}
        with mock.patch.object(agent_service, "call_agent", return_value=payload):
            with self.assertRaises(UpstreamUnavailableError):
                agent_service.generate_text("tip?")


class TestMealSuggestions(unittest.TestCase):
    def test_defaults_per_meal_type(self) -> None:
        self.assertEqual(default_meal_suggestions("Breakfast"), DEFAULT_MEALS["breakfast"])
        self.assertEqual(default_meal_suggestions("brunch"), GENERAL_MEALS)

    def test_parse_numbered_lines(self) -> None:
        text = (
            "Here are three ideas:\n"
            "1. Grilled salmon with quinoa and asparagus\n"
            "2) Chickpea curry with brown rice\n"
            "- Tofu stir-fry with vegetables\n"
            "ok\n"
        )
        self.assertEqual(
            parse_meal_suggestions(text),
            [
                "Here are three ideas:",
                "Grilled salmon with quinoa and asparagus",
                "Chickpea curry with brown rice",
                "Tofu stir-fry with vegetables",
            ],
        )

    def test_falls_back_when_unavailable(self) -> None:
        with mock.patch.object(suggestions, "generate_text", side_effect=_unavailable):
            result = suggest_meals(Profile(), "dinner")
        self.assertFalse(result.generated)
        self.assertEqual(result.suggestions, DEFAULT_MEALS["dinner"])

    def test_generated_suggestions(self) -> None:
        with mock.patch.object(
            suggestions,
            "generate_text",
            return_value="1. Overnight oats with chia seeds\n2. Veggie omelette with spinach",
        ):
            result = suggest_meals(Profile(), "breakfast", target_calories=450)
        self.assertTrue(result.generated)
        self.assertEqual(len(result.suggestions), 2)


class TestCoach(unittest.TestCase):
    def setUp(self) -> None:
        self.profile = Profile(
            height_cm=180,
            weight_kg=80,
            date_of_birth=datetime(1990, 1, 1).date(),
            sex="male",
            activity_level="moderate",
            fitness_goals=["weight_loss", "muscle_gain"],
        )
        self.report = analyze_progress(self.profile, [], [], now=NOW)

    def test_workout_tips(self) -> None:
        tips = workout_recommendations(self.profile, self.report)
        self.assertEqual(len(tips), 3)
        self.assertTrue(tips[0].startswith("Try to increase your workout frequency"))
        self.assertIn("HIIT", tips[1])
        self.assertIn("progressive overload", tips[2])

    def test_nutrition_tips_need_data(self) -> None:
        self.assertEqual(nutrition_recommendations(self.profile, self.report), [])

    def test_low_intake_and_protein(self) -> None:
        report = self.report.model_copy(deep=True)
        report.nutrition.average_calories = 1200.0
        report.nutrition.average_protein = 60.0
        tips = nutrition_recommendations(self.profile, report, NOW.date())
        self.assertEqual(
            tips,
            [
                "You're eating below your target calories. Consider adding healthy snacks",
                "Increase your protein intake to support your fitness goals",
            ],
        )

    def test_high_intake(self) -> None:
        report = self.report.model_copy(deep=True)
        report.nutrition.average_calories = 4000.0
        report.nutrition.average_protein = 200.0
        tips = nutrition_recommendations(self.profile, report, NOW.date())
        self.assertEqual(tips, ["You're exceeding your calorie target. Focus on portion control"])

    def test_motivation_falls_back_to_canned_message(self) -> None:
        with mock.patch.object(coach, "generate_text", side_effect=_unavailable):
            result = coach_recommendations(self.profile, self.report)
        self.assertIn(result.motivational_message, FALLBACK_MOTIVATION)
        self.assertIsNotNone(result.goal_adjustments.workout_frequency)

    def test_chat_fallback(self) -> None:
        with mock.patch.object(coach, "generate_text", side_effect=_unavailable):
            self.assertEqual(coach_reply(self.profile, self.report, "How am I doing?"), CHAT_FALLBACK)


if __name__ == "__main__":
    unittest.main()
