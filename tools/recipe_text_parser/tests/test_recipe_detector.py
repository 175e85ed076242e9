#!/usr/bin/env python3

from __future__ import annotations

import sys
import unittest
from pathlib import Path

TOOL_DIR = Path(__file__).resolve().parents[1]
if str(TOOL_DIR) not in sys.path:
    sys.path.insert(0, str(TOOL_DIR))

from recipe_detector import looks_like_recipe_text, score_recipe_text

RECIPE_TEXT = (
    "Ingredients:\n"
    "2 cups flour\n"
    "1 tsp salt\n"
    "Instructions\n"
    "Preheat the oven before you start baking.\n"
    "1. Mix the flour and salt.\n"
    "2. Bake for 20 minutes.\n"
    "Serves 4"
)

MEETING_NOTES = (
    "The quarterly meeting covered budget updates, hiring plans and the new office layout. "
    "Everyone agreed to revisit the topic next week after review."
)


class RecipeDetectorTests(unittest.TestCase):
    def test_recipe_text_scores_every_signal(self) -> None:
        self.assertGreater(len(RECIPE_TEXT), 120)
        self.assertEqual(score_recipe_text(RECIPE_TEXT), 11)
        self.assertTrue(looks_like_recipe_text(RECIPE_TEXT))

    def test_unrelated_prose_is_not_a_recipe(self) -> None:
        self.assertGreater(len(MEETING_NOTES), 120)
        self.assertEqual(score_recipe_text(MEETING_NOTES), 0)
        self.assertFalse(looks_like_recipe_text(MEETING_NOTES))

    def test_length_bounds(self) -> None:
        self.assertEqual(score_recipe_text("Ingredients: 2 cups flour"), 0)
        self.assertEqual(score_recipe_text("salt " * 10_001), 0)
        self.assertEqual(score_recipe_text(""), 0)
        self.assertEqual(score_recipe_text(" " * 200), 0)
        self.assertEqual(score_recipe_text(None), 0)

    def test_single_signals_are_graded(self) -> None:
        # One common ingredient word and nothing else.
        text = (
            "We walked along the harbour in the evening and talked about the weather, "
            "the old boats and the town lights for a long while before going home to drink water."
        )
        self.assertGreater(len(text), 120)
        self.assertEqual(score_recipe_text(text), 1)
        self.assertFalse(looks_like_recipe_text(text))


if __name__ == "__main__":
    unittest.main()
