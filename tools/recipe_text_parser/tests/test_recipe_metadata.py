#!/usr/bin/env python3

from __future__ import annotations

import sys
import unittest
from pathlib import Path

TOOL_DIR = Path(__file__).resolve().parents[1]
if str(TOOL_DIR) not in sys.path:
    sys.path.insert(0, str(TOOL_DIR))

from ingredient_parser import IngredientItem
from recipe_metadata import RecipeMetadata, extract_recipe_metadata, recipe_search_text
from recipe_text_parser import ParsedRecipe, parse_recipe_text


class ExtractRecipeMetadataTests(unittest.TestCase):
    def test_empty_recipe_defaults_to_zero(self) -> None:
        self.assertEqual(extract_recipe_metadata(ParsedRecipe()), RecipeMetadata())
        self.assertEqual(RecipeMetadata().to_dict(), {"servings": 0, "prepTime": 0, "cookTime": 0})

    def test_values_from_description_and_steps(self) -> None:
        recipe = ParsedRecipe(
            title="Beef Stew",
            description="Serves 4. Prep time: 15 min",
            instructions=("1. Brown the beef.", "2. Cooking time: 90 minutes on low heat."),
        )
        self.assertEqual(extract_recipe_metadata(recipe), RecipeMetadata(servings=4, prep_time=15, cook_time=90))

    def test_alternate_phrasings(self) -> None:
        cases = {
            "Makes 12 muffins": RecipeMetadata(servings=12),
            "About 6 servings": RecipeMetadata(servings=6),
            "Preparation time: 20 minutes": RecipeMetadata(prep_time=20),
            "Prep: 5 mins, Cook: 25 mins": RecipeMetadata(prep_time=5, cook_time=25),
        }
        for description, expected in cases.items():
            with self.subTest(description=description):
                recipe = ParsedRecipe(title="Muffins", description=description)
                self.assertEqual(extract_recipe_metadata(recipe), expected)

    def test_first_pattern_wins(self) -> None:
        recipe = ParsedRecipe(title="Curry", description="Serves 6, or 4 servings as a main")
        self.assertEqual(extract_recipe_metadata(recipe).servings, 6)

    def test_times_without_minutes_are_ignored(self) -> None:
        recipe = ParsedRecipe(title="Roast", description="Cook time: 2 hours")
        self.assertEqual(extract_recipe_metadata(recipe).cook_time, 0)

    def test_ingredients_are_searched(self) -> None:
        recipe = ParsedRecipe(title="Rice", dish_ingredients=(IngredientItem("2", "cups", "Rice (serves 3)"),))
        self.assertIn("2 cups rice (serves 3)", recipe_search_text(recipe))
        self.assertEqual(extract_recipe_metadata(recipe).servings, 3)

    def test_parsed_text(self) -> None:
        text = (
            "Beef Stew\nHearty beef stew, serves 4\nIngredients\n1 lb beef\n"
            "Instructions\nSimmer the beef, cook time: 90 min."
        )
        metadata = extract_recipe_metadata(parse_recipe_text(text))
        self.assertEqual(metadata, RecipeMetadata(servings=4, prep_time=0, cook_time=90))


if __name__ == "__main__":
    unittest.main()
