#!/usr/bin/env python3

from __future__ import annotations

import sys
import unittest
from pathlib import Path

TOOL_DIR = Path(__file__).resolve().parents[1]
if str(TOOL_DIR) not in sys.path:
    sys.path.insert(0, str(TOOL_DIR))

from ocr_cleanup import (
    fix_ocr_character_confusions,
    fix_recipe_specific_ocr_issues,
    improve_text_structure,
    normalize_text,
    prepare_ocr_text,
)
from recipe_text_parser import parse_recipe_text


class OcrCleanupStageTests(unittest.TestCase):
    def test_normalize_text(self) -> None:
        self.assertEqual(normalize_text("  a \r\n b\r c  \n\n"), "a\nb\nc")

    def test_character_confusions(self) -> None:
        self.assertEqual(fix_ocr_character_confusions("h0t pan"), "hOt pan")
        self.assertEqual(fix_ocr_character_confusions("2 0nions"), "2 Onions")
        self.assertEqual(fix_ocr_character_confusions("1ce cream"), "Ice cream")
        self.assertEqual(fix_ocr_character_confusions("1tsp salt and 100g rice"), "1tsp salt and 100g rice")

    def test_recipe_specific_fixes(self) -> None:
        self.assertEqual(fix_recipe_specific_ocr_issues("Ingrediants :"), "ingredients:")
        self.assertEqual(fix_recipe_specific_ocr_issues("2 tablespon garli ,"), "2 tablespoon garlic,")

    def test_improve_text_structure(self) -> None:
        text = "12. chicken wings\n\n30. ml oil\n– 2 onions\n3) Stir well"
        self.assertEqual(improve_text_structure(text), "12 chicken wings\n30 ml oil\n- 2 onions\n3. Stir well")


class PrepareOcrTextTests(unittest.TestCase):
    def test_blank_input_is_returned_unchanged(self) -> None:
        self.assertEqual(prepare_ocr_text("   "), "   ")
        self.assertEqual(prepare_ocr_text(""), "")

    def test_full_pipeline(self) -> None:
        self.assertEqual(prepare_ocr_text("Ingrediants\r\n1tsp salt"), "ingredients\n1tsp salt")

    def test_cleaned_text_parses(self) -> None:
        raw = "Garlic Rice\r\nIngrediants :\r\n2 cups rice\r\n3 cloves garli\r\nInstrucions\r\nCook the rice ."
        recipe = parse_recipe_text(prepare_ocr_text(raw))
        self.assertEqual(recipe.ingredients, ("2 cups Rice", "3 cloves Garlic"))
        self.assertEqual(recipe.instructions, ("1. Cook the rice.",))


if __name__ == "__main__":
    unittest.main()
