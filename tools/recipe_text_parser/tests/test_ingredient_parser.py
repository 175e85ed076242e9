#!/usr/bin/env python3

from __future__ import annotations

import sys
import unittest
from pathlib import Path

TOOL_DIR = Path(__file__).resolve().parents[1]
if str(TOOL_DIR) not in sys.path:
    sys.path.insert(0, str(TOOL_DIR))

from ingredient_parser import (
    IngredientItem,
    convert_fraction_to_decimal,
    looks_like_ingredient_line,
    parse_ingredient_item,
    split_glued_units,
    strip_ingredient_marker,
    title_case,
)


class ExtractionCascadeTests(unittest.TestCase):
    def test_amount_unit_name(self) -> None:
        self.assertEqual(parse_ingredient_item("30ml soy sauce"), IngredientItem("30", "ml", "Soy Sauce"))
        self.assertEqual(parse_ingredient_item("1 1/2 cups flour"), IngredientItem("1.5", "cups", "Flour"))
        self.assertEqual(parse_ingredient_item("3 Cloves garlic"), IngredientItem("3", "cloves", "Garlic"))

    def test_amount_name(self) -> None:
        self.assertEqual(parse_ingredient_item("2 eggs"), IngredientItem("2", "", "Eggs"))
        self.assertEqual(parse_ingredient_item("2 large onions"), IngredientItem("2", "", "Large Onions"))

    def test_amount_with_unit_but_no_name(self) -> None:
        self.assertEqual(parse_ingredient_item("2 cups"), IngredientItem("2", "cups", ""))

    def test_unit_only_defaults_amount_to_one(self) -> None:
        self.assertEqual(parse_ingredient_item("pinch of salt"), IngredientItem("1", "pinch", "Salt"))

    def test_bare_name(self) -> None:
        self.assertEqual(parse_ingredient_item("salt"), IngredientItem("", "", "Salt"))

    def test_markers_and_decimals(self) -> None:
        self.assertEqual(parse_ingredient_item("- 2 tbsp sugar"), IngredientItem("2", "tbsp", "Sugar"))
        self.assertEqual(parse_ingredient_item("2) salt"), IngredientItem("", "", "Salt"))
        self.assertEqual(parse_ingredient_item("1.5 cups milk"), IngredientItem("1.5", "cups", "Milk"))
        self.assertEqual(parse_ingredient_item("XE1311/24 2 tbsp soy sauce"), IngredientItem("2", "tbsp", "Soy Sauce"))


class AmountFormattingTests(unittest.TestCase):
    def test_fraction_conversion(self) -> None:
        cases = {
            "1/2": "0.5",
            "2/4": "0.5",
            "1/3": "0.33",
            "1 1/2": "1.5",
            "2 1/4": "2.25",
            "4/2": "2",
            "3": "3",
            " 2 ": "2",
        }
        for text, expected in cases.items():
            with self.subTest(text=text):
                self.assertEqual(convert_fraction_to_decimal(text), expected)

    def test_zero_denominator_is_left_alone(self) -> None:
        self.assertEqual(convert_fraction_to_decimal("1/0"), "1/0")
        self.assertEqual(convert_fraction_to_decimal("2 1/0"), "2 1/0")

    def test_amount_too_large_for_float_is_left_alone(self) -> None:
        huge_fraction = "9" * 400 + "/1"
        huge_mixed = "9" * 400 + " 1/2"
        self.assertEqual(convert_fraction_to_decimal(huge_fraction), huge_fraction)
        self.assertEqual(convert_fraction_to_decimal(f" {huge_mixed} "), huge_mixed)
        self.assertEqual(parse_ingredient_item(f"{huge_fraction} cup rice"), IngredientItem(huge_fraction, "cup", "Rice"))

    def test_glued_units_are_split(self) -> None:
        self.assertEqual(split_glued_units("500g beef"), "500 g beef")
        self.assertEqual(split_glued_units("1.5kg pork"), "1.5 kg pork")
        self.assertEqual(split_glued_units("2 tbsp oil"), "2 tbsp oil")

    def test_title_case_keeps_stop_words_lowercase(self) -> None:
        self.assertEqual(title_case("cup of SOY sauce"), "cup of Soy Sauce")
        self.assertEqual(title_case(""), "")


class IngredientItemTests(unittest.TestCase):
    def test_display_string_skips_empty_parts(self) -> None:
        self.assertEqual(IngredientItem("", "", "Salt").display_string(), "Salt")
        self.assertEqual(IngredientItem("2", "", "Eggs").display_string(), "2 Eggs")
        self.assertEqual(IngredientItem("2", "tbsp", "Soy Sauce").display_string(), "2 tbsp Soy Sauce")

    def test_with_note(self) -> None:
        item = IngredientItem("3", "cloves", "Garlic").with_note("minced")
        self.assertEqual(item.name, "Garlic (minced)")
        self.assertEqual(item.to_dict(), {"amount": "3", "unit": "cloves", "name": "Garlic (minced)"})


class LineShapeTests(unittest.TestCase):
    def test_looks_like_ingredient_line(self) -> None:
        self.assertTrue(looks_like_ingredient_line("2 cups flour"))
        self.assertTrue(looks_like_ingredient_line("- butter"))
        self.assertTrue(looks_like_ingredient_line("Sugar, 1 tbsp"))
        self.assertFalse(looks_like_ingredient_line("Salt and pepper to taste"))
        self.assertFalse(looks_like_ingredient_line("Whisk eggs"))

    def test_strip_ingredient_marker(self) -> None:
        self.assertEqual(strip_ingredient_marker("• 2 eggs"), "2 eggs")
        self.assertEqual(strip_ingredient_marker("3. rice"), "rice")
        self.assertEqual(strip_ingredient_marker("1.5 cups rice"), "1.5 cups rice")


if __name__ == "__main__":
    unittest.main()
