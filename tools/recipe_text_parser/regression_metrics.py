#!/usr/bin/env python3
"""Regression harness for end-to-end recipe text parsing.

Each JSON fixture carries raw text and the expected title, per-category
ingredient strings and numbered instructions. The harness parses the text
and scores exact matches, missed lines and leaked garbage.
"""

from __future__ import annotations

import argparse
import json
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from parser_config import CATEGORIES, DEFAULT_REGRESSION_DIR
from recipe_text_parser import ParsedRecipe, parse_recipe_text

MIN_EXACT_MATCH_RATE = 0.9


@dataclass
class CaseResult:
    name: str
    exact_match: bool
    ingredient_misses: int
    ingredient_expected: int
    instruction_misses: int
    instruction_expected: int
    garbage_leaks: int


def _normalize(text: str) -> str:
    return " ".join(text.split()).lower()


def _misses(expected: list[str], actual: list[str]) -> int:
    actual_set = {_normalize(item) for item in actual}
    return sum(1 for item in expected if _normalize(item) not in actual_set)


def _output_lines(recipe: ParsedRecipe) -> list[str]:
    return [recipe.title, recipe.description, *recipe.ingredients, *recipe.instructions]


def score_case(payload: dict[str, Any]) -> CaseResult:
    expected = payload["expected"]
    recipe = parse_recipe_text(str(payload["text"]))

    actual_by_category = {
        category: [item.display_string() for item in getattr(recipe, f"{category}_ingredients")]
        for category in CATEGORIES
    }
    expected_by_category = {category: list(expected.get(category, [])) for category in CATEGORIES}
    expected_instructions = list(expected.get("instructions", []))

    exact_match = recipe.title == expected.get("title", "")
    exact_match = exact_match and all(
        actual_by_category[category] == expected_by_category[category] for category in CATEGORIES
    )
    exact_match = exact_match and list(recipe.instructions) == expected_instructions
    if "description" in expected:
        exact_match = exact_match and recipe.description == expected["description"]

    ingredient_misses = sum(
        _misses(expected_by_category[category], actual_by_category[category]) for category in CATEGORIES
    )
    ingredient_expected = sum(len(items) for items in expected_by_category.values())

    output_blob = "\n".join(_output_lines(recipe))
    garbage_leaks = sum(1 for fragment in payload.get("must_not_contain", []) if fragment in output_blob)

    return CaseResult(
        name=str(payload.get("name", "unnamed")),
        exact_match=exact_match,
        ingredient_misses=ingredient_misses,
        ingredient_expected=ingredient_expected,
        instruction_misses=_misses(expected_instructions, list(recipe.instructions)),
        instruction_expected=len(expected_instructions),
        garbage_leaks=garbage_leaks,
    )


def build_report(results: list[CaseResult]) -> dict[str, Any]:
    ingredient_expected = sum(result.ingredient_expected for result in results)
    instruction_expected = sum(result.instruction_expected for result in results)
    return {
        "exact_match_rate": sum(1 for result in results if result.exact_match) / len(results),
        "ingredient_miss_rate": sum(result.ingredient_misses for result in results) / max(1, ingredient_expected),
        "instruction_miss_rate": sum(result.instruction_misses for result in results) / max(1, instruction_expected),
        "garbage_leak_count": sum(result.garbage_leaks for result in results),
        "fixture_count": len(results),
    }


def main() -> int:
    parser = argparse.ArgumentParser(description="Run recipe text parser regression metrics")
    parser.add_argument("--regression-dir", type=Path, default=DEFAULT_REGRESSION_DIR)
    parser.add_argument("--report", type=Path, default=None)
    parser.add_argument("--skip-threshold-check", action="store_true")
    args = parser.parse_args()

    fixtures = sorted(args.regression_dir.glob("*.json"))
    if not fixtures:
        raise SystemExit("No regression fixtures found")

    results: list[CaseResult] = []
    for fixture in fixtures:
        payload = json.loads(fixture.read_text(encoding="utf-8"))
        result = score_case(payload)
        results.append(result)
        print(
            f"{result.name}: exact_match={'PASS' if result.exact_match else 'FAIL'} "
            f"ingredient_misses={result.ingredient_misses} "
            f"instruction_misses={result.instruction_misses} "
            f"garbage_leaks={result.garbage_leaks}"
        )

    report = build_report(results)

    print("REGRESSION METRICS")
    print(json.dumps(report, indent=2))

    if args.report is not None:
        args.report.parent.mkdir(parents=True, exist_ok=True)
        args.report.write_text(json.dumps(report, indent=2) + "\n", encoding="utf-8")

    if args.skip_threshold_check:
        return 0
    return 0 if report["garbage_leak_count"] == 0 and report["exact_match_rate"] >= MIN_EXACT_MATCH_RATE else 1


if __name__ == "__main__":
    raise SystemExit(main())
