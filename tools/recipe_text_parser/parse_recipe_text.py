#!/usr/bin/env python3
"""Parse a captured recipe text file and print the structured result."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path

from ocr_cleanup import prepare_ocr_text
from parser_config import CATEGORIES
from recipe_detector import score_recipe_text
from recipe_metadata import RecipeMetadata, extract_recipe_metadata
from recipe_text_parser import ParsedRecipe, parse_recipe_text


def _read_input(source: str) -> str:
    if source == "-":
        return sys.stdin.read()
    path = Path(source)
    if not path.is_file():
        raise SystemExit(f"Input file not found: {path}")
    return path.read_text(encoding="utf-8")


def _print_report(recipe: ParsedRecipe, metadata: RecipeMetadata, score: int) -> None:
    print("PARSE REPORT")
    print(f"Title: {recipe.title}")
    print(f"Description: {recipe.description}")
    print(f"Servings: {metadata.servings}")
    print(f"Prep time: {metadata.prep_time} min")
    print(f"Cook time: {metadata.cook_time} min")
    for category in CATEGORIES:
        items = getattr(recipe, f"{category}_ingredients")
        print(f"{category.capitalize()} ingredients ({len(items)}):")
        for item in items:
            print(f"  - {item.display_string()}")
    print(f"Instructions ({len(recipe.instructions)}):")
    for step in recipe.instructions:
        print(f"  {step}")
    print(f"Recipe score: {score}")


def main() -> int:
    parser = argparse.ArgumentParser(description="Parse OCR recipe text into a structured recipe")
    parser.add_argument("input", nargs="?", default="-", help="UTF-8 text file, or - for stdin")
    parser.add_argument("--clean-ocr", action="store_true", help="Apply OCR clean-up before parsing")
    parser.add_argument("--json", action="store_true", help="Print the parsed recipe as JSON")
    parser.add_argument("--report", type=Path, default=None, help="Also write the parsed recipe JSON here")
    parser.add_argument("--verbose", action="store_true", help="Log dropped lines and section changes")
    args = parser.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        handlers=[logging.StreamHandler(sys.stderr)],
    )

    text = _read_input(args.input)
    if args.clean_ocr:
        text = prepare_ocr_text(text)

    recipe = parse_recipe_text(text)
    metadata = extract_recipe_metadata(recipe)
    payload = recipe.to_dict()
    payload["metadata"] = metadata.to_dict()

    if args.json:
        print(json.dumps(payload, indent=2, ensure_ascii=False))
    else:
        _print_report(recipe, metadata, score_recipe_text(text))

    if args.report is not None:
        args.report.parent.mkdir(parents=True, exist_ok=True)
        args.report.write_text(json.dumps(payload, indent=2, ensure_ascii=False) + "\n", encoding="utf-8")

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
