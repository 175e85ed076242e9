"""Servings and prep / cook minutes read back out of a parsed recipe.

Every pattern runs over the lower-cased title, description, steps and
ingredient strings; the first pattern that yields a number wins and a
missing value stays 0.
"""

from __future__ import annotations

import re
from dataclasses import dataclass

from recipe_text_parser import ParsedRecipe

_MINUTES = r"\s*(?:min|minute|mins)"

SERVING_PATTERNS = tuple(
    re.compile(pattern)
    for pattern in (
        r"serves\s+(\d+)",
        r"(\d+)\s+servings",
        r"makes\s+(\d+)",
    )
)
PREP_TIME_PATTERNS = tuple(
    re.compile(pattern)
    for pattern in (
        rf"prep\s+time[:\s]+(\d+){_MINUTES}",
        rf"preparation\s+time[:\s]+(\d+){_MINUTES}",
        rf"prep[:\s]+(\d+){_MINUTES}",
    )
)
COOK_TIME_PATTERNS = tuple(
    re.compile(pattern)
    for pattern in (
        rf"cook\s+time[:\s]+(\d+){_MINUTES}",
        rf"cooking\s+time[:\s]+(\d+){_MINUTES}",
        rf"cook[:\s]+(\d+){_MINUTES}",
    )
)


@dataclass(frozen=True)
class RecipeMetadata:
    servings: int = 0
    prep_time: int = 0
    cook_time: int = 0

    def to_dict(self) -> dict[str, int]:
        return {"servings": self.servings, "prepTime": self.prep_time, "cookTime": self.cook_time}


def _first_number(patterns: tuple[re.Pattern[str], ...], text: str) -> int:
    for pattern in patterns:
        match = pattern.search(text)
        if not match:
            continue
        try:
            return int(match.group(1))
        except ValueError:
            # Digit runs past the int conversion limit fall through to the next pattern.
            continue
    return 0


def recipe_search_text(recipe: ParsedRecipe) -> str:
    parts = [recipe.title, recipe.description, *recipe.instructions]
    parts.extend(item.display_string() for item in recipe.all_ingredients)
    return " ".join(parts).lower()


def extract_recipe_metadata(recipe: ParsedRecipe) -> RecipeMetadata:
    text = recipe_search_text(recipe)
    return RecipeMetadata(
        servings=_first_number(SERVING_PATTERNS, text),
        prep_time=_first_number(PREP_TIME_PATTERNS, text),
        cook_time=_first_number(COOK_TIME_PATTERNS, text),
    )
