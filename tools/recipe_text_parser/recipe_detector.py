"""Score free text on how much it reads like a recipe.

Used to decide whether captured text is worth parsing at all. Each signal
family adds at most its weight once; ``RECIPE_SCORE_THRESHOLD`` points
make a recipe.
"""

from __future__ import annotations

import logging
import re

logger = logging.getLogger(__name__)

RECIPE_SCORE_THRESHOLD = 2
MIN_TEXT_LENGTH = 121
MAX_TEXT_LENGTH = 49_999

RECIPE_KEYWORDS = (
    "ingredient",
    "instruction",
    "directions",
    "recipe",
    "method",
    "steps",
    "preparation",
    "servings",
    "serves",
    "yield",
    "how to",
    "make",
)

COOKING_VERBS = (
    "preheat",
    "bake",
    "cook",
    "simmer",
    "boil",
    "fry",
    "sauté",
    "saute",
    "roast",
    "mix",
    "combine",
    "add",
    "heat",
    "stir",
    "whisk",
    "beat",
    "fold",
    "knead",
    "roll",
    "season",
    "chop",
    "slice",
    "dice",
    "cut",
    "peel",
    "grate",
    "pour",
    "sprinkle",
    "steam",
    "grill",
    "marinate",
    "brush",
    "glaze",
)

COMMON_INGREDIENTS = (
    "salt",
    "pepper",
    "garlic",
    "onion",
    "butter",
    "oil",
    "flour",
    "sugar",
    "egg",
    "eggs",
    "milk",
    "cheese",
    "chicken",
    "beef",
    "pork",
    "fish",
    "tomato",
    "carrot",
    "potato",
    "water",
    "vinegar",
    "lemon",
    "herb",
    "spice",
    "rice",
    "pasta",
    "noodle",
    "bread",
    "meat",
    "vegetable",
    "fruit",
    "sauce",
    "broth",
    "stock",
    "soy",
    "ginger",
    "scallion",
    "chili",
    "sesame",
)

_MEASUREMENT_RE = re.compile(
    r"\d+\s*(?:cups?|tbsp|tsp|oz|lb|g|kg|ml|l|grams?|ounces?|pounds?|tablespoons?|teaspoons?)",
    flags=re.IGNORECASE,
)
_STEP_RES = (
    re.compile(r"\d+\.\s+[A-Za-z]"),
    re.compile(r"step\s+\d+|step\s+[a-z]+:", flags=re.IGNORECASE),
)
_INGREDIENT_LIST_RES = (
    re.compile(r"ingredients?:", flags=re.IGNORECASE),
    re.compile(r"\d+\s+\w+\s+(?:cup|tbsp|tsp|oz|lb|g|kg|ml|l|gram|ounce|pound)", flags=re.IGNORECASE),
    re.compile(r"^\s*[-•]\s*\w+", flags=re.MULTILINE),
)
_TIME_RES = (
    re.compile(r"(?:prep|cook|preparation|cooking)\s+time", flags=re.IGNORECASE),
    re.compile(r"\d+\s*(?:minutes?|min|hours?|hr)", flags=re.IGNORECASE),
    re.compile(r"serves?\s+\d+|servings?:\s*\d+", flags=re.IGNORECASE),
)
_INGREDIENT_WORD_RES = tuple(
    re.compile(rf"\b{ingredient}\b", flags=re.IGNORECASE) for ingredient in COMMON_INGREDIENTS
)


def _graded(count: int) -> int:
    if count >= 2:
        return 2
    return 1 if count == 1 else 0


def score_recipe_text(text: str | None) -> int:
    if not text or not text.strip():
        return 0
    if not MIN_TEXT_LENGTH <= len(text) <= MAX_TEXT_LENGTH:
        return 0

    lowered = text.lower()
    signals = {
        "keywords": 2 if any(keyword in lowered for keyword in RECIPE_KEYWORDS) else 0,
        "measurements": 2 if _MEASUREMENT_RE.search(text) else 0,
        "verbs": _graded(sum(1 for verb in COOKING_VERBS if verb in lowered)),
        "steps": 1 if any(pattern.search(text) for pattern in _STEP_RES) else 0,
        "ingredient_list": 1 if any(pattern.search(text) for pattern in _INGREDIENT_LIST_RES) else 0,
        "time": 1 if any(pattern.search(text) for pattern in _TIME_RES) else 0,
        "ingredients": _graded(sum(1 for pattern in _INGREDIENT_WORD_RES if pattern.search(text))),
    }
    score = sum(signals.values())
    logger.debug(f"Recipe score {score}: {signals}")
    return score


def looks_like_recipe_text(text: str | None) -> bool:
    return score_recipe_text(text) >= RECIPE_SCORE_THRESHOLD
