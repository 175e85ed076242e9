"""Deterministic clean-up of raw OCR text before it is parsed.

Nothing here is applied by ``parse_recipe_text``; callers opt in with
``prepare_ocr_text``.
"""

from __future__ import annotations

import logging
import re
from functools import partial

from parser_config import MEASUREMENT_UNITS, UNIT_VOCABULARY

logger = logging.getLogger(__name__)

_UNIT_WORDS = set(UNIT_VOCABULARY)

# Letter-digit confusions: "h0t" -> "hOt", "1ce" -> "Ice".
_CONFUSIONS: list[tuple[re.Pattern[str], str]] = [
    (re.compile(r"\b([A-Za-z])0([A-Za-z])\b"), "O"),
    (re.compile(r"\b0([a-z]{2,})\b"), "O"),
    (re.compile(r"\b([A-Za-z])1([A-Za-z])\b"), "I"),
    (re.compile(r"\b1([a-z]{2,})\b"), "I"),
]

RECIPE_CORRECTIONS = {
    "ingrediant": "ingredient",
    "ingrediants": "ingredients",
    "instrucion": "instruction",
    "instrucions": "instructions",
    "tablespon": "tablespoon",
    "teaspon": "teaspoon",
    "garli": "garlic",
}

_CORRECTION_RES = [
    (re.compile(rf"\b{wrong}\b", flags=re.IGNORECASE), correct) for wrong, correct in RECIPE_CORRECTIONS.items()
]

_LONG_UNIT_NAMES = ("gram", "kilogram", "ounce", "pound", "milliliter", "liter")
_INGREDIENT_MEASUREMENT_RE = re.compile(
    rf"\d+\s*(?:{'|'.join(MEASUREMENT_UNITS + _LONG_UNIT_NAMES)})",
    flags=re.IGNORECASE,
)
_INGREDIENT_HINTS = (
    "chicken",
    "beef",
    "pork",
    "fish",
    "garlic",
    "onion",
    "tomato",
    "pepper",
    "salt",
    "sugar",
    "oil",
    "butter",
    "flour",
    "rice",
    "noodle",
    "vegetable",
    "herb",
    "spice",
)
_NUMBER_PERIOD_RE = re.compile(r"^([–\-•]?\s*)(\d+)\.\s+")
_NUMBER_PERIOD_UNIT_RE = re.compile(
    r"(\d+)\.\s+(ml|kg|g|l|tsp|tbsp|oz|lb|cup|cups|tablespoon|teaspoon|gr|gram|grams)\b",
    flags=re.IGNORECASE,
)
_LONG_DASH_RE = re.compile(r"^[–—]\s*")
_LEADING_NUMBER_RE = re.compile(r"^(\d+)(.*)$")


def normalize_text(text: str) -> str:
    normalized = text.replace("\r\n", "\n").replace("\r", "\n")
    return "\n".join(line.strip() for line in normalized.split("\n")).strip()


def _replace_confusion(match: re.Match[str], letter: str) -> str:
    groups = match.groups()
    if len(groups) == 2:
        return f"{groups[0]}{letter}{groups[1]}"
    # "0ml" and "1tsp" are glued amounts, not misread words.
    if groups[0].lower() in _UNIT_WORDS:
        return match.group(0)
    return f"{letter}{groups[0]}"


def fix_ocr_character_confusions(text: str) -> str:
    fixed = text
    for pattern, letter in _CONFUSIONS:
        fixed = pattern.sub(partial(_replace_confusion, letter=letter), fixed)
    return fixed


def fix_recipe_specific_ocr_issues(text: str) -> str:
    fixed = text
    for pattern, correct in _CORRECTION_RES:
        fixed = pattern.sub(correct, fixed)
    return fixed.replace(" ,", ",").replace(" .", ".").replace(" :", ":")


def is_likely_ingredient_line(line: str) -> bool:
    if _INGREDIENT_MEASUREMENT_RE.search(line):
        return True
    lowered = line.lower()
    return any(hint in lowered for hint in _INGREDIENT_HINTS)


def improve_text_structure(text: str) -> str:
    structured: list[str] = []
    for raw_line in text.split("\n"):
        line = raw_line.strip()
        if not line:
            continue

        if is_likely_ingredient_line(line):
            line = _NUMBER_PERIOD_RE.sub(r"\1\2 ", line)
            line = _NUMBER_PERIOD_UNIT_RE.sub(r"\1 \2", line)
            line = _LONG_DASH_RE.sub("- ", line)
        else:
            match = _LEADING_NUMBER_RE.match(line)
            if match:
                rest = match.group(2).lstrip(". )")
                if rest:
                    line = f"{match.group(1)}. {rest}"

        structured.append(line)
    return "\n".join(structured)


def prepare_ocr_text(raw: str) -> str:
    """Run every clean-up stage; fall back to ``raw`` if a stage empties the text."""
    if not raw or not raw.strip():
        return raw

    text = raw
    stages = (
        normalize_text,
        fix_ocr_character_confusions,
        fix_recipe_specific_ocr_issues,
        improve_text_structure,
    )
    for stage in stages:
        text = stage(text)
        if not text.strip():
            logger.warning(f"OCR clean-up stage {stage.__name__} removed all text; using raw text")
            return raw
    return text
