"""Line validity heuristics for OCR recipe text.

A line survives when it does not look like scan noise (symbol runs, label
codes, repeated or nonsensical tokens, mostly non-letters) and reads as
something food or cooking related.
"""

from __future__ import annotations

import logging
import re
import string

from parser_config import (
    COMPOUND_FOOD_PHRASES,
    COOKING_ACTION_WORDS,
    FOOD_CONTEXT_EXCEPTIONS,
    FOOD_KEYWORDS,
    GARBAGE_PATTERNS,
    INSTRUCTION_STRUCTURE_KEYWORDS,
    MEASUREMENT_UNITS,
    MIN_LETTER_RATIO,
    MIN_UNIQUE_WORD_RATIO,
    NON_FOOD_KEYWORDS,
    SHORT_MEASUREMENT_UNITS,
)

logger = logging.getLogger(__name__)

_GARBAGE_RES = tuple(re.compile(pattern) for pattern in GARBAGE_PATTERNS)
_SHORT_MEASUREMENT_RE = re.compile(
    rf"\d+\s*(?:{'|'.join(SHORT_MEASUREMENT_UNITS)})",
    flags=re.IGNORECASE,
)
_MEASUREMENT_RE = re.compile(rf"\d+\s*(?:{'|'.join(MEASUREMENT_UNITS)})")
_NON_FOOD_RE = re.compile(rf"\b({'|'.join(re.escape(word) for word in NON_FOOD_KEYWORDS)})(?:s|es)?\b")
_COOKING_ACTION_RE = re.compile(rf"\b(?:{'|'.join(COOKING_ACTION_WORDS)})\b")
_INGREDIENT_SHAPE_RE = re.compile(r"^\d+\s+[a-z]+")


_OCR_MARKER_REPLACEMENTS: list[tuple[str, str]] = [
    (r"^[#*°]+\s*", ""),
    (r"\s*[#*°]+$", ""),
    # Label codes glued to the front of a line ("XE1311/24 Soy sauce").
    (r"^[A-Z]{1,3}\d+/?\d*[#*°]*\s+", ""),
    (r"^[A-Z][#*°]+\s+", ""),
    (r"\s+[A-Z][#*°]+$", ""),
    (r"\s+[A-Za-z][#*°]+\s+", " "),
]


def strip_ocr_markers(text: str) -> str:
    cleaned = text
    for pattern, replacement in _OCR_MARKER_REPLACEMENTS:
        cleaned = re.sub(pattern, replacement, cleaned)
    return cleaned.strip()


def _strip_punctuation(word: str) -> str:
    return word.strip(string.punctuation)


def has_measurement(text: str) -> bool:
    """True when a digit run is followed by a known unit word."""
    return _MEASUREMENT_RE.search(text.lower()) is not None


def non_food_keyword(text: str) -> str | None:
    for match in _NON_FOOD_RE.finditer(text.lower()):
        keyword = match.group(1)
        if keyword not in FOOD_CONTEXT_EXCEPTIONS:
            return keyword
    return None


def is_food_related(text: str) -> bool:
    lowered = text.lower()

    if non_food_keyword(lowered) is not None:
        return False

    if has_measurement(lowered):
        return True
    if any(keyword in lowered for keyword in FOOD_KEYWORDS):
        return True
    if any(phrase in lowered for phrase in COMPOUND_FOOD_PHRASES):
        return True
    if _INGREDIENT_SHAPE_RE.match(lowered):
        return True
    if _COOKING_ACTION_RE.search(lowered):
        return True

    # "Salt", "Bay leaves": short names are given the benefit of the doubt.
    words = lowered.split()
    if words and len(words) <= 2 and all(len(word) >= 3 and re.fullmatch(r"[a-z]+", word) for word in words):
        return True

    return any(lowered.startswith(keyword) or f" {keyword} " in lowered for keyword in INSTRUCTION_STRUCTURE_KEYWORDS)


def _looks_like_gibberish(line: str) -> bool:
    words = [word for word in re.split(r"[ ,]+", line) if word.strip()]
    if len(words) < 3:
        return False

    unique_words = {_strip_punctuation(word.lower()) for word in words}
    if len(unique_words) / len(words) < MIN_UNIQUE_WORD_RATIO:
        return True

    def nonsensical(word: str) -> bool:
        lowered = word.lower()
        if re.search(r"\d+[a-z]{2,}", lowered):
            return True
        return len(lowered) <= 3 and re.fullmatch(r"[a-z]+", lowered) is not None

    if not any(nonsensical(word) for word in words):
        return False

    meaningful = [
        word
        for word in words
        if len(_strip_punctuation(word.lower())) > 3 and re.fullmatch(r"[a-z]+", _strip_punctuation(word.lower()))
    ]
    return len(meaningful) < len(words) // 2


def is_valid_recipe_line(line: str) -> bool:
    if any(pattern.search(line) for pattern in _GARBAGE_RES):
        return False

    if _looks_like_gibberish(line):
        return False

    if not any(char.isalpha() for char in line):
        return _SHORT_MEASUREMENT_RE.search(line) is not None

    visible = [char for char in line if not char.isspace()]
    letters = sum(1 for char in visible if char.isalpha())
    if visible and letters / len(visible) < MIN_LETTER_RATIO:
        return False

    return is_food_related(line)


def normalize_lines(text: str) -> list[str]:
    lines = [line.strip() for line in (text or "").splitlines()]
    kept: list[str] = []
    for line in lines:
        if not line:
            continue
        if not is_valid_recipe_line(line):
            logger.debug(f"Dropping noise line: {line!r}")
            continue
        kept.append(line)
    return kept
