"""Amount / unit / name extraction for a single ingredient line."""

from __future__ import annotations

import re
from dataclasses import dataclass, replace
from typing import Callable

from line_filter import strip_ocr_markers
from parser_config import (
    GLUED_UNIT_ABBREVIATIONS,
    INGREDIENT_UNIT_KEYWORDS,
    TITLE_CASE_STOP_WORDS,
    UNIT_VOCABULARY,
)


@dataclass(frozen=True)
class IngredientItem:
    amount: str
    unit: str
    name: str

    def display_string(self) -> str:
        return " ".join(part for part in (self.amount, self.unit, self.name) if part)

    def with_note(self, note: str) -> IngredientItem:
        return replace(self, name=f"{self.name} ({note})")

    def to_dict(self) -> dict[str, str]:
        return {"amount": self.amount, "unit": self.unit, "name": self.name}


_UNIT_SET = set(UNIT_VOCABULARY)
_UNITS_EXPR = "|".join(UNIT_VOCABULARY)
_AMOUNT_EXPR = r"\d+/\d+|\d+(?:\.\d+)?(?:\s+\d+/\d+)?"

_AMOUNT_UNIT_NAME_RE = re.compile(rf"^({_AMOUNT_EXPR})\s+({_UNITS_EXPR})\s+(.+)$", flags=re.IGNORECASE)
_AMOUNT_NAME_RE = re.compile(rf"^({_AMOUNT_EXPR})\s+(.+)$")
_UNIT_ONLY_RE = re.compile(rf"^({_UNITS_EXPR})(?:\s+of)?\s+(.+)$", flags=re.IGNORECASE)

_MIXED_NUMBER_RE = re.compile(r"^\s*(\d+)\s+(\d+)/(\d+)\s*$")
_SIMPLE_FRACTION_RE = re.compile(r"^\s*(\d+)/(\d+)\s*$")

_INGREDIENT_LINE_PATTERNS = [
    r"\d+\s*(?:tbsp|tsp|cup|cups|oz|lb|g|kg|ml|l)",
    r"\d+\s*(?:tablespoon|teaspoon)",
    r"^\d+",
    r"^[•\-*]",
    r"\d+\s*x\s*",
]


def looks_like_ingredient_line(line: str) -> bool:
    if any(re.search(pattern, line, flags=re.IGNORECASE) for pattern in _INGREDIENT_LINE_PATTERNS):
        return True
    lowered = line.lower()
    return any(keyword in lowered for keyword in INGREDIENT_UNIT_KEYWORDS)


def strip_ingredient_marker(line: str) -> str:
    cleaned = re.sub(r"^[•\-*]\s*", "", line)
    # "2) salt" loses its numbering, "1.5 cups" keeps its decimal.
    cleaned = re.sub(r"^\d+[.)](?!\d)\s*", "", cleaned)
    return cleaned.strip()


def split_glued_units(text: str) -> str:
    """Insert a space between a number and a glued unit: "30ml" -> "30 ml"."""
    normalized = text
    for abbreviation in GLUED_UNIT_ABBREVIATIONS:
        normalized = re.sub(
            rf"(\d+(?:\.\d+)?)({re.escape(abbreviation)})",
            r"\1 \2",
            normalized,
            flags=re.IGNORECASE,
        )
    return normalized


def format_decimal(value: float) -> str:
    if float(value).is_integer():
        return f"{value:.0f}"
    formatted = f"{value:.2f}".rstrip("0")
    return formatted[:-1] if formatted.endswith(".") else formatted


def convert_fraction_to_decimal(text: str) -> str:
    """Resolve "1 1/2" and "1/3" style amounts; anything else is returned trimmed.

    Amounts that cannot be represented as a float are returned trimmed too.
    """
    trimmed = text.strip()

    try:
        mixed = _MIXED_NUMBER_RE.match(trimmed)
        if mixed and int(mixed.group(3)) != 0:
            whole, numerator, denominator = (int(group) for group in mixed.groups())
            return format_decimal(whole + numerator / denominator)

        fraction = _SIMPLE_FRACTION_RE.match(trimmed)
        if fraction and int(fraction.group(2)) != 0:
            numerator, denominator = (int(group) for group in fraction.groups())
            return format_decimal(numerator / denominator)
    except (OverflowError, ValueError):
        return trimmed

    return trimmed


def title_case(text: str) -> str:
    words: list[str] = []
    for word in text.split(" "):
        lowered = word.lower()
        if lowered in TITLE_CASE_STOP_WORDS:
            words.append(lowered)
        else:
            words.append(word[:1].upper() + word[1:].lower())
    return " ".join(words)


def _match_amount_unit_name(text: str) -> IngredientItem | None:
    match = _AMOUNT_UNIT_NAME_RE.match(text)
    if not match:
        return None
    return IngredientItem(
        amount=convert_fraction_to_decimal(match.group(1)),
        unit=match.group(2).strip().lower(),
        name=title_case(match.group(3).strip()),
    )


def _match_amount_name(text: str) -> IngredientItem | None:
    match = _AMOUNT_NAME_RE.match(text)
    if not match:
        return None

    amount = convert_fraction_to_decimal(match.group(1))
    name = match.group(2).strip()
    words = name.split(" ")
    if words[0].lower() in _UNIT_SET:
        return IngredientItem(amount=amount, unit=words[0].lower(), name=title_case(" ".join(words[1:])))
    return IngredientItem(amount=amount, unit="", name=title_case(name))


def _match_unit_only(text: str) -> IngredientItem | None:
    # "pinch of salt" reads as one pinch.
    match = _UNIT_ONLY_RE.match(text)
    if not match:
        return None
    return IngredientItem(amount="1", unit=match.group(1).lower(), name=title_case(match.group(2).strip()))


def _match_bare_name(text: str) -> IngredientItem:
    return IngredientItem(amount="", unit="", name=title_case(text))


_EXTRACTORS: tuple[Callable[[str], IngredientItem | None], ...] = (
    _match_amount_unit_name,
    _match_amount_name,
    _match_unit_only,
    _match_bare_name,
)


def parse_ingredient_item(line: str) -> IngredientItem:
    cleaned = split_glued_units(strip_ocr_markers(strip_ingredient_marker(line)))
    for extractor in _EXTRACTORS:
        item = extractor(cleaned)
        if item is not None:
            return item
    return _match_bare_name(cleaned)
