"""Structure raw (often OCR-extracted) recipe text into a recipe record.

The scan walks normalized lines once, tracking the current section and,
inside ingredients, the current category (marinade / seasoning / dish).
A post pass folds parenthetical and descriptive notes into the preceding
ingredient, buckets ingredients by category and numbers the steps.
Any input yields a record; noise is dropped rather than reported.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass, field
from typing import Any, Callable

from ingredient_parser import IngredientItem, looks_like_ingredient_line, parse_ingredient_item, strip_ingredient_marker
from instruction_parser import (
    SKIPPED_INSTRUCTION_TOKENS,
    append_or_merge_instruction,
    clean_instruction_line,
    looks_like_instruction_line,
    scrub_instruction,
)
from line_filter import has_measurement, is_food_related, is_valid_recipe_line, normalize_lines
from parser_config import (
    CATEGORIES,
    DEFAULT_CATEGORY,
    DONE_TOKEN,
    INGREDIENT_HEADER_TOKENS,
    INSTRUCTION_HEADER_TOKENS,
    MARINADE_HEADERS,
    MIN_DESCRIPTION_LENGTH,
    MIN_FALLBACK_TITLE_LENGTH,
    NOTE_ACTION_WORDS,
    NOTE_BLOCKING_UNIT_TOKENS,
    PARENTHETICAL_BLOCKING_UNIT_TOKENS,
    PROCEDURE_HEADERS,
    SEASONING_HEADER_CJK,
    SEASONING_HEADERS,
    TITLE_HINT_TOKENS,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ParsedRecipe:
    title: str = ""
    description: str = ""
    # Formatted "<amount> <unit> <name>" strings, marinade then seasoning then dish.
    ingredients: tuple[str, ...] = ()
    marinade_ingredients: tuple[IngredientItem, ...] = ()
    seasoning_ingredients: tuple[IngredientItem, ...] = ()
    dish_ingredients: tuple[IngredientItem, ...] = ()
    instructions: tuple[str, ...] = ()

    @property
    def all_ingredients(self) -> tuple[IngredientItem, ...]:
        return self.marinade_ingredients + self.seasoning_ingredients + self.dish_ingredients

    def to_dict(self) -> dict[str, Any]:
        return {
            "title": self.title,
            "description": self.description,
            "ingredients": list(self.ingredients),
            "marinadeIngredients": [item.to_dict() for item in self.marinade_ingredients],
            "seasoningIngredients": [item.to_dict() for item in self.seasoning_ingredients],
            "dishIngredients": [item.to_dict() for item in self.dish_ingredients],
            "instructions": list(self.instructions),
        }


@dataclass
class _ScanState:
    section: str = "unknown"
    category: str = DEFAULT_CATEGORY
    title: str = ""
    description_lines: list[str] = field(default_factory=list)
    ingredient_lines: list[tuple[str, str]] = field(default_factory=list)
    instructions: list[str] = field(default_factory=list)

    def enter(self, section: str, line: str) -> None:
        if section != self.section:
            logger.debug(f"Section {self.section} -> {section} at {line!r}")
        self.section = section

    def add_ingredient(self, line: str) -> None:
        self.ingredient_lines.append((strip_ingredient_marker(line), self.category))

    def add_instruction(self, line: str) -> None:
        cleaned = clean_instruction_line(line)
        if cleaned:
            self.instructions.append(cleaned)


def _is_description_text(line: str) -> bool:
    return len(line) > MIN_DESCRIPTION_LENGTH and any(char.isalpha() for char in line)


def _is_category_header(line: str) -> bool:
    lowered = line.strip().lower()
    return lowered in MARINADE_HEADERS or lowered in SEASONING_HEADERS or SEASONING_HEADER_CJK in lowered


def _apply_header_rules(state: _ScanState, line: str) -> bool:
    """Handle section and category headers. Returns True when the line is consumed."""
    lowered = line.lower()
    key = lowered.strip()

    if key in PROCEDURE_HEADERS:
        state.enter("instructions", line)
        return True

    if key in MARINADE_HEADERS:
        if state.section == "ingredients":
            state.category = "marinade"
        return True

    if key in SEASONING_HEADERS or SEASONING_HEADER_CJK in lowered:
        if state.section == "ingredients":
            state.category = "seasoning"
        return True

    if key == DONE_TOKEN:
        return True

    if any(token in lowered for token in INGREDIENT_HEADER_TOKENS):
        state.enter("ingredients", line)
        state.category = DEFAULT_CATEGORY
        return True

    if any(token in lowered for token in INSTRUCTION_HEADER_TOKENS):
        state.enter("instructions", line)
        return True

    if not state.title and any(token in lowered for token in TITLE_HINT_TOKENS):
        state.enter("title", line)

    return False


def _scan_unknown(state: _ScanState, index: int, line: str) -> None:
    if index == 0:
        # The first line is the title even when it reads like prose.
        state.title = line
        if len(line) < 100 and (line == line.upper() or len(line) > 3):
            state.enter("title", line)
        else:
            state.enter("description", line)
        return

    if looks_like_ingredient_line(line):
        state.enter("ingredients", line)
        state.add_ingredient(line)
    elif looks_like_instruction_line(line):
        state.enter("instructions", line)
        state.add_instruction(line)
    elif _is_description_text(line):
        state.description_lines.append(line)


def _scan_title(state: _ScanState, index: int, line: str) -> None:
    if not state.title:
        state.title = line
        return
    state.description_lines.append(line)
    state.enter("description", line)


def _scan_description(state: _ScanState, index: int, line: str) -> None:
    if looks_like_instruction_line(line):
        state.enter("instructions", line)
        state.add_instruction(line)
    elif looks_like_ingredient_line(line):
        state.enter("ingredients", line)
        state.add_ingredient(line)
    elif _is_description_text(line):
        state.description_lines.append(line)


def _scan_ingredients(state: _ScanState, index: int, line: str) -> None:
    if looks_like_instruction_line(line):
        state.enter("instructions", line)
        state.add_instruction(line)
        return

    # A stray blurb right under the header is description, not an ingredient.
    if not looks_like_ingredient_line(line) and not state.description_lines and not state.ingredient_lines:
        state.description_lines.append(line)
        return

    state.add_ingredient(line)


def _scan_instructions(state: _ScanState, index: int, line: str) -> None:
    if line.strip().lower() in SKIPPED_INSTRUCTION_TOKENS:
        return
    append_or_merge_instruction(state.instructions, clean_instruction_line(line))


_SECTION_HANDLERS: dict[str, Callable[[_ScanState, int, str], None]] = {
    "unknown": _scan_unknown,
    "title": _scan_title,
    "description": _scan_description,
    "ingredients": _scan_ingredients,
    "instructions": _scan_instructions,
}


def _ingredient_note(line: str) -> str | None:
    """Return the note text when ``line`` annotates the previous ingredient."""
    lowered = line.lower()
    has_leading_digit = re.match(r"^\d+", line) is not None
    if has_leading_digit:
        return None

    if line.startswith("(") and line.endswith(")"):
        if not any(token in lowered for token in PARENTHETICAL_BLOCKING_UNIT_TOKENS):
            return line[1:-1]

    # Unit tokens match as substrings, so any "g" or "l" blocks a note ("Diced" passes, "Sliced" does not).
    if any(token in lowered for token in NOTE_BLOCKING_UNIT_TOKENS):
        return None
    if any(word in lowered for word in NOTE_ACTION_WORDS):
        return line
    return None


def _bucket_ingredients(ingredient_lines: list[tuple[str, str]]) -> dict[str, list[IngredientItem]]:
    buckets: dict[str, list[IngredientItem]] = {category: [] for category in CATEGORIES}
    previous_category: str | None = None

    for raw_line, category in ingredient_lines:
        line = raw_line.strip()
        if not line or not is_valid_recipe_line(line) or _is_category_header(line):
            continue

        note = _ingredient_note(line)
        if note is not None and previous_category is not None:
            bucket = buckets[previous_category]
            bucket[-1] = bucket[-1].with_note(note)
            continue

        item = parse_ingredient_item(line)
        if not item.name.strip():
            previous_category = None
            continue

        if has_measurement(line) or is_food_related(item.name) or is_food_related(line):
            buckets[category].append(item)
            previous_category = category
        else:
            logger.debug(f"Dropping non-food ingredient candidate: {line!r}")
            previous_category = None

    return buckets


def _clean_title(title: str) -> str:
    cleaned = re.sub(r"^[#*]+\s*", "", title)
    cleaned = re.sub(r"\s*[#*]+$", "", cleaned)
    return cleaned.strip()


def _number_instructions(instructions: list[str]) -> tuple[str, ...]:
    steps: list[str] = []
    for instruction in instructions:
        if not instruction.strip() or not is_valid_recipe_line(instruction):
            continue
        text = scrub_instruction(instruction)
        if not text or text.lower() == DONE_TOKEN:
            continue
        steps.append(text)
    return tuple(f"{index}. {text}" for index, text in enumerate(steps, start=1))


def parse_recipe_text(text: str | None) -> ParsedRecipe:
    if not isinstance(text, str):
        text = "" if text is None else str(text)

    lines = normalize_lines(text)
    state = _ScanState()
    for index, line in enumerate(lines):
        if _apply_header_rules(state, line):
            continue
        _SECTION_HANDLERS[state.section](state, index, line)

    title = state.title
    if not title:
        title = next((line for line in lines if len(line) > MIN_FALLBACK_TITLE_LENGTH), "")

    description = " ".join(line for line in state.description_lines if is_valid_recipe_line(line)).strip()
    buckets = _bucket_ingredients(state.ingredient_lines)
    all_items = buckets["marinade"] + buckets["seasoning"] + buckets["dish"]

    return ParsedRecipe(
        title=_clean_title(title),
        description=description,
        ingredients=tuple(item.display_string() for item in all_items),
        marinade_ingredients=tuple(buckets["marinade"]),
        seasoning_ingredients=tuple(buckets["seasoning"]),
        dish_ingredients=tuple(buckets["dish"]),
        instructions=_number_instructions(state.instructions),
    )
