from __future__ import annotations

import re

from line_filter import strip_ocr_markers
from parser_config import (
    ACTION_VERBS,
    DONE_TOKEN,
    INSTRUCTION_LEAD_KEYWORDS,
    INSTRUCTION_STARTERS,
    NOTE_BLOCKING_UNIT_TOKENS,
    PROCEDURE_HEADERS,
)

_ACTION_VERB_RE = re.compile(rf"^(?:{'|'.join(ACTION_VERBS)})\b")
_STARTER_RE = re.compile(rf"^(?:{'|'.join(INSTRUCTION_STARTERS)})\b")
_LEAD_KEYWORD_RE = re.compile(rf"^(?:{'|'.join(INSTRUCTION_LEAD_KEYWORDS)})s?\b")
_NUMBERED_RE = re.compile(r"^\d+[.)](?!\d)")
_STEP_NUMBER_RE = re.compile(r"^step\s+\d+", flags=re.IGNORECASE)
_BULLET_RE = re.compile(r"^[•\-*]")

SKIPPED_INSTRUCTION_TOKENS = PROCEDURE_HEADERS | {DONE_TOKEN}


def starts_with_action_verb(line: str) -> bool:
    return _ACTION_VERB_RE.match(line.strip().lower()) is not None


def is_new_instruction_start(line: str) -> bool:
    return _STARTER_RE.match(line.strip().lower()) is not None


def looks_like_instruction_line(line: str) -> bool:
    if _NUMBERED_RE.match(line) or _STEP_NUMBER_RE.match(line) or _BULLET_RE.match(line):
        return True

    lowered = line.strip().lower()
    if _LEAD_KEYWORD_RE.match(lowered):
        return True

    if starts_with_action_verb(lowered):
        has_amount = re.match(r"^\d+", line) is not None
        has_unit = any(token in lowered for token in NOTE_BLOCKING_UNIT_TOKENS)
        return not (has_amount and has_unit)

    return False


def clean_instruction_line(line: str) -> str:
    """Strip "1.", "2)", "Step 3:" and bullet prefixes."""
    cleaned = _NUMBERED_RE.sub("", line)
    cleaned = re.sub(r"^\s*step\s+\d+[.:]?\s*", "", cleaned.strip(), flags=re.IGNORECASE)
    cleaned = re.sub(r"^[•\-*]\s*", "", cleaned.strip())
    return cleaned.strip()


def scrub_instruction(text: str) -> str:
    cleaned = strip_ocr_markers(text)
    if cleaned.lower() == DONE_TOKEN:
        return ""
    return cleaned


def is_likely_new_instruction(previous: str, line: str) -> bool:
    if previous.endswith((".", "!", "?")):
        return True
    if is_new_instruction_start(line):
        return True
    if starts_with_action_verb(line) and len(line) > 5:
        return True
    return line[:1].isupper() and len(line) > 10


def append_or_merge_instruction(instructions: list[str], line: str) -> None:
    """Append ``line`` as a new step, or glue it onto the previous step when it reads as a wrapped tail."""
    if not line:
        return
    if instructions and not is_likely_new_instruction(instructions[-1], line):
        instructions[-1] = f"{instructions[-1]} {line}"
        return
    instructions.append(line)
