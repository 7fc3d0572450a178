"""Cell text and whole-card shape checks.

Validation only reports; it never rewrites input. ``truncate_content`` is a
separate convenience for callers that prefer clipping over rejection.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from typing import Any

from bingo_board.constants import APPROACHING_LIMIT_LENGTH, MAX_CELL_LENGTH, TOTAL_CELLS


@dataclass(frozen=True)
class ValidationResult:
    valid: bool
    error: str | None = None


_VALID = ValidationResult(valid=True)


def validate_cell_content(content: Any) -> ValidationResult:
    """Accept any string whose trimmed length is at most MAX_CELL_LENGTH."""

    if not isinstance(content, str):
        return ValidationResult(False, "Cell content must be a string")

    if len(content.strip()) > MAX_CELL_LENGTH:
        return ValidationResult(
            False, f"Cell content exceeds maximum length of {MAX_CELL_LENGTH} characters"
        )

    return _VALID


def validate_card(cells: Any) -> ValidationResult:
    """Check shape (exactly 25 entries) then each cell, stopping at the first failure."""

    # str is a Sequence too, but a card is never a single string.
    if not isinstance(cells, Sequence) or isinstance(cells, (str, bytes)):
        return ValidationResult(False, "Cells must be an array")

    if len(cells) != TOTAL_CELLS:
        return ValidationResult(False, f"Bingo card must have exactly {TOTAL_CELLS} cells")

    for position, cell in enumerate(cells, start=1):
        result = validate_cell_content(cell)
        if not result.valid:
            return ValidationResult(False, f"Cell {position}: {result.error}")

    return _VALID


def character_count(content: str) -> int:
    return len(content.strip())


def is_approaching_limit(content: str) -> bool:
    return character_count(content) >= APPROACHING_LIMIT_LENGTH


def is_at_limit(content: str) -> bool:
    return character_count(content) >= MAX_CELL_LENGTH


def truncate_content(content: str) -> str:
    """Trim whitespace, then clip to MAX_CELL_LENGTH characters."""

    return content.strip()[:MAX_CELL_LENGTH]
