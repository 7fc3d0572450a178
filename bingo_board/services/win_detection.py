"""Win detection against the twelve fixed lines of a 5x5 card.

Cells are addressed row-major (index = row * 5 + col). A card is won when
every index of at least one line is marked.
"""

from __future__ import annotations

from collections.abc import Iterable

from bingo_board.constants import GRID_SIZE

WinningPattern = tuple[int, int, int, int, int]

_ROWS: tuple[WinningPattern, ...] = tuple(
    tuple(row * GRID_SIZE + col for col in range(GRID_SIZE)) for row in range(GRID_SIZE)  # type: ignore[misc]
)
_COLUMNS: tuple[WinningPattern, ...] = tuple(
    tuple(row * GRID_SIZE + col for row in range(GRID_SIZE)) for col in range(GRID_SIZE)  # type: ignore[misc]
)
_DIAGONALS: tuple[WinningPattern, ...] = (
    (0, 6, 12, 18, 24),
    (4, 8, 12, 16, 20),
)

# Declaration order is the tie-break when several lines are complete:
# rows top-to-bottom, columns left-to-right, main diagonal, anti-diagonal.
WINNING_PATTERNS: tuple[WinningPattern, ...] = _ROWS + _COLUMNS + _DIAGONALS


def _marked_set(marked_cells: Iterable[int] | None) -> frozenset[int]:
    if not marked_cells:
        return frozenset()
    return frozenset(marked_cells)


def winning_line(marked_cells: Iterable[int] | None) -> list[int]:
    """Return the first complete line in declaration order, or ``[]``."""

    marked = _marked_set(marked_cells)
    # Fewer than five distinct marks can never complete a line.
    if len(marked) < GRID_SIZE:
        return []

    for pattern in WINNING_PATTERNS:
        if all(index in marked for index in pattern):
            return list(pattern)
    return []


def has_win(marked_cells: Iterable[int] | None) -> bool:
    """True iff some winning line is fully marked. ``None`` counts as no marks."""

    return bool(winning_line(marked_cells))


def bingo_state(marked_cells: Iterable[int] | None) -> dict[str, object]:
    """Summary the board UI polls to decide whether to celebrate."""

    marked = sorted(_marked_set(marked_cells))
    line = winning_line(marked)
    return {"markedCells": marked, "hasWon": bool(line), "winningCells": line}
