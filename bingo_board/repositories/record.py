"""The single persisted bingo card."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, replace
from datetime import datetime, timezone

from bingo_board.constants import CARD_ID, CENTER_CELL_INDEX, MAX_CELL_LENGTH, TOTAL_CELLS


def to_millis(value: datetime) -> datetime:
    """Drop sub-millisecond precision; BSON and JS dates cannot hold it."""

    return value.replace(microsecond=value.microsecond // 1000 * 1000)


def utcnow() -> datetime:
    return to_millis(datetime.now(timezone.utc))


@dataclass(frozen=True)
class BingoCard:
    """Immutable snapshot of the shared card.

    ``marked_cells`` keeps the order marks were placed in; it never holds
    duplicates or indices outside the card.
    """

    id: str
    cells: tuple[str, ...]
    marked_cells: tuple[int, ...]
    updated_at: datetime

    @classmethod
    def build(
        cls,
        *,
        cells: Iterable[str],
        marked_cells: Iterable[int] = (),
        updated_at: datetime | None = None,
        card_id: str = CARD_ID,
    ) -> "BingoCard":
        """Construct a card, enforcing the record invariants.

        Raises:
            ValueError: the fields do not describe a well-formed card.
        """

        cells = tuple(cells)
        if len(cells) != TOTAL_CELLS:
            raise ValueError(f"card must have exactly {TOTAL_CELLS} cells, got {len(cells)}")
        for cell in cells:
            if not isinstance(cell, str) or len(cell.strip()) > MAX_CELL_LENGTH:
                raise ValueError(f"invalid cell text: {cell!r}")

        marks = tuple(marked_cells)
        for index in marks:
            if isinstance(index, bool) or not isinstance(index, int) or not 0 <= index < TOTAL_CELLS:
                raise ValueError(f"invalid marked cell index: {index!r}")
        if len(set(marks)) != len(marks):
            raise ValueError("marked cells contain duplicates")

        if updated_at is None:
            updated_at = utcnow()
        elif not isinstance(updated_at, datetime):
            raise ValueError(f"invalid updated_at: {updated_at!r}")
        elif updated_at.tzinfo is None:
            updated_at = updated_at.replace(tzinfo=timezone.utc)
        updated_at = to_millis(updated_at)

        return cls(id=card_id, cells=cells, marked_cells=marks, updated_at=updated_at)

    @classmethod
    def default(cls, center_label: str = "") -> "BingoCard":
        """Fresh card: empty text everywhere (optionally a center label) and no marks."""

        cells = [""] * TOTAL_CELLS
        if center_label:
            cells[CENTER_CELL_INDEX] = center_label
        return cls.build(cells=cells)

    def with_cells(self, cells: Iterable[str]) -> "BingoCard":
        return replace(self, cells=tuple(cells), updated_at=utcnow())

    def with_marks(self, marked_cells: Iterable[int]) -> "BingoCard":
        return replace(self, marked_cells=tuple(marked_cells), updated_at=utcnow())
