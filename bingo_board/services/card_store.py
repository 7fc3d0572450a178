"""Operations on the single shared bingo card.

Every mutation is read-modify-write followed by one full-record replace.
Concurrent writers are not serialized: when two requests interleave, the
write that lands last wins and may drop the other's change. Callers re-poll
``get_or_create`` to converge.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence

from bingo_board.constants import TOTAL_CELLS
from bingo_board.errors import ValidationError
from bingo_board.repositories.base import CardBackend
from bingo_board.repositories.record import BingoCard
from bingo_board.services.card_validation import validate_card

logger = logging.getLogger(__name__)


class CardStore:
    """Card use-cases over a pluggable backend."""

    def __init__(self, backend: CardBackend, center_label: str = "") -> None:
        self._backend = backend
        self._center_label = center_label

    @property
    def backend(self) -> CardBackend:
        return self._backend

    def read(self) -> BingoCard | None:
        """Current persisted card, or ``None``. Never creates."""

        return self._backend.read()

    def get_or_create(self) -> BingoCard:
        """Return the card, first persisting a default one if none exists.

        Two first-time callers may both create; both write the same default,
        so the race is harmless.
        """

        card = self._backend.read()
        if card is not None:
            return card

        card = BingoCard.default(self._center_label)
        self._backend.write(card)
        logger.info("Created default bingo card %s", card.id)
        return card

    def save(self, cells: Sequence[str]) -> BingoCard:
        """Replace all cell text, keeping the current marks.

        Raises:
            ValidationError: ``cells`` is not 25 valid cell strings.
        """

        result = validate_card(cells)
        if not result.valid:
            raise ValidationError(str(result.error))

        existing = self._backend.read()
        if existing is None:
            card = BingoCard.build(cells=cells)
        else:
            card = existing.with_cells(cells)

        self._backend.write(card)
        logger.info("Saved bingo card text (%d marks kept)", len(card.marked_cells))
        return card

    def toggle_mark(self, index: int) -> BingoCard:
        """Mark ``index`` if unmarked, unmark it otherwise.

        Toggling twice restores the previous marks. Each applied call flips
        state, so a blind retry of a request that actually succeeded undoes it.

        Raises:
            ValidationError: ``index`` is not an integer in [0, 24].
        """

        if isinstance(index, bool) or not isinstance(index, int) or not 0 <= index < TOTAL_CELLS:
            raise ValidationError(
                f"Invalid cellIndex. Must be a number between 0 and {TOTAL_CELLS - 1}"
            )

        card = self.get_or_create()
        if index in card.marked_cells:
            marks = tuple(i for i in card.marked_cells if i != index)
        else:
            marks = card.marked_cells + (index,)

        card = card.with_marks(marks)
        self._backend.write(card)
        logger.debug("Toggled cell %d; %d cells marked", index, len(marks))
        return card

    def reset_marks(self) -> BingoCard:
        """Clear every mark; cell text is untouched."""

        card = self.get_or_create().with_marks(())
        self._backend.write(card)
        logger.info("Reset all marks on bingo card %s", card.id)
        return card
