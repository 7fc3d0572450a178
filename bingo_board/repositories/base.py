"""Storage contract shared by every card backend."""

from __future__ import annotations

import abc

from bingo_board.repositories.record import BingoCard


class CardBackend(abc.ABC):
    """Reads and fully replaces the one persisted card.

    Implementations raise :class:`bingo_board.errors.PersistenceError` when
    the store cannot be reached or holds a malformed record. A missing
    record is not an error: ``read`` returns ``None``.
    """

    name: str = "abstract"

    @abc.abstractmethod
    def read(self) -> BingoCard | None:
        """Return the stored card, or ``None`` if none has been written yet."""

    @abc.abstractmethod
    def write(self, card: BingoCard) -> None:
        """Replace the stored card with ``card`` in a single write."""

    def close(self) -> None:
        """Release client resources."""
