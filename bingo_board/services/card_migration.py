"""Copy the card between backends (e.g. when moving from file to mongo)."""

from __future__ import annotations

import logging

from bingo_board.repositories.base import CardBackend
from bingo_board.repositories.record import BingoCard

logger = logging.getLogger(__name__)


def copy_card(source: CardBackend, target: CardBackend, *, overwrite: bool = False) -> BingoCard | None:
    """Copy the source card to the target unchanged, timestamp included.

    Returns the copied card, or ``None`` when nothing was written: the
    source holds no card, or the target already has one and ``overwrite``
    is off.
    """

    card = source.read()
    if card is None:
        logger.warning("Source %s backend holds no card; nothing to copy", source.name)
        return None

    if not overwrite and target.read() is not None:
        logger.warning("Target %s backend already holds a card; pass overwrite to replace it", target.name)
        return None

    target.write(card)
    logger.info(
        "Copied card %s from %s to %s (%d marks)", card.id, source.name, target.name, len(card.marked_cells)
    )
    return card
