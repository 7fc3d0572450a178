"""Card stored as a single row in a relational database."""

from __future__ import annotations

import logging

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, sessionmaker

from bingo_board.constants import CARD_ID
from bingo_board.errors import PersistenceError
from bingo_board.models.bingo_card import BingoCardRow
from bingo_board.repositories.base import CardBackend
from bingo_board.repositories.record import BingoCard

logger = logging.getLogger(__name__)


class SqlCardBackend(CardBackend):
    name = "sql"

    def __init__(self, session_factory: sessionmaker[Session], card_id: str = CARD_ID) -> None:
        self._session_factory = session_factory
        self._card_id = card_id

    def read(self) -> BingoCard | None:
        try:
            with self._session_factory() as session:
                row = session.get(BingoCardRow, self._card_id)
        except SQLAlchemyError as exc:
            logger.exception("Failed to read card row %s", self._card_id)
            raise PersistenceError() from exc

        if row is None:
            return None

        try:
            return BingoCard.build(
                card_id=row.id,
                cells=row.cells or [],
                marked_cells=row.marked_cells or [],
                updated_at=row.updated_at,
            )
        except ValueError as exc:
            logger.error("Malformed card row %s: %s", self._card_id, exc)
            raise PersistenceError() from exc

    def write(self, card: BingoCard) -> None:
        row = BingoCardRow(
            id=card.id,
            cells=list(card.cells),
            marked_cells=list(card.marked_cells),
            updated_at=card.updated_at,
        )
        try:
            with self._session_factory.begin() as session:
                session.merge(row)
        except SQLAlchemyError as exc:
            logger.exception("Failed to write card row %s", card.id)
            raise PersistenceError() from exc

    def close(self) -> None:
        bind = self._session_factory.kw.get("bind")
        if bind is not None:
            bind.dispose()
