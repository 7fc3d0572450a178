"""Bingo card ORM model.

One row, keyed by the fixed card id. Cells and marks are JSON arrays so a
save or toggle is a single-row replace.
"""

from __future__ import annotations

from datetime import datetime

from sqlalchemy import JSON, DateTime, String
from sqlalchemy.orm import Mapped, mapped_column

from bingo_board.models.base import Base


class BingoCardRow(Base):
    __tablename__ = "bingo_cards"

    id: Mapped[str] = mapped_column(String(32), primary_key=True)
    cells: Mapped[list[str]] = mapped_column(JSON, nullable=False)
    marked_cells: Mapped[list[int]] = mapped_column(JSON, nullable=False, default=list)
    updated_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False)
