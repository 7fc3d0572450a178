"""ORM models."""

from bingo_board.models.bingo_card import BingoCardRow

__all__ = ["BingoCardRow"]
