"""Fixed properties of the shared 5x5 card."""

from __future__ import annotations

GRID_SIZE = 5
TOTAL_CELLS = GRID_SIZE * GRID_SIZE
MAX_CELL_LENGTH = 35
APPROACHING_LIMIT_LENGTH = 30
CENTER_CELL_INDEX = 12

# There is exactly one card in the whole system.
CARD_ID = "main"
