"""Bingo card routes (controllers). No business logic here."""

from __future__ import annotations

from flask import Blueprint

from bingo_board.auth import admin_required
from bingo_board.routes.deps import get_card_store, json_body
from bingo_board.schemas.bingo_card import BingoCardSchema, CardUpdateSchema, CellToggleSchema
from bingo_board.services.win_detection import bingo_state
from bingo_board.utils.responses import ok

bingo_bp = Blueprint("bingo", __name__)

_card_schema = BingoCardSchema()
_update_schema = CardUpdateSchema()
_toggle_schema = CellToggleSchema()


@bingo_bp.get("/bingo")
def get_card():
    """Fetch the shared card, creating the default one on first access."""

    card = get_card_store().get_or_create()
    return ok(_card_schema.dump(card), no_store=True)


@bingo_bp.put("/bingo")
@admin_required
def save_card():
    """Replace all cell text (admin only). Marks are kept."""

    data = _update_schema.load(json_body())
    card = get_card_store().save(list(data["cells"]))
    return ok(_card_schema.dump(card), no_store=True)


@bingo_bp.post("/bingo")
def toggle_cell():
    """Toggle one cell's mark (anyone)."""

    data = _toggle_schema.load(json_body())
    card = get_card_store().toggle_mark(int(data["cell_index"]))
    return ok(_card_schema.dump(card), no_store=True)


@bingo_bp.delete("/bingo")
@admin_required
def reset_marks():
    """Clear all marks (admin only)."""

    card = get_card_store().reset_marks()
    return ok(_card_schema.dump(card), no_store=True)


@bingo_bp.get("/bingo/state")
def get_state():
    """Current marks plus whether, and on which line, the card is won."""

    card = get_card_store().get_or_create()
    return ok(bingo_state(card.marked_cells), no_store=True)
