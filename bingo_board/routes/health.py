"""Health check routes."""

from __future__ import annotations

from flask import Blueprint

from bingo_board.routes.deps import get_card_store
from bingo_board.utils.responses import ok

health_bp = Blueprint("health", __name__)


@health_bp.get("/health")
def health_check():
    """Liveness only; does not touch card storage."""

    return ok({"status": "ok", "backend": get_card_store().backend.name})
