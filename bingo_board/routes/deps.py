"""Shared route dependencies."""

from __future__ import annotations

from typing import Any

from flask import current_app, request

from bingo_board.errors import ValidationError
from bingo_board.services.card_store import CardStore


def get_card_store() -> CardStore:
    """The store built for this app by the factory."""

    store: CardStore | None = current_app.extensions.get("card_store")
    if store is None:
        raise RuntimeError("Card store not initialized")
    return store


def json_body() -> Any:
    """Parsed JSON body; a missing or unparsable body is a validation error."""

    payload = request.get_json(silent=True)
    if payload is None:
        raise ValidationError("Invalid JSON body")
    return payload
