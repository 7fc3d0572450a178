"""Centralized error handlers."""

from __future__ import annotations

import logging
from typing import Any

from flask import Flask
from marshmallow import ValidationError as MarshmallowValidationError
from werkzeug.exceptions import HTTPException

from bingo_board.errors import AppError, PersistenceError, ValidationError
from bingo_board.utils.responses import fail

logger = logging.getLogger(__name__)


def first_message(messages: Any) -> str | None:
    """Pull the first human-readable message out of marshmallow's nested errors."""

    if isinstance(messages, str):
        return messages
    if isinstance(messages, dict):
        values = list(messages.values())
    elif isinstance(messages, (list, tuple)):
        values = list(messages)
    else:
        return None
    for value in values:
        found = first_message(value)
        if found:
            return found
    return None


def register_error_handlers(app: Flask) -> None:
    """Register error handlers for the Flask app."""

    @app.errorhandler(AppError)
    def _handle_app_error(exc: AppError):
        if isinstance(exc, PersistenceError):
            # The backend already logged the cause; callers get the generic message.
            logger.warning("Card storage failure: %s", exc.message)
        return fail(exc.code, exc.message, exc.status_code, exc.details)

    @app.errorhandler(MarshmallowValidationError)
    def _handle_schema_error(exc: MarshmallowValidationError):
        # Promote the field message so "Cell 6: ..." reaches the caller verbatim.
        wrapped = ValidationError(
            message=first_message(exc.messages) or "Validation error",
            details=exc.messages,
        )
        return fail(wrapped.code, wrapped.message, wrapped.status_code, wrapped.details)

    @app.errorhandler(HTTPException)
    def _handle_http_exception(exc: HTTPException):
        status = int(getattr(exc, "code", 500) or 500)
        if status == 404:
            return fail("not_found", "Not found", 404)

        return fail(
            "http_error",
            getattr(exc, "description", "HTTP error"),
            status,
            details={"name": getattr(exc, "name", "HTTPException")},
        )

    @app.errorhandler(Exception)
    def _handle_unexpected(exc: Exception):
        logger.exception("Unhandled exception")
        return fail("internal_error", "Internal server error", 500)
