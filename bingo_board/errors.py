"""Custom exceptions for centralized error handling."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass
class AppError(Exception):
    """Base application error."""

    code: str
    message: str
    status_code: int
    details: Any | None = None


class ValidationError(AppError):
    """Malformed input to save or toggle."""

    def __init__(self, message: str = "Validation error", details: Any | None = None) -> None:
        super().__init__(code="validation_error", message=message, status_code=400, details=details)


class AuthorizationError(AppError):
    """Admin-gated operation attempted without an admin session."""

    def __init__(self, message: str = "Unauthorized", details: Any | None = None) -> None:
        super().__init__(code="unauthorized", message=message, status_code=401, details=details)


class PersistenceError(AppError):
    """Backend unavailable, malformed stored record, or failed write.

    The message is what callers see; backend detail belongs in the logs only.
    """

    def __init__(self, message: str = "Card storage is unavailable", details: Any | None = None) -> None:
        super().__init__(code="persistence_error", message=message, status_code=503, details=details)
