"""Shared-secret admin access.

A successful password check sets a flag in Flask's signed session cookie;
the gated card operations only ask whether that flag is present.
"""

from __future__ import annotations

import hmac
import logging
from collections.abc import Callable
from functools import wraps
from typing import Any, TypeVar

from flask import current_app, session

from bingo_board.errors import AuthorizationError

logger = logging.getLogger(__name__)

SESSION_KEY = "is_admin"

F = TypeVar("F", bound=Callable[..., Any])


def check_admin_password(candidate: str) -> bool:
    """Compare ``candidate`` with ADMIN_PASSWORD in constant time.

    An unset ADMIN_PASSWORD rejects everything.
    """

    expected = str(current_app.config.get("ADMIN_PASSWORD") or "")
    if not expected:
        logger.error("ADMIN_PASSWORD is not set; admin login is disabled")
        return False
    return hmac.compare_digest(candidate.encode("utf-8"), expected.encode("utf-8"))


def login_admin() -> None:
    session.clear()
    session[SESSION_KEY] = True


def logout_admin() -> None:
    session.pop(SESSION_KEY, None)


def is_admin() -> bool:
    return bool(session.get(SESSION_KEY))


def admin_required(view: F) -> F:
    """Reject the request with 401 before the view runs unless the caller is admin."""

    @wraps(view)
    def _wrapped(*args: Any, **kwargs: Any) -> Any:
        if not is_admin():
            raise AuthorizationError("Unauthorized - admin access required")
        return view(*args, **kwargs)

    return _wrapped  # type: ignore[return-value]
