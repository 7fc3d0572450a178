"""Admin session routes."""

from __future__ import annotations

import logging

from flask import Blueprint, request

from bingo_board.auth import check_admin_password, is_admin, login_admin, logout_admin
from bingo_board.errors import AuthorizationError
from bingo_board.routes.deps import json_body
from bingo_board.schemas.bingo_card import LoginSchema
from bingo_board.utils.responses import ok

logger = logging.getLogger(__name__)

auth_bp = Blueprint("auth", __name__)

_login_schema = LoginSchema()


@auth_bp.post("/auth/login")
def login():
    data = _login_schema.load(json_body())
    if not check_admin_password(str(data["password"])):
        logger.warning("Failed admin login from %s", request.remote_addr)
        raise AuthorizationError("Invalid password")

    login_admin()
    return ok({"authenticated": True})


@auth_bp.post("/auth/logout")
def logout():
    logout_admin()
    return ok({"authenticated": False})


@auth_bp.get("/auth/session")
def current_session():
    return ok({"authenticated": is_admin()})
