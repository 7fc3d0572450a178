"""Flask application package for the shared bingo board."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from dotenv import load_dotenv
from flask import Flask


def create_app(overrides: Mapping[str, Any] | None = None) -> Flask:
    """Application factory.

    Args:
        overrides: config values applied on top of the environment config
            (the test suite points the card backend at a temp directory).

    Returns:
        Configured Flask application.
    """
    load_dotenv()

    from bingo_board.config import DEV_SECRET_KEY, ProductionConfig, get_config
    from bingo_board.error_handlers import register_error_handlers
    from bingo_board.logging_config import configure_logging
    from bingo_board.repositories.factory import build_card_backend
    from bingo_board.routes.auth import auth_bp
    from bingo_board.routes.bingo import bingo_bp
    from bingo_board.routes.health import health_bp
    from bingo_board.services.card_store import CardStore

    config_class = get_config()
    app = Flask(__name__)
    app.config.from_object(config_class)
    if overrides:
        app.config.update(overrides)

    production = config_class is ProductionConfig or str(app.config.get("APP_ENV")).lower() == "production"
    if production and app.config.get("SECRET_KEY") in (None, "", DEV_SECRET_KEY):
        # Admin access is a flag in the signed session cookie; a known key lets anyone forge it.
        raise RuntimeError("SECRET_KEY must be set to a private value in production")

    configure_logging(app)
    register_error_handlers(app)

    backend = build_card_backend(app.config)
    app.extensions["card_store"] = CardStore(
        backend, center_label=str(app.config.get("CARD_CENTER_LABEL") or "")
    )
    app.logger.info("Using %s card backend", backend.name)

    app.register_blueprint(health_bp)
    app.register_blueprint(bingo_bp, url_prefix="/api")
    app.register_blueprint(auth_bp, url_prefix="/api")

    return app
