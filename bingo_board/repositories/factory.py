"""Select the one card backend a deployment uses, from configuration."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from bingo_board.config import CARD_BACKENDS
from bingo_board.repositories.base import CardBackend


def build_card_backend(config: Mapping[str, Any], backend: str | None = None) -> CardBackend:
    """Build the backend named by ``backend`` (default: ``CARD_BACKEND``).

    Raises:
        ValueError: unknown backend name.
    """

    name = str(backend or config.get("CARD_BACKEND") or "file").lower().strip()
    timeout = float(config.get("STORE_TIMEOUT_SEC", 5.0))

    if name == "file":
        from bingo_board.repositories.file_backend import FileCardBackend

        return FileCardBackend(str(config["CARD_FILE_PATH"]))

    if name == "sql":
        from bingo_board.db import create_app_engine, create_session_factory
        from bingo_board.repositories.sql_backend import SqlCardBackend

        engine = create_app_engine(str(config["DATABASE_URL"]), timeout=timeout)
        return SqlCardBackend(create_session_factory(engine))

    if name == "mongo":
        from bingo_board.repositories.mongo_backend import MongoCardBackend, get_mongo_collection

        client, collection = get_mongo_collection(
            str(config["MONGODB_URI"]), str(config["MONGODB_DB"]), timeout=timeout
        )
        return MongoCardBackend(collection, client=client)

    if name == "s3":
        from bingo_board.repositories.s3_backend import S3CardBackend, create_s3_client

        client = create_s3_client(config.get("AWS_REGION"), timeout=timeout)
        return S3CardBackend(client, str(config.get("S3_BUCKET") or ""), str(config["S3_KEY"]))

    raise ValueError(f"Unknown CARD_BACKEND {name!r}; expected one of {', '.join(CARD_BACKENDS)}")
