"""Card stored as a JSON document on local disk."""

from __future__ import annotations

import json
import logging
import os
import tempfile
from pathlib import Path

from marshmallow import ValidationError as MarshmallowValidationError

from bingo_board.errors import PersistenceError
from bingo_board.repositories.base import CardBackend
from bingo_board.repositories.record import BingoCard
from bingo_board.schemas.bingo_card import BingoCardSchema

logger = logging.getLogger(__name__)

_schema = BingoCardSchema()


class FileCardBackend(CardBackend):
    name = "file"

    def __init__(self, path: str | os.PathLike[str]) -> None:
        self._path = Path(path)

    @property
    def path(self) -> Path:
        return self._path

    def read(self) -> BingoCard | None:
        try:
            raw = self._path.read_text(encoding="utf-8")
        except FileNotFoundError:
            return None
        except OSError as exc:
            logger.exception("Failed to read card file %s", self._path)
            raise PersistenceError() from exc

        try:
            return _schema.load(json.loads(raw))
        except (ValueError, MarshmallowValidationError) as exc:
            logger.error("Malformed card record in %s: %s", self._path, exc)
            raise PersistenceError() from exc

    def write(self, card: BingoCard) -> None:
        payload = json.dumps(_schema.dump(card), ensure_ascii=False, indent=2)
        try:
            self._path.parent.mkdir(parents=True, exist_ok=True)
            # Write beside the target then rename, so readers never see half a file.
            fd, tmp_name = tempfile.mkstemp(prefix=".bingo-card-", suffix=".tmp", dir=self._path.parent)
            try:
                with os.fdopen(fd, "w", encoding="utf-8") as fh:
                    fh.write(payload)
                os.replace(tmp_name, self._path)
            except BaseException:
                Path(tmp_name).unlink(missing_ok=True)
                raise
        except OSError as exc:
            logger.exception("Failed to write card file %s", self._path)
            raise PersistenceError() from exc
