"""Card stored as a JSON object in an S3-compatible bucket."""

from __future__ import annotations

import json
import logging
from typing import Any

import boto3
from botocore.config import Config
from botocore.exceptions import BotoCoreError, ClientError
from marshmallow import ValidationError as MarshmallowValidationError

from bingo_board.errors import PersistenceError
from bingo_board.repositories.base import CardBackend
from bingo_board.repositories.record import BingoCard
from bingo_board.schemas.bingo_card import BingoCardSchema

logger = logging.getLogger(__name__)

_schema = BingoCardSchema()
_MISSING_CODES = {"NoSuchKey", "404", "NotFound"}


def create_s3_client(region: str | None = None, timeout: float = 5.0) -> Any:
    """S3 client with bounded timeouts and no automatic retries."""

    config = Config(
        connect_timeout=timeout,
        read_timeout=timeout,
        retries={"max_attempts": 1, "mode": "standard"},
    )
    return boto3.client("s3", region_name=region, config=config)


class S3CardBackend(CardBackend):
    name = "s3"

    def __init__(self, client: Any, bucket: str, key: str) -> None:
        if not bucket:
            raise ValueError("S3_BUCKET is required for the s3 card backend")
        self._client = client
        self._bucket = bucket
        self._key = key

    def read(self) -> BingoCard | None:
        try:
            resp = self._client.get_object(Bucket=self._bucket, Key=self._key)
            raw = resp["Body"].read()
        except ClientError as exc:
            code = str(exc.response.get("Error", {}).get("Code", ""))
            if code in _MISSING_CODES:
                return None
            logger.exception("Failed to read card object s3://%s/%s", self._bucket, self._key)
            raise PersistenceError() from exc
        except BotoCoreError as exc:
            logger.exception("Failed to read card object s3://%s/%s", self._bucket, self._key)
            raise PersistenceError() from exc

        try:
            return _schema.load(json.loads(raw))
        except (ValueError, MarshmallowValidationError) as exc:
            logger.error("Malformed card object s3://%s/%s: %s", self._bucket, self._key, exc)
            raise PersistenceError() from exc

    def write(self, card: BingoCard) -> None:
        body = json.dumps(_schema.dump(card), ensure_ascii=False).encode("utf-8")
        try:
            self._client.put_object(
                Bucket=self._bucket,
                Key=self._key,
                Body=body,
                ContentType="application/json",
                CacheControl="no-store",
            )
        except (BotoCoreError, ClientError) as exc:
            logger.exception("Failed to write card object s3://%s/%s", self._bucket, self._key)
            raise PersistenceError() from exc
