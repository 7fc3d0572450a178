"""Copy the bingo card from one storage backend to another.

Both backends are configured from the usual environment variables
(CARD_FILE_PATH, DATABASE_URL, MONGODB_URI/MONGODB_DB, S3_BUCKET/S3_KEY).

Usage:
  python scripts/migrate_card.py --source file --target mongo
  python scripts/migrate_card.py --source sql --target s3 --overwrite

Notes:
- The source card is never modified or deleted.
- Without --overwrite an existing target card is left alone.
"""

from __future__ import annotations

import argparse
import logging
import pathlib
import sys
from collections.abc import Sequence

from dotenv import load_dotenv

PROJECT_ROOT = pathlib.Path(__file__).resolve().parents[1]
sys.path.insert(0, str(PROJECT_ROOT))

# Config values are read at import time, so .env must be loaded first.
load_dotenv()

from bingo_board.config import CARD_BACKENDS, get_config  # noqa: E402
from bingo_board.errors import PersistenceError  # noqa: E402
from bingo_board.repositories.factory import build_card_backend  # noqa: E402
from bingo_board.services.card_migration import copy_card  # noqa: E402

logger = logging.getLogger(__name__)


def _config_dict() -> dict[str, object]:
    cfg = get_config()
    return {key: getattr(cfg, key) for key in dir(cfg) if key.isupper()}


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Copy the bingo card between storage backends")
    parser.add_argument("--source", required=True, choices=CARD_BACKENDS)
    parser.add_argument("--target", required=True, choices=CARD_BACKENDS)
    parser.add_argument("--overwrite", action="store_true", help="Replace a card already present in the target")
    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(message)s")

    if args.source == args.target:
        parser.error("--source and --target must differ")

    config = _config_dict()
    source = build_card_backend(config, args.source)
    target = build_card_backend(config, args.target)
    try:
        copied = copy_card(source, target, overwrite=args.overwrite)
    except PersistenceError:
        logger.error("Copy failed; see the storage error above")
        return 1
    finally:
        source.close()
        target.close()

    logger.info("Done")
    return 0 if copied is not None else 2


if __name__ == "__main__":
    raise SystemExit(main())
