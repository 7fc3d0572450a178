"""Environment-based configuration."""

from __future__ import annotations

import os
from dataclasses import dataclass

from sqlalchemy.engine import URL

CARD_BACKENDS = ("file", "sql", "mongo", "s3")
DEV_SECRET_KEY = "dev-secret"


def resolve_database_url() -> str:
    """Resolve DB connection string for the sql card backend.

    Priority:
      1) DATABASE_URL (explicit)
      2) Build from PG* env vars (common Postgres convention)
      3) Fallback to local sqlite
    """

    explicit = os.getenv("DATABASE_URL")
    if explicit:
        return explicit

    host = os.getenv("PGHOST")
    user = os.getenv("PGUSER")
    database = os.getenv("PGDATABASE")

    if host and user and database:
        try:
            port = int(os.getenv("PGPORT") or 5432)
        except ValueError:
            port = 5432

        sslmode = os.getenv("PGSSLMODE", "require")
        url = URL.create(
            drivername="postgresql+psycopg2",
            username=user,
            password=os.getenv("PGPASSWORD"),
            host=host,
            port=port,
            database=database,
            query={"sslmode": sslmode} if sslmode else {},
        )
        return url.render_as_string(hide_password=False)

    return "sqlite:///./bingo.db"


def resolve_card_backend() -> str:
    """Pick the card backend: explicit CARD_BACKEND, else inferred from what is configured."""

    explicit = os.getenv("CARD_BACKEND")
    if explicit:
        return explicit.lower().strip()
    if os.getenv("MONGODB_URI"):
        return "mongo"
    if os.getenv("S3_BUCKET"):
        return "s3"
    if os.getenv("DATABASE_URL") or os.getenv("PGHOST"):
        return "sql"
    return "file"


def _float_env(name: str, default: float) -> float:
    raw = os.getenv(name)
    try:
        return float(raw) if raw else default
    except ValueError:
        return default


@dataclass(frozen=True)
class BaseConfig:
    """Base configuration shared by all environments."""

    APP_ENV: str = os.getenv("APP_ENV", "development")
    SECRET_KEY: str = os.getenv("SECRET_KEY", DEV_SECRET_KEY)
    ADMIN_PASSWORD: str = os.getenv("ADMIN_PASSWORD", "")

    CARD_BACKEND: str = resolve_card_backend()  # "file" | "sql" | "mongo" | "s3"
    CARD_CENTER_LABEL: str = os.getenv("CARD_CENTER_LABEL", "")
    STORE_TIMEOUT_SEC: float = _float_env("STORE_TIMEOUT_SEC", 5.0)

    # File backend
    CARD_FILE_PATH: str = os.getenv("CARD_FILE_PATH", "./data/bingo-card.json")

    # SQL backend
    DATABASE_URL: str = resolve_database_url()

    # Mongo backend
    MONGODB_URI: str = os.getenv("MONGODB_URI", "mongodb://localhost:27017")
    MONGODB_DB: str = os.getenv("MONGODB_DB", "bingo_board")

    # S3 backend
    S3_BUCKET: str = os.getenv("S3_BUCKET", "")
    S3_KEY: str = os.getenv("S3_KEY", "bingo-card/main.json")
    AWS_REGION: str | None = os.getenv("AWS_REGION")

    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")


@dataclass(frozen=True)
class DevelopmentConfig(BaseConfig):
    """Development configuration."""

    DEBUG: bool = True


@dataclass(frozen=True)
class ProductionConfig(BaseConfig):
    """Production configuration."""

    DEBUG: bool = False
    SESSION_COOKIE_SECURE: bool = True


@dataclass(frozen=True)
class TestingConfig(BaseConfig):
    """Configuration used by the test suite."""

    TESTING: bool = True
    SECRET_KEY: str = "test-secret"
    ADMIN_PASSWORD: str = "letmein"
    CARD_BACKEND: str = "file"
    CARD_CENTER_LABEL: str = ""


def get_config() -> type[BaseConfig]:
    """Resolve configuration class based on APP_ENV."""

    env = os.getenv("APP_ENV", "development").lower().strip()
    if env == "production":
        return ProductionConfig
    if env == "testing":
        return TestingConfig
    return DevelopmentConfig
