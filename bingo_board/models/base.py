"""SQLAlchemy declarative base for the sql card backend."""

from __future__ import annotations

from sqlalchemy import MetaData
from sqlalchemy.orm import DeclarativeBase


class Base(DeclarativeBase):
    """Declarative base with stable constraint names."""

    metadata = MetaData(naming_convention={"pk": "pk_%(table_name)s"})
