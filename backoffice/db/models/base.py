"""
Базовый класс для всех моделей SQLAlchemy.

Использует новый Declarative API SQLAlchemy 2.0.
"""

from datetime import datetime, timezone

from sqlalchemy import JSON
from sqlalchemy.dialects.postgresql import JSONB
from sqlalchemy.orm import DeclarativeBase


# JSONB в PostgreSQL, обычный JSON в остальных СУБД (SQLite в тестах)
JSONType = JSON().with_variant(JSONB(), "postgresql")


def utcnow() -> datetime:
    """Текущее время в UTC."""
    return datetime.now(timezone.utc)


class Base(DeclarativeBase):
    """
    Базовый класс для всех моделей.

    Наследуется от DeclarativeBase для использования нового API SQLAlchemy 2.0.
    """
    pass
