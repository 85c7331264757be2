"""
Базовый сервис доступа к данным.

Реализует общие CRUD операции над одной таблицей, чтобы не повторять
их в каждом сервисе сущности.
"""

import logging
from contextlib import contextmanager
from typing import Any, Dict, Generic, Iterator, List, Optional, Type, TypeVar

from sqlalchemy import Select, desc, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from backoffice.core.exceptions import FieldError, ValidationFailed
from backoffice.db.models import Base

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=Base)

# Поля, которые не меняются после создания записи
IMMUTABLE_FIELDS = {"id", "created_at"}


def row_to_dict(row: Base) -> Dict[str, Any]:
    """Представить строку таблицы в виде словаря {колонка: значение}."""
    return {column.key: getattr(row, column.key) for column in row.__table__.columns}


def page_offset(page: int, page_size: int) -> int:
    """Смещение для страницы page (с 1) размером page_size."""
    errors: List[FieldError] = []
    if page < 1:
        errors.append(FieldError("page", "Page must be greater than or equal to 1."))
    if page_size < 1:
        errors.append(FieldError("page_size", "Page size must be greater than or equal to 1."))
    if errors:
        raise ValidationFailed(errors)
    return (page - 1) * page_size


class BaseService(Generic[ModelT]):
    """
    Базовый CRUD сервис.

    Наследники задают модель (таблицу) и при необходимости переопределяют
    операции для валидации и связей.

    Ошибки БД (SQLAlchemyError) откатывают сессию и пробрасываются
    вызывающему коду без изменений.
    """

    model: Type[ModelT]

    def __init__(self, db: Session):
        self.db = db

    @property
    def table(self) -> str:
        return self.model.__tablename__

    # ==================== ВСПОМОГАТЕЛЬНЫЕ ====================

    def _base_query(self) -> Select:
        """Базовый запрос для чтения; наследники добавляют свои условия."""
        return select(self.model)

    def _get_row(self, id: int) -> Optional[ModelT]:
        return self.db.scalar(self._base_query().where(self.model.id == id))

    def _column_values(self, item: Dict[str, Any]) -> Dict[str, Any]:
        """Оставить только колонки таблицы, кроме неизменяемых."""
        columns = {column.key for column in self.model.__table__.columns}
        return {
            key: value
            for key, value in item.items()
            if key in columns and key not in IMMUTABLE_FIELDS
        }

    @contextmanager
    def _transaction(self) -> Iterator[None]:
        """
        Выполнить блок как одну транзакцию.

        При любой ошибке сессия откатывается, исключение пробрасывается дальше.
        Ошибки БД дополнительно логируются.
        """
        try:
            yield
            self.db.commit()
        except SQLAlchemyError as e:
            self.db.rollback()
            logger.error(f"Backend error on table '{self.table}': {e}")
            raise
        except Exception:
            self.db.rollback()
            raise

    def _insert(self, item: Dict[str, Any]) -> ModelT:
        row = self.model(**self._column_values(item))
        self.db.add(row)
        self.db.flush()
        return row

    def _apply(self, row: ModelT, item: Dict[str, Any]) -> ModelT:
        for field, value in self._column_values(item).items():
            setattr(row, field, value)
        self.db.flush()
        return row

    # ==================== CRUD ====================

    def get_all(self) -> List[Dict[str, Any]]:
        """Получить все записи, новые первыми."""
        with self._transaction():
            rows = self.db.scalars(
                self._base_query().order_by(desc(self.model.created_at), desc(self.model.id))
            ).all()
            return [row_to_dict(row) for row in rows]

    def get_by_id(self, id: int) -> Optional[Dict[str, Any]]:
        """Получить запись по ID или None, если ее нет."""
        with self._transaction():
            row = self._get_row(id)
            return row_to_dict(row) if row is not None else None

    def create(self, item: Dict[str, Any]) -> Dict[str, Any]:
        """Создать запись и вернуть ее вместе с сгенерированными полями."""
        with self._transaction():
            row = self._insert(item)
        self.db.refresh(row)
        logger.info(f"Created {self.table} #{row.id}")
        return row_to_dict(row)

    def update(self, id: int, item: Dict[str, Any]) -> Optional[Dict[str, Any]]:
        """
        Обновить переданные поля записи.

        Returns:
            Optional[dict]: Обновленная запись или None, если запись не найдена
        """
        with self._transaction():
            row = self._get_row(id)
            if row is None:
                return None
            self._apply(row, item)
        self.db.refresh(row)
        logger.info(f"Updated {self.table} #{id}")
        return row_to_dict(row)

    def delete(self, id: int) -> bool:
        """
        Удалить запись.

        Returns:
            bool: True, если запись была удалена
        """
        with self._transaction():
            row = self._get_row(id)
            if row is None:
                return False
            self.db.delete(row)
        logger.info(f"Deleted {self.table} #{id}")
        return True
