"""
Сервис записей.

Помимо CRUD с валидацией предоставляет выборки для календаря,
ближайших записей и постраничного просмотра будущих/прошедших записей.
"""

import calendar
import logging
from datetime import date
from typing import Any, Dict, List, Optional

from sqlalchemy import Select, asc, desc, func, select
from sqlalchemy.orm import joinedload

from backoffice.core.exceptions import FieldError, ValidationFailed
from backoffice.db.models import Appointment
from backoffice.services.base_service import BaseService, page_offset, row_to_dict
from backoffice.validators.appointment import AppointmentValidator
from backoffice.validators.product import parse_date

logger = logging.getLogger(__name__)

# Статусы, при которых запись считается предстоящей
ACTIVE_STATUSES = ("pending", "confirmed")
DATASETS = ("future", "past")


def with_product(appointment: Appointment) -> Dict[str, Any]:
    """Строка записи с краткой информацией о товаре."""
    data = row_to_dict(appointment)
    product = appointment.product
    data["product"] = (
        {"name": product.name, "price": product.price} if product is not None else None
    )
    return data


def month_bounds(month: int, year: int) -> tuple[date, date]:
    """Первый и последний день месяца."""
    last_day = calendar.monthrange(year, month)[1]
    return date(year, month, 1), date(year, month, last_day)


class AppointmentService(BaseService[Appointment]):
    """Сервис записей (таблица appointments)."""

    model = Appointment

    @staticmethod
    def _normalize(item: Dict[str, Any]) -> Dict[str, Any]:
        if isinstance(item.get("date"), str):
            item = {**item, "date": parse_date(item["date"])}
        return item

    def create(self, item: Dict[str, Any]) -> Dict[str, Any]:
        errors = AppointmentValidator.validate(item)
        if errors:
            raise ValidationFailed(errors)
        return super().create(self._normalize(item))

    def update(self, id: int, item: Dict[str, Any]) -> Optional[Dict[str, Any]]:
        errors = AppointmentValidator.validate(item, is_update=True)
        if errors:
            raise ValidationFailed(errors)
        return super().update(id, self._normalize(item))

    def _with_product_query(self) -> Select:
        return select(Appointment).options(joinedload(Appointment.product))

    def get_by_month(self, month: int, year: int) -> List[Dict[str, Any]]:
        """
        Записи за календарный месяц (для календаря).

        Args:
            month: Месяц (1-12)
            year: Год

        Returns:
            List[dict]: Записи по возрастанию даты с полем product {name, price}
        """
        if not 1 <= month <= 12:
            raise ValidationFailed([FieldError("month", "Month must be between 1 and 12.")])

        start_date, end_date = month_bounds(month, year)
        with self._transaction():
            rows = self.db.scalars(
                self._with_product_query()
                .where(Appointment.date >= start_date, Appointment.date <= end_date)
                .order_by(asc(Appointment.date), asc(Appointment.id))
            ).all()
            return [with_product(row) for row in rows]

    def get_future(self, limit: int = 5, today: Optional[date] = None) -> List[Dict[str, Any]]:
        """Ближайшие ожидающие/подтвержденные записи начиная с сегодняшнего дня."""
        today = today or date.today()
        with self._transaction():
            rows = self.db.scalars(
                self._with_product_query()
                .where(
                    Appointment.date >= today,
                    Appointment.status.in_(ACTIVE_STATUSES),
                )
                .order_by(asc(Appointment.date), asc(Appointment.id))
                .limit(limit)
            ).all()
            return [with_product(row) for row in rows]

    def get_paginated(
        self,
        dataset: str = "future",
        page: int = 1,
        page_size: int = 10,
        today: Optional[date] = None,
    ) -> Dict[str, Any]:
        """
        Страница будущих или прошедших записей.

        Будущие (дата >= сегодня) сортируются по возрастанию даты,
        прошедшие (дата < сегодня) по убыванию.

        Returns:
            dict: {"data": [...], "count": общее количество в наборе}
        """
        if dataset not in DATASETS:
            raise ValidationFailed(
                [FieldError("dataset", f"Dataset must be one of: {', '.join(DATASETS)}.")]
            )

        today = today or date.today()
        if dataset == "future":
            condition = Appointment.date >= today
            order = (asc(Appointment.date), asc(Appointment.id))
        else:
            condition = Appointment.date < today
            order = (desc(Appointment.date), desc(Appointment.id))

        offset = page_offset(page, page_size)
        with self._transaction():
            total = self.db.scalar(
                select(func.count()).select_from(Appointment).where(condition)
            ) or 0
            rows = self.db.scalars(
                self._with_product_query()
                .where(condition)
                .order_by(*order)
                .offset(offset)
                .limit(page_size)
            ).all()
            data = [with_product(row) for row in rows]

        return {"data": data, "count": total}
