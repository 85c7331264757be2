"""
Валидатор товаров и тарифов.
"""

from datetime import date, datetime
from typing import Any, Dict, List, Optional, Union

from backoffice.core.exceptions import FieldError


def parse_date(value: Union[str, date, datetime, None]) -> Optional[date]:
    """
    Привести значение к date.

    Принимает date/datetime или ISO-строку (в том числе с временем).
    """
    if value is None or value == "":
        return None
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    return date.fromisoformat(str(value)[:10])


class ProductValidator:
    """Проверка данных товара перед записью."""

    @staticmethod
    def validate(item: Dict[str, Any]) -> List[FieldError]:
        """
        Проверить товар целиком.

        Args:
            item: Поля товара

        Returns:
            List[FieldError]: Список ошибок
        """
        errors: List[FieldError] = []

        name = item.get("name")
        if not name or len(name) < 3:
            errors.append(FieldError("name", "Name is required and must be at least 3 characters long."))

        if not item.get("slug"):
            errors.append(FieldError("slug", "Slug is required."))

        if not item.get("code"):
            errors.append(FieldError("code", "Code (SKU) is required."))

        price = item.get("price")
        if price is None or price < 0:
            errors.append(FieldError("price", "Price is required and must be greater than or equal to 0."))

        tariffs = item.get("tariffs")
        if tariffs:
            errors.extend(ProductValidator.validate_tariffs(tariffs))

        return errors

    @staticmethod
    def validate_tariffs(tariffs: List[Dict[str, Any]]) -> List[FieldError]:
        """
        Проверить список тарифов.

        На каждый ошибочный тариф возвращается отдельное сообщение с его
        номером (начиная с 1).
        """
        errors: List[FieldError] = []
        for index, tariff in enumerate(tariffs, start=1):
            price = tariff.get("price")
            if price is None or price < 0:
                errors.append(FieldError("tariffs", f"Tariff #{index} has an invalid price."))

            try:
                start = parse_date(tariff.get("start_date"))
                end = parse_date(tariff.get("end_date"))
            except ValueError:
                errors.append(FieldError("tariffs", f"Tariff #{index} has an invalid date."))
                continue

            if start is None or end is None:
                errors.append(FieldError("tariffs", f"Tariff #{index} must have start and end dates."))
            elif start > end:
                errors.append(FieldError("tariffs", f"Tariff #{index} starts after it ends."))

        return errors
