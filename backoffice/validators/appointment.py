"""
Валидатор записей.
"""

from typing import Any, Dict, List

from backoffice.core.exceptions import FieldError
from backoffice.db.models import APPOINTMENT_STATUSES
from backoffice.validators.product import parse_date


class AppointmentValidator:
    """
    Проверка данных записи.

    При создании обязательны товар и дата, при обновлении они могут
    отсутствовать. Количество единиц, если передано, должно быть больше 0.
    """

    @staticmethod
    def validate(data: Dict[str, Any], is_update: bool = False) -> List[FieldError]:
        errors: List[FieldError] = []

        if not is_update and not data.get("product_id"):
            errors.append(FieldError("product_id", "Product is required."))

        day = data.get("date")
        if not day:
            if not is_update:
                errors.append(FieldError("date", "Date is required."))
        else:
            try:
                parse_date(day)
            except ValueError:
                errors.append(FieldError("date", "Date is invalid."))

        units = data.get("units")
        if units is not None and units <= 0:
            errors.append(FieldError("units", "Units must be greater than 0."))

        status = data.get("status")
        if status is not None and status not in APPOINTMENT_STATUSES:
            errors.append(
                FieldError("status", f"Status must be one of: {', '.join(APPOINTMENT_STATUSES)}.")
            )

        return errors
