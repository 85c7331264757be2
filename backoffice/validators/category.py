"""
Валидатор категорий.
"""

import re
from typing import Any, Dict, List

from backoffice.core.exceptions import FieldError

SLUG_RE = re.compile(r"[a-z0-9-]+")


class CategoryValidator:
    """Проверка данных категории перед записью."""

    @staticmethod
    def validate(data: Dict[str, Any]) -> List[FieldError]:
        """
        Проверить данные категории.

        Args:
            data: Поля категории (частично или полностью)

        Returns:
            List[FieldError]: Список ошибок; пустой список означает валидные данные
        """
        errors: List[FieldError] = []

        name = data.get("name")
        if not name or not str(name).strip():
            errors.append(FieldError("name", "Name is required."))

        slug = data.get("slug")
        if not slug or not str(slug).strip():
            errors.append(FieldError("slug", "Slug is required."))
        elif not SLUG_RE.fullmatch(slug):
            errors.append(
                FieldError(
                    "slug",
                    "Slug contains invalid characters. Only lowercase letters, digits and hyphens are allowed.",
                )
            )

        return errors
