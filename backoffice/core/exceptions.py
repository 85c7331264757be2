"""
Исключения уровня бизнес-логики.
"""

from dataclasses import dataclass
from typing import List


@dataclass
class FieldError:
    """Ошибка валидации одного поля."""

    field: str
    message: str


class ValidationFailed(Exception):
    """
    Данные не прошли валидацию.

    Содержит все найденные ошибки; запись в БД не выполнялась.
    """

    def __init__(self, errors: List[FieldError]):
        self.errors = errors
        super().__init__("\n".join(e.message for e in errors))
