"""
Схемы для пагинации и сортировки.
"""

from typing import Literal, Optional

from pydantic import BaseModel


class PageMeta(BaseModel):
    """
    Метаданные пагинации.

    Attributes:
        page: Номер текущей страницы
        page_size: Размер страницы
        total: Общее количество записей
        total_pages: Общее количество страниц
    """

    page: int
    page_size: int
    total: int
    total_pages: int

    @classmethod
    def create(cls, page: int, page_size: int, total: int) -> "PageMeta":
        """
        Создает экземпляр PageMeta с автоматическим расчетом total_pages.

        Args:
            page: Номер текущей страницы
            page_size: Размер страницы
            total: Общее количество записей

        Returns:
            PageMeta: Экземпляр с рассчитанными метаданными
        """
        total_pages = max(1, (total + page_size - 1) // page_size) if total > 0 else 1
        return cls(page=page, page_size=page_size, total=total, total_pages=total_pages)


class SortOrder(BaseModel):
    """
    Параметры сортировки таблицы.

    Attributes:
        column: Колонка для сортировки
        direction: Направление (asc/desc)
    """

    column: str = "created_at"
    direction: Literal["asc", "desc"] = "desc"

    @classmethod
    def parse(cls, value: Optional[str]) -> Optional["SortOrder"]:
        """
        Разобрать строку вида "name" (по возрастанию) или "-name" (по убыванию).
        """
        if not value:
            return None
        if value.startswith("-"):
            return cls(column=value[1:], direction="desc")
        return cls(column=value, direction="asc")
