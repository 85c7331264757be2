"""
Сервис таксономии (категорий товаров).
"""

import logging
from typing import Any, Dict, List, Optional

from sqlalchemy import and_, asc, func, select

from backoffice.core.exceptions import ValidationFailed
from backoffice.db.models import Category, Product, ProductCategory
from backoffice.services.base_service import BaseService, row_to_dict
from backoffice.validators.category import CategoryValidator

logger = logging.getLogger(__name__)


def build_category_tree(rows: List[Dict[str, Any]]) -> List[Dict[str, Any]]:
    """
    Собрать дерево категорий из плоского списка.

    Каждая категория получает список ``children``. Корнями считаются
    категории без родителя или с родителем, которого нет в списке.
    Исходные словари не изменяются.
    """
    nodes = {row["id"]: {**row, "children": []} for row in rows}
    roots = []
    for row in rows:
        node = nodes[row["id"]]
        parent = nodes.get(row.get("parent_id"))
        if parent is None or parent is node:
            roots.append(node)
        else:
            parent["children"].append(node)
    return roots


class TaxonomyService(BaseService[Category]):
    """Сервис категорий (таблица categories)."""

    model = Category

    @staticmethod
    def _validate(item: Dict[str, Any]) -> None:
        errors = CategoryValidator.validate(item)
        if errors:
            raise ValidationFailed(errors)

    def create(self, item: Dict[str, Any]) -> Dict[str, Any]:
        """Создать категорию с валидацией."""
        self._validate(item)
        return super().create(item)

    def update(self, id: int, item: Dict[str, Any]) -> Optional[Dict[str, Any]]:
        """Обновить категорию с валидацией."""
        self._validate(item)
        return super().update(id, item)

    def get_tree(self) -> List[Dict[str, Any]]:
        """
        Получить категории товаров плоским списком.

        Сначала корневые категории (без родителя), затем по названию.
        Каждая строка содержит ``products_count`` (без мягко удаленных
        товаров). Иерархию при необходимости собирает вызывающий код
        (см. build_category_tree).
        """
        products_count = func.count(Product.id).label("products_count")
        stmt = (
            select(Category, products_count)
            .outerjoin(ProductCategory, ProductCategory.category_id == Category.id)
            .outerjoin(
                Product,
                and_(Product.id == ProductCategory.product_id, Product.deleted_at.is_(None)),
            )
            .where(Category.entity_type == "product")
            .group_by(Category.id)
            .order_by(asc(Category.parent_id).nulls_first(), asc(Category.name))
        )

        with self._transaction():
            result = []
            for category, count in self.db.execute(stmt).all():
                data = row_to_dict(category)
                data["products_count"] = count
                result.append(data)
            return result
