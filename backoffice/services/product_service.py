"""
Сервис товаров.

Расширяет базовый CRUD валидацией, связями с категориями, мягким
удалением, поиском с пагинацией и расчетом цены по тарифам.
"""

import logging
from datetime import date
from typing import Any, Dict, List, Optional

from sqlalchemy import Select, and_, asc, delete, desc, exists, func, insert, or_, select
from sqlalchemy.orm import selectinload

from backoffice.core.exceptions import ValidationFailed
from backoffice.db.models import Product, ProductCategory
from backoffice.db.models.base import utcnow
from backoffice.schemas.pagination import SortOrder
from backoffice.services.base_service import BaseService, page_offset, row_to_dict
from backoffice.validators.product import ProductValidator, parse_date

logger = logging.getLogger(__name__)

# Колонки, по которым разрешена сортировка списка
SORTABLE_COLUMNS = {"id", "name", "slug", "status", "code", "price", "created_at", "updated_at"}
DEFAULT_SORT = SortOrder(column="created_at", direction="desc")


def resolve_price(base_price: float, tariffs: Optional[List[Dict[str, Any]]], on_date: date) -> float:
    """
    Определить действующую цену на дату.

    Из тарифов, период которых [start_date, end_date] содержит дату,
    выбирается тариф с самой поздней датой начала. Тариф без даты окончания
    действует бессрочно. Если подходящих тарифов нет, возвращается базовая цена.
    При равных датах начала побеждает тариф, идущий раньше в списке.
    """
    best = None
    best_start = None
    for tariff in tariffs or []:
        start = parse_date(tariff.get("start_date"))
        end = parse_date(tariff.get("end_date"))
        if start is None or start > on_date:
            continue
        if end is not None and end < on_date:
            continue
        if best_start is None or start > best_start:
            best, best_start = tariff, start

    if best is None:
        return base_price
    return best["price"]


def flatten_categories(product: Product) -> Dict[str, Any]:
    """Строка товара со списком категорий [{id, name}] вместо связи."""
    data = row_to_dict(product)
    data["categories"] = [{"id": c.id, "name": c.name} for c in product.categories]
    return data


class ProductService(BaseService[Product]):
    """Сервис товаров (таблица products)."""

    model = Product

    def _base_query(self) -> Select:
        # Мягко удаленные товары исключаются из всех выборок
        return select(Product).where(Product.deleted_at.is_(None))

    @staticmethod
    def _validate(item: Dict[str, Any]) -> None:
        errors = ProductValidator.validate(item)
        if errors:
            raise ValidationFailed(errors)

    @staticmethod
    def _normalize_tariffs(item: Dict[str, Any]) -> None:
        """Даты тарифов хранятся в JSON как ISO-строки."""
        tariffs = item.get("tariffs")
        if not tariffs:
            return
        normalized = []
        for tariff in tariffs:
            tariff = dict(tariff)
            for key in ("start_date", "end_date"):
                value = parse_date(tariff.get(key))
                tariff[key] = value.isoformat() if value is not None else None
            normalized.append(tariff)
        item["tariffs"] = normalized

    # ==================== ЗАПИСЬ ====================

    def create(self, item: Dict[str, Any]) -> Dict[str, Any]:
        """
        Создать товар с валидацией.

        Виртуальное поле ``categories`` (список ID категорий) не пишется в
        таблицу товаров, а сохраняется в product_categories в той же транзакции.
        """
        item = {**item, "type": "product"}
        self._validate(item)

        category_ids = item.pop("categories", None)
        self._normalize_tariffs(item)

        with self._transaction():
            row = self._insert(item)
            if category_ids:
                self._assign_categories(row.id, category_ids)
        self.db.refresh(row)
        logger.info(f"Created product #{row.id} ({row.code})")
        return row_to_dict(row)

    def update(self, id: int, item: Dict[str, Any]) -> Optional[Dict[str, Any]]:
        """
        Обновить товар с валидацией.

        Если передан ``categories`` (даже пустой), связи с категориями
        заменяются целиком: старые удаляются, новые вставляются.
        """
        self._validate(item)

        item = dict(item)
        category_ids = item.pop("categories", None)
        self._normalize_tariffs(item)

        with self._transaction():
            row = self._get_row(id)
            if row is None:
                return None
            self._apply(row, item)
            if category_ids is not None:
                self._replace_categories(id, category_ids)
        self.db.refresh(row)
        logger.info(f"Updated product #{id}")
        return row_to_dict(row)

    def delete(self, id: int) -> bool:
        """Мягкое удаление: проставить deleted_at вместо удаления строки."""
        with self._transaction():
            row = self._get_row(id)
            if row is None:
                return False
            row.deleted_at = utcnow()
        logger.info(f"Soft-deleted product #{id}")
        return True

    def _assign_categories(self, product_id: int, category_ids: List[int]) -> None:
        if not category_ids:
            return
        self.db.execute(
            insert(ProductCategory),
            [{"product_id": product_id, "category_id": cid} for cid in category_ids],
        )

    def _replace_categories(self, product_id: int, category_ids: List[int]) -> None:
        self.db.execute(delete(ProductCategory).where(ProductCategory.product_id == product_id))
        self._assign_categories(product_id, category_ids)

    # ==================== ЧТЕНИЕ ====================

    def get_by_id_with_categories(self, id: int) -> Optional[Dict[str, Any]]:
        """Получить товар вместе с категориями или None."""
        with self._transaction():
            product = self.db.scalar(
                self._base_query()
                .options(selectinload(Product.categories))
                .where(Product.id == id)
            )
            return flatten_categories(product) if product is not None else None

    def get_all_with_categories(
        self,
        filters: Optional[Dict[str, Any]] = None,
        page: int = 1,
        page_size: int = 10,
        sort: Optional[SortOrder] = None,
    ) -> Dict[str, Any]:
        """
        Получить страницу товаров с категориями.

        Args:
            filters: search (подстрока в name/code без учета регистра),
                status (точное совпадение), category_id (принадлежность категории)
            page: Номер страницы (с 1)
            page_size: Размер страницы
            sort: Колонка и направление сортировки

        Returns:
            dict: {"data": [...], "count": общее количество без пагинации}
        """
        filters = filters or {}

        # Формирование условий WHERE
        conditions = [Product.deleted_at.is_(None)]
        search = filters.get("search")
        if search:
            pattern = f"%{search}%"
            conditions.append(or_(Product.name.ilike(pattern), Product.code.ilike(pattern)))
        if filters.get("status"):
            conditions.append(Product.status == filters["status"])
        if filters.get("category_id"):
            conditions.append(
                exists().where(
                    and_(
                        ProductCategory.product_id == Product.id,
                        ProductCategory.category_id == filters["category_id"],
                    )
                )
            )
        where_clause = and_(*conditions)

        # Сортировка
        if sort is None or sort.column not in SORTABLE_COLUMNS:
            sort = DEFAULT_SORT
        column = getattr(Product, sort.column)
        order = asc(column) if sort.direction == "asc" else desc(column)

        offset = page_offset(page, page_size)

        with self._transaction():
            total = self.db.scalar(
                select(func.count()).select_from(Product).where(where_clause)
            ) or 0
            products = self.db.scalars(
                select(Product)
                .options(selectinload(Product.categories))
                .where(where_clause)
                .order_by(order, desc(Product.id))
                .offset(offset)
                .limit(page_size)
            ).all()
            data = [flatten_categories(p) for p in products]

        return {"data": data, "count": total}

    # ==================== ЦЕНЫ ====================

    def get_price_at_date(self, product: Dict[str, Any], on_date: date) -> float:
        """Действующая цена товара на дату (с учетом тарифов)."""
        return resolve_price(product["price"], product.get("tariffs"), on_date)
