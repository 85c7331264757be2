"""
API endpoints для работы с товарами.

Содержит CRUD операции для товаров с поддержкой поиска, фильтрации,
сортировки, пагинации и расчета цены на дату.
"""

from datetime import date
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query, status

from backoffice.api.v1.dependencies import get_product_service
from backoffice.core.config import settings
from backoffice.schemas.pagination import PageMeta, SortOrder
from backoffice.schemas.product import PriceOut, ProductIn, ProductOut, ProductPage
from backoffice.services.product_service import ProductService

router = APIRouter()


@router.get("", response_model=ProductPage)
def list_products(
    page: int = Query(1, ge=1, description="Номер страницы"),
    page_size: int = Query(
        settings.DEFAULT_PAGE_SIZE, ge=1, le=settings.MAX_PAGE_SIZE, description="Размер страницы"
    ),
    q: Optional[str] = Query(None, description="Поиск по названию или артикулу (ILIKE)"),
    status_filter: Optional[str] = Query(None, alias="status", description="Фильтр по статусу"),
    category_id: Optional[int] = Query(None, description="Фильтр по категории"),
    sort: Optional[str] = Query(None, description="Сортировка: name, -name, price, -price, ..."),
    service: ProductService = Depends(get_product_service),
):
    """
    Получить список товаров с категориями.

    Поддерживает:
    - Поиск по названию и артикулу (без учета регистра)
    - Фильтрацию по статусу и категории
    - Сортировку по колонке ("-" перед именем означает убывание)
    - Пагинацию результатов

    Returns:
        ProductPage: Товары и метаданные пагинации
    """
    filters = {"search": q, "status": status_filter, "category_id": category_id}
    result = service.get_all_with_categories(
        filters=filters, page=page, page_size=page_size, sort=SortOrder.parse(sort)
    )
    return {
        "items": result["data"],
        "meta": PageMeta.create(page, page_size, result["count"]),
    }


@router.get("/{product_id}", response_model=ProductOut)
def get_product(product_id: int, service: ProductService = Depends(get_product_service)):
    """
    Получить товар по ID вместе с категориями.

    Raises:
        HTTPException: Если товар не найден или удален
    """
    product = service.get_by_id_with_categories(product_id)
    if product is None:
        raise HTTPException(404, detail="Product not found")
    return product


@router.get("/{product_id}/price", response_model=PriceOut)
def get_product_price(
    product_id: int,
    on: Optional[date] = Query(None, description="Дата (по умолчанию сегодня)"),
    service: ProductService = Depends(get_product_service),
):
    """Действующая цена товара на дату с учетом тарифов."""
    product = service.get_by_id(product_id)
    if product is None:
        raise HTTPException(404, detail="Product not found")
    on_date = on or date.today()
    return {
        "product_id": product_id,
        "date": on_date,
        "price": service.get_price_at_date(product, on_date),
    }


@router.post("", response_model=ProductOut, status_code=status.HTTP_201_CREATED)
def create_product(data: ProductIn, service: ProductService = Depends(get_product_service)):
    """Создать товар (и привязать категории)."""
    product = service.create(data.model_dump(exclude_unset=True))
    return service.get_by_id_with_categories(product["id"])


@router.put("/{product_id}", response_model=ProductOut)
def update_product(
    product_id: int,
    data: ProductIn,
    service: ProductService = Depends(get_product_service),
):
    """Обновить товар; переданный список категорий заменяет текущий."""
    product = service.update(product_id, data.model_dump(exclude_unset=True))
    if product is None:
        raise HTTPException(404, detail="Product not found")
    return service.get_by_id_with_categories(product_id)


@router.delete("/{product_id}")
def delete_product(product_id: int, service: ProductService = Depends(get_product_service)):
    """Удалить товар (мягкое удаление)."""
    if not service.delete(product_id):
        raise HTTPException(404, detail="Product not found")
    return {"message": "Product deleted successfully"}
