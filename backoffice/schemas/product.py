"""
Схемы товаров и тарифов.
"""

import datetime as dt
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field

from .pagination import PageMeta


class Tariff(BaseModel):
    """Тариф: цена, действующая в периоде [start_date, end_date]."""

    start_date: Optional[dt.date] = None
    end_date: Optional[dt.date] = None
    price: float
    status: Optional[str] = None


class ProductIn(BaseModel):
    """
    Схема создания/обновления товара.

    Поле categories содержит ID категорий; связи заменяются целиком.
    """

    name: Optional[str] = None
    slug: Optional[str] = None
    status: Optional[str] = None
    code: Optional[str] = Field(None, description="Артикул (SKU)")
    price: Optional[float] = None
    description: Optional[str] = None
    images: Optional[List[str]] = None
    tariffs: Optional[List[Tariff]] = None
    categories: Optional[List[int]] = None


class CategoryRef(BaseModel):
    id: int
    name: str


class ProductOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    type: str
    name: str
    slug: str
    status: str
    code: str
    price: float
    description: Optional[str] = None
    images: Optional[List[str]] = None
    tariffs: Optional[List[Tariff]] = None
    created_at: dt.datetime
    updated_at: Optional[dt.datetime] = None
    categories: Optional[List[CategoryRef]] = None


class ProductPage(BaseModel):
    """Страница товаров с метаданными пагинации."""

    items: List[ProductOut]
    meta: PageMeta


class PriceOut(BaseModel):
    product_id: int
    date: dt.date
    price: float

