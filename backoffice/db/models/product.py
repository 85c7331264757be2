"""
Модель товара.
"""

from datetime import datetime
from typing import List, Optional

from sqlalchemy import DateTime, Float, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from .base import Base, JSONType, utcnow


class Product(Base):
    """
    Модель товара.

    Attributes:
        id: Уникальный идентификатор товара
        type: Тип сущности (всегда "product")
        name: Название товара
        slug: URL-friendly название
        status: Статус товара (active/draft/...)
        code: Уникальный артикул (SKU)
        price: Базовая цена
        description: Описание товара
        images: Список ссылок на изображения
        tariffs: Тарифы с периодами действия
            ([{"start_date", "end_date", "price", "status"}])
        deleted_at: Дата мягкого удаления
        categories: Связь с категориями через product_categories
    """

    __tablename__ = "products"

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    type: Mapped[str] = mapped_column(String(32), default="product")
    name: Mapped[str] = mapped_column(Text)
    slug: Mapped[str] = mapped_column(String(255), index=True)
    status: Mapped[str] = mapped_column(String(32), default="active", index=True)
    code: Mapped[str] = mapped_column(String(64), unique=True, index=True)
    price: Mapped[float] = mapped_column(Float, default=0)
    description: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    images: Mapped[Optional[list]] = mapped_column(JSONType, nullable=True)
    tariffs: Mapped[Optional[list]] = mapped_column(JSONType, nullable=True)

    # Временные метки
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=utcnow)
    updated_at: Mapped[Optional[datetime]] = mapped_column(
        DateTime(timezone=True), nullable=True, onupdate=utcnow
    )
    deleted_at: Mapped[Optional[datetime]] = mapped_column(
        DateTime(timezone=True), nullable=True, index=True
    )

    categories: Mapped[List["Category"]] = relationship(
        secondary="product_categories",
        order_by="Category.name",
        viewonly=True,
    )

    def __repr__(self) -> str:
        return f"<Product(id={self.id}, code='{self.code}', name='{self.name}')>"
