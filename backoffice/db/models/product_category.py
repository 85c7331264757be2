"""
Связующая таблица товаров и категорий (many-to-many).
"""

from sqlalchemy import ForeignKey, Index, Integer
from sqlalchemy.orm import Mapped, mapped_column

from .base import Base


class ProductCategory(Base):
    """
    Связь товара с категорией.

    Attributes:
        product_id: ID товара
        category_id: ID категории
    """

    __tablename__ = "product_categories"

    __table_args__ = (
        Index("ix_product_categories_category_id", "category_id"),
    )

    product_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("products.id", ondelete="CASCADE"), primary_key=True
    )
    category_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("categories.id", ondelete="CASCADE"), primary_key=True
    )

    def __repr__(self) -> str:
        return f"<ProductCategory(product_id={self.product_id}, category_id={self.category_id})>"
