"""
Модели базы данных.

Импортирует все модели для корректной работы SQLAlchemy.
"""

from .appointment import APPOINTMENT_STATUSES, Appointment
from .base import Base
from .category import Category
from .product import Product
from .product_category import ProductCategory

__all__ = [
    "APPOINTMENT_STATUSES",
    "Appointment",
    "Base",
    "Category",
    "Product",
    "ProductCategory",
]
