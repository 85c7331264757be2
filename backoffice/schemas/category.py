"""
Схемы категорий.
"""

from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, ConfigDict


class CategoryIn(BaseModel):
    """Схема создания/обновления категории (правила проверяет валидатор)."""

    name: Optional[str] = None
    slug: Optional[str] = None
    description: Optional[str] = None
    parent_id: Optional[int] = None


class CategoryOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    entity_type: str
    name: str
    slug: str
    description: Optional[str] = None
    parent_id: Optional[int] = None
    created_at: datetime
    updated_at: Optional[datetime] = None
    products_count: Optional[int] = None


class CategoryNode(CategoryOut):
    """Категория с вложенными дочерними категориями."""

    children: List["CategoryNode"] = []
