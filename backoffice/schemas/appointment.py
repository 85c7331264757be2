"""
Схемы записей.
"""

import datetime as dt
from typing import List, Literal, Optional

from pydantic import BaseModel, ConfigDict

from .pagination import PageMeta

AppointmentStatus = Literal["pending", "confirmed", "completed", "cancelled"]


class AppointmentIn(BaseModel):
    """Схема создания/обновления записи."""

    product_id: Optional[int] = None
    date: Optional[dt.date] = None
    units: Optional[int] = None
    total_cost: Optional[float] = None
    status: Optional[str] = None
    notes: Optional[str] = None


class ProductBrief(BaseModel):
    name: str
    price: float


class AppointmentOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    product_id: int
    date: dt.date
    units: int
    total_cost: float
    status: AppointmentStatus
    notes: Optional[str] = None
    created_at: dt.datetime
    updated_at: Optional[dt.datetime] = None
    product: Optional[ProductBrief] = None


class AppointmentPage(BaseModel):
    items: List[AppointmentOut]
    meta: PageMeta
