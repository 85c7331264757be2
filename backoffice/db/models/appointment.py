"""
Модель записи (appointment) на товар/услугу.
"""

from datetime import date, datetime
from typing import Optional

from sqlalchemy import CheckConstraint, Date, DateTime, Float, ForeignKey, Integer, String, Text, text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from .base import Base, utcnow


APPOINTMENT_STATUSES = ("pending", "confirmed", "completed", "cancelled")


class Appointment(Base):
    """
    Модель записи.

    Attributes:
        id: Уникальный идентификатор записи
        product_id: ID товара
        date: Дата записи
        units: Количество единиц (> 0)
        total_cost: Итоговая стоимость
        status: Статус (pending/confirmed/completed/cancelled)
        notes: Комментарий
        product: Связь с товаром
    """

    __tablename__ = "appointments"

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    product_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("products.id", ondelete="RESTRICT"), index=True
    )
    date: Mapped[date] = mapped_column(Date, index=True)
    units: Mapped[int] = mapped_column(Integer, default=1)
    total_cost: Mapped[float] = mapped_column(Float, default=0)
    status: Mapped[str] = mapped_column(
        String(32),
        default="pending",
        server_default=text("'pending'"),
    )
    notes: Mapped[Optional[str]] = mapped_column(Text, nullable=True)

    # Временные метки
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=utcnow)
    updated_at: Mapped[Optional[datetime]] = mapped_column(
        DateTime(timezone=True), nullable=True, onupdate=utcnow
    )

    product: Mapped["Product"] = relationship()

    __table_args__ = (
        CheckConstraint(
            "status in ('pending','confirmed','completed','cancelled')",
            name="ck_appointments_status"
        ),
        CheckConstraint("units > 0", name="ck_appointments_units"),
    )

    def __repr__(self) -> str:
        return f"<Appointment(id={self.id}, product_id={self.product_id}, date={self.date})>"
