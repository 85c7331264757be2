"""
API endpoints для работы с записями.

Содержит CRUD операции, выборку за месяц для календаря,
ближайшие записи и постраничный просмотр будущих/прошедших записей.
"""

from typing import List, Literal

from fastapi import APIRouter, Depends, HTTPException, Query, status

from backoffice.api.v1.dependencies import get_appointment_service
from backoffice.core.config import settings
from backoffice.schemas.appointment import AppointmentIn, AppointmentOut, AppointmentPage
from backoffice.schemas.pagination import PageMeta
from backoffice.services.appointment_service import AppointmentService

router = APIRouter()


@router.get("", response_model=AppointmentPage)
def list_appointments(
    dataset: Literal["future", "past"] = Query("future", description="Будущие или прошедшие"),
    page: int = Query(1, ge=1, description="Номер страницы"),
    page_size: int = Query(
        settings.DEFAULT_PAGE_SIZE, ge=1, le=settings.MAX_PAGE_SIZE, description="Размер страницы"
    ),
    service: AppointmentService = Depends(get_appointment_service),
):
    """
    Получить страницу будущих (по возрастанию даты) или прошедших
    (по убыванию даты) записей.
    """
    result = service.get_paginated(dataset, page=page, page_size=page_size)
    return {
        "items": result["data"],
        "meta": PageMeta.create(page, page_size, result["count"]),
    }


@router.get("/calendar", response_model=List[AppointmentOut])
def appointments_by_month(
    month: int = Query(..., ge=1, le=12, description="Месяц (1-12)"),
    year: int = Query(..., ge=1, description="Год"),
    service: AppointmentService = Depends(get_appointment_service),
):
    """Записи за месяц для календаря."""
    return service.get_by_month(month, year)


@router.get("/upcoming", response_model=List[AppointmentOut])
def upcoming_appointments(
    limit: int = Query(5, ge=1, le=100, description="Максимум записей"),
    service: AppointmentService = Depends(get_appointment_service),
):
    """Ближайшие ожидающие и подтвержденные записи."""
    return service.get_future(limit=limit)


@router.get("/{appointment_id}", response_model=AppointmentOut)
def get_appointment(
    appointment_id: int, service: AppointmentService = Depends(get_appointment_service)
):
    appointment = service.get_by_id(appointment_id)
    if appointment is None:
        raise HTTPException(404, detail="Appointment not found")
    return appointment


@router.post("", response_model=AppointmentOut, status_code=status.HTTP_201_CREATED)
def create_appointment(
    data: AppointmentIn, service: AppointmentService = Depends(get_appointment_service)
):
    return service.create(data.model_dump(exclude_unset=True))


@router.put("/{appointment_id}", response_model=AppointmentOut)
def update_appointment(
    appointment_id: int,
    data: AppointmentIn,
    service: AppointmentService = Depends(get_appointment_service),
):
    appointment = service.update(appointment_id, data.model_dump(exclude_unset=True))
    if appointment is None:
        raise HTTPException(404, detail="Appointment not found")
    return appointment


@router.delete("/{appointment_id}")
def delete_appointment(
    appointment_id: int, service: AppointmentService = Depends(get_appointment_service)
):
    if not service.delete(appointment_id):
        raise HTTPException(404, detail="Appointment not found")
    return {"message": "Appointment deleted successfully"}
