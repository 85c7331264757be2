"""
Dependency-фабрики сервисов для endpoint'ов.
"""

from fastapi import Depends
from sqlalchemy.orm import Session

from backoffice.db.database import get_db
from backoffice.services.appointment_service import AppointmentService
from backoffice.services.product_service import ProductService
from backoffice.services.taxonomy_service import TaxonomyService


def get_product_service(db: Session = Depends(get_db)) -> ProductService:
    return ProductService(db)


def get_appointment_service(db: Session = Depends(get_db)) -> AppointmentService:
    return AppointmentService(db)


def get_taxonomy_service(db: Session = Depends(get_db)) -> TaxonomyService:
    return TaxonomyService(db)
