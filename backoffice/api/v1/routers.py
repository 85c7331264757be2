"""
Основной роутер API v1.

Подключает все endpoint'ы приложения.
"""

from fastapi import APIRouter, Depends

from backoffice.api.v1.endpoints import appointments, categories, products, session
from backoffice.core.auth import require_authenticated

# Создание основного роутера API v1
api_router = APIRouter()

protected = [Depends(require_authenticated)]

# Подключение роутеров для различных ресурсов
api_router.include_router(
    products.router, prefix="/products", tags=["products"], dependencies=protected
)
api_router.include_router(
    categories.router, prefix="/categories", tags=["categories"], dependencies=protected
)
api_router.include_router(
    appointments.router, prefix="/appointments", tags=["appointments"], dependencies=protected
)
api_router.include_router(session.router, prefix="/session", tags=["session"])
