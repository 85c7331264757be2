"""
Главный модуль FastAPI приложения Backoffice API.

Содержит конфигурацию приложения, логирование, обработчики ошибок и роутеры.
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError

from backoffice.api.v1.routers import api_router
from backoffice.core.config import settings
from backoffice.core.exceptions import ValidationFailed

# Настройка логирования
logging.basicConfig(
    level=getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO),
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)

# Создание экземпляра FastAPI приложения
app = FastAPI(
    title="Backoffice API",
    description="API для управления товарами, категориями и записями",
    version="1.0.0",
    docs_url="/docs",
    redoc_url="/redoc",
)

# Настройка CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],  # TODO: сузить в продакшене до конкретных доменов
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(ValidationFailed)
async def validation_failed_handler(request: Request, exc: ValidationFailed):
    """Ошибки валидации: список пар поле/сообщение."""
    return JSONResponse(
        status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
        content={
            "detail": str(exc),
            "errors": [{"field": e.field, "message": e.message} for e in exc.errors],
        },
    )


@app.exception_handler(SQLAlchemyError)
async def backend_error_handler(request: Request, exc: SQLAlchemyError):
    """Ошибки БД пробрасываются клиенту как ошибка бэкенда."""
    logger.error(f"Backend error on {request.method} {request.url.path}: {exc}")
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"detail": "Backend error"},
    )


@app.get("/healthz")
def healthz():
    """
    Health check endpoint для мониторинга состояния приложения.

    Returns:
        dict: Статус приложения
    """
    return {"status": "ok", "service": "Backoffice API", "version": "1.0.0"}


# Подключение API роутеров
app.include_router(api_router, prefix="/api/v1")
