"""
Проверка доступа.

Пользователь считается аутентифицированным, если есть сессия
(валидный JWT токен) или cookie режима разработки равна "true".
Решение принимается чистыми функциями от контекста запроса.
"""

from dataclasses import dataclass
from typing import Optional

import jwt
from fastapi import Depends, HTTPException, Request, status

from backoffice.core.config import settings


@dataclass
class RequestContext:
    """
    Контекст запроса для проверки доступа.

    Attributes:
        session_user: Данные пользователя из токена сессии (None без сессии)
        dev_token: Значение cookie режима разработки
    """

    session_user: Optional[dict] = None
    dev_token: Optional[str] = None


def is_authenticated(session_user: Optional[dict], dev_token: Optional[str]) -> bool:
    """Есть сессия или включен режим разработки."""
    return bool(session_user) or dev_token == "true"


def resolve_redirect(
    path: str, authenticated: bool, login_path: str = "/login"
) -> Optional[str]:
    """
    Куда перенаправить запрос.

    Returns:
        Optional[str]: "/" для вошедшего пользователя на странице входа,
            страницу входа для анонимного пользователя на любой другой
            странице, иначе None
    """
    if authenticated and path == login_path:
        return "/"
    if not authenticated and path != login_path:
        return login_path
    return None


def verify_token(token: str) -> Optional[dict]:
    """Проверка JWT токена сессии."""
    try:
        return jwt.decode(token, settings.SECRET_KEY, algorithms=[settings.ALGORITHM])
    except jwt.PyJWTError:
        return None


def get_request_context(request: Request) -> RequestContext:
    """Собрать контекст из заголовка Authorization или cookie сессии."""
    token = request.cookies.get(settings.SESSION_COOKIE)
    authorization = request.headers.get("Authorization", "")
    if authorization.lower().startswith("bearer "):
        token = authorization[7:]

    return RequestContext(
        session_user=verify_token(token) if token else None,
        dev_token=request.cookies.get(settings.DEV_TOKEN_COOKIE),
    )


def require_authenticated(
    context: RequestContext = Depends(get_request_context),
) -> RequestContext:
    """Dependency: пропустить только аутентифицированные запросы."""
    if settings.AUTH_ENABLED and not is_authenticated(context.session_user, context.dev_token):
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Not authenticated",
            headers={"WWW-Authenticate": "Bearer"},
        )
    return context
