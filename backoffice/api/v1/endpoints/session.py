"""
Состояние сессии для клиентского приложения.
"""

from fastapi import APIRouter, Depends, Query

from backoffice.core.auth import RequestContext, get_request_context, is_authenticated, resolve_redirect
from backoffice.core.config import settings

router = APIRouter()


@router.get("")
def session_state(
    path: str = Query("/", description="Путь страницы, на которую переходит клиент"),
    context: RequestContext = Depends(get_request_context),
):
    """
    Проверить доступ к странице.

    Returns:
        dict: authenticated и redirect (куда перенаправить или null)
    """
    authenticated = is_authenticated(context.session_user, context.dev_token)
    return {
        "authenticated": authenticated,
        "redirect": resolve_redirect(path, authenticated, settings.LOGIN_PATH),
    }
