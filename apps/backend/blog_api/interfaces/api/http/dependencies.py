"""
===============================================================================
TARJETA CRC — dependencies.py (Dependencias de identidad para routers)
===============================================================================

Responsabilidades:
  - Resolver el Caller del request (JWT -> User -> Caller).
  - Sin token => Caller anónimo (el dominio decide si alcanza).
  - Token presente pero inválido/expirado => 401 (nunca se degrada a anónimo).
  - Enriquecer el contexto de logs con user_id / role.

Colaboradores:
  - identity.auth_users (extract_access_token, get_current_user)
  - domain.caller (Caller, ANONYMOUS)
  - blog_api.context (set_user_context)
===============================================================================
"""

from __future__ import annotations

from typing import Callable

from blog_api.context import set_user_context
from blog_api.crosscutting.error_responses import unauthorized
from blog_api.domain.caller import ANONYMOUS, Caller
from blog_api.identity.auth_users import extract_access_token, get_current_user
from blog_api.identity.users import User
from fastapi import Header, Request


def to_caller(user: User | None) -> Caller:
    """User (auth) -> Caller (policy). None => anónimo."""
    if user is None:
        return ANONYMOUS
    return Caller(user_id=user.id, role=user.role)


def _resolve_user(request: Request, authorization: str | None) -> User | None:
    token = extract_access_token(request, authorization)
    if not token:
        return None

    user = get_current_user(token)
    request.state.user = user
    set_user_context(user_id=str(user.id), role=user.role.value)
    return user


async def get_optional_caller(
    request: Request,
    authorization: str | None = Header(None, alias="Authorization"),
) -> Caller:
    """Dependency FastAPI: Caller autenticado o anónimo."""
    return to_caller(_resolve_user(request, authorization))


def require_user() -> Callable:
    """Dependency FastAPI: requiere usuario autenticado por JWT."""

    async def dependency(
        request: Request,
        authorization: str | None = Header(None, alias="Authorization"),
    ) -> User:
        user = _resolve_user(request, authorization)
        if user is None:
            raise unauthorized("Falta token Bearer.")
        return user

    return dependency
