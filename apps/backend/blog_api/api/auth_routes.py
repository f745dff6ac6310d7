"""
===============================================================================
TARJETA CRC — api/auth_routes.py
===============================================================================

Módulo:
    Endpoints de autenticación (registro / login / logout / me)

Responsabilidades:
    - Registrar usuarios (Reader por defecto; Writer a pedido; Admin solo si
      ALLOW_ADMIN_SIGNUP=true).
    - Emitir JWT en login (body + cookie httpOnly).
    - Exponer el usuario autenticado.

Colaboradores:
    - identity.auth_users (hash, authenticate, tokens)
    - interfaces.api.http.dependencies.require_user
    - container.get_user_repository
===============================================================================
"""

from __future__ import annotations

import re
from datetime import datetime, timezone
from uuid import UUID, uuid4

from fastapi import APIRouter, Depends, Response
from pydantic import BaseModel, Field, field_validator

from ..container import get_user_repository
from ..crosscutting.config import get_settings
from ..crosscutting.error_responses import (
    OPENAPI_ERROR_RESPONSES,
    conflict,
    forbidden,
    unauthorized,
)
from ..crosscutting.logger import logger
from ..domain.repositories import UserRepository
from ..identity.auth_users import (
    authenticate_user,
    create_access_token,
    get_auth_settings,
    hash_password,
)
from ..identity.users import User, UserRole
from ..interfaces.api.http.dependencies import require_user

router = APIRouter(responses=OPENAPI_ERROR_RESPONSES)

_EMAIL_RE = re.compile(r"^[^@\s]+@[^@\s]+\.[^@\s]+$")
_USERNAME_RE = re.compile(r"^[A-Za-z0-9_.-]+$")


# -----------------------------------------------------------------------------
# Modelos HTTP (DTOs)
# -----------------------------------------------------------------------------


class RegisterRequest(BaseModel):
    username: str = Field(..., min_length=3, max_length=50)
    email: str = Field(..., min_length=3, max_length=320)
    password: str = Field(..., min_length=6, max_length=512)
    role: UserRole = Field(default=UserRole.READER)

    @field_validator("username")
    @classmethod
    def validar_username(cls, v: str) -> str:
        value = v.strip()
        if not _USERNAME_RE.match(value):
            raise ValueError("username solo admite letras, números, '_', '.' y '-'")
        return value

    @field_validator("email")
    @classmethod
    def normalizar_email(cls, v: str) -> str:
        value = v.strip().lower()
        if not _EMAIL_RE.match(value):
            raise ValueError("email inválido")
        return value


class LoginRequest(BaseModel):
    email: str = Field(..., min_length=3, max_length=320)
    password: str = Field(..., min_length=1, max_length=512)

    @field_validator("email")
    @classmethod
    def normalizar_email(cls, v: str) -> str:
        return v.strip().lower()


class UserResponse(BaseModel):
    id: UUID
    username: str
    email: str
    role: UserRole
    created_at: datetime | None


class LoginResponse(BaseModel):
    access_token: str
    token_type: str = "bearer"
    expires_in: int
    user: UserResponse


# -----------------------------------------------------------------------------
# Helpers
# -----------------------------------------------------------------------------


def _to_user_response(user: User) -> UserResponse:
    return UserResponse(
        id=user.id,
        username=user.username,
        email=user.email,
        role=user.role,
        created_at=user.created_at,
    )


def _set_auth_cookie(response: Response, token: str, expires_in: int) -> None:
    settings = get_auth_settings()
    response.set_cookie(
        key=settings.cookie_name,
        value=token,
        httponly=True,
        secure=settings.jwt_cookie_secure,
        samesite="lax",
        max_age=expires_in,
        path="/",
    )


def _clear_auth_cookie(response: Response) -> None:
    settings = get_auth_settings()
    response.delete_cookie(
        key=settings.cookie_name,
        path="/",
        samesite="lax",
        secure=settings.jwt_cookie_secure,
    )


def _issue_session(user: User, response: Response) -> LoginResponse:
    token, expires_in = create_access_token(user)
    _set_auth_cookie(response, token, expires_in)
    return LoginResponse(
        access_token=token,
        expires_in=expires_in,
        user=_to_user_response(user),
    )


# -----------------------------------------------------------------------------
# Endpoints
# -----------------------------------------------------------------------------


@router.post(
    "/auth/register", response_model=LoginResponse, status_code=201, tags=["auth"]
)
def register(
    req: RegisterRequest,
    response: Response,
    users: UserRepository = Depends(get_user_repository),
):
    """Crea un usuario y devuelve su sesión (JWT)."""
    if req.role == UserRole.ADMIN and not get_settings().allow_admin_signup:
        raise forbidden("El registro como Admin está deshabilitado.")

    if users.get_user_by_email(req.email):
        raise conflict("El email ya está registrado.")
    if users.get_user_by_username(req.username):
        raise conflict("El username ya está en uso.")

    user = users.create_user(
        User(
            id=uuid4(),
            username=req.username,
            email=req.email,
            password_hash=hash_password(req.password),
            role=req.role,
            created_at=datetime.now(timezone.utc),
        )
    )
    logger.info(
        "Usuario registrado",
        extra={"user_id": str(user.id), "role": user.role.value},
    )
    return _issue_session(user, response)


@router.post("/auth/login", response_model=LoginResponse, tags=["auth"])
def login(req: LoginRequest, response: Response):
    """Inicia sesión y devuelve JWT (también como cookie httpOnly)."""
    user = authenticate_user(req.email, req.password)
    if not user:
        raise unauthorized("Credenciales inválidas.")
    return _issue_session(user, response)


@router.post("/auth/logout", tags=["auth"])
def logout(response: Response):
    """Borra la cookie de acceso. Idempotente, no requiere autenticación."""
    _clear_auth_cookie(response)
    return {"ok": True}


@router.get("/auth/me", response_model=UserResponse, tags=["auth"])
def me(user: User = Depends(require_user())):
    """Devuelve el usuario autenticado (JWT o cookie)."""
    return _to_user_response(user)
