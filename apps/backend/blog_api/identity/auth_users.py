"""
===============================================================================
TARJETA CRC — identity/auth_users.py
===============================================================================

Módulo:
    Credenciales y sesión de autores/lectores (Argon2 + JWT HS256)

Responsabilidades:
    - Guardar passwords solo como hash Argon2 y verificarlos sin lanzar.
    - Firmar el access token de un User y validarlo de vuelta (TokenPayload).
    - Encontrar el token en el request: header Bearer primero, cookie después.
    - Resolver el User vigente detrás de un token (el rol sale del repo).

Colaboradores:
    - crosscutting.config.get_settings (JWT_SECRET, TTL, cookie)
    - crosscutting.error_responses.unauthorized (401 problem+json)
    - container.get_user_repository
    - identity.users (User, UserRole)

Notas:
    - Un token ausente NO es error acá: la dependencia HTTP lo trata como
      caller anónimo. Un token presente pero inválido sí es 401.
    - Nunca se loguea el token ni el password.
===============================================================================
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from typing import Any, Mapping
from uuid import UUID

import jwt
from argon2 import PasswordHasher
from argon2.exceptions import InvalidHashError, VerificationError
from fastapi import Request

from ..container import get_user_repository
from ..crosscutting.config import get_settings
from ..crosscutting.error_responses import unauthorized
from ..crosscutting.logger import logger
from .users import User, UserRole

JWT_ALGORITHM = "HS256"
DEFAULT_ACCESS_TOKEN_COOKIE = "access_token"
ACCESS_TOKEN_TYPE = "access"

_REQUIRED_CLAIMS = ["sub", "role", "exp"]

_hasher = PasswordHasher()


@dataclass(frozen=True, slots=True)
class AuthSettings:
    jwt_secret: str
    jwt_access_ttl_minutes: int
    jwt_cookie_name: str
    jwt_cookie_secure: bool = False

    @property
    def cookie_name(self) -> str:
        return (self.jwt_cookie_name or "").strip() or DEFAULT_ACCESS_TOKEN_COOKIE

    @property
    def ttl_seconds(self) -> int:
        return int(self.jwt_access_ttl_minutes * 60)


@dataclass(frozen=True, slots=True)
class TokenPayload:
    """Identidad que viaja en el access token."""

    user_id: str
    username: str
    role: UserRole

    @classmethod
    def from_claims(cls, claims: Mapping[str, Any]) -> "TokenPayload":
        if claims.get("typ", ACCESS_TOKEN_TYPE) != ACCESS_TOKEN_TYPE:
            raise unauthorized("Tipo de token inválido.")
        subject = claims.get("sub")
        try:
            role = UserRole(str(claims.get("role")))
        except ValueError as exc:
            raise unauthorized("Token inválido.") from exc
        if not subject:
            raise unauthorized("Token inválido.")
        return cls(
            user_id=str(subject),
            username=str(claims.get("username") or ""),
            role=role,
        )


def get_auth_settings() -> AuthSettings:
    settings = get_settings()
    return AuthSettings(
        jwt_secret=settings.jwt_secret,
        jwt_access_ttl_minutes=settings.jwt_access_ttl_minutes,
        jwt_cookie_name=settings.jwt_cookie_name,
        jwt_cookie_secure=settings.jwt_cookie_secure,
    )


# -----------------------------------------------------------------------------
# Passwords
# -----------------------------------------------------------------------------


def hash_password(password: str) -> str:
    return _hasher.hash(password)


def verify_password(password: str, password_hash: str) -> bool:
    # VerifyMismatchError es subclase de VerificationError.
    try:
        return _hasher.verify(password_hash, password)
    except (VerificationError, InvalidHashError):
        return False


def authenticate_user(email: str, password: str) -> User | None:
    """User si email + password coinciden; None en cualquier otro caso.

    El caller no puede distinguir "email desconocido" de "password incorrecto".
    """
    email = (email or "").strip().lower()
    if not email:
        return None

    user = get_user_repository().get_user_by_email(email)
    if user is None:
        return None
    if not verify_password(password, user.password_hash):
        logger.info("Login rechazado", extra={"user_id": str(user.id)})
        return None
    return user


# -----------------------------------------------------------------------------
# Access tokens
# -----------------------------------------------------------------------------


def create_access_token(
    user: User, settings: AuthSettings | None = None
) -> tuple[str, int]:
    """Firma un access token para `user`. Devuelve (token, expires_in)."""
    settings = settings or get_auth_settings()
    issued_at = datetime.now(timezone.utc)
    expires_in = settings.ttl_seconds

    claims = {
        "sub": str(user.id),
        "username": user.username,
        "role": user.role.value,
        "typ": ACCESS_TOKEN_TYPE,
        "iat": issued_at,
        "exp": issued_at + timedelta(seconds=expires_in),
    }
    return jwt.encode(claims, settings.jwt_secret, algorithm=JWT_ALGORITHM), expires_in


def decode_access_token(
    token: str, settings: AuthSettings | None = None
) -> TokenPayload:
    """Valida firma, expiración y claims; cualquier falla es 401."""
    settings = settings or get_auth_settings()
    try:
        claims = jwt.decode(
            token,
            settings.jwt_secret,
            algorithms=[JWT_ALGORITHM],
            options={"require": _REQUIRED_CLAIMS},
        )
    except jwt.ExpiredSignatureError as exc:
        raise unauthorized("Token expirado.") from exc
    except jwt.InvalidTokenError as exc:
        raise unauthorized("Token inválido.") from exc
    return TokenPayload.from_claims(claims)


def get_current_user(token: str) -> User:
    payload = decode_access_token(token)
    try:
        user_id = UUID(payload.user_id)
    except ValueError as exc:
        raise unauthorized("Token inválido.") from exc

    user = get_user_repository().get_user_by_id(user_id)
    if user is None:
        # Usuario borrado después de emitido el token.
        raise unauthorized("Token inválido.")
    return user


# -----------------------------------------------------------------------------
# Transporte del token
# -----------------------------------------------------------------------------


def _extract_bearer_token(authorization: str | None) -> str | None:
    scheme, _, credentials = (authorization or "").strip().partition(" ")
    if scheme.lower() != "bearer":
        return None
    return credentials.strip() or None


def extract_access_token(request: Request, authorization: str | None) -> str | None:
    return _extract_bearer_token(authorization) or request.cookies.get(
        get_auth_settings().cookie_name
    )
