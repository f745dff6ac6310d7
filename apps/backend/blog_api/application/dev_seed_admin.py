"""
===============================================================================
TASK: Dev Seed Admin (local-only)
===============================================================================

Qué es:
    Asegura que exista un usuario Admin para desarrollo cuando está configurado.
    Es la vía "no self-signup" para obtener un Admin en un entorno limpio.

Seguridad:
    - Guard estricto: solo corre en app_env ∈ {"local", "development"}.

CRC:
    Component: ensure_dev_admin
    Responsibilities:
      - Validar guard de ambiente
      - Asegurar usuario (create si falta; idempotente si existe)
    Collaborators:
      - UserRepository (puerto de dominio)
      - password_hasher (identity.auth_users.hash_password)
      - Settings
===============================================================================
"""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Callable, Final
from uuid import uuid4

from ..crosscutting.config import Settings
from ..crosscutting.logger import logger
from ..domain.repositories import UserRepository
from ..identity.users import User, UserRole

_ALLOWED_ENVS: Final[frozenset[str]] = frozenset({"local", "development"})


def _assert_allowed_environment(settings: Settings) -> None:
    env = (settings.app_env or "").strip().lower()
    if env not in _ALLOWED_ENVS:
        raise RuntimeError(
            f"FATAL: DEV_SEED_ADMIN is enabled but ENV is '{env}' "
            "(must be 'local' or 'development')."
        )


def ensure_dev_admin(
    settings: Settings,
    *,
    user_repo: UserRepository,
    password_hasher: Callable[[str], str],
) -> User | None:
    """
    Ensure a development admin user exists if configured.

    Behavior:
      - If disabled: no-op (returns None)
      - If enabled: create the user when neither email nor username exist
    """
    if not settings.dev_seed_admin:
        return None

    _assert_allowed_environment(settings)

    email = (settings.dev_seed_admin_email or "").strip().lower()
    username = (settings.dev_seed_admin_username or "").strip()
    password = settings.dev_seed_admin_password or ""
    if not email or not username or not password:
        raise ValueError("Dev seed admin is enabled but username/email/password are empty")

    existing = user_repo.get_user_by_email(email) or user_repo.get_user_by_username(
        username
    )
    if existing is not None:
        logger.info("Dev seed admin: user exists; skipping", extra={"email": email})
        return existing

    user = user_repo.create_user(
        User(
            id=uuid4(),
            username=username,
            email=email,
            password_hash=password_hasher(password),
            role=UserRole.ADMIN,
            created_at=datetime.now(timezone.utc),
        )
    )
    logger.info(
        "Dev seed admin: user created",
        extra={"email": email, "role": UserRole.ADMIN.value},
    )
    return user
