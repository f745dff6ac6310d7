"""
===============================================================================
TARJETA CRC — identity/users.py
===============================================================================

Módulo:
    Modelos de Usuario (JWT)

Responsabilidades:
    - Definir el enum cerrado de roles (Reader / Writer / Admin).
    - Definir el dataclass User utilizado por los flujos de auth (registro / login / token).
    - Mantener el contrato de datos de auth centralizado y estable.

Colaboradores:
    - identity/auth_users.py: usa User y UserRole para emitir/validar JWT.
    - domain.access_policy / domain.visibility_policy: deciden por UserRole.
    - infrastructure/repositories/*/users.py: mapean filas -> User.

Notas:
    - Este módulo NO contiene lógica de negocio: solo "shapes" de datos.
    - Los roles no heredan entre sí. La jerarquía efectiva vive en la matriz
      de permisos de domain.access_policy.
===============================================================================
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from uuid import UUID


class UserRole(str, Enum):
    """Roles soportados (conjunto cerrado)."""

    READER = "Reader"
    WRITER = "Writer"
    ADMIN = "Admin"


@dataclass(frozen=True, slots=True)
class User:
    """Registro de usuario utilizado por autenticación (JWT)."""

    id: UUID
    username: str
    email: str
    password_hash: str
    role: UserRole
    created_at: datetime | None = None
