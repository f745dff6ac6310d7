"""
===============================================================================
TARJETA CRC — domain/caller.py
===============================================================================

Módulo:
    Contexto explícito del caller (identidad + rol)

Responsabilidades:
    - Representar quién hace el request como un valor inmutable.
    - Modelar el caller anónimo (sin identidad, sin rol).

Colaboradores:
    - domain.visibility_policy / domain.access_policy (lo reciben como parámetro).
    - interfaces/api/http/dependencies.py: construye Caller desde el JWT.

Notas:
    - No existe "usuario actual" global: el Caller viaja por parámetro en
      cada decisión.
===============================================================================
"""

from __future__ import annotations

from dataclasses import dataclass
from uuid import UUID

from ..identity.users import UserRole


@dataclass(frozen=True, slots=True)
class Caller:
    """Actor para decisiones de visibilidad y autorización."""

    user_id: UUID | None = None
    role: UserRole | None = None

    @property
    def is_authenticated(self) -> bool:
        return self.user_id is not None and self.role is not None

    @property
    def effective_role(self) -> UserRole:
        """Rol para decidir visibilidad: el anónimo se comporta como Reader."""
        if not self.is_authenticated:
            return UserRole.READER
        return self.role


ANONYMOUS = Caller()


def resolve_caller(caller: Caller | None) -> Caller:
    """Normaliza `None` al caller anónimo."""
    return caller if caller is not None else ANONYMOUS
