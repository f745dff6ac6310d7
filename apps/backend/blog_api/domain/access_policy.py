"""
===============================================================================
TARJETA CRC — domain/access_policy.py
===============================================================================

Módulo:
    Política de Autorización (escrituras sobre Document / Reply)

Responsabilidades:
    - Decidir create/update/delete sobre una instancia concreta.
    - Mantener la matriz rol x acción como tabla explícita y auditable.
    - Enforzar la precondición cruzada: para crear un Reply, el Document padre
      debe existir y estar publicado.

Colaboradores:
    - domain.caller.Caller
    - domain.entities.Document, Reply
    - identity.users.UserRole
    - application/usecases: consumen AccessDecision y lo traducen a errores.

Reglas (intención):
    - Anónimo => UNAUTHENTICATED en cualquier escritura.
    - Document create: Writer / Admin.
    - Document update/delete: Admin cualquiera; Writer solo los propios.
    - Reply create: cualquier rol autenticado, padre publicado.
    - Reply delete: solo el owner. Admin NO tiene override (asimétrico con
      Document delete; se mantiene tal cual hasta que producto lo defina).

Notas:
    - Funciones totales: nunca lanzan, siempre devuelven AccessDecision.
===============================================================================
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Final, Mapping

from ..identity.users import UserRole
from .caller import Caller, resolve_caller
from .entities import Document, Reply


class AccessErrorKind(str, Enum):
    """
    Categorías de denegación.

    Mapeo HTTP (lo hace la capa de interfaces):
      - UNAUTHENTICATED -> 401
      - ACCESS_DENIED -> 403
      - NOT_FOUND -> 404
      - INVALID_STATE -> 400 (precondición, no permiso)
    """

    UNAUTHENTICATED = "UNAUTHENTICATED"
    ACCESS_DENIED = "ACCESS_DENIED"
    NOT_FOUND = "NOT_FOUND"
    INVALID_STATE = "INVALID_STATE"


class DocumentAction(str, Enum):
    CREATE = "create"
    UPDATE = "update"
    DELETE = "delete"


class ReplyAction(str, Enum):
    CREATE = "create"
    DELETE = "delete"


class Grant(str, Enum):
    """Alcance de un permiso en la matriz."""

    NONE = "none"
    OWN = "own"
    ANY = "any"


@dataclass(frozen=True, slots=True)
class AccessDecision:
    """Resultado de una decisión: error None => permitido."""

    error: AccessErrorKind | None = None
    reason: str = ""

    @property
    def allowed(self) -> bool:
        return self.error is None


ALLOW: Final[AccessDecision] = AccessDecision()


# -----------------------------------------------------------------------------
# Matrices rol x acción
# -----------------------------------------------------------------------------
DOCUMENT_PERMISSIONS: Final[Mapping[UserRole, Mapping[DocumentAction, Grant]]] = {
    UserRole.READER: {
        DocumentAction.CREATE: Grant.NONE,
        DocumentAction.UPDATE: Grant.NONE,
        DocumentAction.DELETE: Grant.NONE,
    },
    UserRole.WRITER: {
        DocumentAction.CREATE: Grant.ANY,
        DocumentAction.UPDATE: Grant.OWN,
        DocumentAction.DELETE: Grant.OWN,
    },
    UserRole.ADMIN: {
        DocumentAction.CREATE: Grant.ANY,
        DocumentAction.UPDATE: Grant.ANY,
        DocumentAction.DELETE: Grant.ANY,
    },
}

REPLY_PERMISSIONS: Final[Mapping[UserRole, Mapping[ReplyAction, Grant]]] = {
    UserRole.READER: {ReplyAction.CREATE: Grant.ANY, ReplyAction.DELETE: Grant.OWN},
    UserRole.WRITER: {ReplyAction.CREATE: Grant.ANY, ReplyAction.DELETE: Grant.OWN},
    UserRole.ADMIN: {ReplyAction.CREATE: Grant.ANY, ReplyAction.DELETE: Grant.OWN},
}


def document_grant(role: UserRole, action: DocumentAction) -> Grant:
    return DOCUMENT_PERMISSIONS.get(role, {}).get(action, Grant.NONE)


def reply_grant(role: UserRole, action: ReplyAction) -> Grant:
    return REPLY_PERMISSIONS.get(role, {}).get(action, Grant.NONE)


# -----------------------------------------------------------------------------
# Decisiones
# -----------------------------------------------------------------------------
def authorize_document_write(
    caller: Caller | None,
    action: DocumentAction,
    document: Document | None = None,
) -> AccessDecision:
    """
    Autoriza create/update/delete de un Document.

    Orden de chequeos:
      1) autenticación
      2) el rol tiene algún permiso para la acción
      3) existencia (update/delete)
      4) ownership si el permiso es OWN
    """
    caller = resolve_caller(caller)
    if not caller.is_authenticated:
        return _deny(AccessErrorKind.UNAUTHENTICATED, "Autenticación requerida.")

    grant = document_grant(caller.role, action)
    if grant == Grant.NONE:
        return _deny(AccessErrorKind.ACCESS_DENIED, "Rol insuficiente.")

    if action == DocumentAction.CREATE:
        return ALLOW

    if document is None:
        return _deny(AccessErrorKind.NOT_FOUND, "Documento no encontrado.")

    return _check_grant(grant, owned=document.is_owned_by(caller.user_id))


def authorize_reply_write(
    caller: Caller | None,
    action: ReplyAction,
    reply: Reply | None = None,
    parent_document: Document | None = None,
) -> AccessDecision:
    """
    Autoriza create/delete de un Reply.

    create:
      - padre inexistente => NOT_FOUND
      - padre no publicado => INVALID_STATE
    delete:
      - reply inexistente => NOT_FOUND
      - solo el owner (sin override de Admin)
    """
    caller = resolve_caller(caller)
    if not caller.is_authenticated:
        return _deny(AccessErrorKind.UNAUTHENTICATED, "Autenticación requerida.")

    grant = reply_grant(caller.role, action)
    if grant == Grant.NONE:
        return _deny(AccessErrorKind.ACCESS_DENIED, "Rol insuficiente.")

    if action == ReplyAction.CREATE:
        if parent_document is None:
            return _deny(AccessErrorKind.NOT_FOUND, "Documento no encontrado.")
        if not parent_document.is_published:
            return _deny(
                AccessErrorKind.INVALID_STATE,
                "No se puede comentar un documento en borrador.",
            )
        return _check_grant(grant, owned=True)

    if reply is None:
        return _deny(AccessErrorKind.NOT_FOUND, "Comentario no encontrado.")

    return _check_grant(grant, owned=reply.is_owned_by(caller.user_id))


def _check_grant(grant: Grant, *, owned: bool) -> AccessDecision:
    if grant == Grant.ANY:
        return ALLOW
    if grant == Grant.OWN and owned:
        return ALLOW
    return _deny(AccessErrorKind.ACCESS_DENIED, "Acceso denegado.")


def _deny(kind: AccessErrorKind, reason: str) -> AccessDecision:
    return AccessDecision(error=kind, reason=reason)
