"""
===============================================================================
TARJETA CRC — domain/visibility_policy.py
===============================================================================

Módulo:
    Política de Visibilidad de Documentos (listado + lectura puntual)

Responsabilidades:
    - Construir el predicado que un listado/búsqueda DEBE aplicar para que
      solo vuelvan documentos permitidos (enforcement server-side).
    - Decidir si un documento ya cargado puede mostrarse al caller.
    - Ser 100% testeable: funciones puras, inputs explícitos.

Colaboradores:
    - domain.caller.Caller (rol + identidad, o anónimo)
    - domain.predicates (FieldEquals, TextSearch, and_/or_)
    - domain.entities.Document, DocumentStatus
    - application: ListDocuments / GetDocument / ListReplies usan esta policy.

Reglas (listado):
    - Anónimo / Reader: status == published. El filtro de status pedido se ignora.
    - Writer: (owner == caller) OR (status == published). Si pide status, el
      predicado se REEMPLAZA por status == pedido (no se combina con ownership).
    - Admin: sin restricción; si pide status, status == pedido.
    - Búsqueda: AND con el predicado de rol.

Reglas (lectura puntual):
    - Anónimo / Reader: solo published.
    - Writer: published o propio.
    - Admin: siempre.
===============================================================================
"""

from __future__ import annotations

from dataclasses import dataclass

from ..identity.users import UserRole
from .caller import Caller, resolve_caller
from .entities import Document, DocumentStatus
from .predicates import MATCH_ALL, FieldEquals, Predicate, TextSearch, and_, or_

_PUBLISHED_ONLY = FieldEquals("status", DocumentStatus.PUBLISHED)


@dataclass(frozen=True, slots=True)
class ListingFilters:
    """Filtros ya validados que pide el caller."""

    status: DocumentStatus | None = None
    search: str | None = None


def build_listing_predicate(
    caller: Caller | None, filters: ListingFilters | None = None
) -> Predicate:
    """Predicado de visibilidad para listados (filtrar + contar)."""
    caller = resolve_caller(caller)
    filters = filters or ListingFilters()

    role_predicate = _role_predicate(caller, filters.status)

    search = (filters.search or "").strip()
    if not search:
        return role_predicate
    return and_(role_predicate, TextSearch(search))


def can_disclose(caller: Caller | None, document: Document) -> bool:
    """True si el caller puede ver el documento (ya se verificó existencia)."""
    caller = resolve_caller(caller)

    if document.is_published:
        return True

    role = caller.effective_role
    if role == UserRole.ADMIN:
        return True
    if role == UserRole.WRITER:
        return document.is_owned_by(caller.user_id)
    return False


def _role_predicate(caller: Caller, requested_status: DocumentStatus | None) -> Predicate:
    role = caller.effective_role

    if role == UserRole.ADMIN:
        if requested_status is not None:
            return FieldEquals("status", requested_status)
        return MATCH_ALL

    if role == UserRole.WRITER:
        # El status pedido tiene precedencia sobre la unión ownership/published.
        if requested_status is not None:
            return FieldEquals("status", requested_status)
        return or_(FieldEquals("owner_id", caller.user_id), _PUBLISHED_ONLY)

    return _PUBLISHED_ONLY
