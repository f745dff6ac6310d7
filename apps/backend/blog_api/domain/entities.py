"""
===============================================================================
TARJETA CRC — domain/entities.py
===============================================================================

Módulo:
    Entidades del Dominio (Document, Reply)

Responsabilidades:
    - Definir estructuras centrales del negocio (sin infraestructura).
    - Brindar helpers mínimos (métodos) para mantener invariantes simples.
    - Mantener tipos claros para casos de uso y repositorios.

Colaboradores:
    - domain.repositories: persisten/recuperan estas entidades.
    - domain.visibility_policy / domain.access_policy: deciden sobre ellas.
    - application/usecases: construyen/consumen estas entidades.

Invariantes:
    - Un Document tiene exactamente un owner y un status en todo momento.
    - id / owner_id (y document_id en Reply) no cambian después de crearse.
    - Los cambios de status los dispara siempre un caller (no hay transición
      automática).
===============================================================================
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from datetime import datetime, timezone
from enum import Enum
from typing import Any, List, Mapping, Optional
from uuid import UUID


def _utcnow() -> datetime:
    """Fecha/hora UTC (helper interno)."""
    return datetime.now(timezone.utc)


# ---------------------------------------------------------------------------
# Document
# ---------------------------------------------------------------------------


class DocumentStatus(str, Enum):
    """Estado de publicación de un documento."""

    DRAFT = "draft"
    PUBLISHED = "published"


# Campos que un caller autorizado puede sobrescribir en un update parcial.
EDITABLE_DOCUMENT_FIELDS: frozenset[str] = frozenset(
    {"title", "content", "tags", "status"}
)


@dataclass
class Document:
    """
    Unidad publicable de contenido.

    Importante:
      - `status` es el único gate para replies.
      - `owner_id` es la identidad creadora (inmutable).
    """

    id: UUID
    title: str
    content: str
    owner_id: UUID
    status: DocumentStatus = DocumentStatus.DRAFT
    tags: List[str] = field(default_factory=list)
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    @property
    def is_published(self) -> bool:
        return self.status == DocumentStatus.PUBLISHED

    def is_owned_by(self, user_id: UUID | None) -> bool:
        return user_id is not None and self.owner_id == user_id

    def with_changes(
        self, changes: Mapping[str, Any], *, at: datetime | None = None
    ) -> "Document":
        """
        Devuelve una copia con un merge parcial aplicado.

        Reglas:
          - Solo se aplican claves presentes en `changes` (omitido != None).
          - Claves fuera de EDITABLE_DOCUMENT_FIELDS se ignoran (id/owner son inmutables).
        """
        updates = {k: v for k, v in changes.items() if k in EDITABLE_DOCUMENT_FIELDS}
        if "status" in updates and updates["status"] is not None:
            updates["status"] = DocumentStatus(updates["status"])
        if "tags" in updates and updates["tags"] is not None:
            updates["tags"] = list(updates["tags"])
        return replace(self, **updates, updated_at=at or _utcnow())


# ---------------------------------------------------------------------------
# Reply
# ---------------------------------------------------------------------------


@dataclass
class Reply:
    """Comentario asociado a exactamente un Document."""

    id: UUID
    document_id: UUID
    owner_id: UUID
    content: str
    created_at: Optional[datetime] = None

    def is_owned_by(self, user_id: UUID | None) -> bool:
        return user_id is not None and self.owner_id == user_id
