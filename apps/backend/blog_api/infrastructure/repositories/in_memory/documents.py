"""
============================================================
TARJETA CRC — infrastructure/repositories/in_memory/documents.py
============================================================
Class: InMemoryDocumentRepository

Responsibilities:
  - Almacenar documentos en memoria (tests / local dev sin DATABASE_URL).
  - Filtrar y contar con el MISMO predicado de visibilidad (Predicate.matches).
  - Mantener ordering determinístico alineado con Postgres:
      ORDER BY created_at DESC NULLS LAST, id ASC

Collaborators:
  - domain.entities.Document
  - domain.predicates.Predicate
  - domain.repositories.DocumentRepository (contrato a implementar)

Constraints / Notes:
  - Thread-safe: acceso protegido por Lock.
  - Repo puro: NO decide visibilidad, solo aplica el predicado recibido.
  - Copias defensivas: evita compartir listas mutables (tags) entre callers.
============================================================
"""

from __future__ import annotations

from dataclasses import replace
from datetime import datetime, timezone
from threading import Lock
from typing import Dict, Iterable, List, Optional
from uuid import UUID

from ....domain.entities import Document
from ....domain.predicates import Predicate


class InMemoryDocumentRepository:
    """Repositorio in-memory, thread-safe, para Documents."""

    def __init__(self) -> None:
        self._lock = Lock()
        self._documents: Dict[UUID, Document] = {}

    # =========================================================
    # Helpers internos
    # =========================================================
    @staticmethod
    def _copy(document: Document) -> Document:
        return replace(document, tags=list(document.tags or []))

    @staticmethod
    def _created_sort_key(d: Document) -> datetime:
        """R: Emula 'NULLS LAST' para created_at cuando ordenamos DESC."""
        return d.created_at or datetime.min.replace(tzinfo=timezone.utc)

    @classmethod
    def _sorted(cls, items: Iterable[Document]) -> List[Document]:
        return sorted(
            items,
            key=lambda d: (-cls._created_sort_key(d).timestamp(), str(d.id)),
        )

    def _matching(self, predicate: Predicate) -> List[Document]:
        with self._lock:
            values = list(self._documents.values())
        return self._sorted(d for d in values if predicate.matches(d))

    # =========================================================
    # Listados
    # =========================================================
    def list_documents(
        self, predicate: Predicate, *, offset: int = 0, limit: int = 10
    ) -> List[Document]:
        page = self._matching(predicate)[offset : offset + limit]
        return [self._copy(d) for d in page]

    def count_documents(self, predicate: Predicate) -> int:
        return len(self._matching(predicate))

    # =========================================================
    # CRUD
    # =========================================================
    def get_document(self, document_id: UUID) -> Optional[Document]:
        with self._lock:
            document = self._documents.get(document_id)
        return self._copy(document) if document else None

    def create_document(self, document: Document) -> Document:
        now = datetime.now(timezone.utc)
        stored = replace(
            self._copy(document),
            created_at=document.created_at or now,
            updated_at=document.updated_at or document.created_at or now,
        )
        with self._lock:
            self._documents[stored.id] = stored
        return self._copy(stored)

    def update_document(self, document: Document) -> Optional[Document]:
        with self._lock:
            existing = self._documents.get(document.id)
            if existing is None:
                return None
            # id / owner_id / created_at son inmutables.
            stored = replace(
                self._copy(document),
                owner_id=existing.owner_id,
                created_at=existing.created_at,
            )
            self._documents[document.id] = stored
        return self._copy(stored)

    def delete_document(self, document_id: UUID) -> bool:
        with self._lock:
            return self._documents.pop(document_id, None) is not None
