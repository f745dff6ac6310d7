"""
============================================================
TARJETA CRC — infrastructure/repositories/in_memory/replies.py
============================================================
Class: InMemoryReplyRepository

Responsibilities:
  - Almacenar replies en memoria.
  - Listar por documento (created_at DESC, id ASC).
  - Borrado individual y en cascada por documento.

Constraints / Notes:
  - Thread-safe: acceso protegido por Lock.
  - No valida existencia del documento padre (eso lo decide el use case).
============================================================
"""

from __future__ import annotations

from dataclasses import replace
from datetime import datetime, timezone
from threading import Lock
from typing import Dict, List, Optional
from uuid import UUID

from ....domain.entities import Reply

_EPOCH = datetime.min.replace(tzinfo=timezone.utc)


class InMemoryReplyRepository:
    """Repositorio in-memory, thread-safe, para Replies."""

    def __init__(self) -> None:
        self._lock = Lock()
        self._replies: Dict[UUID, Reply] = {}

    def list_replies(self, document_id: UUID) -> List[Reply]:
        with self._lock:
            values = [r for r in self._replies.values() if r.document_id == document_id]
        return [
            replace(r)
            for r in sorted(
                values,
                key=lambda r: (-(r.created_at or _EPOCH).timestamp(), str(r.id)),
            )
        ]

    def get_reply(self, reply_id: UUID) -> Optional[Reply]:
        with self._lock:
            reply = self._replies.get(reply_id)
        return replace(reply) if reply else None

    def create_reply(self, reply: Reply) -> Reply:
        stored = replace(reply, created_at=reply.created_at or datetime.now(timezone.utc))
        with self._lock:
            self._replies[stored.id] = stored
        return replace(stored)

    def delete_reply(self, reply_id: UUID) -> bool:
        with self._lock:
            return self._replies.pop(reply_id, None) is not None

    def delete_replies_for_document(self, document_id: UUID) -> int:
        with self._lock:
            doomed = [rid for rid, r in self._replies.items() if r.document_id == document_id]
            for rid in doomed:
                del self._replies[rid]
        return len(doomed)
