"""
============================================================
TARJETA CRC — infrastructure/repositories/postgres/replies.py
============================================================
Class: PostgresReplyRepository

Responsibilities:
  - Persistir replies en la tabla `replies`.
  - Listar por documento (created_at DESC, id ASC).
  - Borrado individual y por documento (la FK también cascadea).

Collaborators:
  - psycopg_pool.ConnectionPool
  - domain.entities.Reply
  - crosscutting.exceptions.DatabaseError / crosscutting.logger
============================================================
"""

from __future__ import annotations

from typing import Iterable, List, Optional
from uuid import UUID

from psycopg_pool import ConnectionPool

from ....crosscutting.exceptions import DatabaseError
from ....crosscutting.logger import logger
from ....domain.entities import Reply

_SELECT_COLUMNS = "id, document_id, owner_id, content, created_at"


class PostgresReplyRepository:
    """R: Implementación PostgreSQL del repositorio de Replies."""

    def __init__(self, pool: Optional[ConnectionPool] = None):
        self._pool = pool

    def _get_pool(self) -> ConnectionPool:
        if self._pool is not None:
            return self._pool

        from ...db.pool import get_pool

        return get_pool()

    @staticmethod
    def _row_to_reply(row: tuple) -> Reply:
        reply_id, document_id, owner_id, content, created_at = row
        return Reply(
            id=reply_id,
            document_id=document_id,
            owner_id=owner_id,
            content=content,
            created_at=created_at,
        )

    def _run(
        self,
        *,
        query: str,
        params: Iterable[object],
        context_msg: str,
        extra: dict,
        fetch: str,
    ):
        try:
            pool = self._get_pool()
            with pool.connection() as conn:
                cursor = conn.execute(query, tuple(params))
                if fetch == "all":
                    return cursor.fetchall()
                if fetch == "one":
                    return cursor.fetchone()
                return cursor.rowcount or 0
        except Exception as exc:
            logger.exception(context_msg, extra={**extra, "error": str(exc)})
            raise DatabaseError(f"{context_msg}: {exc}") from exc

    def list_replies(self, document_id: UUID) -> List[Reply]:
        rows = self._run(
            query=f"""
                SELECT {_SELECT_COLUMNS}
                FROM replies
                WHERE document_id = %s
                ORDER BY created_at DESC NULLS LAST, id ASC
            """,
            params=[document_id],
            context_msg="PostgresReplyRepository: Failed to list replies",
            extra={"document_id": str(document_id)},
            fetch="all",
        )
        return [self._row_to_reply(row) for row in rows]

    def get_reply(self, reply_id: UUID) -> Optional[Reply]:
        row = self._run(
            query=f"SELECT {_SELECT_COLUMNS} FROM replies WHERE id = %s",
            params=[reply_id],
            context_msg="PostgresReplyRepository: Failed to get reply",
            extra={"reply_id": str(reply_id)},
            fetch="one",
        )
        return None if not row else self._row_to_reply(row)

    def create_reply(self, reply: Reply) -> Reply:
        row = self._run(
            query=f"""
                INSERT INTO replies (id, document_id, owner_id, content, created_at)
                VALUES (%s, %s, %s, %s, COALESCE(%s, NOW()))
                RETURNING {_SELECT_COLUMNS}
            """,
            params=[
                reply.id,
                reply.document_id,
                reply.owner_id,
                reply.content,
                reply.created_at,
            ],
            context_msg="PostgresReplyRepository: Failed to create reply",
            extra={"reply_id": str(reply.id), "document_id": str(reply.document_id)},
            fetch="one",
        )
        if not row:
            raise DatabaseError(
                "PostgresReplyRepository: Failed to create reply: no row returned"
            )
        return self._row_to_reply(row)

    def delete_reply(self, reply_id: UUID) -> bool:
        deleted = self._run(
            query="DELETE FROM replies WHERE id = %s",
            params=[reply_id],
            context_msg="PostgresReplyRepository: Failed to delete reply",
            extra={"reply_id": str(reply_id)},
            fetch="rowcount",
        )
        return deleted > 0

    def delete_replies_for_document(self, document_id: UUID) -> int:
        return self._run(
            query="DELETE FROM replies WHERE document_id = %s",
            params=[document_id],
            context_msg="PostgresReplyRepository: Failed to delete replies",
            extra={"document_id": str(document_id)},
            fetch="rowcount",
        )
