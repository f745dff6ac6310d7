"""
============================================================
TARJETA CRC — infrastructure/repositories/postgres/documents.py
============================================================
Class: PostgresDocumentRepository

Responsibilities:
  - Persistir documentos en la tabla `documents`.
  - Listar y contar con el predicado de visibilidad compilado a WHERE
    (el filtrado ocurre en la base, no en memoria).
  - Mantener `search_vector` (tsvector) sincronizado en insert/update.
  - Exponer fallos consistentes vía `DatabaseError` con logging estructurado.

Collaborators:
  - psycopg_pool.ConnectionPool
  - postgres.predicate_sql.compile_predicate
  - domain.entities.Document, DocumentStatus
  - crosscutting.exceptions.DatabaseError / crosscutting.logger

Constraints / Notes:
  - SQL parametrizado siempre.
  - Orden determinístico: created_at DESC NULLS LAST, id ASC.
  - Repo puro: no decide visibilidad ni permisos.
============================================================
"""

from __future__ import annotations

from typing import Iterable, List, Optional
from uuid import UUID

from psycopg_pool import ConnectionPool

from ....crosscutting.exceptions import DatabaseError
from ....crosscutting.logger import logger
from ....domain.entities import Document, DocumentStatus
from ....domain.predicates import Predicate
from .predicate_sql import SEARCH_CONFIG, compile_predicate


class PostgresDocumentRepository:
    """R: Implementación PostgreSQL del repositorio de Documents."""

    _SELECT_COLUMNS = """
        id, title, content, owner_id, status, tags, created_at, updated_at
    """

    _ORDER_BY = "ORDER BY created_at DESC NULLS LAST, id ASC"

    def __init__(self, pool: Optional[ConnectionPool] = None):
        self._pool = pool

    def _get_pool(self) -> ConnectionPool:
        if self._pool is not None:
            return self._pool

        from ...db.pool import get_pool

        return get_pool()

    # =========================================================
    # Mapping
    # =========================================================
    @staticmethod
    def _row_to_document(row: tuple) -> Document:
        (
            document_id,
            title,
            content,
            owner_id,
            status,
            tags,
            created_at,
            updated_at,
        ) = row

        return Document(
            id=document_id,
            title=title,
            content=content,
            owner_id=owner_id,
            status=DocumentStatus(status),
            tags=list(tags or []),
            created_at=created_at,
            updated_at=updated_at,
        )

    @staticmethod
    def _search_text(document: Document) -> str:
        return " ".join([document.title or "", document.content or "", *document.tags])

    # =========================================================
    # Helpers de ejecución (errores consistentes)
    # =========================================================
    def _fetchall(
        self, *, query: str, params: Iterable[object], context_msg: str, extra: dict
    ) -> list[tuple]:
        try:
            pool = self._get_pool()
            with pool.connection() as conn:
                return conn.execute(query, tuple(params)).fetchall()
        except Exception as exc:
            logger.exception(context_msg, extra={**extra, "error": str(exc)})
            raise DatabaseError(f"{context_msg}: {exc}") from exc

    def _fetchone(
        self, *, query: str, params: Iterable[object], context_msg: str, extra: dict
    ) -> tuple | None:
        try:
            pool = self._get_pool()
            with pool.connection() as conn:
                return conn.execute(query, tuple(params)).fetchone()
        except Exception as exc:
            logger.exception(context_msg, extra={**extra, "error": str(exc)})
            raise DatabaseError(f"{context_msg}: {exc}") from exc

    def _execute_rowcount(
        self, *, query: str, params: Iterable[object], context_msg: str, extra: dict
    ) -> int:
        try:
            pool = self._get_pool()
            with pool.connection() as conn:
                cursor = conn.execute(query, tuple(params))
                return cursor.rowcount or 0
        except Exception as exc:
            logger.exception(context_msg, extra={**extra, "error": str(exc)})
            raise DatabaseError(f"{context_msg}: {exc}") from exc

    # =========================================================
    # Listados
    # =========================================================
    def list_documents(
        self, predicate: Predicate, *, offset: int = 0, limit: int = 10
    ) -> List[Document]:
        where_sql, params = compile_predicate(predicate)
        rows = self._fetchall(
            query=f"""
                SELECT {self._SELECT_COLUMNS}
                FROM documents
                WHERE {where_sql}
                {self._ORDER_BY}
                LIMIT %s OFFSET %s
            """,
            params=[*params, limit, offset],
            context_msg="PostgresDocumentRepository: Failed to list documents",
            extra={"offset": offset, "limit": limit},
        )
        return [self._row_to_document(row) for row in rows]

    def count_documents(self, predicate: Predicate) -> int:
        where_sql, params = compile_predicate(predicate)
        row = self._fetchone(
            query=f"SELECT COUNT(*) FROM documents WHERE {where_sql}",
            params=params,
            context_msg="PostgresDocumentRepository: Failed to count documents",
            extra={},
        )
        return int(row[0]) if row else 0

    # =========================================================
    # CRUD
    # =========================================================
    def get_document(self, document_id: UUID) -> Optional[Document]:
        row = self._fetchone(
            query=f"""
                SELECT {self._SELECT_COLUMNS}
                FROM documents
                WHERE id = %s
            """,
            params=[document_id],
            context_msg="PostgresDocumentRepository: Failed to get document",
            extra={"document_id": str(document_id)},
        )
        return None if not row else self._row_to_document(row)

    def create_document(self, document: Document) -> Document:
        row = self._fetchone(
            query=f"""
                INSERT INTO documents (
                    id, title, content, owner_id, status, tags,
                    search_vector, created_at, updated_at
                )
                VALUES (
                    %s, %s, %s, %s, %s, %s,
                    to_tsvector('{SEARCH_CONFIG}', %s),
                    COALESCE(%s, NOW()), COALESCE(%s, NOW())
                )
                RETURNING {self._SELECT_COLUMNS}
            """,
            params=[
                document.id,
                document.title,
                document.content,
                document.owner_id,
                document.status.value,
                list(document.tags),
                self._search_text(document),
                document.created_at,
                document.updated_at,
            ],
            context_msg="PostgresDocumentRepository: Failed to create document",
            extra={"document_id": str(document.id)},
        )
        if not row:
            raise DatabaseError(
                "PostgresDocumentRepository: Failed to create document: no row returned"
            )
        return self._row_to_document(row)

    def update_document(self, document: Document) -> Optional[Document]:
        """R: Sobrescribe campos editables; id/owner_id/created_at no se tocan."""
        row = self._fetchone(
            query=f"""
                UPDATE documents
                SET title = %s,
                    content = %s,
                    status = %s,
                    tags = %s,
                    search_vector = to_tsvector('{SEARCH_CONFIG}', %s),
                    updated_at = COALESCE(%s, NOW())
                WHERE id = %s
                RETURNING {self._SELECT_COLUMNS}
            """,
            params=[
                document.title,
                document.content,
                document.status.value,
                list(document.tags),
                self._search_text(document),
                document.updated_at,
                document.id,
            ],
            context_msg="PostgresDocumentRepository: Failed to update document",
            extra={"document_id": str(document.id)},
        )
        return None if not row else self._row_to_document(row)

    def delete_document(self, document_id: UUID) -> bool:
        deleted = self._execute_rowcount(
            query="DELETE FROM documents WHERE id = %s",
            params=[document_id],
            context_msg="PostgresDocumentRepository: Failed to delete document",
            extra={"document_id": str(document_id)},
        )
        return deleted > 0
