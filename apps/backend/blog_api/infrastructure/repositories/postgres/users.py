"""
============================================================
TARJETA CRC — infrastructure/repositories/postgres/users.py
============================================================
Class: PostgresUserRepository

Responsibilities:
  - Cargar usuarios para autenticación (por id / email / username).
  - Crear usuarios (registro + seed de Admin).
  - Mapear filas -> `User` validando `UserRole`.
  - Traducir violaciones de unicidad a `ConflictError`.

Constraints / Notes:
  - Retorna None cuando no existe el recurso.
  - Rol persistido inválido => DatabaseError (drift de datos).
============================================================
"""

from __future__ import annotations

from typing import Iterable, Optional
from uuid import UUID

from psycopg import errors as pg_errors
from psycopg_pool import ConnectionPool

from ....crosscutting.exceptions import ConflictError, DatabaseError
from ....crosscutting.logger import logger
from ....identity.users import User, UserRole

_USER_COLUMNS = "id, username, email, password_hash, role, created_at"


def _row_to_user(row: tuple) -> User:
    """Role casting estricto: valor desconocido => DatabaseError."""
    try:
        role = UserRole(row[4])
    except ValueError as exc:
        raise DatabaseError(f"Invalid user role in database: {row[4]}") from exc

    return User(
        id=row[0],
        username=row[1],
        email=row[2],
        password_hash=row[3],
        role=role,
        created_at=row[5],
    )


class PostgresUserRepository:
    """R: Implementación PostgreSQL del repositorio de Users."""

    def __init__(self, pool: Optional[ConnectionPool] = None):
        self._pool = pool

    def _get_pool(self) -> ConnectionPool:
        if self._pool is not None:
            return self._pool

        from ...db.pool import get_pool

        return get_pool()

    def _fetchone(
        self, *, query: str, params: Iterable[object], log_msg: str, log_extra: dict
    ) -> tuple | None:
        try:
            pool = self._get_pool()
            with pool.connection() as conn:
                return conn.execute(query, tuple(params)).fetchone()
        except Exception as exc:
            logger.exception(log_msg, extra={**log_extra, "error": str(exc)})
            raise DatabaseError(f"{log_msg}: {exc}") from exc

    def get_user_by_id(self, user_id: UUID) -> Optional[User]:
        row = self._fetchone(
            query=f"SELECT {_USER_COLUMNS} FROM users WHERE id = %s",
            params=[user_id],
            log_msg="PostgresUserRepository: Failed to get user by id",
            log_extra={"user_id": str(user_id)},
        )
        return _row_to_user(row) if row else None

    def get_user_by_email(self, email: str) -> Optional[User]:
        row = self._fetchone(
            query=f"SELECT {_USER_COLUMNS} FROM users WHERE LOWER(email) = %s",
            params=[(email or "").strip().lower()],
            log_msg="PostgresUserRepository: Failed to get user by email",
            log_extra={},
        )
        return _row_to_user(row) if row else None

    def get_user_by_username(self, username: str) -> Optional[User]:
        row = self._fetchone(
            query=f"SELECT {_USER_COLUMNS} FROM users WHERE username = %s",
            params=[username],
            log_msg="PostgresUserRepository: Failed to get user by username",
            log_extra={"username": username},
        )
        return _row_to_user(row) if row else None

    def create_user(self, user: User) -> User:
        query = f"""
            INSERT INTO users (id, username, email, password_hash, role, created_at)
            VALUES (%s, %s, %s, %s, %s, COALESCE(%s, NOW()))
            RETURNING {_USER_COLUMNS}
        """
        params = (
            user.id,
            user.username,
            user.email,
            user.password_hash,
            user.role.value,
            user.created_at,
        )
        try:
            pool = self._get_pool()
            with pool.connection() as conn:
                row = conn.execute(query, params).fetchone()
        except pg_errors.UniqueViolation as exc:
            raise ConflictError("El email o username ya está registrado.") from exc
        except Exception as exc:
            logger.exception(
                "PostgresUserRepository: Failed to create user",
                extra={"user_id": str(user.id), "error": str(exc)},
            )
            raise DatabaseError(f"Failed to create user: {exc}") from exc

        if not row:
            raise DatabaseError("Failed to create user: no row returned")
        return _row_to_user(row)
