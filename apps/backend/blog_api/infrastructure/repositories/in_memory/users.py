"""
============================================================
TARJETA CRC — infrastructure/repositories/in_memory/users.py
============================================================
Class: InMemoryUserRepository

Responsibilities:
  - Almacenar usuarios en memoria (tests / local dev).
  - Lookup por id, email (case-insensitive) y username.
  - Enforzar unicidad de email/username (ConflictError), igual que los
    índices únicos de Postgres.
============================================================
"""

from __future__ import annotations

from threading import Lock
from typing import Dict, Optional
from uuid import UUID

from ....crosscutting.exceptions import ConflictError
from ....identity.users import User


class InMemoryUserRepository:
    """Repositorio in-memory, thread-safe, para Users (User es inmutable)."""

    def __init__(self) -> None:
        self._lock = Lock()
        self._users: Dict[UUID, User] = {}

    def get_user_by_id(self, user_id: UUID) -> Optional[User]:
        with self._lock:
            return self._users.get(user_id)

    def get_user_by_email(self, email: str) -> Optional[User]:
        wanted = (email or "").strip().lower()
        with self._lock:
            return next(
                (u for u in self._users.values() if u.email.lower() == wanted), None
            )

    def get_user_by_username(self, username: str) -> Optional[User]:
        with self._lock:
            return next(
                (u for u in self._users.values() if u.username == username), None
            )

    def create_user(self, user: User) -> User:
        with self._lock:
            for existing in self._users.values():
                if existing.email.lower() == user.email.lower():
                    raise ConflictError("El email ya está registrado.")
                if existing.username == user.username:
                    raise ConflictError("El username ya está en uso.")
            self._users[user.id] = user
        return user
