"""
============================================================
TARJETA CRC — infrastructure/repositories/__init__.py
============================================================
Module: infrastructure.repositories (Public Export Surface)

Responsibilities:
  - Exponer implementaciones concretas (Postgres e InMemory) en un único
    punto de importación.

Policy:
  - Este archivo NO contiene lógica de negocio.
============================================================
"""

from .in_memory import (
    InMemoryDocumentRepository,
    InMemoryReplyRepository,
    InMemoryUserRepository,
)
from .postgres import (
    PostgresDocumentRepository,
    PostgresReplyRepository,
    PostgresUserRepository,
)

__all__ = [
    # Postgres
    "PostgresDocumentRepository",
    "PostgresReplyRepository",
    "PostgresUserRepository",
    # In-memory
    "InMemoryDocumentRepository",
    "InMemoryReplyRepository",
    "InMemoryUserRepository",
]
