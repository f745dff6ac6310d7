"""PostgreSQL repository implementations (psycopg 3 + psycopg_pool)."""

from .documents import PostgresDocumentRepository
from .predicate_sql import compile_predicate
from .replies import PostgresReplyRepository
from .users import PostgresUserRepository

__all__ = [
    "PostgresDocumentRepository",
    "PostgresReplyRepository",
    "PostgresUserRepository",
    "compile_predicate",
]
