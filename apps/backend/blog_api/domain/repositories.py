"""
CRC — domain/repositories.py

Name
- Domain Repository Interfaces (Protocols)

Responsibilities
- Define persistence contracts for the domain layer (ports).
- Keep the application/domain independent from infrastructure (PostgreSQL, in-memory).
- Accept visibility predicates built by domain.visibility_policy so that
  filtering happens in the store, not in the presentation layer.

Collaborators
- domain.entities: Document, Reply
- domain.predicates: Predicate
- identity.users: User
- infrastructure.repositories: postgres/*, in_memory/* implementations

Constraints
- Pure interfaces only: no side effects, no infrastructure imports, no SQL.
- Implementations MUST match method signatures exactly.
- "Not found" is None / False, never an exception.

Notes
- We use typing.Protocol for structural subtyping ("duck typing").
- Listings are ordered by created_at DESC (newest first).
"""

from typing import List, Optional, Protocol
from uuid import UUID

from ..identity.users import User
from .entities import Document, Reply
from .predicates import Predicate


class DocumentRepository(Protocol):
    """R: Interface for document persistence."""

    def list_documents(
        self, predicate: Predicate, *, offset: int = 0, limit: int = 10
    ) -> List[Document]:
        """R: Page of documents matching the predicate (newest first)."""
        ...

    def count_documents(self, predicate: Predicate) -> int:
        """R: Total documents matching the same predicate (for pagination)."""
        ...

    def get_document(self, document_id: UUID) -> Optional[Document]:
        ...

    def create_document(self, document: Document) -> Document:
        ...

    def update_document(self, document: Document) -> Optional[Document]:
        """R: Persist the full entity; None if it no longer exists."""
        ...

    def delete_document(self, document_id: UUID) -> bool:
        ...


class ReplyRepository(Protocol):
    """R: Interface for reply persistence."""

    def list_replies(self, document_id: UUID) -> List[Reply]:
        ...

    def get_reply(self, reply_id: UUID) -> Optional[Reply]:
        ...

    def create_reply(self, reply: Reply) -> Reply:
        ...

    def delete_reply(self, reply_id: UUID) -> bool:
        ...

    def delete_replies_for_document(self, document_id: UUID) -> int:
        """R: Remove every reply of a document; returns how many were removed."""
        ...


class UserRepository(Protocol):
    """R: Interface for user persistence (auth collaborator)."""

    def get_user_by_id(self, user_id: UUID) -> Optional[User]:
        ...

    def get_user_by_email(self, email: str) -> Optional[User]:
        ...

    def get_user_by_username(self, username: str) -> Optional[User]:
        ...

    def create_user(self, user: User) -> User:
        ...
