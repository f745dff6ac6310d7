"""
===============================================================================
TARJETA CRC — blog_api/container.py (Composition Root / DI manual)
===============================================================================

Responsabilidades:
  - Componer dependencias (repositorios, casos de uso) siguiendo DIP.
  - Exponer factories para FastAPI (Depends).
  - Mantener singletons con caching (lru_cache).
  - Decidir in-memory vs Postgres según Settings.

Colaboradores:
  - blog_api.crosscutting.config.get_settings
  - blog_api.domain.repositories.* (puertos)
  - blog_api.infrastructure.repositories.* (implementaciones)
  - blog_api.application.usecases.* (casos de uso)

Notas:
  - Este archivo NO contiene lógica de negocio.
  - Este archivo NO debe depender de FastAPI (solo expone factories).
===============================================================================
"""

from __future__ import annotations

from functools import lru_cache

from .application.usecases import (
    CreateDocumentUseCase,
    CreateReplyUseCase,
    DeleteDocumentUseCase,
    DeleteReplyUseCase,
    GetDocumentUseCase,
    ListDocumentsUseCase,
    ListRepliesUseCase,
    UpdateDocumentUseCase,
)
from .crosscutting.config import get_settings
from .domain.repositories import DocumentRepository, ReplyRepository, UserRepository
from .infrastructure.repositories import (
    InMemoryDocumentRepository,
    InMemoryReplyRepository,
    InMemoryUserRepository,
    PostgresDocumentRepository,
    PostgresReplyRepository,
    PostgresUserRepository,
)

# =============================================================================
# Helpers internos
# =============================================================================


def _is_test_env() -> bool:
    env = get_settings().app_env.strip().lower()
    return env in {"test", "testing", "ci"}


def uses_in_memory_storage() -> bool:
    """In-memory en test o cuando no hay DATABASE_URL configurada."""
    return _is_test_env() or not get_settings().uses_database()


# =============================================================================
# Repositorios (singletons)
# =============================================================================


@lru_cache(maxsize=1)
def get_document_repository() -> DocumentRepository:
    if uses_in_memory_storage():
        return InMemoryDocumentRepository()
    return PostgresDocumentRepository()


@lru_cache(maxsize=1)
def get_reply_repository() -> ReplyRepository:
    if uses_in_memory_storage():
        return InMemoryReplyRepository()
    return PostgresReplyRepository()


@lru_cache(maxsize=1)
def get_user_repository() -> UserRepository:
    if uses_in_memory_storage():
        return InMemoryUserRepository()
    return PostgresUserRepository()


# =============================================================================
# Casos de uso (nuevos por request: son livianos)
# =============================================================================


def get_list_documents_use_case() -> ListDocumentsUseCase:
    settings = get_settings()
    return ListDocumentsUseCase(
        get_document_repository(),
        default_limit=settings.default_page_size,
        max_limit=settings.max_page_size,
    )


def get_get_document_use_case() -> GetDocumentUseCase:
    return GetDocumentUseCase(get_document_repository())


def get_create_document_use_case() -> CreateDocumentUseCase:
    return CreateDocumentUseCase(get_document_repository())


def get_update_document_use_case() -> UpdateDocumentUseCase:
    return UpdateDocumentUseCase(get_document_repository())


def get_delete_document_use_case() -> DeleteDocumentUseCase:
    return DeleteDocumentUseCase(get_document_repository(), get_reply_repository())


def get_list_replies_use_case() -> ListRepliesUseCase:
    return ListRepliesUseCase(get_document_repository(), get_reply_repository())


def get_create_reply_use_case() -> CreateReplyUseCase:
    return CreateReplyUseCase(get_document_repository(), get_reply_repository())


def get_delete_reply_use_case() -> DeleteReplyUseCase:
    return DeleteReplyUseCase(get_reply_repository())


def reset_repositories() -> None:
    """Limpia los singletons (tests)."""
    get_document_repository.cache_clear()
    get_reply_repository.cache_clear()
    get_user_repository.cache_clear()
