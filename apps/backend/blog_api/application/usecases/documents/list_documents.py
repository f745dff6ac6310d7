"""
===============================================================================
USE CASE: List Documents (visibility-filtered, paginated)
===============================================================================

Business Goal:
    Listar documentos aplicando la visibilidad del caller en el store (no en
    la capa de presentación), con búsqueda y paginación.

-------------------------------------------------------------------------------
CRC CARD (Class-Responsibility-Collaborator)
-------------------------------------------------------------------------------
Class:
    ListDocumentsUseCase

Responsibilities:
    - Normalizar page/limit contra los límites de Settings.
    - Construir el predicado (build_listing_predicate).
    - Pedir la página y el total con el MISMO predicado.

Collaborators:
    - domain.visibility_policy.build_listing_predicate
    - DocumentRepository.list_documents / count_documents
    - crosscutting.pagination
===============================================================================
"""

from __future__ import annotations

from ....crosscutting.pagination import normalize_page, page_offset
from ....domain.caller import Caller
from ....domain.entities import DocumentStatus
from ....domain.repositories import DocumentRepository
from ....domain.visibility_policy import ListingFilters, build_listing_predicate
from .document_results import ListDocumentsResult


class ListDocumentsUseCase:
    """Use Case (Query): listado de documentos visibles para el caller."""

    def __init__(
        self,
        document_repository: DocumentRepository,
        *,
        default_limit: int = 10,
        max_limit: int = 100,
    ) -> None:
        self._documents = document_repository
        self._default_limit = default_limit
        self._max_limit = max_limit

    def execute(
        self,
        *,
        caller: Caller | None,
        status: DocumentStatus | None = None,
        search: str | None = None,
        page: int | None = 1,
        limit: int | None = None,
    ) -> ListDocumentsResult:
        page, limit = normalize_page(
            page, limit, default_limit=self._default_limit, max_limit=self._max_limit
        )
        predicate = build_listing_predicate(
            caller, ListingFilters(status=status, search=search)
        )

        documents = self._documents.list_documents(
            predicate, offset=page_offset(page, limit), limit=limit
        )
        total = self._documents.count_documents(predicate)

        return ListDocumentsResult(
            documents=documents, total=total, page=page, limit=limit
        )
