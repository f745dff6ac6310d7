"""
===============================================================================
USE CASE: Get Document (single document, disclosure-checked)
===============================================================================

Business Goal:
    Recuperar un documento por id aplicando la decisión de divulgación.

Reglas:
    - Existencia antes que visibilidad:
        * no existe => NOT_FOUND
        * existe pero no es divulgable al caller => ACCESS_DENIED
===============================================================================
"""

from __future__ import annotations

from typing import Final
from uuid import UUID

from ....domain.access_policy import AccessErrorKind
from ....domain.caller import Caller
from ....domain.repositories import DocumentRepository
from ....domain.visibility_policy import can_disclose
from ..errors import UseCaseError, denied
from .document_results import GetDocumentResult

_RESOURCE_DOCUMENT: Final[str] = "Document"
_MSG_DOC_NOT_FOUND: Final[str] = "Documento no encontrado."
_MSG_DOC_HIDDEN: Final[str] = "No tenés acceso a este documento."


class GetDocumentUseCase:
    """Use Case (Query): obtiene un documento si el caller puede verlo."""

    def __init__(self, document_repository: DocumentRepository) -> None:
        self._documents = document_repository

    def execute(self, *, caller: Caller | None, document_id: UUID) -> GetDocumentResult:
        document = self._documents.get_document(document_id)
        if document is None:
            return self._not_found()

        if not can_disclose(caller, document):
            return GetDocumentResult(
                error=denied(
                    AccessErrorKind.ACCESS_DENIED,
                    _MSG_DOC_HIDDEN,
                    caller=caller,
                    action="read",
                    resource=_RESOURCE_DOCUMENT,
                    resource_id=document_id,
                )
            )

        return GetDocumentResult(document=document)

    @staticmethod
    def _not_found() -> GetDocumentResult:
        return GetDocumentResult(
            error=UseCaseError(
                code=AccessErrorKind.NOT_FOUND,
                message=_MSG_DOC_NOT_FOUND,
                resource=_RESOURCE_DOCUMENT,
            )
        )
