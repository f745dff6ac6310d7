"""
===============================================================================
USE CASE: Update Document (partial merge)
===============================================================================

Business Goal:
    Modificar title/content/tags/status de un documento existente si el caller
    tiene permiso sobre esa instancia.

Reglas:
    - Solo las claves presentes en `changes` sobrescriben (omitido != null).
    - id / owner_id nunca cambian.
    - updated_at se actualiza siempre que el update se aplica.

Collaborators:
    - domain.access_policy.authorize_document_write(UPDATE, document)
    - domain.entities.Document.with_changes
    - DocumentRepository.get_document / update_document
===============================================================================
"""

from __future__ import annotations

from typing import Any, Final, Mapping
from uuid import UUID

from ....crosscutting.logger import logger
from ....domain.access_policy import (
    AccessErrorKind,
    DocumentAction,
    authorize_document_write,
)
from ....domain.caller import Caller
from ....domain.repositories import DocumentRepository
from ..errors import UseCaseError, error_from_decision
from .document_results import UpdateDocumentResult

_RESOURCE_DOCUMENT: Final[str] = "Document"


class UpdateDocumentUseCase:
    def __init__(self, document_repository: DocumentRepository) -> None:
        self._documents = document_repository

    def execute(
        self,
        *,
        caller: Caller | None,
        document_id: UUID,
        changes: Mapping[str, Any],
    ) -> UpdateDocumentResult:
        document = self._documents.get_document(document_id)

        decision = authorize_document_write(caller, DocumentAction.UPDATE, document)
        if not decision.allowed:
            return UpdateDocumentResult(
                error=error_from_decision(
                    decision,
                    caller=caller,
                    action=DocumentAction.UPDATE.value,
                    resource=_RESOURCE_DOCUMENT,
                    resource_id=document_id,
                )
            )

        updated = self._documents.update_document(document.with_changes(changes))
        if updated is None:
            # Borrado entre la lectura y la escritura.
            return UpdateDocumentResult(
                error=UseCaseError(
                    code=AccessErrorKind.NOT_FOUND,
                    message="Documento no encontrado.",
                    resource=_RESOURCE_DOCUMENT,
                )
            )

        logger.info(
            "Documento actualizado",
            extra={"document_id": str(document_id), "fields": sorted(changes)},
        )
        return UpdateDocumentResult(document=updated)
