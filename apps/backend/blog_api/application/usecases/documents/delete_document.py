"""
===============================================================================
USE CASE: Delete Document
===============================================================================

Business Goal:
    Eliminar un documento (Admin: cualquiera; Writer: solo los propios) junto
    con sus replies, que de otro modo quedarían inalcanzables.

Collaborators:
    - domain.access_policy.authorize_document_write(DELETE, document)
    - DocumentRepository.get_document / delete_document
    - ReplyRepository.delete_replies_for_document
===============================================================================
"""

from __future__ import annotations

from typing import Final
from uuid import UUID

from ....crosscutting.logger import logger
from ....domain.access_policy import (
    AccessErrorKind,
    DocumentAction,
    authorize_document_write,
)
from ....domain.caller import Caller
from ....domain.repositories import DocumentRepository, ReplyRepository
from ..errors import UseCaseError, error_from_decision
from .document_results import DeleteDocumentResult

_RESOURCE_DOCUMENT: Final[str] = "Document"


class DeleteDocumentUseCase:
    def __init__(
        self,
        document_repository: DocumentRepository,
        reply_repository: ReplyRepository,
    ) -> None:
        self._documents = document_repository
        self._replies = reply_repository

    def execute(self, *, caller: Caller | None, document_id: UUID) -> DeleteDocumentResult:
        document = self._documents.get_document(document_id)

        decision = authorize_document_write(caller, DocumentAction.DELETE, document)
        if not decision.allowed:
            return DeleteDocumentResult(
                error=error_from_decision(
                    decision,
                    caller=caller,
                    action=DocumentAction.DELETE.value,
                    resource=_RESOURCE_DOCUMENT,
                    resource_id=document_id,
                )
            )

        # Documento primero: si falla, las replies quedan intactas.
        # Con Postgres la FK ya las borró, por eso se cuentan antes.
        replies_before = len(self._replies.list_replies(document_id))
        if not self._documents.delete_document(document_id):
            return DeleteDocumentResult(
                error=UseCaseError(
                    code=AccessErrorKind.NOT_FOUND,
                    message="Documento no encontrado.",
                    resource=_RESOURCE_DOCUMENT,
                )
            )
        replies_deleted = max(
            replies_before, self._replies.delete_replies_for_document(document_id)
        )

        logger.info(
            "Documento eliminado",
            extra={"document_id": str(document_id), "replies_deleted": replies_deleted},
        )
        return DeleteDocumentResult(deleted=True, replies_deleted=replies_deleted)
