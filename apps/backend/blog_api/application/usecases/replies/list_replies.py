"""
===============================================================================
USE CASE: List Replies of a Document
===============================================================================

Business Goal:
    Listar los comentarios de un documento para un caller autenticado.

Reglas:
    - Requiere autenticación.
    - La visibilidad se compone con can_disclose sobre el documento padre
      (no se duplica la lógica de visibilidad):
        * padre inexistente => NOT_FOUND
        * padre no divulgable => ACCESS_DENIED
    - Replies de un padre que volvió a draft siguen existiendo; solo quienes
      pueden ver el padre (owner / Admin) los listan.
===============================================================================
"""

from __future__ import annotations

from typing import Final
from uuid import UUID

from ....domain.access_policy import AccessErrorKind
from ....domain.caller import Caller, resolve_caller
from ....domain.repositories import DocumentRepository, ReplyRepository
from ....domain.visibility_policy import can_disclose
from ..errors import UseCaseError, denied
from .reply_results import ListRepliesResult

_RESOURCE_DOCUMENT: Final[str] = "Document"


class ListRepliesUseCase:
    def __init__(
        self,
        document_repository: DocumentRepository,
        reply_repository: ReplyRepository,
    ) -> None:
        self._documents = document_repository
        self._replies = reply_repository

    def execute(self, *, caller: Caller | None, document_id: UUID) -> ListRepliesResult:
        if not resolve_caller(caller).is_authenticated:
            return ListRepliesResult(
                error=denied(
                    AccessErrorKind.UNAUTHENTICATED,
                    "Autenticación requerida.",
                    caller=caller,
                    action="list_replies",
                    resource=_RESOURCE_DOCUMENT,
                    resource_id=document_id,
                )
            )

        document = self._documents.get_document(document_id)
        if document is None:
            return ListRepliesResult(
                error=UseCaseError(
                    code=AccessErrorKind.NOT_FOUND,
                    message="Documento no encontrado.",
                    resource=_RESOURCE_DOCUMENT,
                )
            )

        if not can_disclose(caller, document):
            return ListRepliesResult(
                error=denied(
                    AccessErrorKind.ACCESS_DENIED,
                    "No tenés acceso a este documento.",
                    caller=caller,
                    action="list_replies",
                    resource=_RESOURCE_DOCUMENT,
                    resource_id=document_id,
                )
            )

        return ListRepliesResult(replies=self._replies.list_replies(document_id))
