"""
===============================================================================
USE CASE: Create Reply
===============================================================================

Business Goal:
    Comentar un documento publicado como el caller (owner = caller).

Reglas:
    - Anónimo => UNAUTHENTICATED
    - Padre inexistente => NOT_FOUND
    - Padre en draft => INVALID_STATE (precondición, no permiso)

Notas:
    - La precondición se evalúa una sola vez; si el padre vuelve a draft entre
      el chequeo y el insert, el reply se crea igual.
===============================================================================
"""

from __future__ import annotations

from datetime import datetime, timezone
from uuid import UUID, uuid4

from ....crosscutting.logger import logger
from ....domain.access_policy import AccessErrorKind, ReplyAction, authorize_reply_write
from ....domain.caller import Caller
from ....domain.entities import Reply
from ....domain.repositories import DocumentRepository, ReplyRepository
from ..errors import error_from_decision
from .reply_results import CreateReplyResult


class CreateReplyUseCase:
    def __init__(
        self,
        document_repository: DocumentRepository,
        reply_repository: ReplyRepository,
    ) -> None:
        self._documents = document_repository
        self._replies = reply_repository

    def execute(
        self, *, caller: Caller | None, document_id: UUID, content: str
    ) -> CreateReplyResult:
        parent = self._documents.get_document(document_id)

        decision = authorize_reply_write(
            caller, ReplyAction.CREATE, parent_document=parent
        )
        if not decision.allowed:
            return CreateReplyResult(
                error=error_from_decision(
                    decision,
                    caller=caller,
                    action=ReplyAction.CREATE.value,
                    resource=(
                        "Document"
                        if decision.error == AccessErrorKind.NOT_FOUND
                        else "Reply"
                    ),
                    resource_id=document_id,
                )
            )

        reply = self._replies.create_reply(
            Reply(
                id=uuid4(),
                document_id=document_id,
                owner_id=caller.user_id,
                content=content,
                created_at=datetime.now(timezone.utc),
            )
        )
        logger.info(
            "Comentario creado",
            extra={"reply_id": str(reply.id), "document_id": str(document_id)},
        )
        return CreateReplyResult(reply=reply)
