"""
===============================================================================
USE CASE: Delete Reply
===============================================================================

Reglas:
    - Solo el owner del reply puede borrarlo (sin override de Admin).
    - Reply inexistente => NOT_FOUND.
===============================================================================
"""

from __future__ import annotations

from uuid import UUID

from ....crosscutting.logger import logger
from ....domain.access_policy import (
    AccessErrorKind,
    ReplyAction,
    authorize_reply_write,
)
from ....domain.caller import Caller
from ....domain.repositories import ReplyRepository
from ..errors import UseCaseError, error_from_decision
from .reply_results import DeleteReplyResult


class DeleteReplyUseCase:
    def __init__(self, reply_repository: ReplyRepository) -> None:
        self._replies = reply_repository

    def execute(self, *, caller: Caller | None, reply_id: UUID) -> DeleteReplyResult:
        reply = self._replies.get_reply(reply_id)

        decision = authorize_reply_write(caller, ReplyAction.DELETE, reply=reply)
        if not decision.allowed:
            return DeleteReplyResult(
                error=error_from_decision(
                    decision,
                    caller=caller,
                    action=ReplyAction.DELETE.value,
                    resource="Reply",
                    resource_id=reply_id,
                )
            )

        if not self._replies.delete_reply(reply_id):
            return DeleteReplyResult(
                error=UseCaseError(
                    code=AccessErrorKind.NOT_FOUND,
                    message="Comentario no encontrado.",
                    resource="Reply",
                )
            )

        logger.info("Comentario eliminado", extra={"reply_id": str(reply_id)})
        return DeleteReplyResult(deleted=True)
