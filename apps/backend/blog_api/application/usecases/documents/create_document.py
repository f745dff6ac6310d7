"""
===============================================================================
USE CASE: Create Document
===============================================================================

Business Goal:
    Crear un documento como el caller (owner = caller), en draft salvo que se
    pida published explícitamente.

Collaborators:
    - domain.access_policy.authorize_document_write(CREATE)
    - DocumentRepository.create_document
===============================================================================
"""

from __future__ import annotations

from datetime import datetime, timezone
from uuid import uuid4

from ....crosscutting.logger import logger
from ....domain.access_policy import DocumentAction, authorize_document_write
from ....domain.caller import Caller
from ....domain.entities import Document, DocumentStatus
from ....domain.repositories import DocumentRepository
from ..errors import error_from_decision
from .document_results import CreateDocumentInput, CreateDocumentResult


class CreateDocumentUseCase:
    def __init__(self, document_repository: DocumentRepository) -> None:
        self._documents = document_repository

    def execute(
        self, *, caller: Caller | None, input_data: CreateDocumentInput
    ) -> CreateDocumentResult:
        decision = authorize_document_write(caller, DocumentAction.CREATE)
        if not decision.allowed:
            return CreateDocumentResult(
                error=error_from_decision(
                    decision,
                    caller=caller,
                    action=DocumentAction.CREATE.value,
                    resource="Document",
                )
            )

        now = datetime.now(timezone.utc)
        document = Document(
            id=uuid4(),
            title=input_data.title,
            content=input_data.content,
            owner_id=caller.user_id,
            status=DocumentStatus(input_data.status or DocumentStatus.DRAFT),
            tags=list(input_data.tags or []),
            created_at=now,
            updated_at=now,
        )
        created = self._documents.create_document(document)

        logger.info(
            "Documento creado",
            extra={"document_id": str(created.id), "status": created.status.value},
        )
        return CreateDocumentResult(document=created)
