"""
Document Use Cases

Exports:
  - ListDocumentsUseCase, GetDocumentUseCase
  - CreateDocumentUseCase, UpdateDocumentUseCase, DeleteDocumentUseCase
  - Result / input models
"""

from .create_document import CreateDocumentUseCase
from .delete_document import DeleteDocumentUseCase
from .document_results import (
    CreateDocumentInput,
    CreateDocumentResult,
    DeleteDocumentResult,
    GetDocumentResult,
    ListDocumentsResult,
    UpdateDocumentResult,
)
from .get_document import GetDocumentUseCase
from .list_documents import ListDocumentsUseCase
from .update_document import UpdateDocumentUseCase

__all__ = [
    "CreateDocumentInput",
    "CreateDocumentResult",
    "CreateDocumentUseCase",
    "DeleteDocumentResult",
    "DeleteDocumentUseCase",
    "GetDocumentResult",
    "GetDocumentUseCase",
    "ListDocumentsResult",
    "ListDocumentsUseCase",
    "UpdateDocumentResult",
    "UpdateDocumentUseCase",
]
