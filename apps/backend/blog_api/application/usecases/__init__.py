"""
Use Cases Layer (Business Operations)

This package exposes entry points for business logic, organized by feature.

Structure
---------
usecases/
├── documents/      # Document CRUD with visibility + write authorization
└── replies/        # Replies on published documents

Usage
-----
    from blog_api.application.usecases import ListDocumentsUseCase
"""

from .documents import (
    CreateDocumentInput,
    CreateDocumentResult,
    CreateDocumentUseCase,
    DeleteDocumentResult,
    DeleteDocumentUseCase,
    GetDocumentResult,
    GetDocumentUseCase,
    ListDocumentsResult,
    ListDocumentsUseCase,
    UpdateDocumentResult,
    UpdateDocumentUseCase,
)
from .errors import UseCaseError
from .replies import (
    CreateReplyResult,
    CreateReplyUseCase,
    DeleteReplyResult,
    DeleteReplyUseCase,
    ListRepliesResult,
    ListRepliesUseCase,
)

__all__ = [
    "UseCaseError",
    # Documents
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
    # Replies
    "CreateReplyResult",
    "CreateReplyUseCase",
    "DeleteReplyResult",
    "DeleteReplyUseCase",
    "ListRepliesResult",
    "ListRepliesUseCase",
]
