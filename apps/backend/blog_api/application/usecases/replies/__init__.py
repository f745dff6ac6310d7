"""
Reply Use Cases

Exports:
  - ListRepliesUseCase, CreateReplyUseCase, DeleteReplyUseCase
  - Result models
"""

from .create_reply import CreateReplyUseCase
from .delete_reply import DeleteReplyUseCase
from .list_replies import ListRepliesUseCase
from .reply_results import CreateReplyResult, DeleteReplyResult, ListRepliesResult

__all__ = [
    "CreateReplyResult",
    "CreateReplyUseCase",
    "DeleteReplyResult",
    "DeleteReplyUseCase",
    "ListRepliesResult",
    "ListRepliesUseCase",
]
