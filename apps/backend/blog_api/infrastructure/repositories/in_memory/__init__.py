"""
In-Memory Repository Implementations.

For testing and local development. NOT FOR PRODUCTION.
Data is lost on process restart.
"""

from .documents import InMemoryDocumentRepository
from .replies import InMemoryReplyRepository
from .users import InMemoryUserRepository

__all__ = [
    "InMemoryDocumentRepository",
    "InMemoryReplyRepository",
    "InMemoryUserRepository",
]
