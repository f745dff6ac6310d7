"""
===============================================================================
REPLY USE CASE RESULTS
===============================================================================

Contrato:
    - Éxito: payload presente y error == None
    - Falla: error != None (UseCaseError con AccessErrorKind)
===============================================================================
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional

from ....domain.entities import Reply
from ..errors import UseCaseError


@dataclass
class ListRepliesResult:
    replies: List[Reply] = field(default_factory=list)
    error: UseCaseError | None = None


@dataclass
class CreateReplyResult:
    reply: Optional[Reply] = None
    error: UseCaseError | None = None


@dataclass
class DeleteReplyResult:
    deleted: bool = False
    error: UseCaseError | None = None
