"""
===============================================================================
TARJETA CRC — schemas/replies.py
===============================================================================

Módulo:
    Schemas HTTP para Replies (comentarios)
===============================================================================
"""

from __future__ import annotations

from datetime import datetime
from typing import Annotated
from uuid import UUID

from pydantic import BaseModel, Field, field_validator

_MAX_REPLY_CHARS = 5_000


class ReplyCreateReq(BaseModel):
    content: Annotated[str, Field(..., min_length=1, max_length=_MAX_REPLY_CHARS)]

    @field_validator("content")
    @classmethod
    def strip_required(cls, v: str) -> str:
        value = v.strip()
        if not value:
            raise ValueError("no puede estar vacío")
        return value


class ReplyRes(BaseModel):
    id: UUID
    document_id: UUID
    owner_id: UUID
    content: str
    created_at: datetime | None


class RepliesListRes(BaseModel):
    replies: list[ReplyRes]


class DeleteReplyRes(BaseModel):
    deleted: bool
