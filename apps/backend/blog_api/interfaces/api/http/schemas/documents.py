"""
===============================================================================
TARJETA CRC — schemas/documents.py
===============================================================================

Módulo:
    Schemas HTTP para Documentos (create, update parcial, listados, detalle)

Responsabilidades:
    - DTOs de request/response para endpoints de documentos.
    - Validar en el borde: title/content no vacíos, tags lista de strings,
      status ∈ {draft, published}.
    - Update parcial: distinguir "omitido" de "presente" (exclude_unset).
===============================================================================
"""

from __future__ import annotations

from datetime import datetime
from typing import Annotated, Any
from uuid import UUID

from blog_api.crosscutting.pagination import PageInfo
from blog_api.domain.entities import DocumentStatus
from pydantic import BaseModel, Field, field_validator

_MAX_TITLE_CHARS = 200
_MAX_TAGS = 20
_MAX_TAG_CHARS = 50


def _clean_tags(tags: list[str] | None) -> list[str]:
    cleaned: list[str] = []
    for tag in tags or []:
        value = tag.strip()
        if not value:
            continue
        if len(value) > _MAX_TAG_CHARS:
            raise ValueError(f"cada tag admite hasta {_MAX_TAG_CHARS} caracteres")
        if value not in cleaned:
            cleaned.append(value)
    return cleaned


# -----------------------------------------------------------------------------
# Requests
# -----------------------------------------------------------------------------
class DocumentCreateReq(BaseModel):
    title: Annotated[str, Field(..., min_length=1, max_length=_MAX_TITLE_CHARS)]
    content: Annotated[str, Field(..., min_length=1)]
    tags: list[str] = Field(default_factory=list, max_length=_MAX_TAGS)
    status: DocumentStatus | None = Field(
        default=None, description="draft (default) o published"
    )

    @field_validator("title", "content")
    @classmethod
    def strip_required(cls, v: str) -> str:
        value = v.strip()
        if not value:
            raise ValueError("no puede estar vacío")
        return value

    @field_validator("tags")
    @classmethod
    def normalize_tags(cls, v: list[str]) -> list[str]:
        return _clean_tags(v)


class DocumentUpdateReq(BaseModel):
    """Update parcial: solo los campos enviados sobrescriben."""

    title: str | None = Field(default=None, min_length=1, max_length=_MAX_TITLE_CHARS)
    content: str | None = Field(default=None, min_length=1)
    tags: list[str] | None = Field(default=None, max_length=_MAX_TAGS)
    status: DocumentStatus | None = None

    @field_validator("title", "content")
    @classmethod
    def strip_required(cls, v: str | None) -> str:
        if v is None:
            raise ValueError("no puede ser null")
        value = v.strip()
        if not value:
            raise ValueError("no puede estar vacío")
        return value

    @field_validator("status")
    @classmethod
    def status_not_null(cls, v: DocumentStatus | None) -> DocumentStatus:
        if v is None:
            raise ValueError("no puede ser null")
        return v

    @field_validator("tags")
    @classmethod
    def normalize_tags(cls, v: list[str] | None) -> list[str]:
        return _clean_tags(v)

    def changes(self) -> dict[str, Any]:
        return self.model_dump(exclude_unset=True)


# -----------------------------------------------------------------------------
# Responses
# -----------------------------------------------------------------------------
class DocumentRes(BaseModel):
    id: UUID
    title: str
    content: str
    owner_id: UUID
    status: DocumentStatus
    tags: list[str]
    created_at: datetime | None
    updated_at: datetime | None


class DocumentsListRes(BaseModel):
    documents: list[DocumentRes]
    pagination: PageInfo


class DeleteDocumentRes(BaseModel):
    deleted: bool
    replies_deleted: int = 0
