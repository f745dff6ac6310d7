"""
===============================================================================
DOCUMENT USE CASE RESULTS (Shared Result / Input Models)
===============================================================================

Business Goal:
    Proveer tipos consistentes de entrada/resultado para los casos de uso de
    Documentos (list, get, create, update, delete).

Contrato:
    - Éxito: payload presente y error == None
    - Falla: error != None (UseCaseError con AccessErrorKind)
===============================================================================
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional

from ....domain.entities import Document, DocumentStatus
from ..errors import UseCaseError


@dataclass(frozen=True)
class CreateDocumentInput:
    """Datos para crear un documento (owner lo fija el use case)."""

    title: str
    content: str
    tags: List[str] = field(default_factory=list)
    status: DocumentStatus | None = None


@dataclass
class ListDocumentsResult:
    """
    Resultado para listar documentos.

    Campos:
      - documents: página de documentos visibles (posiblemente vacía)
      - total: total que matchea el mismo predicado
      - page / limit: página efectivamente usada (ya normalizada)
    """

    documents: List[Document] = field(default_factory=list)
    total: int = 0
    page: int = 1
    limit: int = 10
    error: UseCaseError | None = None


@dataclass
class GetDocumentResult:
    document: Optional[Document] = None
    error: UseCaseError | None = None


@dataclass
class CreateDocumentResult:
    document: Optional[Document] = None
    error: UseCaseError | None = None


@dataclass
class UpdateDocumentResult:
    document: Optional[Document] = None
    error: UseCaseError | None = None


@dataclass
class DeleteDocumentResult:
    """
    Resultado para borrar un documento.

    Campos:
      - deleted: True si se eliminó
      - replies_deleted: replies removidos en cascada
    """

    deleted: bool = False
    replies_deleted: int = 0
    error: UseCaseError | None = None
