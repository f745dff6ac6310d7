"""
===============================================================================
TARJETA CRC — domain/__init__.py
===============================================================================

Módulo:
    Exportaciones de la Capa de Dominio (API pública del dominio)

Responsabilidades:
    - Centralizar exports para imports limpios en application/interfaces.
    - Mantener estable el "surface area" del dominio.

Colaboradores:
    - domain.entities: Document, Reply, DocumentStatus
    - domain.caller: Caller, ANONYMOUS
    - domain.visibility_policy: build_listing_predicate, can_disclose
    - domain.access_policy: authorize_document_write, authorize_reply_write
    - domain.repositories: puertos de persistencia

Reglas:
    - No importar infraestructura aquí.
===============================================================================
"""

from .access_policy import (
    AccessDecision,
    AccessErrorKind,
    DocumentAction,
    ReplyAction,
    authorize_document_write,
    authorize_reply_write,
)
from .caller import ANONYMOUS, Caller
from .entities import Document, DocumentStatus, Reply
from .predicates import MATCH_ALL, AllOf, AnyOf, FieldEquals, Predicate, TextSearch
from .repositories import DocumentRepository, ReplyRepository, UserRepository
from .visibility_policy import ListingFilters, build_listing_predicate, can_disclose

__all__ = [
    # Entities
    "Document",
    "DocumentStatus",
    "Reply",
    # Caller
    "Caller",
    "ANONYMOUS",
    # Visibility
    "ListingFilters",
    "build_listing_predicate",
    "can_disclose",
    # Authorization
    "AccessDecision",
    "AccessErrorKind",
    "DocumentAction",
    "ReplyAction",
    "authorize_document_write",
    "authorize_reply_write",
    # Predicates
    "Predicate",
    "FieldEquals",
    "TextSearch",
    "AnyOf",
    "AllOf",
    "MATCH_ALL",
    # Repository Interfaces (Ports)
    "DocumentRepository",
    "ReplyRepository",
    "UserRepository",
]
