"""
============================================================
TARJETA CRC — infrastructure/repositories/postgres/predicate_sql.py
============================================================
Module: Compilador Predicate -> WHERE (PostgreSQL)

Responsibilities:
  - Traducir los predicados de dominio a un fragmento SQL + params.
  - Mapear campos de Document a columnas con una whitelist explícita.
  - Búsqueda libre sobre la columna tsvector `search_vector`.

Collaborators:
  - domain.predicates (FieldEquals, TextSearch, AnyOf, AllOf)
  - postgres/documents.py (usa el fragmento en SELECT y COUNT)

Constraints:
  - Los valores SIEMPRE viajan como params (%s); solo nombres de columna
    de la whitelist se interpolan.
  - Campo desconocido => ValueError (error de programación, no de usuario).
============================================================
"""

from __future__ import annotations

from enum import Enum
from typing import Any, Mapping

from ....domain.predicates import AllOf, AnyOf, FieldEquals, Predicate, TextSearch

# R: atributo de Document -> columna de `documents`.
DOCUMENT_COLUMNS: Mapping[str, str] = {
    "id": "id",
    "owner_id": "owner_id",
    "status": "status",
    "title": "title",
}

SEARCH_VECTOR_COLUMN = "search_vector"
SEARCH_CONFIG = "simple"


def compile_predicate(predicate: Predicate) -> tuple[str, list[Any]]:
    """
    Devuelve (sql, params) listo para `WHERE {sql}`.

    - MATCH_ALL => "TRUE"
    - AnyOf vacío => "FALSE"
    """
    params: list[Any] = []
    sql = _compile(predicate, params)
    return sql, params


def _compile(predicate: Predicate, params: list[Any]) -> str:
    if isinstance(predicate, FieldEquals):
        column = DOCUMENT_COLUMNS.get(predicate.field)
        if column is None:
            raise ValueError(f"Campo no filtrable: {predicate.field!r}")
        if predicate.value is None:
            return f"{column} IS NULL"
        params.append(_to_param(predicate.value))
        return f"{column} = %s"

    if isinstance(predicate, TextSearch):
        params.append(predicate.term.strip())
        return f"{SEARCH_VECTOR_COLUMN} @@ plainto_tsquery('{SEARCH_CONFIG}', %s)"

    if isinstance(predicate, AllOf):
        if not predicate.terms:
            return "TRUE"
        parts = [_compile(term, params) for term in predicate.terms]
        return "(" + " AND ".join(parts) + ")"

    if isinstance(predicate, AnyOf):
        if not predicate.terms:
            return "FALSE"
        parts = [_compile(term, params) for term in predicate.terms]
        return "(" + " OR ".join(parts) + ")"

    raise TypeError(f"Predicado no soportado: {type(predicate).__name__}")


def _to_param(value: Any) -> Any:
    if isinstance(value, Enum):
        return value.value
    return value
