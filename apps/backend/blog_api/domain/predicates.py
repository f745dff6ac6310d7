"""
===============================================================================
TARJETA CRC — domain/predicates.py
===============================================================================

Módulo:
    Predicados de consulta (value objects)

Responsabilidades:
    - Expresar restricciones de listado como datos (no como SQL).
    - Evaluarse en memoria contra un Document (repos in-memory / tests).
    - Ser compilables por infraestructura (ver postgres/predicate_sql.py).

Colaboradores:
    - domain.visibility_policy: construye los predicados.
    - infrastructure.repositories.*: filtran y cuentan con ellos.

Notas:
    - Son frozen dataclasses: igualdad estructural, útil para tests
      (ej: `predicate == FieldEquals("status", DocumentStatus.DRAFT)`).
    - Los nombres de campo son atributos de Document, no columnas.
===============================================================================
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Tuple, Union

from .entities import Document

# Campos de texto que participan en la búsqueda libre.
SEARCHABLE_FIELDS: Tuple[str, ...] = ("title", "content", "tags")


@dataclass(frozen=True, slots=True)
class FieldEquals:
    """`field == value`"""

    field: str
    value: Any

    def matches(self, document: Document) -> bool:
        return getattr(document, self.field) == self.value


@dataclass(frozen=True, slots=True)
class TextSearch:
    """Búsqueda libre: todos los términos deben aparecer en algún campo de texto."""

    term: str

    @property
    def tokens(self) -> list[str]:
        return [t for t in self.term.lower().split() if t]

    def matches(self, document: Document) -> bool:
        haystack = " ".join(_searchable_text(document)).lower()
        return all(token in haystack for token in self.tokens)


@dataclass(frozen=True, slots=True)
class AnyOf:
    """Disyunción (OR). Vacía => no matchea nada."""

    terms: Tuple["Predicate", ...]

    def matches(self, document: Document) -> bool:
        return any(term.matches(document) for term in self.terms)


@dataclass(frozen=True, slots=True)
class AllOf:
    """Conjunción (AND). Vacía => matchea todo (sin restricción)."""

    terms: Tuple["Predicate", ...] = ()

    def matches(self, document: Document) -> bool:
        return all(term.matches(document) for term in self.terms)


Predicate = Union[FieldEquals, TextSearch, AnyOf, AllOf]

MATCH_ALL = AllOf()


def and_(*predicates: Predicate) -> Predicate:
    """
    Combina con AND aplanando MATCH_ALL.

    - and_() => MATCH_ALL
    - and_(p) => p
    """
    terms = tuple(p for p in predicates if p != MATCH_ALL)
    if not terms:
        return MATCH_ALL
    if len(terms) == 1:
        return terms[0]
    return AllOf(terms)


def or_(*predicates: Predicate) -> Predicate:
    if len(predicates) == 1:
        return predicates[0]
    return AnyOf(tuple(predicates))


def _searchable_text(document: Document) -> list[str]:
    values: list[str] = []
    for name in SEARCHABLE_FIELDS:
        value = getattr(document, name, None)
        if value is None:
            continue
        if isinstance(value, (list, tuple)):
            values.extend(str(v) for v in value)
        else:
            values.append(str(value))
    return values
