# apps/backend/blog_api/crosscutting/pagination.py
"""
===============================================================================
MÓDULO: Utilidades de paginación (page / limit)
===============================================================================

Objetivo
--------
Paginación simple y consistente para listados:
- page (1-based) + limit -> offset
- metadata: current_page, total_pages, total, has_next, has_prev

-------------------------------------------------------------------------------
CRC (Component Card)
-------------------------------------------------------------------------------
Componente:
  PageInfo + page_offset + build_page_info

Responsabilidades:
  - Normalizar page/limit (nunca < 1, limit acotado)
  - Calcular metadata a partir del total que devuelve el repositorio
===============================================================================
"""

from __future__ import annotations

import math

from pydantic import BaseModel, Field


class PageInfo(BaseModel):
    current_page: int = Field(description="Página actual (1-based)")
    total_pages: int = Field(description="Cantidad de páginas")
    total: int = Field(description="Total de items que matchean el filtro")
    has_next: bool = Field(description="Hay más items después de esta página")
    has_prev: bool = Field(description="Hay items antes de esta página")


def normalize_page(page: int | None, limit: int | None, *, default_limit: int, max_limit: int) -> tuple[int, int]:
    page_value = max(1, int(page or 1))
    limit_value = int(limit or default_limit)
    limit_value = min(max(1, limit_value), max_limit)
    return page_value, limit_value


def page_offset(page: int, limit: int) -> int:
    return (max(1, page) - 1) * max(1, limit)


def build_page_info(*, page: int, limit: int, total: int) -> PageInfo:
    limit = max(1, limit)
    return PageInfo(
        current_page=page,
        total_pages=math.ceil(total / limit) if total else 0,
        total=total,
        has_next=page * limit < total,
        has_prev=page > 1,
    )
