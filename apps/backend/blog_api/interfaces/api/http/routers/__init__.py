"""
===============================================================================
TARJETA CRC — blog_api/interfaces/api/http/routers/__init__.py
===============================================================================

Name:
    Routers Package (HTTP)

Responsibilities:
    - Exponer routers segmentados por recurso para el router principal.

Notas:
    - Este archivo NO define endpoints. Solo re-exporta routers.
===============================================================================
"""

from .documents import router as documents_router
from .replies import router as replies_router

__all__ = [
    "documents_router",
    "replies_router",
]
