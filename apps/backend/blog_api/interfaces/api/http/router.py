"""
===============================================================================
TARJETA CRC — router.py (Router raíz / Composición)
===============================================================================

Responsabilidades:
  - Definir el APIRouter raíz que se incluye en FastAPI.
  - Centralizar responses RFC7807 para OpenAPI.
  - Componer routers por recurso (documents/replies).

Notas:
  - Este router se incluye desde blog_api/api/main.py con prefix="/api".
===============================================================================
"""

from __future__ import annotations

from fastapi import APIRouter

from ....crosscutting.error_responses import OPENAPI_ERROR_RESPONSES
from .routers.documents import router as documents_router
from .routers.replies import router as replies_router


def build_router() -> APIRouter:
    """Construye el router raíz (factory, sin side-effects al importar)."""
    api_router = APIRouter(responses=OPENAPI_ERROR_RESPONSES)

    api_router.include_router(documents_router)
    api_router.include_router(replies_router)

    return api_router


router = build_router()

__all__ = ["router", "build_router"]
