# apps/backend/blog_api/crosscutting/exceptions.py
"""
===============================================================================
MÓDULO: Excepciones tipadas del backend (errores internos)
===============================================================================

Objetivo
--------
Tener excepciones internas coherentes, con:
- error_code estable
- error_id para correlación con logs
- message "humana" (sin filtrar secretos)

Las decisiones de acceso NO usan excepciones (devuelven AccessDecision).
Esto es solo para fallas de colaboradores (ej: base de datos caída), que
nunca deben confundirse con ACCESS_DENIED.

-------------------------------------------------------------------------------
CRC (Component Card)
-------------------------------------------------------------------------------
Componente:
  BlogError + subclases

Responsabilidades:
  - Estandarizar errores internos que luego se mapean a HTTP
  - Generar error_id para rastreo

Colaboradores:
  - api/exception_handlers.py (mapea a AppHTTPException)
  - infrastructure/repositories/postgres/* (lanzan DatabaseError)
===============================================================================
"""

from __future__ import annotations

from uuid import uuid4


class BlogError(Exception):
    """Base para errores internos del sistema (error_code + error_id + message)."""

    error_code: str = "BLOG_ERROR"

    def __init__(
        self,
        message: str,
        error_id: str | None = None,
    ):
        self.message = message
        self.error_id = error_id or str(uuid4())
        super().__init__(message)


class DatabaseError(BlogError):
    """Errores de DB (conexión, query, timeout, pool)."""

    error_code: str = "DATABASE_ERROR"


class ConflictError(BlogError):
    """Violación de unicidad (ej: email o username ya registrados)."""

    error_code: str = "CONFLICT"
