"""
===============================================================================
TARJETA CRC — api/exception_handlers.py
===============================================================================

Responsabilidades:
  - Mapear excepciones internas (BlogError y derivadas) a RFC7807.
  - Garantizar que una falla de colaborador (DB) nunca se vea como 403.
  - Validación de request (pydantic) como 422 problem+json.
  - Fallback para excepciones no controladas (sin filtrar internos en prod).

Colaboradores:
  - crosscutting.exceptions (BlogError, DatabaseError, ConflictError)
  - crosscutting.error_responses (AppHTTPException, app_exception_handler)
===============================================================================
"""

from __future__ import annotations

from fastapi import Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from ..crosscutting.config import get_settings
from ..crosscutting.error_responses import (
    AppHTTPException,
    ErrorCode,
    app_exception_handler,
    validation_error,
)
from ..crosscutting.exceptions import BlogError, ConflictError, DatabaseError
from ..crosscutting.logger import logger


def _request_id_from(request: Request) -> str | None:
    return getattr(getattr(request, "state", None), "request_id", None)


async def _handle_service_error(
    request: Request,
    *,
    exc: BlogError,
    code: ErrorCode,
    status_code: int,
) -> JSONResponse:
    """Helper común para errores tipados de servicios."""
    request_id = _request_id_from(request)

    logger.error(
        "Error de servicio",
        extra={
            "code": code.value,
            "error_code": exc.error_code,
            "error_id": exc.error_id,
            "message": exc.message,
            "request_id": request_id,
        },
    )

    app_exc = AppHTTPException(
        status_code=status_code,
        code=code,
        detail=exc.message,
        errors=[{"error_id": exc.error_id}],
    )
    return await app_exception_handler(request, app_exc)


async def database_error_handler(request: Request, exc: DatabaseError) -> JSONResponse:
    # El detalle de la DB queda en logs; al cliente solo un mensaje genérico.
    safe = DatabaseError("Falla en operación de base de datos", error_id=exc.error_id)
    logger.error(
        "Error de base de datos",
        extra={"error_id": exc.error_id, "error": exc.message},
    )
    return await _handle_service_error(
        request, exc=safe, code=ErrorCode.DATABASE_ERROR, status_code=503
    )


async def conflict_error_handler(request: Request, exc: ConflictError) -> JSONResponse:
    return await _handle_service_error(
        request, exc=exc, code=ErrorCode.CONFLICT, status_code=409
    )


async def blog_error_handler(request: Request, exc: BlogError) -> JSONResponse:
    return await _handle_service_error(
        request, exc=exc, code=ErrorCode.INTERNAL_ERROR, status_code=500
    )


async def request_validation_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """422 de pydantic en formato RFC7807 (field + msg por error)."""
    errors = [
        {
            "field": ".".join(
                str(part) for part in err.get("loc", ()) if part != "body"
            ),
            "msg": err.get("msg", ""),
        }
        for err in exc.errors()
    ]
    return await app_exception_handler(
        request, validation_error("Request inválido.", errors)
    )


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """
    Handler para excepciones no tipadas.

    - Log completo (stacktrace).
    - Respuesta genérica en producción.
    """
    request_id = _request_id_from(request)

    logger.error(
        "Excepción no controlada",
        exc_info=True,
        extra={"request_id": request_id, "error": str(exc)},
    )

    detail = str(exc) if not get_settings().is_production() else "Error interno."

    app_exc = AppHTTPException(
        status_code=500,
        code=ErrorCode.INTERNAL_ERROR,
        detail=detail,
    )
    return await app_exception_handler(request, app_exc)


def register_exception_handlers(app) -> None:
    """
    Registra handlers en la app FastAPI.

    Importante:
      - Subclases antes que BlogError.
      - Exception genérica al final como fallback.
    """
    app.add_exception_handler(DatabaseError, database_error_handler)
    app.add_exception_handler(ConflictError, conflict_error_handler)
    app.add_exception_handler(BlogError, blog_error_handler)
    app.add_exception_handler(AppHTTPException, app_exception_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)


__all__ = ["register_exception_handlers"]
