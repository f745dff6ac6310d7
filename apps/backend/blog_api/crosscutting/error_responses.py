# apps/backend/blog_api/crosscutting/error_responses.py
"""
===============================================================================
TARJETA CRC — crosscutting/error_responses.py
===============================================================================
Módulo:
    Errores HTTP como Problem Details (RFC 7807, application/problem+json)

Responsabilidades:
    - Catálogo cerrado de códigos estables (ErrorCode).
    - AppHTTPException: la única excepción HTTP que levantan routers y deps.
    - Factories cortas para los casos de la API (401/403/404/400/409/422).
    - Handler que serializa AppHTTPException con request_id e instance.

Colaboradores:
    - crosscutting/middleware.py (request.state.request_id)
    - api/exception_handlers.py (errores internos -> AppHTTPException)
    - interfaces/api/http/error_mapping.py (AccessErrorKind -> factories)

Contrato para clientes:
    - `code` es estable; `detail` es texto para humanos y puede cambiar.
    - `errors` lista detalles por campo: [{"field": "title", "msg": "..."}].
===============================================================================
"""

from __future__ import annotations

from enum import Enum
from typing import Any

from fastapi import HTTPException, Request
from fastapi.responses import JSONResponse
from pydantic import BaseModel

PROBLEM_JSON_MEDIA_TYPE = "application/problem+json"


class ErrorCode(str, Enum):
    INVALID_STATE = "INVALID_STATE"
    VALIDATION_ERROR = "VALIDATION_ERROR"
    UNAUTHORIZED = "UNAUTHORIZED"
    FORBIDDEN = "FORBIDDEN"
    NOT_FOUND = "NOT_FOUND"
    CONFLICT = "CONFLICT"
    INTERNAL_ERROR = "INTERNAL_ERROR"
    DATABASE_ERROR = "DATABASE_ERROR"

    @property
    def label(self) -> str:
        return self.value.replace("_", " ").title()


class ErrorDetail(BaseModel):
    """Cuerpo problem+json; `code` y `errors` son extensiones del RFC."""

    type: str = "about:blank"
    title: str
    status: int
    detail: str
    code: ErrorCode
    instance: str | None = None
    errors: list[dict[str, Any]] | None = None


class AppHTTPException(HTTPException):
    """HTTPException con ErrorCode y detalles por campo."""

    def __init__(
        self,
        status_code: int,
        code: ErrorCode,
        detail: str,
        errors: list[dict[str, Any]] | None = None,
        headers: dict[str, str] | None = None,
    ):
        super().__init__(status_code=status_code, detail=detail, headers=headers)
        self.code = code
        self.errors = errors

    def to_problem(self, instance: str | None = None) -> ErrorDetail:
        return ErrorDetail(
            type=f"about:blank/{self.code.value.lower()}",
            title=self.code.label,
            status=self.status_code,
            detail=str(self.detail),
            code=self.code,
            instance=instance,
            errors=self.errors or None,
        )


# -----------------------------------------------------------------------------
# Factories
# -----------------------------------------------------------------------------
def invalid_state(detail: str) -> AppHTTPException:
    return AppHTTPException(400, ErrorCode.INVALID_STATE, detail)


def unauthorized(detail: str = "Autenticación requerida") -> AppHTTPException:
    return AppHTTPException(
        401, ErrorCode.UNAUTHORIZED, detail, headers={"WWW-Authenticate": "Bearer"}
    )


def forbidden(detail: str = "Acceso denegado") -> AppHTTPException:
    return AppHTTPException(403, ErrorCode.FORBIDDEN, detail)


def not_found(resource: str, identifier: str) -> AppHTTPException:
    return AppHTTPException(
        404, ErrorCode.NOT_FOUND, f"{resource} '{identifier}' no encontrado"
    )


def conflict(detail: str) -> AppHTTPException:
    return AppHTTPException(409, ErrorCode.CONFLICT, detail)


def validation_error(
    detail: str, errors: list[dict[str, Any]] | None = None
) -> AppHTTPException:
    return AppHTTPException(422, ErrorCode.VALIDATION_ERROR, detail, errors)


def internal_error(detail: str = "Ocurrió un error inesperado") -> AppHTTPException:
    return AppHTTPException(500, ErrorCode.INTERNAL_ERROR, detail)


# -----------------------------------------------------------------------------
# OpenAPI
# -----------------------------------------------------------------------------
def _documented(description: str) -> dict[str, Any]:
    return {
        "description": f"{description} (problem+json)",
        "model": ErrorDetail,
        "content": {
            PROBLEM_JSON_MEDIA_TYPE: {
                "schema": {"$ref": "#/components/schemas/ErrorDetail"}
            }
        },
    }


OPENAPI_ERROR_RESPONSES = {
    str(status): _documented(code.label)
    for status, code in (
        (400, ErrorCode.INVALID_STATE),
        (401, ErrorCode.UNAUTHORIZED),
        (403, ErrorCode.FORBIDDEN),
        (404, ErrorCode.NOT_FOUND),
        (409, ErrorCode.CONFLICT),
        (422, ErrorCode.VALIDATION_ERROR),
    )
}
OPENAPI_ERROR_RESPONSES["default"] = _documented("Error")


# -----------------------------------------------------------------------------
# Handler
# -----------------------------------------------------------------------------
async def app_exception_handler(
    request: Request, exc: AppHTTPException
) -> JSONResponse:
    problem = exc.to_problem(instance=str(request.url))

    # El request_id viaja como un item más de errors para correlacionar logs.
    request_id = getattr(request.state, "request_id", None)
    if request_id:
        problem.errors = [*(problem.errors or []), {"request_id": request_id}]

    return JSONResponse(
        status_code=exc.status_code,
        content=problem.model_dump(mode="json", exclude_none=True),
        headers=exc.headers,
        media_type=PROBLEM_JSON_MEDIA_TYPE,
    )
