"""
===============================================================================
TARJETA CRC — error_mapping.py (UseCaseError -> HTTP RFC7807)
===============================================================================

Responsabilidades:
  - Traducir AccessErrorKind a HTTP Exceptions RFC7807.
  - Centralizar el mapeo para evitar duplicación en routers.
  - Mantener el dominio libre de HTTP.

Mapeo:
  - UNAUTHENTICATED -> 401
  - ACCESS_DENIED   -> 403
  - NOT_FOUND       -> 404
  - INVALID_STATE   -> 400

Colaboradores:
  - application.usecases.UseCaseError
  - crosscutting.error_responses
===============================================================================
"""

from __future__ import annotations

from uuid import UUID

from blog_api.application.usecases import UseCaseError
from blog_api.crosscutting.error_responses import (
    AppHTTPException,
    forbidden,
    internal_error,
    invalid_state,
    not_found,
    unauthorized,
)
from blog_api.domain.access_policy import AccessErrorKind


def to_http_exception(
    error: UseCaseError, *, resource_id: UUID | str | None = None
) -> AppHTTPException:
    if error.code == AccessErrorKind.UNAUTHENTICATED:
        return unauthorized(error.message)
    if error.code == AccessErrorKind.ACCESS_DENIED:
        return forbidden(error.message)
    if error.code == AccessErrorKind.NOT_FOUND:
        return not_found(error.resource or "Recurso", str(resource_id or "-"))
    if error.code == AccessErrorKind.INVALID_STATE:
        return invalid_state(error.message)
    return internal_error(error.message)


def raise_use_case_error(
    error: UseCaseError, *, resource_id: UUID | str | None = None
) -> None:
    raise to_http_exception(error, resource_id=resource_id)
