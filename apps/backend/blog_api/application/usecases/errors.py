"""
===============================================================================
USE CASE ERRORS (shared typed error + denial logging)
===============================================================================

Business Goal:
    Un único contrato de error para casos de uso de Document y Reply, derivado
    directamente de las decisiones del dominio (AccessDecision).

Why (Context / Intención):
    - Los use cases devuelven resultados tipados en lugar de propagar excepciones.
    - El código del error ES el AccessErrorKind del dominio: el mapeo a HTTP
      vive una sola vez en interfaces/api/http/error_mapping.py.

-------------------------------------------------------------------------------
CRC CARD (Module-Responsibility-Collaborator)
-------------------------------------------------------------------------------
Component:
    errors (module)

Responsibilities:
    - Definir UseCaseError(code, message, resource).
    - Convertir una AccessDecision denegada en UseCaseError.
    - Loguear denegaciones (INFO, estructurado).

Collaborators:
    - domain.access_policy: AccessDecision, AccessErrorKind
    - domain.caller: Caller
    - crosscutting.logger
===============================================================================
"""

from __future__ import annotations

from dataclasses import dataclass

from ...crosscutting.logger import logger
from ...domain.access_policy import AccessDecision, AccessErrorKind
from ...domain.caller import Caller, resolve_caller


@dataclass(frozen=True)
class UseCaseError:
    """
    Error de caso de uso.

    Campos:
      - code: AccessErrorKind (categoría estable)
      - message: mensaje humano (UI/logs)
      - resource: nombre del recurso afectado ("Document", "Reply")
    """

    code: AccessErrorKind
    message: str
    resource: str | None = None


def error_from_decision(
    decision: AccessDecision,
    *,
    caller: Caller | None,
    action: str,
    resource: str,
    resource_id: object | None = None,
) -> UseCaseError:
    """Traduce una decisión denegada y deja rastro en logs."""
    caller = resolve_caller(caller)
    logger.info(
        "Acceso denegado",
        extra={
            "action": action,
            "resource": resource,
            "resource_id": str(resource_id) if resource_id is not None else None,
            "caller_id": str(caller.user_id) if caller.user_id else None,
            "caller_role": caller.role.value if caller.role else None,
            "error_code": decision.error.value if decision.error else None,
        },
    )
    return UseCaseError(
        code=decision.error or AccessErrorKind.ACCESS_DENIED,
        message=decision.reason or "Acceso denegado.",
        resource=resource,
    )


def denied(
    kind: AccessErrorKind,
    message: str,
    *,
    caller: Caller | None,
    action: str,
    resource: str,
    resource_id: object | None = None,
) -> UseCaseError:
    """Atajo para denegaciones que no vienen de una AccessDecision."""
    return error_from_decision(
        AccessDecision(error=kind, reason=message),
        caller=caller,
        action=action,
        resource=resource,
        resource_id=resource_id,
    )
