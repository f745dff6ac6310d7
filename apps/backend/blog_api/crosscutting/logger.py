# apps/backend/blog_api/crosscutting/logger.py
"""
===============================================================================
TARJETA CRC — crosscutting/logger.py
===============================================================================
Módulo:
    Logging estructurado (una línea JSON por evento)

Responsabilidades:
    - Serializar cada LogRecord como JSON con el contexto del request
      (request_id, method, path, user_id, user_role).
    - Copiar los `extra=` del caller (document_id, reply_id, action, ...).
    - Ocultar credenciales antes de escribir (password, token, cookie, ...).

Colaboradores:
    - blog_api/context.py (ContextVars del request)
    - crosscutting/config.py (LOG_LEVEL, LOG_JSON)

Uso:
    logger.info("Document deleted", extra={"document_id": str(doc.id)})
===============================================================================
"""

from __future__ import annotations

import json
import logging
import sys
import traceback
from datetime import datetime, timezone
from typing import Any

REDACTED = "***REDACTADO***"

_MAX_VALUE_CHARS = 2_000

# Atributos estándar de LogRecord: todo lo demás vino por `extra=`.
_RESERVED_ATTRS = frozenset(
    logging.LogRecord("", 0, "", 0, "", (), None).__dict__
) | {"message", "asctime", "taskName"}

_SECRET_FIELDS = frozenset(
    {
        "password",
        "password_hash",
        "token",
        "access_token",
        "authorization",
        "cookie",
        "jwt_secret",
        "database_url",
        "dev_seed_admin_password",
    }
)


def _scrub(key: str, value: Any) -> Any:
    if key.lower() in _SECRET_FIELDS:
        return REDACTED
    if isinstance(value, dict):
        return {str(k): _scrub(str(k), v) for k, v in value.items()}
    if isinstance(value, (list, tuple, set)):
        return [_scrub(key, v) for v in value]
    if isinstance(value, str) and len(value) > _MAX_VALUE_CHARS:
        return value[:_MAX_VALUE_CHARS] + "…"
    return value


class JSONFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:
        from ..context import get_context_dict

        entry: dict[str, Any] = {
            "timestamp": datetime.fromtimestamp(
                record.created, tz=timezone.utc
            ).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "location": f"{record.module}:{record.funcName}:{record.lineno}",
        }
        entry.update(get_context_dict())

        for key, value in record.__dict__.items():
            if key not in _RESERVED_ATTRS:
                entry[key] = _scrub(key, value)

        if record.exc_info and record.exc_info[0] is not None:
            entry["exception"] = {
                "type": record.exc_info[0].__name__,
                "message": str(record.exc_info[1]),
                "stacktrace": traceback.format_exception(*record.exc_info),
            }

        return json.dumps(entry, ensure_ascii=False, default=str)


def setup_logger(name: str = "blog-api") -> logging.Logger:
    """Logger del servicio; idempotente ante reimports (no duplica handlers)."""
    from .config import get_settings

    settings = get_settings()

    log = logging.getLogger(name)
    level = (settings.log_level or "INFO").upper()
    log.setLevel(getattr(logging, level, logging.INFO))

    if not log.handlers:
        handler = logging.StreamHandler(sys.stdout)
        if settings.log_json:
            handler.setFormatter(JSONFormatter())
        else:
            handler.setFormatter(
                logging.Formatter("%(asctime)s %(levelname)s %(name)s %(message)s")
            )
        log.addHandler(handler)

    return log


logger = setup_logger()
