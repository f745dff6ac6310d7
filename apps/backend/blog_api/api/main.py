"""
Name: FastAPI Application Entry Point

Responsibilities:
  - Initialize FastAPI application with metadata (title, version)
  - Configure middleware (CORS, request context)
  - Mount document/reply routes and auth routes under /api
  - Expose a health check endpoint

Collaborators:
  - FastAPI: ASGI web framework
  - CORSMiddleware: Cross-Origin Resource Sharing handler
  - RequestContextMiddleware: Request ID and logging context
  - interfaces.api.http.router: documents + replies endpoints
  - api.auth_routes: register / login / logout / me

Constraints:
  - CORS configurable via ALLOWED_ORIGINS env var (comma-separated)
  - Without DATABASE_URL the app runs on in-memory repositories

Production Readiness:
  - Env validation enforced at startup (via lifespan, not import time)
  - Request tracing with X-Request-Id header
  - Structured JSON logging with request correlation
"""

from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware

from ..application.dev_seed_admin import ensure_dev_admin
from ..container import get_user_repository, uses_in_memory_storage
from ..crosscutting.config import get_settings
from ..crosscutting.logger import logger
from ..crosscutting.middleware import RequestContextMiddleware
from ..identity.auth_users import hash_password
from ..infrastructure.db.pool import close_pool, init_pool, ping
from ..interfaces.api.http.router import router
from .auth_routes import router as auth_router
from .exception_handlers import register_exception_handlers


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle. Validates settings and initializes pool."""
    settings = get_settings()
    use_db = not uses_in_memory_storage()

    if use_db:
        init_pool(
            database_url=settings.database_url,
            min_size=settings.db_pool_min_size,
            max_size=settings.db_pool_max_size,
        )

    try:
        ensure_dev_admin(
            settings,
            user_repo=get_user_repository(),
            password_hasher=hash_password,
        )

        logger.info(
            "Blog API starting up",
            extra={
                "app_env": settings.app_env,
                "storage": "postgres" if use_db else "in_memory",
                "db_pool_min": settings.db_pool_min_size,
                "db_pool_max": settings.db_pool_max_size,
            },
        )

        yield

    finally:
        close_pool()
        logger.info("Blog API shutting down")


def _get_allowed_origins() -> list[str]:
    return get_settings().get_allowed_origins_list()


app = FastAPI(
    title="Blog API",
    version="0.1.0",
    lifespan=lifespan,
    openapi_tags=[
        {"name": "documents", "description": "Documents with role-based visibility"},
        {"name": "replies", "description": "Replies on published documents"},
        {"name": "auth", "description": "User authentication (JWT)"},
    ],
)

# Middleware order: the last one added runs first.
app.add_middleware(RequestContextMiddleware)

app.add_middleware(
    CORSMiddleware,
    allow_origins=_get_allowed_origins(),
    allow_credentials=get_settings().cors_allow_credentials,
    allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
    allow_headers=["Content-Type", "Authorization", "X-Request-Id"],
)

app.include_router(router, prefix="/api")
app.include_router(auth_router, prefix="/api")

register_exception_handlers(app)


@app.get("/api/health", tags=["health"])
def health(request: Request):
    """
    Health check.

    Returns:
        ok: True if the storage backend is usable
        storage: "in_memory" or "postgres"
        db: "connected" / "disconnected" (postgres only)
        request_id: Correlation ID for this request
    """
    result: dict = {
        "ok": True,
        "storage": "in_memory",
        "request_id": getattr(request.state, "request_id", None),
    }
    if not uses_in_memory_storage():
        connected = ping()
        result.update(
            ok=connected,
            storage="postgres",
            db="connected" if connected else "disconnected",
        )
    return result
