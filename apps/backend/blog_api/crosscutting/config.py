"""
Name: Blog API Settings

Responsibilities:
  - Read every tunable of the service from env vars (and `.env` in dev)
  - Reject unsafe production setups before the app starts serving
  - Bound the page size accepted by document listings

Collaborators:
  - api/main.py: CORS, DB pool sizing, dev admin seed
  - container.py: empty DATABASE_URL selects the in-memory repositories
  - identity/auth_users.py: JWT secret, TTL and cookie name
  - interfaces/api/http/routers: default and max page size

Notes:
  - get_settings() is cached; tests clear the cache after patching env
  - No domain rules here: roles and visibility live in domain/
"""

from functools import lru_cache

from pydantic import field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.

    Attributes:
        database_url: PostgreSQL connection string (empty => in-memory repos)
        app_env: Application environment (development/test/production)
        allowed_origins: Comma-separated CORS origins
        cors_allow_credentials: Allow cookies cross-origin (default: True)
        jwt_secret: Secret for signing JWT access tokens
        jwt_access_ttl_minutes: Access token TTL in minutes
        jwt_cookie_name: Cookie name for access token
        jwt_cookie_secure: Mark the auth cookie as Secure (HTTPS only)
        allow_admin_signup: Allow self-registration with the Admin role
        default_page_size: Documents per page when limit is omitted (default: 10)
        max_page_size: Upper bound for limit (default: 100)
        log_level: Root log level (default: INFO)
        log_json: Emit JSON logs (default: True)
    """

    database_url: str = ""

    # Environment
    app_env: str = "development"

    # CORS configuration
    allowed_origins: str = (
        "http://localhost:3000,http://127.0.0.1:5500,http://localhost:5000"
    )
    cors_allow_credentials: bool = True

    # Security - JWT Auth
    jwt_secret: str = "dev-secret"
    jwt_access_ttl_minutes: int = 60 * 24 * 7
    jwt_cookie_name: str = "access_token"
    jwt_cookie_secure: bool = False

    # Registration
    allow_admin_signup: bool = False

    # Listing limits
    default_page_size: int = 10
    max_page_size: int = 100

    # Database - Connection Pool
    db_pool_min_size: int = 1
    db_pool_max_size: int = 10
    db_statement_timeout_ms: int = 30000  # 30 seconds

    # Logging
    log_level: str = "INFO"
    log_json: bool = True

    # Dev Tools (Backend Safe)
    dev_seed_admin: bool = False
    dev_seed_admin_username: str = "admin"
    dev_seed_admin_email: str = "admin@local"
    dev_seed_admin_password: str = "admin123"

    @field_validator("default_page_size", "max_page_size")
    @classmethod
    def page_size_must_be_positive(cls, v: int) -> int:
        if v <= 0:
            raise ValueError("page sizes must be greater than 0")
        return v

    @field_validator("jwt_access_ttl_minutes")
    @classmethod
    def ttl_must_be_positive(cls, v: int) -> int:
        if v <= 0:
            raise ValueError("jwt_access_ttl_minutes must be greater than 0")
        return v

    @model_validator(mode="after")
    def validate_page_bounds(self):
        if self.default_page_size > self.max_page_size:
            raise ValueError(
                f"default_page_size ({self.default_page_size}) must not exceed "
                f"max_page_size ({self.max_page_size})"
            )
        return self

    @model_validator(mode="after")
    def validate_security_requirements(self):
        if not self.is_production():
            return self

        insecure_secrets = {"dev-secret", "changeme", "change-me", "password"}
        jwt_secret = (self.jwt_secret or "").strip()
        if not jwt_secret or jwt_secret in insecure_secrets:
            raise ValueError(
                "JWT_SECRET must be set to a strong, non-default value in production"
            )
        if len(jwt_secret) < 32:
            raise ValueError("JWT_SECRET must be at least 32 characters in production")
        if not self.database_url.strip():
            raise ValueError("DATABASE_URL is required in production")
        return self

    def get_allowed_origins_list(self) -> list[str]:
        """Parse comma-separated origins into a list."""
        return [
            origin.strip()
            for origin in self.allowed_origins.split(",")
            if origin.strip()
        ]

    def is_production(self) -> bool:
        return self.app_env.strip().lower() == "production"

    def uses_database(self) -> bool:
        return bool(self.database_url.strip())

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",  # Ignore unknown env vars
    )


@lru_cache
def get_settings() -> Settings:
    """
    Get singleton Settings instance.

    Raises:
        ValidationError: If env vars are invalid
    """
    return Settings()
