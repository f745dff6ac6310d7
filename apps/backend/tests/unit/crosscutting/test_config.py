"""
Name: Settings Validation Tests

Responsibilities:
  - Validate production hardening (JWT secret, DATABASE_URL)
  - Validate page size bounds and helpers
"""

import pytest
from pydantic import ValidationError

from blog_api.crosscutting.config import Settings

pytestmark = pytest.mark.unit

STRONG_SECRET = "x" * 48


def test_defaults_are_in_memory():
    settings = Settings(app_env="development")
    assert settings.uses_database() is False
    assert settings.default_page_size == 10
    assert settings.max_page_size == 100


def test_production_rejects_default_secret():
    with pytest.raises(ValidationError, match="JWT_SECRET"):
        Settings(app_env="production", database_url="postgresql://db/blog")


def test_production_rejects_short_secret():
    with pytest.raises(ValidationError, match="at least 32"):
        Settings(
            app_env="production",
            jwt_secret="short-but-custom",
            database_url="postgresql://db/blog",
        )


def test_production_requires_database():
    with pytest.raises(ValidationError, match="DATABASE_URL"):
        Settings(app_env="production", jwt_secret=STRONG_SECRET)


def test_production_ok():
    settings = Settings(
        app_env="production",
        jwt_secret=STRONG_SECRET,
        database_url="postgresql://db/blog",
    )
    assert settings.is_production()
    assert settings.uses_database()


def test_default_page_size_cannot_exceed_max():
    with pytest.raises(ValidationError):
        Settings(default_page_size=50, max_page_size=20)


@pytest.mark.parametrize("field", ["default_page_size", "max_page_size"])
def test_page_sizes_must_be_positive(field):
    with pytest.raises(ValidationError):
        Settings(**{field: 0})


def test_allowed_origins_list():
    settings = Settings(allowed_origins=" http://a.test , ,http://b.test")
    assert settings.get_allowed_origins_list() == ["http://a.test", "http://b.test"]
