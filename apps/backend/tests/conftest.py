"""
Name: Pytest Configuration and Shared Fixtures

Responsibilities:
  - Configure test environment (in-memory storage, no .env)
  - Reset container singletons between tests
  - Provide users / callers / documents factories

Collaborators:
  - pytest: Test framework
  - blog_api.container: repository singletons
  - blog_api.domain: entities and Caller

Notes:
  - APP_ENV=test forces in-memory repositories (see container.uses_in_memory_storage)
  - Fixtures are auto-discovered by pytest
"""

import os
import sys
from datetime import datetime, timedelta, timezone
from pathlib import Path
from uuid import uuid4

import pytest

ROOT_DIR = Path(__file__).resolve().parents[1]
if str(ROOT_DIR) not in sys.path:
    sys.path.insert(0, str(ROOT_DIR))

os.environ["APP_ENV"] = "test"
os.environ.pop("DATABASE_URL", None)

from blog_api.crosscutting import config as app_config  # noqa: E402

app_config.Settings.model_config["env_file"] = None
app_config.get_settings.cache_clear()

from blog_api.container import reset_repositories  # noqa: E402
from blog_api.domain.caller import Caller  # noqa: E402
from blog_api.domain.entities import Document, DocumentStatus, Reply  # noqa: E402
from blog_api.identity.users import User, UserRole  # noqa: E402


def pytest_configure(config) -> None:
    config.addinivalue_line(
        "markers", "unit: Unit tests (fast, no external dependencies)"
    )
    config.addinivalue_line(
        "markers", "integration: Tests that require a running PostgreSQL"
    )


@pytest.fixture(autouse=True)
def _fresh_container():
    """R: Each test starts with empty in-memory repositories."""
    reset_repositories()
    yield
    reset_repositories()


# ============================================================================
# Caller Fixtures
# ============================================================================


@pytest.fixture
def reader() -> Caller:
    return Caller(user_id=uuid4(), role=UserRole.READER)


@pytest.fixture
def writer() -> Caller:
    return Caller(user_id=uuid4(), role=UserRole.WRITER)


@pytest.fixture
def other_writer() -> Caller:
    return Caller(user_id=uuid4(), role=UserRole.WRITER)


@pytest.fixture
def admin() -> Caller:
    return Caller(user_id=uuid4(), role=UserRole.ADMIN)


# ============================================================================
# Test Data Factories
# ============================================================================


class DocumentFactory:
    """R: Factory for creating test documents with custom attributes."""

    _clock = datetime(2025, 1, 1, tzinfo=timezone.utc)

    @classmethod
    def create(
        cls,
        *,
        owner_id=None,
        title: str = "Test Document",
        content: str = "Some content",
        status: DocumentStatus = DocumentStatus.DRAFT,
        tags: list[str] | None = None,
        minutes: int = 0,
    ) -> Document:
        created_at = cls._clock + timedelta(minutes=minutes)
        return Document(
            id=uuid4(),
            title=title,
            content=content,
            owner_id=owner_id or uuid4(),
            status=status,
            tags=list(tags or []),
            created_at=created_at,
            updated_at=created_at,
        )


class ReplyFactory:
    """R: Factory for creating test replies."""

    @staticmethod
    def create(*, document_id, owner_id=None, content: str = "Nice post") -> Reply:
        return Reply(
            id=uuid4(),
            document_id=document_id,
            owner_id=owner_id or uuid4(),
            content=content,
            created_at=datetime.now(timezone.utc),
        )


def make_user(
    *,
    role: UserRole = UserRole.READER,
    username: str | None = None,
    email: str | None = None,
    password_hash: str = "not-a-real-hash",
) -> User:
    suffix = uuid4().hex[:8]
    return User(
        id=uuid4(),
        username=username or f"user_{suffix}",
        email=email or f"user_{suffix}@example.com",
        password_hash=password_hash,
        role=role,
        created_at=datetime.now(timezone.utc),
    )


@pytest.fixture
def document_factory() -> type[DocumentFactory]:
    return DocumentFactory


@pytest.fixture
def reply_factory() -> type[ReplyFactory]:
    return ReplyFactory


@pytest.fixture
def user_factory():
    return make_user
