"""
Name: Domain Entity Tests

Responsibilities:
  - Validate Document partial merge (with_changes)
  - Validate ownership helpers and Caller normalization
"""

from datetime import datetime, timezone
from uuid import uuid4

import pytest

from blog_api.domain.caller import ANONYMOUS, Caller, resolve_caller
from blog_api.domain.entities import DocumentStatus
from blog_api.identity.users import UserRole

pytestmark = pytest.mark.unit


class TestDocumentWithChanges:
    def test_only_present_keys_are_applied(self, document_factory):
        doc = document_factory.create(title="Old", content="Body", tags=["a"])
        updated = doc.with_changes({"title": "New"})

        assert updated.title == "New"
        assert updated.content == "Body"
        assert updated.tags == ["a"]

    def test_identity_fields_are_ignored(self, document_factory):
        doc = document_factory.create()
        updated = doc.with_changes({"id": uuid4(), "owner_id": uuid4()})

        assert updated.id == doc.id
        assert updated.owner_id == doc.owner_id

    def test_status_string_is_coerced(self, document_factory):
        updated = document_factory.create().with_changes({"status": "published"})
        assert updated.status == DocumentStatus.PUBLISHED

    def test_updated_at_is_refreshed(self, document_factory):
        doc = document_factory.create()
        at = datetime(2030, 1, 1, tzinfo=timezone.utc)
        assert doc.with_changes({}, at=at).updated_at == at

    def test_original_is_not_mutated(self, document_factory):
        doc = document_factory.create(title="Old")
        doc.with_changes({"title": "New"})
        assert doc.title == "Old"


def test_is_owned_by_requires_identity(document_factory):
    owner = uuid4()
    doc = document_factory.create(owner_id=owner)
    assert doc.is_owned_by(owner)
    assert not doc.is_owned_by(None)
    assert not doc.is_owned_by(uuid4())


def test_anonymous_caller_behaves_as_reader():
    assert not ANONYMOUS.is_authenticated
    assert ANONYMOUS.effective_role == UserRole.READER
    assert resolve_caller(None) is ANONYMOUS


def test_authenticated_caller_keeps_role():
    caller = Caller(user_id=uuid4(), role=UserRole.ADMIN)
    assert caller.is_authenticated
    assert caller.effective_role == UserRole.ADMIN
