"""
Name: In-Memory Repository Tests

Responsibilities:
  - Validate ordering, paging and counting with predicates
  - Validate defensive copies and immutable fields on update
  - Validate user uniqueness rules
"""

from dataclasses import replace
from uuid import uuid4

import pytest

from blog_api.crosscutting.exceptions import ConflictError
from blog_api.domain.entities import DocumentStatus
from blog_api.domain.predicates import MATCH_ALL, FieldEquals
from blog_api.infrastructure.repositories import (
    InMemoryDocumentRepository,
    InMemoryReplyRepository,
    InMemoryUserRepository,
)

pytestmark = pytest.mark.unit


class TestInMemoryDocumentRepository:
    def test_newest_first_with_paging(self, document_factory):
        repo = InMemoryDocumentRepository()
        docs = [repo.create_document(document_factory.create(minutes=i)) for i in range(4)]

        page = repo.list_documents(MATCH_ALL, offset=1, limit=2)

        assert [d.id for d in page] == [docs[2].id, docs[1].id]
        assert repo.count_documents(MATCH_ALL) == 4

    def test_count_uses_same_predicate(self, document_factory):
        repo = InMemoryDocumentRepository()
        repo.create_document(document_factory.create(status=DocumentStatus.PUBLISHED))
        repo.create_document(document_factory.create())

        published = FieldEquals("status", DocumentStatus.PUBLISHED)
        assert repo.count_documents(published) == 1
        assert len(repo.list_documents(published, offset=0, limit=10)) == 1

    def test_returned_documents_are_copies(self, document_factory):
        repo = InMemoryDocumentRepository()
        doc = repo.create_document(document_factory.create(tags=["a"]))

        fetched = repo.get_document(doc.id)
        fetched.tags.append("mutated")

        assert repo.get_document(doc.id).tags == ["a"]

    def test_update_keeps_owner_and_created_at(self, document_factory):
        repo = InMemoryDocumentRepository()
        doc = repo.create_document(document_factory.create())

        updated = repo.update_document(
            replace(doc, title="New", owner_id=uuid4(), created_at=None)
        )

        assert updated.title == "New"
        assert updated.owner_id == doc.owner_id
        assert updated.created_at == doc.created_at

    def test_update_and_delete_missing(self, document_factory):
        repo = InMemoryDocumentRepository()
        assert repo.update_document(document_factory.create()) is None
        assert repo.delete_document(uuid4()) is False


class TestInMemoryReplyRepository:
    def test_delete_for_document_only_touches_that_document(self, reply_factory):
        repo = InMemoryReplyRepository()
        doc_a, doc_b = uuid4(), uuid4()
        repo.create_reply(reply_factory.create(document_id=doc_a))
        repo.create_reply(reply_factory.create(document_id=doc_a))
        kept = repo.create_reply(reply_factory.create(document_id=doc_b))

        assert repo.delete_replies_for_document(doc_a) == 2
        assert repo.list_replies(doc_a) == []
        assert [r.id for r in repo.list_replies(doc_b)] == [kept.id]


class TestInMemoryUserRepository:
    def test_email_lookup_is_case_insensitive(self, user_factory):
        repo = InMemoryUserRepository()
        user = repo.create_user(user_factory(email="carol@example.com"))
        assert repo.get_user_by_email(" CAROL@example.com") == user

    def test_duplicate_email_or_username_conflicts(self, user_factory):
        repo = InMemoryUserRepository()
        repo.create_user(user_factory(username="carol", email="carol@example.com"))

        with pytest.raises(ConflictError):
            repo.create_user(user_factory(email="CAROL@example.com"))
        with pytest.raises(ConflictError):
            repo.create_user(user_factory(username="carol"))
