"""
Name: Reply Use Case Tests

Responsibilities:
  - Validate list/create/delete replies and their preconditions
  - Walk the full author -> publish -> reply -> unpublish -> delete lifecycle
"""

from __future__ import annotations

from dataclasses import replace
from datetime import datetime, timedelta, timezone
from uuid import uuid4

import pytest

from blog_api.application.usecases import (
    CreateDocumentInput,
    CreateDocumentUseCase,
    CreateReplyUseCase,
    DeleteDocumentUseCase,
    DeleteReplyUseCase,
    ListDocumentsUseCase,
    ListRepliesUseCase,
    UpdateDocumentUseCase,
)
from blog_api.domain.access_policy import AccessErrorKind
from blog_api.domain.caller import Caller
from blog_api.domain.entities import DocumentStatus
from blog_api.identity.users import UserRole
from blog_api.infrastructure.repositories import (
    InMemoryDocumentRepository,
    InMemoryReplyRepository,
)

pytestmark = pytest.mark.unit


@pytest.fixture
def documents() -> InMemoryDocumentRepository:
    return InMemoryDocumentRepository()


@pytest.fixture
def replies() -> InMemoryReplyRepository:
    return InMemoryReplyRepository()


@pytest.fixture
def published(documents, document_factory, writer):
    return documents.create_document(
        document_factory.create(owner_id=writer.user_id, status=DocumentStatus.PUBLISHED)
    )


class TestCreateReply:
    def test_reader_replies_to_published(self, documents, replies, published, reader):
        result = CreateReplyUseCase(documents, replies).execute(
            caller=reader, document_id=published.id, content="Great"
        )

        assert result.error is None
        assert result.reply.owner_id == reader.user_id
        assert result.reply.document_id == published.id
        assert replies.list_replies(published.id)[0].content == "Great"

    def test_draft_parent_is_invalid_state(
        self, documents, replies, document_factory, writer
    ):
        draft = documents.create_document(
            document_factory.create(owner_id=writer.user_id)
        )
        result = CreateReplyUseCase(documents, replies).execute(
            caller=writer, document_id=draft.id, content="hi"
        )
        assert result.error.code == AccessErrorKind.INVALID_STATE
        assert replies.list_replies(draft.id) == []

    def test_missing_parent_is_not_found(self, documents, replies, reader):
        result = CreateReplyUseCase(documents, replies).execute(
            caller=reader, document_id=uuid4(), content="hi"
        )
        assert result.error.code == AccessErrorKind.NOT_FOUND
        assert result.error.resource == "Document"

    def test_anonymous_is_unauthenticated(self, documents, replies, published):
        result = CreateReplyUseCase(documents, replies).execute(
            caller=None, document_id=published.id, content="hi"
        )
        assert result.error.code == AccessErrorKind.UNAUTHENTICATED


class TestListReplies:
    def test_authenticated_caller_lists_newest_first(
        self, documents, replies, published, reply_factory, reader
    ):
        base = datetime(2025, 1, 1, tzinfo=timezone.utc)
        for minutes, content in [(1, "first"), (2, "second")]:
            reply = reply_factory.create(document_id=published.id, content=content)
            replies.create_reply(
                replace(reply, created_at=base + timedelta(minutes=minutes))
            )

        result = ListRepliesUseCase(documents, replies).execute(
            caller=reader, document_id=published.id
        )

        assert [r.content for r in result.replies] == ["second", "first"]

    def test_anonymous_is_unauthenticated(self, documents, replies, published):
        result = ListRepliesUseCase(documents, replies).execute(
            caller=None, document_id=published.id
        )
        assert result.error.code == AccessErrorKind.UNAUTHENTICATED

    def test_missing_parent_is_not_found(self, documents, replies, reader):
        result = ListRepliesUseCase(documents, replies).execute(
            caller=reader, document_id=uuid4()
        )
        assert result.error.code == AccessErrorKind.NOT_FOUND

    def test_hidden_parent_is_denied(
        self, documents, replies, document_factory, reader
    ):
        draft = documents.create_document(document_factory.create())
        result = ListRepliesUseCase(documents, replies).execute(
            caller=reader, document_id=draft.id
        )
        assert result.error.code == AccessErrorKind.ACCESS_DENIED


class TestDeleteReply:
    def test_owner_deletes(self, documents, replies, published, reader):
        reply = CreateReplyUseCase(documents, replies).execute(
            caller=reader, document_id=published.id, content="oops"
        ).reply

        result = DeleteReplyUseCase(replies).execute(caller=reader, reply_id=reply.id)

        assert result.deleted is True
        assert replies.get_reply(reply.id) is None

    def test_admin_cannot_delete_foreign_reply(
        self, documents, replies, published, reader, admin
    ):
        reply = CreateReplyUseCase(documents, replies).execute(
            caller=reader, document_id=published.id, content="mine"
        ).reply

        result = DeleteReplyUseCase(replies).execute(caller=admin, reply_id=reply.id)

        assert result.error.code == AccessErrorKind.ACCESS_DENIED
        assert replies.get_reply(reply.id) is not None

    def test_missing_reply(self, replies, reader):
        result = DeleteReplyUseCase(replies).execute(caller=reader, reply_id=uuid4())
        assert result.error.code == AccessErrorKind.NOT_FOUND


def test_document_lifecycle(documents, replies, writer, reader, admin):
    """Writer publishes, Reader replies, Writer reverts to draft, Admin deletes."""
    created = CreateDocumentUseCase(documents).execute(
        caller=writer,
        input_data=CreateDocumentInput(title="Hello", content="World"),
    ).document

    list_docs = ListDocumentsUseCase(documents)
    assert list_docs.execute(caller=reader).total == 0
    assert list_docs.execute(caller=writer).total == 1

    early = CreateReplyUseCase(documents, replies).execute(
        caller=reader, document_id=created.id, content="first!"
    )
    assert early.error.code == AccessErrorKind.INVALID_STATE

    UpdateDocumentUseCase(documents).execute(
        caller=writer,
        document_id=created.id,
        changes={"status": DocumentStatus.PUBLISHED},
    )
    assert list_docs.execute(caller=reader).total == 1

    reply = CreateReplyUseCase(documents, replies).execute(
        caller=reader, document_id=created.id, content="first!"
    )
    assert reply.error is None

    # Volver a draft conserva las replies existentes pero bloquea nuevas.
    reverted = UpdateDocumentUseCase(documents).execute(
        caller=writer,
        document_id=created.id,
        changes={"status": DocumentStatus.DRAFT},
    )
    assert reverted.document.status == DocumentStatus.DRAFT
    assert replies.get_reply(reply.reply.id) is not None

    late_reader = Caller(user_id=uuid4(), role=UserRole.READER)
    late = CreateReplyUseCase(documents, replies).execute(
        caller=late_reader, document_id=created.id, content="too late"
    )
    assert late.error.code == AccessErrorKind.INVALID_STATE
    assert len(replies.list_replies(created.id)) == 1

    deleted = DeleteDocumentUseCase(documents, replies).execute(
        caller=admin, document_id=created.id
    )
    assert deleted.replies_deleted == 1
    assert replies.get_reply(reply.reply.id) is None
    assert list_docs.execute(caller=admin).total == 0
