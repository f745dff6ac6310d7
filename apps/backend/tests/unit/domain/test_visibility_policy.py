"""
Name: Visibility Policy Tests

Responsibilities:
  - Validate the listing predicate per role (anonymous/Reader/Writer/Admin)
  - Validate status filter precedence and search composition
  - Validate single-document disclosure
"""

from uuid import uuid4

import pytest

from blog_api.domain.caller import ANONYMOUS, Caller
from blog_api.domain.entities import DocumentStatus
from blog_api.domain.predicates import MATCH_ALL, AllOf, AnyOf, FieldEquals, TextSearch
from blog_api.domain.visibility_policy import (
    ListingFilters,
    build_listing_predicate,
    can_disclose,
)
from blog_api.identity.users import UserRole

pytestmark = pytest.mark.unit

PUBLISHED = FieldEquals("status", DocumentStatus.PUBLISHED)


# =============================================================================
# Listing predicate
# =============================================================================


def test_anonymous_sees_published_only():
    assert build_listing_predicate(ANONYMOUS) == PUBLISHED
    assert build_listing_predicate(None) == PUBLISHED


def test_reader_sees_published_only(reader):
    assert build_listing_predicate(reader) == PUBLISHED


def test_reader_status_filter_is_ignored(reader):
    predicate = build_listing_predicate(
        reader, ListingFilters(status=DocumentStatus.DRAFT)
    )
    assert predicate == PUBLISHED


def test_anonymous_status_filter_is_ignored():
    predicate = build_listing_predicate(
        None, ListingFilters(status=DocumentStatus.DRAFT)
    )
    assert predicate == PUBLISHED


def test_writer_sees_own_or_published(writer):
    predicate = build_listing_predicate(writer)
    assert predicate == AnyOf(
        (FieldEquals("owner_id", writer.user_id), PUBLISHED)
    )


def test_writer_status_filter_replaces_ownership_union(writer):
    predicate = build_listing_predicate(
        writer, ListingFilters(status=DocumentStatus.DRAFT)
    )
    # Se reemplaza el OR: ve borradores de cualquier autor.
    assert predicate == FieldEquals("status", DocumentStatus.DRAFT)


def test_admin_has_no_restriction(admin):
    assert build_listing_predicate(admin) == MATCH_ALL


def test_admin_status_filter(admin):
    predicate = build_listing_predicate(
        admin, ListingFilters(status=DocumentStatus.PUBLISHED)
    )
    assert predicate == PUBLISHED


def test_search_is_anded_with_role_predicate(reader):
    predicate = build_listing_predicate(reader, ListingFilters(search="python"))
    assert predicate == AllOf((PUBLISHED, TextSearch("python")))


def test_admin_search_without_restriction(admin):
    predicate = build_listing_predicate(admin, ListingFilters(search="python"))
    assert predicate == TextSearch("python")


def test_blank_search_is_ignored(writer):
    assert build_listing_predicate(
        writer, ListingFilters(search="   ")
    ) == build_listing_predicate(writer)


def test_caller_without_role_is_treated_as_anonymous():
    half = Caller(user_id=uuid4(), role=None)
    assert build_listing_predicate(half) == PUBLISHED


def test_writer_predicate_matches_expected_documents(writer, document_factory):
    own_draft = document_factory.create(owner_id=writer.user_id)
    other_draft = document_factory.create()
    other_published = document_factory.create(status=DocumentStatus.PUBLISHED)

    predicate = build_listing_predicate(writer)

    assert predicate.matches(own_draft)
    assert not predicate.matches(other_draft)
    assert predicate.matches(other_published)


# =============================================================================
# Disclosure
# =============================================================================


@pytest.mark.parametrize(
    "role, owned, status, expected",
    [
        (None, False, DocumentStatus.PUBLISHED, True),
        (None, False, DocumentStatus.DRAFT, False),
        (UserRole.READER, False, DocumentStatus.PUBLISHED, True),
        (UserRole.READER, False, DocumentStatus.DRAFT, False),
        (UserRole.WRITER, True, DocumentStatus.DRAFT, True),
        (UserRole.WRITER, False, DocumentStatus.DRAFT, False),
        (UserRole.WRITER, False, DocumentStatus.PUBLISHED, True),
        (UserRole.ADMIN, False, DocumentStatus.DRAFT, True),
        (UserRole.ADMIN, False, DocumentStatus.PUBLISHED, True),
    ],
)
def test_can_disclose_matrix(role, owned, status, expected, document_factory):
    caller = Caller(user_id=uuid4(), role=role) if role else ANONYMOUS
    owner_id = caller.user_id if owned else uuid4()
    document = document_factory.create(owner_id=owner_id, status=status)

    assert can_disclose(caller, document) is expected
