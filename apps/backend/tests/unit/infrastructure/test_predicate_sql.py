"""
Name: Predicate -> SQL Compiler Tests

Responsibilities:
  - Validate parameterized WHERE fragments for each predicate type
  - Validate whitelist enforcement (no arbitrary columns)
"""

from uuid import uuid4

import pytest

from blog_api.domain.caller import Caller
from blog_api.domain.entities import DocumentStatus
from blog_api.domain.predicates import MATCH_ALL, AnyOf, FieldEquals, TextSearch
from blog_api.domain.visibility_policy import ListingFilters, build_listing_predicate
from blog_api.identity.users import UserRole
from blog_api.infrastructure.repositories.postgres.predicate_sql import (
    compile_predicate,
)

pytestmark = pytest.mark.unit


def test_field_equals_uses_placeholder_and_enum_value():
    sql, params = compile_predicate(FieldEquals("status", DocumentStatus.PUBLISHED))
    assert sql == "status = %s"
    assert params == ["published"]


def test_none_value_compiles_to_is_null():
    sql, params = compile_predicate(FieldEquals("owner_id", None))
    assert sql == "owner_id IS NULL"
    assert params == []


def test_match_all_and_empty_any_of():
    assert compile_predicate(MATCH_ALL) == ("TRUE", [])
    assert compile_predicate(AnyOf(())) == ("FALSE", [])


def test_text_search_uses_tsquery():
    sql, params = compile_predicate(TextSearch("  hello world "))
    assert sql == "search_vector @@ plainto_tsquery('simple', %s)"
    assert params == ["hello world"]


def test_writer_listing_with_search():
    writer = Caller(user_id=uuid4(), role=UserRole.WRITER)
    predicate = build_listing_predicate(writer, ListingFilters(search="python"))

    sql, params = compile_predicate(predicate)

    assert sql == (
        "((owner_id = %s OR status = %s) AND "
        "search_vector @@ plainto_tsquery('simple', %s))"
    )
    assert params == [writer.user_id, "published", "python"]


def test_unknown_field_is_rejected():
    with pytest.raises(ValueError):
        compile_predicate(FieldEquals("password_hash", "x"))


def test_unknown_predicate_type_is_rejected():
    with pytest.raises(TypeError):
        compile_predicate("status = 'draft'")
