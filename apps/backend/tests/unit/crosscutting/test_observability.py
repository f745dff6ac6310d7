"""
Name: Logging / Request Context Tests

Responsibilities:
  - Validate JSON log formatting with request context and redaction
  - Validate X-Request-Id propagation by the middleware
  - Validate that database failures map to 503 without leaking details
"""

import json
import logging
from unittest.mock import patch

import pytest
from fastapi.testclient import TestClient

from blog_api.api.main import app
from blog_api.context import clear_context, get_context_dict, set_request_context
from blog_api.crosscutting.exceptions import DatabaseError
from blog_api.crosscutting.logger import JSONFormatter

pytestmark = pytest.mark.unit


def _record(**extra) -> logging.LogRecord:
    record = logging.LogRecord(
        name="blog-api",
        level=logging.INFO,
        pathname=__file__,
        lineno=1,
        msg="hello",
        args=(),
        exc_info=None,
    )
    for key, value in extra.items():
        setattr(record, key, value)
    return record


def test_json_formatter_includes_context_and_redacts():
    set_request_context(request_id="req-1", method="GET", path="/api/documents")
    try:
        line = JSONFormatter().format(_record(password="hunter2", document_id="d1"))
    finally:
        clear_context()

    payload = json.loads(line)
    assert payload["message"] == "hello"
    assert payload["request_id"] == "req-1"
    assert payload["path"] == "/api/documents"
    assert payload["document_id"] == "d1"
    assert payload["password"] == "***REDACTADO***"


def test_clear_context_empties_everything():
    set_request_context(request_id="req-2")
    clear_context()
    assert get_context_dict() == {}


def test_request_id_is_generated_when_missing():
    response = TestClient(app).get("/api/documents")
    assert response.status_code == 200
    assert response.headers["X-Request-Id"]


def test_oversized_request_id_is_replaced():
    response = TestClient(app).get(
        "/api/documents", headers={"X-Request-Id": "x" * 500}
    )
    assert response.headers["X-Request-Id"] != "x" * 500


def test_database_error_is_503_with_generic_detail():
    with patch(
        "blog_api.infrastructure.repositories.in_memory.documents."
        "InMemoryDocumentRepository.count_documents",
        side_effect=DatabaseError("connection refused at 10.0.0.5"),
    ):
        response = TestClient(app).get("/api/documents")

    assert response.status_code == 503
    body = response.json()
    assert body["code"] == "DATABASE_ERROR"
    assert "10.0.0.5" not in body["detail"]
