"""
Name: Documents / Replies HTTP Tests

Responsibilities:
  - Exercise the full FastAPI app on in-memory repositories
  - Verify RFC7807 status mapping (400/401/403/404/422)
  - Verify pagination envelope and visibility through HTTP
"""

from uuid import uuid4

import pytest
from fastapi.testclient import TestClient

from blog_api.api.main import app
from blog_api.container import get_user_repository
from blog_api.identity.auth_users import create_access_token
from blog_api.identity.users import UserRole

pytestmark = pytest.mark.unit


@pytest.fixture
def client() -> TestClient:
    return TestClient(app)


@pytest.fixture
def login_as(user_factory):
    """Crea un usuario con el rol pedido y devuelve headers Bearer."""

    def _login(role: UserRole) -> dict[str, str]:
        user = get_user_repository().create_user(user_factory(role=role))
        token, _ = create_access_token(user)
        return {"Authorization": f"Bearer {token}"}

    return _login


def _create(client, headers, **body):
    payload = {"title": "Title", "content": "Body"}
    payload.update(body)
    response = client.post("/api/documents", json=payload, headers=headers)
    assert response.status_code == 201, response.text
    return response.json()


class TestDocumentsEndpoints:
    def test_writer_creates_draft(self, client, login_as):
        headers = login_as(UserRole.WRITER)
        body = _create(client, headers, title="  Hello  ", tags=["a", "a", " b "])

        assert body["title"] == "Hello"
        assert body["status"] == "draft"
        assert body["tags"] == ["a", "b"]

    def test_anonymous_create_is_401(self, client):
        response = client.post(
            "/api/documents", json={"title": "T", "content": "C"}
        )
        assert response.status_code == 401
        assert response.headers["content-type"].startswith("application/problem+json")

    def test_reader_create_is_403(self, client, login_as):
        response = client.post(
            "/api/documents",
            json={"title": "T", "content": "C"},
            headers=login_as(UserRole.READER),
        )
        assert response.status_code == 403
        assert response.json()["code"] == "FORBIDDEN"

    def test_invalid_body_is_422(self, client, login_as):
        response = client.post(
            "/api/documents",
            json={"title": "", "content": "C"},
            headers=login_as(UserRole.WRITER),
        )
        assert response.status_code == 422
        assert response.json()["code"] == "VALIDATION_ERROR"
        assert response.json()["errors"][0]["field"] == "title"

    def test_invalid_token_is_401(self, client):
        response = client.get(
            "/api/documents", headers={"Authorization": "Bearer garbage"}
        )
        assert response.status_code == 401

    def test_listing_is_visibility_filtered(self, client, login_as):
        writer = login_as(UserRole.WRITER)
        _create(client, writer, title="Draft")
        _create(client, writer, title="Public", status="published")

        anon = client.get("/api/documents").json()
        mine = client.get("/api/documents", headers=writer).json()

        assert [d["title"] for d in anon["documents"]] == ["Public"]
        assert anon["pagination"]["total"] == 1
        assert mine["pagination"]["total"] == 2

    def test_pagination_envelope(self, client, login_as):
        admin = login_as(UserRole.ADMIN)
        for i in range(3):
            _create(client, admin, title=f"Doc {i}")

        body = client.get("/api/documents?page=2&limit=2", headers=admin).json()

        assert len(body["documents"]) == 1
        assert body["pagination"] == {
            "current_page": 2,
            "total_pages": 2,
            "total": 3,
            "has_next": False,
            "has_prev": True,
        }

    def test_search(self, client, login_as):
        writer = login_as(UserRole.WRITER)
        _create(client, writer, title="Python tips", status="published")
        _create(client, writer, title="Gardening", status="published")

        body = client.get("/api/documents?search=python").json()

        assert [d["title"] for d in body["documents"]] == ["Python tips"]

    def test_get_draft_as_reader_is_403(self, client, login_as):
        doc = _create(client, login_as(UserRole.WRITER))
        response = client.get(
            f"/api/documents/{doc['id']}", headers=login_as(UserRole.READER)
        )
        assert response.status_code == 403

    def test_get_missing_is_404(self, client):
        response = client.get(f"/api/documents/{uuid4()}")
        assert response.status_code == 404
        assert response.json()["code"] == "NOT_FOUND"

    def test_update_partial(self, client, login_as):
        writer = login_as(UserRole.WRITER)
        doc = _create(client, writer, tags=["keep"])

        response = client.put(
            f"/api/documents/{doc['id']}",
            json={"status": "published"},
            headers=writer,
        )

        assert response.status_code == 200
        assert response.json()["status"] == "published"
        assert response.json()["tags"] == ["keep"]
        assert response.json()["title"] == "Title"

    def test_update_null_title_is_422(self, client, login_as):
        writer = login_as(UserRole.WRITER)
        doc = _create(client, writer)
        response = client.put(
            f"/api/documents/{doc['id']}", json={"title": None}, headers=writer
        )
        assert response.status_code == 422

    def test_update_foreign_is_403(self, client, login_as):
        doc = _create(client, login_as(UserRole.WRITER))
        response = client.put(
            f"/api/documents/{doc['id']}",
            json={"title": "mine now"},
            headers=login_as(UserRole.WRITER),
        )
        assert response.status_code == 403

    def test_admin_delete_cascades(self, client, login_as):
        writer = login_as(UserRole.WRITER)
        doc = _create(client, writer, status="published")
        client.post(
            f"/api/documents/{doc['id']}/replies",
            json={"content": "hi"},
            headers=login_as(UserRole.READER),
        )

        response = client.delete(
            f"/api/documents/{doc['id']}", headers=login_as(UserRole.ADMIN)
        )

        assert response.status_code == 200
        assert response.json() == {"deleted": True, "replies_deleted": 1}
        assert client.get(f"/api/documents/{doc['id']}").status_code == 404


class TestRepliesEndpoints:
    def test_reply_flow(self, client, login_as):
        doc = _create(client, login_as(UserRole.WRITER), status="published")
        reader = login_as(UserRole.READER)

        created = client.post(
            f"/api/documents/{doc['id']}/replies",
            json={"content": "  Nice!  "},
            headers=reader,
        )
        listed = client.get(f"/api/documents/{doc['id']}/replies", headers=reader)

        assert created.status_code == 201
        assert created.json()["content"] == "Nice!"
        assert [r["id"] for r in listed.json()["replies"]] == [created.json()["id"]]

        deleted = client.delete(f"/api/replies/{created.json()['id']}", headers=reader)
        assert deleted.status_code == 200

    def test_reply_to_draft_is_400(self, client, login_as):
        writer = login_as(UserRole.WRITER)
        doc = _create(client, writer)
        response = client.post(
            f"/api/documents/{doc['id']}/replies",
            json={"content": "hi"},
            headers=writer,
        )
        assert response.status_code == 400
        assert response.json()["code"] == "INVALID_STATE"

    def test_reply_to_missing_document_names_the_document(self, client, login_as):
        missing = uuid4()
        response = client.post(
            f"/api/documents/{missing}/replies",
            json={"content": "hi"},
            headers=login_as(UserRole.READER),
        )
        assert response.status_code == 404
        assert response.json()["detail"] == f"Document '{missing}' no encontrado"

    def test_list_replies_anonymous_is_401(self, client, login_as):
        doc = _create(client, login_as(UserRole.WRITER), status="published")
        assert client.get(f"/api/documents/{doc['id']}/replies").status_code == 401

    def test_admin_cannot_delete_foreign_reply(self, client, login_as):
        doc = _create(client, login_as(UserRole.WRITER), status="published")
        reply = client.post(
            f"/api/documents/{doc['id']}/replies",
            json={"content": "hi"},
            headers=login_as(UserRole.READER),
        ).json()

        response = client.delete(
            f"/api/replies/{reply['id']}", headers=login_as(UserRole.ADMIN)
        )
        assert response.status_code == 403

    def test_delete_missing_reply_is_404(self, client, login_as):
        response = client.delete(
            f"/api/replies/{uuid4()}", headers=login_as(UserRole.READER)
        )
        assert response.status_code == 404


def test_health_reports_in_memory_storage(client):
    response = client.get("/api/health", headers={"X-Request-Id": "req-123"})

    assert response.status_code == 200
    assert response.json()["storage"] == "in_memory"
    assert response.json()["request_id"] == "req-123"
    assert response.headers["X-Request-Id"] == "req-123"
