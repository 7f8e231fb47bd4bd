"""API tests for document endpoints.

Handlers are replaced through ``app.dependency_overrides``; these tests pin
the HTTP contract (status codes, RFC 9457 bodies, upload streaming and
inline PDF download), not business rules.
"""

from unittest.mock import AsyncMock

import pytest
from fastapi.testclient import TestClient
from uuid_extensions import uuid7

from papershare.application.dtos import (
    AccessibleDocuments,
    DocumentDownload,
    DocumentSummary,
    UploadDocumentResult,
)
from papershare.application.errors import forbidden, invalid, not_found
from papershare.core.container import (
    get_delete_document_handler,
    get_get_document_handler,
    get_list_accessible_documents_handler,
    get_list_document_status_handler,
    get_request_share_handler,
    get_revoke_access_handler,
    get_upload_document_handler,
)
from papershare.core.enums import ErrorCode
from papershare.core.result import Success
from papershare.main import app
from papershare.presentation.routers.api.middleware.auth_dependencies import (
    CurrentUser,
    get_current_user,
)
from tests.conftest import make_document, make_share_request

# =============================================================================
# Test Doubles
# =============================================================================


class RecordingUploadHandler:
    """Upload handler double that drains the streamed file."""

    def __init__(self) -> None:
        self.command = None
        self.received = b""

    async def handle(self, cmd):
        self.command = cmd
        async for chunk in cmd.chunks:
            self.received += chunk
        document = make_document(cmd.owner_id, cmd.work_id)
        document.original_name = cmd.original_name
        return Success(value=UploadDocumentResult(document=document, replaced=False))


def _handler(result) -> AsyncMock:
    handler = AsyncMock()
    handler.handle.return_value = result
    return handler


# =============================================================================
# Fixtures
# =============================================================================


@pytest.fixture
def current_user() -> CurrentUser:
    return CurrentUser(user_id=uuid7(), email="ada@example.org", subject="auth0|ada")


@pytest.fixture(autouse=True)
def override_auth(current_user):
    """Override authentication for all tests."""

    async def mock_get_current_user():
        return current_user

    app.dependency_overrides[get_current_user] = mock_get_current_user
    yield
    app.dependency_overrides.clear()


@pytest.fixture
def client():
    return TestClient(app, raise_server_exceptions=False)


# =============================================================================
# Upload
# =============================================================================


@pytest.mark.api
class TestUploadDocument:
    def test_upload_streams_file(self, client, current_user):
        handler = RecordingUploadHandler()
        app.dependency_overrides[get_upload_document_handler] = lambda: handler

        response = client.post(
            "/api/v1/documents",
            params={"work_id": "W2741809807", "orcid_id": "0000-0002-1825-0097"},
            files={"file": ("paper.pdf", b"%PDF-1.7 body", "application/pdf")},
        )

        assert response.status_code == 201
        body = response.json()
        assert body["work_id"] == "W2741809807"
        assert body["original_name"] == "paper.pdf"
        assert body["replaced"] is False
        assert handler.received == b"%PDF-1.7 body"
        assert handler.command.owner_id == current_user.user_id
        assert handler.command.orcid_id == "0000-0002-1825-0097"
        assert handler.command.content_type == "application/pdf"

    def test_missing_work_id_is_422(self, client):
        app.dependency_overrides[get_upload_document_handler] = RecordingUploadHandler

        response = client.post(
            "/api/v1/documents",
            files={"file": ("paper.pdf", b"%PDF", "application/pdf")},
        )

        assert response.status_code == 422
        fields = [error["field"] for error in response.json()["errors"]]
        assert "query.work_id" in fields

    def test_non_pdf_is_400_with_field(self, client):
        handler = _handler(invalid("Only PDF files are allowed", field="file"))
        app.dependency_overrides[get_upload_document_handler] = lambda: handler

        response = client.post(
            "/api/v1/documents",
            params={"work_id": "W1"},
            files={"file": ("notes.txt", b"hello", "text/plain")},
        )

        assert response.status_code == 400
        body = response.json()
        assert body["errors"][0]["field"] == "file"
        assert response.headers["content-type"].startswith("application/json")


# =============================================================================
# Reads
# =============================================================================


@pytest.mark.api
class TestReadDocuments:
    def test_list_documents(self, client, current_user):
        document = make_document(current_user.user_id, "W1")
        owned = DocumentSummary.for_user(document, current_user.user_id)
        handler = _handler(
            Success(value=AccessibleDocuments(documents=[owned], total_candidates=2))
        )
        app.dependency_overrides[get_list_accessible_documents_handler] = lambda: handler

        response = client.get("/api/v1/documents")

        assert response.status_code == 200
        body = response.json()
        assert body["total_count"] == 1
        assert body["total_candidates"] == 2
        assert body["documents"][0]["is_owner"] is True
        query = handler.handle.await_args.args[0]
        assert query.user_email == current_user.email

    def test_status_splits_work_ids(self, client, current_user):
        handler = _handler(Success(value={}))
        app.dependency_overrides[get_list_document_status_handler] = lambda: handler

        response = client.get("/api/v1/documents/status", params={"work_ids": "W1,W2"})

        assert response.status_code == 200
        assert response.json() == {"documents": {}}
        assert handler.handle.await_args.args[0].work_ids == ["W1", "W2"]

    def test_download_is_inline_pdf(self, client, current_user, tmp_path):
        path = tmp_path / "stored.pdf"
        path.write_bytes(b"%PDF-1.7\n%%EOF\n")
        document = make_document(current_user.user_id)
        handler = _handler(Success(value=DocumentDownload(document=document, path=path)))
        app.dependency_overrides[get_get_document_handler] = lambda: handler

        response = client.get(f"/api/v1/documents/{document.id}")

        assert response.status_code == 200
        assert response.headers["content-type"] == "application/pdf"
        assert response.headers["content-disposition"].startswith("inline")
        assert response.content == b"%PDF-1.7\n%%EOF\n"
        assert handler.handle.await_args.args[0].user_email == "ada@example.org"

    def test_download_denied_is_403_problem(self, client):
        handler = _handler(forbidden("Access denied", required_relation="viewer"))
        app.dependency_overrides[get_get_document_handler] = lambda: handler

        response = client.get(f"/api/v1/documents/{uuid7()}")

        assert response.status_code == 403
        body = response.json()
        assert body["title"] == "Access Denied"
        assert body["instance"].startswith("/api/v1/documents/")
        assert body["trace_id"] == response.headers["X-Trace-Id"]

    def test_invalid_document_id_is_422(self, client):
        app.dependency_overrides[get_get_document_handler] = lambda: _handler(None)

        response = client.get("/api/v1/documents/not-a-uuid")

        assert response.status_code == 422


# =============================================================================
# Owner actions
# =============================================================================


@pytest.mark.api
class TestOwnerActions:
    def test_delete_is_204(self, client):
        app.dependency_overrides[get_delete_document_handler] = lambda: _handler(
            Success(value=None)
        )

        response = client.delete(f"/api/v1/documents/{uuid7()}")

        assert response.status_code == 204
        assert response.content == b""

    def test_delete_foreign_document_is_404(self, client):
        document_id = uuid7()
        app.dependency_overrides[get_delete_document_handler] = lambda: _handler(
            not_found(ErrorCode.DOCUMENT_NOT_FOUND, "Document", document_id, "Document not found")
        )

        response = client.delete(f"/api/v1/documents/{document_id}")

        assert response.status_code == 404

    def test_request_share_is_201(self, client, current_user):
        document_id = uuid7()
        request = make_share_request(document_id, current_user.user_id, uuid7())
        handler = _handler(Success(value=request))
        app.dependency_overrides[get_request_share_handler] = lambda: handler

        response = client.post(
            f"/api/v1/documents/{document_id}/share-requests",
            json={"target_email": "bob@example.org"},
        )

        assert response.status_code == 201
        assert response.json()["id"] == str(request.id)
        assert handler.handle.await_args.args[0].target_email == "bob@example.org"

    def test_request_share_rejects_malformed_email(self, client):
        handler = _handler(None)
        app.dependency_overrides[get_request_share_handler] = lambda: handler

        response = client.post(
            f"/api/v1/documents/{uuid7()}/share-requests",
            json={"target_email": "not-an-email"},
        )

        assert response.status_code == 422
        handler.handle.assert_not_awaited()

    def test_revoke_is_204(self, client, current_user):
        handler = _handler(Success(value=None))
        app.dependency_overrides[get_revoke_access_handler] = lambda: handler
        grantee_id = uuid7()

        response = client.delete(f"/api/v1/documents/{uuid7()}/grants/{grantee_id}")

        assert response.status_code == 204
        assert handler.handle.await_args.args[0].grantee_id == grantee_id
