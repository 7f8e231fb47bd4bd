"""Shared pytest fixtures and entity factories.

Factories build domain entities with sensible defaults so each test only
spells out the fields it cares about:

    owner = make_user(email="ada@example.org")
    document = make_document(owner_id=owner.id, orcid_id="0000-0002-1825-0097")
"""

from datetime import UTC, datetime
from unittest.mock import MagicMock
from uuid import UUID

import pytest
import pytest_asyncio
from uuid_extensions import uuid7

from papershare.application.services.authorization_mode import AuthorizationMode
from papershare.domain.entities import AccessGrant, Document, ShareRequest, User
from papershare.infrastructure.authorization.in_memory_graph_adapter import (
    InMemoryRelationshipGraph,
)
from papershare.infrastructure.persistence.database import Database

TEST_DATABASE_URL = "sqlite+aiosqlite:///:memory:"


def make_user(email: str = "ada@example.org", auth_subject: str | None = None) -> User:
    """Build a User entity."""
    now = datetime.now(UTC)
    return User(
        id=uuid7(),
        email=email,
        auth_subject=auth_subject or f"auth0|{email.split('@')[0]}",
        created_at=now,
        updated_at=now,
    )


def make_document(
    owner_id: UUID,
    work_id: str = "W2741809807",
    *,
    file_name: str | None = None,
    orcid_id: str | None = None,
    researcher_name: str | None = None,
) -> Document:
    """Build a Document entity owned by ``owner_id``."""
    return Document(
        id=uuid7(),
        owner_id=owner_id,
        work_id=work_id,
        work_title="Attention Is All You Need",
        file_name=file_name or f"{uuid7().hex}.pdf",
        original_name="paper.pdf",
        uploaded_at=datetime.now(UTC),
        orcid_id=orcid_id,
        researcher_name=researcher_name,
    )


def make_grant(document_id: UUID, user_id: UUID) -> AccessGrant:
    """Build an AccessGrant entity."""
    return AccessGrant(
        id=uuid7(),
        document_id=document_id,
        user_id=user_id,
        granted_at=datetime.now(UTC),
    )


def make_share_request(document_id: UUID, from_user_id: UUID, to_user_id: UUID) -> ShareRequest:
    """Build a ShareRequest entity."""
    return ShareRequest(
        id=uuid7(),
        document_id=document_id,
        from_user_id=from_user_id,
        to_user_id=to_user_id,
        created_at=datetime.now(UTC),
    )


@pytest.fixture
def mock_logger() -> MagicMock:
    """Logger double recording structured log calls."""
    return MagicMock()


@pytest.fixture
def graph() -> InMemoryRelationshipGraph:
    """Fresh in-memory relationship graph."""
    return InMemoryRelationshipGraph()


@pytest.fixture
def enabled_mode() -> AuthorizationMode:
    """Relationship graph configured."""
    return AuthorizationMode(graph_enabled=True, store_id="01HSTORE", model_id="01HMODEL")


@pytest.fixture
def degraded_mode() -> AuthorizationMode:
    """No store configured: relational authorization only."""
    return AuthorizationMode.disabled()


@pytest_asyncio.fixture
async def test_database():
    """Fresh in-memory database with all tables created.

    Foreign keys are enforced, so deletes cascade as they do in PostgreSQL.
    """
    database = Database(TEST_DATABASE_URL)
    await database.create_all()
    yield database
    await database.close()
