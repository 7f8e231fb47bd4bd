"""Integration tests for the SQLAlchemy repositories.

Architecture:
- REAL database (in-memory SQLite with foreign keys enforced)
- Uses test_database fixture (fresh instance per test)
- Covers uniqueness rules, cascades and the readable-document queries
"""

from datetime import UTC, datetime, timedelta

import pytest
import pytest_asyncio
from sqlalchemy.exc import IntegrityError
from uuid_extensions import uuid7

from papershare.domain.entities import LinkedResearcher
from papershare.infrastructure.persistence.repositories import (
    AccessGrantRepository,
    DocumentRepository,
    LinkedResearcherRepository,
    ShareRequestRepository,
    UserRepository,
)
from tests.conftest import make_document, make_grant, make_share_request, make_user


@pytest_asyncio.fixture
async def session(test_database):
    async with test_database.get_session() as session:
        yield session


@pytest_asyncio.fixture
async def people(session):
    """Three persisted users: owner, reader, stranger."""
    repo = UserRepository(session)
    users = [make_user(email) for email in ("ada@example.org", "bob@example.org", "eve@example.org")]
    for user in users:
        await repo.save(user)
    return users


@pytest.mark.integration
class TestUserRepository:
    async def test_find_by_email_is_case_insensitive(self, session, people):
        found = await UserRepository(session).find_by_email("  ADA@Example.org")

        assert found is not None
        assert found.id == people[0].id

    async def test_duplicate_email_rejected(self, session, people):
        with pytest.raises(IntegrityError):
            await UserRepository(session).save(make_user("ada@example.org", "auth0|other"))

    async def test_find_by_ids(self, session, people):
        found = await UserRepository(session).find_by_ids([people[0].id, people[2].id])

        assert {user.email for user in found} == {"ada@example.org", "eve@example.org"}


@pytest.mark.integration
class TestDocumentRepository:
    async def test_one_document_per_owner_and_work(self, session, people):
        repo = DocumentRepository(session)
        await repo.save(make_document(people[0].id, "W1"))

        with pytest.raises(IntegrityError):
            await repo.save(make_document(people[0].id, "W1"))

        found = await repo.find_by_owner_and_work(people[0].id, "W1")
        assert found is not None

    async def test_update_replaces_file_in_place(self, session, people):
        repo = DocumentRepository(session)
        document = make_document(people[0].id, "W1", file_name="old.pdf")
        await repo.save(document)

        previous = document.replace_file(
            file_name="new.pdf",
            original_name="v2.pdf",
            work_title="Revised",
            orcid_id=None,
            researcher_name=None,
        )
        await repo.update(document)

        stored = await repo.find_by_id(document.id)
        assert previous == "old.pdf"
        assert stored.file_name == "new.pdf"
        assert stored.work_title == "Revised"

    async def test_readable_means_owned_or_granted(self, session, people):
        owner, reader, stranger = people
        documents = DocumentRepository(session)
        now = datetime.now(UTC)
        owned = make_document(reader.id, "W1")
        owned.uploaded_at = now - timedelta(minutes=2)
        shared = make_document(owner.id, "W2")
        shared.uploaded_at = now - timedelta(minutes=1)
        private = make_document(owner.id, "W3")
        for doc in (owned, shared, private):
            await documents.save(doc)
        await AccessGrantRepository(session).save(make_grant(shared.id, reader.id))

        readable = await documents.list_readable(reader.id)
        by_work = await documents.list_readable_by_work_ids(reader.id, ["W2", "W3"])

        assert [doc.id for doc in readable] == [shared.id, owned.id]
        assert [doc.id for doc in by_work] == [shared.id]
        assert await documents.list_readable(stranger.id) == []
        assert [doc.id for doc in await documents.list_shared_with(reader.id)] == [shared.id]

    async def test_delete_cascades_grants_and_requests(self, session, people):
        owner, reader, stranger = people
        documents = DocumentRepository(session)
        grants = AccessGrantRepository(session)
        requests = ShareRequestRepository(session)
        document = make_document(owner.id)
        await documents.save(document)
        await grants.save(make_grant(document.id, reader.id))
        pending = make_share_request(document.id, owner.id, stranger.id)
        await requests.save(pending)

        assert await documents.delete(document.id) is True

        assert await grants.exists(document.id, reader.id) is False
        assert await requests.find_by_id(pending.id) is None
        assert await documents.delete(document.id) is False


@pytest.mark.integration
class TestAccessGrantRepository:
    async def test_save_is_idempotent(self, session, people):
        owner, reader, _ = people
        document = make_document(owner.id)
        await DocumentRepository(session).save(document)
        repo = AccessGrantRepository(session)

        assert await repo.save(make_grant(document.id, reader.id)) is True
        assert await repo.save(make_grant(document.id, reader.id)) is False
        assert len(await repo.list_for_document(document.id)) == 1

    async def test_delete_reports_missing_grant(self, session, people):
        owner, reader, _ = people
        document = make_document(owner.id)
        await DocumentRepository(session).save(document)
        repo = AccessGrantRepository(session)
        await repo.save(make_grant(document.id, reader.id))

        assert await repo.delete(document.id, reader.id) is True
        assert await repo.delete(document.id, reader.id) is False


@pytest.mark.integration
class TestShareRequestRepository:
    async def test_one_pending_request_per_recipient(self, session, people):
        owner, reader, _ = people
        document = make_document(owner.id)
        await DocumentRepository(session).save(document)
        repo = ShareRequestRepository(session)
        first = make_share_request(document.id, owner.id, reader.id)
        await repo.save(first)

        with pytest.raises(IntegrityError):
            await repo.save(make_share_request(document.id, owner.id, reader.id))

        pending = await repo.find_pending(document.id, reader.id)
        assert pending.id == first.id
        assert [r.id for r in await repo.list_for_recipient(reader.id)] == [first.id]


@pytest.mark.integration
class TestLinkedResearcherRepository:
    async def test_link_is_idempotent_per_orcid(self, session, people):
        user = people[1]
        repo = LinkedResearcherRepository(session)

        def link() -> LinkedResearcher:
            return LinkedResearcher(
                id=uuid7(),
                user_id=user.id,
                orcid_id="0000-0002-1825-0097",
                researcher_name="Ada Lovelace",
                created_at=datetime.now(UTC),
            )

        assert await repo.save(link()) is True
        assert await repo.save(link()) is False
        assert len(await repo.list_for_user(user.id)) == 1
        assert await repo.delete(user.id, "0000-0002-1825-0097") is True
        assert await repo.list_for_user(user.id) == []
