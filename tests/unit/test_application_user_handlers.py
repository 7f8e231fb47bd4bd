"""Unit tests for user, linked researcher and share request listing handlers."""

from unittest.mock import AsyncMock

import pytest

from papershare.application.commands import InitializeUser, LinkResearcher, UnlinkResearcher
from papershare.application.commands.handlers.initialize_user_handler import (
    InitializeUserHandler,
)
from papershare.application.commands.handlers.researcher_handlers import (
    LinkResearcherHandler,
    ResearcherError,
    UnlinkResearcherHandler,
)
from papershare.application.errors import ApplicationErrorCode
from papershare.application.queries.handlers.get_current_user_handler import (
    GetCurrentUserHandler,
)
from papershare.application.queries.handlers.list_share_requests_handler import (
    ListShareRequestsHandler,
)
from papershare.application.queries.sharing_queries import ListShareRequests
from papershare.application.queries.user_queries import GetCurrentUser
from papershare.core.result import Failure, Success
from tests.conftest import make_document, make_share_request, make_user


@pytest.mark.unit
class TestInitializeUser:
    async def test_creates_user_on_first_login(self):
        repo = AsyncMock()
        repo.find_by_email.return_value = None

        result = await InitializeUserHandler(repo).handle(
            InitializeUser(email=" ada@example.org ", auth_subject="auth0|ada")
        )

        assert isinstance(result, Success)
        assert result.value.is_new_user is True
        assert result.value.user.email == "ada@example.org"
        assert result.value.user.auth_subject == "auth0|ada"
        repo.save.assert_awaited_once()

    async def test_returns_existing_user(self):
        existing = make_user("ada@example.org")
        repo = AsyncMock()
        repo.find_by_email.return_value = existing

        result = await InitializeUserHandler(repo).handle(
            InitializeUser(email="ada@example.org", auth_subject="auth0|ada")
        )

        assert result.value.user is existing
        assert result.value.is_new_user is False
        repo.save.assert_not_awaited()

    async def test_missing_email_is_invalid(self):
        repo = AsyncMock()

        result = await InitializeUserHandler(repo).handle(
            InitializeUser(email="  ", auth_subject="auth0|ada")
        )

        assert isinstance(result, Failure)
        assert result.error.code == ApplicationErrorCode.COMMAND_VALIDATION_FAILED
        repo.find_by_email.assert_not_awaited()

    async def test_concurrent_first_login_returns_winner(self):
        winner = make_user("ada@example.org")
        repo = AsyncMock()
        repo.find_by_email.side_effect = [None, winner]
        repo.save.side_effect = RuntimeError("duplicate key")

        result = await InitializeUserHandler(repo).handle(
            InitializeUser(email="ada@example.org", auth_subject="auth0|ada")
        )

        assert isinstance(result, Success)
        assert result.value.user is winner
        assert result.value.is_new_user is False

    async def test_database_error(self):
        repo = AsyncMock()
        repo.find_by_email.return_value = None
        repo.save.side_effect = RuntimeError("db down")

        result = await InitializeUserHandler(repo).handle(
            InitializeUser(email="ada@example.org", auth_subject="auth0|ada")
        )

        assert isinstance(result, Failure)
        assert result.error.code == ApplicationErrorCode.COMMAND_EXECUTION_FAILED
        assert result.error.details == {"error_type": "RuntimeError"}


@pytest.mark.unit
class TestGetCurrentUser:
    async def test_found(self):
        user = make_user()
        repo = AsyncMock()
        repo.find_by_id.return_value = user

        result = await GetCurrentUserHandler(repo).handle(GetCurrentUser(user_id=user.id))

        assert result.value is user

    async def test_missing(self):
        user = make_user()
        repo = AsyncMock()
        repo.find_by_id.return_value = None

        result = await GetCurrentUserHandler(repo).handle(GetCurrentUser(user_id=user.id))

        assert isinstance(result, Failure)
        assert result.error.code == ApplicationErrorCode.NOT_FOUND


@pytest.mark.unit
class TestLinkedResearchers:
    async def test_link(self):
        user = make_user()
        repo = AsyncMock()
        repo.save.return_value = True

        result = await LinkResearcherHandler(repo).handle(
            LinkResearcher(
                user_id=user.id, orcid_id=" 0000-0002-1825-0097 ", researcher_name="Ada Lovelace"
            )
        )

        assert isinstance(result, Success)
        assert result.value.orcid_id == "0000-0002-1825-0097"

    async def test_link_twice_conflicts(self):
        user = make_user()
        repo = AsyncMock()
        repo.save.return_value = False

        result = await LinkResearcherHandler(repo).handle(
            LinkResearcher(
                user_id=user.id, orcid_id="0000-0002-1825-0097", researcher_name="Ada Lovelace"
            )
        )

        assert isinstance(result, Failure)
        assert result.error.code == ApplicationErrorCode.CONFLICT
        assert result.error.message == ResearcherError.ALREADY_LINKED

    async def test_link_requires_fields(self):
        user = make_user()
        repo = AsyncMock()

        result = await LinkResearcherHandler(repo).handle(
            LinkResearcher(user_id=user.id, orcid_id="", researcher_name="Ada Lovelace")
        )

        assert result.error.code == ApplicationErrorCode.COMMAND_VALIDATION_FAILED
        repo.save.assert_not_awaited()

    async def test_unlink_missing(self):
        user = make_user()
        repo = AsyncMock()
        repo.delete.return_value = False

        result = await UnlinkResearcherHandler(repo).handle(
            UnlinkResearcher(user_id=user.id, orcid_id="0000-0002-1825-0097")
        )

        assert result.error.code == ApplicationErrorCode.NOT_FOUND


@pytest.mark.unit
class TestListShareRequests:
    async def test_joins_document_and_sender(self):
        sender = make_user("ada@example.org")
        recipient = make_user("bob@example.org")
        document = make_document(sender.id, researcher_name="Ada Lovelace")
        orphan = make_share_request(make_document(sender.id).id, sender.id, recipient.id)
        pending = make_share_request(document.id, sender.id, recipient.id)
        share_request_repo = AsyncMock()
        share_request_repo.list_for_recipient.return_value = [pending, orphan]
        document_repo = AsyncMock()
        document_repo.find_by_ids.return_value = [document]
        user_repo = AsyncMock()
        user_repo.find_by_ids.return_value = [sender]

        result = await ListShareRequestsHandler(share_request_repo, document_repo, user_repo).handle(
            ListShareRequests(user_id=recipient.id)
        )

        assert len(result.value) == 1
        summary = result.value[0]
        assert summary.id == pending.id
        assert summary.from_user_email == "ada@example.org"
        assert summary.researcher_name == "Ada Lovelace"

    async def test_no_requests_skips_joins(self):
        share_request_repo = AsyncMock()
        share_request_repo.list_for_recipient.return_value = []
        document_repo = AsyncMock()

        result = await ListShareRequestsHandler(
            share_request_repo, document_repo, AsyncMock()
        ).handle(ListShareRequests(user_id=make_user().id))

        assert result.value == []
        document_repo.find_by_ids.assert_not_awaited()
