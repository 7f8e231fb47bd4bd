"""Unit tests for document handlers (delete and the read side)."""

from pathlib import Path
from unittest.mock import AsyncMock, MagicMock

import pytest

from papershare.application.commands import DeleteDocument
from papershare.application.commands.handlers.delete_document_handler import (
    DeleteDocumentHandler,
)
from papershare.application.errors import ApplicationErrorCode
from papershare.application.queries.document_queries import (
    GetDocument,
    ListAccessibleDocuments,
    ListDocumentStatus,
    ListSuggestionCandidates,
)
from papershare.application.queries.handlers.document_query_handlers import (
    GetDocumentHandler,
    ListAccessibleDocumentsHandler,
    ListDocumentStatusHandler,
)
from papershare.application.queries.handlers.list_suggestion_candidates_handler import (
    ListSuggestionCandidatesHandler,
)
from papershare.application.services.access_coordinator import AccessCoordinator
from papershare.application.services.authorization_filter import AuthorizationFilter
from papershare.core.result import Failure, Success
from papershare.domain.enums import Relation
from papershare.domain.events import DocumentDeleted
from papershare.domain.value_objects import document_ref, user_ref
from tests.conftest import make_document, make_grant, make_user


@pytest.fixture
def owner():
    return make_user("ada@example.org")


@pytest.fixture
def reader():
    return make_user("bob@example.org")


@pytest.fixture
def document(owner):
    return make_document(owner.id, file_name="stored.pdf")


@pytest.fixture
def document_repo(document) -> AsyncMock:
    repo = AsyncMock()
    repo.find_by_id.side_effect = lambda doc_id: document if doc_id == document.id else None
    repo.delete.return_value = True
    return repo


@pytest.fixture
def access_grant_repo() -> AsyncMock:
    repo = AsyncMock()
    repo.exists.return_value = False
    repo.list_for_document.return_value = []
    return repo


@pytest.fixture
def storage() -> MagicMock:
    storage = MagicMock()
    storage.delete = AsyncMock(return_value=True)
    storage.path_for.side_effect = lambda name: Path("/srv/uploads") / name
    return storage


@pytest.fixture
def event_bus() -> AsyncMock:
    return AsyncMock()


@pytest.fixture
def authz_filter(graph, enabled_mode, mock_logger) -> AuthorizationFilter:
    return AuthorizationFilter(graph=graph, mode=enabled_mode, logger=mock_logger)


# =============================================================================
# DeleteDocument
# =============================================================================


@pytest.mark.unit
class TestDeleteDocument:
    @pytest.fixture
    def handler(
        self,
        owner,
        reader,
        document_repo,
        access_grant_repo,
        storage,
        graph,
        enabled_mode,
        event_bus,
        mock_logger,
    ):
        users = {owner.id: owner, reader.id: reader}
        user_repo = AsyncMock()
        user_repo.find_by_id.side_effect = lambda user_id: users.get(user_id)
        user_repo.find_by_ids.side_effect = lambda ids: [users[i] for i in ids if i in users]
        coordinator = AccessCoordinator(
            document_repo=document_repo,
            access_grant_repo=access_grant_repo,
            graph=graph,
            mode=enabled_mode,
            event_bus=event_bus,
            logger=mock_logger,
        )
        return DeleteDocumentHandler(
            user_repo=user_repo,
            document_repo=document_repo,
            access_grant_repo=access_grant_repo,
            storage=storage,
            coordinator=coordinator,
            event_bus=event_bus,
        )

    async def test_removes_row_tuples_and_file(
        self, handler, owner, reader, document, access_grant_repo, storage, graph, event_bus
    ):
        doc = document_ref(document.id)
        await graph.write(user_ref(owner.email), Relation.OWNER, doc)
        await graph.write(user_ref(owner.email), Relation.VIEWER, doc)
        await graph.write(user_ref(reader.email), Relation.VIEWER, doc)
        access_grant_repo.list_for_document.return_value = [make_grant(document.id, reader.id)]

        result = await handler.handle(DeleteDocument(user_id=owner.id, document_id=document.id))

        assert isinstance(result, Success)
        assert graph.tuples == frozenset()
        storage.delete.assert_awaited_once_with("stored.pdf")
        assert isinstance(event_bus.publish.await_args.args[0], DocumentDeleted)

    async def test_non_owner_sees_not_found(self, handler, reader, document, document_repo, storage):
        result = await handler.handle(DeleteDocument(user_id=reader.id, document_id=document.id))

        assert isinstance(result, Failure)
        assert result.error.code == ApplicationErrorCode.NOT_FOUND
        document_repo.delete.assert_not_awaited()
        storage.delete.assert_not_awaited()

    async def test_database_error_keeps_file(self, handler, owner, document, document_repo, storage):
        document_repo.delete.side_effect = RuntimeError("db down")

        result = await handler.handle(DeleteDocument(user_id=owner.id, document_id=document.id))

        assert isinstance(result, Failure)
        assert result.error.code == ApplicationErrorCode.COMMAND_EXECUTION_FAILED
        storage.delete.assert_not_awaited()


# =============================================================================
# GetDocument
# =============================================================================


@pytest.mark.unit
class TestGetDocument:
    @pytest.fixture
    def handler(self, document_repo, access_grant_repo, authz_filter, storage):
        return GetDocumentHandler(
            document_repo=document_repo,
            access_grant_repo=access_grant_repo,
            authorization_filter=authz_filter,
            storage=storage,
        )

    async def test_owner_with_tuple_can_read(self, handler, owner, document, graph):
        for relation in (Relation.OWNER, Relation.VIEWER):
            await graph.write(user_ref(owner.email), relation, document_ref(document.id))

        result = await handler.handle(
            GetDocument(user_id=owner.id, user_email=owner.email, document_id=document.id)
        )

        assert isinstance(result, Success)
        assert result.value.path == Path("/srv/uploads/stored.pdf")

    async def test_grant_without_tuple_is_denied(
        self, handler, reader, document, access_grant_repo
    ):
        access_grant_repo.exists.return_value = True

        result = await handler.handle(
            GetDocument(user_id=reader.id, user_email=reader.email, document_id=document.id)
        )

        assert isinstance(result, Failure)
        assert result.error.code == ApplicationErrorCode.FORBIDDEN

    async def test_tuple_without_grant_is_denied(self, handler, reader, document, graph):
        await graph.write(user_ref(reader.email), Relation.VIEWER, document_ref(document.id))

        result = await handler.handle(
            GetDocument(user_id=reader.id, user_email=reader.email, document_id=document.id)
        )

        assert isinstance(result, Failure)
        assert result.error.code == ApplicationErrorCode.FORBIDDEN

    async def test_degraded_mode_uses_relational_check_only(
        self, document_repo, access_grant_repo, storage, degraded_mode, mock_logger, reader, document
    ):
        access_grant_repo.exists.return_value = True
        handler = GetDocumentHandler(
            document_repo=document_repo,
            access_grant_repo=access_grant_repo,
            authorization_filter=AuthorizationFilter(
                graph=None, mode=degraded_mode, logger=mock_logger
            ),
            storage=storage,
        )

        result = await handler.handle(
            GetDocument(user_id=reader.id, user_email=reader.email, document_id=document.id)
        )

        assert isinstance(result, Success)

    async def test_missing_document(self, handler, owner):
        result = await handler.handle(
            GetDocument(user_id=owner.id, user_email=owner.email, document_id=owner.id)
        )

        assert isinstance(result, Failure)
        assert result.error.code == ApplicationErrorCode.NOT_FOUND


# =============================================================================
# Listing queries
# =============================================================================


@pytest.mark.unit
class TestListDocumentStatus:
    async def test_shared_document_wins_over_owned(self, owner):
        owned = make_document(owner.id, "W1")
        shared = make_document(make_user("eve@example.org").id, "W1")
        other = make_document(owner.id, "W2")
        repo = AsyncMock()
        repo.list_readable_by_work_ids.return_value = [shared, owned, other]

        result = await ListDocumentStatusHandler(repo).handle(
            ListDocumentStatus(user_id=owner.id, work_ids=["W1", "W2"])
        )

        assert isinstance(result, Success)
        assert result.value["W1"].id == shared.id
        assert result.value["W1"].is_owner is False
        assert result.value["W2"].is_owner is True

    async def test_blank_work_ids_skip_lookup(self, owner):
        repo = AsyncMock()

        result = await ListDocumentStatusHandler(repo).handle(
            ListDocumentStatus(user_id=owner.id, work_ids=["  ", ""])
        )

        assert result.value == {}
        repo.list_readable_by_work_ids.assert_not_awaited()


@pytest.mark.unit
class TestListAccessibleDocuments:
    @pytest.fixture
    def repo(self) -> AsyncMock:
        return AsyncMock()

    async def test_owned_then_shared(self, owner, repo, authz_filter, graph):
        owned = make_document(owner.id, "W1")
        shared = make_document(make_user("eve@example.org").id, "W2")
        for doc in (owned, shared):
            await graph.write(user_ref(owner.email), Relation.VIEWER, document_ref(doc.id))
        repo.list_owned.return_value = [owned]
        repo.list_shared_with.return_value = [shared]

        result = await ListAccessibleDocumentsHandler(repo, authz_filter).handle(
            ListAccessibleDocuments(user_id=owner.id, user_email=owner.email)
        )

        assert [summary.id for summary in result.value.documents] == [owned.id, shared.id]
        assert [summary.is_owner for summary in result.value.documents] == [True, False]

    async def test_grant_without_viewer_tuple_is_not_listed(
        self, owner, repo, authz_filter, graph
    ):
        owned = make_document(owner.id, "W1")
        shared = make_document(make_user("eve@example.org").id, "W2")
        await graph.write(user_ref(owner.email), Relation.VIEWER, document_ref(owned.id))
        repo.list_owned.return_value = [owned]
        repo.list_shared_with.return_value = [shared]

        result = await ListAccessibleDocumentsHandler(repo, authz_filter).handle(
            ListAccessibleDocuments(user_id=owner.id, user_email=owner.email)
        )

        assert [summary.id for summary in result.value.documents] == [owned.id]
        assert result.value.total_candidates == 2
        assert result.value.authorized_count == 1

    async def test_degraded_mode_lists_relational_candidates(
        self, owner, repo, degraded_mode, mock_logger
    ):
        shared = make_document(make_user("eve@example.org").id, "W2")
        repo.list_owned.return_value = []
        repo.list_shared_with.return_value = [shared]
        authz_filter = AuthorizationFilter(graph=None, mode=degraded_mode, logger=mock_logger)

        result = await ListAccessibleDocumentsHandler(repo, authz_filter).handle(
            ListAccessibleDocuments(user_id=owner.id, user_email=owner.email)
        )

        assert [summary.id for summary in result.value.documents] == [shared.id]


@pytest.mark.unit
class TestListSuggestionCandidates:
    async def test_only_graph_authorized_candidates_leave(self, owner, authz_filter, graph):
        first = make_document(owner.id, "W1")
        second = make_document(owner.id, "W2")
        third = make_document(owner.id, "W3")
        for doc in (first, third):
            await graph.write(user_ref(owner.email), Relation.VIEWER, document_ref(doc.id))
        repo = AsyncMock()
        repo.list_readable.return_value = [first, second, third]
        handler = ListSuggestionCandidatesHandler(repo, authz_filter)

        result = await handler.handle(
            ListSuggestionCandidates(user_id=owner.id, user_email=owner.email)
        )

        assert isinstance(result, Success)
        assert [doc.id for doc in result.value.documents] == [first.id, third.id]
        assert result.value.total_candidates == 3
        assert result.value.authorized_count == 2

    async def test_no_candidates(self, owner, authz_filter):
        repo = AsyncMock()
        repo.list_readable.return_value = []

        result = await ListSuggestionCandidatesHandler(repo, authz_filter).handle(
            ListSuggestionCandidates(user_id=owner.id, user_email=owner.email)
        )

        assert result.value.documents == []
        assert result.value.total_candidates == 0
