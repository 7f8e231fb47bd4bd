"""Unit tests for AccessCoordinator.

Covers the dual-write contract:
- relational write always completes before any tuple write
- tuple failures are logged, published, and swallowed
- degraded mode never touches the graph
"""

from unittest.mock import AsyncMock, MagicMock

import pytest
from sqlalchemy.exc import IntegrityError

from papershare.application.services.access_coordinator import AccessCoordinator
from papershare.domain.enums import Relation
from papershare.domain.events import RelationshipSyncFailed
from papershare.domain.value_objects import document_ref, user_ref
from tests.conftest import make_document, make_grant, make_user

OWNER_EMAIL = "ada@example.org"
RECIPIENT_EMAIL = "bob@example.org"


@pytest.fixture
def document_repo() -> AsyncMock:
    return AsyncMock()


@pytest.fixture
def access_grant_repo() -> AsyncMock:
    repo = AsyncMock()
    repo.save.return_value = True
    repo.delete.return_value = True
    return repo


@pytest.fixture
def event_bus() -> AsyncMock:
    return AsyncMock()


@pytest.fixture
def coordinator(document_repo, access_grant_repo, graph, enabled_mode, event_bus, mock_logger):
    return AccessCoordinator(
        document_repo=document_repo,
        access_grant_repo=access_grant_repo,
        graph=graph,
        mode=enabled_mode,
        event_bus=event_bus,
        logger=mock_logger,
    )


@pytest.fixture
def failing_graph() -> AsyncMock:
    graph = AsyncMock()
    graph.write.side_effect = ConnectionError("graph unreachable")
    graph.delete.side_effect = ConnectionError("graph unreachable")
    return graph


@pytest.mark.unit
class TestRegisterDocument:
    async def test_new_document_writes_owner_and_viewer(self, coordinator, document_repo, graph):
        document = make_document(make_user().id)

        await coordinator.register_document(document, OWNER_EMAIL, is_new=True)

        document_repo.save.assert_awaited_once_with(document)
        obj = document_ref(document.id)
        assert graph.has_tuple(user_ref(OWNER_EMAIL), Relation.OWNER, obj)
        assert graph.has_tuple(user_ref(OWNER_EMAIL), Relation.VIEWER, obj)
        assert await graph.check(user_ref(OWNER_EMAIL), Relation.CAN_VIEW, obj)

    async def test_reupload_updates_row_and_rewrites_tuples(
        self, coordinator, document_repo, graph
    ):
        document = make_document(make_user().id)

        await coordinator.register_document(document, OWNER_EMAIL, is_new=False)

        document_repo.update.assert_awaited_once_with(document)
        document_repo.save.assert_not_awaited()
        assert len(graph.tuples) == 2

    async def test_relational_failure_writes_no_tuple(self, coordinator, document_repo, graph):
        document_repo.save.side_effect = IntegrityError("INSERT", {}, Exception("duplicate"))
        document = make_document(make_user().id)

        with pytest.raises(IntegrityError):
            await coordinator.register_document(document, OWNER_EMAIL, is_new=True)

        assert graph.tuples == frozenset()

    async def test_relational_write_precedes_tuple_write(
        self, document_repo, access_grant_repo, enabled_mode, event_bus, mock_logger
    ):
        calls: list[str] = []
        document_repo.save.side_effect = lambda *_: calls.append("row")
        graph = AsyncMock()
        graph.write.side_effect = lambda *_: calls.append("tuple")
        coordinator = AccessCoordinator(
            document_repo=document_repo,
            access_grant_repo=access_grant_repo,
            graph=graph,
            mode=enabled_mode,
            event_bus=event_bus,
            logger=mock_logger,
        )

        await coordinator.register_document(
            make_document(make_user().id), OWNER_EMAIL, is_new=True
        )

        assert calls == ["row", "tuple", "tuple"]

    async def test_tuple_failure_does_not_fail_upload(
        self, document_repo, access_grant_repo, enabled_mode, event_bus, mock_logger, failing_graph
    ):
        coordinator = AccessCoordinator(
            document_repo=document_repo,
            access_grant_repo=access_grant_repo,
            graph=failing_graph,
            mode=enabled_mode,
            event_bus=event_bus,
            logger=mock_logger,
        )
        document = make_document(make_user().id)

        await coordinator.register_document(document, OWNER_EMAIL, is_new=True)

        document_repo.save.assert_awaited_once()
        assert mock_logger.error.call_count == 2
        assert mock_logger.error.call_args.args[0] == "relationship_tuple_write_failed"
        context = mock_logger.error.call_args.kwargs
        assert context["user"] == user_ref(OWNER_EMAIL)
        assert context["object"] == document_ref(document.id)
        assert isinstance(context["error"], ConnectionError)
        published = event_bus.publish.await_args.args[0]
        assert isinstance(published, RelationshipSyncFailed)
        assert published.operation == "write"


@pytest.mark.unit
class TestShareAcceptance:
    async def test_grant_row_then_viewer_tuple(self, coordinator, access_grant_repo, graph):
        document = make_document(make_user().id)
        grant = make_grant(document.id, make_user(RECIPIENT_EMAIL).id)

        created = await coordinator.record_share_acceptance(grant, RECIPIENT_EMAIL)

        assert created is True
        access_grant_repo.save.assert_awaited_once_with(grant)
        assert graph.has_tuple(
            user_ref(RECIPIENT_EMAIL), Relation.VIEWER, document_ref(document.id)
        )

    async def test_duplicate_grant_still_writes_tuple(self, coordinator, access_grant_repo, graph):
        access_grant_repo.save.return_value = False
        document = make_document(make_user().id)
        grant = make_grant(document.id, make_user(RECIPIENT_EMAIL).id)

        created = await coordinator.record_share_acceptance(grant, RECIPIENT_EMAIL)

        assert created is False
        assert len(graph.tuples) == 1

    async def test_repeated_grant_is_harmless(self, coordinator, graph):
        document = make_document(make_user().id)

        first = await coordinator.grant_access(RECIPIENT_EMAIL, document.id)
        second = await coordinator.grant_access(RECIPIENT_EMAIL, document.id)

        assert first is True
        assert second is True
        assert len(graph.tuples) == 1


@pytest.mark.unit
class TestRemoval:
    async def test_remove_access_deletes_row_and_tuple(self, coordinator, graph):
        document = make_document(make_user().id)
        await coordinator.grant_access(RECIPIENT_EMAIL, document.id)

        removed = await coordinator.remove_access(
            document.id, make_user(RECIPIENT_EMAIL).id, RECIPIENT_EMAIL
        )

        assert removed is True
        assert graph.tuples == frozenset()

    async def test_repeated_revoke_clears_stale_tuple(
        self, coordinator, access_grant_repo, graph
    ):
        access_grant_repo.delete.return_value = False
        document = make_document(make_user().id)
        await coordinator.grant_access(RECIPIENT_EMAIL, document.id)

        removed = await coordinator.remove_access(
            document.id, make_user(RECIPIENT_EMAIL).id, RECIPIENT_EMAIL
        )

        assert removed is False
        assert graph.tuples == frozenset()

    async def test_remove_document_clears_all_tuples(self, coordinator, document_repo, graph):
        document_repo.delete.return_value = True
        document = make_document(make_user().id)
        await coordinator.register_document(document, OWNER_EMAIL, is_new=True)
        await coordinator.grant_access(RECIPIENT_EMAIL, document.id)

        deleted = await coordinator.remove_document(document, OWNER_EMAIL, [RECIPIENT_EMAIL])

        assert deleted is True
        assert graph.tuples == frozenset()

    async def test_revoke_failure_is_swallowed(
        self, document_repo, access_grant_repo, enabled_mode, event_bus, mock_logger, failing_graph
    ):
        coordinator = AccessCoordinator(
            document_repo=document_repo,
            access_grant_repo=access_grant_repo,
            graph=failing_graph,
            mode=enabled_mode,
            event_bus=event_bus,
            logger=mock_logger,
        )
        document = make_document(make_user().id)

        removed = await coordinator.remove_access(
            document.id, make_user(RECIPIENT_EMAIL).id, RECIPIENT_EMAIL
        )

        assert removed is True
        assert mock_logger.error.call_args.args[0] == "relationship_tuple_delete_failed"


@pytest.mark.unit
class TestDegradedMode:
    async def test_no_graph_calls(
        self, document_repo, access_grant_repo, degraded_mode, event_bus, mock_logger
    ):
        graph = AsyncMock()
        coordinator = AccessCoordinator(
            document_repo=document_repo,
            access_grant_repo=access_grant_repo,
            graph=graph,
            mode=degraded_mode,
            event_bus=event_bus,
            logger=mock_logger,
        )
        document = make_document(make_user().id)

        await coordinator.register_document(document, OWNER_EMAIL, is_new=True)
        granted = await coordinator.grant_access(RECIPIENT_EMAIL, document.id)
        revoked = await coordinator.revoke_access(RECIPIENT_EMAIL, document.id)

        document_repo.save.assert_awaited_once()
        assert granted is False
        assert revoked is False
        graph.write.assert_not_awaited()
        graph.delete.assert_not_awaited()
        mock_logger.error.assert_not_called()

    async def test_missing_client_behaves_as_degraded(
        self, document_repo, access_grant_repo, enabled_mode, event_bus
    ):
        coordinator = AccessCoordinator(
            document_repo=document_repo,
            access_grant_repo=access_grant_repo,
            graph=None,
            mode=enabled_mode,
            event_bus=event_bus,
            logger=MagicMock(),
        )

        assert await coordinator.grant_access(RECIPIENT_EMAIL, make_user().id) is False
