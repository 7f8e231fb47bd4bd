"""Unit tests for AuthorizationFilter (batch read authorization)."""

import asyncio
from types import SimpleNamespace
from unittest.mock import AsyncMock

import pytest
from uuid_extensions import uuid7

from papershare.application.services.authorization_filter import AuthorizationFilter
from papershare.domain.enums import Relation
from papershare.domain.value_objects import document_ref, user_ref
from papershare.infrastructure.authorization.openfga_adapter import OpenFGAAdapter

EMAIL = "ada@example.org"


@pytest.fixture
def authz_filter(graph, enabled_mode, mock_logger) -> AuthorizationFilter:
    return AuthorizationFilter(graph=graph, mode=enabled_mode, logger=mock_logger)


@pytest.mark.unit
class TestFilterAuthorized:
    async def test_keeps_only_viewable_in_candidate_order(self, authz_filter, graph):
        d1, d2, d3 = uuid7(), uuid7(), uuid7()
        await graph.write(user_ref(EMAIL), Relation.VIEWER, document_ref(d3))
        await graph.write(user_ref(EMAIL), Relation.VIEWER, document_ref(d1))

        result = await authz_filter.filter_authorized(EMAIL, [d1, d2, d3])

        assert result.authorized_ids == [d1, d3]
        assert result.total_candidates == 3
        assert result.authorized_count == 2

    async def test_owner_only_tuple_is_not_enough(self, authz_filter, graph):
        doc = uuid7()
        await graph.write(user_ref(EMAIL), Relation.OWNER, document_ref(doc))

        result = await authz_filter.filter_authorized(EMAIL, [doc])

        assert result.authorized_ids == []

    async def test_empty_candidates_skip_graph(self, enabled_mode, mock_logger):
        graph = AsyncMock()
        authz_filter = AuthorizationFilter(graph=graph, mode=enabled_mode, logger=mock_logger)

        result = await authz_filter.filter_authorized(EMAIL, [])

        assert result.authorized_ids == []
        assert result.total_candidates == 0
        graph.batch_check.assert_not_awaited()

    async def test_failed_item_excluded_others_kept(self, enabled_mode, mock_logger):
        d1, d2 = uuid7(), uuid7()
        graph = AsyncMock()
        # A failed check comes back from the adapter as False
        graph.batch_check.return_value = {document_ref(d1): True, document_ref(d2): False}
        authz_filter = AuthorizationFilter(graph=graph, mode=enabled_mode, logger=mock_logger)

        result = await authz_filter.filter_authorized(EMAIL, [d1, d2])

        assert result.authorized_ids == [d1]
        graph.batch_check.assert_awaited_once_with(
            user_ref(EMAIL), [document_ref(d1), document_ref(d2)], Relation.VIEWER
        )

    async def test_candidates_checked_concurrently(self, enabled_mode, mock_logger):
        in_flight = 0
        peak = 0

        async def check(request, *args, **kwargs):
            nonlocal in_flight, peak
            in_flight += 1
            peak = max(peak, in_flight)
            await asyncio.sleep(0.01)
            in_flight -= 1
            return SimpleNamespace(allowed=True)

        client = AsyncMock()
        client.check.side_effect = check
        authz_filter = AuthorizationFilter(
            graph=OpenFGAAdapter(client=client, logger=mock_logger),
            mode=enabled_mode,
            logger=mock_logger,
        )
        ids = [uuid7() for _ in range(4)]

        result = await authz_filter.filter_authorized(EMAIL, ids)

        assert result.authorized_ids == ids
        assert peak == len(ids)

    async def test_logs_summary(self, authz_filter, mock_logger):
        await authz_filter.filter_authorized(EMAIL, [uuid7(), uuid7()])

        mock_logger.info.assert_called_once()
        assert mock_logger.info.call_args.kwargs["summary"] == "0 of 2 documents authorized"

    async def test_degraded_mode_passes_through(self, degraded_mode, mock_logger):
        graph = AsyncMock()
        authz_filter = AuthorizationFilter(graph=graph, mode=degraded_mode, logger=mock_logger)
        ids = [uuid7(), uuid7()]

        result = await authz_filter.filter_authorized(EMAIL, ids)

        assert result.authorized_ids == ids
        graph.batch_check.assert_not_awaited()


@pytest.mark.unit
class TestSingleChecks:
    async def test_is_authorized(self, authz_filter, graph):
        doc = uuid7()
        await graph.write(user_ref(EMAIL), Relation.VIEWER, document_ref(doc))

        assert await authz_filter.is_authorized(EMAIL, doc) is True
        assert await authz_filter.is_authorized("eve@example.org", doc) is False

    async def test_is_authorized_defers_in_degraded_mode(self, degraded_mode, mock_logger):
        authz_filter = AuthorizationFilter(graph=None, mode=degraded_mode, logger=mock_logger)

        assert await authz_filter.is_authorized(EMAIL, uuid7()) is True

