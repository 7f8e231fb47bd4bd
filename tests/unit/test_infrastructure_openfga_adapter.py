"""Unit tests for OpenFGAAdapter.

The SDK client is replaced by an AsyncMock; tests cover request shapes,
fail-closed checks, error wrapping on writes, and batch fan-out.
"""

import asyncio
from types import SimpleNamespace
from unittest.mock import AsyncMock, MagicMock

import pytest
from openfga_sdk.client.models import (
    ClientWriteRequestOnDuplicateWrites,
    ClientWriteRequestOnMissingDeletes,
)

from papershare.core.config import Settings
from papershare.domain.enums import Relation
from papershare.domain.errors import InvalidRelationError, RelationshipGraphError
from papershare.infrastructure.authorization import openfga_adapter
from papershare.infrastructure.authorization.openfga_adapter import (
    OpenFGAAdapter,
    build_openfga_client,
)

ADA = "user:ada@example.org"
DOC_A = "doc:0192f5e4-7c3a-7b1e-9a2d-00000000000a"
DOC_B = "doc:0192f5e4-7c3a-7b1e-9a2d-00000000000b"


@pytest.fixture
def client() -> AsyncMock:
    return AsyncMock()


@pytest.fixture
def adapter(client, mock_logger) -> OpenFGAAdapter:
    return OpenFGAAdapter(client=client, logger=mock_logger)


@pytest.mark.unit
class TestCheck:
    async def test_allowed(self, adapter, client):
        client.check.return_value = SimpleNamespace(allowed=True)

        assert await adapter.check(ADA, Relation.VIEWER, DOC_A) is True

        request = client.check.await_args.args[0]
        assert (request.user, request.relation, request.object) == (ADA, "viewer", DOC_A)

    async def test_denied(self, adapter, client):
        client.check.return_value = SimpleNamespace(allowed=False)

        assert await adapter.check(ADA, Relation.VIEWER, DOC_A) is False

    async def test_error_fails_closed_and_logs(self, adapter, client, mock_logger):
        client.check.side_effect = ConnectionError("service down")

        assert await adapter.check(ADA, Relation.VIEWER, DOC_A) is False

        mock_logger.error.assert_called_once()
        assert mock_logger.error.call_args.args[0] == "relationship_check_error"
        assert mock_logger.error.call_args.kwargs["object"] == DOC_A


@pytest.mark.unit
class TestWriteDelete:
    async def test_write_sends_single_tuple(self, adapter, client):
        await adapter.write(ADA, Relation.OWNER, DOC_A)

        request = client.write.await_args.args[0]
        assert len(request.writes) == 1
        assert request.writes[0].relation == "owner"
        assert not request.deletes

    async def test_delete_sends_single_tuple(self, adapter, client):
        await adapter.delete(ADA, Relation.VIEWER, DOC_A)

        request = client.write.await_args.args[0]
        assert request.deletes[0].object == DOC_A
        assert not request.writes

    async def test_existing_tuple_is_not_a_conflict(self, adapter, client):
        await adapter.write(ADA, Relation.VIEWER, DOC_A)

        conflict = client.write.await_args.kwargs["options"]["conflict"]
        assert conflict.on_duplicate_writes == ClientWriteRequestOnDuplicateWrites.IGNORE

    async def test_missing_tuple_delete_is_not_a_conflict(self, adapter, client):
        await adapter.delete(ADA, Relation.VIEWER, DOC_A)

        conflict = client.write.await_args.kwargs["options"]["conflict"]
        assert conflict.on_missing_deletes == ClientWriteRequestOnMissingDeletes.IGNORE

    async def test_write_failure_raises_graph_error(self, adapter, client):
        client.write.side_effect = TimeoutError("timed out")

        with pytest.raises(RelationshipGraphError) as exc_info:
            await adapter.write(ADA, Relation.VIEWER, DOC_A)

        assert exc_info.value.operation == "write"
        assert exc_info.value.tuple_key == f"{ADA}#viewer@{DOC_A}"

    async def test_computed_relation_never_reaches_service(self, adapter, client):
        with pytest.raises(InvalidRelationError):
            await adapter.write(ADA, Relation.CAN_VIEW, DOC_A)

        client.write.assert_not_awaited()


@pytest.mark.unit
class TestBatchCheck:
    async def test_partial_failure_denies_only_failed_item(self, adapter, client):
        async def check(request, *args, **kwargs):
            if request.object == DOC_B:
                raise ConnectionError("flaky")
            return SimpleNamespace(allowed=True)

        client.check.side_effect = check

        decisions = await adapter.batch_check(ADA, [DOC_A, DOC_B])

        assert decisions == {DOC_A: True, DOC_B: False}

    async def test_checks_are_in_flight_together(self, adapter, client):
        in_flight = 0
        peak = 0

        async def check(request, *args, **kwargs):
            nonlocal in_flight, peak
            in_flight += 1
            peak = max(peak, in_flight)
            await asyncio.sleep(0.01)
            in_flight -= 1
            return SimpleNamespace(allowed=True)

        client.check.side_effect = check
        docs = [f"doc:0192f5e4-7c3a-7b1e-9a2d-00000000000{n}" for n in range(5)]

        decisions = await adapter.batch_check(ADA, docs)

        assert peak == len(docs)
        assert all(decisions.values())

    async def test_empty_batch_makes_no_calls(self, adapter, client):
        assert await adapter.batch_check(ADA, []) == {}
        client.check.assert_not_awaited()

    async def test_duplicates_checked_once(self, adapter, client):
        client.check.return_value = SimpleNamespace(allowed=True)

        await adapter.batch_check(ADA, [DOC_A, DOC_A])

        assert client.check.await_count == 1


@pytest.mark.unit
class TestListObjects:
    async def test_returns_objects(self, adapter, client):
        client.list_objects.return_value = SimpleNamespace(objects=[DOC_A])

        assert await adapter.list_objects(ADA, Relation.VIEWER, "doc") == {DOC_A}

    async def test_error_returns_empty(self, adapter, client):
        client.list_objects.side_effect = ConnectionError("down")

        assert await adapter.list_objects(ADA, Relation.VIEWER, "doc") == set()


@pytest.mark.unit
async def test_close_closes_client(adapter, client):
    await adapter.close()

    client.close.assert_awaited_once()


@pytest.mark.unit
class TestBuildClient:
    def test_binds_store_and_model(self, monkeypatch):
        configuration_cls = MagicMock()
        client_cls = MagicMock()
        monkeypatch.setattr(openfga_adapter, "ClientConfiguration", configuration_cls)
        monkeypatch.setattr(openfga_adapter, "OpenFgaClient", client_cls)
        settings = Settings(
            fga_api_url="http://localhost:8080",
            fga_store_id="01HSTORE",
            fga_model_id="01HMODEL",
        )

        client = build_openfga_client(settings)

        kwargs = configuration_cls.call_args.kwargs
        assert kwargs["api_url"] == "http://localhost:8080"
        assert kwargs["store_id"] == "01HSTORE"
        assert kwargs["authorization_model_id"] == "01HMODEL"
        assert kwargs["credentials"] is None
        assert client is client_cls.return_value

    def test_client_credentials_when_client_id_set(self, monkeypatch):
        configuration_cls = MagicMock()
        monkeypatch.setattr(openfga_adapter, "ClientConfiguration", configuration_cls)
        monkeypatch.setattr(openfga_adapter, "OpenFgaClient", MagicMock())
        settings = Settings(
            fga_api_url="https://api.us1.fga.dev",
            fga_store_id="01HSTORE",
            fga_client_id="client",
            fga_client_secret="secret",
            fga_api_token_issuer="auth.fga.dev",
            fga_api_audience="https://api.us1.fga.dev/",
        )

        build_openfga_client(settings)

        credentials = configuration_cls.call_args.kwargs["credentials"]
        assert credentials.method == "client_credentials"
