"""OpenFGA implementation of RelationshipGraphProtocol.

Talks to an OpenFGA-compatible service through ``openfga-sdk``:
- ``check`` / ``list_objects`` fail closed (errors logged, never raised)
- ``write`` / ``delete`` raise RelationshipGraphError so the coordinator can
  record the divergence
- ``batch_check`` fans out individual checks concurrently

Client credentials (client id/secret exchanged at the token issuer for a
bearer token) are handled by the SDK transport, including refresh.

Following hexagonal architecture:
- Infrastructure implements domain protocol (RelationshipGraphProtocol)
- Application services don't know about OpenFGA
- InMemoryRelationshipGraph is the drop-in for tests
"""

import asyncio
from typing import TYPE_CHECKING

from openfga_sdk.client import ClientConfiguration, OpenFgaClient
from openfga_sdk.client.models import (
    ClientCheckRequest,
    ClientListObjectsRequest,
    ClientTuple,
    ClientWriteRequest,
    ClientWriteRequestOnDuplicateWrites,
    ClientWriteRequestOnMissingDeletes,
    ConflictOptions,
)
from openfga_sdk.credentials import CredentialConfiguration, Credentials

from papershare.domain.authorization_model import DOCUMENT_MODEL, AuthorizationModel
from papershare.domain.enums import READ_RELATION, Relation
from papershare.domain.errors import InvalidRelationError, RelationshipGraphError

if TYPE_CHECKING:
    from papershare.core.config import Settings
    from papershare.domain.protocols.logger_protocol import LoggerProtocol

# Re-writing an existing tuple or deleting a missing one is a no-op, as it is
# for the in-memory graph; the service would otherwise reject the request.
IDEMPOTENT_WRITES = {
    "conflict": ConflictOptions(
        on_duplicate_writes=ClientWriteRequestOnDuplicateWrites.IGNORE,
        on_missing_deletes=ClientWriteRequestOnMissingDeletes.IGNORE,
    )
}


def build_openfga_client(settings: "Settings") -> OpenFgaClient:
    """Create an SDK client from application settings.

    Uses client-credentials authentication when a client id is configured,
    otherwise talks to the service unauthenticated (local OpenFGA).

    Args:
        settings: Application settings with ``fga_*`` fields populated.

    Returns:
        OpenFgaClient: Client bound to the configured store and model.
    """
    credentials = None
    if settings.fga_client_id:
        credentials = Credentials(
            method="client_credentials",
            configuration=CredentialConfiguration(
                api_issuer=settings.fga_api_token_issuer,
                api_audience=settings.fga_api_audience,
                client_id=settings.fga_client_id,
                client_secret=settings.fga_client_secret,
            ),
        )

    configuration = ClientConfiguration(
        api_url=settings.fga_api_url,
        store_id=settings.fga_store_id,
        authorization_model_id=settings.fga_model_id,
        credentials=credentials,
    )
    return OpenFgaClient(configuration)


class OpenFGAAdapter:
    """OpenFGA-backed relationship graph client.

    Attributes:
        _client: openfga-sdk client (owns the HTTP session).
        _logger: Structured logger.
        _model: Authorization model used to validate tuples before writing.
    """

    def __init__(
        self,
        client: OpenFgaClient,
        logger: "LoggerProtocol",
        model: AuthorizationModel = DOCUMENT_MODEL,
    ) -> None:
        """Initialize adapter with dependencies.

        Args:
            client: Configured OpenFgaClient.
            logger: Structured logger.
            model: Authorization model (defaults to the document model).
        """
        self._client = client
        self._logger = logger
        self._model = model

    async def check(self, user: str, relation: Relation, obj: str) -> bool:
        """Check a relation; any error denies.

        Args:
            user: Subject reference (``user:<email>``).
            relation: Relation to evaluate.
            obj: Object reference (``doc:<id>``).

        Returns:
            bool: True only if the service answered ``allowed``.
        """
        try:
            response = await self._client.check(
                ClientCheckRequest(user=user, relation=relation.value, object=obj)
            )
        except Exception as e:
            # Fail closed on errors
            self._logger.error(
                "relationship_check_error",
                error=e,
                user=user,
                relation=relation.value,
                object=obj,
            )
            return False

        allowed = bool(response.allowed)
        self._logger.debug(
            "relationship_check",
            user=user,
            relation=relation.value,
            object=obj,
            allowed=allowed,
        )
        return allowed

    async def write(self, user: str, relation: Relation, obj: str) -> None:
        """Write a tuple; an already-stored tuple is accepted silently.

        Raises:
            InvalidRelationError: If the model does not allow the tuple.
            RelationshipGraphError: If the service call fails.
        """
        key = self._validate("write", user, relation, obj)
        try:
            await self._client.write(
                ClientWriteRequest(
                    writes=[ClientTuple(user=user, relation=relation.value, object=obj)]
                ),
                options=IDEMPOTENT_WRITES,
            )
        except Exception as e:
            raise RelationshipGraphError(
                str(e), operation="write", tuple_key=key
            ) from e

    async def delete(self, user: str, relation: Relation, obj: str) -> None:
        """Delete a tuple; a missing tuple is accepted silently.

        Raises:
            InvalidRelationError: If the model does not allow the tuple.
            RelationshipGraphError: If the service call fails.
        """
        key = self._validate("delete", user, relation, obj)
        try:
            await self._client.write(
                ClientWriteRequest(
                    deletes=[ClientTuple(user=user, relation=relation.value, object=obj)]
                ),
                options=IDEMPOTENT_WRITES,
            )
        except Exception as e:
            raise RelationshipGraphError(
                str(e), operation="delete", tuple_key=key
            ) from e

    async def batch_check(
        self, user: str, objects: list[str], relation: Relation = READ_RELATION
    ) -> dict[str, bool]:
        """Check many objects concurrently.

        All checks are dispatched together; a failing check only denies its
        own object.

        Returns:
            dict[str, bool]: Decision per distinct object reference.
        """
        unique = list(dict.fromkeys(objects))
        if not unique:
            return {}

        results = await asyncio.gather(
            *(self.check(user, relation, obj) for obj in unique),
            return_exceptions=True,
        )
        return {
            obj: result is True for obj, result in zip(unique, results, strict=True)
        }

    async def list_objects(
        self, user: str, relation: Relation, object_type: str
    ) -> set[str]:
        """List objects the subject holds a relation on; errors yield nothing."""
        try:
            response = await self._client.list_objects(
                ClientListObjectsRequest(
                    user=user, relation=relation.value, type=object_type
                )
            )
        except Exception as e:
            self._logger.error(
                "relationship_list_objects_error",
                error=e,
                user=user,
                relation=relation.value,
                object_type=object_type,
            )
            return set()
        return set(response.objects or [])

    async def close(self) -> None:
        """Close the SDK HTTP session."""
        await self._client.close()

    def _validate(self, operation: str, user: str, relation: Relation, obj: str) -> str:
        key = f"{user}#{relation.value}@{obj}"
        if not relation.is_assignable or not self._model.accepts_subject(relation, user):
            raise InvalidRelationError(
                f"Tuple not allowed by authorization model: {key}",
                operation=operation,
                tuple_key=key,
            )
        return key
