"""Authorization dependency factories.

Relationship graph (OpenFGA) client lifecycle and the two services built on
it: the AccessCoordinator (dual writes) and the AuthorizationFilter (batch
read checks). The graph client is initialized at application startup and
closed at shutdown; when no store is configured it is never created and
both services run in degraded mode.
"""

from functools import lru_cache
from typing import TYPE_CHECKING

from fastapi import Depends

from papershare.core.config import get_settings
from papershare.core.container.events import get_event_bus
from papershare.core.container.infrastructure import get_logger
from papershare.core.container.repositories import (
    get_access_grant_repository,
    get_document_repository,
)

if TYPE_CHECKING:
    from papershare.application.services.access_coordinator import AccessCoordinator
    from papershare.application.services.authorization_filter import (
        AuthorizationFilter,
    )
    from papershare.application.services.authorization_mode import AuthorizationMode
    from papershare.domain.protocols.relationship_graph_protocol import (
        RelationshipGraphProtocol,
    )
    from papershare.infrastructure.persistence.repositories import (
        AccessGrantRepository,
        DocumentRepository,
    )


# Module-level state for the graph client singleton
_graph: "RelationshipGraphProtocol | None" = None


@lru_cache()
def get_authorization_mode() -> "AuthorizationMode":
    """Get the authorization mode decided from settings (app-scoped)."""
    from papershare.application.services.authorization_mode import AuthorizationMode

    return AuthorizationMode.from_settings(get_settings())


async def init_relationship_graph() -> "RelationshipGraphProtocol | None":
    """Initialize the relationship graph client at application startup.

    MUST be called during FastAPI lifespan startup.

    Returns:
        The graph client, or None in degraded mode.

    Raises:
        RuntimeError: If the client is already initialized.
    """
    global _graph

    if _graph is not None:
        raise RuntimeError("Relationship graph already initialized")

    mode = get_authorization_mode()
    if mode.is_degraded:
        return None

    from papershare.infrastructure.authorization.openfga_adapter import (
        OpenFGAAdapter,
        build_openfga_client,
    )

    settings = get_settings()
    _graph = OpenFGAAdapter(client=build_openfga_client(settings), logger=get_logger())
    get_logger().info(
        "relationship_graph_client_initialized",
        api_url=settings.fga_api_url,
        store_id=mode.store_id,
    )
    return _graph


def get_relationship_graph() -> "RelationshipGraphProtocol | None":
    """Get the relationship graph client (None in degraded mode)."""
    return _graph


async def close_relationship_graph() -> None:
    """Release the graph client's HTTP session at shutdown."""
    global _graph

    if _graph is None:
        return
    await _graph.close()
    _graph = None


# ============================================================================
# Request-Scoped Services
# ============================================================================


async def get_access_coordinator(
    document_repo: "DocumentRepository" = Depends(get_document_repository),
    access_grant_repo: "AccessGrantRepository" = Depends(get_access_grant_repository),
) -> "AccessCoordinator":
    """Get the dual-write coordinator (request-scoped)."""
    from papershare.application.services.access_coordinator import AccessCoordinator

    return AccessCoordinator(
        document_repo=document_repo,
        access_grant_repo=access_grant_repo,
        graph=get_relationship_graph(),
        mode=get_authorization_mode(),
        event_bus=get_event_bus(),
        logger=get_logger(),
    )


def get_authorization_filter() -> "AuthorizationFilter":
    """Get the batch authorization filter."""
    from papershare.application.services.authorization_filter import (
        AuthorizationFilter,
    )

    return AuthorizationFilter(
        graph=get_relationship_graph(),
        mode=get_authorization_mode(),
        logger=get_logger(),
    )
