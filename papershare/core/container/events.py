"""Event bus dependency factory.

Application-scoped singleton for domain event publishing. Subscriptions are
wired here, once, when the bus is first created.
"""

from functools import lru_cache
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from papershare.domain.protocols.event_bus_protocol import EventBusProtocol


@lru_cache()
def get_event_bus() -> "EventBusProtocol":
    """Get event bus singleton (app-scoped).

    Every domain event is subscribed to the LoggingEventHandler, which
    records the operational trail (uploads, shares, revocations and
    relationship-graph divergences).

    Returns:
        Event bus implementing EventBusProtocol.
    """
    from papershare.core.container.infrastructure import get_logger
    from papershare.domain.events import (
        AccessRevoked,
        DocumentDeleted,
        DocumentUploaded,
        RelationshipSyncFailed,
        ShareRequestAccepted,
        ShareRequested,
        ShareRequestRejected,
    )
    from papershare.infrastructure.events.handlers.logging_event_handler import (
        LoggingEventHandler,
    )
    from papershare.infrastructure.events.in_memory_event_bus import InMemoryEventBus

    logger = get_logger()
    event_bus = InMemoryEventBus(logger=logger)
    logging_handler = LoggingEventHandler(logger=logger)

    event_bus.subscribe(DocumentUploaded, logging_handler.handle_document_uploaded)
    event_bus.subscribe(DocumentDeleted, logging_handler.handle_document_deleted)
    event_bus.subscribe(ShareRequested, logging_handler.handle_share_requested)
    event_bus.subscribe(ShareRequestAccepted, logging_handler.handle_share_request_accepted)
    event_bus.subscribe(ShareRequestRejected, logging_handler.handle_share_request_rejected)
    event_bus.subscribe(AccessRevoked, logging_handler.handle_access_revoked)
    event_bus.subscribe(RelationshipSyncFailed, logging_handler.handle_relationship_sync_failed)

    return event_bus
