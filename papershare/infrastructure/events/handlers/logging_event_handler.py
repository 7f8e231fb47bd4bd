"""Logging event handler for domain events.

Log Levels:
    - INFO: document and sharing lifecycle events
    - WARNING: RelationshipSyncFailed (relational store and tuple mirror
      disagree until reconciled)

Usage:
    >>> handler = LoggingEventHandler(logger=get_logger())
    >>> event_bus.subscribe(DocumentUploaded, handler.handle_document_uploaded)
"""

from papershare.domain.events import (
    AccessRevoked,
    DocumentDeleted,
    DocumentUploaded,
    RelationshipSyncFailed,
    ShareRequestAccepted,
    ShareRequested,
    ShareRequestRejected,
)
from papershare.domain.protocols.logger_protocol import LoggerProtocol


class LoggingEventHandler:
    """Event handler for structured logging of domain events.

    Attributes:
        _logger: Logger protocol implementation (from container).
    """

    def __init__(self, logger: LoggerProtocol) -> None:
        self._logger = logger

    # =========================================================================
    # Document Event Handlers
    # =========================================================================

    async def handle_document_uploaded(self, event: DocumentUploaded) -> None:
        self._logger.info(
            "document_uploaded",
            event_id=str(event.event_id),
            document_id=str(event.document_id),
            owner_id=str(event.owner_id),
            work_id=event.work_id,
            replaced=event.replaced,
        )

    async def handle_document_deleted(self, event: DocumentDeleted) -> None:
        self._logger.info(
            "document_deleted",
            event_id=str(event.event_id),
            document_id=str(event.document_id),
            owner_id=str(event.owner_id),
        )

    # =========================================================================
    # Sharing Event Handlers
    # =========================================================================

    async def handle_share_requested(self, event: ShareRequested) -> None:
        self._logger.info(
            "share_requested",
            event_id=str(event.event_id),
            share_request_id=str(event.share_request_id),
            document_id=str(event.document_id),
            from_user_id=str(event.from_user_id),
            to_user_id=str(event.to_user_id),
        )

    async def handle_share_request_accepted(self, event: ShareRequestAccepted) -> None:
        self._logger.info(
            "share_request_accepted",
            event_id=str(event.event_id),
            share_request_id=str(event.share_request_id),
            document_id=str(event.document_id),
            user_id=str(event.user_id),
            researcher_linked=event.researcher_linked,
        )

    async def handle_share_request_rejected(self, event: ShareRequestRejected) -> None:
        self._logger.info(
            "share_request_rejected",
            event_id=str(event.event_id),
            share_request_id=str(event.share_request_id),
            document_id=str(event.document_id),
            user_id=str(event.user_id),
        )

    async def handle_access_revoked(self, event: AccessRevoked) -> None:
        self._logger.info(
            "access_revoked",
            event_id=str(event.event_id),
            document_id=str(event.document_id),
            user_id=str(event.user_id),
            revoked_by=str(event.revoked_by),
        )

    # =========================================================================
    # Relationship Graph Event Handlers
    # =========================================================================

    async def handle_relationship_sync_failed(self, event: RelationshipSyncFailed) -> None:
        """Log a tuple mirror divergence.

        Args:
            event: RelationshipSyncFailed event with the affected tuple.
        """
        self._logger.warning(
            "relationship_sync_failed",
            event_id=str(event.event_id),
            occurred_at=event.occurred_at.isoformat(),
            operation=event.operation,
            user=event.user,
            relation=event.relation,
            object=event.object,
            reason=event.reason,
        )
