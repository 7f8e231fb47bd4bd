"""Domain events."""

from papershare.domain.events.authorization_events import RelationshipSyncFailed
from papershare.domain.events.base_event import DomainEvent
from papershare.domain.events.document_events import DocumentDeleted, DocumentUploaded
from papershare.domain.events.sharing_events import (
    AccessRevoked,
    ShareRequestAccepted,
    ShareRequested,
    ShareRequestRejected,
)

__all__ = [
    "AccessRevoked",
    "DocumentDeleted",
    "DocumentUploaded",
    "DomainEvent",
    "RelationshipSyncFailed",
    "ShareRequestAccepted",
    "ShareRequestRejected",
    "ShareRequested",
]
