"""Sharing workflow events.

Lifecycle: ShareRequested -> ShareRequestAccepted | ShareRequestRejected.
AccessRevoked closes a grant created by acceptance.

Handlers:
- LoggingEventHandler: all events
"""

from dataclasses import dataclass
from uuid import UUID

from papershare.domain.events.base_event import DomainEvent


@dataclass(frozen=True, kw_only=True)
class ShareRequested(DomainEvent):
    """Owner offered a document to another user.

    Attributes:
        share_request_id: Created request.
        document_id: Offered document.
        from_user_id: Owner.
        to_user_id: Recipient.
    """

    share_request_id: UUID
    document_id: UUID
    from_user_id: UUID
    to_user_id: UUID


@dataclass(frozen=True, kw_only=True)
class ShareRequestAccepted(DomainEvent):
    """Recipient accepted; access granted and the request removed.

    Attributes:
        share_request_id: Consumed request.
        document_id: Shared document.
        user_id: Recipient who now holds access.
        researcher_linked: True if the document's researcher was linked.
    """

    share_request_id: UUID
    document_id: UUID
    user_id: UUID
    researcher_linked: bool = False


@dataclass(frozen=True, kw_only=True)
class ShareRequestRejected(DomainEvent):
    """Recipient rejected; the request was deleted and nothing else changed."""

    share_request_id: UUID
    document_id: UUID
    user_id: UUID


@dataclass(frozen=True, kw_only=True)
class AccessRevoked(DomainEvent):
    """Owner removed a grantee's access.

    Attributes:
        document_id: Document.
        user_id: Former grantee.
        revoked_by: Owner who revoked.
    """

    document_id: UUID
    user_id: UUID
    revoked_by: UUID
