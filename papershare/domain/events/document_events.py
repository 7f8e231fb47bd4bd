"""Document lifecycle events.

Handlers:
- LoggingEventHandler: all events
"""

from dataclasses import dataclass
from uuid import UUID

from papershare.domain.events.base_event import DomainEvent


@dataclass(frozen=True, kw_only=True)
class DocumentUploaded(DomainEvent):
    """Document stored and committed (new upload or replacement).

    Attributes:
        document_id: Uploaded document.
        owner_id: Uploader.
        work_id: External work reference.
        replaced: True when an existing document was updated in place.
    """

    document_id: UUID
    owner_id: UUID
    work_id: str
    replaced: bool = False


@dataclass(frozen=True, kw_only=True)
class DocumentDeleted(DomainEvent):
    """Document row removed (grants and pending requests cascaded).

    Attributes:
        document_id: Deleted document.
        owner_id: Owner who deleted it.
    """

    document_id: UUID
    owner_id: UUID
