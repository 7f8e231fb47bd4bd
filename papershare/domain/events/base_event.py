"""Base domain event class.

Domain events record "things that happened" and are named in past tense
(DocumentUploaded, ShareRequestAccepted). They are published after the
relational change has been committed.

Architecture:
    - Frozen dataclass (immutable after creation)
    - Auto-generated event_id for tracking
    - occurred_at timestamp (UTC) for ordering
"""

from dataclasses import dataclass, field
from datetime import UTC, datetime
from uuid import UUID, uuid4


@dataclass(frozen=True, kw_only=True, slots=True)
class DomainEvent:
    """Base class for all domain events.

    Attributes:
        event_id: Unique identifier for this event instance.
        occurred_at: Timestamp when the event occurred (UTC).

    Example:
        >>> @dataclass(frozen=True, kw_only=True, slots=True)
        ... class DocumentDeleted(DomainEvent):
        ...     document_id: UUID
        >>> event = DocumentDeleted(document_id=uuid7())
        >>> isinstance(event.event_id, UUID)
        True
    """

    event_id: UUID = field(default_factory=uuid4)
    occurred_at: datetime = field(default_factory=lambda: datetime.now(UTC))
