"""Relationship graph synchronization events.

The relational store is authoritative and tuples are a mirror. When a tuple
write or delete fails after the relational write committed, the coordinator
publishes RelationshipSyncFailed so the divergence is visible and can be
reconciled out of band.

Handlers:
- LoggingEventHandler: log at WARNING level
"""

from dataclasses import dataclass

from papershare.domain.events.base_event import DomainEvent


@dataclass(frozen=True, kw_only=True)
class RelationshipSyncFailed(DomainEvent):
    """Tuple mirror diverged from the relational store.

    Attributes:
        operation: "write" or "delete".
        user: Subject reference (``user:<email>``).
        relation: Relation name.
        object: Object reference (``doc:<id>``).
        reason: Error description from the graph client.
    """

    operation: str
    user: str
    relation: str
    object: str
    reason: str
