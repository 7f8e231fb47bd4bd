"""Event bus protocol (port) for domain events.

Implementations:
    - InMemoryEventBus: papershare/infrastructure/events/in_memory_event_bus.py

Usage:
    >>> event_bus = get_event_bus()
    >>> await event_bus.publish(DocumentDeleted(document_id=doc.id, owner_id=user.id))
"""

from collections.abc import Awaitable, Callable
from typing import Protocol

from papershare.domain.events.base_event import DomainEvent

# Async handler; must not assume ordering relative to other handlers.
EventHandler = Callable[[DomainEvent], Awaitable[None]]


class EventBusProtocol(Protocol):
    """Publisher-subscriber mediator for domain events.

    Key Requirements:
        1. **Fail-open**: one handler failure must NOT prevent other handlers
           from running, and must never surface to the publisher.
        2. **Type routing**: handlers receive only the exact event type they
           subscribed to.
    """

    def subscribe(self, event_type: type[DomainEvent], handler: EventHandler) -> None:
        """Register an async handler for an event type."""
        ...

    async def publish(self, event: DomainEvent) -> None:
        """Publish an event to every handler registered for its type.

        Args:
            event: Domain event instance.
        """
        ...
