"""Event bus adapters and handlers."""

from papershare.infrastructure.events.in_memory_event_bus import InMemoryEventBus

__all__ = ["InMemoryEventBus"]
