"""Process-local event bus.

Subscribers are registered per exact event class at startup and run
concurrently on publish. A failing subscriber is logged and skipped so
that, for example, a broken audit log line never undoes a share that has
already been committed.
"""

import asyncio
from collections import defaultdict

from papershare.domain.events.base_event import DomainEvent
from papershare.domain.protocols.event_bus_protocol import EventHandler
from papershare.domain.protocols.logger_protocol import LoggerProtocol


class InMemoryEventBus:
    """EventBusProtocol backed by a dict of handler lists.

    Not thread-safe; intended for one event loop per process.
    """

    def __init__(self, logger: LoggerProtocol) -> None:
        self._handlers: dict[type[DomainEvent], list[EventHandler]] = defaultdict(list)
        self._logger = logger

    def subscribe(self, event_type: type[DomainEvent], handler: EventHandler) -> None:
        self._handlers[event_type].append(handler)

    async def publish(self, event: DomainEvent) -> None:
        """Deliver ``event`` to its subscribers; never raises on their behalf."""
        event_type = type(event)
        handlers = self._handlers.get(event_type, [])
        if not handlers:
            return

        self._logger.debug(
            "event_publishing",
            event_type=event_type.__name__,
            event_id=str(event.event_id),
            handler_count=len(handlers),
        )

        results = await asyncio.gather(
            *(handler(event) for handler in handlers),
            return_exceptions=True,
        )
        for handler, result in zip(handlers, results, strict=True):
            if isinstance(result, Exception):
                self._logger.warning(
                    "event_handler_failed",
                    event_type=event_type.__name__,
                    event_id=str(event.event_id),
                    handler_name=getattr(handler, "__name__", repr(handler)),
                    error_type=type(result).__name__,
                    error_message=str(result),
                )
