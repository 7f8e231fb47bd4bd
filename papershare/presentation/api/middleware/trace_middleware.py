"""Request trace id middleware.

Every request gets a trace id: the caller's ``X-Trace-Id`` when it looks
sane, otherwise a fresh UUID. The id is echoed in the response header,
copied into RFC 9457 error bodies, and bound to structlog's context so
authorization log lines (``authorization_filter_applied``,
``relationship_tuple_write_failed``) can be tied back to the request.
"""

from __future__ import annotations

from contextvars import ContextVar
from typing import Awaitable, Callable
from uuid import uuid4

import structlog
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import Response

TRACE_HEADER = "X-Trace-Id"
MAX_TRACE_ID_LENGTH = 128

trace_id_context: ContextVar[str | None] = ContextVar("trace_id", default=None)


def get_trace_id() -> str | None:
    """Trace id of the request being served, or None outside a request."""
    return trace_id_context.get()


def _incoming_trace_id(request: Request) -> str | None:
    value = request.headers.get(TRACE_HEADER, "").strip()
    if not value or len(value) > MAX_TRACE_ID_LENGTH or not value.isprintable():
        return None
    return value


class TraceMiddleware(BaseHTTPMiddleware):
    """Attach a trace id to the request, its logs and its response."""

    async def dispatch(
        self, request: Request, call_next: Callable[[Request], Awaitable[Response]]
    ) -> Response:
        trace_id = _incoming_trace_id(request) or str(uuid4())
        request.state.trace_id = trace_id
        token = trace_id_context.set(trace_id)
        try:
            with structlog.contextvars.bound_contextvars(
                trace_id=trace_id,
                method=request.method,
                path=request.url.path,
            ):
                response = await call_next(request)
            response.headers[TRACE_HEADER] = trace_id
            return response
        finally:
            trace_id_context.reset(token)
