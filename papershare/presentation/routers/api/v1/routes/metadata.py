"""Declarative description of one API route.

Entries live in ``registry.py``; ``generator.py`` turns them into FastAPI
routes. A route declares whether it needs only a verified token
(IDENTIFIED, used by first-login initialization) or an initialized user.
"""

from collections.abc import Awaitable, Callable, Sequence
from dataclasses import dataclass
from enum import Enum
from typing import Any

from pydantic import BaseModel


class HTTPMethod(str, Enum):
    """HTTP methods for API routes."""

    GET = "GET"
    POST = "POST"
    PUT = "PUT"
    PATCH = "PATCH"
    DELETE = "DELETE"


class AuthLevel(str, Enum):
    """How much of the caller must be known before the handler runs."""

    PUBLIC = "public"
    IDENTIFIED = "identified"
    AUTHENTICATED = "authenticated"


@dataclass(frozen=True, kw_only=True)
class AuthPolicy:
    """Auth level plus an optional note on why it differs from the default."""

    level: AuthLevel
    rationale: str | None = None


class IdempotencyLevel(str, Enum):
    """HTTP idempotency classification (RFC 7231 Section 4.2)."""

    SAFE = "safe"
    IDEMPOTENT = "idempotent"
    NON_IDEMPOTENT = "non_idempotent"


@dataclass(frozen=True, kw_only=True)
class ErrorSpec:
    """One documented error response of a route.

    Examples:
        >>> ErrorSpec(status=404, description="Document not found")
    """

    status: int
    description: str
    model: type[BaseModel] | None = None


@dataclass(frozen=True, kw_only=True)
class RouteMetadata:
    """Everything needed to register and document one route.

    Identity fields:
        method: HTTP method
        path: URL path relative to the version prefix
        handler: Async function that implements the endpoint

    Grouping fields:
        resource: Resource category (e.g., "documents")
        tags: OpenAPI tags

    Request/Response:
        response_model: Pydantic model for success response (None for
            204 routes and file downloads)
        status_code: Expected success status
        errors: Possible error responses for OpenAPI
    """

    # Identity
    method: HTTPMethod
    path: str
    handler: Callable[..., Awaitable[Any]]

    # Grouping
    resource: str
    tags: Sequence[str]
    version: str = "v1"

    # OpenAPI documentation
    summary: str
    description: str | None = None
    operation_id: str | None = None

    # Request/Response
    response_model: type[BaseModel] | None = None
    status_code: int = 200
    errors: list[ErrorSpec] | None = None

    # Behavior
    idempotency: IdempotencyLevel
    auth_policy: AuthPolicy

    # Deprecation
    deprecated: bool = False
