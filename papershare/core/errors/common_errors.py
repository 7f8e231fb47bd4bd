"""Common error classes used across all layers.

Error Types:
- ValidationError: Input validation failures
- NotFoundError: Resource not found (or not visible to the caller)
- ConflictError: Uniqueness conflicts (duplicate share request, linked researcher)
- AuthorizationError: Caller lacks the required relation on a resource

Usage:
    return Failure(error=NotFoundError(
        code=ErrorCode.DOCUMENT_NOT_FOUND,
        message="Document not found",
        resource_type="Document",
        resource_id=str(document_id),
    ))
"""

from dataclasses import dataclass

from papershare.core.errors.domain_error import DomainError


@dataclass(frozen=True, slots=True, kw_only=True)
class ValidationError(DomainError):
    """Input validation failure.

    Attributes:
        field: Field name that failed validation.
    """

    field: str | None = None


@dataclass(frozen=True, slots=True, kw_only=True)
class NotFoundError(DomainError):
    """Resource not found.

    Attributes:
        resource_type: Type of resource (User, Document, ShareRequest).
        resource_id: Identifier of the missing resource.
    """

    resource_type: str
    resource_id: str


@dataclass(frozen=True, slots=True, kw_only=True)
class ConflictError(DomainError):
    """Resource conflict (duplicate row for a unique pair).

    Attributes:
        resource_type: Type of resource in conflict.
        conflicting_field: Field (or field pair) that conflicts.
    """

    resource_type: str
    conflicting_field: str | None = None


@dataclass(frozen=True, slots=True, kw_only=True)
class AuthorizationError(DomainError):
    """Authorization failure.

    Attributes:
        required_relation: Relation the caller needed (owner, viewer).
    """

    required_relation: str | None = None
