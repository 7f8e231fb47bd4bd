"""Core error types (returned inside Result, never raised)."""

from papershare.core.errors.common_errors import (
    AuthorizationError,
    ConflictError,
    NotFoundError,
    ValidationError,
)
from papershare.core.errors.domain_error import DomainError

__all__ = [
    "AuthorizationError",
    "ConflictError",
    "DomainError",
    "NotFoundError",
    "ValidationError",
]
