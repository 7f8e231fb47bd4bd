"""Domain errors raised across protocol boundaries, plus error constants."""

from papershare.domain.errors.authentication_error import AuthenticationError
from papershare.domain.errors.relationship_graph_error import (
    InvalidRelationError,
    RelationshipGraphError,
)
from papershare.domain.errors.storage_error import FileTooLargeError

__all__ = [
    "AuthenticationError",
    "FileTooLargeError",
    "InvalidRelationError",
    "RelationshipGraphError",
]
