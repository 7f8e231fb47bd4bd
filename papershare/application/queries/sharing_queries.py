"""Sharing queries (CQRS read operations)."""

from dataclasses import dataclass
from uuid import UUID


@dataclass(frozen=True, kw_only=True)
class ListShareRequests:
    """List pending share requests addressed to the user."""

    user_id: UUID
