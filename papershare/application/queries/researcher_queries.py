"""Linked researcher queries (CQRS read operations)."""

from dataclasses import dataclass
from uuid import UUID


@dataclass(frozen=True, kw_only=True)
class ListLinkedResearchers:
    """List researchers linked to the user."""

    user_id: UUID
