"""Linked researcher commands (CQRS write operations)."""

from dataclasses import dataclass
from uuid import UUID


@dataclass(frozen=True, kw_only=True)
class LinkResearcher:
    """Link an ORCID researcher to the user."""

    user_id: UUID
    orcid_id: str
    researcher_name: str


@dataclass(frozen=True, kw_only=True)
class UnlinkResearcher:
    """Remove a linked researcher."""

    user_id: UUID
    orcid_id: str
