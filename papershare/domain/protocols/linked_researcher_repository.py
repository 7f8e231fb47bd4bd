"""LinkedResearcherRepository protocol."""

from typing import Protocol
from uuid import UUID

from papershare.domain.entities.linked_researcher import LinkedResearcher


class LinkedResearcherRepository(Protocol):
    """Linked researcher repository protocol (port)."""

    async def list_for_user(self, user_id: UUID) -> list[LinkedResearcher]:
        """List researchers linked to the user, oldest first."""
        ...

    async def save(self, researcher: LinkedResearcher) -> bool:
        """Insert link; idempotent on the (user, ORCID) pair.

        Returns:
            bool: True if a row was inserted, False if already linked.
        """
        ...

    async def delete(self, user_id: UUID, orcid_id: str) -> bool:
        """Remove link.

        Returns:
            bool: True if a row was deleted.
        """
        ...
