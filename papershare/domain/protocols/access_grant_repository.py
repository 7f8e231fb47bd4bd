"""AccessGrantRepository protocol.

Port (interface) for hexagonal architecture. ``save`` and ``delete`` are
invoked only by the AccessCoordinator.
"""

from typing import Protocol
from uuid import UUID

from papershare.domain.entities.access_grant import AccessGrant


class AccessGrantRepository(Protocol):
    """Access grant repository protocol (port)."""

    async def exists(self, document_id: UUID, user_id: UUID) -> bool:
        """Check whether the user holds a grant on the document."""
        ...

    async def list_for_document(self, document_id: UUID) -> list[AccessGrant]:
        """List grants on a document, oldest first."""
        ...

    async def save(self, grant: AccessGrant) -> bool:
        """Insert grant; idempotent on the (document, user) pair.

        Args:
            grant: Grant to persist.

        Returns:
            bool: True if a row was inserted, False if the pair already
            existed.
        """
        ...

    async def delete(self, document_id: UUID, user_id: UUID) -> bool:
        """Delete the grant for the pair.

        Returns:
            bool: True if a row was deleted.
        """
        ...
