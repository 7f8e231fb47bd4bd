"""ShareRequestRepository protocol.

Port (interface) for hexagonal architecture. A stored request is pending by
definition; accepting or rejecting deletes it.
"""

from typing import Protocol
from uuid import UUID

from papershare.domain.entities.share_request import ShareRequest


class ShareRequestRepository(Protocol):
    """Share request repository protocol (port)."""

    async def find_by_id(self, request_id: UUID) -> ShareRequest | None:
        """Find share request by ID."""
        ...

    async def find_pending(self, document_id: UUID, to_user_id: UUID) -> ShareRequest | None:
        """Find the pending request for a (document, recipient) pair."""
        ...

    async def list_for_recipient(self, user_id: UUID) -> list[ShareRequest]:
        """List requests addressed to the user, newest first."""
        ...

    async def save(self, request: ShareRequest) -> None:
        """Insert new request.

        Raises:
            IntegrityError: If a request for the pair already exists.
        """
        ...

    async def delete(self, request_id: UUID) -> bool:
        """Delete request.

        Returns:
            bool: True if a row was deleted.
        """
        ...
