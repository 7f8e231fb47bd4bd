"""UserRepository protocol for user persistence.

Port (interface) for hexagonal architecture.
Infrastructure layer implements this protocol.
"""

from typing import Protocol
from uuid import UUID

from papershare.domain.entities.user import User


class UserRepository(Protocol):
    """User repository protocol (port).

    This is a Protocol (not ABC) for structural typing.
    Implementations don't need to inherit from this.
    """

    async def find_by_id(self, user_id: UUID) -> User | None:
        """Find user by ID.

        Args:
            user_id: User's unique identifier.

        Returns:
            User if found, None otherwise.
        """
        ...

    async def find_by_email(self, email: str) -> User | None:
        """Find user by email address (case-insensitive).

        Args:
            email: User's email address.

        Returns:
            User if found, None otherwise.
        """
        ...

    async def find_by_ids(self, user_ids: list[UUID]) -> list[User]:
        """Load several users at once (missing ids are skipped)."""
        ...

    async def save(self, user: User) -> None:
        """Create new user in database.

        Raises:
            IntegrityError: If email or auth subject already exists.
        """
        ...
