"""User domain entity.

A researcher account, created on first successful authentication with the
external identity provider. The email address is the lookup key used by the
application and by the relationship graph (``user:<email>``); the identity
subject is fixed at creation.
"""

from dataclasses import dataclass
from datetime import datetime
from typing import TYPE_CHECKING
from uuid import UUID

if TYPE_CHECKING:
    from papershare.domain.entities.document import Document


@dataclass
class User:
    """Platform user.

    Attributes:
        id: Unique user identifier.
        email: Email address (lookup is case-insensitive).
        auth_subject: Identity provider subject (``sub`` claim). Unique and
            never changed after creation.
        created_at: Timestamp when user was created.
        updated_at: Timestamp when user was last updated.

    Example:
        >>> user = User(
        ...     id=uuid7(),
        ...     email="ada@example.org",
        ...     auth_subject="auth0|abc123",
        ...     created_at=datetime.now(UTC),
        ...     updated_at=datetime.now(UTC),
        ... )
        >>> user.owns(document)
        False
    """

    id: UUID
    email: str
    auth_subject: str
    created_at: datetime
    updated_at: datetime

    def owns(self, document: "Document") -> bool:
        """Check if this user uploaded the document."""
        return document.owner_id == self.id
