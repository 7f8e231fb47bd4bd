"""ShareRequest domain entity.

A pending offer from a document owner to another user. There is no status
column: a row exists only while the request is pending. Accepting turns it
into an AccessGrant; rejecting just deletes it.
"""

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID


@dataclass
class ShareRequest:
    """Pending share request.

    Attributes:
        id: Unique request identifier.
        document_id: Document being offered.
        from_user_id: Owner who sent the request.
        to_user_id: Recipient.
        created_at: Timestamp when the request was sent.
    """

    id: UUID
    document_id: UUID
    from_user_id: UUID
    to_user_id: UUID
    created_at: datetime

    def is_addressed_to(self, user_id: UUID) -> bool:
        """Check the recipient."""
        return self.to_user_id == user_id
