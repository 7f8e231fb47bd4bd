"""Sharing commands (CQRS write operations).

Workflow:
    RequestShare (owner) -> AcceptShareRequest | RejectShareRequest (recipient)
    RevokeAccess (owner) removes an accepted grant.
"""

from dataclasses import dataclass
from uuid import UUID


@dataclass(frozen=True, kw_only=True)
class RequestShare:
    """Offer an owned document to another registered user.

    Attributes:
        user_id: Owner sending the request.
        document_id: Document to share.
        target_email: Recipient's email.
    """

    user_id: UUID
    document_id: UUID
    target_email: str


@dataclass(frozen=True, kw_only=True)
class AcceptShareRequest:
    """Accept a pending request addressed to the user."""

    user_id: UUID
    request_id: UUID


@dataclass(frozen=True, kw_only=True)
class RejectShareRequest:
    """Reject a pending request addressed to the user."""

    user_id: UUID
    request_id: UUID


@dataclass(frozen=True, kw_only=True)
class RevokeAccess:
    """Remove a grantee's access to an owned document.

    Attributes:
        user_id: Owner.
        document_id: Shared document.
        grantee_id: User losing access.
    """

    user_id: UUID
    document_id: UUID
    grantee_id: UUID
