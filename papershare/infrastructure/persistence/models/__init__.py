"""Database models for the persistence layer.

These are infrastructure concerns and are not imported by the domain layer.

Models Organization:
    - user.py: User accounts (provisioned on first login)
    - document.py: Uploaded PDFs, one per (owner, work)
    - access_grant.py: Viewer grants created by accepted share requests
    - share_request.py: Pending share requests
    - linked_researcher.py: ORCID researchers a user follows

Note:
    Domain entities (dataclasses) live in papershare/domain/entities/ and are
    mapped to these models by the repository layer.
"""

from papershare.infrastructure.persistence.models.access_grant import AccessGrant
from papershare.infrastructure.persistence.models.document import Document
from papershare.infrastructure.persistence.models.linked_researcher import (
    LinkedResearcher,
)
from papershare.infrastructure.persistence.models.share_request import ShareRequest
from papershare.infrastructure.persistence.models.user import User

__all__ = [
    "AccessGrant",
    "Document",
    "LinkedResearcher",
    "ShareRequest",
    "User",
]
