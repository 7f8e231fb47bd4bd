"""Domain entities for business logic.

Pure business logic entities with no framework dependencies.
"""

from papershare.domain.entities.access_grant import AccessGrant
from papershare.domain.entities.document import Document
from papershare.domain.entities.linked_researcher import LinkedResearcher
from papershare.domain.entities.share_request import ShareRequest
from papershare.domain.entities.user import User

__all__ = [
    "AccessGrant",
    "Document",
    "LinkedResearcher",
    "ShareRequest",
    "User",
]
