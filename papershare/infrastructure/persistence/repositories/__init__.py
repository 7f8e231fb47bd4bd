"""SQLAlchemy repository adapters implementing the domain repository ports."""

from papershare.infrastructure.persistence.repositories.access_grant_repository import (
    AccessGrantRepository,
)
from papershare.infrastructure.persistence.repositories.document_repository import (
    DocumentRepository,
)
from papershare.infrastructure.persistence.repositories.linked_researcher_repository import (
    LinkedResearcherRepository,
)
from papershare.infrastructure.persistence.repositories.share_request_repository import (
    ShareRequestRepository,
)
from papershare.infrastructure.persistence.repositories.user_repository import (
    UserRepository,
)

__all__ = [
    "AccessGrantRepository",
    "DocumentRepository",
    "LinkedResearcherRepository",
    "ShareRequestRepository",
    "UserRepository",
]
