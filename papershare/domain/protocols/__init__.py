"""Domain protocols (ports) package.

Protocol definitions the domain and application layers depend on.
Infrastructure adapters implement these protocols without inheritance.

Re-exports are ONLY for protocols defined in this package.
"""

# Service protocols
from papershare.domain.protocols.event_bus_protocol import EventBusProtocol, EventHandler
from papershare.domain.protocols.file_storage_protocol import FileStorageProtocol
from papershare.domain.protocols.logger_protocol import LoggerProtocol
from papershare.domain.protocols.relationship_graph_protocol import (
    RelationshipGraphProtocol,
)
from papershare.domain.protocols.token_verification_protocol import (
    TokenVerificationProtocol,
)

# Repository protocols
from papershare.domain.protocols.access_grant_repository import AccessGrantRepository
from papershare.domain.protocols.document_repository import DocumentRepository
from papershare.domain.protocols.linked_researcher_repository import (
    LinkedResearcherRepository,
)
from papershare.domain.protocols.share_request_repository import ShareRequestRepository
from papershare.domain.protocols.user_repository import UserRepository

__all__ = [
    # Service protocols
    "EventBusProtocol",
    "EventHandler",
    "FileStorageProtocol",
    "LoggerProtocol",
    "RelationshipGraphProtocol",
    "TokenVerificationProtocol",
    # Repository protocols
    "AccessGrantRepository",
    "DocumentRepository",
    "LinkedResearcherRepository",
    "ShareRequestRepository",
    "UserRepository",
]
