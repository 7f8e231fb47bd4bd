"""Container module - Centralized dependency injection.

Re-exports all factory functions from submodules:

    from papershare.core.container import get_logger, get_upload_document_handler

The container is organized into modules:
- infrastructure: Core services (database, file storage, logging)
- events: Event bus and subscriptions
- repositories: Repository factories
- authorization: Relationship graph lifecycle, coordinator, filter
- command_handlers / query_handlers: CQRS handler factories
"""

# Infrastructure services
from papershare.core.container.infrastructure import (
    get_database,
    get_db_session,
    get_file_storage,
    get_logger,
    get_token_verifier,
)

# Event bus
from papershare.core.container.events import get_event_bus

# Repositories
from papershare.core.container.repositories import (
    get_access_grant_repository,
    get_document_repository,
    get_linked_researcher_repository,
    get_share_request_repository,
    get_user_repository,
)

# Authorization
from papershare.core.container.authorization import (
    close_relationship_graph,
    get_access_coordinator,
    get_authorization_filter,
    get_authorization_mode,
    get_relationship_graph,
    init_relationship_graph,
)

# Command handlers
from papershare.core.container.command_handlers import (
    get_accept_share_request_handler,
    get_delete_document_handler,
    get_initialize_user_handler,
    get_link_researcher_handler,
    get_reject_share_request_handler,
    get_request_share_handler,
    get_revoke_access_handler,
    get_unlink_researcher_handler,
    get_upload_document_handler,
)

# Query handlers
from papershare.core.container.query_handlers import (
    get_get_current_user_handler,
    get_get_document_handler,
    get_list_accessible_documents_handler,
    get_list_document_status_handler,
    get_list_linked_researchers_handler,
    get_list_share_requests_handler,
    get_list_suggestion_candidates_handler,
)

__all__ = [
    # Infrastructure
    "get_database",
    "get_db_session",
    "get_file_storage",
    "get_logger",
    "get_token_verifier",
    # Events
    "get_event_bus",
    # Repositories
    "get_access_grant_repository",
    "get_document_repository",
    "get_linked_researcher_repository",
    "get_share_request_repository",
    "get_user_repository",
    # Authorization
    "close_relationship_graph",
    "get_access_coordinator",
    "get_authorization_filter",
    "get_authorization_mode",
    "get_relationship_graph",
    "init_relationship_graph",
    # Command handlers
    "get_accept_share_request_handler",
    "get_delete_document_handler",
    "get_initialize_user_handler",
    "get_link_researcher_handler",
    "get_reject_share_request_handler",
    "get_request_share_handler",
    "get_revoke_access_handler",
    "get_unlink_researcher_handler",
    "get_upload_document_handler",
    # Query handlers
    "get_get_current_user_handler",
    "get_get_document_handler",
    "get_list_accessible_documents_handler",
    "get_list_document_status_handler",
    "get_list_linked_researchers_handler",
    "get_list_share_requests_handler",
    "get_list_suggestion_candidates_handler",
]
