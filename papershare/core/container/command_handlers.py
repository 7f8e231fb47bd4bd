"""Command handler dependency factories.

Request-scoped handler instances for write operations:
- User initialization (first login)
- Document upload and deletion
- Share requests (create, accept, reject) and access revocation
- Linked researchers (link, unlink)
"""

from typing import TYPE_CHECKING

from fastapi import Depends

from papershare.core.container.authorization import get_access_coordinator
from papershare.core.container.events import get_event_bus
from papershare.core.container.infrastructure import get_file_storage
from papershare.core.container.repositories import (
    get_access_grant_repository,
    get_document_repository,
    get_linked_researcher_repository,
    get_share_request_repository,
    get_user_repository,
)

if TYPE_CHECKING:
    from papershare.application.commands.handlers.delete_document_handler import (
        DeleteDocumentHandler,
    )
    from papershare.application.commands.handlers.initialize_user_handler import (
        InitializeUserHandler,
    )
    from papershare.application.commands.handlers.request_share_handler import (
        RequestShareHandler,
    )
    from papershare.application.commands.handlers.researcher_handlers import (
        LinkResearcherHandler,
        UnlinkResearcherHandler,
    )
    from papershare.application.commands.handlers.respond_share_request_handlers import (
        AcceptShareRequestHandler,
        RejectShareRequestHandler,
    )
    from papershare.application.commands.handlers.revoke_access_handler import (
        RevokeAccessHandler,
    )
    from papershare.application.commands.handlers.upload_document_handler import (
        UploadDocumentHandler,
    )
    from papershare.application.services.access_coordinator import AccessCoordinator
    from papershare.infrastructure.persistence.repositories import (
        AccessGrantRepository,
        DocumentRepository,
        LinkedResearcherRepository,
        ShareRequestRepository,
        UserRepository,
    )


async def get_initialize_user_handler(
    user_repo: "UserRepository" = Depends(get_user_repository),
) -> "InitializeUserHandler":
    """Get InitializeUser command handler (request-scoped)."""
    from papershare.application.commands.handlers.initialize_user_handler import (
        InitializeUserHandler,
    )

    return InitializeUserHandler(user_repo=user_repo)


async def get_upload_document_handler(
    user_repo: "UserRepository" = Depends(get_user_repository),
    document_repo: "DocumentRepository" = Depends(get_document_repository),
    coordinator: "AccessCoordinator" = Depends(get_access_coordinator),
) -> "UploadDocumentHandler":
    """Get UploadDocument command handler (request-scoped)."""
    from papershare.application.commands.handlers.upload_document_handler import (
        UploadDocumentHandler,
    )

    return UploadDocumentHandler(
        user_repo=user_repo,
        document_repo=document_repo,
        storage=get_file_storage(),
        coordinator=coordinator,
        event_bus=get_event_bus(),
    )


async def get_delete_document_handler(
    user_repo: "UserRepository" = Depends(get_user_repository),
    document_repo: "DocumentRepository" = Depends(get_document_repository),
    access_grant_repo: "AccessGrantRepository" = Depends(get_access_grant_repository),
    coordinator: "AccessCoordinator" = Depends(get_access_coordinator),
) -> "DeleteDocumentHandler":
    """Get DeleteDocument command handler (request-scoped)."""
    from papershare.application.commands.handlers.delete_document_handler import (
        DeleteDocumentHandler,
    )

    return DeleteDocumentHandler(
        user_repo=user_repo,
        document_repo=document_repo,
        access_grant_repo=access_grant_repo,
        storage=get_file_storage(),
        coordinator=coordinator,
        event_bus=get_event_bus(),
    )


async def get_request_share_handler(
    user_repo: "UserRepository" = Depends(get_user_repository),
    document_repo: "DocumentRepository" = Depends(get_document_repository),
    share_request_repo: "ShareRequestRepository" = Depends(get_share_request_repository),
    access_grant_repo: "AccessGrantRepository" = Depends(get_access_grant_repository),
) -> "RequestShareHandler":
    """Get RequestShare command handler (request-scoped)."""
    from papershare.application.commands.handlers.request_share_handler import (
        RequestShareHandler,
    )

    return RequestShareHandler(
        user_repo=user_repo,
        document_repo=document_repo,
        share_request_repo=share_request_repo,
        access_grant_repo=access_grant_repo,
        event_bus=get_event_bus(),
    )


async def get_accept_share_request_handler(
    user_repo: "UserRepository" = Depends(get_user_repository),
    document_repo: "DocumentRepository" = Depends(get_document_repository),
    share_request_repo: "ShareRequestRepository" = Depends(get_share_request_repository),
    linked_researcher_repo: "LinkedResearcherRepository" = Depends(
        get_linked_researcher_repository
    ),
    coordinator: "AccessCoordinator" = Depends(get_access_coordinator),
) -> "AcceptShareRequestHandler":
    """Get AcceptShareRequest command handler (request-scoped)."""
    from papershare.application.commands.handlers.respond_share_request_handlers import (
        AcceptShareRequestHandler,
    )

    return AcceptShareRequestHandler(
        user_repo=user_repo,
        document_repo=document_repo,
        share_request_repo=share_request_repo,
        linked_researcher_repo=linked_researcher_repo,
        coordinator=coordinator,
        event_bus=get_event_bus(),
    )


async def get_reject_share_request_handler(
    share_request_repo: "ShareRequestRepository" = Depends(get_share_request_repository),
) -> "RejectShareRequestHandler":
    """Get RejectShareRequest command handler (request-scoped)."""
    from papershare.application.commands.handlers.respond_share_request_handlers import (
        RejectShareRequestHandler,
    )

    return RejectShareRequestHandler(
        share_request_repo=share_request_repo,
        event_bus=get_event_bus(),
    )


async def get_revoke_access_handler(
    user_repo: "UserRepository" = Depends(get_user_repository),
    document_repo: "DocumentRepository" = Depends(get_document_repository),
    coordinator: "AccessCoordinator" = Depends(get_access_coordinator),
) -> "RevokeAccessHandler":
    """Get RevokeAccess command handler (request-scoped)."""
    from papershare.application.commands.handlers.revoke_access_handler import (
        RevokeAccessHandler,
    )

    return RevokeAccessHandler(
        user_repo=user_repo,
        document_repo=document_repo,
        coordinator=coordinator,
        event_bus=get_event_bus(),
    )


async def get_link_researcher_handler(
    linked_researcher_repo: "LinkedResearcherRepository" = Depends(
        get_linked_researcher_repository
    ),
) -> "LinkResearcherHandler":
    from papershare.application.commands.handlers.researcher_handlers import (
        LinkResearcherHandler,
    )

    return LinkResearcherHandler(linked_researcher_repo=linked_researcher_repo)


async def get_unlink_researcher_handler(
    linked_researcher_repo: "LinkedResearcherRepository" = Depends(
        get_linked_researcher_repository
    ),
) -> "UnlinkResearcherHandler":
    from papershare.application.commands.handlers.researcher_handlers import (
        UnlinkResearcherHandler,
    )

    return UnlinkResearcherHandler(linked_researcher_repo=linked_researcher_repo)
