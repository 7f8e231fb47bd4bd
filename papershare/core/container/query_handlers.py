"""Query handler dependency factories.

Request-scoped handler instances for read operations. Read flows that
return documents go through the AuthorizationFilter.
"""

from typing import TYPE_CHECKING

from fastapi import Depends

from papershare.core.container.authorization import get_authorization_filter
from papershare.core.container.infrastructure import get_file_storage
from papershare.core.container.repositories import (
    get_access_grant_repository,
    get_document_repository,
    get_linked_researcher_repository,
    get_share_request_repository,
    get_user_repository,
)

if TYPE_CHECKING:
    from papershare.application.queries.handlers.document_query_handlers import (
        GetDocumentHandler,
        ListAccessibleDocumentsHandler,
        ListDocumentStatusHandler,
    )
    from papershare.application.queries.handlers.get_current_user_handler import (
        GetCurrentUserHandler,
    )
    from papershare.application.queries.handlers.list_linked_researchers_handler import (
        ListLinkedResearchersHandler,
    )
    from papershare.application.queries.handlers.list_share_requests_handler import (
        ListShareRequestsHandler,
    )
    from papershare.application.queries.handlers.list_suggestion_candidates_handler import (
        ListSuggestionCandidatesHandler,
    )
    from papershare.application.services.authorization_filter import (
        AuthorizationFilter,
    )
    from papershare.infrastructure.persistence.repositories import (
        AccessGrantRepository,
        DocumentRepository,
        LinkedResearcherRepository,
        ShareRequestRepository,
        UserRepository,
    )


async def get_get_current_user_handler(
    user_repo: "UserRepository" = Depends(get_user_repository),
) -> "GetCurrentUserHandler":
    from papershare.application.queries.handlers.get_current_user_handler import (
        GetCurrentUserHandler,
    )

    return GetCurrentUserHandler(user_repo=user_repo)


async def get_get_document_handler(
    document_repo: "DocumentRepository" = Depends(get_document_repository),
    access_grant_repo: "AccessGrantRepository" = Depends(get_access_grant_repository),
    authorization_filter: "AuthorizationFilter" = Depends(get_authorization_filter),
) -> "GetDocumentHandler":
    """Get GetDocument query handler (request-scoped)."""
    from papershare.application.queries.handlers.document_query_handlers import (
        GetDocumentHandler,
    )

    return GetDocumentHandler(
        document_repo=document_repo,
        access_grant_repo=access_grant_repo,
        authorization_filter=authorization_filter,
        storage=get_file_storage(),
    )


async def get_list_document_status_handler(
    document_repo: "DocumentRepository" = Depends(get_document_repository),
) -> "ListDocumentStatusHandler":
    from papershare.application.queries.handlers.document_query_handlers import (
        ListDocumentStatusHandler,
    )

    return ListDocumentStatusHandler(document_repo=document_repo)


async def get_list_accessible_documents_handler(
    document_repo: "DocumentRepository" = Depends(get_document_repository),
    authorization_filter: "AuthorizationFilter" = Depends(get_authorization_filter),
) -> "ListAccessibleDocumentsHandler":
    from papershare.application.queries.handlers.document_query_handlers import (
        ListAccessibleDocumentsHandler,
    )

    return ListAccessibleDocumentsHandler(
        document_repo=document_repo,
        authorization_filter=authorization_filter,
    )


async def get_list_suggestion_candidates_handler(
    document_repo: "DocumentRepository" = Depends(get_document_repository),
    authorization_filter: "AuthorizationFilter" = Depends(get_authorization_filter),
) -> "ListSuggestionCandidatesHandler":
    """Get ListSuggestionCandidates query handler (request-scoped)."""
    from papershare.application.queries.handlers.list_suggestion_candidates_handler import (
        ListSuggestionCandidatesHandler,
    )

    return ListSuggestionCandidatesHandler(
        document_repo=document_repo,
        authorization_filter=authorization_filter,
    )


async def get_list_share_requests_handler(
    share_request_repo: "ShareRequestRepository" = Depends(get_share_request_repository),
    document_repo: "DocumentRepository" = Depends(get_document_repository),
    user_repo: "UserRepository" = Depends(get_user_repository),
) -> "ListShareRequestsHandler":
    from papershare.application.queries.handlers.list_share_requests_handler import (
        ListShareRequestsHandler,
    )

    return ListShareRequestsHandler(
        share_request_repo=share_request_repo,
        document_repo=document_repo,
        user_repo=user_repo,
    )


async def get_list_linked_researchers_handler(
    linked_researcher_repo: "LinkedResearcherRepository" = Depends(
        get_linked_researcher_repository
    ),
) -> "ListLinkedResearchersHandler":
    from papershare.application.queries.handlers.list_linked_researchers_handler import (
        ListLinkedResearchersHandler,
    )

    return ListLinkedResearchersHandler(linked_researcher_repo=linked_researcher_repo)
