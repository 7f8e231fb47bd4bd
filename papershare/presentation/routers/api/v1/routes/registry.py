"""API Route Registry - single source of truth for all routes.

ROUTE_REGISTRY lists every API endpoint. It is used to generate FastAPI
routes, auth dependencies, and OpenAPI metadata at application startup.

Usage:
    from papershare.presentation.routers.api.v1.routes.registry import ROUTE_REGISTRY
    from papershare.presentation.routers.api.v1.routes.generator import (
        register_routes_from_registry,
    )

    router = APIRouter(prefix="/api/v1")
    register_routes_from_registry(router, ROUTE_REGISTRY)
"""

from papershare.presentation.routers.api.v1.auth import get_me, initialize_user
from papershare.presentation.routers.api.v1.documents import (
    delete_document,
    download_document,
    get_document_status,
    list_documents,
    request_share,
    revoke_access,
    upload_document,
)
from papershare.presentation.routers.api.v1.researchers import (
    link_researcher,
    list_researchers,
    unlink_researcher,
)
from papershare.presentation.routers.api.v1.routes.metadata import (
    AuthLevel,
    AuthPolicy,
    ErrorSpec,
    HTTPMethod,
    IdempotencyLevel,
    RouteMetadata,
)
from papershare.presentation.routers.api.v1.share_requests import (
    accept_share_request,
    list_share_requests,
    reject_share_request,
)
from papershare.presentation.routers.api.v1.suggestions import (
    list_suggestion_candidates,
)
from papershare.schemas import (
    DocumentListResponse,
    DocumentStatusResponse,
    DocumentUploadResponse,
    MessageResponse,
    ResearcherListResponse,
    ResearcherResponse,
    ShareRequestAcceptResponse,
    ShareRequestCreateResponse,
    ShareRequestListResponse,
    SuggestionCandidatesResponse,
    UserInitResponse,
    UserResponse,
)

_AUTHENTICATED = AuthPolicy(level=AuthLevel.AUTHENTICATED)
_UNAUTHORIZED = ErrorSpec(status=401, description="Missing or invalid bearer token")

ROUTE_REGISTRY: list[RouteMetadata] = [
    # =========================================================================
    # Auth
    # =========================================================================
    RouteMetadata(
        method=HTTPMethod.POST,
        path="/auth/init",
        handler=initialize_user,
        resource="auth",
        tags=["Auth"],
        summary="Initialize user",
        description="Create the local account for the signed-in identity (idempotent).",
        operation_id="initialize_user",
        response_model=UserInitResponse,
        status_code=200,
        errors=[
            _UNAUTHORIZED,
            ErrorSpec(status=409, description="Email bound to a different identity"),
        ],
        idempotency=IdempotencyLevel.IDEMPOTENT,
        auth_policy=AuthPolicy(
            level=AuthLevel.IDENTIFIED,
            rationale="Creates the local user, so it cannot require one",
        ),
    ),
    RouteMetadata(
        method=HTTPMethod.GET,
        path="/auth/me",
        handler=get_me,
        resource="auth",
        tags=["Auth"],
        summary="Get current user",
        operation_id="get_me",
        response_model=UserResponse,
        errors=[_UNAUTHORIZED],
        idempotency=IdempotencyLevel.SAFE,
        auth_policy=_AUTHENTICATED,
    ),
    # =========================================================================
    # Documents
    # =========================================================================
    RouteMetadata(
        method=HTTPMethod.GET,
        path="/documents/status",
        handler=get_document_status,
        resource="documents",
        tags=["Documents"],
        summary="Document status by work",
        description="Readable documents for a comma-separated list of work ids.",
        operation_id="get_document_status",
        response_model=DocumentStatusResponse,
        errors=[_UNAUTHORIZED],
        idempotency=IdempotencyLevel.SAFE,
        auth_policy=_AUTHENTICATED,
    ),
    RouteMetadata(
        method=HTTPMethod.POST,
        path="/documents",
        handler=upload_document,
        resource="documents",
        tags=["Documents"],
        summary="Upload document",
        description="Upload a PDF for a work; replaces the user's earlier upload.",
        operation_id="upload_document",
        response_model=DocumentUploadResponse,
        status_code=201,
        errors=[
            ErrorSpec(status=400, description="Not a PDF"),
            _UNAUTHORIZED,
            ErrorSpec(status=413, description="File too large"),
        ],
        idempotency=IdempotencyLevel.NON_IDEMPOTENT,
        auth_policy=_AUTHENTICATED,
    ),
    RouteMetadata(
        method=HTTPMethod.GET,
        path="/documents",
        handler=list_documents,
        resource="documents",
        tags=["Documents"],
        summary="List documents",
        description="Documents the user owns or has been granted.",
        operation_id="list_documents",
        response_model=DocumentListResponse,
        errors=[_UNAUTHORIZED],
        idempotency=IdempotencyLevel.SAFE,
        auth_policy=_AUTHENTICATED,
    ),
    RouteMetadata(
        method=HTTPMethod.GET,
        path="/documents/{document_id}",
        handler=download_document,
        resource="documents",
        tags=["Documents"],
        summary="Download document",
        operation_id="download_document",
        response_model=None,
        errors=[
            _UNAUTHORIZED,
            ErrorSpec(status=403, description="Not allowed to read this document"),
            ErrorSpec(status=404, description="Document not found"),
        ],
        idempotency=IdempotencyLevel.SAFE,
        auth_policy=_AUTHENTICATED,
    ),
    RouteMetadata(
        method=HTTPMethod.DELETE,
        path="/documents/{document_id}",
        handler=delete_document,
        resource="documents",
        tags=["Documents"],
        summary="Delete document",
        operation_id="delete_document",
        response_model=None,
        status_code=204,
        errors=[
            _UNAUTHORIZED,
            ErrorSpec(status=404, description="Document not found"),
        ],
        idempotency=IdempotencyLevel.IDEMPOTENT,
        auth_policy=_AUTHENTICATED,
    ),
    RouteMetadata(
        method=HTTPMethod.POST,
        path="/documents/{document_id}/share-requests",
        handler=request_share,
        resource="documents",
        tags=["Documents", "Sharing"],
        summary="Share document",
        description="Offer an owned document to another user; access follows acceptance.",
        operation_id="request_share",
        response_model=ShareRequestCreateResponse,
        status_code=201,
        errors=[
            ErrorSpec(status=400, description="Cannot share with yourself"),
            _UNAUTHORIZED,
            ErrorSpec(status=404, description="Document or recipient not found"),
            ErrorSpec(status=409, description="Already shared or pending"),
        ],
        idempotency=IdempotencyLevel.NON_IDEMPOTENT,
        auth_policy=_AUTHENTICATED,
    ),
    RouteMetadata(
        method=HTTPMethod.DELETE,
        path="/documents/{document_id}/grants/{user_id}",
        handler=revoke_access,
        resource="documents",
        tags=["Documents", "Sharing"],
        summary="Revoke access",
        operation_id="revoke_access",
        response_model=None,
        status_code=204,
        errors=[
            _UNAUTHORIZED,
            ErrorSpec(status=404, description="Document or grant not found"),
        ],
        idempotency=IdempotencyLevel.IDEMPOTENT,
        auth_policy=_AUTHENTICATED,
    ),
    # =========================================================================
    # Share requests
    # =========================================================================
    RouteMetadata(
        method=HTTPMethod.GET,
        path="/share-requests",
        handler=list_share_requests,
        resource="share_requests",
        tags=["Sharing"],
        summary="List share requests",
        operation_id="list_share_requests",
        response_model=ShareRequestListResponse,
        errors=[_UNAUTHORIZED],
        idempotency=IdempotencyLevel.SAFE,
        auth_policy=_AUTHENTICATED,
    ),
    RouteMetadata(
        method=HTTPMethod.POST,
        path="/share-requests/{request_id}/accept",
        handler=accept_share_request,
        resource="share_requests",
        tags=["Sharing"],
        summary="Accept share request",
        operation_id="accept_share_request",
        response_model=ShareRequestAcceptResponse,
        errors=[
            _UNAUTHORIZED,
            ErrorSpec(status=404, description="Share request not found"),
        ],
        idempotency=IdempotencyLevel.NON_IDEMPOTENT,
        auth_policy=_AUTHENTICATED,
    ),
    RouteMetadata(
        method=HTTPMethod.POST,
        path="/share-requests/{request_id}/reject",
        handler=reject_share_request,
        resource="share_requests",
        tags=["Sharing"],
        summary="Reject share request",
        operation_id="reject_share_request",
        response_model=MessageResponse,
        errors=[_UNAUTHORIZED, ErrorSpec(status=404, description="Share request not found")],
        idempotency=IdempotencyLevel.NON_IDEMPOTENT,
        auth_policy=_AUTHENTICATED,
    ),
    # =========================================================================
    # Suggestions
    # =========================================================================
    RouteMetadata(
        method=HTTPMethod.GET,
        path="/suggestions/candidates",
        handler=list_suggestion_candidates,
        resource="suggestions",
        tags=["Suggestions"],
        summary="List suggestion candidates",
        description="Documents for linked researchers, filtered by read access.",
        operation_id="list_suggestion_candidates",
        response_model=SuggestionCandidatesResponse,
        errors=[_UNAUTHORIZED],
        idempotency=IdempotencyLevel.SAFE,
        auth_policy=_AUTHENTICATED,
    ),
    # =========================================================================
    # Researchers
    # =========================================================================
    RouteMetadata(
        method=HTTPMethod.GET,
        path="/researchers",
        handler=list_researchers,
        resource="researchers",
        tags=["Researchers"],
        summary="List linked researchers",
        operation_id="list_researchers",
        response_model=ResearcherListResponse,
        errors=[_UNAUTHORIZED],
        idempotency=IdempotencyLevel.SAFE,
        auth_policy=_AUTHENTICATED,
    ),
    RouteMetadata(
        method=HTTPMethod.POST,
        path="/researchers",
        handler=link_researcher,
        resource="researchers",
        tags=["Researchers"],
        summary="Link researcher",
        operation_id="link_researcher",
        response_model=ResearcherResponse,
        status_code=201,
        errors=[
            ErrorSpec(status=400, description="Invalid ORCID iD or name"),
            _UNAUTHORIZED,
            ErrorSpec(status=409, description="Researcher already linked"),
        ],
        idempotency=IdempotencyLevel.NON_IDEMPOTENT,
        auth_policy=_AUTHENTICATED,
    ),
    RouteMetadata(
        method=HTTPMethod.DELETE,
        path="/researchers/{orcid_id}",
        handler=unlink_researcher,
        resource="researchers",
        tags=["Researchers"],
        summary="Unlink researcher",
        operation_id="unlink_researcher",
        response_model=None,
        status_code=204,
        errors=[_UNAUTHORIZED, ErrorSpec(status=404, description="Researcher not linked")],
        idempotency=IdempotencyLevel.IDEMPOTENT,
        auth_policy=_AUTHENTICATED,
    ),
]
