"""Share request resource handlers.

Handlers:
    list_share_requests  - Pending requests addressed to the user
    accept_share_request - Accept; grants read access
    reject_share_request - Reject; discards the request
"""

from typing import Annotated
from uuid import UUID

from fastapi import Depends, Path, Request
from fastapi.responses import JSONResponse

from papershare.application.commands import AcceptShareRequest, RejectShareRequest
from papershare.application.commands.handlers.respond_share_request_handlers import (
    AcceptShareRequestHandler,
    RejectShareRequestHandler,
)
from papershare.application.queries import ListShareRequests
from papershare.application.queries.handlers.list_share_requests_handler import (
    ListShareRequestsHandler,
)
from papershare.core.container import (
    get_accept_share_request_handler,
    get_list_share_requests_handler,
    get_reject_share_request_handler,
)
from papershare.core.result import Failure
from papershare.presentation.api.middleware import get_trace_id
from papershare.presentation.routers.api.middleware import AuthenticatedUser
from papershare.presentation.routers.api.v1.errors import ErrorResponseBuilder
from papershare.schemas import (
    MessageResponse,
    ShareRequestAcceptResponse,
    ShareRequestListResponse,
)


async def list_share_requests(
    request: Request,
    current_user: AuthenticatedUser,
    handler: ListShareRequestsHandler = Depends(get_list_share_requests_handler),
) -> ShareRequestListResponse | JSONResponse:
    """List pending share requests addressed to the user.

    GET /api/v1/share-requests → 200 OK
    """
    result = await handler.handle(ListShareRequests(user_id=current_user.user_id))

    if isinstance(result, Failure):
        return ErrorResponseBuilder.from_application_error(
            error=result.error,
            request=request,
            trace_id=get_trace_id() or "",
        )

    return ShareRequestListResponse.from_dto(result.value)


async def accept_share_request(
    request: Request,
    current_user: AuthenticatedUser,
    request_id: Annotated[UUID, Path(description="Share request UUID")],
    handler: AcceptShareRequestHandler = Depends(get_accept_share_request_handler),
) -> ShareRequestAcceptResponse | JSONResponse:
    """Accept a share request.

    POST /api/v1/share-requests/{request_id}/accept → 200 OK

    The grant and the graph tuple are written before the request is
    removed, so a failed accept can be retried.
    """
    result = await handler.handle(
        AcceptShareRequest(user_id=current_user.user_id, request_id=request_id)
    )

    if isinstance(result, Failure):
        return ErrorResponseBuilder.from_application_error(
            error=result.error,
            request=request,
            trace_id=get_trace_id() or "",
        )

    return ShareRequestAcceptResponse.from_dto(result.value)


async def reject_share_request(
    request: Request,
    current_user: AuthenticatedUser,
    request_id: Annotated[UUID, Path(description="Share request UUID")],
    handler: RejectShareRequestHandler = Depends(get_reject_share_request_handler),
) -> MessageResponse | JSONResponse:
    """Reject a share request.

    POST /api/v1/share-requests/{request_id}/reject → 200 OK
    """
    result = await handler.handle(
        RejectShareRequest(user_id=current_user.user_id, request_id=request_id)
    )

    if isinstance(result, Failure):
        return ErrorResponseBuilder.from_application_error(
            error=result.error,
            request=request,
            trace_id=get_trace_id() or "",
        )

    return MessageResponse(message="Share request rejected")
