"""Auth resource handlers.

Handlers:
    initialize_user - Create the local account for a verified identity
    get_me          - Current user's profile

Identity comes from the bearer token (verified against the identity
provider's JWKS); the local user row is created on first sign-in.
"""

from fastapi import Depends, Request
from fastapi.responses import JSONResponse

from papershare.application.commands import InitializeUser
from papershare.application.commands.handlers.initialize_user_handler import (
    InitializeUserHandler,
)
from papershare.application.queries import GetCurrentUser
from papershare.application.queries.handlers.get_current_user_handler import (
    GetCurrentUserHandler,
)
from papershare.core.container import (
    get_get_current_user_handler,
    get_initialize_user_handler,
)
from papershare.core.result import Failure
from papershare.presentation.api.middleware import get_trace_id
from papershare.presentation.routers.api.middleware import (
    AuthenticatedUser,
    CurrentIdentity,
)
from papershare.presentation.routers.api.v1.errors import ErrorResponseBuilder
from papershare.schemas import UserInitResponse, UserResponse


async def initialize_user(
    request: Request,
    identity: CurrentIdentity,
    handler: InitializeUserHandler = Depends(get_initialize_user_handler),
) -> UserInitResponse | JSONResponse:
    """Initialize the local account for the signed-in identity.

    POST /api/v1/auth/init → 200 OK

    Idempotent: repeated calls return the existing user with
    ``is_new_user=False``.
    """
    result = await handler.handle(
        InitializeUser(email=identity.email, auth_subject=identity.subject)
    )

    if isinstance(result, Failure):
        return ErrorResponseBuilder.from_application_error(
            error=result.error,
            request=request,
            trace_id=get_trace_id() or "",
        )

    return UserInitResponse.from_dto(result.value)


async def get_me(
    request: Request,
    current_user: AuthenticatedUser,
    handler: GetCurrentUserHandler = Depends(get_get_current_user_handler),
) -> UserResponse | JSONResponse:
    """Get the authenticated user's profile.

    GET /api/v1/auth/me → 200 OK
    """
    result = await handler.handle(GetCurrentUser(user_id=current_user.user_id))

    if isinstance(result, Failure):
        return ErrorResponseBuilder.from_application_error(
            error=result.error,
            request=request,
            trace_id=get_trace_id() or "",
        )

    return UserResponse.from_entity(result.value)
