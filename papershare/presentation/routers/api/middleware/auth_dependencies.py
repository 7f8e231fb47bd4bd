"""Bearer token authentication dependencies.

Two levels of identity are available to routes:

- ``get_current_identity``: token verified, user may not exist locally yet
  (only the first-login initialization endpoint uses this)
- ``get_current_user``: token verified AND the user row exists

Usage:
    @router.get("/documents")
    async def list_documents(current_user: AuthenticatedUser):
        return {"user_id": str(current_user.user_id)}
"""

from dataclasses import dataclass
from typing import Annotated
from uuid import UUID

from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from papershare.core.container import get_token_verifier, get_user_repository
from papershare.core.result import Failure, Success
from papershare.domain.errors import AuthenticationError
from papershare.domain.protocols import TokenVerificationProtocol, UserRepository
from papershare.domain.value_objects import VerifiedIdentity


# Missing credentials are rejected below with a 401 and WWW-Authenticate
bearer_scheme = HTTPBearer(auto_error=False)


@dataclass(frozen=True, slots=True, kw_only=True)
class CurrentUser:
    """Authenticated, initialized user.

    Attributes:
        user_id: Local user id.
        email: Email (relationship graph subject key).
        subject: Identity provider subject.
    """

    user_id: UUID
    email: str
    subject: str


def _unauthorized(detail: str) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail=detail,
        headers={"WWW-Authenticate": "Bearer"},
    )


async def get_current_identity(
    credentials: Annotated[HTTPAuthorizationCredentials | None, Depends(bearer_scheme)],
    verifier: Annotated[TokenVerificationProtocol | None, Depends(get_token_verifier)],
) -> VerifiedIdentity:
    """Verify the bearer token and return the caller's identity.

    Raises:
        HTTPException 401: Token missing, invalid, expired, or no identity
            provider configured.
    """
    if credentials is None:
        raise _unauthorized("Not authenticated")
    if verifier is None:
        raise _unauthorized(AuthenticationError.VERIFIER_NOT_CONFIGURED)

    result = await verifier.verify(credentials.credentials)

    match result:
        case Success(value=identity):
            return identity
        case Failure(error=error):
            raise _unauthorized(error)


async def get_current_user(
    identity: Annotated[VerifiedIdentity, Depends(get_current_identity)],
    user_repo: Annotated[UserRepository, Depends(get_user_repository)],
) -> CurrentUser:
    """Resolve the verified identity to a local user.

    Raises:
        HTTPException 401: The user has not been initialized yet
            (``POST /api/v1/auth/init`` must be called after first login).
    """
    user = await user_repo.find_by_email(identity.email)
    if user is None:
        raise _unauthorized("User not initialized")
    return CurrentUser(user_id=user.id, email=user.email, subject=identity.subject)


# Type aliases for route signatures
CurrentIdentity = Annotated[VerifiedIdentity, Depends(get_current_identity)]
AuthenticatedUser = Annotated[CurrentUser, Depends(get_current_user)]
