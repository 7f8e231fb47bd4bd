"""Request dependencies for API routes (authentication)."""

from papershare.presentation.routers.api.middleware.auth_dependencies import (
    AuthenticatedUser,
    CurrentIdentity,
    CurrentUser,
    get_current_identity,
    get_current_user,
)

__all__ = [
    "AuthenticatedUser",
    "CurrentIdentity",
    "CurrentUser",
    "get_current_identity",
    "get_current_user",
]
