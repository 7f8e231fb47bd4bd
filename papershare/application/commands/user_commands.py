"""User commands (CQRS write operations).

Commands represent user intent to change system state.
All commands are immutable (frozen=True) and use keyword-only arguments.
"""

from dataclasses import dataclass


@dataclass(frozen=True, kw_only=True)
class InitializeUser:
    """Ensure an account exists for a verified identity.

    Called after every login; creates the user on first sight.

    Attributes:
        email: Verified email claim.
        auth_subject: Identity provider subject (``sub``).

    Example:
        >>> command = InitializeUser(email="ada@example.org", auth_subject="auth0|abc")
        >>> result = await handler.handle(command)
    """

    email: str
    auth_subject: str
