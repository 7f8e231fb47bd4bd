"""InitializeUser command handler.

Runs after every successful login. Looks the user up by email and creates
the account on first sight, binding it to the identity subject.

Architecture:
- Application layer handler (orchestrates business logic)
- Imports only from domain layer (entities, protocols)
- Uses Result types for error handling
"""

from datetime import UTC, datetime

from uuid_extensions import uuid7

from papershare.application.commands.user_commands import InitializeUser
from papershare.application.dtos import InitializeUserResult
from papershare.application.errors import ApplicationError, execution_failed, invalid
from papershare.core.enums import ErrorCode
from papershare.core.result import Result, Success
from papershare.domain.entities import User
from papershare.domain.protocols import UserRepository


class InitializeUserError:
    """InitializeUser-specific errors."""

    EMAIL_REQUIRED = "Verified email claim is required"
    DATABASE_ERROR = "Failed to initialize user"


class InitializeUserHandler:
    """Handler for InitializeUser command.

    Dependencies (injected via constructor):
        - UserRepository: For lookup and persistence
    """

    def __init__(self, user_repo: UserRepository) -> None:
        self._user_repo = user_repo

    async def handle(self, cmd: InitializeUser) -> Result[InitializeUserResult, ApplicationError]:
        """Find or create the user.

        Args:
            cmd: InitializeUser command with verified identity claims.

        Returns:
            Success(InitializeUserResult): Existing or newly created user.
            Failure(ApplicationError): Missing email or database error.
        """
        email = cmd.email.strip()
        if not email:
            return invalid(
                InitializeUserError.EMAIL_REQUIRED, code=ErrorCode.INVALID_EMAIL, field="email"
            )

        existing = await self._user_repo.find_by_email(email)
        if existing is not None:
            return Success(value=InitializeUserResult(user=existing, is_new_user=False))

        now = datetime.now(UTC)
        user = User(
            id=uuid7(),
            email=email,
            auth_subject=cmd.auth_subject,
            created_at=now,
            updated_at=now,
        )
        try:
            await self._user_repo.save(user)
        except Exception as e:
            # Concurrent first login may have created the row already
            raced = await self._user_repo.find_by_email(email)
            if raced is not None:
                return Success(value=InitializeUserResult(user=raced, is_new_user=False))
            return execution_failed(InitializeUserError.DATABASE_ERROR, e)

        return Success(value=InitializeUserResult(user=user, is_new_user=True))
