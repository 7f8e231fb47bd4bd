"""GetCurrentUser query handler."""

from papershare.application.errors import ApplicationError, not_found
from papershare.application.queries.user_queries import GetCurrentUser
from papershare.core.enums import ErrorCode
from papershare.core.result import Result, Success
from papershare.domain.entities import User
from papershare.domain.protocols import UserRepository


class GetCurrentUserHandler:
    """Handler for GetCurrentUser query."""

    def __init__(self, user_repo: UserRepository) -> None:
        self._user_repo = user_repo

    async def handle(self, query: GetCurrentUser) -> Result[User, ApplicationError]:
        user = await self._user_repo.find_by_id(query.user_id)
        if user is None:
            return not_found(ErrorCode.USER_NOT_FOUND, "User", query.user_id, "User not found")
        return Success(value=user)
