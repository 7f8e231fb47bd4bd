"""RevokeAccess command handler.

Owner removes a grantee. The AccessCoordinator deletes the grant row and
then the grantee's ``viewer`` tuple.
"""

from papershare.application.commands.sharing_commands import RevokeAccess
from papershare.application.errors import ApplicationError, execution_failed, not_found
from papershare.application.services.access_coordinator import AccessCoordinator
from papershare.core.enums import ErrorCode
from papershare.core.result import Result, Success
from papershare.domain.events import AccessRevoked
from papershare.domain.protocols import DocumentRepository, EventBusProtocol, UserRepository


class RevokeAccessError:
    """RevokeAccess-specific errors."""

    DOCUMENT_NOT_FOUND = "Document not found or access denied"
    GRANT_NOT_FOUND = "User does not have access to this document"
    DATABASE_ERROR = "Failed to revoke access"


class RevokeAccessHandler:
    """Handler for RevokeAccess command."""

    def __init__(
        self,
        user_repo: UserRepository,
        document_repo: DocumentRepository,
        coordinator: AccessCoordinator,
        event_bus: EventBusProtocol,
    ) -> None:
        self._user_repo = user_repo
        self._document_repo = document_repo
        self._coordinator = coordinator
        self._event_bus = event_bus

    async def handle(self, cmd: RevokeAccess) -> Result[None, ApplicationError]:
        """Handle RevokeAccess command.

        Returns:
            Success(None): Grant removed.
            Failure(ApplicationError): Document not owned, no such grant, or
                database error.
        """
        document = await self._document_repo.find_by_id(cmd.document_id)
        if document is None or not document.is_owned_by(cmd.user_id):
            return not_found(
                ErrorCode.DOCUMENT_NOT_FOUND,
                "Document",
                cmd.document_id,
                RevokeAccessError.DOCUMENT_NOT_FOUND,
            )

        grantee = await self._user_repo.find_by_id(cmd.grantee_id)
        if grantee is None:
            return not_found(
                ErrorCode.ACCESS_GRANT_NOT_FOUND,
                "AccessGrant",
                cmd.grantee_id,
                RevokeAccessError.GRANT_NOT_FOUND,
            )

        try:
            removed = await self._coordinator.remove_access(document.id, grantee.id, grantee.email)
        except Exception as e:
            return execution_failed(RevokeAccessError.DATABASE_ERROR, e)

        if not removed:
            return not_found(
                ErrorCode.ACCESS_GRANT_NOT_FOUND,
                "AccessGrant",
                cmd.grantee_id,
                RevokeAccessError.GRANT_NOT_FOUND,
            )

        await self._event_bus.publish(
            AccessRevoked(document_id=document.id, user_id=grantee.id, revoked_by=cmd.user_id)
        )
        return Success(value=None)
