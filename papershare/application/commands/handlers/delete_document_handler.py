"""DeleteDocument command handler.

Owner-only. Removes the row (grants and pending requests cascade), the
tuples that referenced the document, and the stored file. A document owned
by someone else is reported as not found.
"""

from papershare.application.commands.document_commands import DeleteDocument
from papershare.application.errors import ApplicationError, execution_failed, not_found
from papershare.application.services.access_coordinator import AccessCoordinator
from papershare.core.enums import ErrorCode
from papershare.core.result import Result, Success
from papershare.domain.events import DocumentDeleted
from papershare.domain.protocols import (
    AccessGrantRepository,
    DocumentRepository,
    EventBusProtocol,
    FileStorageProtocol,
    UserRepository,
)


class DeleteDocumentError:
    """DeleteDocument-specific errors."""

    DOCUMENT_NOT_FOUND = "Document not found or access denied"
    USER_NOT_FOUND = "User not found"
    DATABASE_ERROR = "Failed to delete document"


class DeleteDocumentHandler:
    """Handler for DeleteDocument command."""

    def __init__(
        self,
        user_repo: UserRepository,
        document_repo: DocumentRepository,
        access_grant_repo: AccessGrantRepository,
        storage: FileStorageProtocol,
        coordinator: AccessCoordinator,
        event_bus: EventBusProtocol,
    ) -> None:
        self._user_repo = user_repo
        self._document_repo = document_repo
        self._access_grant_repo = access_grant_repo
        self._storage = storage
        self._coordinator = coordinator
        self._event_bus = event_bus

    async def handle(self, cmd: DeleteDocument) -> Result[None, ApplicationError]:
        """Handle DeleteDocument command.

        Returns:
            Success(None): Document deleted.
            Failure(ApplicationError): Not found / not owned, or database error.
        """
        document = await self._document_repo.find_by_id(cmd.document_id)
        if document is None or not document.is_owned_by(cmd.user_id):
            return not_found(
                ErrorCode.DOCUMENT_NOT_FOUND,
                "Document",
                cmd.document_id,
                DeleteDocumentError.DOCUMENT_NOT_FOUND,
            )

        owner = await self._user_repo.find_by_id(cmd.user_id)
        if owner is None:
            return not_found(
                ErrorCode.USER_NOT_FOUND, "User", cmd.user_id, DeleteDocumentError.USER_NOT_FOUND
            )

        grants = await self._access_grant_repo.list_for_document(document.id)
        grantees = await self._user_repo.find_by_ids([grant.user_id for grant in grants])

        try:
            deleted = await self._coordinator.remove_document(
                document, owner.email, [grantee.email for grantee in grantees]
            )
        except Exception as e:
            return execution_failed(DeleteDocumentError.DATABASE_ERROR, e)

        if not deleted:
            return not_found(
                ErrorCode.DOCUMENT_NOT_FOUND,
                "Document",
                cmd.document_id,
                DeleteDocumentError.DOCUMENT_NOT_FOUND,
            )

        await self._storage.delete(document.file_name)
        await self._event_bus.publish(
            DocumentDeleted(document_id=document.id, owner_id=cmd.user_id)
        )
        return Success(value=None)
