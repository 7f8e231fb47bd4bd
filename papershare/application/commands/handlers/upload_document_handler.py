"""UploadDocument command handler.

Flow:
1. Verify uploader exists
2. Stream file to storage under a fresh name
3. Find existing document for (owner, work) or build a new one
4. Persist through AccessCoordinator (row first, then owner/viewer tuples)
5. Remove the replaced file (re-upload) or the orphaned new file (failure)
6. Emit DocumentUploaded

Tuple mirroring failures never fail the upload; the coordinator records
them.
"""

from datetime import UTC, datetime

from uuid_extensions import uuid7

from papershare.application.commands.document_commands import UploadDocument
from papershare.application.dtos import UploadDocumentResult
from papershare.application.errors import (
    ApplicationError,
    ApplicationErrorCode,
    execution_failed,
    invalid,
    not_found,
)
from papershare.application.services.access_coordinator import AccessCoordinator
from papershare.core.enums import ErrorCode
from papershare.core.result import Failure, Result, Success
from papershare.domain.entities import Document
from papershare.domain.errors import FileTooLargeError
from papershare.domain.events import DocumentUploaded
from papershare.domain.protocols import (
    DocumentRepository,
    EventBusProtocol,
    FileStorageProtocol,
    UserRepository,
)


PDF_MEDIA_TYPE = "application/pdf"


class UploadDocumentError:
    """UploadDocument-specific errors."""

    WORK_ID_REQUIRED = "Work ID is required"
    NOT_A_PDF = "Only PDF files are allowed"
    USER_NOT_FOUND = "User not found"
    FILE_TOO_LARGE = "File exceeds the maximum upload size"
    STORAGE_ERROR = "Failed to store file"
    DATABASE_ERROR = "Failed to save document"


class UploadDocumentHandler:
    """Handler for UploadDocument command.

    Dependencies (injected via constructor):
        - UserRepository: uploader lookup
        - DocumentRepository: (owner, work) lookup
        - FileStorageProtocol: PDF bytes
        - AccessCoordinator: row + tuple dual-write
        - EventBusProtocol: domain events
    """

    def __init__(
        self,
        user_repo: UserRepository,
        document_repo: DocumentRepository,
        storage: FileStorageProtocol,
        coordinator: AccessCoordinator,
        event_bus: EventBusProtocol,
    ) -> None:
        self._user_repo = user_repo
        self._document_repo = document_repo
        self._storage = storage
        self._coordinator = coordinator
        self._event_bus = event_bus

    async def handle(
        self, cmd: UploadDocument
    ) -> Result[UploadDocumentResult, ApplicationError]:
        """Handle UploadDocument command.

        Returns:
            Success(UploadDocumentResult): Stored document and replace flag.
            Failure(ApplicationError): Validation, size, storage or database error.
        """
        work_id = cmd.work_id.strip()
        if not work_id:
            return invalid(UploadDocumentError.WORK_ID_REQUIRED, field="work_id")
        if cmd.content_type != PDF_MEDIA_TYPE:
            return invalid(UploadDocumentError.NOT_A_PDF, field="file")

        owner = await self._user_repo.find_by_id(cmd.owner_id)
        if owner is None:
            return not_found(
                ErrorCode.USER_NOT_FOUND, "User", cmd.owner_id, UploadDocumentError.USER_NOT_FOUND
            )

        try:
            file_name = await self._storage.save(cmd.chunks)
        except FileTooLargeError as e:
            return Failure(
                error=ApplicationError(
                    code=ApplicationErrorCode.PAYLOAD_TOO_LARGE,
                    message=UploadDocumentError.FILE_TOO_LARGE,
                    details={"limit_bytes": str(e.limit_bytes)},
                )
            )
        except OSError as e:
            return execution_failed(UploadDocumentError.STORAGE_ERROR, e)

        work_title = cmd.work_title or cmd.original_name
        existing = await self._document_repo.find_by_owner_and_work(owner.id, work_id)
        previous_file: str | None = None
        if existing is not None:
            previous_file = existing.replace_file(
                file_name=file_name,
                original_name=cmd.original_name,
                work_title=work_title,
                orcid_id=cmd.orcid_id,
                researcher_name=cmd.researcher_name,
            )
            document = existing
        else:
            document = Document(
                id=uuid7(),
                owner_id=owner.id,
                work_id=work_id,
                work_title=work_title,
                file_name=file_name,
                original_name=cmd.original_name,
                uploaded_at=datetime.now(UTC),
                orcid_id=cmd.orcid_id,
                researcher_name=cmd.researcher_name,
            )

        try:
            await self._coordinator.register_document(
                document, owner.email, is_new=existing is None
            )
        except Exception as e:
            await self._storage.delete(file_name)
            return execution_failed(UploadDocumentError.DATABASE_ERROR, e)

        if previous_file is not None and previous_file != file_name:
            await self._storage.delete(previous_file)

        await self._event_bus.publish(
            DocumentUploaded(
                document_id=document.id,
                owner_id=owner.id,
                work_id=work_id,
                replaced=existing is not None,
            )
        )
        return Success(
            value=UploadDocumentResult(document=document, replaced=existing is not None)
        )
