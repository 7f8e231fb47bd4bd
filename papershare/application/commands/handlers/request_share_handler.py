"""RequestShare command handler.

Rules (checked in order, all before any relationship graph involvement):
1. Document must exist and be owned by the requester (else not found)
2. Requester cannot share with themselves
3. Target user must exist
4. Target must not already hold access
5. No pending request for (document, target) may exist (else conflict)
"""

from datetime import UTC, datetime

from uuid_extensions import uuid7

from papershare.application.commands.sharing_commands import RequestShare
from papershare.application.errors import (
    ApplicationError,
    conflict,
    execution_failed,
    invalid,
    not_found,
)
from papershare.core.enums import ErrorCode
from papershare.core.result import Result, Success
from papershare.domain.entities import ShareRequest
from papershare.domain.events import ShareRequested
from papershare.domain.protocols import (
    AccessGrantRepository,
    DocumentRepository,
    EventBusProtocol,
    ShareRequestRepository,
    UserRepository,
)


class RequestShareError:
    """RequestShare-specific errors."""

    TARGET_EMAIL_REQUIRED = "Target email is required"
    DOCUMENT_NOT_FOUND = "Document not found or access denied"
    USER_NOT_FOUND = "User not found"
    CANNOT_SHARE_WITH_SELF = "Cannot share with yourself"
    TARGET_NOT_FOUND = "Target user not found"
    ALREADY_HAS_ACCESS = "Target user already has access"
    REQUEST_EXISTS = "Share request already exists"
    DATABASE_ERROR = "Failed to create share request"


class RequestShareHandler:
    """Handler for RequestShare command."""

    def __init__(
        self,
        user_repo: UserRepository,
        document_repo: DocumentRepository,
        share_request_repo: ShareRequestRepository,
        access_grant_repo: AccessGrantRepository,
        event_bus: EventBusProtocol,
    ) -> None:
        self._user_repo = user_repo
        self._document_repo = document_repo
        self._share_request_repo = share_request_repo
        self._access_grant_repo = access_grant_repo
        self._event_bus = event_bus

    async def handle(self, cmd: RequestShare) -> Result[ShareRequest, ApplicationError]:
        """Handle RequestShare command.

        Returns:
            Success(ShareRequest): Pending request created.
            Failure(ApplicationError): Any rule above violated, or database error.
        """
        target_email = cmd.target_email.strip()
        if not target_email:
            return invalid(
                RequestShareError.TARGET_EMAIL_REQUIRED,
                code=ErrorCode.INVALID_EMAIL,
                field="target_email",
            )

        document = await self._document_repo.find_by_id(cmd.document_id)
        if document is None or not document.is_owned_by(cmd.user_id):
            return not_found(
                ErrorCode.DOCUMENT_NOT_FOUND,
                "Document",
                cmd.document_id,
                RequestShareError.DOCUMENT_NOT_FOUND,
            )

        owner = await self._user_repo.find_by_id(cmd.user_id)
        if owner is None:
            return not_found(
                ErrorCode.USER_NOT_FOUND, "User", cmd.user_id, RequestShareError.USER_NOT_FOUND
            )
        if owner.email.lower() == target_email.lower():
            return invalid(
                RequestShareError.CANNOT_SHARE_WITH_SELF,
                code=ErrorCode.CANNOT_SHARE_WITH_SELF,
                field="target_email",
            )

        target = await self._user_repo.find_by_email(target_email)
        if target is None:
            return not_found(
                ErrorCode.USER_NOT_FOUND, "User", target_email, RequestShareError.TARGET_NOT_FOUND
            )

        if await self._access_grant_repo.exists(document.id, target.id):
            return conflict(
                ErrorCode.RESOURCE_CONFLICT,
                "AccessGrant",
                RequestShareError.ALREADY_HAS_ACCESS,
                conflicting_field="document_id,user_id",
            )

        if await self._share_request_repo.find_pending(document.id, target.id) is not None:
            return conflict(
                ErrorCode.SHARE_REQUEST_ALREADY_EXISTS,
                "ShareRequest",
                RequestShareError.REQUEST_EXISTS,
                conflicting_field="document_id,to_user_id",
            )

        request = ShareRequest(
            id=uuid7(),
            document_id=document.id,
            from_user_id=owner.id,
            to_user_id=target.id,
            created_at=datetime.now(UTC),
        )
        try:
            await self._share_request_repo.save(request)
        except Exception as e:
            # Unique (document, recipient) pair lost a race with another request
            if await self._share_request_repo.find_pending(document.id, target.id) is not None:
                return conflict(
                    ErrorCode.SHARE_REQUEST_ALREADY_EXISTS,
                    "ShareRequest",
                    RequestShareError.REQUEST_EXISTS,
                    conflicting_field="document_id,to_user_id",
                )
            return execution_failed(RequestShareError.DATABASE_ERROR, e)

        await self._event_bus.publish(
            ShareRequested(
                share_request_id=request.id,
                document_id=document.id,
                from_user_id=owner.id,
                to_user_id=target.id,
            )
        )
        return Success(value=request)
