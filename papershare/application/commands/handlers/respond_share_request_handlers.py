"""Share request response handlers (accept / reject).

Accept:
1. Request must exist and be addressed to the caller
2. Link the document's researcher to the caller (when ORCID and name are
   known; idempotent)
3. Grant access through AccessCoordinator (row, then ``viewer`` tuple)
4. Delete the request
5. Emit ShareRequestAccepted

Reject deletes the request and changes nothing else.
"""

from datetime import UTC, datetime
from uuid import UUID

from uuid_extensions import uuid7

from papershare.application.commands.sharing_commands import (
    AcceptShareRequest,
    RejectShareRequest,
)
from papershare.application.dtos import AcceptShareResult
from papershare.application.errors import ApplicationError, execution_failed, not_found
from papershare.application.services.access_coordinator import AccessCoordinator
from papershare.core.enums import ErrorCode
from papershare.core.result import Failure, Result, Success
from papershare.domain.entities import AccessGrant, LinkedResearcher, ShareRequest
from papershare.domain.events import ShareRequestAccepted, ShareRequestRejected
from papershare.domain.protocols import (
    DocumentRepository,
    EventBusProtocol,
    LinkedResearcherRepository,
    ShareRequestRepository,
    UserRepository,
)


class ShareResponseError:
    """Accept/reject-specific errors."""

    REQUEST_NOT_FOUND = "Share request not found"
    DOCUMENT_NOT_FOUND = "Document not found"
    USER_NOT_FOUND = "User not found"
    ACCEPT_FAILED = "Failed to accept share request"
    REJECT_FAILED = "Failed to reject share request"


def _request_not_found(request_id: UUID) -> Failure[ApplicationError]:
    return not_found(
        ErrorCode.SHARE_REQUEST_NOT_FOUND,
        "ShareRequest",
        request_id,
        ShareResponseError.REQUEST_NOT_FOUND,
    )


async def _find_addressed(
    repo: ShareRequestRepository, request_id: UUID, user_id: UUID
) -> ShareRequest | None:
    request = await repo.find_by_id(request_id)
    if request is None or not request.is_addressed_to(user_id):
        return None
    return request


class AcceptShareRequestHandler:
    """Handler for AcceptShareRequest command."""

    def __init__(
        self,
        user_repo: UserRepository,
        document_repo: DocumentRepository,
        share_request_repo: ShareRequestRepository,
        linked_researcher_repo: LinkedResearcherRepository,
        coordinator: AccessCoordinator,
        event_bus: EventBusProtocol,
    ) -> None:
        self._user_repo = user_repo
        self._document_repo = document_repo
        self._share_request_repo = share_request_repo
        self._linked_researcher_repo = linked_researcher_repo
        self._coordinator = coordinator
        self._event_bus = event_bus

    async def handle(
        self, cmd: AcceptShareRequest
    ) -> Result[AcceptShareResult, ApplicationError]:
        """Handle AcceptShareRequest command.

        Returns:
            Success(AcceptShareResult): Access granted.
            Failure(ApplicationError): Request not found (or addressed to
                someone else), or database error.
        """
        request = await _find_addressed(self._share_request_repo, cmd.request_id, cmd.user_id)
        if request is None:
            return _request_not_found(cmd.request_id)

        recipient = await self._user_repo.find_by_id(cmd.user_id)
        if recipient is None:
            return not_found(
                ErrorCode.USER_NOT_FOUND, "User", cmd.user_id, ShareResponseError.USER_NOT_FOUND
            )
        document = await self._document_repo.find_by_id(request.document_id)
        if document is None:
            return not_found(
                ErrorCode.DOCUMENT_NOT_FOUND,
                "Document",
                request.document_id,
                ShareResponseError.DOCUMENT_NOT_FOUND,
            )

        now = datetime.now(UTC)
        try:
            researcher_linked = False
            if document.orcid_id and document.researcher_name:
                researcher_linked = await self._linked_researcher_repo.save(
                    LinkedResearcher(
                        id=uuid7(),
                        user_id=recipient.id,
                        orcid_id=document.orcid_id,
                        researcher_name=document.researcher_name,
                        created_at=now,
                    )
                )

            await self._coordinator.record_share_acceptance(
                AccessGrant(
                    id=uuid7(),
                    document_id=document.id,
                    user_id=recipient.id,
                    granted_at=now,
                ),
                recipient.email,
            )
            await self._share_request_repo.delete(request.id)
        except Exception as e:
            return execution_failed(ShareResponseError.ACCEPT_FAILED, e)

        await self._event_bus.publish(
            ShareRequestAccepted(
                share_request_id=request.id,
                document_id=document.id,
                user_id=recipient.id,
                researcher_linked=researcher_linked,
            )
        )
        return Success(
            value=AcceptShareResult(document_id=document.id, researcher_linked=researcher_linked)
        )


class RejectShareRequestHandler:
    """Handler for RejectShareRequest command."""

    def __init__(
        self,
        share_request_repo: ShareRequestRepository,
        event_bus: EventBusProtocol,
    ) -> None:
        self._share_request_repo = share_request_repo
        self._event_bus = event_bus

    async def handle(self, cmd: RejectShareRequest) -> Result[None, ApplicationError]:
        """Handle RejectShareRequest command.

        Returns:
            Success(None): Request deleted.
            Failure(ApplicationError): Request not found, or database error.
        """
        request = await _find_addressed(self._share_request_repo, cmd.request_id, cmd.user_id)
        if request is None:
            return _request_not_found(cmd.request_id)

        try:
            await self._share_request_repo.delete(request.id)
        except Exception as e:
            return execution_failed(ShareResponseError.REJECT_FAILED, e)

        await self._event_bus.publish(
            ShareRequestRejected(
                share_request_id=request.id,
                document_id=request.document_id,
                user_id=cmd.user_id,
            )
        )
        return Success(value=None)
