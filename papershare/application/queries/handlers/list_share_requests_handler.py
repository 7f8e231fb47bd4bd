"""ListShareRequests query handler.

Joins each pending request with its document and sender for display.
"""

from papershare.application.dtos import ShareRequestSummary
from papershare.application.errors import ApplicationError
from papershare.application.queries.sharing_queries import ListShareRequests
from papershare.core.result import Result, Success
from papershare.domain.protocols import (
    DocumentRepository,
    ShareRequestRepository,
    UserRepository,
)


class ListShareRequestsHandler:
    """Handler for ListShareRequests query."""

    def __init__(
        self,
        share_request_repo: ShareRequestRepository,
        document_repo: DocumentRepository,
        user_repo: UserRepository,
    ) -> None:
        self._share_request_repo = share_request_repo
        self._document_repo = document_repo
        self._user_repo = user_repo

    async def handle(
        self, query: ListShareRequests
    ) -> Result[list[ShareRequestSummary], ApplicationError]:
        requests = await self._share_request_repo.list_for_recipient(query.user_id)
        if not requests:
            return Success(value=[])

        documents = {
            doc.id: doc
            for doc in await self._document_repo.find_by_ids(
                list({r.document_id for r in requests})
            )
        }
        senders = {
            user.id: user
            for user in await self._user_repo.find_by_ids(list({r.from_user_id for r in requests}))
        }

        summaries = []
        for request in requests:
            document = documents.get(request.document_id)
            sender = senders.get(request.from_user_id)
            if document is None or sender is None:
                continue
            summaries.append(
                ShareRequestSummary(
                    id=request.id,
                    document_id=document.id,
                    work_id=document.work_id,
                    work_title=document.work_title,
                    original_name=document.original_name,
                    orcid_id=document.orcid_id,
                    researcher_name=document.researcher_name,
                    from_user_email=sender.email,
                    created_at=request.created_at,
                )
            )
        return Success(value=summaries)
