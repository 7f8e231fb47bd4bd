"""ListSuggestionCandidates query handler.

Pre-ranking stage of the suggestion flow:

    relational candidates (owned OR granted)
        -> AuthorizationFilter (relationship graph, concurrent batch)
        -> authorized candidates handed to the ranking consumer

Only documents that pass the filter leave this handler, so nothing the
user may not view can reach downstream ranking or model prompts.
"""

from papershare.application.dtos import DocumentSummary, SuggestionCandidates
from papershare.application.errors import ApplicationError
from papershare.application.queries.document_queries import ListSuggestionCandidates
from papershare.application.services.authorization_filter import AuthorizationFilter
from papershare.core.result import Result, Success
from papershare.domain.protocols import DocumentRepository


class ListSuggestionCandidatesHandler:
    """Handler for ListSuggestionCandidates query.

    Dependencies (injected via constructor):
        - DocumentRepository: relational candidate set
        - AuthorizationFilter: batch graph filter
    """

    def __init__(
        self,
        document_repo: DocumentRepository,
        authorization_filter: AuthorizationFilter,
    ) -> None:
        self._document_repo = document_repo
        self._filter = authorization_filter

    async def handle(
        self, query: ListSuggestionCandidates
    ) -> Result[SuggestionCandidates, ApplicationError]:
        """Handle ListSuggestionCandidates query.

        Returns:
            Success(SuggestionCandidates): Authorized documents in candidate
            order plus the candidate count before filtering.
        """
        candidates = await self._document_repo.list_readable(query.user_id)
        result = await self._filter.filter_authorized(
            query.user_email, [doc.id for doc in candidates]
        )

        by_id = {doc.id: doc for doc in candidates}
        documents = [
            DocumentSummary.for_user(by_id[doc_id], query.user_id)
            for doc_id in result.authorized_ids
        ]
        return Success(
            value=SuggestionCandidates(
                documents=documents, total_candidates=result.total_candidates
            )
        )
