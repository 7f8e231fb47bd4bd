"""Document query handlers.

Handlers:
    - GetDocumentHandler: single document read (download / chat context)
    - ListDocumentStatusHandler: readable PDF per work id
    - ListAccessibleDocumentsHandler: owned + shared documents, graph-filtered

Read authorization on a single document is layered: the relational store
must show ownership or a grant, and the relationship graph must allow
``viewer``. In degraded mode only the relational check applies.

Architecture:
- Returns Result[DTO, ApplicationError]
- NO domain events (queries are side-effect free)
"""

from papershare.application.dtos import (
    AccessibleDocuments,
    DocumentDownload,
    DocumentSummary,
)
from papershare.application.errors import ApplicationError, forbidden, not_found
from papershare.application.queries.document_queries import (
    GetDocument,
    ListAccessibleDocuments,
    ListDocumentStatus,
)
from papershare.application.services.authorization_filter import AuthorizationFilter
from papershare.core.enums import ErrorCode
from papershare.core.result import Result, Success
from papershare.domain.enums import READ_RELATION
from papershare.domain.protocols import (
    AccessGrantRepository,
    DocumentRepository,
    FileStorageProtocol,
)


class GetDocumentError:
    """GetDocument-specific errors."""

    DOCUMENT_NOT_FOUND = "Document not found"
    ACCESS_DENIED = "Access denied"


class GetDocumentHandler:
    """Handler for GetDocument query.

    Dependencies (injected via constructor):
        - DocumentRepository: document lookup
        - AccessGrantRepository: relational grant check
        - AuthorizationFilter: relationship graph check
        - FileStorageProtocol: file location
    """

    def __init__(
        self,
        document_repo: DocumentRepository,
        access_grant_repo: AccessGrantRepository,
        authorization_filter: AuthorizationFilter,
        storage: FileStorageProtocol,
    ) -> None:
        self._document_repo = document_repo
        self._access_grant_repo = access_grant_repo
        self._filter = authorization_filter
        self._storage = storage

    async def handle(self, query: GetDocument) -> Result[DocumentDownload, ApplicationError]:
        """Handle GetDocument query.

        Returns:
            Success(DocumentDownload): Document readable by the user.
            Failure(ApplicationError): Not found, or access denied by either
                the relational store or the relationship graph.
        """
        document = await self._document_repo.find_by_id(query.document_id)
        if document is None:
            return not_found(
                ErrorCode.DOCUMENT_NOT_FOUND,
                "Document",
                query.document_id,
                GetDocumentError.DOCUMENT_NOT_FOUND,
            )

        relationally_allowed = document.is_owned_by(query.user_id) or (
            await self._access_grant_repo.exists(document.id, query.user_id)
        )
        if not relationally_allowed:
            return forbidden(GetDocumentError.ACCESS_DENIED, required_relation=READ_RELATION.value)

        if not await self._filter.is_authorized(query.user_email, document.id):
            return forbidden(GetDocumentError.ACCESS_DENIED, required_relation=READ_RELATION.value)

        return Success(
            value=DocumentDownload(document=document, path=self._storage.path_for(document.file_name))
        )


class ListDocumentStatusHandler:
    """Handler for ListDocumentStatus query.

    Maps each requested work id to the readable document attached to it.
    When both an owned and a shared document exist for a work, the shared
    one wins (it is listed last), matching the status view's expectations.
    """

    def __init__(self, document_repo: DocumentRepository) -> None:
        self._document_repo = document_repo

    async def handle(
        self, query: ListDocumentStatus
    ) -> Result[dict[str, DocumentSummary], ApplicationError]:
        work_ids = [work_id.strip() for work_id in query.work_ids if work_id.strip()]
        if not work_ids:
            return Success(value={})

        documents = await self._document_repo.list_readable_by_work_ids(query.user_id, work_ids)
        summaries = [DocumentSummary.for_user(doc, query.user_id) for doc in documents]
        status: dict[str, DocumentSummary] = {}
        for summary in sorted(summaries, key=lambda s: not s.is_owner):
            status[summary.work_id] = summary
        return Success(value=status)


class ListAccessibleDocumentsHandler:
    """Handler for ListAccessibleDocuments query (document list for chat).

    Owned documents come first, then shared ones; both pass through the
    batch graph filter so a grant the graph no longer backs is not listed.
    """

    def __init__(
        self,
        document_repo: DocumentRepository,
        authorization_filter: AuthorizationFilter,
    ) -> None:
        self._document_repo = document_repo
        self._filter = authorization_filter

    async def handle(
        self, query: ListAccessibleDocuments
    ) -> Result[AccessibleDocuments, ApplicationError]:
        owned = await self._document_repo.list_owned(query.user_id)
        shared = await self._document_repo.list_shared_with(query.user_id)
        candidates = [*owned, *shared]

        result = await self._filter.filter_authorized(
            query.user_email, [doc.id for doc in candidates]
        )
        allowed = set(result.authorized_ids)
        return Success(
            value=AccessibleDocuments(
                documents=[
                    DocumentSummary.for_user(doc, query.user_id)
                    for doc in candidates
                    if doc.id in allowed
                ],
                total_candidates=result.total_candidates,
            )
        )
