"""Queries (CQRS read side)."""

from papershare.application.queries.document_queries import (
    GetDocument,
    ListAccessibleDocuments,
    ListDocumentStatus,
    ListSuggestionCandidates,
)
from papershare.application.queries.researcher_queries import ListLinkedResearchers
from papershare.application.queries.sharing_queries import ListShareRequests
from papershare.application.queries.user_queries import GetCurrentUser

__all__ = [
    "GetCurrentUser",
    "GetDocument",
    "ListAccessibleDocuments",
    "ListDocumentStatus",
    "ListLinkedResearchers",
    "ListShareRequests",
    "ListSuggestionCandidates",
]
