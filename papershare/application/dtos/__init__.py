"""Data Transfer Objects (DTOs) for application layer.

DTOs are result dataclasses returned by command and query handlers. They are
NOT API schemas (Pydantic models live in ``papershare.schemas``).
"""

from papershare.application.dtos.document_dtos import (
    AccessibleDocuments,
    DocumentDownload,
    DocumentSummary,
    SuggestionCandidates,
    UploadDocumentResult,
)
from papershare.application.dtos.sharing_dtos import AcceptShareResult, ShareRequestSummary
from papershare.application.dtos.user_dtos import InitializeUserResult

__all__ = [
    "AccessibleDocuments",
    "AcceptShareResult",
    "DocumentDownload",
    "DocumentSummary",
    "InitializeUserResult",
    "ShareRequestSummary",
    "SuggestionCandidates",
    "UploadDocumentResult",
]
