"""Request/response schemas for API endpoints.

All Pydantic models for HTTP request validation and response serialization.
Schemas are kept separate from domain entities (HTTP-layer concerns only).

Usage:
    from papershare.schemas import DocumentResponse, ShareDocumentRequest
"""

from papershare.schemas.common_schemas import MessageResponse
from papershare.schemas.document_schemas import (
    DocumentListResponse,
    DocumentResponse,
    DocumentStatusResponse,
    DocumentUploadResponse,
    ShareDocumentRequest,
    SuggestionCandidatesResponse,
)
from papershare.schemas.researcher_schemas import (
    LinkResearcherRequest,
    ResearcherListResponse,
    ResearcherResponse,
)
from papershare.schemas.sharing_schemas import (
    ShareRequestAcceptResponse,
    ShareRequestCreateResponse,
    ShareRequestListResponse,
    ShareRequestResponse,
)
from papershare.schemas.user_schemas import UserInitResponse, UserResponse

__all__ = [
    "DocumentListResponse",
    "DocumentResponse",
    "DocumentStatusResponse",
    "DocumentUploadResponse",
    "LinkResearcherRequest",
    "MessageResponse",
    "ResearcherListResponse",
    "ResearcherResponse",
    "ShareDocumentRequest",
    "ShareRequestAcceptResponse",
    "ShareRequestCreateResponse",
    "ShareRequestListResponse",
    "ShareRequestResponse",
    "SuggestionCandidatesResponse",
    "UserInitResponse",
    "UserResponse",
]
