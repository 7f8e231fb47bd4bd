"""Document request and response schemas.

Pydantic schemas for document endpoints. Includes:
- Request schemas (client → API)
- Response schemas (API → client)
- DTO-to-schema conversion methods
"""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, EmailStr, Field

from papershare.application.dtos import (
    AccessibleDocuments,
    DocumentSummary,
    SuggestionCandidates,
    UploadDocumentResult,
)


# =============================================================================
# Request Schemas
# =============================================================================


class ShareDocumentRequest(BaseModel):
    """Request to share a document with another user."""

    target_email: EmailStr = Field(
        ..., description="Recipient email", examples=["grace@example.org"]
    )


# =============================================================================
# Response Schemas
# =============================================================================


class DocumentResponse(BaseModel):
    """Document as seen by the requesting user.

    Attributes:
        id: Document unique identifier.
        work_id: External work reference.
        work_title: Work title.
        original_name: File name as uploaded.
        orcid_id: Researcher ORCID, if known.
        researcher_name: Researcher name, if known.
        uploaded_at: Upload timestamp.
        is_owner: True if the requesting user uploaded it.
    """

    id: UUID = Field(..., description="Document unique identifier")
    work_id: str = Field(..., description="External work reference", examples=["W2741809807"])
    work_title: str = Field(..., description="Work title")
    original_name: str = Field(..., description="File name as uploaded", examples=["paper.pdf"])
    orcid_id: str | None = Field(None, description="Researcher ORCID iD")
    researcher_name: str | None = Field(None, description="Researcher display name")
    uploaded_at: datetime = Field(..., description="Upload timestamp")
    is_owner: bool = Field(..., description="True if the requesting user uploaded it")

    @classmethod
    def from_dto(cls, dto: DocumentSummary) -> "DocumentResponse":
        return cls(
            id=dto.id,
            work_id=dto.work_id,
            work_title=dto.work_title,
            original_name=dto.original_name,
            orcid_id=dto.orcid_id,
            researcher_name=dto.researcher_name,
            uploaded_at=dto.uploaded_at,
            is_owner=dto.is_owner,
        )


class DocumentListResponse(BaseModel):
    """Documents readable by the user (owned first, then shared)."""

    documents: list[DocumentResponse] = Field(default_factory=list)
    total_count: int = Field(..., description="Number of documents")
    total_candidates: int = Field(..., description="Candidates before graph filtering")

    @classmethod
    def from_dto(cls, dto: AccessibleDocuments) -> "DocumentListResponse":
        return cls(
            documents=[DocumentResponse.from_dto(doc) for doc in dto.documents],
            total_count=dto.authorized_count,
            total_candidates=dto.total_candidates,
        )


class DocumentStatusResponse(BaseModel):
    """Per-work document status, keyed by work id.

    Works without a readable document are absent from ``documents``.
    """

    documents: dict[str, DocumentResponse] = Field(default_factory=dict)

    @classmethod
    def from_dto(cls, dto: dict[str, DocumentSummary]) -> "DocumentStatusResponse":
        return cls(
            documents={work_id: DocumentResponse.from_dto(s) for work_id, s in dto.items()}
        )


class DocumentUploadResponse(BaseModel):
    """Response for an upload."""

    id: UUID = Field(..., description="Document unique identifier")
    work_id: str = Field(..., description="External work reference")
    original_name: str = Field(..., description="File name as uploaded")
    uploaded_at: datetime = Field(..., description="Upload timestamp")
    replaced: bool = Field(..., description="True if an earlier upload was replaced")

    @classmethod
    def from_dto(cls, dto: UploadDocumentResult) -> "DocumentUploadResponse":
        return cls(
            id=dto.document.id,
            work_id=dto.document.work_id,
            original_name=dto.document.original_name,
            uploaded_at=dto.document.uploaded_at,
            replaced=dto.replaced,
        )


class SuggestionCandidatesResponse(BaseModel):
    """Authorized suggestion candidates.

    Attributes:
        documents: Candidates the user may read, in candidate order.
        total_candidates: Relational candidates before graph filtering.
        authorized_count: Candidates that passed the filter.
    """

    documents: list[DocumentResponse] = Field(default_factory=list)
    total_candidates: int = Field(..., description="Candidates before filtering")
    authorized_count: int = Field(..., description="Candidates after filtering")

    @classmethod
    def from_dto(cls, dto: SuggestionCandidates) -> "SuggestionCandidatesResponse":
        return cls(
            documents=[DocumentResponse.from_dto(doc) for doc in dto.documents],
            total_candidates=dto.total_candidates,
            authorized_count=dto.authorized_count,
        )
