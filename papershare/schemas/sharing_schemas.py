"""Share request response schemas."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, Field

from papershare.application.dtos import AcceptShareResult, ShareRequestSummary
from papershare.domain.entities import ShareRequest


class ShareRequestCreateResponse(BaseModel):
    """Response for a created share request."""

    id: UUID = Field(..., description="Share request identifier")
    created_at: datetime = Field(..., description="Request timestamp")

    @classmethod
    def from_entity(cls, request: ShareRequest) -> "ShareRequestCreateResponse":
        return cls(id=request.id, created_at=request.created_at)


class ShareRequestResponse(BaseModel):
    """Pending share request addressed to the current user."""

    id: UUID = Field(..., description="Share request identifier")
    document_id: UUID = Field(..., description="Offered document")
    work_id: str = Field(..., description="External work reference")
    work_title: str = Field(..., description="Work title")
    original_name: str = Field(..., description="File name as uploaded")
    orcid_id: str | None = Field(None, description="Researcher ORCID iD")
    researcher_name: str | None = Field(None, description="Researcher display name")
    from_user_email: str = Field(..., description="Sender email")
    created_at: datetime = Field(..., description="Request timestamp")

    @classmethod
    def from_dto(cls, dto: ShareRequestSummary) -> "ShareRequestResponse":
        return cls(
            id=dto.id,
            document_id=dto.document_id,
            work_id=dto.work_id,
            work_title=dto.work_title,
            original_name=dto.original_name,
            orcid_id=dto.orcid_id,
            researcher_name=dto.researcher_name,
            from_user_email=dto.from_user_email,
            created_at=dto.created_at,
        )


class ShareRequestListResponse(BaseModel):
    share_requests: list[ShareRequestResponse] = Field(default_factory=list)
    total_count: int = Field(..., description="Number of pending requests")

    @classmethod
    def from_dto(cls, dtos: list[ShareRequestSummary]) -> "ShareRequestListResponse":
        return cls(
            share_requests=[ShareRequestResponse.from_dto(dto) for dto in dtos],
            total_count=len(dtos),
        )


class ShareRequestAcceptResponse(BaseModel):
    """Response for an accepted share request."""

    document_id: UUID = Field(..., description="Document now readable by the user")
    researcher_linked: bool = Field(
        ..., description="True if the document's researcher was linked to the user"
    )

    @classmethod
    def from_dto(cls, dto: AcceptShareResult) -> "ShareRequestAcceptResponse":
        return cls(document_id=dto.document_id, researcher_linked=dto.researcher_linked)
