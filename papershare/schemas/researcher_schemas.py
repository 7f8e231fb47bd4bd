"""Linked researcher request and response schemas."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, Field

from papershare.domain.entities import LinkedResearcher


class LinkResearcherRequest(BaseModel):
    """Request to link an ORCID researcher."""

    orcid_id: str = Field(
        ..., min_length=1, max_length=64, description="ORCID iD", examples=["0000-0002-1825-0097"]
    )
    researcher_name: str = Field(..., min_length=1, max_length=255, description="Display name")


class ResearcherResponse(BaseModel):
    id: UUID = Field(..., description="Link identifier")
    orcid_id: str = Field(..., description="ORCID iD")
    researcher_name: str = Field(..., description="Display name")
    created_at: datetime = Field(..., description="Link timestamp")

    @classmethod
    def from_entity(cls, researcher: LinkedResearcher) -> "ResearcherResponse":
        return cls(
            id=researcher.id,
            orcid_id=researcher.orcid_id,
            researcher_name=researcher.researcher_name,
            created_at=researcher.created_at,
        )


class ResearcherListResponse(BaseModel):
    researchers: list[ResearcherResponse] = Field(default_factory=list)
    total_count: int = Field(..., description="Number of linked researchers")

    @classmethod
    def from_entities(cls, researchers: list[LinkedResearcher]) -> "ResearcherListResponse":
        return cls(
            researchers=[ResearcherResponse.from_entity(r) for r in researchers],
            total_count=len(researchers),
        )
