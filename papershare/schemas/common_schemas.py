"""Shared response schemas."""

from pydantic import BaseModel, Field


class MessageResponse(BaseModel):
    """Plain acknowledgement for operations without a resource body."""

    message: str = Field(..., description="Human-readable outcome", examples=["Share request rejected"])
