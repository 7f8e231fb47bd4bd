"""Sharing DTOs.

DTOs:
    - ShareRequestSummary: Pending request with document and sender details
    - AcceptShareResult: Result from AcceptShareRequest command
"""

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID


@dataclass
class ShareRequestSummary:
    """Pending share request addressed to the current user."""

    id: UUID
    document_id: UUID
    work_id: str
    work_title: str
    original_name: str
    orcid_id: str | None
    researcher_name: str | None
    from_user_email: str
    created_at: datetime


@dataclass
class AcceptShareResult:
    """Outcome of accepting a share request.

    Attributes:
        document_id: Document now readable by the recipient.
        researcher_linked: True if the document's researcher was newly
            linked to the recipient.
    """

    document_id: UUID
    researcher_linked: bool
