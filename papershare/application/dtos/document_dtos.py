"""Document DTOs (Data Transfer Objects).

Result dataclasses for document command and query handlers.

DTOs:
    - DocumentSummary: Document as seen by one user (owner flag included)
    - UploadDocumentResult: Result from UploadDocument command
    - DocumentDownload: Result from GetDocument query
    - AccessibleDocuments: Result from ListAccessibleDocuments query
    - SuggestionCandidates: Result from ListSuggestionCandidates query
"""

from dataclasses import dataclass, field
from datetime import datetime
from pathlib import Path
from uuid import UUID

from papershare.domain.entities import Document


@dataclass
class DocumentSummary:
    """Document listed for a user.

    Attributes:
        id: Document id.
        work_id: External work reference.
        work_title: Work title.
        original_name: Client file name.
        orcid_id: Researcher ORCID, if known.
        researcher_name: Researcher name, if known.
        uploaded_at: Upload timestamp.
        is_owner: True if the requesting user uploaded it.
    """

    id: UUID
    work_id: str
    work_title: str
    original_name: str
    orcid_id: str | None
    researcher_name: str | None
    uploaded_at: datetime
    is_owner: bool

    @classmethod
    def for_user(cls, document: Document, user_id: UUID) -> "DocumentSummary":
        return cls(
            id=document.id,
            work_id=document.work_id,
            work_title=document.work_title,
            original_name=document.original_name,
            orcid_id=document.orcid_id,
            researcher_name=document.researcher_name,
            uploaded_at=document.uploaded_at,
            is_owner=document.is_owned_by(user_id),
        )


@dataclass
class UploadDocumentResult:
    """Result of an upload.

    Attributes:
        document: Stored document.
        replaced: True if an earlier upload for the same work was replaced.
    """

    document: Document
    replaced: bool


@dataclass
class DocumentDownload:
    """Authorized document and the location of its bytes."""

    document: Document
    path: Path


@dataclass
class AccessibleDocuments:
    """Relational candidates that also passed the graph filter.

    Attributes:
        documents: Authorized candidates, in candidate order.
        total_candidates: Relational candidates before graph filtering.
    """

    documents: list[DocumentSummary] = field(default_factory=list)
    total_candidates: int = 0

    @property
    def authorized_count(self) -> int:
        return len(self.documents)


@dataclass
class SuggestionCandidates(AccessibleDocuments):
    """Documents eligible for suggestion ranking."""
