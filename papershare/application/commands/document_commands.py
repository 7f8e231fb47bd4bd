"""Document commands (CQRS write operations)."""

from collections.abc import AsyncIterator
from dataclasses import dataclass
from uuid import UUID


@dataclass(frozen=True, kw_only=True)
class UploadDocument:
    """Upload (or replace) the PDF attached to a work.

    Attributes:
        owner_id: Uploading user.
        work_id: External work reference.
        original_name: Client file name.
        chunks: File content stream.
        work_title: Work title (defaults to the file name).
        orcid_id: Researcher ORCID, if known.
        researcher_name: Researcher name, if known.
        content_type: Declared media type of the upload.
    """

    owner_id: UUID
    work_id: str
    original_name: str
    chunks: AsyncIterator[bytes]
    work_title: str | None = None
    orcid_id: str | None = None
    researcher_name: str | None = None
    content_type: str = "application/pdf"


@dataclass(frozen=True, kw_only=True)
class DeleteDocument:
    """Delete an owned document and its stored file."""

    user_id: UUID
    document_id: UUID
