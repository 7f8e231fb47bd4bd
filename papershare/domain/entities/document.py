"""Document domain entity (uploaded research PDF).

Business Rules:
    - One document per (owner, work_id); re-uploading the same work replaces
      the stored file in place, keeping id and ownership.
    - Deleting a document removes its access grants and pending share
      requests (cascade).
"""

from dataclasses import dataclass
from datetime import UTC, datetime
from uuid import UUID


@dataclass
class Document:
    """Uploaded PDF attached to a scholarly work.

    Attributes:
        id: Unique document identifier (also the ``doc:<id>`` graph object).
        owner_id: User who uploaded the document.
        work_id: External work reference (e.g. OpenAlex id).
        work_title: Title of the work.
        orcid_id: ORCID of the researcher the work belongs to, if known.
        researcher_name: Display name of that researcher, if known.
        file_name: Stored file name.
        original_name: File name as uploaded by the client.
        uploaded_at: Timestamp of the latest upload.
    """

    id: UUID
    owner_id: UUID
    work_id: str
    work_title: str
    file_name: str
    original_name: str
    uploaded_at: datetime
    orcid_id: str | None = None
    researcher_name: str | None = None

    def is_owned_by(self, user_id: UUID) -> bool:
        """Check ownership."""
        return self.owner_id == user_id

    def replace_file(
        self,
        *,
        file_name: str,
        original_name: str,
        work_title: str,
        orcid_id: str | None,
        researcher_name: str | None,
    ) -> str:
        """Point the document at a newly uploaded file.

        Args:
            file_name: New stored file name.
            original_name: New client file name.
            work_title: Work title sent with the upload.
            orcid_id: Researcher ORCID sent with the upload.
            researcher_name: Researcher name sent with the upload.

        Returns:
            str: The previously stored file name (caller removes it).
        """
        previous = self.file_name
        self.file_name = file_name
        self.original_name = original_name
        self.work_title = work_title
        self.orcid_id = orcid_id
        self.researcher_name = researcher_name
        self.uploaded_at = datetime.now(UTC)
        return previous
