"""Document database model (uploaded PDFs)."""

from datetime import datetime
from uuid import UUID

from sqlalchemy import DateTime, ForeignKey, Index, String, Text, UniqueConstraint, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from papershare.infrastructure.persistence.base import BaseMutableModel


class Document(BaseMutableModel):
    """Uploaded document model.

    One row per (owner, work): re-uploading for the same work replaces the
    stored file in place, keeping the id (and so the graph object) stable.

    Foreign Keys:
        owner_id: References users.id with CASCADE delete
    """

    __tablename__ = "documents"

    owner_id: Mapped[UUID] = mapped_column(
        Uuid,
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )

    work_id: Mapped[str] = mapped_column(
        String(255),
        nullable=False,
        comment="External work reference",
    )

    work_title: Mapped[str] = mapped_column(Text, nullable=False, default="")

    orcid_id: Mapped[str | None] = mapped_column(String(64), nullable=True)

    researcher_name: Mapped[str | None] = mapped_column(String(255), nullable=True)

    file_name: Mapped[str] = mapped_column(
        String(255),
        nullable=False,
        comment="Stored file name inside the upload directory",
    )

    original_name: Mapped[str] = mapped_column(String(255), nullable=False)

    uploaded_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
    )

    __table_args__ = (
        UniqueConstraint("owner_id", "work_id", name="uq_documents_owner_work"),
        Index("idx_documents_work_id", "work_id"),
    )

    def __repr__(self) -> str:
        return f"<Document(id={self.id}, owner_id={self.owner_id}, work_id={self.work_id})>"
