"""Share request database model (pending requests only)."""

from uuid import UUID

from sqlalchemy import ForeignKey, UniqueConstraint, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from papershare.infrastructure.persistence.base import BaseModel


class ShareRequest(BaseModel):
    """Pending share request model.

    Accepting or rejecting deletes the row, so at most one request exists
    per (document, recipient).
    """

    __tablename__ = "share_requests"

    document_id: Mapped[UUID] = mapped_column(
        Uuid,
        ForeignKey("documents.id", ondelete="CASCADE"),
        nullable=False,
    )

    from_user_id: Mapped[UUID] = mapped_column(
        Uuid,
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
    )

    to_user_id: Mapped[UUID] = mapped_column(
        Uuid,
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )

    __table_args__ = (
        UniqueConstraint("document_id", "to_user_id", name="uq_share_requests_document_recipient"),
    )
