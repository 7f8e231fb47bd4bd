"""Linked researcher database model."""

from uuid import UUID

from sqlalchemy import ForeignKey, String, UniqueConstraint, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from papershare.infrastructure.persistence.base import BaseModel


class LinkedResearcher(BaseModel):
    """ORCID researcher a user follows (set when accepting a share)."""

    __tablename__ = "linked_researchers"

    user_id: Mapped[UUID] = mapped_column(
        Uuid,
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )

    orcid_id: Mapped[str] = mapped_column(String(64), nullable=False)

    researcher_name: Mapped[str] = mapped_column(String(255), nullable=False)

    __table_args__ = (
        UniqueConstraint("user_id", "orcid_id", name="uq_linked_researchers_user_orcid"),
    )
