"""Access grant database model.

Relational record of a viewer relationship created by an accepted share
request. Mirrored as a ``viewer`` tuple in the relationship graph.
"""

from uuid import UUID

from sqlalchemy import ForeignKey, UniqueConstraint, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from papershare.infrastructure.persistence.base import BaseModel


class AccessGrant(BaseModel):
    """Access grant model (immutable; revoking deletes the row).

    ``created_at`` is the grant time.

    Foreign Keys:
        document_id: References documents.id with CASCADE delete
        user_id: References users.id with CASCADE delete
    """

    __tablename__ = "access_grants"

    document_id: Mapped[UUID] = mapped_column(
        Uuid,
        ForeignKey("documents.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )

    user_id: Mapped[UUID] = mapped_column(
        Uuid,
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )

    __table_args__ = (
        UniqueConstraint("document_id", "user_id", name="uq_access_grants_document_user"),
    )
