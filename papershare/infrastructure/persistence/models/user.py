"""User database model.

Users are provisioned on first login from the identity provider; there is
no local password. ``auth_subject`` is the provider's stable ``sub`` claim.
"""

from sqlalchemy import Index, String
from sqlalchemy.orm import Mapped, mapped_column

from papershare.infrastructure.persistence.base import BaseMutableModel


class User(BaseMutableModel):
    """Account row, matched case-insensitively on ``email``."""

    __tablename__ = "users"

    email: Mapped[str] = mapped_column(
        String(255),
        unique=True,
        nullable=False,
        comment="Email address, also the relationship graph subject key",
    )

    auth_subject: Mapped[str] = mapped_column(
        String(255),
        unique=True,
        nullable=False,
        comment="Identity provider subject claim",
    )

    __table_args__ = (Index("idx_users_email", "email"),)

    def __repr__(self) -> str:
        return f"<User(id={self.id}, email={self.email})>"
