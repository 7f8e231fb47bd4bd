"""Declarative base for the relational store.

Every table has a UUID primary key and a server-set ``created_at``. Users
and documents change after creation (display name, re-uploaded file) and
also carry ``updated_at``. Grants, share requests and researcher links are
only ever inserted or deleted.

The portable ``Uuid`` and ``DateTime`` types let the same models run on
PostgreSQL and on the SQLite database the tests use.
"""

from datetime import datetime
from uuid import UUID, uuid4

from sqlalchemy import DateTime, Uuid, func
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column


class BaseModel(DeclarativeBase):
    __abstract__ = True

    id: Mapped[UUID] = mapped_column(Uuid, primary_key=True, default=uuid4)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, server_default=func.now()
    )

    def __repr__(self) -> str:
        return f"<{type(self).__name__} id={self.id}>"


class BaseMutableModel(BaseModel):
    """Base for rows that are updated in place."""

    __abstract__ = True

    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        server_default=func.now(),
        onupdate=func.now(),
    )
