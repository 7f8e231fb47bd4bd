"""Persistence layer: SQLAlchemy models, database access and repositories."""

from papershare.infrastructure.persistence.database import Database

__all__ = ["Database"]
