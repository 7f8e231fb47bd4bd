"""AccessGrantRepository - SQLAlchemy implementation of AccessGrantRepository protocol."""

from typing import Any, cast
from uuid import UUID

from sqlalchemy import delete, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from papershare.domain.entities.access_grant import AccessGrant
from papershare.infrastructure.persistence.models.access_grant import (
    AccessGrant as AccessGrantModel,
)


class AccessGrantRepository:
    """SQLAlchemy implementation of AccessGrantRepository protocol.

    Grant rows are immutable: ``created_at`` holds the grant time and
    revoking deletes the row.
    """

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def exists(self, document_id: UUID, user_id: UUID) -> bool:
        stmt = select(AccessGrantModel.id).where(
            AccessGrantModel.document_id == document_id,
            AccessGrantModel.user_id == user_id,
        )
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none() is not None

    async def list_for_document(self, document_id: UUID) -> list[AccessGrant]:
        stmt = (
            select(AccessGrantModel)
            .where(AccessGrantModel.document_id == document_id)
            .order_by(AccessGrantModel.created_at.asc())
        )
        result = await self.session.execute(stmt)
        return [self._to_domain(model) for model in result.scalars().all()]

    async def save(self, grant: AccessGrant) -> bool:
        """Insert grant; idempotent on the (document, user) pair.

        Returns:
            True if inserted, False if the pair already existed.
        """
        self.session.add(self._to_model(grant))
        try:
            await self.session.commit()
        except IntegrityError:
            await self.session.rollback()
            return False
        return True

    async def delete(self, document_id: UUID, user_id: UUID) -> bool:
        stmt = delete(AccessGrantModel).where(
            AccessGrantModel.document_id == document_id,
            AccessGrantModel.user_id == user_id,
        )
        result = await self.session.execute(stmt)
        await self.session.commit()
        return (cast(Any, result).rowcount or 0) > 0

    def _to_domain(self, model: AccessGrantModel) -> AccessGrant:
        return AccessGrant(
            id=model.id,
            document_id=model.document_id,
            user_id=model.user_id,
            granted_at=model.created_at,
        )

    def _to_model(self, grant: AccessGrant) -> AccessGrantModel:
        return AccessGrantModel(
            id=grant.id,
            document_id=grant.document_id,
            user_id=grant.user_id,
            created_at=grant.granted_at,
        )
