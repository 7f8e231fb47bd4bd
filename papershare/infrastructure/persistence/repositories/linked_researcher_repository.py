"""LinkedResearcherRepository - SQLAlchemy implementation."""

from typing import Any, cast
from uuid import UUID

from sqlalchemy import delete, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from papershare.domain.entities.linked_researcher import LinkedResearcher
from papershare.infrastructure.persistence.models.linked_researcher import (
    LinkedResearcher as LinkedResearcherModel,
)


class LinkedResearcherRepository:
    """SQLAlchemy implementation of LinkedResearcherRepository protocol."""

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def list_for_user(self, user_id: UUID) -> list[LinkedResearcher]:
        stmt = (
            select(LinkedResearcherModel)
            .where(LinkedResearcherModel.user_id == user_id)
            .order_by(LinkedResearcherModel.created_at.asc())
        )
        result = await self.session.execute(stmt)
        return [self._to_domain(model) for model in result.scalars().all()]

    async def save(self, researcher: LinkedResearcher) -> bool:
        """Insert link; idempotent on the (user, ORCID) pair.

        Returns:
            True if inserted, False if already linked.
        """
        self.session.add(
            LinkedResearcherModel(
                id=researcher.id,
                user_id=researcher.user_id,
                orcid_id=researcher.orcid_id,
                researcher_name=researcher.researcher_name,
                created_at=researcher.created_at,
            )
        )
        try:
            await self.session.commit()
        except IntegrityError:
            await self.session.rollback()
            return False
        return True

    async def delete(self, user_id: UUID, orcid_id: str) -> bool:
        stmt = delete(LinkedResearcherModel).where(
            LinkedResearcherModel.user_id == user_id,
            LinkedResearcherModel.orcid_id == orcid_id,
        )
        result = await self.session.execute(stmt)
        await self.session.commit()
        return (cast(Any, result).rowcount or 0) > 0

    def _to_domain(self, model: LinkedResearcherModel) -> LinkedResearcher:
        return LinkedResearcher(
            id=model.id,
            user_id=model.user_id,
            orcid_id=model.orcid_id,
            researcher_name=model.researcher_name,
            created_at=model.created_at,
        )
