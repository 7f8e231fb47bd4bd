"""ShareRequestRepository - SQLAlchemy implementation of ShareRequestRepository protocol."""

from typing import Any, cast
from uuid import UUID

from sqlalchemy import delete, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from papershare.domain.entities.share_request import ShareRequest
from papershare.infrastructure.persistence.models.share_request import (
    ShareRequest as ShareRequestModel,
)


class ShareRequestRepository:
    """SQLAlchemy implementation of ShareRequestRepository protocol."""

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def find_by_id(self, request_id: UUID) -> ShareRequest | None:
        stmt = select(ShareRequestModel).where(ShareRequestModel.id == request_id)
        result = await self.session.execute(stmt)
        model = result.scalar_one_or_none()
        return self._to_domain(model) if model is not None else None

    async def find_pending(self, document_id: UUID, to_user_id: UUID) -> ShareRequest | None:
        stmt = select(ShareRequestModel).where(
            ShareRequestModel.document_id == document_id,
            ShareRequestModel.to_user_id == to_user_id,
        )
        result = await self.session.execute(stmt)
        model = result.scalar_one_or_none()
        return self._to_domain(model) if model is not None else None

    async def list_for_recipient(self, user_id: UUID) -> list[ShareRequest]:
        stmt = (
            select(ShareRequestModel)
            .where(ShareRequestModel.to_user_id == user_id)
            .order_by(ShareRequestModel.created_at.desc())
        )
        result = await self.session.execute(stmt)
        return [self._to_domain(model) for model in result.scalars().all()]

    async def save(self, request: ShareRequest) -> None:
        """Insert new request.

        Raises:
            IntegrityError: If a request for the (document, recipient) pair
                already exists.
        """
        self.session.add(self._to_model(request))
        try:
            await self.session.commit()
        except IntegrityError:
            await self.session.rollback()
            raise

    async def delete(self, request_id: UUID) -> bool:
        stmt = delete(ShareRequestModel).where(ShareRequestModel.id == request_id)
        result = await self.session.execute(stmt)
        await self.session.commit()
        return (cast(Any, result).rowcount or 0) > 0

    def _to_domain(self, model: ShareRequestModel) -> ShareRequest:
        return ShareRequest(
            id=model.id,
            document_id=model.document_id,
            from_user_id=model.from_user_id,
            to_user_id=model.to_user_id,
            created_at=model.created_at,
        )

    def _to_model(self, request: ShareRequest) -> ShareRequestModel:
        return ShareRequestModel(
            id=request.id,
            document_id=request.document_id,
            from_user_id=request.from_user_id,
            to_user_id=request.to_user_id,
            created_at=request.created_at,
        )
