"""DocumentRepository - SQLAlchemy implementation of DocumentRepository protocol.

Adapter for hexagonal architecture.
Maps between domain Document entities and database DocumentModel.

The relational store is the source of truth for ownership and grants; the
``list_readable*`` queries produce the candidate sets that read flows then
narrow through the relationship graph.
"""

from typing import Any, cast
from uuid import UUID

from sqlalchemy import delete, or_, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from papershare.domain.entities.document import Document
from papershare.infrastructure.persistence.models.access_grant import (
    AccessGrant as AccessGrantModel,
)
from papershare.infrastructure.persistence.models.document import (
    Document as DocumentModel,
)


class DocumentRepository:
    """SQLAlchemy implementation of DocumentRepository protocol.

    Attributes:
        session: SQLAlchemy async session for database operations.
    """

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def find_by_id(self, document_id: UUID) -> Document | None:
        stmt = select(DocumentModel).where(DocumentModel.id == document_id)
        result = await self.session.execute(stmt)
        model = result.scalar_one_or_none()
        return self._to_domain(model) if model is not None else None

    async def find_by_ids(self, document_ids: list[UUID]) -> list[Document]:
        if not document_ids:
            return []
        stmt = select(DocumentModel).where(DocumentModel.id.in_(set(document_ids)))
        result = await self.session.execute(stmt)
        return [self._to_domain(model) for model in result.scalars().all()]

    async def find_by_owner_and_work(self, owner_id: UUID, work_id: str) -> Document | None:
        stmt = select(DocumentModel).where(
            DocumentModel.owner_id == owner_id,
            DocumentModel.work_id == work_id,
        )
        result = await self.session.execute(stmt)
        model = result.scalar_one_or_none()
        return self._to_domain(model) if model is not None else None

    async def list_owned(self, owner_id: UUID) -> list[Document]:
        stmt = (
            select(DocumentModel)
            .where(DocumentModel.owner_id == owner_id)
            .order_by(DocumentModel.uploaded_at.desc())
        )
        result = await self.session.execute(stmt)
        return [self._to_domain(model) for model in result.scalars().all()]

    async def list_shared_with(self, user_id: UUID) -> list[Document]:
        stmt = (
            select(DocumentModel)
            .join(AccessGrantModel, AccessGrantModel.document_id == DocumentModel.id)
            .where(AccessGrantModel.user_id == user_id)
            .order_by(DocumentModel.uploaded_at.desc())
        )
        result = await self.session.execute(stmt)
        return [self._to_domain(model) for model in result.scalars().all()]

    async def list_readable(self, user_id: UUID) -> list[Document]:
        """List documents the user owns or holds a grant for.

        Args:
            user_id: Reader.

        Returns:
            Documents ordered by upload time, newest first.
        """
        stmt = (
            select(DocumentModel)
            .where(self._readable_by(user_id))
            .order_by(DocumentModel.uploaded_at.desc())
        )
        result = await self.session.execute(stmt)
        return [self._to_domain(model) for model in result.scalars().all()]

    async def list_readable_by_work_ids(
        self, user_id: UUID, work_ids: list[str]
    ) -> list[Document]:
        if not work_ids:
            return []
        stmt = (
            select(DocumentModel)
            .where(
                DocumentModel.work_id.in_(set(work_ids)),
                self._readable_by(user_id),
            )
            .order_by(DocumentModel.uploaded_at.desc())
        )
        result = await self.session.execute(stmt)
        return [self._to_domain(model) for model in result.scalars().all()]

    async def save(self, document: Document) -> None:
        """Insert new document.

        Raises:
            IntegrityError: If the (owner, work) pair already exists.
        """
        model = self._to_model(document)
        self.session.add(model)
        try:
            await self.session.commit()
        except IntegrityError:
            await self.session.rollback()
            raise
        await self.session.refresh(model)

    async def update(self, document: Document) -> None:
        """Persist changed fields of an existing document.

        Raises:
            NoResultFound: If the document does not exist.
        """
        stmt = select(DocumentModel).where(DocumentModel.id == document.id)
        result = await self.session.execute(stmt)
        model = result.scalar_one()

        model.work_title = document.work_title
        model.orcid_id = document.orcid_id
        model.researcher_name = document.researcher_name
        model.file_name = document.file_name
        model.original_name = document.original_name
        model.uploaded_at = document.uploaded_at

        await self.session.commit()
        await self.session.refresh(model)

    async def delete(self, document_id: UUID) -> bool:
        """Delete document (grants and pending requests cascade).

        Returns:
            True if deleted, False if not found.
        """
        stmt = delete(DocumentModel).where(DocumentModel.id == document_id)
        result = await self.session.execute(stmt)
        await self.session.commit()
        return (cast(Any, result).rowcount or 0) > 0

    @staticmethod
    def _readable_by(user_id: UUID) -> Any:
        granted = select(AccessGrantModel.document_id).where(AccessGrantModel.user_id == user_id)
        return or_(DocumentModel.owner_id == user_id, DocumentModel.id.in_(granted))

    def _to_domain(self, model: DocumentModel) -> Document:
        return Document(
            id=model.id,
            owner_id=model.owner_id,
            work_id=model.work_id,
            work_title=model.work_title,
            file_name=model.file_name,
            original_name=model.original_name,
            uploaded_at=model.uploaded_at,
            orcid_id=model.orcid_id,
            researcher_name=model.researcher_name,
        )

    def _to_model(self, document: Document) -> DocumentModel:
        return DocumentModel(
            id=document.id,
            owner_id=document.owner_id,
            work_id=document.work_id,
            work_title=document.work_title,
            file_name=document.file_name,
            original_name=document.original_name,
            uploaded_at=document.uploaded_at,
            orcid_id=document.orcid_id,
            researcher_name=document.researcher_name,
        )
