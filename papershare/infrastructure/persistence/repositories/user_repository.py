"""SQLAlchemy adapter for the users table.

Email is both the login lookup key and the relationship-graph subject, so
lookups compare it case-insensitively on every backend.
"""

from uuid import UUID

from sqlalchemy import func, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from papershare.domain.entities.user import User
from papershare.infrastructure.persistence.models.user import User as UserModel


class UserRepository:
    """Satisfies UserRepository structurally; returns domain Users only."""

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def _first(self, *criteria) -> User | None:
        result = await self.session.execute(select(UserModel).where(*criteria))
        row = result.scalar_one_or_none()
        return None if row is None else self._to_domain(row)

    async def find_by_id(self, user_id: UUID) -> User | None:
        return await self._first(UserModel.id == user_id)

    async def find_by_email(self, email: str) -> User | None:
        return await self._first(func.lower(UserModel.email) == email.strip().lower())

    async def find_by_ids(self, user_ids: list[UUID]) -> list[User]:
        if not user_ids:
            return []
        result = await self.session.execute(
            select(UserModel).where(UserModel.id.in_(set(user_ids)))
        )
        return [self._to_domain(row) for row in result.scalars()]

    async def save(self, user: User) -> None:
        """Insert ``user``.

        Raises:
            IntegrityError: The email or identity-provider subject is taken.
                The session is rolled back before re-raising so a login
                race can look the winner up on the same session.
        """
        row = UserModel(
            id=user.id,
            email=user.email,
            auth_subject=user.auth_subject,
            created_at=user.created_at,
            updated_at=user.updated_at,
        )
        self.session.add(row)
        try:
            await self.session.commit()
        except IntegrityError:
            await self.session.rollback()
            raise
        await self.session.refresh(row)

    @staticmethod
    def _to_domain(row: UserModel) -> User:
        return User(
            id=row.id,
            email=row.email,
            auth_subject=row.auth_subject,
            created_at=row.created_at,
            updated_at=row.updated_at,
        )
