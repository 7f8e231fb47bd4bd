"""Repository dependency factories.

Request-scoped repository instances sharing the request's database session.
"""

from typing import TYPE_CHECKING

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from papershare.core.container.infrastructure import get_db_session

if TYPE_CHECKING:
    from papershare.infrastructure.persistence.repositories import (
        AccessGrantRepository,
        DocumentRepository,
        LinkedResearcherRepository,
        ShareRequestRepository,
        UserRepository,
    )


# ============================================================================
# Repository Factories (Request-Scoped)
# ============================================================================


async def get_user_repository(
    session: AsyncSession = Depends(get_db_session),
) -> "UserRepository":
    """Get user repository (request-scoped).

    Args:
        session: Database session for request duration.
            Injected via Depends(get_db_session).
    """
    from papershare.infrastructure.persistence.repositories import UserRepository

    return UserRepository(session=session)


async def get_document_repository(
    session: AsyncSession = Depends(get_db_session),
) -> "DocumentRepository":
    from papershare.infrastructure.persistence.repositories import DocumentRepository

    return DocumentRepository(session=session)


async def get_access_grant_repository(
    session: AsyncSession = Depends(get_db_session),
) -> "AccessGrantRepository":
    from papershare.infrastructure.persistence.repositories import (
        AccessGrantRepository,
    )

    return AccessGrantRepository(session=session)


async def get_share_request_repository(
    session: AsyncSession = Depends(get_db_session),
) -> "ShareRequestRepository":
    from papershare.infrastructure.persistence.repositories import (
        ShareRequestRepository,
    )

    return ShareRequestRepository(session=session)


async def get_linked_researcher_repository(
    session: AsyncSession = Depends(get_db_session),
) -> "LinkedResearcherRepository":
    from papershare.infrastructure.persistence.repositories import (
        LinkedResearcherRepository,
    )

    return LinkedResearcherRepository(session=session)
