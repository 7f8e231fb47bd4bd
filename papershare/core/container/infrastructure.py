"""Infrastructure dependency factories.

Application-scoped singletons for core infrastructure services:
- Database (PostgreSQL, SQLite in tests)
- File storage (local upload directory)
- Logging (structlog console/JSON)
- Token verification (identity provider JWKS)

Request-scoped:
- Database session
"""

from functools import lru_cache
from typing import TYPE_CHECKING, AsyncGenerator

from sqlalchemy.ext.asyncio import AsyncSession

from papershare.core.config import get_settings
from papershare.infrastructure.persistence.database import Database

if TYPE_CHECKING:
    from papershare.domain.protocols.file_storage_protocol import FileStorageProtocol
    from papershare.domain.protocols.logger_protocol import LoggerProtocol
    from papershare.domain.protocols.token_verification_protocol import (
        TokenVerificationProtocol,
    )


# ============================================================================
# Application-Scoped Dependencies (Singletons)
# ============================================================================


@lru_cache()
def get_database() -> Database:
    """Get database manager singleton (app-scoped).

    Use get_db_session() for per-request sessions.
    """
    settings = get_settings()
    return Database(
        database_url=settings.database_url,
        echo=settings.db_echo,
    )


@lru_cache()
def get_file_storage() -> "FileStorageProtocol":
    """Get upload storage singleton (app-scoped)."""
    from papershare.infrastructure.storage.local_file_storage import LocalFileStorage

    settings = get_settings()
    return LocalFileStorage(root=settings.upload_dir, max_bytes=settings.max_upload_bytes)


@lru_cache()
def get_logger() -> "LoggerProtocol":
    """Return the application-scoped logger singleton.

    Adapter selection is centralized here (composition root):
    - development/production: ConsoleAdapter (human-readable / JSON)
    - testing/ci: ConsoleAdapter (JSON)

    Returns:
        LoggerProtocol: Logger instance implementing the protocol.
    """
    from papershare.infrastructure.logging.console_adapter import ConsoleAdapter

    settings = get_settings()
    return ConsoleAdapter(
        use_json=settings.environment.uses_json_logs, level=settings.log_level
    )


@lru_cache()
def get_token_verifier() -> "TokenVerificationProtocol | None":
    """Get bearer token verifier singleton (app-scoped).

    The JWKS endpoint defaults to the issuer's well-known location.

    Returns:
        JWKSTokenVerifier, or None when no identity provider is configured
        (every authenticated request is then rejected).
    """
    import jwt

    from papershare.infrastructure.security.jwks_token_verifier import JWKSTokenVerifier

    settings = get_settings()
    jwks_url = settings.auth_jwks_url
    if jwks_url is None and settings.auth_issuer:
        jwks_url = f"{settings.auth_issuer.rstrip('/')}/.well-known/jwks.json"
    if jwks_url is None:
        return None

    return JWKSTokenVerifier(
        jwks_client=jwt.PyJWKClient(jwks_url),
        issuer=settings.auth_issuer,
        audience=settings.auth_audience,
        algorithms=settings.auth_algorithm_list,
        email_claim=settings.auth_email_claim,
    )


# ============================================================================
# Request-Scoped Dependencies (Per-Request)
# ============================================================================


async def get_db_session() -> AsyncGenerator[AsyncSession, None]:
    """Get database session (request-scoped).

    Commits on success, rolls back on exception, always closes.

    Usage:
        @router.get("/documents")
        async def list_documents(session: AsyncSession = Depends(get_db_session)):
            ...
    """
    db = get_database()
    async with db.get_session() as session:
        yield session
