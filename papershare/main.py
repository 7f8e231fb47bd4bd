"""Main FastAPI application entry point.

Startup decides the authorization mode once (relationship graph or
relational-only degraded mode), logs it, and opens the graph client when
configured. Shutdown releases the graph client and the database pool.
"""

from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from papershare.core.config import settings
from papershare.core.container import (
    close_relationship_graph,
    get_authorization_mode,
    get_database,
    get_logger,
    init_relationship_graph,
)
from papershare.presentation.api.middleware import TraceMiddleware
from papershare.presentation.routers.api.v1 import v1_router
from papershare.presentation.routers.api.v1.errors import register_exception_handlers


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan context manager.

    Args:
        app: FastAPI application instance.

    Yields:
        None during application lifetime.
    """
    logger = get_logger()
    get_authorization_mode().log_startup(logger)
    await init_relationship_graph()
    logger.info("application_started", environment=settings.environment.value)

    yield

    await close_relationship_graph()
    await get_database().close()
    logger.info("application_stopped")


app = FastAPI(
    title=settings.app_name,
    description="Research paper sharing with relationship-based access control",
    version=settings.app_version,
    docs_url="/docs",
    redoc_url="/redoc",
    debug=settings.debug,
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origin_list,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Wire trace middleware (request correlation)
app.add_middleware(TraceMiddleware)

# Register global exception handlers (RFC 9457 error responses)
register_exception_handlers(app)

app.include_router(v1_router)


@app.get("/health")
async def health() -> dict[str, str]:
    """Health check endpoint for monitoring and load balancers.

    Returns:
        dict: Database status and the active authorization mode.
    """
    database_ok = await get_database().check_connection()
    return {
        "status": "healthy" if database_ok else "degraded",
        "database": "ok" if database_ok else "unreachable",
        "authorization": "relational" if get_authorization_mode().is_degraded else "graph",
    }
