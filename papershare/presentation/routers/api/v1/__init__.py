"""API v1 routers.

All routes are generated from the route registry at startup; see
routes/registry.py for the complete catalog.

Resources:
    /api/v1/auth            - Account initialization and profile
    /api/v1/documents       - Upload, download, delete, share, revoke
    /api/v1/share-requests  - Pending shares (accept/reject)
    /api/v1/suggestions     - Readable suggestion candidates
    /api/v1/researchers     - Linked researchers
"""

from fastapi import APIRouter

from papershare.core.config import settings
from papershare.presentation.routers.api.v1.routes.generator import (
    register_routes_from_registry,
)
from papershare.presentation.routers.api.v1.routes.registry import ROUTE_REGISTRY

v1_router = APIRouter(prefix=settings.api_v1_prefix)
register_routes_from_registry(v1_router, ROUTE_REGISTRY)

__all__ = [
    "v1_router",
]
