"""Application services.

Services shared by several handlers:
    - AuthorizationMode: degraded-mode switch decided at startup
    - AccessCoordinator: relational + relationship-graph dual-write
    - AuthorizationFilter: relationship-graph read authorization
"""

from papershare.application.services.access_coordinator import AccessCoordinator
from papershare.application.services.authorization_filter import (
    AuthorizationFilter,
    AuthorizationFilterResult,
)
from papershare.application.services.authorization_mode import AuthorizationMode

__all__ = [
    "AccessCoordinator",
    "AuthorizationFilter",
    "AuthorizationFilterResult",
    "AuthorizationMode",
]
