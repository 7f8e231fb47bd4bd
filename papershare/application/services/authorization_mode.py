"""Authorization mode (degraded-mode switch).

Decided once at startup from configuration and injected into the
AccessCoordinator and AuthorizationFilter. When the relationship graph is
not configured the service keeps working on relational authorization alone:

    - tuple grants and revokes become no-ops (no network, never raise)
    - the batch filter passes candidates through unchanged
    - single-document checks defer to the relational layer

Usage:
    mode = AuthorizationMode.from_settings(settings)
    coordinator = AccessCoordinator(..., mode=mode)
"""

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from papershare.core.config import Settings
    from papershare.domain.protocols.logger_protocol import LoggerProtocol


@dataclass(frozen=True, slots=True, kw_only=True)
class AuthorizationMode:
    """Immutable relationship-graph availability flag.

    Attributes:
        graph_enabled: True when a store id is configured.
        store_id: Configured store id (None when disabled).
        model_id: Targeted authorization model id, if pinned.
    """

    graph_enabled: bool
    store_id: str | None = None
    model_id: str | None = None

    @classmethod
    def from_settings(cls, settings: "Settings") -> "AuthorizationMode":
        """Derive the mode from settings (``FGA_STORE_ID`` is the sole gate)."""
        return cls(
            graph_enabled=settings.fga_enabled,
            store_id=settings.fga_store_id,
            model_id=settings.fga_model_id,
        )

    @classmethod
    def disabled(cls) -> "AuthorizationMode":
        """Degraded mode: relational authorization only."""
        return cls(graph_enabled=False)

    @property
    def is_degraded(self) -> bool:
        return not self.graph_enabled

    def log_startup(self, logger: "LoggerProtocol") -> None:
        """Log the decision once at application startup."""
        if self.graph_enabled:
            logger.info(
                "relationship_graph_enabled",
                store_id=self.store_id,
                model_id=self.model_id,
            )
        else:
            logger.warning(
                "relationship_graph_disabled",
                reason="FGA_STORE_ID not configured",
                effect="relational authorization only",
            )
