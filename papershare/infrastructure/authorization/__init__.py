"""Relationship graph adapters."""

from papershare.infrastructure.authorization.in_memory_graph_adapter import (
    InMemoryRelationshipGraph,
)
from papershare.infrastructure.authorization.openfga_adapter import (
    OpenFGAAdapter,
    build_openfga_client,
)

__all__ = ["InMemoryRelationshipGraph", "OpenFGAAdapter", "build_openfga_client"]
