"""Infrastructure layer - Adapters for external systems.

Implements domain protocols: SQLAlchemy persistence, OpenFGA relationship
graph, local file storage, structlog logging and the in-memory event bus.
"""
