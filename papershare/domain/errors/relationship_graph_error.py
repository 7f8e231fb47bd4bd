"""Relationship graph errors.

Unlike DomainError values, these are raised: tuple writes and deletes
propagate failures to their caller, which records the divergence and keeps
the relational outcome.
"""


class RelationshipGraphError(Exception):
    """Tuple write or delete was not applied by the relationship graph.

    Attributes:
        operation: "write" or "delete".
        tuple_key: Affected tuple (``user#relation@object``).
    """

    def __init__(self, message: str, *, operation: str, tuple_key: str) -> None:
        super().__init__(message)
        self.operation = operation
        self.tuple_key = tuple_key


class InvalidRelationError(RelationshipGraphError):
    """Tuple rejected before any network call (computed relation or bad subject)."""
