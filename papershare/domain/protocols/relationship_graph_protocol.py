"""Relationship graph protocol (port).

Contract for the relationship-based authorization service that stores
(user, relation, object) tuples and answers checks against the document
authorization model (see ``papershare.domain.authorization_model``).

Implementations:
    - OpenFGAAdapter: production (OpenFGA HTTP API via openfga-sdk)
    - InMemoryRelationshipGraph: tests and local development

Error Handling:
    Reads fail closed: ``check``/``batch_check``/``list_objects`` never
    raise; any transport or server error is logged and reported as "no
    access". Writes raise: ``write``/``delete`` propagate errors so the
    caller (AccessCoordinator) decides how to record the divergence.
"""

from typing import Protocol

from papershare.domain.enums import READ_RELATION, Relation


class RelationshipGraphProtocol(Protocol):
    """Protocol for relationship graph clients.

    References are preformatted strings: subjects ``user:<email>``, objects
    ``doc:<document-id>`` (see ``papershare.domain.value_objects``).
    """

    async def check(self, user: str, relation: Relation, obj: str) -> bool:
        """Check whether ``user`` holds ``relation`` on ``obj``.

        Args:
            user: Subject reference.
            relation: Relation to evaluate (direct or computed).
            obj: Object reference.

        Returns:
            bool: True only if the service affirmatively allowed the check.
            False on denial or on any error.
        """
        ...

    async def write(self, user: str, relation: Relation, obj: str) -> None:
        """Add a tuple.

        Args:
            user: Subject reference.
            relation: Assignable relation (OWNER or VIEWER).
            obj: Object reference.

        Raises:
            RelationshipGraphError: If the service rejects the write or is
                unreachable.
        """
        ...

    async def delete(self, user: str, relation: Relation, obj: str) -> None:
        """Remove a tuple.

        Raises:
            RelationshipGraphError: If the service rejects the delete or is
                unreachable.
        """
        ...

    async def batch_check(
        self, user: str, objects: list[str], relation: Relation = READ_RELATION
    ) -> dict[str, bool]:
        """Check one subject against many objects concurrently.

        Args:
            user: Subject reference.
            objects: Object references.
            relation: Relation to evaluate (defaults to the read relation).

        Returns:
            dict[str, bool]: One entry per distinct object. An object whose
            individual check failed maps to False.
        """
        ...

    async def list_objects(
        self, user: str, relation: Relation, object_type: str
    ) -> set[str]:
        """Enumerate objects of ``object_type`` on which ``user`` holds ``relation``.

        Returns:
            set[str]: Object references; empty on any error.
        """
        ...

    async def close(self) -> None:
        """Release the underlying transport."""
        ...
