"""In-memory implementation of RelationshipGraphProtocol.

Stores tuples in a set and evaluates computed relations with the document
authorization model, so ``can_view`` resolves exactly as it would against
the real service. Used by the test suite and for local development without
an OpenFGA store.
"""

import asyncio

from papershare.domain.authorization_model import (
    DOCUMENT_MODEL,
    WILDCARD_USER,
    AuthorizationModel,
)
from papershare.domain.enums import READ_RELATION, Relation
from papershare.domain.errors import InvalidRelationError
from papershare.domain.value_objects import RelationshipTuple


class InMemoryRelationshipGraph:
    """Relationship graph held in process memory.

    Writes are idempotent and deleting a missing tuple is a no-op, matching
    the "idempotent grant" behaviour callers rely on.
    """

    def __init__(self, model: AuthorizationModel = DOCUMENT_MODEL) -> None:
        self._model = model
        self._tuples: set[RelationshipTuple] = set()

    @property
    def tuples(self) -> frozenset[RelationshipTuple]:
        """Snapshot of stored tuples."""
        return frozenset(self._tuples)

    def has_tuple(self, user: str, relation: Relation, obj: str) -> bool:
        """Check for a stored (direct) tuple."""
        return RelationshipTuple(user=user, relation=relation, object=obj) in self._tuples

    async def check(self, user: str, relation: Relation, obj: str) -> bool:
        direct = {
            t.relation
            for t in self._tuples
            if t.object == obj and t.user in (user, WILDCARD_USER)
        }
        return self._model.resolves(relation, direct)

    async def write(self, user: str, relation: Relation, obj: str) -> None:
        self._tuples.add(self._validated("write", user, relation, obj))

    async def delete(self, user: str, relation: Relation, obj: str) -> None:
        self._tuples.discard(self._validated("delete", user, relation, obj))

    async def batch_check(
        self, user: str, objects: list[str], relation: Relation = READ_RELATION
    ) -> dict[str, bool]:
        unique = list(dict.fromkeys(objects))
        results = await asyncio.gather(*(self.check(user, relation, obj) for obj in unique))
        return dict(zip(unique, results, strict=True))

    async def list_objects(
        self, user: str, relation: Relation, object_type: str
    ) -> set[str]:
        prefix = f"{object_type}:"
        candidates = {t.object for t in self._tuples if t.object.startswith(prefix)}
        return {obj for obj in candidates if await self.check(user, relation, obj)}

    async def close(self) -> None:
        self._tuples.clear()

    def _validated(
        self, operation: str, user: str, relation: Relation, obj: str
    ) -> RelationshipTuple:
        rel_tuple = RelationshipTuple(user=user, relation=relation, object=obj)
        if not relation.is_assignable or not self._model.accepts_subject(relation, user):
            raise InvalidRelationError(
                f"Tuple not allowed by authorization model: {rel_tuple}",
                operation=operation,
                tuple_key=str(rel_tuple),
            )
        return rel_tuple
