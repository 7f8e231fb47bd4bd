"""Domain enums."""

from papershare.domain.enums.relation import (
    ASSIGNABLE_RELATIONS,
    READ_RELATION,
    ObjectType,
    Relation,
)

__all__ = [
    "ASSIGNABLE_RELATIONS",
    "READ_RELATION",
    "ObjectType",
    "Relation",
]
