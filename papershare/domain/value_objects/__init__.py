"""Domain value objects."""

from papershare.domain.value_objects.relationship_tuple import (
    RelationshipTuple,
    document_ref,
    user_ref,
)
from papershare.domain.value_objects.verified_identity import VerifiedIdentity

__all__ = [
    "RelationshipTuple",
    "VerifiedIdentity",
    "document_ref",
    "user_ref",
]
