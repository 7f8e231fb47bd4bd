"""RelationshipTuple value object.

A (subject, relation, object) fact stored in the relationship graph, e.g.
``user:alice@example.org`` is ``viewer`` of ``doc:0b6c...``.

Subjects are keyed by email (the stable identity lookup key); objects by the
document's UUID, the same identifier the relational store uses.
"""

from dataclasses import dataclass
from uuid import UUID

from papershare.domain.enums import ObjectType, Relation


def user_ref(email: str) -> str:
    """Format a user subject reference (``user:<email>``)."""
    return f"{ObjectType.USER.value}:{email}"


def document_ref(document_id: UUID | str) -> str:
    """Format a document object reference (``doc:<id>``)."""
    return f"{ObjectType.DOC.value}:{document_id}"


@dataclass(frozen=True, slots=True, kw_only=True)
class RelationshipTuple:
    """Immutable relationship tuple.

    Attributes:
        user: Subject reference (``user:<email>``).
        relation: Relation name.
        object: Object reference (``doc:<id>``).

    Example:
        >>> t = RelationshipTuple.for_document("a@x.org", Relation.VIEWER, doc_id)
        >>> t.user
        'user:a@x.org'
    """

    user: str
    relation: Relation
    object: str

    @classmethod
    def for_document(
        cls,
        email: str,
        relation: Relation,
        document_id: UUID | str,
    ) -> "RelationshipTuple":
        """Build a tuple from domain identifiers."""
        return cls(user=user_ref(email), relation=relation, object=document_ref(document_id))

    def __str__(self) -> str:
        return f"{self.user}#{self.relation.value}@{self.object}"
