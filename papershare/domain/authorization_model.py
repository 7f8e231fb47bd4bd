"""Document authorization model (relationship-based policy).

Declarative schema evaluated by the relationship graph:

    type user
    type doc
      owner:    [user]
      viewer:   [user, user:*]
      can_view: owner or viewer

The model is provisioned out of band (``MODEL_DSL`` or ``to_json()`` is what
gets uploaded to the store); the running service only targets a model id
from configuration. ``resolves()`` lets in-process graph adapters compute
``can_view`` the same way the remote service does.

Reference:
    - OpenFGA modeling language, schema 1.1
"""

from dataclasses import dataclass, field
from typing import Any

from papershare.domain.enums import ObjectType, Relation

SCHEMA_VERSION = "1.1"

# Subject type restriction for the public ("all users") wildcard.
WILDCARD_USER = f"{ObjectType.USER.value}:*"

MODEL_DSL = """\
model
  schema 1.1

type user

type doc
  relations
    define owner: [user]
    define viewer: [user, user:*]
    define can_view: owner or viewer
"""


@dataclass(frozen=True, slots=True, kw_only=True)
class RelationDefinition:
    """One relation on a type.

    Attributes:
        relation: Relation name.
        subject_types: Subject types allowed on direct tuples (empty for
            computed relations). ``user:*`` allows the wildcard subject.
        union_of: Relations whose union defines this one (computed only).
    """

    relation: Relation
    subject_types: tuple[str, ...] = ()
    union_of: tuple[Relation, ...] = ()

    @property
    def is_computed(self) -> bool:
        return bool(self.union_of)


@dataclass(frozen=True, slots=True, kw_only=True)
class AuthorizationModel:
    """Typed, immutable view of the authorization model.

    Attributes:
        schema_version: Modeling language schema version.
        relations: Relation definitions on the ``doc`` type.
    """

    schema_version: str = SCHEMA_VERSION
    relations: tuple[RelationDefinition, ...] = field(default_factory=tuple)

    def definition(self, relation: Relation) -> RelationDefinition:
        """Return the definition of a ``doc`` relation.

        Raises:
            KeyError: If the relation is not declared by the model.
        """
        for definition in self.relations:
            if definition.relation is relation:
                return definition
        raise KeyError(relation.value)

    def accepts_subject(self, relation: Relation, subject: str) -> bool:
        """Check a subject reference against the relation's type restrictions.

        Args:
            relation: Directly assignable relation.
            subject: Subject reference (``user:<id>`` or ``user:*``).

        Returns:
            bool: True if a tuple with this subject may be written.
        """
        definition = self.definition(relation)
        if definition.is_computed:
            return False
        if subject == WILDCARD_USER:
            return WILDCARD_USER in definition.subject_types
        subject_type = subject.split(":", 1)[0]
        return subject_type in definition.subject_types

    def resolves(self, relation: Relation, direct: set[Relation]) -> bool:
        """Evaluate ``relation`` given the directly held relations.

        Args:
            relation: Relation being checked (direct or computed).
            direct: Relations the subject holds through stored tuples.

        Returns:
            bool: True if the relation holds.

        Example:
            >>> DOCUMENT_MODEL.resolves(Relation.CAN_VIEW, {Relation.OWNER})
            True
        """
        definition = self.definition(relation)
        if not definition.is_computed:
            return relation in direct
        return any(self.resolves(child, direct) for child in definition.union_of)

    def to_json(self) -> dict[str, Any]:
        """Render the model in the authorization-model JSON format.

        Returns:
            dict: Payload accepted by the ``WriteAuthorizationModel`` API.
        """
        rewrites: dict[str, Any] = {}
        metadata: dict[str, Any] = {}
        for definition in self.relations:
            name = definition.relation.value
            if definition.is_computed:
                rewrites[name] = {
                    "union": {
                        "child": [
                            {"computedUserset": {"relation": child.value}}
                            for child in definition.union_of
                        ]
                    }
                }
                continue
            rewrites[name] = {"this": {}}
            metadata[name] = {
                "directly_related_user_types": [
                    {"type": ObjectType.USER.value, "wildcard": {}}
                    if subject == WILDCARD_USER
                    else {"type": subject}
                    for subject in definition.subject_types
                ]
            }
        return {
            "schema_version": self.schema_version,
            "type_definitions": [
                {"type": ObjectType.USER.value},
                {
                    "type": ObjectType.DOC.value,
                    "relations": rewrites,
                    "metadata": {"relations": metadata},
                },
            ],
        }


DOCUMENT_MODEL = AuthorizationModel(
    relations=(
        RelationDefinition(
            relation=Relation.OWNER,
            subject_types=(ObjectType.USER.value,),
        ),
        RelationDefinition(
            relation=Relation.VIEWER,
            subject_types=(ObjectType.USER.value, WILDCARD_USER),
        ),
        RelationDefinition(
            relation=Relation.CAN_VIEW,
            union_of=(Relation.OWNER, Relation.VIEWER),
        ),
    ),
)
