"""Relations and object types of the document authorization model.

Closed enumerations for the policy model so that a typo cannot silently
produce a tuple nobody ever checks.

Relations:
    - OWNER: direct, assignable (the uploader)
    - VIEWER: direct, assignable (owners and accepted share recipients)
    - CAN_VIEW: computed (owner OR viewer), never written
"""

from enum import Enum


class ObjectType(str, Enum):
    """Type names declared by the authorization model."""

    USER = "user"
    DOC = "doc"


class Relation(str, Enum):
    """Relations declared on the ``doc`` type."""

    OWNER = "owner"
    VIEWER = "viewer"
    CAN_VIEW = "can_view"

    @property
    def is_assignable(self) -> bool:
        """Whether tuples may be written for this relation."""
        return self in ASSIGNABLE_RELATIONS


ASSIGNABLE_RELATIONS: frozenset[Relation] = frozenset({Relation.OWNER, Relation.VIEWER})

# Every read-authorization check targets this relation. Owners are mirrored
# into it on upload, so it coincides with CAN_VIEW.
READ_RELATION = Relation.VIEWER
