"""LinkedResearcher domain entity.

An ORCID researcher profile a user follows. Accepting a share request links
the document's researcher to the recipient.
"""

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID


@dataclass
class LinkedResearcher:
    """Researcher linked to a user (unique per user and ORCID).

    Attributes:
        id: Unique link identifier.
        user_id: Owning user.
        orcid_id: Researcher ORCID iD.
        researcher_name: Display name.
        created_at: Timestamp when the link was created.
    """

    id: UUID
    user_id: UUID
    orcid_id: str
    researcher_name: str
    created_at: datetime
