"""AccessGrant domain entity.

Relational record that a non-owner may read a document. Created when a share
request is accepted; mirrored as a ``viewer`` tuple in the relationship graph.
"""

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID


@dataclass
class AccessGrant:
    """Read access of one user to one document.

    Attributes:
        id: Unique grant identifier.
        document_id: Shared document.
        user_id: Grantee.
        granted_at: Timestamp when access was granted.
    """

    id: UUID
    document_id: UUID
    user_id: UUID
    granted_at: datetime
