"""Document queries (CQRS read operations).

Queries represent requests for data. They never change state.
"""

from dataclasses import dataclass, field
from uuid import UUID


@dataclass(frozen=True, kw_only=True)
class GetDocument:
    """Load a document the user may read (download / chat context)."""

    user_id: UUID
    user_email: str
    document_id: UUID


@dataclass(frozen=True, kw_only=True)
class ListDocumentStatus:
    """Report, per work id, the readable PDF attached to it.

    Attributes:
        user_id: Requesting user.
        work_ids: Work ids to look up.
    """

    user_id: UUID
    work_ids: list[str] = field(default_factory=list)


@dataclass(frozen=True, kw_only=True)
class ListAccessibleDocuments:
    """List every document the user owns or was granted and the graph allows.

    Attributes:
        user_id: Requesting user.
        user_email: Requesting user's email (graph subject).
    """

    user_id: UUID
    user_email: str


@dataclass(frozen=True, kw_only=True)
class ListSuggestionCandidates:
    """Produce the authorized candidate set for suggestion ranking.

    Attributes:
        user_id: Requesting user.
        user_email: Requesting user's email (graph subject).
    """

    user_id: UUID
    user_email: str
