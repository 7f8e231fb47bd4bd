"""Batch authorization filter.

Narrows a relationally-derived candidate set to the documents the
relationship graph says the user may view. Sits in front of every consumer
that would otherwise see document content (suggestion ranking, chat context,
downloads).

Behaviour:
    - Empty candidate list: returned immediately, no graph call
    - Degraded mode: candidates pass through unchanged
    - Otherwise: one concurrent batch of ``viewer`` checks; a failed check
      excludes only its own document
    - Output preserves candidate order
"""

from dataclasses import dataclass
from typing import TYPE_CHECKING
from uuid import UUID

from papershare.domain.enums import READ_RELATION
from papershare.domain.value_objects import document_ref, user_ref

if TYPE_CHECKING:
    from papershare.application.services.authorization_mode import AuthorizationMode
    from papershare.domain.protocols import LoggerProtocol, RelationshipGraphProtocol


@dataclass(frozen=True, slots=True, kw_only=True)
class AuthorizationFilterResult:
    """Outcome of a batch filter.

    Attributes:
        authorized_ids: Candidates that passed, in candidate order.
        total_candidates: Number of candidates examined.
    """

    authorized_ids: list[UUID]
    total_candidates: int

    @property
    def authorized_count(self) -> int:
        return len(self.authorized_ids)


class AuthorizationFilter:
    """Relationship-graph read authorization for documents.

    Dependencies (injected via constructor):
        - RelationshipGraphProtocol: decision source (None in degraded mode)
        - AuthorizationMode: degraded-mode switch
        - LoggerProtocol: structured logging
    """

    def __init__(
        self,
        *,
        graph: "RelationshipGraphProtocol | None",
        mode: "AuthorizationMode",
        logger: "LoggerProtocol",
    ) -> None:
        self._graph = graph
        self._mode = mode
        self._logger = logger

    def _active_graph(self) -> "RelationshipGraphProtocol | None":
        if self._mode.is_degraded:
            return None
        return self._graph

    async def filter_authorized(
        self, user_email: str, document_ids: list[UUID]
    ) -> AuthorizationFilterResult:
        """Keep the candidates the user may view.

        Args:
            user_email: Requesting user's email.
            document_ids: Candidate document ids (order is preserved).

        Returns:
            AuthorizationFilterResult: Authorized subset and candidate count.

        Example:
            >>> result = await authz_filter.filter_authorized(email, [d1, d2, d3])
            >>> result.authorized_ids
            [d1, d3]
        """
        total = len(document_ids)
        if total == 0:
            return AuthorizationFilterResult(authorized_ids=[], total_candidates=0)

        graph = self._active_graph()
        if graph is None:
            return AuthorizationFilterResult(
                authorized_ids=list(document_ids), total_candidates=total
            )

        refs = [document_ref(document_id) for document_id in document_ids]
        decisions = await graph.batch_check(user_ref(user_email), refs, READ_RELATION)
        authorized = [
            document_id
            for document_id, ref in zip(document_ids, refs, strict=True)
            if decisions.get(ref, False)
        ]

        self._logger.info(
            "authorization_filter_applied",
            user=user_ref(user_email),
            authorized=len(authorized),
            total=total,
            summary=f"{len(authorized)} of {total} documents authorized",
        )
        return AuthorizationFilterResult(authorized_ids=authorized, total_candidates=total)

    async def is_authorized(self, user_email: str, document_id: UUID) -> bool:
        """Single-document read check.

        Returns:
            bool: Graph decision; True in degraded mode, where the caller's
            relational check is the only gate.
        """
        graph = self._active_graph()
        if graph is None:
            return True
        return await graph.check(
            user_ref(user_email), READ_RELATION, document_ref(document_id)
        )

