"""Access coordinator (dual-write of relational rows and graph tuples).

Single owner of every change that must be mirrored into the relationship
graph. Each operation follows the same order:

    1. Write the relational store and commit (authoritative)
    2. Mirror the change as tuple writes/deletes (best effort)

A tuple failure never undoes or fails the relational change. It is logged
with the subject, object, relation and error, published as a
RelationshipSyncFailed event, and swallowed. Callers learn whether the graph
was updated from the boolean results of ``grant_access``/``revoke_access``.

In degraded mode (no store configured) step 2 is skipped entirely.
"""

from typing import TYPE_CHECKING
from uuid import UUID

from papershare.domain.entities import AccessGrant, Document
from papershare.domain.enums import Relation
from papershare.domain.events import RelationshipSyncFailed
from papershare.domain.value_objects import RelationshipTuple

if TYPE_CHECKING:
    from papershare.application.services.authorization_mode import AuthorizationMode
    from papershare.domain.protocols import (
        AccessGrantRepository,
        DocumentRepository,
        EventBusProtocol,
        LoggerProtocol,
        RelationshipGraphProtocol,
    )

# Relations written for an uploader. Owners also hold ``viewer`` so that
# every read check can target a single relation.
OWNER_RELATIONS: tuple[Relation, ...] = (Relation.OWNER, Relation.VIEWER)


class AccessCoordinator:
    """Keeps relational access records and relationship tuples in step.

    Dependencies (injected via constructor):
        - DocumentRepository: document rows
        - AccessGrantRepository: access grant rows
        - RelationshipGraphProtocol: tuple mirror (None in degraded mode)
        - AuthorizationMode: degraded-mode switch
        - EventBusProtocol: RelationshipSyncFailed publication
        - LoggerProtocol: structured logging

    Example:
        >>> coordinator = AccessCoordinator(
        ...     document_repo=document_repo,
        ...     access_grant_repo=grant_repo,
        ...     graph=graph,
        ...     mode=AuthorizationMode(graph_enabled=True, store_id="01H..."),
        ...     event_bus=event_bus,
        ...     logger=logger,
        ... )
        >>> await coordinator.register_document(document, "ada@example.org", is_new=True)
    """

    def __init__(
        self,
        *,
        document_repo: "DocumentRepository",
        access_grant_repo: "AccessGrantRepository",
        graph: "RelationshipGraphProtocol | None",
        mode: "AuthorizationMode",
        event_bus: "EventBusProtocol",
        logger: "LoggerProtocol",
    ) -> None:
        self._document_repo = document_repo
        self._access_grant_repo = access_grant_repo
        self._graph = graph
        self._mode = mode
        self._event_bus = event_bus
        self._logger = logger

    # ═══════════════════════════════════════════════════════════════
    # Business operations (relational write, then tuple mirror)
    # ═══════════════════════════════════════════════════════════════

    async def register_document(
        self, document: Document, owner_email: str, *, is_new: bool
    ) -> None:
        """Persist an uploaded document and mirror its ownership.

        The owner receives both ``owner`` and ``viewer`` tuples. Re-uploads
        write them again, which repairs a mirror lost to an earlier failure.

        Args:
            document: Document to insert or update.
            owner_email: Uploader's email (tuple subject).
            is_new: True to insert, False to update an existing row.

        Raises:
            IntegrityError: If the relational write violates a constraint.
                No tuple is written in that case.
        """
        if is_new:
            await self._document_repo.save(document)
        else:
            await self._document_repo.update(document)

        for relation in OWNER_RELATIONS:
            await self.grant_access(owner_email, document.id, relation)

    async def record_share_acceptance(self, grant: AccessGrant, recipient_email: str) -> bool:
        """Persist an access grant and mirror it as a ``viewer`` tuple.

        The grant insert is idempotent; the tuple is written in both cases.

        Args:
            grant: Grant created from the accepted share request.
            recipient_email: Recipient's email (tuple subject).

        Returns:
            bool: True if a new grant row was inserted.
        """
        created = await self._access_grant_repo.save(grant)
        await self.grant_access(recipient_email, grant.document_id, Relation.VIEWER)
        return created

    async def remove_access(self, document_id: UUID, user_id: UUID, user_email: str) -> bool:
        """Delete an access grant and its ``viewer`` tuple.

        The tuple delete runs even when no grant row was left, so repeating a
        revoke clears a tuple an earlier failed delete left behind.

        Returns:
            bool: True if a grant row existed and was deleted.
        """
        deleted = await self._access_grant_repo.delete(document_id, user_id)
        await self.revoke_access(user_email, document_id, Relation.VIEWER)
        return deleted

    async def remove_document(
        self, document: Document, owner_email: str, grantee_emails: list[str]
    ) -> bool:
        """Delete a document row and every tuple that referenced it.

        Grants and pending share requests go with the row (cascade).

        Args:
            document: Document to delete.
            owner_email: Owner's email.
            grantee_emails: Emails of users holding grants on the document,
                collected before deletion.

        Returns:
            bool: True if the row was deleted.
        """
        deleted = await self._document_repo.delete(document.id)
        if not deleted:
            return False

        for relation in OWNER_RELATIONS:
            await self.revoke_access(owner_email, document.id, relation)
        for email in grantee_emails:
            await self.revoke_access(email, document.id, Relation.VIEWER)
        return True

    # ═══════════════════════════════════════════════════════════════
    # Tuple-side contract
    # ═══════════════════════════════════════════════════════════════

    async def grant_access(
        self, user_email: str, document_id: UUID, relation: Relation = Relation.VIEWER
    ) -> bool:
        """Write a tuple; never raises.

        Returns:
            bool: True if the graph accepted the tuple. False in degraded
            mode or on failure (already logged and published).
        """
        return await self._sync("write", user_email, document_id, relation)

    async def revoke_access(
        self, user_email: str, document_id: UUID, relation: Relation = Relation.VIEWER
    ) -> bool:
        """Delete a tuple; never raises.

        Returns:
            bool: True if the graph applied the delete.
        """
        return await self._sync("delete", user_email, document_id, relation)

    async def _sync(
        self, operation: str, user_email: str, document_id: UUID, relation: Relation
    ) -> bool:
        if self._mode.is_degraded or self._graph is None:
            return False

        rel_tuple = RelationshipTuple.for_document(user_email, relation, document_id)
        try:
            if operation == "write":
                await self._graph.write(rel_tuple.user, relation, rel_tuple.object)
            else:
                await self._graph.delete(rel_tuple.user, relation, rel_tuple.object)
        except Exception as e:
            # Relational change stands; record the divergence and move on
            self._logger.error(
                "relationship_tuple_write_failed"
                if operation == "write"
                else "relationship_tuple_delete_failed",
                error=e,
                user=rel_tuple.user,
                relation=relation.value,
                object=rel_tuple.object,
            )
            await self._event_bus.publish(
                RelationshipSyncFailed(
                    operation=operation,
                    user=rel_tuple.user,
                    relation=relation.value,
                    object=rel_tuple.object,
                    reason=str(e),
                )
            )
            return False

        self._logger.debug(
            "relationship_tuple_written" if operation == "write" else "relationship_tuple_deleted",
            user=rel_tuple.user,
            relation=relation.value,
            object=rel_tuple.object,
        )
        return True
