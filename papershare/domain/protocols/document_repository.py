"""DocumentRepository protocol for uploaded PDF records.

Port (interface) for hexagonal architecture. Writes (``save``, ``update``)
are invoked only by the AccessCoordinator so that every relational change
is followed by its tuple mirror.
"""

from typing import Protocol
from uuid import UUID

from papershare.domain.entities.document import Document


class DocumentRepository(Protocol):
    """Document repository protocol (port).

    Methods:
        find_by_id: Retrieve document by ID
        find_by_ids: Retrieve several documents
        find_by_owner_and_work: Retrieve by the (owner, work) unique pair
        list_owned: Documents uploaded by a user
        list_shared_with: Documents a user holds an access grant for
        list_readable: Owned or granted documents (read candidates)
        list_readable_by_work_ids: Readable documents restricted to works
        save: Insert new document
        update: Persist changes of an existing document
        delete: Delete document (grants and requests cascade)
    """

    async def find_by_id(self, document_id: UUID) -> Document | None:
        """Find document by ID.

        Returns:
            Document if found, None otherwise.
        """
        ...

    async def find_by_ids(self, document_ids: list[UUID]) -> list[Document]:
        """Load several documents at once (missing ids are skipped)."""
        ...

    async def find_by_owner_and_work(self, owner_id: UUID, work_id: str) -> Document | None:
        """Find the document a user uploaded for a work.

        Args:
            owner_id: Uploader.
            work_id: External work reference.

        Returns:
            Document if found, None otherwise.
        """
        ...

    async def list_owned(self, owner_id: UUID) -> list[Document]:
        """List documents uploaded by the user, newest first."""
        ...

    async def list_shared_with(self, user_id: UUID) -> list[Document]:
        """List documents the user was granted access to, newest first."""
        ...

    async def list_readable(self, user_id: UUID) -> list[Document]:
        """List documents the user owns or holds a grant for.

        This is the relational candidate set for read flows. Ordered by
        upload time, newest first; each document appears once.
        """
        ...

    async def list_readable_by_work_ids(
        self, user_id: UUID, work_ids: list[str]
    ) -> list[Document]:
        """List readable documents attached to any of the given works."""
        ...

    async def save(self, document: Document) -> None:
        """Insert new document.

        Raises:
            IntegrityError: If the (owner, work) pair already exists.
        """
        ...

    async def update(self, document: Document) -> None:
        """Persist changed fields of an existing document.

        Raises:
            NoResultFound: If the document does not exist.
        """
        ...

    async def delete(self, document_id: UUID) -> bool:
        """Delete document.

        Returns:
            bool: True if a row was deleted.
        """
        ...
