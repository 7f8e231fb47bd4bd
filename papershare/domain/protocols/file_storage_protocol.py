"""File storage protocol (port) for uploaded PDFs."""

from collections.abc import AsyncIterator
from pathlib import Path
from typing import Protocol


class FileStorageProtocol(Protocol):
    """Stores uploaded files under generated names.

    Implementations:
        - LocalFileStorage: directory on local disk
    """

    async def save(self, chunks: AsyncIterator[bytes], *, suffix: str = ".pdf") -> str:
        """Persist a stream of bytes under a new unique name.

        Args:
            chunks: Async iterator of file chunks.
            suffix: File extension of the stored name.

        Returns:
            str: Stored file name.

        Raises:
            FileTooLargeError: If the stream exceeds the configured limit
                (the partial file is removed).
        """
        ...

    async def delete(self, file_name: str) -> bool:
        """Remove a stored file.

        Returns:
            bool: True if a file was removed, False if it did not exist.
        """
        ...

    def path_for(self, file_name: str) -> Path:
        """Return the absolute path of a stored file."""
        ...
