"""Local disk storage for uploaded PDFs.

Files are streamed to disk in chunks with ``aiofiles`` and stored under
random names; the client-supplied name only lives in the database.
"""

from collections.abc import AsyncIterator
from pathlib import Path
from uuid import uuid4

import aiofiles
import aiofiles.os

from papershare.domain.errors import FileTooLargeError


class LocalFileStorage:
    """FileStorageProtocol implementation backed by a directory.

    Attributes:
        root: Upload directory (created on init).
        max_bytes: Maximum accepted size of a single file.
    """

    def __init__(self, root: str | Path, max_bytes: int) -> None:
        self.root = Path(root).resolve()
        self.max_bytes = max_bytes
        self.root.mkdir(parents=True, exist_ok=True)

    async def save(self, chunks: AsyncIterator[bytes], *, suffix: str = ".pdf") -> str:
        """Stream chunks into a new file.

        Raises:
            FileTooLargeError: Limit exceeded; the partial file is removed.
            OSError: Disk write failed; the partial file is removed.
        """
        file_name = f"{uuid4().hex}{suffix}"
        path = self.root / file_name
        written = 0
        try:
            async with aiofiles.open(path, "wb") as out_file:
                async for chunk in chunks:
                    written += len(chunk)
                    if written > self.max_bytes:
                        raise FileTooLargeError(self.max_bytes)
                    await out_file.write(chunk)
        except (FileTooLargeError, OSError):
            await self.delete(file_name)
            raise
        return file_name

    async def delete(self, file_name: str) -> bool:
        try:
            await aiofiles.os.remove(self.path_for(file_name))
        except FileNotFoundError:
            return False
        return True

    def path_for(self, file_name: str) -> Path:
        # Stored names are generated here; reject anything that escapes root.
        path = (self.root / file_name).resolve()
        if path.parent != self.root:
            raise ValueError(f"Invalid stored file name: {file_name!r}")
        return path
