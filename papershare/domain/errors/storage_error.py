"""File storage errors."""


class FileTooLargeError(Exception):
    """Upload exceeded the configured size limit.

    Attributes:
        limit_bytes: Maximum accepted size.
    """

    def __init__(self, limit_bytes: int) -> None:
        super().__init__(f"File exceeds {limit_bytes} bytes")
        self.limit_bytes = limit_bytes
