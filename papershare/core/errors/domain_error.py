"""Expected failures carried as values.

Handlers return ``Failure(error=DomainError(...))`` instead of raising; the
presentation layer turns the error code into an RFC 9457 problem response.
Relationship-graph outages never become a DomainError: reads fail closed
and writes are logged and swallowed by the access coordinator.
"""

from dataclasses import dataclass

from papershare.core.enums import ErrorCode


@dataclass(frozen=True, slots=True, kw_only=True)
class DomainError:
    """A failure a caller is expected to handle.

    Not an Exception subclass. ``details`` holds flat string context such
    as the offending field or the wrapped exception type.
    """

    code: ErrorCode
    message: str
    details: dict[str, str] | None = None

    def __str__(self) -> str:
        return f"{self.code.value}: {self.message}"
