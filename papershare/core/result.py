"""Result types for railway-oriented programming.

Handlers return a Result instead of raising for expected failures (not found,
not owned, duplicate share request). Exceptions stay reserved for programming
errors and infrastructure faults that nobody upstream can act on.

Usage:
    async def find_owned(doc_id: UUID, user_id: UUID) -> Result[Document, str]:
        document = await repo.find_by_id(doc_id)
        if document is None or document.owner_id != user_id:
            return Failure(error="Document not found")
        return Success(value=document)

    match await find_owned(doc_id, user_id):
        case Success(value=document):
            ...
        case Failure(error=error):
            ...
"""

from dataclasses import dataclass
from typing import Generic, TypeVar

T = TypeVar("T")  # Success type
E = TypeVar("E")  # Error type


@dataclass(frozen=True, slots=True, kw_only=True)
class Success(Generic[T]):
    """Successful operation result.

    Attributes:
        value: The successful result value.
    """

    value: T


@dataclass(frozen=True, slots=True, kw_only=True)
class Failure(Generic[E]):
    """Failed operation result.

    Attributes:
        error: The error that occurred.
    """

    error: E


type Result[T, E] = Success[T] | Failure[E]
