"""Application layer errors.

Exports:
    ApplicationError: Application layer error dataclass
    ApplicationErrorCode: Application-level error code enum
    conflict, execution_failed, forbidden, invalid, not_found: Failure helpers
"""

from papershare.application.errors.application_error import (
    ApplicationError,
    ApplicationErrorCode,
)
from papershare.application.errors.failures import (
    conflict,
    execution_failed,
    forbidden,
    invalid,
    not_found,
)

__all__ = [
    "ApplicationError",
    "ApplicationErrorCode",
    "conflict",
    "execution_failed",
    "forbidden",
    "invalid",
    "not_found",
]
