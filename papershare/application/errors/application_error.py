"""Application layer error types.

Application errors wrap domain errors with the category the presentation
layer needs to pick an HTTP status. Command and query handlers return them
inside ``Failure``.

Exports:
    ApplicationErrorCode: Application-level error code enum
    ApplicationError: Application layer error dataclass
"""

from dataclasses import dataclass
from enum import Enum

from papershare.core.enums import ErrorCode
from papershare.core.errors.domain_error import DomainError


class ApplicationErrorCode(Enum):
    """Application-level error codes.

    Examples:
        >>> error = ApplicationError(
        ...     code=ApplicationErrorCode.CONFLICT,
        ...     message="A share request for this user is already pending",
        ... )
    """

    COMMAND_VALIDATION_FAILED = "command_validation_failed"
    COMMAND_EXECUTION_FAILED = "command_execution_failed"
    QUERY_FAILED = "query_failed"
    UNAUTHORIZED = "unauthorized"
    FORBIDDEN = "forbidden"
    NOT_FOUND = "not_found"
    CONFLICT = "conflict"
    PAYLOAD_TOO_LARGE = "payload_too_large"


# Domain code -> application category. Codes not listed are execution failures.
_DOMAIN_CODE_MAP: dict[ErrorCode, ApplicationErrorCode] = {
    ErrorCode.INVALID_EMAIL: ApplicationErrorCode.COMMAND_VALIDATION_FAILED,
    ErrorCode.INVALID_INPUT: ApplicationErrorCode.COMMAND_VALIDATION_FAILED,
    ErrorCode.VALIDATION_FAILED: ApplicationErrorCode.COMMAND_VALIDATION_FAILED,
    ErrorCode.CANNOT_SHARE_WITH_SELF: ApplicationErrorCode.COMMAND_VALIDATION_FAILED,
    ErrorCode.USER_NOT_FOUND: ApplicationErrorCode.NOT_FOUND,
    ErrorCode.DOCUMENT_NOT_FOUND: ApplicationErrorCode.NOT_FOUND,
    ErrorCode.SHARE_REQUEST_NOT_FOUND: ApplicationErrorCode.NOT_FOUND,
    ErrorCode.ACCESS_GRANT_NOT_FOUND: ApplicationErrorCode.NOT_FOUND,
    ErrorCode.RESEARCHER_NOT_FOUND: ApplicationErrorCode.NOT_FOUND,
    ErrorCode.USER_ALREADY_EXISTS: ApplicationErrorCode.CONFLICT,
    ErrorCode.SHARE_REQUEST_ALREADY_EXISTS: ApplicationErrorCode.CONFLICT,
    ErrorCode.RESEARCHER_ALREADY_LINKED: ApplicationErrorCode.CONFLICT,
    ErrorCode.RESOURCE_CONFLICT: ApplicationErrorCode.CONFLICT,
    ErrorCode.AUTHENTICATION_FAILED: ApplicationErrorCode.UNAUTHORIZED,
    ErrorCode.TOKEN_INVALID: ApplicationErrorCode.UNAUTHORIZED,
    ErrorCode.PERMISSION_DENIED: ApplicationErrorCode.FORBIDDEN,
    ErrorCode.RESOURCE_NOT_OWNED: ApplicationErrorCode.FORBIDDEN,
}


@dataclass(frozen=True, slots=True, kw_only=True)
class ApplicationError:
    """Application layer error.

    Attributes:
        code: Application error code (from ApplicationErrorCode enum)
        message: Human-readable error message
        domain_error: Original domain error (if error originated from domain layer)
        details: Additional context as key-value pairs

    Examples:
        >>> error = ApplicationError.from_domain_error(
        ...     NotFoundError(
        ...         code=ErrorCode.DOCUMENT_NOT_FOUND,
        ...         message="Document not found",
        ...         resource_type="Document",
        ...         resource_id=str(document_id),
        ...     )
        ... )
        >>> error.code
        <ApplicationErrorCode.NOT_FOUND: 'not_found'>
    """

    code: ApplicationErrorCode
    message: str
    domain_error: DomainError | None = None
    details: dict[str, str] | None = None

    @classmethod
    def from_domain_error(cls, error: DomainError) -> "ApplicationError":
        """Wrap a domain error, deriving the application code from its ErrorCode."""
        return cls(
            code=_DOMAIN_CODE_MAP.get(error.code, ApplicationErrorCode.COMMAND_EXECUTION_FAILED),
            message=error.message,
            domain_error=error,
            details=error.details,
        )
