"""Failure constructors shared by command and query handlers.

Each helper builds the domain error, wraps it in an ApplicationError and
returns it as a ``Failure`` so handlers can ``return not_found(...)``.
"""

from papershare.application.errors.application_error import (
    ApplicationError,
    ApplicationErrorCode,
)
from papershare.core.enums import ErrorCode
from papershare.core.errors import (
    AuthorizationError,
    ConflictError,
    NotFoundError,
    ValidationError,
)
from papershare.core.result import Failure


def not_found(
    code: ErrorCode, resource_type: str, resource_id: object, message: str
) -> Failure[ApplicationError]:
    return Failure(
        error=ApplicationError.from_domain_error(
            NotFoundError(
                code=code,
                message=message,
                resource_type=resource_type,
                resource_id=str(resource_id),
            )
        )
    )


def forbidden(
    message: str,
    *,
    code: ErrorCode = ErrorCode.PERMISSION_DENIED,
    required_relation: str | None = None,
) -> Failure[ApplicationError]:
    return Failure(
        error=ApplicationError.from_domain_error(
            AuthorizationError(code=code, message=message, required_relation=required_relation)
        )
    )


def conflict(
    code: ErrorCode,
    resource_type: str,
    message: str,
    *,
    conflicting_field: str | None = None,
) -> Failure[ApplicationError]:
    return Failure(
        error=ApplicationError.from_domain_error(
            ConflictError(
                code=code,
                message=message,
                resource_type=resource_type,
                conflicting_field=conflicting_field,
            )
        )
    )


def invalid(
    message: str,
    *,
    code: ErrorCode = ErrorCode.VALIDATION_FAILED,
    field: str | None = None,
) -> Failure[ApplicationError]:
    return Failure(
        error=ApplicationError.from_domain_error(
            ValidationError(code=code, message=message, field=field)
        )
    )


def execution_failed(message: str, error: Exception) -> Failure[ApplicationError]:
    """Wrap an unexpected persistence or storage error."""
    return Failure(
        error=ApplicationError(
            code=ApplicationErrorCode.COMMAND_EXECUTION_FAILED,
            message=message,
            details={"error_type": type(error).__name__},
        )
    )
