"""Domain-level error codes (machine-readable).

Error codes follow ENTITY_ACTION_REASON naming convention.
Used with Result types for railway-oriented programming.
"""

from enum import Enum


class ErrorCode(Enum):
    """Domain-level error codes (machine-readable)."""

    # Validation errors
    INVALID_EMAIL = "invalid_email"
    INVALID_INPUT = "invalid_input"
    VALIDATION_FAILED = "validation_failed"
    CANNOT_SHARE_WITH_SELF = "cannot_share_with_self"

    # Resource errors
    USER_NOT_FOUND = "user_not_found"
    DOCUMENT_NOT_FOUND = "document_not_found"
    SHARE_REQUEST_NOT_FOUND = "share_request_not_found"
    ACCESS_GRANT_NOT_FOUND = "access_grant_not_found"
    RESEARCHER_NOT_FOUND = "researcher_not_found"

    # Conflict errors
    USER_ALREADY_EXISTS = "user_already_exists"
    SHARE_REQUEST_ALREADY_EXISTS = "share_request_already_exists"
    RESEARCHER_ALREADY_LINKED = "researcher_already_linked"
    RESOURCE_CONFLICT = "resource_conflict"

    # Authentication errors
    AUTHENTICATION_FAILED = "authentication_failed"
    TOKEN_INVALID = "token_invalid"

    # Authorization errors
    PERMISSION_DENIED = "permission_denied"
    RESOURCE_NOT_OWNED = "resource_not_owned"

    # Infrastructure-facing errors
    DATABASE_ERROR = "database_error"
    STORAGE_ERROR = "storage_error"
