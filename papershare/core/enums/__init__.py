"""Core enums shared across layers."""

from papershare.core.enums.environment import Environment
from papershare.core.enums.error_code import ErrorCode

__all__ = [
    "Environment",
    "ErrorCode",
]
