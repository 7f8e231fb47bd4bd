"""User DTOs."""

from dataclasses import dataclass

from papershare.domain.entities import User


@dataclass
class InitializeUserResult:
    """Result of first-login initialization.

    Attributes:
        user: Existing or newly created user.
        is_new_user: True if this call created the user.
    """

    user: User
    is_new_user: bool
