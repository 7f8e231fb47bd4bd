"""Identity asserted by a verified bearer token."""

from dataclasses import dataclass


@dataclass(frozen=True, slots=True, kw_only=True)
class VerifiedIdentity:
    """Verified token claims.

    Attributes:
        subject: Identity provider subject (``sub``).
        email: Verified email (from the configured email claim).
    """

    subject: str
    email: str
