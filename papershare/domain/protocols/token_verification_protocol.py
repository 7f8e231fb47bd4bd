"""Token verification protocol (port).

Access tokens are issued by an external identity provider; the service only
verifies them.
"""

from typing import Protocol

from papershare.core.result import Result
from papershare.domain.value_objects.verified_identity import VerifiedIdentity


class TokenVerificationProtocol(Protocol):
    """Verifies bearer tokens and extracts the caller's identity.

    Implementations:
        - JWKSTokenVerifier: RS256 tokens checked against the provider JWKS
    """

    async def verify(self, token: str) -> Result[VerifiedIdentity, str]:
        """Verify signature, expiry, issuer and audience.

        Args:
            token: Raw bearer token.

        Returns:
            Success(VerifiedIdentity) when valid, Failure(error message)
            otherwise. Never raises for bad tokens.
        """
        ...
