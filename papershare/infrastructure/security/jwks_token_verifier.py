"""JWKS token verifier (adapter).

Implements TokenVerificationProtocol with PyJWT. Access tokens are issued by
an external OAuth provider and signed with keys published at its JWKS
endpoint; this service never issues tokens.

Security:
    - Signature checked against the provider's published keys
    - ``exp``, ``iss`` and ``aud`` validated by PyJWT
    - Email taken from a configurable (namespaced) claim
"""

import asyncio
from typing import Any

import jwt
from jwt.exceptions import InvalidTokenError, PyJWKClientError

from papershare.core.result import Failure, Result, Success
from papershare.domain.errors import AuthenticationError
from papershare.domain.value_objects.verified_identity import VerifiedIdentity


class JWKSTokenVerifier:
    """Verify provider-issued JWTs.

    Usage:
        verifier = JWKSTokenVerifier(
            jwks_client=jwt.PyJWKClient("https://tenant.example/.well-known/jwks.json"),
            issuer="https://tenant.example/",
            audience="https://api.example",
        )
        result = await verifier.verify(token)
    """

    def __init__(
        self,
        jwks_client: jwt.PyJWKClient,
        *,
        issuer: str | None,
        audience: str | None,
        algorithms: list[str] | None = None,
        email_claim: str = "email",
    ) -> None:
        """Initialize verifier.

        Args:
            jwks_client: Key set client (caches fetched keys).
            issuer: Expected ``iss``; not checked when None.
            audience: Expected ``aud``; not checked when None.
            algorithms: Accepted signing algorithms.
            email_claim: Claim holding the verified email. Falls back to the
                standard ``email`` claim.
        """
        self._jwks_client = jwks_client
        self._issuer = issuer
        self._audience = audience
        self._algorithms = algorithms or ["RS256"]
        self._email_claim = email_claim

    async def verify(self, token: str) -> Result[VerifiedIdentity, str]:
        try:
            # Key fetch is blocking I/O on a cache miss
            signing_key = await asyncio.to_thread(
                self._jwks_client.get_signing_key_from_jwt, token
            )
        except PyJWKClientError:
            return Failure(error=AuthenticationError.SIGNING_KEY_UNAVAILABLE)
        except InvalidTokenError:
            return Failure(error=AuthenticationError.INVALID_TOKEN)

        try:
            payload: dict[str, Any] = jwt.decode(
                token,
                signing_key.key,
                algorithms=self._algorithms,
                audience=self._audience,
                issuer=self._issuer,
                options={
                    "require": ["exp", "sub"],
                    "verify_aud": self._audience is not None,
                    "verify_iss": self._issuer is not None,
                },
            )
        except InvalidTokenError:
            return Failure(error=AuthenticationError.INVALID_TOKEN)

        subject = payload.get("sub")
        email = payload.get(self._email_claim) or payload.get("email")
        if not subject or not email:
            return Failure(error=AuthenticationError.MISSING_IDENTITY_CLAIMS)

        return Success(value=VerifiedIdentity(subject=str(subject), email=str(email)))
