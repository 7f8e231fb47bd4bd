"""Authentication error constants.

Error values (not exceptions) returned in ``Failure`` by the token
verifier, following the railway-oriented pattern used by the handlers.

Example:
    def verify(token: str) -> Result[VerifiedIdentity, str]:
        if not token:
            return Failure(error=AuthenticationError.INVALID_TOKEN)
        ...
"""


class AuthenticationError:
    """Authentication error constants."""

    INVALID_TOKEN = "Invalid or expired token"
    MISSING_IDENTITY_CLAIMS = "Token is missing the subject or email claim"
    VERIFIER_NOT_CONFIGURED = "Token verification is not configured"
    SIGNING_KEY_UNAVAILABLE = "Unable to fetch token signing key"
