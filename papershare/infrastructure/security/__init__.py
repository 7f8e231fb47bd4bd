"""Security adapters (identity token verification)."""

from papershare.infrastructure.security.jwks_token_verifier import JWKSTokenVerifier

__all__ = ["JWKSTokenVerifier"]
