"""Credential services - configuration validation and access tokens."""

from selection_gemini.services.credentials.identity_provider import (
    GoogleIdentityProvider,
    IdentityProvider,
    IdentityProviderError,
)
from selection_gemini.services.credentials.credential_resolver import CredentialResolver

__all__ = [
    "CredentialResolver",
    "GoogleIdentityProvider",
    "IdentityProvider",
    "IdentityProviderError",
]
