"""Credential Resolver - Validates configuration and produces transport credentials."""

import logging
from typing import Optional, Union

from selection_gemini.core import (
    ApiKeyCredentials,
    AuthMethod,
    CloudIdentityCredentials,
    Configuration,
    Failure,
    FailureKind,
    ResolvedCredentials,
)
from selection_gemini.services.credentials.identity_provider import (
    GoogleIdentityProvider,
    IdentityProvider,
    IdentityProviderError,
)


logger = logging.getLogger(__name__)

GCLOUD_LOGIN_HINT = (
    "Failed to get Google Cloud access token. Please ensure you are authenticated "
    'with Google Cloud (run "gcloud auth application-default login").'
)


class CredentialResolver:
    """
    Turns a configuration snapshot into credentials for exactly one transport.

    Validation happens before any network call; only the cloud identity
    method touches the network, to fetch a fresh token.
    """

    def __init__(self, identity_provider: Optional[IdentityProvider] = None):
        self.identity_provider = identity_provider or GoogleIdentityProvider()

    def resolve(self, config: Configuration) -> Union[ResolvedCredentials, Failure]:
        """
        Resolve credentials for the configured auth method.

        Args:
            config: Settings snapshot for this run.

        Returns:
            ApiKeyCredentials or CloudIdentityCredentials, or a Failure of kind
            ConfigurationInvalid / AuthenticationFailed.
        """
        problem = self.validate(config)
        if problem is not None:
            return Failure(FailureKind.CONFIGURATION_INVALID, problem)

        if config.auth_method is AuthMethod.API_KEY:
            return ApiKeyCredentials(key=config.api_key)

        try:
            token = self.identity_provider.fetch_access_token()
        except IdentityProviderError as exc:
            logger.warning("Access token fetch failed: %s", exc)
            return Failure(FailureKind.AUTHENTICATION_FAILED, GCLOUD_LOGIN_HINT)

        return CloudIdentityCredentials(
            token=token,
            project_id=config.project_id,
            location=config.location,
        )

    @staticmethod
    def validate(config: Configuration) -> Optional[str]:
        """Return a message describing what is missing, or None if the config is usable."""
        if config.auth_method is AuthMethod.API_KEY:
            if not config.api_key:
                return (
                    "Gemini API Key is required for API Key authentication. "
                    "Set GEMINI_API_KEY in your .env file."
                )
        elif config.auth_method is AuthMethod.CLOUD_IDENTITY:
            missing = [
                name
                for name, value in (
                    ("GCP_PROJECT_ID", config.project_id),
                    ("GCP_LOCATION", config.location),
                )
                if not value
            ]
            if missing:
                return (
                    "Google Cloud Project ID and Location are required for Vertex AI "
                    f"authentication. Missing: {', '.join(missing)}."
                )
        else:
            return (
                "Invalid authentication method specified. "
                "Set AUTH_METHOD to 'api_key' or 'cloud_identity'."
            )

        if not config.model_id:
            return "Gemini Model not configured. Set GEMINI_MODEL in your .env file."
        return None
