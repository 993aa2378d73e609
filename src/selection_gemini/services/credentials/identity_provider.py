"""Identity providers - Bearer tokens for the cloud identity transport."""

import logging
from abc import ABC, abstractmethod

import google.auth
from google.auth.exceptions import GoogleAuthError
from google.auth.transport.requests import Request


logger = logging.getLogger(__name__)


class IdentityProviderError(RuntimeError):
    """Raised when no access token can be produced."""


class IdentityProvider(ABC):
    """Abstract source of short-lived access tokens."""

    @abstractmethod
    def fetch_access_token(self) -> str:
        """
        Return a bearer token scoped for Google Cloud.

        Raises:
            IdentityProviderError: if the ambient login cannot produce a token.
        """
        pass


class GoogleIdentityProvider(IdentityProvider):
    """
    Token source backed by Application Default Credentials.

    Every call refreshes the credentials; tokens are never cached here.
    """

    SCOPES = ["https://www.googleapis.com/auth/cloud-platform"]

    def fetch_access_token(self) -> str:
        try:
            credentials, project = google.auth.default(scopes=self.SCOPES)
            credentials.refresh(Request())
        except GoogleAuthError as exc:
            raise IdentityProviderError(str(exc)) from exc

        if not credentials.token:
            raise IdentityProviderError("Failed to obtain access token")

        logger.debug("Obtained access token for ADC project %s", project)
        return credentials.token
