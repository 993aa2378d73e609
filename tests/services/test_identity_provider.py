"""Unit tests for GoogleIdentityProvider."""

from unittest.mock import MagicMock, patch

import pytest
from google.auth.exceptions import DefaultCredentialsError, RefreshError

from selection_gemini.services import GoogleIdentityProvider, IdentityProviderError


def adc_credentials(token):
    credentials = MagicMock()
    credentials.token = token
    return credentials


class TestGoogleIdentityProvider:
    """Tests for Application Default Credentials token fetching."""

    def test_returns_refreshed_token(self):
        credentials = adc_credentials("ya29.token")

        with patch("google.auth.default", return_value=(credentials, "proj")) as default:
            token = GoogleIdentityProvider().fetch_access_token()

        assert token == "ya29.token"
        credentials.refresh.assert_called_once()
        default.assert_called_once_with(scopes=GoogleIdentityProvider.SCOPES)

    def test_requests_cloud_platform_scope(self):
        assert GoogleIdentityProvider.SCOPES == ["https://www.googleapis.com/auth/cloud-platform"]

    def test_not_logged_in_raises_provider_error(self):
        with patch("google.auth.default", side_effect=DefaultCredentialsError("no ADC")):
            with pytest.raises(IdentityProviderError, match="no ADC"):
                GoogleIdentityProvider().fetch_access_token()

    def test_refresh_failure_raises_provider_error(self):
        credentials = adc_credentials(None)
        credentials.refresh.side_effect = RefreshError("invalid_grant")

        with patch("google.auth.default", return_value=(credentials, None)):
            with pytest.raises(IdentityProviderError, match="invalid_grant"):
                GoogleIdentityProvider().fetch_access_token()

    def test_empty_token_raises_provider_error(self):
        with patch("google.auth.default", return_value=(adc_credentials(None), None)):
            with pytest.raises(IdentityProviderError, match="Failed to obtain access token"):
                GoogleIdentityProvider().fetch_access_token()
