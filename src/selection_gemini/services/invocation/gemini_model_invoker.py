"""Gemini Model Invoker - Runs generateContent over the API key SDK or Vertex AI REST."""

import logging
from typing import Any, Optional

import google.genai as genai
import httpx
from google.genai import types

from selection_gemini.core import (
    ApiKeyCredentials,
    CloudIdentityCredentials,
    Failure,
    FailureKind,
    InvocationResult,
    ResolvedCredentials,
)
from selection_gemini.services.invocation.model_invoker import ModelInvoker
from selection_gemini.services.invocation.response_extraction import (
    SAFETY_CATEGORIES,
    SAFETY_THRESHOLD,
    build_request_body,
    extract_text,
)


logger = logging.getLogger(__name__)

VERTEX_ENDPOINT_TEMPLATE = (
    "https://{location}-aiplatform.googleapis.com/v1/projects/{project_id}"
    "/locations/{location}/publishers/google/models/{model_id}:generateContent"
)


class GeminiModelInvoker(ModelInvoker):
    """
    Model invoker for Gemini with two mutually exclusive transports.

    ApiKeyCredentials go through the google.genai SDK. CloudIdentityCredentials
    go through a plain POST to the regional Vertex AI endpoint. Both send the
    same message and safety settings and share one response extractor.
    """

    REQUEST_TIMEOUT_SECONDS = 30.0

    def __init__(self, http_client: Optional[httpx.Client] = None):
        """
        Args:
            http_client: Client for the REST transport. A short-lived client
                         is opened per call when omitted.
        """
        self._http_client = http_client

    def invoke(
        self,
        prompt: str,
        credentials: ResolvedCredentials,
        model_id: str,
    ) -> InvocationResult:
        logger.debug("Invoking model %s with a %d-char prompt", model_id, len(prompt))

        if isinstance(credentials, ApiKeyCredentials):
            result = self._invoke_with_api_key(prompt, credentials, model_id)
        elif isinstance(credentials, CloudIdentityCredentials):
            result = self._invoke_with_cloud_identity(prompt, credentials, model_id)
        else:
            result = Failure(
                FailureKind.UNKNOWN,
                f"Unsupported credentials: {type(credentials).__name__}",
            )

        if result.is_error:
            logger.warning("Gemini request failed (%s): %s", result.kind.value, result.message)
        else:
            logger.debug("Gemini response received (%d chars)", len(result.text))
        return result

    def _invoke_with_api_key(
        self,
        prompt: str,
        credentials: ApiKeyCredentials,
        model_id: str,
    ) -> InvocationResult:
        try:
            client = genai.Client(
                api_key=credentials.key,
                http_options=types.HttpOptions(
                    timeout=int(self.REQUEST_TIMEOUT_SECONDS * 1000),
                ),
            )

            response = client.models.generate_content(
                model=model_id,
                contents=[
                    types.Content(role="user", parts=[types.Part(text=prompt)]),
                ],
                config=types.GenerateContentConfig(
                    safety_settings=[
                        types.SafetySetting(category=category, threshold=SAFETY_THRESHOLD)
                        for category in SAFETY_CATEGORIES
                    ],
                ),
            )
        except httpx.HTTPError as exc:
            return Failure(FailureKind.TRANSPORT_ERROR, f"Could not reach Gemini API: {exc}")
        except Exception as exc:
            return classify_error_message(str(exc))

        payload = response.model_dump(mode="json", by_alias=True, exclude_none=True)
        return extract_text(payload)

    def _invoke_with_cloud_identity(
        self,
        prompt: str,
        credentials: CloudIdentityCredentials,
        model_id: str,
    ) -> InvocationResult:
        url = VERTEX_ENDPOINT_TEMPLATE.format(
            location=credentials.location,
            project_id=credentials.project_id,
            model_id=model_id,
        )
        headers = {
            "Authorization": f"Bearer {credentials.token}",
            "Content-Type": "application/json",
        }

        try:
            response = self._post(url, build_request_body(prompt), headers)
        except httpx.HTTPError as exc:
            return Failure(FailureKind.TRANSPORT_ERROR, f"Could not reach Vertex AI: {exc}")

        if not response.is_success:
            return Failure(
                FailureKind.TRANSPORT_ERROR,
                f"Vertex AI API error: {response.status_code} "
                f"{response.reason_phrase} - {response.text}",
            )

        try:
            payload = response.json()
        except ValueError:
            return Failure(
                FailureKind.TRANSPORT_ERROR,
                "Vertex AI returned a response that is not valid JSON.",
            )

        if not isinstance(payload, dict):
            return Failure(
                FailureKind.RESPONSE_MALFORMED,
                "Invalid response format from Vertex AI.",
            )
        return extract_text(payload)

    def _post(self, url: str, body: dict[str, Any], headers: dict[str, str]) -> httpx.Response:
        if self._http_client is not None:
            return self._http_client.post(url, json=body, headers=headers)
        with httpx.Client(timeout=self.REQUEST_TIMEOUT_SECONDS) as client:
            return client.post(url, json=body, headers=headers)


def classify_error_message(message: str) -> Failure:
    """
    Map a raw SDK error message to a user-facing Failure.

    Known substrings get friendlier messages; anything else passes through
    unchanged as Unknown.
    """
    if "API key not valid" in message or "API_KEY_INVALID" in message:
        return Failure(
            FailureKind.AUTHENTICATION_FAILED,
            "Invalid API Key. Please check GEMINI_API_KEY in your .env file.",
        )
    if "SAFETY" in message or "Blocked due" in message:
        return Failure(
            FailureKind.SAFETY_BLOCKED,
            "Blocked due to safety settings. Please adjust your prompt or safety "
            f"settings. Reason: {message}",
        )
    return Failure(FailureKind.UNKNOWN, message or "Failed to call Gemini API")
