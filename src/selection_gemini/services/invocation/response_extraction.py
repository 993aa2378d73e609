"""Response extraction - One reader for both transports' generateContent payloads.

Payloads use the REST field names (camelCase); SDK responses are dumped into
the same shape before they get here.
"""

from typing import Any, Mapping, Optional

from selection_gemini.core import Failure, FailureKind, InvocationResult, Success


SAFETY_CATEGORIES = (
    "HARM_CATEGORY_HARASSMENT",
    "HARM_CATEGORY_HATE_SPEECH",
    "HARM_CATEGORY_SEXUALLY_EXPLICIT",
    "HARM_CATEGORY_DANGEROUS_CONTENT",
)
SAFETY_THRESHOLD = "BLOCK_MEDIUM_AND_ABOVE"

# Candidate finish reasons that mean the output was withheld by policy.
BLOCKING_FINISH_REASONS = frozenset({"SAFETY", "PROHIBITED_CONTENT", "BLOCKLIST", "SPII"})


def build_request_body(prompt: str) -> dict[str, Any]:
    """Render the JSON body for a generateContent request."""
    return {
        "contents": [{"role": "user", "parts": [{"text": prompt}]}],
        "safetySettings": [
            {"category": category, "threshold": SAFETY_THRESHOLD}
            for category in SAFETY_CATEGORIES
        ],
    }


def extract_text(payload: Mapping[str, Any]) -> InvocationResult:
    """
    Pull candidates[0].content.parts[0].text out of a response payload.

    Args:
        payload: Decoded generateContent response.

    Returns:
        Success with trimmed text; SafetyBlocked if the text is missing and a
        block reason is present; ResponseMalformed otherwise.
    """
    text = _first_candidate_text(payload)
    if text:
        return Success(text)

    reason = _block_reason(payload)
    if reason:
        return Failure(
            FailureKind.SAFETY_BLOCKED,
            f"Blocked due to safety settings ({reason}).",
        )

    return Failure(
        FailureKind.RESPONSE_MALFORMED,
        "Could not extract valid text from response.",
    )


def _first_candidate(payload: Mapping[str, Any]) -> Optional[Mapping[str, Any]]:
    candidates = payload.get("candidates")
    if isinstance(candidates, list) and candidates and isinstance(candidates[0], Mapping):
        return candidates[0]
    return None


def _first_candidate_text(payload: Mapping[str, Any]) -> Optional[str]:
    candidate = _first_candidate(payload)
    if candidate is None:
        return None
    content = candidate.get("content")
    if not isinstance(content, Mapping):
        return None
    parts = content.get("parts")
    if not isinstance(parts, list) or not parts or not isinstance(parts[0], Mapping):
        return None
    text = parts[0].get("text")
    if not isinstance(text, str):
        return None
    return text.strip() or None


def _block_reason(payload: Mapping[str, Any]) -> Optional[str]:
    feedback = payload.get("promptFeedback")
    if isinstance(feedback, Mapping) and feedback.get("blockReason"):
        return str(feedback["blockReason"])

    candidate = _first_candidate(payload)
    if candidate is not None:
        finish_reason = candidate.get("finishReason")
        if finish_reason in BLOCKING_FINISH_REASONS:
            return str(finish_reason)
    return None
