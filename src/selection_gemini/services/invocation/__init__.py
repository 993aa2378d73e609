"""Model invocation - abstract interface and Gemini implementation."""

from selection_gemini.services.invocation.model_invoker import ModelInvoker
from selection_gemini.services.invocation.gemini_model_invoker import (
    GeminiModelInvoker,
    classify_error_message,
)
from selection_gemini.services.invocation.response_extraction import build_request_body, extract_text

__all__ = [
    "ModelInvoker",
    "GeminiModelInvoker",
    "classify_error_message",
    "build_request_body",
    "extract_text",
]
