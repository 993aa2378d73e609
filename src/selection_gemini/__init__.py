"""
Selection Gemini - Gemini commands for the text you have selected.

This package provides small desktop commands that:
- Summarize the selection in Japanese
- Translate Japanese selections to English
- Translate English selections to Japanese

Requests go to Gemini either with an API key or with Google Cloud
Application Default Credentials against Vertex AI.
"""

__version__ = "0.1.0"

# Make key components available at package level
from selection_gemini.core import Failure, FailureKind, InvocationResult, Success, TaskKind
from selection_gemini.services.prompts import build_prompt

__all__ = [
    "Failure",
    "FailureKind",
    "InvocationResult",
    "Success",
    "TaskKind",
    "build_prompt",
]
