"""Services layer - business logic and external integrations."""

from selection_gemini.services.settings_manager import SettingsManager

# Credential services
from selection_gemini.services.credentials import (
    CredentialResolver,
    GoogleIdentityProvider,
    IdentityProvider,
    IdentityProviderError,
)

# Model invocation
from selection_gemini.services.invocation import GeminiModelInvoker, ModelInvoker

# Prompts and input
from selection_gemini.services.prompts import build_prompt
from selection_gemini.services.selection import (
    FixedSelectionProvider,
    QtSelectionProvider,
    SelectionProvider,
    SelectionUnavailableError,
    get_input_text,
)

from selection_gemini.services.command_pipeline import CommandPipeline
from selection_gemini.services.api_workers import CommandWorker, WorkerSignals

__all__ = [
    "SettingsManager",
    "CredentialResolver",
    "GoogleIdentityProvider",
    "IdentityProvider",
    "IdentityProviderError",
    "ModelInvoker",
    "GeminiModelInvoker",
    "build_prompt",
    "SelectionProvider",
    "SelectionUnavailableError",
    "FixedSelectionProvider",
    "QtSelectionProvider",
    "get_input_text",
    "CommandPipeline",
    "CommandWorker",
    "WorkerSignals",
]
