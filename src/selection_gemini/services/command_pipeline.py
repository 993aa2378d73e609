"""Command Pipeline - The sequential body of one command run."""

import logging

from selection_gemini.core import Failure, InvocationResult, TaskKind
from selection_gemini.services.credentials import CredentialResolver
from selection_gemini.services.invocation import ModelInvoker
from selection_gemini.services.prompts import build_prompt
from selection_gemini.services.selection import SelectionProvider, get_input_text
from selection_gemini.services.settings_manager import SettingsManager


logger = logging.getLogger(__name__)


class CommandPipeline:
    """
    Runs resolve credentials -> acquire input -> build prompt -> invoke model.

    Each step finishes before the next starts and the first Failure ends the
    run. Settings are re-read at the start of every run so edits to .env apply
    on the next refresh.
    """

    def __init__(
        self,
        settings_manager: SettingsManager,
        credential_resolver: CredentialResolver,
        model_invoker: ModelInvoker,
    ):
        self.settings_manager = settings_manager
        self.credential_resolver = credential_resolver
        self.model_invoker = model_invoker

    def run(self, task: TaskKind, selection_provider: SelectionProvider) -> InvocationResult:
        """
        Execute one run of a task.

        Args:
            task: Which command to run.
            selection_provider: Source of the input text for this run.

        Returns:
            Success with the model output, or the first Failure encountered.
        """
        self.settings_manager.reload_env()
        config = self.settings_manager.load_configuration()

        credentials = self.credential_resolver.resolve(config)
        if isinstance(credentials, Failure):
            return credentials

        input_text = get_input_text(selection_provider)
        if isinstance(input_text, Failure):
            return input_text

        prompt = build_prompt(task, input_text)
        logger.debug("Running %s on %d chars of input", task.value, len(input_text))
        return self.model_invoker.invoke(prompt, credentials, config.model_id)
