"""Model Invoker - Abstract interface for sending a prompt to the model."""

from abc import ABC, abstractmethod

from selection_gemini.core import InvocationResult, ResolvedCredentials


class ModelInvoker(ABC):
    """
    Abstract service that runs one generation request.

    Implementations (e.g., GeminiModelInvoker) never raise for request
    failures; they return a classified Failure instead. No retries happen here.
    """

    @abstractmethod
    def invoke(
        self,
        prompt: str,
        credentials: ResolvedCredentials,
        model_id: str,
    ) -> InvocationResult:
        """
        Generate text for a prompt.

        Args:
            prompt: Fully rendered task prompt.
            credentials: Credentials selecting the transport.
            model_id: Gemini model identifier, e.g. "gemini-2.0-flash".

        Returns:
            Success with trimmed text, or Failure.
        """
        pass
