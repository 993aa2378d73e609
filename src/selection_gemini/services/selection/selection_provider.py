"""Selection providers - Sources of the text the user highlighted."""

from abc import ABC, abstractmethod
from typing import Optional


class SelectionUnavailableError(RuntimeError):
    """Raised when the environment cannot report a selection at all."""


class SelectionProvider(ABC):
    """Abstract source of the currently selected text."""

    @abstractmethod
    def selected_text(self) -> Optional[str]:
        """
        Return the current selection.

        Returns:
            The selected text, or None if nothing is selected.

        Raises:
            SelectionUnavailableError: if the selection cannot be read.
        """
        pass


class FixedSelectionProvider(SelectionProvider):
    """A selection captured earlier, e.g. on the GUI thread before a worker starts."""

    def __init__(self, text: Optional[str]):
        self._text = text

    @classmethod
    def capture(cls, provider: SelectionProvider) -> "FixedSelectionProvider":
        """Snapshot another provider; an unreadable selection is captured as None."""
        try:
            return cls(provider.selected_text())
        except SelectionUnavailableError:
            return cls(None)

    def selected_text(self) -> Optional[str]:
        return self._text
