"""Selection services - reading the user's highlighted text."""

from selection_gemini.services.selection.selection_provider import (
    FixedSelectionProvider,
    SelectionProvider,
    SelectionUnavailableError,
)
from selection_gemini.services.selection.qt_selection_provider import QtSelectionProvider
from selection_gemini.services.selection.input_acquisition import NO_TEXT_SELECTED, get_input_text

__all__ = [
    "SelectionProvider",
    "SelectionUnavailableError",
    "FixedSelectionProvider",
    "QtSelectionProvider",
    "NO_TEXT_SELECTED",
    "get_input_text",
]
