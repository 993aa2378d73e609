"""Qt selection provider - Reads the PRIMARY selection or the clipboard via QClipboard."""

from typing import Optional

from PySide6.QtGui import QClipboard, QGuiApplication

from selection_gemini.services.selection.selection_provider import (
    SelectionProvider,
    SelectionUnavailableError,
)


class QtSelectionProvider(SelectionProvider):
    """
    Selection provider backed by the application clipboard.

    On X11 highlighted text lands in the PRIMARY selection without Ctrl+C,
    so that is read first. Platforms without a selection buffer (macOS,
    Windows) fall back to the regular clipboard. Must be called on the GUI
    thread.
    """

    def __init__(self, clipboard: Optional[QClipboard] = None):
        self._clipboard = clipboard

    def selected_text(self) -> Optional[str]:
        clipboard = self._clipboard or QGuiApplication.clipboard()
        if clipboard is None:
            raise SelectionUnavailableError("No clipboard available")

        if clipboard.supportsSelection():
            text = clipboard.text(QClipboard.Mode.Selection)
            if text and text.strip():
                return text

        text = clipboard.text(QClipboard.Mode.Clipboard)
        return text or None
