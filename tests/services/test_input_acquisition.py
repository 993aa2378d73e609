"""Unit tests for selection providers and get_input_text."""

from unittest.mock import MagicMock

import pytest
from PySide6.QtGui import QClipboard

from selection_gemini.core import Failure, FailureKind
from selection_gemini.services import (
    FixedSelectionProvider,
    QtSelectionProvider,
    SelectionUnavailableError,
    get_input_text,
)


class TestGetInputText:
    """Tests for classifying the selection."""

    def test_returns_trimmed_text(self):
        assert get_input_text(FixedSelectionProvider("  hello \n")) == "hello"

    @pytest.mark.parametrize("selection", [None, "", "  ", "\n\t"])
    def test_empty_selection_is_no_input(self, selection):
        result = get_input_text(FixedSelectionProvider(selection))

        assert isinstance(result, Failure)
        assert result.kind is FailureKind.NO_INPUT_SELECTED
        assert result.message == "No Text Selected"

    def test_unavailable_selection_is_no_input(self):
        provider = MagicMock()
        provider.selected_text.side_effect = SelectionUnavailableError("no focused app")

        result = get_input_text(provider)

        assert result.kind is FailureKind.NO_INPUT_SELECTED


class TestFixedSelectionProvider:
    """Tests for snapshotting another provider."""

    def test_capture_copies_text(self):
        source = MagicMock()
        source.selected_text.return_value = "snapshot"

        captured = FixedSelectionProvider.capture(source)
        source.selected_text.return_value = "later"

        assert captured.selected_text() == "snapshot"

    def test_capture_of_unavailable_selection_is_none(self):
        source = MagicMock()
        source.selected_text.side_effect = SelectionUnavailableError("nope")

        assert FixedSelectionProvider.capture(source).selected_text() is None


class TestQtSelectionProvider:
    """Tests for reading the clipboard selection buffers."""

    @pytest.fixture
    def clipboard(self):
        clipboard = MagicMock()
        texts = {QClipboard.Mode.Selection: "", QClipboard.Mode.Clipboard: ""}
        clipboard.text.side_effect = lambda mode: texts[mode]
        clipboard.texts = texts
        return clipboard

    def test_prefers_primary_selection(self, clipboard):
        clipboard.supportsSelection.return_value = True
        clipboard.texts[QClipboard.Mode.Selection] = "highlighted"
        clipboard.texts[QClipboard.Mode.Clipboard] = "copied"

        assert QtSelectionProvider(clipboard).selected_text() == "highlighted"

    def test_falls_back_to_clipboard_when_selection_empty(self, clipboard):
        clipboard.supportsSelection.return_value = True
        clipboard.texts[QClipboard.Mode.Clipboard] = "copied"

        assert QtSelectionProvider(clipboard).selected_text() == "copied"

    def test_uses_clipboard_without_selection_support(self, clipboard):
        clipboard.supportsSelection.return_value = False
        clipboard.texts[QClipboard.Mode.Selection] = "ignored"
        clipboard.texts[QClipboard.Mode.Clipboard] = "copied"

        assert QtSelectionProvider(clipboard).selected_text() == "copied"

    def test_empty_buffers_return_none(self, clipboard):
        clipboard.supportsSelection.return_value = True

        assert QtSelectionProvider(clipboard).selected_text() is None
