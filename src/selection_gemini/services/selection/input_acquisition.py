"""Input acquisition - Turns a selection into command input or NoInputSelected."""

import logging
from typing import Union

from selection_gemini.core import Failure, FailureKind
from selection_gemini.services.selection.selection_provider import (
    SelectionProvider,
    SelectionUnavailableError,
)


logger = logging.getLogger(__name__)

NO_TEXT_SELECTED = "No Text Selected"


def get_input_text(provider: SelectionProvider) -> Union[str, Failure]:
    """
    Fetch the selected text.

    Args:
        provider: Where the selection comes from.

    Returns:
        Trimmed selection, or a NoInputSelected failure when the selection is
        unavailable, empty, or whitespace only.
    """
    try:
        text = provider.selected_text()
    except SelectionUnavailableError as exc:
        logger.info("No text selected: %s", exc)
        return Failure(FailureKind.NO_INPUT_SELECTED, NO_TEXT_SELECTED)

    if text is None or not text.strip():
        logger.info("No text selected.")
        return Failure(FailureKind.NO_INPUT_SELECTED, NO_TEXT_SELECTED)

    return text.strip()
