"""System clipboard access."""

import logging

import pyperclip

from ..core.exceptions import ClipboardError

logger = logging.getLogger(__name__)


def copy_to_clipboard(text: str) -> None:
    """
    Write text to the system clipboard.

    Raises:
        ClipboardError: If no clipboard mechanism is available or the write fails
    """
    try:
        pyperclip.copy(text)
    except pyperclip.PyperclipException as e:
        logger.warning("Clipboard write failed: %s", e)
        raise ClipboardError("Failed to copy to clipboard", cause=e) from e
