# edriver/integrations/ClipboardBridge.py
"""ClipboardBridge.py
========================
Synchronous access to the system clipboard, the only channel edriver has for
bulk text exchange with the editor surface.

The clipboard is process-global, single-slot and last-writer-wins: the editor
UI reads it on paste and overwrites it on copy. Nothing here serializes access;
callers must not interleave unrelated clipboard users with one editor session.
"""

import logging

import pyperclip

from edriver.utils.errors import ClipboardUnavailableError


logger = logging.getLogger("edriver")

_INSTALL_HINT = (
    "Ensure clipboard utilities (e.g., xclip, xsel, wl-copy, pbcopy) are installed "
    "and a display is available."
)


# ================= ClipboardBridge Class ==============================
class ClipboardBridge:
    """Reads and writes the system clipboard through pyperclip."""

    def write_text(self, text: str) -> None:
        """Stores `text` as the clipboard payload."""
        try:
            pyperclip.copy(text)
        except pyperclip.PyperclipException as e:
            logger.error(f"System clipboard unavailable via pyperclip: {e}")
            raise ClipboardUnavailableError(f"Cannot write clipboard: {e}. {_INSTALL_HINT}") from e
        logger.debug("Clipboard <- %d characters", len(text))

    def read_text(self) -> str:
        """Returns the current clipboard payload ('' when the clipboard is empty)."""
        try:
            text = pyperclip.paste()
        except pyperclip.PyperclipException as e:
            logger.error(f"System clipboard unavailable via pyperclip: {e}")
            raise ClipboardUnavailableError(f"Cannot read clipboard: {e}. {_INSTALL_HINT}") from e
        text = text or ""
        logger.debug("Clipboard -> %d characters", len(text))
        return text
