"""System clipboard access for copying generated configuration."""

import pyperclip

from ..exceptions import ClipboardUnavailableError


class ClipboardManager:
    """Hands finished configuration text to the system clipboard."""

    def copy(self, text: str) -> None:
        """Copy text to the clipboard; failures are reported, never retried."""
        try:
            pyperclip.copy(text)
        except pyperclip.PyperclipException as e:
            raise ClipboardUnavailableError(
                f"Copy failed, check clipboard access on this system: {str(e)}"
            ) from e
