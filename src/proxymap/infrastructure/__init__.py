"""Infrastructure helpers for proxymap."""

from .clipboard import ClipboardManager
from .output import OutputWriter

__all__ = ["ClipboardManager", "OutputWriter"]
