"""Tests for proxymap.infrastructure.clipboard: the pyperclip-backed clipboard sink."""

from __future__ import annotations

import pyperclip
import pytest

from proxymap.exceptions import ClipboardUnavailableError
from proxymap.infrastructure.clipboard import ClipboardManager


class TestClipboardManager:
    def test_copies_text(self, monkeypatch) -> None:
        copied = []
        monkeypatch.setattr(pyperclip, "copy", copied.append)
        ClipboardManager().copy("location ^~ / {")
        assert copied == ["location ^~ / {"]

    def test_missing_clipboard_is_reported(self, monkeypatch) -> None:
        def broken(text):
            raise pyperclip.PyperclipException("no copy/paste mechanism")

        monkeypatch.setattr(pyperclip, "copy", broken)
        with pytest.raises(ClipboardUnavailableError, match="no copy/paste mechanism"):
            ClipboardManager().copy("x")
