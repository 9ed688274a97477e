"""
Clipboard and notices.

copy_text() reports success as a bool; Noticer shows short-lived
status messages on the shared Rich console.
"""

import logging
import time
import weakref
from typing import ClassVar

import pyperclip

from elementsnatch.config import NOTICE_OK_MS
from elementsnatch.exceptions import ClipboardError
from elementsnatch.logging import console

logger = logging.getLogger(__name__)


def copy_text(text: str | None, strict: bool = False) -> bool:
    """
    Write text to the system clipboard.

    Args:
        text: Text to copy (None copies "")
        strict: Raise ClipboardError instead of returning False

    Returns:
        True if the clipboard was written
    """
    value = "" if text is None else str(text)
    try:
        pyperclip.copy(value)
        return True
    except pyperclip.PyperclipException as e:
        logger.debug(f"Clipboard unavailable: {e}")
        if strict:
            raise ClipboardError(str(e)) from e
        return False


class Noticer:
    """
    Transient user notice.

    A notice is active from show() until its timeout elapses or dispose()
    is called.
    """

    # live notices only; a dropped Noticer leaves the registry
    _instances: ClassVar[weakref.WeakSet] = weakref.WeakSet()

    def __init__(self):
        self._message: str | None = None
        self._expires_at = 0.0
        Noticer._instances.add(self)

    @classmethod
    def get_noticers(cls) -> list["Noticer"]:
        return list(cls._instances)

    @property
    def message(self) -> str | None:
        return self._message if self.is_active() else None

    def show(self, message: str, timeout: int = NOTICE_OK_MS, style: str = "notice") -> None:
        """Show a notice for `timeout` milliseconds."""
        self.dispose()
        self._message = message
        self._expires_at = time.monotonic() + timeout / 1000
        console.print(f"[{style}]{message}[/{style}]")

    def dispose(self) -> None:
        self._message = None
        self._expires_at = 0.0

    def is_active(self) -> bool:
        if self._message is None:
            return False
        if time.monotonic() >= self._expires_at:
            self.dispose()
            return False
        return True
