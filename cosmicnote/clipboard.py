"""Clipboard access for copy, cut and paste, with a cached fallback."""

from __future__ import annotations

import threading
from typing import Any, Callable, Optional, Protocol

from cosmicnote.errors import AppError

try:
    import tkinter
except ImportError:  # Tk is optional in some Python builds
    tkinter = None  # type: ignore[assignment]


class ClipboardError(AppError):
    """Base class of clipboard failures."""


class ClipboardAccessError(ClipboardError):
    """The clipboard could not be reached."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(f"Failed to access clipboard: {message}")


class ClipboardEmpty(ClipboardError):
    """The clipboard holds no text."""

    def __init__(self) -> None:
        super().__init__("Clipboard is empty")


class ClipboardNotText(ClipboardError):
    """The clipboard holds something other than text."""

    def __init__(self) -> None:
        super().__init__("Clipboard contents are not text")


class ClipboardWriteError(ClipboardError):
    """Writing to the clipboard failed."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(f"Failed to write to clipboard: {message}")


class ClipboardHandle(Protocol):
    """An open connection to a clipboard."""

    def get_text(self) -> Optional[str]:
        """Return the text held, or None when no text is available."""

    def set_text(self, text: str) -> None: ...

    def clear(self) -> None: ...


BackendFactory = Callable[[], ClipboardHandle]


class TkClipboard:
    """System clipboard reached through Tk; needs a running display."""

    def __init__(self) -> None:
        self._root: Any = None

    def __call__(self) -> TkClipboard:
        if tkinter is None:
            raise RuntimeError("Tk is not available")
        if self._root is None:
            root = tkinter.Tk()
            root.withdraw()
            self._root = root
        return self

    def get_text(self) -> Optional[str]:
        try:
            return self._root.clipboard_get()
        except tkinter.TclError:
            return None

    def set_text(self, text: str) -> None:
        self._root.clipboard_clear()
        self._root.clipboard_append(text)
        self._root.update()

    def clear(self) -> None:
        self._root.clipboard_clear()
        self._root.update()


class ClipboardManager:
    """Thread-safe clipboard access.

    The backend is opened for every operation. The last text seen or set is
    cached and returned when the backend cannot be opened.
    """

    def __init__(self, backend: Optional[BackendFactory] = None) -> None:
        self.backend: BackendFactory = backend if backend is not None else TkClipboard()
        self._lock = threading.Lock()
        self._last_content: Optional[str] = None

    @property
    def last_content(self) -> Optional[str]:
        """The cached clipboard text, if any."""
        with self._lock:
            return self._last_content

    def _cache(self, text: Optional[str]) -> None:
        with self._lock:
            self._last_content = text

    def _open(self) -> ClipboardHandle:
        try:
            return self.backend()
        except Exception as exc:
            raise ClipboardAccessError(str(exc)) from exc

    def get_text(self) -> str:
        """Read text from the clipboard, falling back to the cache."""
        try:
            handle = self._open()
        except ClipboardAccessError:
            cached = self.last_content
            if cached is not None:
                return cached
            raise
        try:
            text = handle.get_text()
        except Exception as exc:
            raise ClipboardAccessError(str(exc)) from exc
        if text is None:
            raise ClipboardEmpty()
        self._cache(text)
        return text

    def set_text(self, text: str) -> None:
        """Put text on the clipboard; it is cached even if writing fails."""
        self._cache(text)
        handle = self._open()
        try:
            handle.set_text(text)
        except Exception as exc:
            raise ClipboardWriteError(str(exc)) from exc

    def has_text(self) -> bool:
        try:
            handle = self.backend()
        except Exception:
            return self.last_content is not None
        try:
            return handle.get_text() is not None
        except Exception:
            return False

    def clear(self) -> None:
        """Empty the clipboard and the cache."""
        self._cache(None)
        handle = self._open()
        try:
            handle.clear()
        except Exception as exc:
            raise ClipboardWriteError(str(exc)) from exc


_manager: Optional[ClipboardManager] = None
_manager_lock = threading.Lock()


def clipboard() -> ClipboardManager:
    """The process-wide clipboard manager, created on first use."""
    global _manager
    with _manager_lock:
        if _manager is None:
            _manager = ClipboardManager()
        return _manager


def copy_text(text: str) -> None:
    clipboard().set_text(text)


def paste_text() -> str:
    return clipboard().get_text()