"""Exception hierarchy for the notebook editor.

Every error derives from :class:`AppError`, so callers that do not care about
the category can catch that single base class.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Optional, Union

PathLike = Union[str, "os.PathLike[str]"]


class AppError(Exception):
    """Base class of every application error."""


class UnexpectedError(AppError):
    """An error that fits no other category."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(f"Unexpected error: {message}")


# --------------------------------------------------------------------------
# File errors
# --------------------------------------------------------------------------


class FileError(AppError):
    """Base class of file I/O errors."""

    def user_message(self) -> str:
        """Return a message suitable for showing in a dialog."""
        return str(self)


class _PathError(FileError):
    _template = "{path}"

    def __init__(self, path: PathLike) -> None:
        self.path = Path(path)
        super().__init__(self._template.format(path=os.fspath(self.path)))


class _PathSourceError(FileError):
    _template = "{path}"

    def __init__(self, path: PathLike, source: Optional[BaseException] = None) -> None:
        self.path = Path(path)
        self.source = source
        super().__init__(self._template.format(path=os.fspath(self.path)))
        if source is not None:
            self.__cause__ = source


class NotFoundError(_PathError):
    """The file does not exist."""

    _template = "File not found: {path}"

    def user_message(self) -> str:
        return "The file could not be found. It may have been moved or deleted."


class PermissionDeniedError(_PathError):
    """Access to the file was refused."""

    _template = "Permission denied: {path}"

    def user_message(self) -> str:
        return "You don't have permission to access this file. Check file permissions."


class TooLargeError(FileError):
    """The file exceeds the size limit, reported in megabytes."""

    def __init__(self, path: PathLike, size_mb: float, max_mb: int) -> None:
        self.path = Path(path)
        self.size_mb = size_mb
        self.max_mb = max_mb
        super().__init__(
            f"File is too large ({size_mb:.1f} MB). Maximum size is {max_mb} MB: "
            f"{os.fspath(self.path)}"
        )

    def user_message(self) -> str:
        return f"This file is too large to open. Maximum file size is {self.max_mb} MB."


class FileTooLargeError(FileError):
    """The file exceeds the size limit, reported in bytes."""

    def __init__(self, path: PathLike, size: int, max_size: int) -> None:
        self.path = Path(path)
        self.size = size
        self.max_size = max_size
        super().__init__(
            f"File too large: {os.fspath(self.path)} ({size} bytes, max {max_size} bytes)"
        )

    def user_message(self) -> str:
        return (
            f"This file is too large to open. Maximum file size is {self.max_size} bytes."
        )


class EncodingError(_PathError):
    """The file could not be decoded as text."""

    _template = (
        "Unable to read file as text. File may be binary or use unsupported "
        "encoding: {path}"
    )

    def user_message(self) -> str:
        return (
            "This file cannot be opened as text. It may be a binary file or use an "
            "unsupported encoding."
        )


class ReadError(_PathSourceError):
    """Reading the file failed."""

    _template = "Could not read file: {path}"


class WriteError(_PathSourceError):
    """Writing the file failed."""

    _template = "Could not save file: {path}"

    def user_message(self) -> str:
        return "Could not save the file. Check disk space and permissions."


class AtomicWriteError(_PathSourceError):
    """The temporary file for a safe save could not be created."""

    _template = "Could not create temporary file for safe save: {path}"

    def user_message(self) -> str:
        return "Could not save the file. Check disk space and permissions."


class RenameError(_PathSourceError):
    """Moving the temporary file onto the target failed."""

    _template = "Could not complete file save (rename failed): {path}"


class BackupError(_PathSourceError):
    """A backup copy could not be created."""

    _template = "Could not create backup: {path}"


class DirectoryNotFoundError(_PathError):
    """The directory does not exist."""

    _template = "Directory not found: {path}"


class DirectoryScanError(_PathSourceError):
    """The directory could not be listed."""

    _template = "Could not read directory: {path}"


class DirectoryError(_PathSourceError):
    """A directory operation failed."""

    _template = "Directory error: {path}"


class ReadOnlyError(_PathError):
    """The file cannot be modified."""

    _template = "File is read-only: {path}"

    def user_message(self) -> str:
        return "This file is read-only and cannot be modified."


class NotAFileError(_PathError):
    """The path does not name a regular file."""

    _template = "Path is not a file: {path}"


class FileIOError(FileError):
    """A generic I/O failure."""

    def __init__(self, source: BaseException) -> None:
        self.source = source
        super().__init__(f"I/O error: {source}")
        self.__cause__ = source


# --------------------------------------------------------------------------
# Configuration errors
# --------------------------------------------------------------------------


class ConfigError(AppError):
    """Base class of configuration errors."""


class ConfigLoadError(ConfigError):
    """The configuration could not be loaded."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(f"Could not load configuration: {message}")


class ConfigSaveError(ConfigError):
    """The configuration could not be saved."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(f"Could not save configuration: {message}")


class ConfigParseError(ConfigError):
    """The configuration text is malformed."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(f"Invalid configuration format: {message}")


class MissingValueError(ConfigError):
    """A required configuration value is absent."""

    def __init__(self, key: str) -> None:
        self.key = key
        super().__init__(f"Missing configuration value: {key}")


class InvalidValueError(ConfigError):
    """A configuration value is out of range or of the wrong kind."""

    def __init__(self, key: str, reason: str) -> None:
        self.key = key
        self.reason = reason
        super().__init__(f"Invalid value for {key}: {reason}")


class ConfigDirectoryError(ConfigError):
    """The configuration directory could not be determined."""

    def __init__(self) -> None:
        super().__init__("Could not access configuration directory")


# --------------------------------------------------------------------------
# Editor errors
# --------------------------------------------------------------------------


class EditorError(AppError):
    """Base class of editing errors."""


class InvalidCursorPositionError(EditorError):
    """The cursor position lies outside the buffer."""

    def __init__(self, line: int, column: int) -> None:
        self.line = line
        self.column = column
        super().__init__(f"Invalid cursor position: line {line}, column {column}")


class InvalidSelectionError(EditorError):
    """The selection range is not valid."""

    def __init__(self, start: int, end: int) -> None:
        self.start = start
        self.end = end
        super().__init__(f"Invalid selection range: {start} to {end}")


class NothingToUndoError(EditorError):
    """The undo stack is empty."""

    def __init__(self) -> None:
        super().__init__("Nothing to undo")


class NothingToRedoError(EditorError):
    """The redo stack is empty."""

    def __init__(self) -> None:
        super().__init__("Nothing to redo")


class DocumentNotFoundError(EditorError):
    """No document has the given identifier."""

    def __init__(self, document_id: str) -> None:
        self.document_id = document_id
        super().__init__(f"Document not found: {document_id}")


class BufferError(EditorError):  # noqa: A001 - shadows the builtin on purpose
    """A text buffer operation failed."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(f"Text operation failed: {message}")


# --------------------------------------------------------------------------
# Clipboard errors
# --------------------------------------------------------------------------


class ClipboardError(AppError):
    """Base class of clipboard errors."""

    def user_message(self) -> str:
        """Return a message suitable for showing to the user."""
        return str(self)


class ClipboardAccessDeniedError(ClipboardError):
    """The clipboard could not be accessed."""

    def __init__(self) -> None:
        super().__init__("Could not access clipboard")

    def user_message(self) -> str:
        return "Could not access the clipboard. Another application may be using it."


class ClipboardEmptyError(ClipboardError):
    """The clipboard holds nothing."""

    def __init__(self) -> None:
        super().__init__("Clipboard is empty")

    def user_message(self) -> str:
        return "The clipboard is empty."


class ClipboardNotTextError(ClipboardError):
    """The clipboard holds something other than text."""

    def __init__(self) -> None:
        super().__init__("Clipboard does not contain text")

    def user_message(self) -> str:
        return "The clipboard does not contain text."


class ClipboardReadError(ClipboardError):
    """Reading the clipboard failed."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(f"Could not read from clipboard: {message}")


class ClipboardWriteError(ClipboardError):
    """Writing the clipboard failed."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(f"Could not write to clipboard: {message}")


# --------------------------------------------------------------------------
# File watcher errors
# --------------------------------------------------------------------------


class WatcherError(AppError):
    """Base class of file watcher errors."""


class WatcherInitError(WatcherError):
    """The watcher could not be started."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(f"Could not start file watcher: {message}")


class WatchPathError(WatcherError):
    """A path could not be watched."""

    def __init__(self, path: PathLike, source: Optional[BaseException] = None) -> None:
        self.path = Path(path)
        self.source = source
        super().__init__(f"Could not watch path: {os.fspath(self.path)}")
        if source is not None:
            self.__cause__ = source


class TooManyWatchesError(WatcherError):
    """The system limit on watches was reached."""

    def __init__(self) -> None:
        super().__init__("Too many files to watch. System limit reached.")


class WatcherEventError(WatcherError):
    """The watcher reported an error event."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(f"File watcher error: {message}")