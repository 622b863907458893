"""Exception types raised by the buffer core and the command layer."""

from __future__ import annotations

from pathlib import Path
from typing import Optional, Tuple


class EditorError(RuntimeError):
    """Base class for every failure the editor reports to its caller."""


class BufferIOError(EditorError):
    """Raised when a file cannot be opened, read, decoded or written."""

    def __init__(self, message: str, *, path: Optional[Path] = None) -> None:
        super().__init__(message)
        self.path = path


class NoAssociatedPathError(EditorError):
    """Raised by a bare ``save`` on a buffer that was never loaded or saved-as."""

    def __init__(self) -> None:
        super().__init__("No file name associated with this buffer")


class BufferValidationError(EditorError):
    """Raised when a caller violates a buffer operation's precondition."""

    def __init__(
        self,
        message: str,
        *,
        cursor: Optional[Tuple[int, int]] = None,
        span: Optional[Tuple[int, int]] = None,
    ) -> None:
        super().__init__(message)
        self.cursor = cursor
        self.span = span


class CommandParseError(EditorError):
    """Raised when a ``:`` command has malformed or missing arguments."""

    def __init__(self, command: str, message: str) -> None:
        super().__init__(f"{command}: {message}")
        self.command = command


class UnknownCommandError(EditorError):
    """Raised when a ``:`` command name is not recognised."""

    def __init__(self, command: str) -> None:
        super().__init__(f"Not an editor command: {command}")
        self.command = command


__all__ = [
    "EditorError",
    "BufferIOError",
    "NoAssociatedPathError",
    "BufferValidationError",
    "CommandParseError",
    "UnknownCommandError",
]
