"""Text buffer core: line storage, cursor movement, viewport, and rendering."""

from .buffer import DisplayFrame, TextBuffer
from .document import LineStore
from .state import Cursor, CursorMovement, Move, ToLine
from .validation import clamp_cursor
from .viewport import Viewport, follow_cursor

__all__ = [
    "TextBuffer",
    "DisplayFrame",
    "LineStore",
    "Cursor",
    "CursorMovement",
    "Move",
    "ToLine",
    "Viewport",
    "follow_cursor",
    "clamp_cursor",
]
