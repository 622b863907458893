"""Validation and clamping helpers shared across buffer operations."""

from __future__ import annotations

from termedit.errors import BufferValidationError

from .document import LineStore
from .state import Cursor


def clamp_cursor(document: LineStore, x: int, y: int) -> Cursor:
    """Pull ``(x, y)`` onto an existing row and at most one past its last char."""

    row = max(0, min(y, document.line_count - 1))
    col = max(0, min(x, document.line_length(row)))
    return Cursor(col, row)


def ensure_row_span(document: LineStore, first: int, last: int) -> None:
    if not 0 <= first <= last < document.line_count:
        raise BufferValidationError(
            f"Invalid row span {first}..{last} for {document.line_count} lines",
            span=(first, last),
        )


def ensure_single_line(text: str, *, cursor: Cursor) -> str:
    if "\n" in text:
        raise BufferValidationError(
            "Inserted text cannot contain a line break", cursor=cursor.as_tuple()
        )
    return text
