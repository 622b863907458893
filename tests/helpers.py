from __future__ import annotations

from typing import Iterable

from termedit.buffer import LineStore, TextBuffer


def make_buffer(
    lines: Iterable[str] = ("",), *, width: int = 80, height: int = 24
) -> TextBuffer:
    return TextBuffer((width, height), document=LineStore(list(lines)))


def assert_invariants(buffer: TextBuffer) -> None:
    cursor = buffer.cursor
    viewport = buffer.viewport
    assert buffer.line_count() >= 1
    assert 0 <= cursor.y < buffer.line_count()
    assert 0 <= cursor.x <= buffer.line_length(cursor.y)
    assert viewport.min_y <= cursor.y <= viewport.max_y
    assert viewport.min_x <= cursor.x <= viewport.max_x
