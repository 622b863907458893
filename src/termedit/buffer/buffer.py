"""Text buffer combining line storage, cursor, viewport, and persistence."""

from __future__ import annotations

import os
from contextlib import AbstractContextManager
from dataclasses import dataclass
from pathlib import Path
from typing import ContextManager, Optional, Sequence, Tuple, Union

from termedit.errors import (
    BufferIOError,
    BufferValidationError,
    NoAssociatedPathError,
)
from termedit.runtime import telemetry

from .document import LineStore
from .state import Cursor, CursorMovement, Move, ToLine
from .validation import clamp_cursor, ensure_row_span, ensure_single_line
from .viewport import Viewport, follow_cursor

PathLike = Union[str, "os.PathLike[str]"]


@dataclass(frozen=True, slots=True)
class DisplayFrame:
    """Render-ready snapshot: exactly ``height`` cropped rows and a relative cursor."""

    lines: Tuple[str, ...]
    cursor: Cursor


class TextBuffer:
    def __init__(
        self,
        viewport_size: Tuple[int, int] = (80, 24),
        *,
        document: Optional[LineStore] = None,
        path: Optional[PathLike] = None,
    ) -> None:
        width, height = viewport_size
        self.document = document or LineStore()
        self.path: Optional[Path] = Path(path) if path is not None else None
        self._cursor = Cursor(0, 0)
        self._viewport = Viewport.with_dimensions(width, height)

    @classmethod
    def empty(cls, width: int, height: int) -> "TextBuffer":
        return cls((width, height))

    @classmethod
    def load(cls, path: PathLike, width: int, height: int) -> "TextBuffer":
        """Read ``path`` into a new buffer; raise ``BufferIOError`` on failure."""

        target = Path(path)
        with telemetry.span(
            "buffer::load", component="buffer", metadata={"path": str(target)}
        ):
            try:
                text = target.read_bytes().decode("utf-8")
            except (OSError, UnicodeDecodeError) as exc:
                telemetry.record_event(
                    "buffer.load_failed",
                    level="error",
                    data={"path": str(target), "reason": str(exc)},
                )
                raise BufferIOError(
                    f"Cannot read {target}: {exc}", path=target
                ) from exc
            document = LineStore.from_text(text)
        telemetry.record_event(
            "buffer.load",
            data={"path": str(target), "lines": document.line_count},
        )
        return cls((width, height), document=document, path=target)

    # -- inspection -------------------------------------------------------

    @property
    def cursor(self) -> Cursor:
        return self._cursor

    @property
    def viewport(self) -> Viewport:
        return self._viewport

    @property
    def lines(self) -> Sequence[str]:
        return self.document.snapshot()

    @property
    def dirty(self) -> bool:
        return self.document.dirty

    @property
    def version(self) -> int:
        return self.document.version

    @property
    def name(self) -> str:
        return str(self.path) if self.path is not None else "[scratch]"

    def line_count(self) -> int:
        return self.document.line_count

    def line_length(self, row: int) -> int:
        return self.document.line_length(row)

    def current_line(self) -> str:
        return self.document.get_line(self._cursor.y)

    # -- persistence ------------------------------------------------------

    def save(self) -> Path:
        """Write to the associated path; buffer state is untouched on failure."""

        if self.path is None:
            telemetry.record_event(
                "buffer.save_failed",
                level="warning",
                data={"buffer": self.name, "reason": "no associated path"},
            )
            raise NoAssociatedPathError()
        self._write(self.path)
        return self.path

    def save_as(self, path: PathLike) -> Path:
        target = Path(path)
        self._write(target)
        self.path = target
        return target

    def _write(self, target: Path) -> None:
        with Operation(self, "save", metadata={"path": str(target)}):
            try:
                with open(target, "w", encoding="utf-8", newline="") as handle:
                    handle.write(self.document.to_text())
            except OSError as exc:
                telemetry.record_event(
                    "buffer.save_failed",
                    level="error",
                    data={"path": str(target), "reason": str(exc)},
                )
                raise BufferIOError(
                    f"Cannot write {target}: {exc}", path=target
                ) from exc
            self.document.mark_clean()
        telemetry.record_event(
            "buffer.save",
            data={"path": str(target), "lines": self.document.line_count},
        )

    # -- cursor movement --------------------------------------------------

    def move_cursor(self, movement: CursorMovement) -> Cursor:
        label = movement.value if isinstance(movement, Move) else "to_line"
        with Operation(self, f"move::{label}"):
            x, y = self._target_for(movement)
            self._settle(x, y)
        return self._cursor

    def set_cursor(self, x: int, y: int) -> Cursor:
        with Operation(self, "set_cursor"):
            self._settle(x, y)
        return self._cursor

    def _target_for(self, movement: CursorMovement) -> Tuple[int, int]:
        x, y = self._cursor.as_tuple()
        last_row = self.document.line_count - 1
        length = self.document.line_length(y)

        if isinstance(movement, ToLine):
            return 0, max(0, min(movement.line, last_row))
        if movement is Move.UP:
            row = max(y - 1, 0)
            return min(x, self.document.line_length(row)), row
        if movement is Move.DOWN:
            row = min(y + 1, last_row)
            return min(x, self.document.line_length(row)), row
        if movement is Move.LEFT:
            if x > 0:
                return x - 1, y
            if y > 0:
                return self.document.line_length(y - 1), y - 1
            return x, y
        if movement is Move.RIGHT:
            if x < length:
                return x + 1, y
            if y < last_row:
                return 0, y + 1
            return x, y
        if movement is Move.LINE_START:
            return 0, y
        if movement is Move.LINE_END:
            return length, y
        if movement is Move.TEXT_START:
            return _first_non_blank(self.document.get_line(y)), y
        if movement is Move.FIRST_LINE:
            return 0, 0
        if movement is Move.LAST_LINE:
            return 0, last_row
        raise ValueError(f"Unsupported cursor movement {movement!r}")

    # -- text mutation ----------------------------------------------------

    def insert_char(self, char: str) -> None:
        if len(char) != 1:
            raise BufferValidationError(
                "insert_char expects exactly one character",
                cursor=self._cursor.as_tuple(),
            )
        self.insert_string(char)

    def insert_string(self, text: str) -> None:
        ensure_single_line(text, cursor=self._cursor)
        if not text:
            return
        x, y = self._cursor.as_tuple()
        with Operation(self, "insert", metadata={"length": len(text)}):
            line = self.document.get_line(y)
            self.document.set_line(y, line[:x] + text + line[x:])
            self._settle(x + len(text), y)

    def remove_char(self) -> None:
        """Forward delete; at a line's end the next line is joined on."""

        x, y = self._cursor.as_tuple()
        length = self.document.line_length(y)
        with Operation(self, "remove_char"):
            if x < length:
                line = self.document.get_line(y)
                self.document.set_line(y, line[:x] + line[x + 1 :])
            elif y < self.document.line_count - 1:
                self.join_lines(y, y + 1)
            self._settle(x, y)

    def remove_char_before(self) -> None:
        """Backspace: step left (possibly onto the previous line) and delete."""

        if self._cursor == Cursor(0, 0):
            return
        self.move_cursor(Move.LEFT)
        self.remove_char()

    def insert_line(self) -> None:
        x, y = self._cursor.as_tuple()
        with Operation(self, "insert_line"):
            line = self.document.get_line(y)
            self.document.update_lines(y, y + 1, (line[:x], line[x:]))
            self._settle(0, y + 1)

    def remove_line(self) -> None:
        y = self._cursor.y
        with Operation(self, "remove_line"):
            self.document.update_lines(y, y + 1, ())
            self._settle(0, y)

    def join_lines(self, first: int, last: int) -> None:
        """Merge rows ``first..last`` (inclusive) into one row at ``first``."""

        ensure_row_span(self.document, first, last)
        if first == last:
            return
        with Operation(self, "join_lines", metadata={"first": first, "last": last}):
            joined = self.document.snapshot()[first : last + 1]
            x, y = self._cursor.as_tuple()
            if first < y <= last:
                x += sum(len(line) for line in joined[: y - first])
                y = first
            elif y > last:
                y -= last - first
            self.document.update_lines(first, last + 1, ("".join(joined),))
            self._settle(x, y)

    # -- rendering --------------------------------------------------------

    def display(self) -> DisplayFrame:
        view = self._viewport
        rows = self.document.snapshot()[view.y : view.y + view.height]
        lines = [row[view.x : view.x + view.width] for row in rows]
        lines.extend([""] * (view.height - len(lines)))
        cursor = Cursor(self._cursor.x - view.min_x, self._cursor.y - view.min_y)
        return DisplayFrame(lines=tuple(lines), cursor=cursor)

    # -- internals --------------------------------------------------------

    def _settle(self, x: int, y: int) -> None:
        self._cursor = clamp_cursor(self.document, x, y)
        self._viewport = follow_cursor(self._viewport, self._cursor)


class Operation(AbstractContextManager["Operation"]):
    """Telemetry span around a single buffer operation."""

    def __init__(
        self, buffer: TextBuffer, label: str, *, metadata: Optional[dict] = None
    ) -> None:
        self.buffer = buffer
        self.label = label
        self.metadata = {"buffer": buffer.name, **(metadata or {})}
        self._span_cm: Optional[ContextManager[object]] = None

    def __enter__(self) -> "Operation":
        self._span_cm = telemetry.span(
            name=f"buffer::{self.label}",
            component="buffer",
            metadata=self.metadata,
        )
        self._span_cm.__enter__()
        return self

    def __exit__(self, exc_type, exc, tb) -> bool:
        if self._span_cm is not None:
            self._span_cm.__exit__(exc_type, exc, tb)
        return False


def _first_non_blank(line: str) -> int:
    stripped = line.lstrip()
    if not stripped:
        return 0
    return len(line) - len(stripped)


__all__ = ["TextBuffer", "DisplayFrame", "Operation"]
