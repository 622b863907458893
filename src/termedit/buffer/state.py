"""Cursor position and the closed set of cursor movements."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Union


@dataclass(frozen=True, slots=True)
class Cursor:
    """Zero-based ``(x, y)`` position; ``x`` may rest one past the line's end."""

    x: int = 0
    y: int = 0

    def as_tuple(self) -> tuple[int, int]:
        return (self.x, self.y)


class Move(str, Enum):
    """Movements that need no argument."""

    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"
    LINE_START = "line_start"
    LINE_END = "line_end"
    TEXT_START = "text_start"
    FIRST_LINE = "first_line"
    LAST_LINE = "last_line"


@dataclass(frozen=True, slots=True)
class ToLine:
    """Jump to a zero-based row; out-of-range rows are clamped."""

    line: int


CursorMovement = Union[Move, ToLine]

__all__ = ["Cursor", "Move", "ToLine", "CursorMovement"]
