"""Visible rectangle into the line store and its scrolling policy."""

from __future__ import annotations

from dataclasses import dataclass, replace

from .state import Cursor


@dataclass(frozen=True, slots=True)
class Viewport:
    """Column/row offset plus a fixed width and height, in storage coordinates."""

    x: int = 0
    y: int = 0
    width: int = 80
    height: int = 24

    def __post_init__(self) -> None:
        if self.width < 0 or self.height < 0:
            raise ValueError("viewport dimensions cannot be negative")
        if self.x < 0 or self.y < 0:
            raise ValueError("viewport offsets cannot be negative")

    @classmethod
    def with_dimensions(cls, width: int, height: int) -> "Viewport":
        return cls(x=0, y=0, width=width, height=height)

    @property
    def min_x(self) -> int:
        return self.x

    @property
    def max_x(self) -> int:
        return self.x + max(self.width - 1, 0)

    @property
    def min_y(self) -> int:
        return self.y

    @property
    def max_y(self) -> int:
        return self.y + max(self.height - 1, 0)

    def contains(self, cursor: Cursor) -> bool:
        return (
            self.min_x <= cursor.x <= self.max_x
            and self.min_y <= cursor.y <= self.max_y
        )


def _follow_axis(offset: int, low: int, high: int, position: int) -> int:
    if position < low:
        return position
    if position > high:
        return offset + (position - high)
    return offset


def follow_cursor(viewport: Viewport, cursor: Cursor) -> Viewport:
    """Return ``viewport`` translated by the minimum amount that reveals ``cursor``.

    Each axis is handled independently. A cursor already inside the rectangle
    leaves the viewport untouched; width and height never change.
    """

    x = _follow_axis(viewport.x, viewport.min_x, viewport.max_x, cursor.x)
    y = _follow_axis(viewport.y, viewport.min_y, viewport.max_y, cursor.y)
    if x == viewport.x and y == viewport.y:
        return viewport
    return replace(viewport, x=x, y=y)


__all__ = ["Viewport", "follow_cursor"]
