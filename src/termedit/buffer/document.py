"""Line storage for text buffers."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, List, Sequence


@dataclass(slots=True)
class LineStore:
    """Mutable list-of-lines model that always holds at least one line.

    ``version`` is bumped on every content change and ``dirty`` stays set
    until the owner marks the content as persisted.
    """

    _lines: List[str] = field(default_factory=lambda: [""])
    version: int = 0
    dirty: bool = False

    def __post_init__(self) -> None:
        if not self._lines:
            self._lines = [""]

    @classmethod
    def from_text(cls, text: str) -> "LineStore":
        # Round-trips with to_text: "abc\n" loads as ["abc", ""].
        lines = (text + "\n").split("\n")[:-1]
        return cls(_lines=lines)

    def to_text(self) -> str:
        return "\n".join(self._lines)

    def snapshot(self) -> Sequence[str]:
        """Return the current lines without exposing internal mutability."""

        return tuple(self._lines)

    @property
    def line_count(self) -> int:
        return len(self._lines)

    def get_line(self, index: int) -> str:
        return self._lines[index]

    def line_length(self, index: int) -> int:
        return len(self._lines[index])

    def set_line(self, index: int, text: str) -> None:
        self._lines[index] = text
        self._touch()

    def update_lines(self, start: int, end: int, new_lines: Iterable[str]) -> None:
        """Replace ``[start:end]`` with ``new_lines``, keeping the store non-empty."""

        self._lines[start:end] = list(new_lines)
        if not self._lines:
            self._lines.append("")
        self._touch()

    def mark_clean(self) -> None:
        self.dirty = False

    def _touch(self) -> None:
        self.version += 1
        self.dirty = True


__all__ = ["LineStore"]
