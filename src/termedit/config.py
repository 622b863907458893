"""Editor configuration and mode metadata."""

from __future__ import annotations

import os
from dataclasses import dataclass
from enum import Enum
from typing import Optional

ENV_PREFIX = "TERMEDIT_"


class EditorMode(str, Enum):
    """Available editor modes."""

    NORMAL = "normal"
    INSERT = "insert"
    COMMAND = "command"


@dataclass(frozen=True)
class ModeConfig:
    """Presentation details for an editor mode."""

    subtitle: str
    bg_color: str


MODE_CONFIGS = {
    EditorMode.NORMAL: ModeConfig("NORMAL", "#98C379"),
    EditorMode.INSERT: ModeConfig("INSERT", "#E8B86D"),
    EditorMode.COMMAND: ModeConfig(":", "#E06C75"),
}


def _env(name: str) -> Optional[str]:
    return os.environ.get(f"{ENV_PREFIX}{name}")


def _env_int(name: str, fallback: int) -> int:
    value = _env(name)
    if value is None:
        return fallback
    try:
        return int(value)
    except ValueError:
        return fallback


@dataclass(frozen=True)
class EditorConfig:
    """User-tunable editor settings."""

    tab_width: int = 4
    log_preset: str = "production"
    # Status line + command line below the text area.
    chrome_rows: int = 2

    def __post_init__(self) -> None:
        if self.tab_width < 1:
            raise ValueError("tab_width must be at least 1")
        if self.chrome_rows < 0:
            raise ValueError("chrome_rows cannot be negative")

    @classmethod
    def from_env(cls) -> "EditorConfig":
        return cls(
            tab_width=_env_int("TAB_WIDTH", cls.tab_width),
            log_preset=_env("LOG_PRESET") or cls.log_preset,
            chrome_rows=_env_int("CHROME_ROWS", cls.chrome_rows),
        )

    def viewport_size(self, columns: int, rows: int) -> tuple[int, int]:
        """Text area size for a terminal of ``columns`` x ``rows``."""

        return max(columns, 1), max(rows - self.chrome_rows, 1)


__all__ = ["EditorMode", "ModeConfig", "MODE_CONFIGS", "EditorConfig"]
