"""Editor logging on top of telelog.

Everything in termedit logs through the four helpers here: ``configure``
picks the output preset, ``get_logger`` hands out cached loggers,
``record_event`` writes one ``event::<name>`` line, and ``span`` profiles a
block while tagging its log lines with context.

Environment overrides use the ``TERMEDIT_`` prefix: ``LOG_LEVEL``,
``LOG_FILE``, ``LOG_JSON``, ``DISABLE_CONSOLE`` and ``NO_COLOR``.
"""

from __future__ import annotations

import os
from contextlib import ExitStack, contextmanager
from dataclasses import dataclass, replace
from typing import Any, Dict, Iterator, Optional, cast

import telelog  # type: ignore[import]

tl = cast(Any, telelog)

ENV_PREFIX = "TERMEDIT_"
LOGGER_NAME = "termedit"
PRESETS = ("development", "production", "performance")

_loggers: Dict[str, Any] = {}
_active: Optional[Any] = None


def _env(name: str) -> Optional[str]:
    return os.environ.get(f"{ENV_PREFIX}{name}")


def _env_flag(name: str) -> bool:
    return (_env(name) or "").lower() in {"1", "true", "yes", "on"}


@dataclass(frozen=True)
class LogSettings:
    """What a telelog config should look like before it is built."""

    level: str = "INFO"
    console: bool = True
    colored: bool = True
    json: bool = False
    buffered: bool = False
    log_file: Optional[str] = None

    @classmethod
    def from_env(cls) -> "LogSettings":
        return cls(
            level=(_env("LOG_LEVEL") or "INFO").upper(),
            console=not _env_flag("DISABLE_CONSOLE"),
            colored=not _env_flag("NO_COLOR"),
            json=_env_flag("LOG_JSON"),
            log_file=_env("LOG_FILE") or None,
        )

    def for_preset(self, preset: str) -> "LogSettings":
        key = preset.lower()
        if key == "development":
            return replace(self, level="DEBUG", console=True, json=False)
        if key == "production":
            # The terminal belongs to the editor UI.
            return replace(
                self,
                console=False,
                buffered=True,
                log_file=self.log_file or "termedit.log",
            )
        if key == "performance":
            return replace(
                self,
                level="DEBUG",
                console=False,
                buffered=True,
                json=True,
                log_file=self.log_file or "termedit-performance.log",
            )
        raise ValueError(f"Unknown preset '{preset}'.")

    def build(self) -> Any:
        config = tl.Config()
        config.with_min_level(self.level)
        config.with_console_output(self.console)
        if self.console:
            config.with_colored_output(self.colored)
        config.with_json_format(self.json)
        if self.log_file:
            config.with_file_output(self.log_file)
        if self.buffered:
            config.with_buffering(True)
        config.with_profiling(True)
        return config


def configure(preset: Optional[str] = None) -> None:
    """Rebuild the telelog config from the environment and an optional preset."""

    global _active
    settings = LogSettings.from_env()
    if preset:
        settings = settings.for_preset(preset)
    _active = settings.build()
    _loggers.clear()


def get_logger(name: str = LOGGER_NAME) -> Any:
    if _active is None:
        configure()
    if name not in _loggers:
        _loggers[name] = tl.Logger.with_config(name, _active)
    return _loggers[name]


def _pairs(data: Dict[str, Any]) -> list[tuple[str, str]]:
    return [
        (str(key), value if isinstance(value, str) else repr(value))
        for key, value in data.items()
    ]


def record_event(
    name: str, *, level: str = "info", data: Optional[Dict[str, Any]] = None
) -> None:
    """Write ``event::<name>`` with ``data`` as key/value pairs."""

    log = get_logger()
    level = level.lower()
    method = getattr(log, f"{level}_with", None)
    payload = {"event": name, **(data or {})}
    if method is not None:
        method(f"event::{name}", _pairs(payload))
        return
    plain = getattr(log, level, None)
    if plain is None:
        raise ValueError(f"Unsupported log level '{level}'.")
    plain(f"event::{name} {payload}")


@contextmanager
def span(
    name: str,
    *,
    component: Optional[str | bool] = None,
    metadata: Optional[Dict[str, Any]] = None,
) -> Iterator[None]:
    """Profile the block as ``name``; ``metadata`` is logged as context.

    ``component=True`` tracks the block as a component of the same name, a
    string tracks it under that name. An exception escaping the block is
    recorded as ``span.failed`` and re-raised.
    """

    log = get_logger()
    component_name = name if component is True else component or None
    context = dict(_pairs(metadata or {}))

    with ExitStack() as stack:
        for key, value in context.items():
            log.add_context(key, value)
            stack.callback(log.remove_context, key)
        if component_name:
            stack.enter_context(log.track_component(component_name))
        stack.enter_context(log.profile(name))
        try:
            yield
        except Exception as exc:
            record_event(
                "span.failed",
                level="error",
                data={"span": name, "reason": str(exc), **context},
            )
            raise


__all__ = ["PRESETS", "LogSettings", "configure", "get_logger", "record_event", "span"]
