"""Minimal Textual adapter that wires ModeManager events into UI callbacks."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Dict, Iterable, Optional

from termedit.buffer import DisplayFrame, TextBuffer
from termedit.config import MODE_CONFIGS, EditorConfig, EditorMode
from termedit.modes import (
    CommandMode,
    InsertMode,
    KeyInput,
    ModeBus,
    ModeContext,
    ModeResult,
    NormalMode,
)
from termedit.modes.mode_manager import ModeManager


def _noop(*_args, **_kwargs) -> None:  # pragma: no cover - default hook
    return None


def create_default_manager(
    buffer: TextBuffer, *, config: Optional[EditorConfig] = None
) -> ModeManager:
    """Build a ModeManager with the standard mode set around ``buffer``."""

    context = ModeContext(
        buffer=buffer,
        bus=ModeBus(),
        config=config or EditorConfig(),
        extras={},
    )
    manager = ModeManager(context)
    manager.register_mode(NormalMode)
    manager.register_mode(InsertMode)
    manager.register_mode(CommandMode)
    return manager


@dataclass(slots=True)
class TextualUIHooks:
    """Callbacks invoked by the adapter to update Textual widgets."""

    update_view: Callable[[DisplayFrame], None]
    update_status: Callable[[str], None] = _noop
    # None hides the command line
    show_command: Callable[[Optional[str]], None] = _noop
    handle_event: Callable[[str, object | None], None] = _noop
    request_exit: Callable[[], None] = _noop
    # Optional realtime log callback a host may use to surface debug lines
    log: Callable[[str], None] = _noop


class TextualEditorAdapter:
    """Bridges ModeManager + bus events to a Textual-friendly surface."""

    def __init__(self, manager: ModeManager, hooks: TextualUIHooks) -> None:
        self.manager = manager
        self.hooks = hooks
        self._message: str = ""
        self._subscribe_events()
        self._refresh_view()
        self._refresh_command_line()

    @property
    def buffer(self) -> TextBuffer:
        return self.manager.context.buffer

    def handle_textual_key(
        self,
        key: str,
        *,
        text: Optional[str] = None,
        modifiers: Iterable[str] = (),
    ) -> ModeResult:
        """Translate a Textual key event into a KeyInput and dispatch it."""

        normalized_modifiers = tuple(str(mod).upper() for mod in modifiers)
        self._log_state("key ->", key=key, text=text, mods=normalized_modifiers)
        result = self.manager.handle_key(
            KeyInput(key=key, text=text, modifiers=normalized_modifiers)
        )
        self._after_mode_result(result)
        self._log_state(
            "result <-",
            consumed=result.consumed,
            status=result.status,
            message=result.message,
            switch_to=result.switch_to,
        )
        return result

    def status_line(self) -> str:
        buffer = self.buffer
        active = self.manager.active_mode
        mode_name = active.name if active else EditorMode.NORMAL.value
        subtitle = MODE_CONFIGS[EditorMode(mode_name)].subtitle
        dirty = " [+]" if buffer.dirty else ""
        position = f"{buffer.cursor.y + 1}:{buffer.cursor.x + 1}"
        parts = [subtitle, f"{buffer.name}{dirty}", position]
        if self._message:
            parts.append(self._message)
        return "  ".join(parts)

    def _after_mode_result(self, result: ModeResult) -> None:
        if result.status.startswith("command_"):
            self._message = result.message or ""
        elif result.status in {"edit", "insert"}:
            self._message = ""
        self._refresh_view()
        self._refresh_command_line()

    def _subscribe_events(self) -> None:
        bus = self.manager.context.bus
        for event in (
            "command.start",
            "command.end",
            "command.submit",
            "command.write",
            "command.open",
            "command.error",
            "command.quit",
        ):
            bus.subscribe(
                event, lambda payload, name=event: self._handle_event(name, payload)
            )

    def _handle_event(self, name: str, payload: object | None) -> None:
        self._log_state("event ->", event=name, payload=payload)
        self.hooks.handle_event(name, payload)
        if name == "command.quit":
            self.hooks.request_exit()
        if name.startswith("command"):
            self._refresh_command_line()

    def _refresh_view(self) -> None:
        self.hooks.update_view(self.buffer.display())
        self.hooks.update_status(self.status_line())

    def _refresh_command_line(self) -> None:
        active = self.manager.active_mode
        if active is None or active.name != "command":
            self.hooks.show_command(None)
            return
        state = self.manager.context.extras.get("command_state")
        text = str(state.get("text", "")) if isinstance(state, dict) else ""
        self.hooks.show_command(text)

    def _log_state(self, prefix: str, **fields: object) -> None:
        snapshot = self._state_metadata()
        snapshot.update({k: v for k, v in fields.items() if v is not None})
        parts = [prefix]
        for key, value in snapshot.items():
            parts.append(f"{key}={value!r}")
        self.hooks.log(" ".join(parts))

    def _state_metadata(self) -> Dict[str, object]:
        buffer = self.buffer
        active_mode = self.manager.active_mode
        return {
            "mode": active_mode.name if active_mode else "?",
            "cursor": buffer.cursor.as_tuple(),
            "viewport": (buffer.viewport.x, buffer.viewport.y),
            "buffer": buffer.name,
            "buffer_version": buffer.version,
        }


__all__ = ["TextualEditorAdapter", "TextualUIHooks", "create_default_manager"]
