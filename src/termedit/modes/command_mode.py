"""Command-line mode with inline editing."""

from __future__ import annotations

from typing import List, MutableMapping, cast

from termedit.actions import command as command_actions
from termedit.runtime import telemetry

from .base_mode import KeyInput, Mode, ModeContext, ModeResult


class CommandMode(Mode):
    name = "command"

    def __init__(self, context: ModeContext) -> None:
        super().__init__(context)
        self.logger = telemetry.get_logger("termedit.modes.command")
        self._typed: List[str] = []

    def on_enter(self, previous: str | None) -> None:
        del previous
        self._typed.clear()
        self.context.bus.emit("command.start", None)
        self._sync_command_state()

    def on_exit(self, next_mode: str | None) -> None:
        del next_mode
        self.context.bus.emit("command.end", self.current_command)
        self._typed.clear()
        self._sync_command_state()

    @property
    def current_command(self) -> str:
        return "".join(self._typed)

    def handle_key(self, key: KeyInput) -> ModeResult:
        if key.key in {"ESC", "<Esc>"}:
            self._typed.clear()
            self._sync_command_state()
            return ModeResult(
                consumed=True, switch_to="normal", message="command_cancel"
            )

        if key.key in {"ENTER", "RETURN"}:
            command = self.current_command
            self.logger.info(f"command: submit {command!r}")
            self._typed.clear()
            self._sync_command_state()
            with telemetry.span(
                "command::run", component="commands", metadata={"command": command}
            ):
                history = self._command_state().setdefault("history", [])
                cast(list, history).append(command)
                return command_actions.run_command(self.context, command)

        if key.key == "BACKSPACE":
            if not self._typed:
                return ModeResult(
                    consumed=True, switch_to="normal", message="command_cancel"
                )
            self._typed.pop()
            self._sync_command_state()
            return ModeResult(consumed=True, status="editing")

        if key.text:
            self._typed.append(key.text)
            self._sync_command_state()
            return ModeResult(consumed=True, status="editing")

        return ModeResult(consumed=False, status="miss", message="unhandled")

    def _command_state(self) -> MutableMapping[str, object]:
        return cast(
            MutableMapping[str, object],
            self.context.extras.setdefault("command_state", {}),
        )

    def _sync_command_state(self) -> None:
        state = self._command_state()
        state["text"] = self.current_command
