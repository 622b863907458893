"""Insert mode: typed text goes straight into the buffer."""

from __future__ import annotations

from typing import Dict

from termedit.actions import core as core_actions
from termedit.buffer import Move
from termedit.runtime import telemetry

from .base_mode import Action, KeyInput, Mode, ModeContext, ModeResult


def default_insert_bindings() -> Dict[str, Action]:
    move = core_actions.move
    return {
        "ESC": core_actions.exit_to_normal_mode,
        "ENTER": core_actions.split_line,
        "BACKSPACE": core_actions.delete_char_before,
        "DELETE": core_actions.delete_char,
        "TAB": core_actions.insert_tab,
        "LEFT": move(Move.LEFT),
        "RIGHT": move(Move.RIGHT),
        "UP": move(Move.UP),
        "DOWN": move(Move.DOWN),
        "HOME": move(Move.LINE_START),
        "END": move(Move.LINE_END),
    }


class InsertMode(Mode):
    name = "insert"

    def __init__(
        self,
        context: ModeContext,
        *,
        bindings: Dict[str, Action] | None = None,
    ) -> None:
        super().__init__(context)
        self.logger = telemetry.get_logger("termedit.modes.insert")
        self._bindings = bindings if bindings is not None else default_insert_bindings()

    def handle_key(self, key: KeyInput) -> ModeResult:
        action = self._bindings.get(key.token)
        if action is not None:
            return action(self.context)

        if key.text and not key.modifiers and "\n" not in key.text:
            self.context.buffer.insert_string(key.text)
            return ModeResult(consumed=True, status="insert")

        self.logger.debug(f"insert: unhandled key {key.token!r}")
        return ModeResult(consumed=False, status="miss", message="unhandled")
