"""Normal mode: motions, line edits, and entry points into other modes."""

from __future__ import annotations

from typing import Dict, List, Tuple

from termedit.actions import core as core_actions
from termedit.buffer import Move
from termedit.runtime import telemetry

from .base_mode import Action, KeyInput, Mode, ModeContext, ModeResult

KeySeq = Tuple[str, ...]


def default_normal_bindings() -> Dict[KeySeq, Action]:
    move = core_actions.move
    return {
        ("h",): move(Move.LEFT),
        ("LEFT",): move(Move.LEFT),
        ("BACKSPACE",): move(Move.LEFT),
        ("l",): move(Move.RIGHT),
        ("RIGHT",): move(Move.RIGHT),
        (" ",): move(Move.RIGHT),
        ("k",): move(Move.UP),
        ("UP",): move(Move.UP),
        ("j",): move(Move.DOWN),
        ("DOWN",): move(Move.DOWN),
        ("0",): move(Move.LINE_START),
        ("HOME",): move(Move.LINE_START),
        ("$",): move(Move.LINE_END),
        ("END",): move(Move.LINE_END),
        ("^",): move(Move.TEXT_START),
        ("g", "g"): move(Move.FIRST_LINE),
        ("G",): move(Move.LAST_LINE),
        ("x",): core_actions.delete_char,
        ("DELETE",): core_actions.delete_char,
        ("d", "d"): core_actions.delete_line,
        ("J",): core_actions.join_with_next_line,
        ("i",): core_actions.enter_insert_mode,
        ("a",): core_actions.append_after_cursor,
        ("A",): core_actions.append_at_line_end,
        ("I",): core_actions.insert_at_text_start,
        ("o",): core_actions.open_line_below,
        (":",): core_actions.enter_command_mode,
    }


class NormalMode(Mode):
    name = "normal"

    def __init__(
        self,
        context: ModeContext,
        *,
        bindings: Dict[KeySeq, Action] | None = None,
    ) -> None:
        super().__init__(context)
        self.logger = telemetry.get_logger("termedit.modes.normal")
        self._bindings = bindings if bindings is not None else default_normal_bindings()
        self._prefixes = {
            seq[:i] for seq in self._bindings for i in range(1, len(seq))
        }
        self._pending: List[str] = []

    @property
    def pending(self) -> Tuple[str, ...]:
        return tuple(self._pending)

    def on_exit(self, next_mode: str | None) -> None:
        del next_mode
        self._pending.clear()

    def handle_key(self, key: KeyInput) -> ModeResult:
        sequence = (*self._pending, key.token)
        action = self._bindings.get(sequence)
        if action is not None:
            self._pending.clear()
            return self._execute(sequence, action)

        if sequence in self._prefixes:
            self._pending.append(key.token)
            return ModeResult(
                consumed=True, status="pending", message="awaiting_sequence"
            )

        had_prefix = bool(self._pending)
        self._pending.clear()
        if had_prefix:
            # Abandon the prefix and give the key a fresh start, as in vim.
            return self.handle_key(key)
        self.logger.debug(f"normal: unhandled key {key.token!r}")
        return ModeResult(consumed=False, status="miss", message="unhandled")

    def _execute(self, sequence: KeySeq, action: Action) -> ModeResult:
        with telemetry.span(
            "normal::execute",
            component="modes",
            metadata={"keys": "".join(sequence), "action": action.__name__},
        ):
            return action(self.context)
