"""Core editing verbs shared across modes."""

from __future__ import annotations

from termedit.buffer import CursorMovement, Move
from termedit.errors import BufferValidationError
from termedit.modes.base_mode import Action, ModeContext, ModeResult


def move(movement: CursorMovement) -> Action:
    """Build an action that applies ``movement`` to the context's buffer."""

    def _action(context: ModeContext) -> ModeResult:
        context.buffer.move_cursor(movement)
        return ModeResult(consumed=True, status="move")

    _action.__name__ = f"move_{getattr(movement, 'value', 'to_line')}"
    return _action


def enter_insert_mode(context: ModeContext) -> ModeResult:
    del context
    return ModeResult(consumed=True, switch_to="insert", message="enter_insert")


def append_after_cursor(context: ModeContext) -> ModeResult:
    buffer = context.buffer
    if buffer.cursor.x < buffer.line_length(buffer.cursor.y):
        buffer.move_cursor(Move.RIGHT)
    return enter_insert_mode(context)


def append_at_line_end(context: ModeContext) -> ModeResult:
    context.buffer.move_cursor(Move.LINE_END)
    return enter_insert_mode(context)


def insert_at_text_start(context: ModeContext) -> ModeResult:
    context.buffer.move_cursor(Move.TEXT_START)
    return enter_insert_mode(context)


def open_line_below(context: ModeContext) -> ModeResult:
    context.buffer.move_cursor(Move.LINE_END)
    context.buffer.insert_line()
    return enter_insert_mode(context)


def exit_to_normal_mode(context: ModeContext) -> ModeResult:
    del context
    return ModeResult(consumed=True, switch_to="normal", message="exit_insert")


def enter_command_mode(context: ModeContext) -> ModeResult:
    del context
    return ModeResult(consumed=True, switch_to="command", message="enter_command")


def delete_char(context: ModeContext) -> ModeResult:
    context.buffer.remove_char()
    return ModeResult(consumed=True, status="edit")


def delete_char_before(context: ModeContext) -> ModeResult:
    context.buffer.remove_char_before()
    return ModeResult(consumed=True, status="edit")


def delete_line(context: ModeContext) -> ModeResult:
    context.buffer.remove_line()
    return ModeResult(consumed=True, status="edit")


def join_with_next_line(context: ModeContext) -> ModeResult:
    buffer = context.buffer
    row = buffer.cursor.y
    try:
        buffer.join_lines(row, row + 1)
    except BufferValidationError:
        return ModeResult(consumed=True, status="noop", message="no line to join")
    return ModeResult(consumed=True, status="edit")


def split_line(context: ModeContext) -> ModeResult:
    context.buffer.insert_line()
    return ModeResult(consumed=True, status="edit")


def insert_tab(context: ModeContext) -> ModeResult:
    context.buffer.insert_string(" " * context.config.tab_width)
    return ModeResult(consumed=True, status="edit")


__all__ = [
    "move",
    "enter_insert_mode",
    "append_after_cursor",
    "append_at_line_end",
    "insert_at_text_start",
    "open_line_below",
    "exit_to_normal_mode",
    "enter_command_mode",
    "delete_char",
    "delete_char_before",
    "delete_line",
    "join_with_next_line",
    "split_line",
    "insert_tab",
]
