"""High-level editing verbs reused across modes."""

from .core import (
    append_after_cursor,
    append_at_line_end,
    delete_char,
    delete_char_before,
    delete_line,
    enter_command_mode,
    enter_insert_mode,
    exit_to_normal_mode,
    insert_at_text_start,
    insert_tab,
    join_with_next_line,
    move,
    open_line_below,
    split_line,
)
from .command import expand_path, run_command

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
    "run_command",
    "expand_path",
]
