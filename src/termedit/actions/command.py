"""Actions that evaluate ``:`` command lines."""

from __future__ import annotations

import os
from functools import partial
from pathlib import Path
from typing import Callable, Dict, List

from termedit.buffer import TextBuffer, ToLine
from termedit.errors import CommandParseError, EditorError, UnknownCommandError
from termedit.modes.base_mode import ModeContext, ModeResult
from termedit.runtime import telemetry

CommandHandler = Callable[[ModeContext, List[str]], ModeResult]


def run_command(context: ModeContext, text: str) -> ModeResult:
    """Parse and execute one command line (without the leading ``:``)."""

    text = text.strip()
    context.bus.emit("command.submit", text)
    if not text:
        return ModeResult(consumed=True, switch_to="normal", status="command_empty")
    command, *args = text.split()
    try:
        handler = _COMMAND_HANDLERS.get(command)
        if handler is None:
            raise UnknownCommandError(command)
        return handler(context, args)
    except EditorError as exc:
        return _command_error(context, command, exc)


def expand_path(raw: str) -> Path:
    return Path(os.path.expandvars(os.path.expanduser(raw)))


def _command_error(context: ModeContext, command: str, exc: Exception) -> ModeResult:
    message = str(exc)
    telemetry.record_event(
        "command.error",
        level="warning",
        data={"command": command, "reason": message},
    )
    context.bus.emit("command.error", message)
    return ModeResult(
        consumed=True,
        switch_to="normal",
        status="command_error",
        message=message,
    )


def _done(context: ModeContext, name: str, message: str) -> ModeResult:
    telemetry.record_event(f"command.{name}", data={"message": message})
    return ModeResult(
        consumed=True,
        switch_to="normal",
        status=f"command_{name}",
        message=message,
    )


def _single_arg(command: str, args: List[str]) -> str:
    if len(args) != 1:
        raise CommandParseError(command, "expected exactly one argument")
    return args[0]


def _handle_write(context: ModeContext, args: List[str]) -> ModeResult:
    buffer = context.buffer
    if len(args) > 1:
        raise CommandParseError("w", "expected at most one path")
    target = buffer.save_as(expand_path(args[0])) if args else buffer.save()
    message = f'"{target}" {buffer.line_count()}L written'
    context.bus.emit("command.write", {"path": str(target)})
    return _done(context, "write", message)


def _ensure_saved(context: ModeContext, force: bool) -> None:
    if context.buffer.dirty and not force:
        raise EditorError("No write since last change (add ! to override)")


def _handle_open(
    context: ModeContext, args: List[str], *, force: bool = False
) -> ModeResult:
    target = expand_path(_single_arg("o", args))
    _ensure_saved(context, force)
    viewport = context.buffer.viewport
    context.buffer = TextBuffer.load(target, viewport.width, viewport.height)
    context.bus.emit("command.open", {"path": str(target)})
    return _done(context, "open", f'"{target}" {context.buffer.line_count()}L')


def _handle_cd(context: ModeContext, args: List[str]) -> ModeResult:
    target = expand_path(_single_arg("cd", args))
    try:
        os.chdir(target)
    except OSError as exc:
        return _command_error(context, "cd", exc)
    return _done(context, "cd", os.getcwd())


def _handle_goto(context: ModeContext, args: List[str]) -> ModeResult:
    raw = _single_arg("g", args)
    try:
        line_number = int(raw)
    except ValueError as exc:
        raise CommandParseError("g", f"invalid line number '{raw}'") from exc
    if line_number < 1:
        raise CommandParseError("g", "line numbers start at 1")
    cursor = context.buffer.move_cursor(ToLine(line_number - 1))
    return _done(context, "goto", f"line {cursor.y + 1}")


def _handle_quit(
    context: ModeContext, args: List[str], *, force: bool = False
) -> ModeResult:
    if args:
        raise CommandParseError("q", "takes no arguments")
    _ensure_saved(context, force)
    context.bus.emit("command.quit", {"force": force})
    return _done(context, "quit", "quit!" if force else "quit")


_COMMAND_HANDLERS: Dict[str, CommandHandler] = {
    "w": _handle_write,
    "write": _handle_write,
    "o": _handle_open,
    "e": _handle_open,
    "edit": _handle_open,
    "o!": partial(_handle_open, force=True),
    "e!": partial(_handle_open, force=True),
    "edit!": partial(_handle_open, force=True),
    "cd": _handle_cd,
    "g": _handle_goto,
    "q": _handle_quit,
    "quit": _handle_quit,
    "q!": partial(_handle_quit, force=True),
    "quit!": partial(_handle_quit, force=True),
}


__all__ = ["run_command", "expand_path"]
