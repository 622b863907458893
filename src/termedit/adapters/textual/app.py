"""Executable Textual app that hosts the editor."""

from __future__ import annotations

import argparse
import shutil
import sys
from dataclasses import dataclass, replace
from typing import Optional, Sequence, Tuple

try:  # pragma: no cover - imported only when the app is run
    from rich.text import Text
    from textual import events
    from textual.app import App, ComposeResult
    from textual.widgets import Static
except ModuleNotFoundError as exc:  # pragma: no cover - friendly error for missing dep
    raise RuntimeError(
        "Install the 'textual' package to use termedit.adapters.textual.app"
    ) from exc

from termedit.buffer import DisplayFrame, TextBuffer
from termedit.config import MODE_CONFIGS, EditorConfig, EditorMode
from termedit.errors import BufferIOError
from termedit.runtime import telemetry

from .controller import TextualEditorAdapter, TextualUIHooks, create_default_manager


def render_frame(frame: DisplayFrame) -> Text:
    """Turn a display frame into rich text with a reverse-video cursor cell."""

    text = Text(no_wrap=True, overflow="crop")
    for row, line in enumerate(frame.lines):
        if row:
            text.append("\n")
        if row != frame.cursor.y:
            text.append(line)
            continue
        padded = line.ljust(frame.cursor.x + 1)
        col = frame.cursor.x
        text.append(padded[:col])
        text.append(padded[col], style="reverse")
        text.append(padded[col + 1 :])
    return text


@dataclass
class UIState:
    status_text: str = ""
    command_text: Optional[str] = None


class TermeditApp(App[None]):
    """Textual UI embedding the editor; ``run()`` owns raw-mode setup/teardown."""

    CSS = """
	Screen {
		layout: vertical;
	}

	#buffer-view {
		height: 1fr;
		content-align: left top;
	}

	#status-line {
		height: 1;
		background: $surface-darken-1;
	}

	#command-line {
		height: 1;
		background: $surface-darken-2;
	}
	"""

    def __init__(
        self, buffer: TextBuffer, *, config: Optional[EditorConfig] = None
    ) -> None:
        super().__init__()
        self._state = UIState()
        self._config = config or EditorConfig()
        self.manager = create_default_manager(buffer, config=self._config)
        self.adapter: TextualEditorAdapter | None = None
        self._buffer_widget: Static | None = None
        self._status_widget: Static | None = None
        self._command_widget: Static | None = None
        self._logger = telemetry.get_logger("termedit.app")

    def compose(self) -> ComposeResult:
        self._buffer_widget = Static("", id="buffer-view")
        self._status_widget = Static("", id="status-line")
        self._command_widget = Static("", id="command-line")
        yield self._buffer_widget
        yield self._status_widget
        yield self._command_widget

    def on_mount(self) -> None:
        hooks = TextualUIHooks(
            update_view=self._update_view,
            update_status=self._update_status,
            show_command=self._show_command,
            request_exit=self.exit,
            log=self._log_line,
        )
        self.adapter = TextualEditorAdapter(self.manager, hooks)

    def on_key(self, event: events.Key) -> None:
        if not self.adapter:
            return
        normalized = self._normalize_key(event)
        if normalized is None:
            return
        key, text, modifiers = normalized
        self.adapter.handle_textual_key(key, text=text, modifiers=modifiers)
        event.stop()

    def _update_view(self, frame: DisplayFrame) -> None:
        if self._buffer_widget:
            self._buffer_widget.update(render_frame(frame))

    def _update_status(self, status: str) -> None:
        self._state.status_text = status
        if self._status_widget:
            self._status_widget.update(status)
            active = self.manager.active_mode
            if active is not None:
                mode = MODE_CONFIGS[EditorMode(active.name)]
                self._status_widget.styles.background = mode.bg_color

    def _show_command(self, command: Optional[str]) -> None:
        self._state.command_text = command
        if self._command_widget:
            self._command_widget.update("" if command is None else f":{command}")

    def _log_line(self, line: str) -> None:
        self._logger.debug(line)

    @staticmethod
    def _normalize_key(
        event: events.Key,
    ) -> Optional[Tuple[str, Optional[str], Tuple[str, ...]]]:
        key = event.key
        if key == "ctrl+c":
            return None
        if key == "escape":
            return ("ESC", None, ())
        if key in {"enter", "return"}:
            return ("ENTER", None, ())
        if key == "tab":
            return ("TAB", None, ())
        if event.character and event.is_printable:
            return (event.character, event.character, ())
        modifiers = []
        name = key
        for prefix, modifier in (
            ("ctrl+", "CTRL"),
            ("alt+", "ALT"),
            ("shift+", "SHIFT"),
        ):
            if name.startswith(prefix):
                modifiers.append(modifier)
                name = name[len(prefix) :]
        return (name.upper(), None, tuple(modifiers))


def _parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    defaults = EditorConfig.from_env()
    parser = argparse.ArgumentParser(
        prog="termedit", description="Modal terminal text editor."
    )
    parser.add_argument(
        "path", nargs="?", help="File to open (omit for a scratch buffer)"
    )
    parser.add_argument(
        "--log-preset",
        choices=telemetry.PRESETS,
        default=defaults.log_preset,
        help=f"Telemetry preset (default: {defaults.log_preset})",
    )
    parser.add_argument(
        "--tab-width",
        type=int,
        default=defaults.tab_width,
        help=f"Spaces inserted by Tab in insert mode (default: {defaults.tab_width})",
    )
    return parser.parse_args(argv)


def open_buffer(path: Optional[str], config: EditorConfig) -> TextBuffer:
    columns, rows = shutil.get_terminal_size()
    width, height = config.viewport_size(columns, rows)
    if path is None:
        return TextBuffer.empty(width, height)
    return TextBuffer.load(path, width, height)


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = _parse_args(argv)
    config = replace(
        EditorConfig.from_env(), log_preset=args.log_preset, tab_width=args.tab_width
    )
    telemetry.configure(preset=config.log_preset)
    try:
        buffer = open_buffer(args.path, config)
    except BufferIOError as exc:
        print(f"termedit: {exc}", file=sys.stderr)
        return 1
    TermeditApp(buffer, config=config).run()
    return 0


if __name__ == "__main__":  # pragma: no cover - manual run
    sys.exit(main())
