from __future__ import annotations

from pathlib import Path
from typing import List, Optional

import pytest

from helpers import make_buffer
from termedit.adapters.textual import (
    TextualEditorAdapter,
    TextualUIHooks,
    create_default_manager,
)
from termedit.buffer import Cursor, DisplayFrame


def make_adapter(
    lines=("",), **hook_overrides
) -> tuple[TextualEditorAdapter, List[DisplayFrame]]:
    frames: List[DisplayFrame] = []
    hooks = TextualUIHooks(update_view=frames.append, **hook_overrides)
    manager = create_default_manager(make_buffer(lines, width=10, height=3))
    return TextualEditorAdapter(manager, hooks), frames


def test_adapter_pushes_initial_frame_and_refreshes_after_keys() -> None:
    adapter, frames = make_adapter(["abc"])

    adapter.handle_textual_key("i")
    adapter.handle_textual_key("x", text="x")

    assert frames[0].lines == ("abc", "", "")
    assert frames[-1].lines == ("xabc", "", "")
    assert frames[-1].cursor == Cursor(1, 0)


def test_status_line_reports_mode_position_and_dirty_flag() -> None:
    statuses: List[str] = []
    adapter, _ = make_adapter(["abc"], update_status=statuses.append)

    assert statuses[0].startswith("NORMAL  [scratch]  1:1")
    adapter.handle_textual_key("i")
    adapter.handle_textual_key("z", text="z")

    assert statuses[-1] == "INSERT  [scratch] [+]  1:2"


def test_command_line_is_shown_only_in_command_mode() -> None:
    commands: List[Optional[str]] = []
    adapter, _ = make_adapter(show_command=commands.append)

    adapter.handle_textual_key(":", text=":")
    adapter.handle_textual_key("g", text="g")
    adapter.handle_textual_key("ENTER")

    assert "" in commands
    assert "g" in commands
    assert commands[-1] is None


def test_command_errors_surface_on_status_line() -> None:
    statuses: List[str] = []
    adapter, _ = make_adapter(update_status=statuses.append)

    for key in (":", "w"):
        adapter.handle_textual_key(key, text=key)
    adapter.handle_textual_key("ENTER")

    assert statuses[-1].endswith("No file name associated with this buffer")


def test_quit_command_requests_exit() -> None:
    exits: List[bool] = []
    adapter, _ = make_adapter(request_exit=lambda: exits.append(True))

    for key in (":", "q"):
        adapter.handle_textual_key(key, text=key)
    adapter.handle_textual_key("ENTER")

    assert exits == [True]


def test_open_command_swaps_rendered_buffer(tmp_path: Path) -> None:
    path = tmp_path / "doc.txt"
    path.write_text("first\nsecond", encoding="utf-8")
    adapter, frames = make_adapter(["scratch"])

    for key in f":o {path}":
        adapter.handle_textual_key(key, text=key)
    adapter.handle_textual_key("ENTER")

    assert adapter.buffer.path == path
    assert frames[-1].lines == ("first", "second", "")


def test_adapter_emits_log_lines() -> None:
    logs: List[str] = []
    adapter, _ = make_adapter(log=logs.append)

    adapter.handle_textual_key("i")

    assert any(line.startswith("key ->") for line in logs)
    assert any(line.startswith("result <-") for line in logs)


def test_render_frame_marks_cursor_cell() -> None:
    pytest.importorskip("textual")
    from termedit.adapters.textual.app import render_frame

    text = render_frame(DisplayFrame(lines=("ab", "cd"), cursor=Cursor(2, 0)))

    assert text.plain == "ab \ncd"
    assert any(str(span.style) == "reverse" for span in text.spans)


def test_main_reports_unreadable_file(tmp_path: Path, monkeypatch, capsys) -> None:
    pytest.importorskip("textual")
    from termedit.adapters.textual.app import main

    monkeypatch.chdir(tmp_path)

    status = main([str(tmp_path / "missing.txt"), "--log-preset", "production"])

    assert status == 1
    assert "termedit: Cannot read" in capsys.readouterr().err
