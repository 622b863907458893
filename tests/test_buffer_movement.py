from __future__ import annotations

import random

import pytest

from helpers import assert_invariants, make_buffer
from termedit.buffer import Cursor, Move, ToLine


def test_new_buffer_starts_at_origin() -> None:
    buffer = make_buffer()

    assert buffer.cursor == Cursor(0, 0)
    assert buffer.lines == ("",)
    assert buffer.path is None


def test_vertical_moves_clamp_column_without_sticky_column() -> None:
    buffer = make_buffer(["abcdef", "ab", "abcdef"])
    buffer.set_cursor(5, 0)

    assert buffer.move_cursor(Move.DOWN) == Cursor(2, 1)
    assert buffer.move_cursor(Move.DOWN) == Cursor(2, 2)
    assert buffer.move_cursor(Move.UP) == Cursor(2, 1)


def test_vertical_moves_stop_at_edges() -> None:
    buffer = make_buffer(["abc", "de"])
    buffer.set_cursor(2, 0)

    assert buffer.move_cursor(Move.UP) == Cursor(2, 0)
    buffer.move_cursor(Move.LAST_LINE)
    assert buffer.move_cursor(Move.DOWN) == Cursor(0, 1)


def test_left_at_line_start_wraps_to_previous_line_end() -> None:
    buffer = make_buffer(["abc", "de"])
    buffer.set_cursor(0, 1)

    assert buffer.move_cursor(Move.LEFT) == Cursor(3, 0)


def test_right_at_line_end_wraps_to_next_line_start() -> None:
    buffer = make_buffer(["abc", "de"])
    buffer.set_cursor(3, 0)

    assert buffer.move_cursor(Move.RIGHT) == Cursor(0, 1)


def test_horizontal_moves_stop_at_buffer_edges() -> None:
    buffer = make_buffer(["abc", "de"])

    assert buffer.move_cursor(Move.LEFT) == Cursor(0, 0)
    buffer.set_cursor(2, 1)
    assert buffer.move_cursor(Move.RIGHT) == Cursor(2, 1)


def test_left_then_right_is_identity_inside_a_line() -> None:
    buffer = make_buffer(["hello"])
    buffer.set_cursor(2, 0)

    buffer.move_cursor(Move.LEFT)
    buffer.move_cursor(Move.RIGHT)

    assert buffer.cursor == Cursor(2, 0)


def test_right_then_left_across_line_join_returns_to_line_end() -> None:
    buffer = make_buffer(["hello", "world"])
    buffer.move_cursor(Move.LINE_END)

    buffer.move_cursor(Move.RIGHT)
    buffer.move_cursor(Move.LEFT)

    assert buffer.cursor == Cursor(5, 0)


def test_line_start_and_end() -> None:
    buffer = make_buffer(["  indented"])
    buffer.set_cursor(4, 0)

    assert buffer.move_cursor(Move.LINE_END) == Cursor(10, 0)
    assert buffer.move_cursor(Move.LINE_START) == Cursor(0, 0)


@pytest.mark.parametrize(
    ("line", "expected"),
    [("   foo", 3), ("\tbar", 1), ("    ", 0), ("", 0), ("baz", 0)],
)
def test_text_start_finds_first_non_blank(line: str, expected: int) -> None:
    buffer = make_buffer([line])
    buffer.move_cursor(Move.LINE_END)

    assert buffer.move_cursor(Move.TEXT_START) == Cursor(expected, 0)


def test_first_and_last_line_reset_column() -> None:
    buffer = make_buffer(["one", "two", "three"])
    buffer.set_cursor(2, 1)

    assert buffer.move_cursor(Move.LAST_LINE) == Cursor(0, 2)
    buffer.move_cursor(Move.LINE_END)
    assert buffer.move_cursor(Move.FIRST_LINE) == Cursor(0, 0)


def test_to_line_clamps_out_of_range_rows() -> None:
    buffer = make_buffer(["a", "b", "c", "d", "e"])

    assert buffer.move_cursor(ToLine(100)) == Cursor(0, 4)
    assert buffer.move_cursor(ToLine(-3)) == Cursor(0, 0)
    assert buffer.move_cursor(ToLine(2)) == Cursor(0, 2)


def test_set_cursor_clamps_into_buffer() -> None:
    buffer = make_buffer(["abc", "de"])

    assert buffer.set_cursor(10, 10) == Cursor(2, 1)
    assert buffer.set_cursor(-4, -1) == Cursor(0, 0)


def test_movement_does_not_touch_content() -> None:
    buffer = make_buffer(["abc", "de"])

    for movement in Move:
        buffer.move_cursor(movement)

    assert buffer.lines == ("abc", "de")
    assert buffer.dirty is False


def test_viewport_scrolls_vertically_with_cursor() -> None:
    buffer = make_buffer([str(i) for i in range(10)], width=10, height=3)

    buffer.move_cursor(ToLine(9))
    assert buffer.viewport.y == 7

    buffer.move_cursor(Move.UP)
    assert buffer.viewport.y == 7

    buffer.move_cursor(Move.FIRST_LINE)
    assert buffer.viewport.y == 0


def test_viewport_scrolls_horizontally_with_cursor() -> None:
    buffer = make_buffer(["abcdefgh", "ab"], width=4, height=2)

    buffer.move_cursor(Move.LINE_END)
    assert buffer.viewport.x == 5

    buffer.move_cursor(Move.DOWN)
    assert buffer.cursor == Cursor(2, 1)
    assert buffer.viewport.x == 2


def test_random_movements_keep_invariants() -> None:
    rng = random.Random(1234)
    lines = ["", "short", "a much longer line of text", "  x", ""]
    buffer = make_buffer(lines, width=6, height=2)
    movements = list(Move) + [ToLine(n) for n in (-1, 0, 3, 50)]

    for _ in range(500):
        buffer.move_cursor(rng.choice(movements))
        assert_invariants(buffer)
