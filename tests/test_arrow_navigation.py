"""Tests for cursor movement."""

import pytest

from tin.cursor import CursorModel
from tin.viewport import ViewPort

from conftest import make_buffer


def test_right_wraps_to_next_row(hello_world):
    buffer, cursor = hello_world
    cursor.move_to(0, 5)
    cursor.right()
    assert cursor.position == (1, 0)


def test_left_wraps_to_previous_row_end(hello_world):
    buffer, cursor = hello_world
    cursor.move_to(1, 0)
    cursor.left()
    assert cursor.position == (0, 5)


def test_left_at_origin_stays(hello_world):
    buffer, cursor = hello_world
    cursor.left()
    assert cursor.position == (0, 0)


def test_right_from_last_row_end_reaches_virtual_row(hello_world):
    buffer, cursor = hello_world
    cursor.move_to(1, 5)
    cursor.right()
    assert cursor.position == (2, 0)
    cursor.right()
    assert cursor.position == (2, 0)


def test_down_onto_virtual_row(hello_world):
    buffer, cursor = hello_world
    cursor.move_to(1, 3)
    cursor.down()
    assert cursor.position == (2, 0)
    cursor.down()
    assert cursor.position == (2, 0)


def test_up_at_top_stays(hello_world):
    buffer, cursor = hello_world
    cursor.move_to(0, 2)
    cursor.up()
    assert cursor.position == (0, 2)


def test_vertical_move_clamps_to_shorter_row():
    buffer = make_buffer("ab", "hello")
    cursor = CursorModel(buffer, 1, 5)
    cursor.up()
    assert cursor.position == (0, 2)


def test_vertical_move_snaps_off_continuation_byte():
    buffer = make_buffer("héllo", "abc")
    cursor = CursorModel(buffer, 1, 2)
    cursor.up()
    assert cursor.position == (0, 1)


def test_right_skips_whole_multibyte_character():
    buffer = make_buffer("héllo")
    cursor = CursorModel(buffer, 0, 1)
    cursor.right()
    assert cursor.raw_col == 3
    cursor.left()
    assert cursor.raw_col == 1


def test_left_skips_four_byte_character():
    buffer = make_buffer("a😀b")
    cursor = CursorModel(buffer, 0, 5)
    cursor.left()
    assert cursor.raw_col == 1


def test_home_and_end(hello_world):
    buffer, cursor = hello_world
    cursor.move_to(1, 2)
    cursor.end()
    assert cursor.position == (1, 5)
    cursor.home()
    assert cursor.position == (1, 0)


def test_move_to_clamps():
    buffer = make_buffer("abc")
    cursor = CursorModel(buffer)
    cursor.move_to(9, 9)
    assert cursor.position == (1, 0)
    cursor.move_to(0, 9)
    assert cursor.position == (0, 3)


@pytest.mark.parametrize("direction, expected", [
    ("up", (0, 2)),
    ("down", (2, 0)),
    ("left", (1, 1)),
    ("right", (1, 3)),
])
def test_move_by_name(hello_world, direction, expected):
    buffer, cursor = hello_world
    cursor.move_to(1, 2)
    cursor.move(direction)
    assert cursor.position == expected


def test_render_col_follows_tabs():
    buffer = make_buffer("\tx")
    cursor = CursorModel(buffer, 0, 1)
    assert cursor.render_col() == 4


class TestPageKeys:
    """Page Up/Down move by one screen of rows."""

    def setup_method(self):
        self.buffer = make_buffer(*[f"line {i}" for i in range(30)])
        self.cursor = CursorModel(self.buffer)
        self.viewport = ViewPort(screen_rows=10, screen_cols=40)

    def test_page_down(self):
        self.cursor.page_down(self.viewport)
        assert self.cursor.row_index == 15

    def test_page_up(self):
        self.viewport.row_offset = 10
        self.cursor.move_to(14, 0)
        self.cursor.page_up(self.viewport)
        assert self.cursor.row_index == 2

    def test_page_up_stops_at_top(self):
        self.cursor.move_to(3, 0)
        self.cursor.page_up(self.viewport)
        assert self.cursor.row_index == 0

    def test_page_down_stops_at_virtual_row(self):
        self.viewport.row_offset = 25
        self.cursor.page_down(self.viewport)
        assert self.cursor.row_index == 30
