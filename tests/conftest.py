"""Shared fixtures: a terminal stand-in with readable escape markers."""

import pytest

from tin.buffer import TextBuffer
from tin.cursor import CursorModel
from tin.editor import Editor
from tin.terminal import TerminalInterface
from tin.viewport import ViewPort


class FakeTerm:
    """Mimics the blessed capabilities the renderer uses.

    Each capability renders as a short tag so frames are easy to assert on.
    """

    hide_cursor = '<hide>'
    normal_cursor = '<show>'
    home = '<home>'
    clear = '<clear>'
    clear_eol = '<eol>'
    reverse = '<rev>'
    normal = '<norm>'
    enter_fullscreen = '<fs>'
    exit_fullscreen = '</fs>'

    def __init__(self, height=24, width=80):
        self.height = height
        self.width = width
        self.location = (-1, -1)

    def color(self, n):
        return f'<c{n}>'

    def move(self, y, x):
        return f'<mv{y},{x}>'

    def move_right(self, n):
        return f'<right{n}>'

    def move_down(self, n):
        return f'<down{n}>'

    def get_location(self, timeout=None):
        return self.location


class FakeTerminal(TerminalInterface):
    """TerminalInterface that records writes instead of touching a tty."""

    def __init__(self, height=24, width=80):
        super().__init__(terminal=FakeTerm(height, width))
        self.written = []
        self.short_by = 0

    def write(self, data) -> int:
        if isinstance(data, str):
            data = data.encode('utf-8')
        self.written.append(data)
        return len(data) - self.short_by

    def setup(self):
        pass

    def cleanup(self):
        pass


def make_buffer(*lines):
    return TextBuffer.from_lines([line.encode('utf-8') if isinstance(line, str) else line
                                  for line in lines])


@pytest.fixture
def fake_terminal():
    return FakeTerminal()


@pytest.fixture
def editor(fake_terminal):
    ed = Editor(terminal=fake_terminal)
    ed.viewport.set_geometry(fake_terminal.term.height, fake_terminal.term.width)
    yield ed
    ed.close()


@pytest.fixture
def hello_world():
    buffer = make_buffer("hello", "world")
    return buffer, CursorModel(buffer)


@pytest.fixture
def viewport():
    return ViewPort(screen_rows=10, screen_cols=40)

