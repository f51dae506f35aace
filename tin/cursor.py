"""Cursor position and navigation over a `TextBuffer`."""

from dataclasses import dataclass
from typing import TYPE_CHECKING

from .buffer import TextBuffer
from .row import is_continuation

if TYPE_CHECKING:
    from .viewport import ViewPort


@dataclass
class CursorModel:
    """Cursor as (row index, raw byte column).

    ``row_index`` ranges over [0, nrows]; ``nrows`` is the virtual row past
    the last line. ``raw_col`` always sits on a lead byte or at the end of
    the row, never on a continuation byte.
    """

    buffer: TextBuffer
    row_index: int = 0
    raw_col: int = 0

    @property
    def position(self) -> tuple[int, int]:
        return (self.row_index, self.raw_col)

    def row_length(self) -> int:
        row = self.buffer.row(self.row_index)
        return len(row) if row is not None else 0

    def render_col(self) -> int:
        """Render column of the cursor, recomputed from ``raw_col``."""
        row = self.buffer.row(self.row_index)
        if row is None:
            return 0
        return row.raw_to_render(self.raw_col)

    def move_to(self, row_index: int, raw_col: int):
        self.row_index = row_index
        self.raw_col = raw_col
        self.clamp()

    def clamp(self):
        """Pull the cursor back inside the buffer and onto a lead byte."""
        self.row_index = max(0, min(self.row_index, self.buffer.nrows))
        row = self.buffer.row(self.row_index)
        if row is None:
            self.raw_col = 0
            return
        self.raw_col = max(0, min(self.raw_col, len(row)))
        while self.raw_col > 0 and self.raw_col < len(row) and is_continuation(row.raw[self.raw_col]):
            self.raw_col -= 1

    # --- Navigation ---

    def up(self):
        if self.row_index > 0:
            self.row_index -= 1
        self.clamp()

    def down(self):
        if self.row_index < self.buffer.nrows:
            self.row_index += 1
        self.clamp()

    def left(self):
        row = self.buffer.row(self.row_index)
        if self.raw_col > 0 and row is not None:
            self.raw_col -= 1
            # skip back over the whole multi-byte sequence
            while self.raw_col > 0 and is_continuation(row.raw[self.raw_col]):
                self.raw_col -= 1
        elif self.row_index > 0:
            self.row_index -= 1
            self.raw_col = len(self.buffer.rows[self.row_index])
        self.clamp()

    def right(self):
        row = self.buffer.row(self.row_index)
        if row is None:
            return
        if self.raw_col < len(row):
            self.raw_col += 1
            while self.raw_col < len(row) and is_continuation(row.raw[self.raw_col]):
                self.raw_col += 1
        else:
            self.row_index += 1
            self.raw_col = 0
        self.clamp()

    def home(self):
        self.raw_col = 0

    def end(self):
        self.raw_col = self.row_length()

    def page_up(self, viewport: "ViewPort"):
        self.row_index = viewport.row_offset
        for _ in range(viewport.visible_rows):
            self.up()

    def page_down(self, viewport: "ViewPort"):
        self.row_index = min(viewport.row_offset + viewport.visible_rows - 1, self.buffer.nrows)
        for _ in range(viewport.visible_rows):
            self.down()

    def move(self, direction: str):
        """Move one step in `direction` ('up', 'down', 'left' or 'right')."""
        getattr(self, direction)()
