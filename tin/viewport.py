"""Window geometry and scroll offsets."""

from .constants import EditorConstants
from .cursor import CursorModel


def digit_count(n: int) -> int:
    """Number of decimal digits in `n` (zero has one)."""
    return len(str(abs(n)))


class ViewPort:
    """The visible window onto the buffer.

    ``visible_cols`` excludes the line-number gutter. The gutter width is
    computed once per refresh by `update_gutter` and held until the next
    refresh so rows and cursor placement agree on it.
    """

    def __init__(self, screen_rows: int = 24, screen_cols: int = 80):
        self.row_offset = 0
        self.col_offset = 0
        self.gutter_width = 2
        self.screen_rows = screen_rows
        self.screen_cols = screen_cols
        self.visible_rows = 1
        self.visible_cols = 1
        self.set_geometry(screen_rows, screen_cols)

    def set_geometry(self, screen_rows: int, screen_cols: int):
        """Adopt a new terminal size, keeping two lines for the status bars."""
        self.screen_rows = screen_rows
        self.screen_cols = screen_cols
        self.visible_rows = max(screen_rows - EditorConstants.STATUS_LINES, 1)
        self._update_visible_cols()

    def update_gutter(self, nrows: int):
        """Size the gutter for `nrows` line numbers plus one separator space."""
        self.gutter_width = digit_count(nrows) + 1
        self._update_visible_cols()

    def _update_visible_cols(self):
        self.visible_cols = max(self.screen_cols - self.gutter_width, 1)

    @property
    def bar_width(self) -> int:
        """Width of the status bars: text columns plus gutter."""
        return self.visible_cols + self.gutter_width

    def scroll(self, cursor: CursorModel):
        """Move the offsets just enough to bring the cursor into view."""
        render_col = cursor.render_col()

        if cursor.row_index < self.row_offset:
            self.row_offset = cursor.row_index
        if cursor.row_index >= self.row_offset + self.visible_rows:
            self.row_offset = cursor.row_index - self.visible_rows + 1
        if render_col < self.col_offset:
            self.col_offset = render_col
        if render_col >= self.col_offset + self.visible_cols:
            self.col_offset = render_col - self.visible_cols + 1

    def contains(self, cursor: CursorModel) -> bool:
        render_col = cursor.render_col()
        return (self.row_offset <= cursor.row_index < self.row_offset + self.visible_rows
                and self.col_offset <= render_col < self.col_offset + self.visible_cols)

    def snapshot(self) -> tuple[int, int]:
        return (self.row_offset, self.col_offset)

    def restore(self, snapshot: tuple[int, int]):
        self.row_offset, self.col_offset = snapshot
