"""Incremental, wrap-around search over the rows' render forms."""

from typing import Optional

from .buffer import TextBuffer
from .cursor import CursorModel
from .viewport import ViewPort

FORWARD = 1
BACKWARD = -1


class SearchEngine:
    """Drives the cursor from a find prompt.

    `begin` snapshots cursor and scroll state, `update` runs after every
    prompt keystroke, and `finish` restores the snapshot when the search
    was cancelled or confirmed empty.
    """

    def __init__(self, buffer: TextBuffer, cursor: CursorModel, viewport: ViewPort):
        self.buffer = buffer
        self.cursor = cursor
        self.viewport = viewport
        self.last_match = -1
        self.direction = FORWARD
        self._saved_cursor: Optional[tuple[int, int]] = None
        self._saved_scroll: Optional[tuple[int, int]] = None

    def begin(self):
        self._saved_cursor = self.cursor.position
        self._saved_scroll = self.viewport.snapshot()
        self.reset()

    def reset(self):
        self.last_match = -1
        self.direction = FORWARD

    def update(self, query: str, key: Optional[str]):
        """React to prompt key `key` with the prompt now holding `query`.

        Left/Up search backward from the last match, Right/Down forward.
        Return and Escape end the search without moving; any other key
        edited the query, so the search restarts from the top. Unlike
        kilo, Return does not search again from the top, so a match
        reached with the arrows stays selected.
        """
        if key in ('enter', 'escape'):
            self.reset()
            return
        if key in ('left', 'up'):
            self.direction = BACKWARD
        elif key in ('right', 'down'):
            self.direction = FORWARD
        else:
            self.reset()

        if query:
            self.find(query)

    def find(self, query: str) -> bool:
        """Search one full lap of rows starting after the last match."""
        needle = query.encode('utf-8')
        nrows = self.buffer.nrows
        if self.last_match == -1:
            self.direction = FORWARD

        current = self.last_match
        for _ in range(nrows):
            current = (current + self.direction) % nrows
            row = self.buffer.rows[current]
            col = row.find(needle)
            if col is not None:
                self.last_match = current
                self.cursor.move_to(current, row.render_to_raw(col))
                # past-the-end offset makes the next scroll put the match on top
                self.viewport.row_offset = nrows
                return True
        return False

    def finish(self, query: Optional[str]):
        """Restore the pre-search position unless a non-empty query was confirmed."""
        if not query and self._saved_cursor is not None:
            self.cursor.move_to(*self._saved_cursor)
            self.viewport.restore(self._saved_scroll)
        self.reset()
