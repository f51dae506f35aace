"""Ordered rows of text plus the unsaved-changes counter."""

from typing import Iterable, Optional

from .constants import EditorConstants
from .row import Row


class TextBuffer:
    """The file being edited, one `Row` per line.

    Every structural or content mutation bumps ``dirty``; only a
    successful save (``mark_clean``) resets it.
    """

    def __init__(self, tab_stop: int = EditorConstants.TAB_STOP):
        self.rows: list[Row] = []
        self.dirty = 0
        self.tab_stop = tab_stop

    @classmethod
    def from_lines(cls, lines: Iterable[bytes], tab_stop: int = EditorConstants.TAB_STOP) -> "TextBuffer":
        buffer = cls(tab_stop=tab_stop)
        for line in lines:
            buffer.insert_row(buffer.nrows, line)
        buffer.mark_clean()
        return buffer

    @property
    def nrows(self) -> int:
        return len(self.rows)

    def row(self, index: int) -> Optional[Row]:
        """Row at `index`, or None for the virtual row past the end."""
        if 0 <= index < len(self.rows):
            return self.rows[index]
        return None

    def lines(self) -> list[bytes]:
        return [bytes(row.raw) for row in self.rows]

    def mark_clean(self):
        self.dirty = 0

    # --- Structural mutation ---

    def insert_row(self, at: int, data: bytes = b""):
        if at < 0 or at > len(self.rows):
            return
        self.rows.insert(at, Row(data, tab_stop=self.tab_stop))
        self.dirty += 1

    def delete_row(self, at: int):
        if at < 0 or at >= len(self.rows):
            return
        del self.rows[at]
        self.dirty += 1

    # --- Content mutation ---

    def append_bytes(self, row: int, data: bytes):
        self.rows[row].extend(data)
        self.dirty += 1

    def insert_byte(self, row: int, at: int, byte: int):
        self.rows[row].insert(at, byte)
        self.dirty += 1

    def delete_byte(self, row: int, at: int):
        if self.rows[row].delete(at):
            self.dirty += 1

    def truncate_row(self, row: int, length: int):
        self.rows[row].truncate(length)
        self.dirty += 1

