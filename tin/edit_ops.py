"""Editing operations applied at the cursor.

Each operation leaves the cursor on a valid position with every touched
row re-derived.
"""

from .buffer import TextBuffer
from .cursor import CursorModel
from .row import is_continuation


def insert_char(buffer: TextBuffer, cursor: CursorModel, data: bytes):
    """Insert one character (its UTF-8 bytes) before the cursor."""
    if not data:
        return
    if cursor.row_index == buffer.nrows:
        buffer.insert_row(buffer.nrows, b"")
    for byte in data:
        buffer.insert_byte(cursor.row_index, cursor.raw_col, byte)
        cursor.raw_col += 1


def split_row(buffer: TextBuffer, cursor: CursorModel):
    """Break the current row at the cursor; the cursor moves to the new row."""
    if cursor.raw_col == 0:
        buffer.insert_row(cursor.row_index, b"")
    else:
        row = buffer.rows[cursor.row_index]
        buffer.insert_row(cursor.row_index + 1, bytes(row.raw[cursor.raw_col:]))
        buffer.truncate_row(cursor.row_index, cursor.raw_col)
    cursor.row_index += 1
    cursor.raw_col = 0


def join_with_previous(buffer: TextBuffer, cursor: CursorModel):
    """Append the current row to the previous one and delete it."""
    if cursor.row_index == 0 or cursor.row_index >= buffer.nrows:
        return
    previous = cursor.row_index - 1
    joined_at = len(buffer.rows[previous])
    buffer.append_bytes(previous, bytes(buffer.rows[cursor.row_index].raw))
    buffer.delete_row(cursor.row_index)
    cursor.row_index = previous
    cursor.raw_col = joined_at


def backspace(buffer: TextBuffer, cursor: CursorModel):
    """Delete the character before the cursor, joining rows at column 0."""
    if cursor.row_index == buffer.nrows:
        return
    if cursor.raw_col == 0:
        join_with_previous(buffer, cursor)
        return

    row = buffer.rows[cursor.row_index]
    # a multi-byte character goes as one unit: trailing bytes first
    while cursor.raw_col > 0 and is_continuation(row.raw[cursor.raw_col - 1]):
        buffer.delete_byte(cursor.row_index, cursor.raw_col - 1)
        cursor.raw_col -= 1
    if cursor.raw_col > 0:
        buffer.delete_byte(cursor.row_index, cursor.raw_col - 1)
        cursor.raw_col -= 1


def forward_delete(buffer: TextBuffer, cursor: CursorModel):
    """Delete the character under the cursor, joining the next row at the end."""
    row = buffer.row(cursor.row_index)
    if row is None:
        return
    if cursor.raw_col < len(row):
        buffer.delete_byte(cursor.row_index, cursor.raw_col)
        while cursor.raw_col < len(row) and is_continuation(row.raw[cursor.raw_col]):
            buffer.delete_byte(cursor.row_index, cursor.raw_col)
    elif cursor.row_index + 1 < buffer.nrows:
        buffer.append_bytes(cursor.row_index, bytes(buffer.rows[cursor.row_index + 1].raw))
        buffer.delete_row(cursor.row_index + 1)
