"""A single line of text: raw bytes plus the derived render form.

Columns come in three flavours:

- raw column: byte offset into ``Row.raw``
- render column: screen column after tab expansion, where a UTF-8
  continuation byte occupies no column
- render byte offset: byte offset into ``Row.render``

Only byte-level UTF-8 structure is tracked. A multi-byte character counts
as one column no matter how wide the terminal draws it.
"""

from typing import Optional

from .constants import EditorConstants

TAB = 0x09


def is_continuation(byte: int) -> bool:
    """True for a UTF-8 continuation byte (0b10xxxxxx)."""
    return byte & 0xC0 == 0x80


class Row:
    """One line of the buffer.

    ``render`` and ``visible_length`` are re-derived by every mutator, so
    they always describe the current ``raw``.
    """

    __slots__ = ('raw', 'render', 'visible_length', 'tab_stop')

    def __init__(self, raw: bytes = b"", tab_stop: int = EditorConstants.TAB_STOP):
        self.raw = bytearray(raw)
        self.tab_stop = tab_stop
        self.render = b""
        self.visible_length = 0
        self.update()

    def __len__(self) -> int:
        return len(self.raw)

    def __repr__(self) -> str:
        return f"Row({bytes(self.raw)!r})"

    def update(self):
        """Re-derive the render form and visible length from ``raw``."""
        out = bytearray()
        visible = 0
        col = 0
        for byte in self.raw:
            next_col = self._advance(col, byte)
            if byte == TAB:
                # pad by column; continuation bytes take no column
                out += b" " * (next_col - col)
                visible += 1
            elif is_continuation(byte):
                out.append(byte)
            else:
                out.append(byte)
                visible += 1
            col = next_col
        self.render = bytes(out)
        self.visible_length = visible

    # --- Mutation (callers account for the dirty counter) ---

    def insert(self, at: int, byte: int):
        if at < 0 or at > len(self.raw):
            at = len(self.raw)
        self.raw.insert(at, byte)
        self.update()

    def delete(self, at: int) -> bool:
        if at < 0 or at >= len(self.raw):
            return False
        del self.raw[at]
        self.update()
        return True

    def extend(self, data: bytes):
        self.raw.extend(data)
        self.update()

    def truncate(self, length: int):
        del self.raw[max(length, 0):]
        self.update()

    # --- Coordinate mapping ---

    def _advance(self, render_col: int, byte: int) -> int:
        if byte == TAB:
            return render_col + self.tab_stop - (render_col % self.tab_stop)
        if is_continuation(byte):
            return render_col
        return render_col + 1

    def raw_to_render(self, raw_col: int) -> int:
        """Render column of raw byte offset `raw_col`."""
        render_col = 0
        for byte in self.raw[:raw_col]:
            render_col = self._advance(render_col, byte)
        return render_col

    def render_to_raw(self, render_col: int) -> int:
        """Raw offset of the byte that covers render column `render_col`.

        Returns the row length when `render_col` lies past the end.
        """
        current = 0
        for raw_col, byte in enumerate(self.raw):
            current = self._advance(current, byte)
            if current > render_col:
                return raw_col
        return len(self.raw)

    def render_offset_to_col(self, offset: int) -> int:
        """Render column of byte offset `offset` into the render form."""
        return sum(1 for byte in self.render[:offset] if not is_continuation(byte))

    def find(self, needle: bytes) -> Optional[int]:
        """Render column of the first occurrence of `needle` in the render form."""
        offset = self.render.find(needle)
        if offset == -1:
            return None
        return self.render_offset_to_col(offset)

    @property
    def render_width(self) -> int:
        """Number of screen columns the render form occupies."""
        return self.render_offset_to_col(len(self.render))

    def render_slice(self, start_col: int, width: int) -> bytes:
        """Bytes of the render form covering columns [start_col, start_col + width).

        Continuation bytes follow their lead byte, so a multi-byte character
        is either drawn whole or not at all.
        """
        if width <= 0:
            return b""
        end_col = start_col + width
        col = -1
        begin = None
        for offset, byte in enumerate(self.render):
            if not is_continuation(byte):
                col += 1
                if col == start_col:
                    begin = offset
                elif col == end_col:
                    return self.render[begin:offset] if begin is not None else b""
        if begin is None:
            return b""
        return self.render[begin:]
