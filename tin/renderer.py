"""Frame composition.

A frame is the whole screen: top status bar, one line per visible buffer
row, bottom message bar, then the cursor placement. It is assembled in a
`FrameBuffer` and handed to the terminal in one write so the screen never
shows a half-drawn state.
"""

import time
from dataclasses import dataclass
from typing import Optional

from .buffer import TextBuffer
from .constants import EditorConstants
from .cursor import CursorModel
from .frame import FrameBuffer
from .viewport import ViewPort


@dataclass
class StatusMessage:
    """Transient message for the bottom bar, shown until it times out."""

    text: str = ""
    set_at: float = 0.0
    timeout: float = EditorConstants.STATUS_MESSAGE_SECONDS

    def set(self, text: str, now: Optional[float] = None):
        self.text = text
        self.set_at = time.time() if now is None else now

    def clear(self):
        self.text = ""

    def current(self, now: Optional[float] = None) -> str:
        """The message text, or '' once it is `timeout` seconds old."""
        if now is None:
            now = time.time()
        if not self.text or now - self.set_at >= self.timeout:
            return ""
        return self.text


class Renderer:
    """Builds escape-coded frames using a blessed terminal's capabilities."""

    def __init__(self, term, version: str = "", gutter_color: int = EditorConstants.GUTTER_COLOR):
        self.term = term
        self.version = version
        self.gutter_color = gutter_color

    def compose(
        self,
        buffer: TextBuffer,
        cursor: CursorModel,
        viewport: ViewPort,
        filename: Optional[str],
        message: str,
    ) -> bytes:
        """Build one frame.

        The caller must already have run `viewport.update_gutter` and
        `viewport.scroll` for this refresh; the gutter width is read, never
        recomputed, here.
        """
        term = self.term
        frame = FrameBuffer()
        frame.append(term.hide_cursor)
        frame.append(term.home)

        self._draw_top_status(frame, buffer, cursor, viewport, filename)
        frame.append("\r\n")
        self._draw_rows(frame, buffer, viewport)
        self._draw_message_bar(frame, viewport, message)

        y = cursor.row_index - viewport.row_offset + 1
        x = cursor.render_col() - viewport.col_offset + viewport.gutter_width
        frame.append(term.move(y, x))
        frame.append(term.normal_cursor)
        return frame.getvalue()

    def _draw_top_status(self, frame: FrameBuffer, buffer: TextBuffer, cursor: CursorModel,
                         viewport: ViewPort, filename: Optional[str]):
        name = filename or EditorConstants.UNNAMED_BUFFER
        dirty = "*" if buffer.dirty else " "
        current = buffer.row(cursor.row_index)
        row_num = cursor.row_index + 1 if buffer.nrows else 0
        ncols = current.render_width if current is not None else 0

        width = viewport.bar_width
        right = f"line {row_num}/{buffer.nrows}, col {cursor.render_col() + 1}/{ncols}"[:width]
        left = f"[{dirty}] {name[:EditorConstants.FILENAME_DISPLAY_WIDTH]}"[:width - len(right)]

        frame.append(self.term.reverse)
        frame.append(left)
        frame.pad(width - len(left) - len(right))
        frame.append(right)
        frame.append(self.term.normal)

    def _draw_rows(self, frame: FrameBuffer, buffer: TextBuffer, viewport: ViewPort):
        term = self.term
        number_width = viewport.gutter_width - 1
        banner_top = viewport.visible_rows // 3

        for y in range(viewport.visible_rows):
            filerow = y + viewport.row_offset
            row = buffer.row(filerow)
            if row is None:
                if buffer.nrows == 0 and y >= banner_top:
                    self._draw_welcome(frame, viewport, y - banner_top)
                else:
                    frame.append(EditorConstants.FILLER_MARKER)
            else:
                frame.append(term.color(self.gutter_color))
                frame.append(str(filerow + 1).rjust(number_width))
                frame.append(term.normal)
                frame.append(" ")
                frame.append(row.render_slice(viewport.col_offset, viewport.visible_cols))

            frame.append(term.clear_eol)
            frame.append("\r\n")

    def _draw_welcome(self, frame: FrameBuffer, viewport: ViewPort, line: int):
        lines = EditorConstants.WELCOME_LINES
        text = lines[line].format(self.version) if line < len(lines) else ""
        text = text[:viewport.visible_cols]
        pad = (viewport.visible_cols - len(text)) // 2
        if pad:
            frame.append(EditorConstants.FILLER_MARKER)
            pad -= 1
        frame.pad(pad)
        frame.append(text)

    def _draw_message_bar(self, frame: FrameBuffer, viewport: ViewPort, message: str):
        width = viewport.bar_width
        text = message[:width]
        frame.append(self.term.clear_eol)
        frame.append(self.term.reverse)
        frame.append(text)
        frame.pad(width - len(text))
        frame.append(self.term.normal)
