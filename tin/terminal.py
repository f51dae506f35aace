"""Terminal interface using Blessed for display and Curtsies for input."""

import contextlib
import logging
import os
import select
import sys
import termios
from typing import Optional

import blessed

from .constants import EditorConstants
from .errors import GeometryError, RawModeError

logger = logging.getLogger(__name__)


class TerminalInterface:
    """Handles terminal I/O using Blessed."""

    def __init__(self, terminal: Optional[blessed.Terminal] = None):
        """Initialize with a terminal instance (or create one)."""
        self.term = terminal or blessed.Terminal()
        self.is_fullscreen = False
        self._curtsies_input: Optional[object] = None

    def setup(self):
        """Enter fullscreen mode and start reading keys through curtsies."""
        self.write(self.term.enter_fullscreen)
        self.is_fullscreen = True
        if self._curtsies_input is None:
            from curtsies import Input  # type: ignore
            try:
                self._curtsies_input = Input(keynames='curtsies')  # type: ignore
                self._curtsies_input.__enter__()
            except (termios.error, OSError) as e:
                self._curtsies_input = None
                raise RawModeError(f"cannot configure terminal input: {e}") from e

    def cleanup(self):
        """Clear the screen, exit fullscreen mode and restore the terminal."""
        if self._curtsies_input is not None:
            try:
                self._curtsies_input.__exit__(None, None, None)  # type: ignore
            except (termios.error, OSError) as e:
                logger.warning(f"Could not restore terminal input mode: {e}")
            finally:
                self._curtsies_input = None
        if self.is_fullscreen:
            self.write(self.term.home + self.term.clear)
            self.write(self.term.exit_fullscreen + self.term.normal_cursor)
            self.is_fullscreen = False

    @contextlib.contextmanager
    def raw_mode(self):
        """Put the terminal in raw mode for the duration of the block."""
        try:
            context = self.term.raw()
            context.__enter__()
        except termios.error as e:
            raise RawModeError(f"cannot enter raw mode: {e}") from e
        try:
            yield
        finally:
            try:
                context.__exit__(None, None, None)
            except termios.error as e:
                logger.warning(f"Could not leave raw mode: {e}")

    def measure(self) -> tuple[int, int]:
        """Return the terminal size as (rows, columns).

        When the window-size query reports no columns, fall back to moving
        the cursor to the bottom-right corner and asking the terminal where
        it ended up.

        Raises:
            GeometryError: neither method produced a size.
        """
        rows, cols = self.term.height, self.term.width
        if cols:
            return rows, cols

        distance = EditorConstants.GEOMETRY_PROBE_DISTANCE
        probe = self.term.move_right(distance) + self.term.move_down(distance)
        if self.write(probe) != len(probe.encode('utf-8')):
            raise GeometryError("cannot move cursor to probe terminal size")
        y, x = self.term.get_location(timeout=EditorConstants.GEOMETRY_PROBE_TIMEOUT)
        if y < 0 or x < 0:
            raise GeometryError("terminal did not report cursor position")
        logger.debug(f"Terminal size from cursor probe: {y + 1}x{x + 1}")
        return y + 1, x + 1

    def write(self, data) -> int:
        """Write `data` to the terminal in one call; returns bytes written."""
        if isinstance(data, str):
            data = data.encode('utf-8')
        sys.stdout.flush()
        return os.write(sys.stdout.fileno(), data)

    def get_key(self, timeout=None):
        """Get a single keypress from the user.

        Args:
            timeout: Timeout in seconds (None for blocking, 0 for non-blocking)

        Returns:
            The curtsies key token as a string, or None when nothing arrived.
        """
        if self._curtsies_input is None:
            return None
        if timeout is None:
            evt = next(self._curtsies_input)  # blocks
            return str(evt)
        r, _, _ = select.select([sys.stdin], [], [], float(timeout))
        if not r:
            return None
        evt = next(self._curtsies_input)
        return str(evt)
