"""Main editor controller."""

import logging
import os
import select
import signal
from typing import Callable, Optional

from .buffer import TextBuffer
from .commands import CommandRegistry
from .constants import EditorConstants
from .cursor import CursorModel
from .file_io import read_lines, save_atomic
from .keyboard import KeyboardHandler, KeyEvent
from .prompt import LinePrompt, PromptState
from .renderer import Renderer, StatusMessage
from .search import SearchEngine
from .settings import EditorSettings
from .terminal import TerminalInterface
from .version import VERSION
from .viewport import ViewPort

logger = logging.getLogger(__name__)


class Editor:
    """The editor context: buffer, cursor, viewport, terminal and main loop.

    One instance exists per process and every command receives it.
    """

    def __init__(self, settings: Optional[EditorSettings] = None,
                 terminal: Optional[TerminalInterface] = None):
        """Initialize the editor components."""
        self.settings = settings or EditorSettings()
        self.terminal = terminal or TerminalInterface()
        self.keyboard = KeyboardHandler(self.terminal)
        self.command_registry = CommandRegistry()
        self.renderer = Renderer(self.terminal.term, version=VERSION,
                                 gutter_color=self.settings.gutter_color)
        self.viewport = ViewPort()
        self.status = StatusMessage(timeout=self.settings.status_message_seconds)
        self.filename: Optional[str] = None
        self._set_buffer(TextBuffer(tab_stop=self.settings.tab_stop))
        self.prompt: Optional[LinePrompt] = None
        self._prompt_done: Optional[Callable[[Optional[str]], None]] = None
        self.quit_times = self.settings.quit_times
        self.running = False
        # Create pipe for resize signaling
        self._resize_pipe_r, self._resize_pipe_w = os.pipe()

    def _set_buffer(self, buffer: TextBuffer):
        self.buffer = buffer
        self.cursor = CursorModel(buffer)
        self.search = SearchEngine(buffer, self.cursor, self.viewport)
        self.viewport.row_offset = self.viewport.col_offset = 0

    def set_status(self, text: str):
        self.status.set(text)

    # --- Main loop ---

    def _handle_resize(self, signum, frame):
        """Handle terminal resize signal."""
        del signum, frame  # Unused
        # Write to pipe to wake up select()
        os.write(self._resize_pipe_w, EditorConstants.RESIZE_PIPE_MARKER)

    def run(self):
        """Run the main editor loop until the user quits.

        Raises:
            FatalError: the terminal could not be configured or measured.
        """
        self.running = True
        original_winch_handler = signal.signal(signal.SIGWINCH, self._handle_resize)
        try:
            self.terminal.setup()
            with self.terminal.raw_mode():
                self.update_geometry()
                self.refresh()

                while self.running:
                    # Block until a key arrives or the window is resized
                    ready, _, _ = select.select([0, self._resize_pipe_r], [], [])

                    if self._resize_pipe_r in ready:
                        os.read(self._resize_pipe_r, 1024)
                        self.update_geometry()
                        self.refresh()
                    elif 0 in ready:
                        key_event = self.keyboard.get_key_event(timeout=0)
                        if key_event:
                            self.handle_key_event(key_event)
                            if self.running:
                                self.refresh()
        finally:
            signal.signal(signal.SIGWINCH, original_winch_handler)
            self.close()
            self.terminal.cleanup()

    def close(self):
        """Release the resize pipe. Safe to call more than once."""
        for fd in (self._resize_pipe_r, self._resize_pipe_w):
            if fd is not None:
                os.close(fd)
        self._resize_pipe_r = self._resize_pipe_w = None

    def update_geometry(self):
        rows, cols = self.terminal.measure()
        logger.debug(f"Terminal geometry {rows}x{cols}")
        self.viewport.set_geometry(rows, cols)

    def compose_frame(self) -> bytes:
        """Recompute gutter and scroll, then build the frame for this refresh."""
        # The gutter width is fixed from here until the frame is built
        self.viewport.update_gutter(self.buffer.nrows)
        self.viewport.scroll(self.cursor)
        message = self.prompt.display if self.prompt else self.status.current()
        return self.renderer.compose(self.buffer, self.cursor, self.viewport,
                                     self.filename, message)

    def refresh(self) -> bool:
        """Draw one frame; returns False if the terminal took only part of it."""
        frame = self.compose_frame()
        written = self.terminal.write(frame)
        if written != len(frame):
            logger.warning(f"Short write to terminal ({written}/{len(frame)} bytes), frame dropped")
            return False
        return True

    # --- Key handling ---

    def handle_key_event(self, key_event: KeyEvent):
        """Dispatch one key to the open prompt or to the command registry."""
        if self.prompt is not None:
            self._feed_prompt(key_event)
            self.quit_times = self.settings.quit_times
            return

        command = self.command_registry.lookup(key_event)
        if command is None or command.resets_quit:
            self.quit_times = self.settings.quit_times
        if command is not None:
            command.execute(self, key_event)

    def open_prompt(self, template: str, on_done: Callable[[Optional[str]], None],
                    callback=None):
        self.prompt = LinePrompt(template, callback)
        self._prompt_done = on_done

    def _feed_prompt(self, key_event: KeyEvent):
        prompt = self.prompt
        if prompt.feed(key_event) == PromptState.PENDING:
            return
        on_done = self._prompt_done
        self.prompt = None
        self._prompt_done = None
        self.status.clear()
        on_done(prompt.result)

    def request_quit(self):
        """Quit, unless unsaved changes still need more confirmations."""
        if self.buffer.dirty and self.quit_times > 0:
            noun = "time" if self.quit_times == 1 else "times"
            self.set_status(EditorConstants.QUIT_WARNING.format(self.quit_times, noun))
            self.quit_times -= 1
            return
        self.running = False

    # --- Search ---

    def start_search(self):
        self.search.begin()
        self.open_prompt(EditorConstants.FIND_PROMPT, self.search.finish,
                         callback=lambda query, key_event: self.search.update(query, key_event.value))

    # --- Files ---

    def load_file(self, filename: str):
        """Load a file into the editor.

        A missing file starts an empty buffer under that name; other errors
        are reported in the status bar.

        Args:
            filename: Path to file to load
        """
        self.filename = filename
        try:
            lines = read_lines(filename)
        except FileNotFoundError:
            logger.info(f"{filename} does not exist, starting a new file")
            self._set_buffer(TextBuffer(tab_stop=self.settings.tab_stop))
            return
        except OSError as e:
            logger.warning(f"Error loading {filename}: {e}")
            self.set_status(f"open error: {e.strerror or e}")
            return
        self._set_buffer(TextBuffer.from_lines(lines, tab_stop=self.settings.tab_stop))

    def save_file(self, filename: str) -> bool:
        """Save the buffer to `filename` atomically.

        On failure the dirty counter is left alone so the user can retry.

        Returns:
            True if save succeeded, False otherwise
        """
        try:
            written = save_atomic(filename, self.buffer.lines())
        except PermissionError:
            logger.warning(f"Permission denied saving {filename}")
            self.set_status(f"save error: permission denied: {filename}")
            return False
        except OSError as e:
            logger.warning(f"Error saving {filename}: {e}")
            self.set_status(f"save error: {e.strerror or e}")
            return False

        self.filename = filename
        self.buffer.mark_clean()
        self.set_status(f"wrote {written} bytes")
        return True

    def handle_save(self):
        """Save to the current file, prompting for a name if there is none."""
        if self.filename:
            self.save_file(self.filename)
        else:
            self.open_prompt(EditorConstants.SAVE_AS_PROMPT, self._finish_save_as)

    def _finish_save_as(self, name: Optional[str]):
        if not name:
            self.set_status("write aborted")
            return
        self.save_file(name)
