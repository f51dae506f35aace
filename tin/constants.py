"""Constants and configuration for the tin editor."""

class EditorConstants:
    """Central configuration constants for the editor."""

    # Text layout
    TAB_STOP = 4  # Render columns per tab stop
    FILENAME_DISPLAY_WIDTH = 20  # Characters of the filename shown in the status bar
    UNNAMED_BUFFER = "[New]"
    FILLER_MARKER = "~"  # Drawn on screen rows past the end of the buffer
    GUTTER_COLOR = 1  # Foreground color index for line numbers (red)

    # Screen layout
    STATUS_LINES = 2  # Top status bar + bottom message bar

    # Status messages
    STATUS_MESSAGE_SECONDS = 2.0  # Transient messages vanish after this many seconds
    QUIT_TIMES = 3  # Extra Ctrl-X presses required to quit with unsaved changes
    QUIT_WARNING = "Unsaved changes in buffer! (press ^X {} more {} to quit)"

    # Prompts
    SAVE_AS_PROMPT = "save as: {}"
    FIND_PROMPT = "find (next/prev with arrow keys): {}"

    # Welcome banner, drawn when the buffer is empty
    WELCOME_LINES = (
        "TIN - TIN Isn't Nano",
        "version {}",
        "^X exit   ^S save   ^F find",
    )

    # Geometry probe fallback
    GEOMETRY_PROBE_DISTANCE = 999  # Cursor-forward/down distance to reach the corner
    GEOMETRY_PROBE_TIMEOUT = 1.0  # Seconds to wait for the cursor position report

    # File operations
    ATOMIC_SAVE_PREFIX = "."  # Prefix for temporary save files
    ATOMIC_SAVE_SUFFIX = ".tmp"  # Suffix for temporary save files
    NEW_FILE_MODE = 0o644  # Mode for files that did not exist before saving

    # Resize handling
    RESIZE_PIPE_MARKER = b'R'  # Byte written to pipe to signal resize
