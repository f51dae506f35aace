#!/usr/bin/env python3
"""tin - TIN Isn't Nano.

Usage:
    python main.py [filename]

Controls:
    Arrow keys, Home, End, PageUp, PageDown: Navigate
    Ctrl-S: Save file
    Ctrl-F: Find (arrows jump to next/previous match)
    Ctrl-X: Quit (press repeatedly to discard unsaved changes)
"""

import sys

from tin.__main__ import main


if __name__ == "__main__":
    sys.exit(main())
