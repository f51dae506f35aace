"""Reading files into lines and saving them atomically."""

import logging
import os
import stat
import tempfile
from typing import Sequence

from .constants import EditorConstants

logger = logging.getLogger(__name__)


def read_lines(filename: str) -> list[bytes]:
    """Read `filename` as raw lines with line terminators stripped.

    Raises:
        OSError: the file cannot be opened or read.
    """
    lines = []
    with open(filename, 'rb') as f:
        for line in f:
            lines.append(line.rstrip(b'\r\n'))
    logger.debug(f"Read {len(lines)} lines from {filename}")
    return lines


def save_atomic(filename: str, lines: Sequence[bytes]) -> int:
    """Write `lines` joined by newlines (no trailing newline) to `filename`.

    The data goes to a temporary file in the destination directory, which
    is then renamed over the destination, so readers see either the old or
    the new contents. A symlink is followed and its target replaced. When
    the destination existed, its mode, owner and group carry over.

    Returns:
        Number of bytes written.

    Raises:
        OSError: any step failed; the destination is left untouched.
    """
    target = os.path.realpath(filename)
    try:
        st = os.stat(target)
    except FileNotFoundError:
        st = None

    content = b'\n'.join(lines)
    dir_name = os.path.dirname(target) or '.'
    temp_filename = None
    try:
        with tempfile.NamedTemporaryFile(mode='wb', dir=dir_name,
                                         prefix=EditorConstants.ATOMIC_SAVE_PREFIX + os.path.basename(target),
                                         suffix=EditorConstants.ATOMIC_SAVE_SUFFIX,
                                         delete=False) as temp_file:
            temp_filename = temp_file.name
            temp_file.write(content)
            temp_file.flush()
            os.fsync(temp_file.fileno())  # Ensure data is written to disk

        if st is not None:
            os.chmod(temp_filename, stat.S_IMODE(st.st_mode))
            if (st.st_uid, st.st_gid) != (os.getuid(), os.getgid()):
                os.chown(temp_filename, st.st_uid, st.st_gid)
        else:
            os.chmod(temp_filename, EditorConstants.NEW_FILE_MODE)

        # Atomic rename - this is atomic on POSIX systems
        os.replace(temp_filename, target)
    except OSError:
        if temp_filename is not None:
            try:
                os.remove(temp_filename)
            except OSError:
                pass
        raise

    logger.info(f"Wrote {len(content)} bytes to {target}")
    return len(content)
