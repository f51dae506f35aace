"""tin - a small terminal text editor."""

import logging

from .buffer import TextBuffer
from .cursor import CursorModel
from .row import Row
from .viewport import ViewPort

# The editor owns the screen; log records go nowhere unless configured
logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    'Row',
    'TextBuffer',
    'CursorModel',
    'ViewPort',
]
