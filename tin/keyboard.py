"""Keyboard input handling using curtsies-style tokens."""

from typing import Optional
from dataclasses import dataclass
from enum import Enum


class KeyType(Enum):
    """Types of key events."""
    REGULAR = "regular"
    CTRL = "ctrl"
    SPECIAL = "special"


@dataclass
class KeyEvent:
    """Represents a parsed keyboard event."""
    key_type: KeyType
    value: str  # The base key (e.g., 'a', 'left', 'backspace')
    raw: str  # The raw key string from curtsies
    is_ctrl: bool = False
    is_sequence: bool = False

    @property
    def data(self) -> bytes:
        """UTF-8 bytes to insert for a regular key."""
        return self.value.encode('utf-8', errors='replace')


SPECIAL_KEYS = {
    'left', 'right', 'up', 'down', 'home', 'end', 'enter', 'backspace', 'delete',
    'page_up', 'page_down', 'escape',
}


def escape_event(raw: str = '\x1b') -> KeyEvent:
    return KeyEvent(key_type=KeyType.SPECIAL, value='escape', raw=raw)


class KeyboardHandler:
    """Turns curtsies key names into `KeyEvent`s.

    Anything that looks like an escape sequence but is not one of the
    known navigation keys decodes to a plain Escape.
    """

    def __init__(self, terminal_interface):
        """Initialize with a terminal interface."""
        self.terminal = terminal_interface

    def get_key_event(self, timeout: Optional[float] = None) -> Optional[KeyEvent]:
        """Get next key event and map curtsies-style names to KeyEvent."""
        key = self.terminal.get_key(timeout)
        if not key:
            return None
        return self.parse_key(key)

    def parse_key(self, key) -> KeyEvent:
        """Parse a curtsies key token into a KeyEvent.

        Args:
            key: curtsies event or its string form

        Returns:
            Parsed KeyEvent
        """
        key_str = str(key)

        # Curtsies-style key names like '<LEFT>', '<Ctrl-x>', '<Esc+a>'
        if key_str.startswith('<') and key_str.endswith('>') and len(key_str) > 2:
            name = key_str[1:-1]
            lower = name.lower().replace('+', '-')
            parts = lower.split('-')
            base = parts[-1]
            mods = set(parts[:-1])

            if base in ('pageup', 'page_up'):
                base = 'page_up'
            elif base in ('pagedown', 'page_down'):
                base = 'page_down'
            elif base in ('esc', 'escape'):
                base = 'escape'
            elif base in ('return', 'enter'):
                base = 'enter'
            elif base in ('del',):
                base = 'delete'

            if not mods:
                if base in ('space', 'spacebar', 'spc'):
                    return KeyEvent(key_type=KeyType.REGULAR, value=' ', raw=' ')
                if base == 'tab':
                    return KeyEvent(key_type=KeyType.REGULAR, value='\t', raw='\t')
            if 'ctrl' in mods and len(base) == 1:
                return self._ctrl_event(base, key_str)
            # Meta/Esc prefixes are escape sequences the editor does not bind
            if mods & {'alt', 'meta', 'esc'}:
                return escape_event(key_str)
            if base in SPECIAL_KEYS:
                return KeyEvent(key_type=KeyType.SPECIAL, value=base, raw=key_str, is_sequence=True)
            return escape_event(key_str)

        # Unparsed escape sequences collapse to Escape
        if key_str.startswith('\x1b'):
            return escape_event(key_str)

        if len(key_str) == 1:
            o = ord(key_str)
            if o == 0x7f:
                return KeyEvent(key_type=KeyType.SPECIAL, value='backspace', raw=key_str)
            if o == 0x09:
                return KeyEvent(key_type=KeyType.REGULAR, value='\t', raw=key_str)
            if 1 <= o <= 26:  # Ctrl-A .. Ctrl-Z (exclude ESC=27)
                return self._ctrl_event(chr(ord('a') + o - 1), key_str)

        # Regular character
        return KeyEvent(key_type=KeyType.REGULAR, value=key_str, raw=key_str)

    @staticmethod
    def _ctrl_event(letter: str, raw: str) -> KeyEvent:
        # Ctrl-J / Ctrl-M are what terminals send for Return, Ctrl-H for Backspace
        if letter in ('j', 'm'):
            return KeyEvent(key_type=KeyType.SPECIAL, value='enter', raw=raw, is_sequence=True)
        if letter == 'h':
            return KeyEvent(key_type=KeyType.SPECIAL, value='backspace', raw=raw, is_sequence=True)
        if letter == 'i':
            return KeyEvent(key_type=KeyType.REGULAR, value='\t', raw=raw)
        return KeyEvent(key_type=KeyType.CTRL, value=letter, raw=raw, is_ctrl=True)
