"""Single-line prompt shown in the message bar (save-as, find)."""

from enum import Enum
from typing import Callable, Optional

from .keyboard import KeyEvent, KeyType


class PromptState(Enum):
    """Where a prompt stands after a keystroke."""
    PENDING = "pending"
    CONFIRMED = "confirmed"
    CANCELLED = "cancelled"


PromptCallback = Callable[[str, KeyEvent], None]


class LinePrompt:
    """Collects a line of input one key event at a time.

    Escape cancels, Return confirms. The optional callback sees the
    current input after every key, including the one that ends the prompt.
    """

    def __init__(self, template: str, callback: Optional[PromptCallback] = None):
        self.template = template
        self.callback = callback
        self.text = ""
        self.state = PromptState.PENDING

    @property
    def display(self) -> str:
        return self.template.format(self.text)

    @property
    def result(self) -> Optional[str]:
        """The confirmed text, or None while pending or after cancel."""
        if self.state == PromptState.CONFIRMED:
            return self.text
        return None

    def feed(self, key_event: KeyEvent) -> PromptState:
        if key_event.key_type == KeyType.SPECIAL and key_event.value in ('backspace', 'delete'):
            self.text = self.text[:-1]
        elif key_event.key_type == KeyType.SPECIAL and key_event.value == 'escape':
            self.state = PromptState.CANCELLED
        elif key_event.key_type == KeyType.SPECIAL and key_event.value == 'enter':
            self.state = PromptState.CONFIRMED
        elif key_event.key_type == KeyType.REGULAR:
            char = key_event.value
            # Printable ASCII only
            if len(char) == 1 and 32 <= ord(char) < 127:
                self.text += char

        if self.callback:
            self.callback(self.text, key_event)
        return self.state
