"""Command pattern implementation for editor actions."""

from abc import ABC, abstractmethod
from typing import Dict, Tuple, Optional, TYPE_CHECKING
from . import edit_ops
from .keyboard import KeyType

if TYPE_CHECKING:
    from .editor import Editor
    from .keyboard import KeyEvent


class EditorCommand(ABC):
    """Base class for editor commands."""

    # Quit keeps its countdown; every other command resets it
    resets_quit = True

    @abstractmethod
    def execute(self, editor: 'Editor', key_event: 'KeyEvent') -> bool:
        """Execute the command.

        Args:
            editor: Editor instance
            key_event: The key event that triggered this command

        Returns:
            True if the command modified the buffer
        """
        pass


class MovementCommand(EditorCommand):
    """Base class for cursor movement commands."""

    def execute(self, editor: 'Editor', key_event: 'KeyEvent') -> bool:
        """Movement commands don't modify the buffer."""
        self._move(editor, key_event)
        return False

    @abstractmethod
    def _move(self, editor: 'Editor', key_event: 'KeyEvent'):
        """Perform the movement."""
        pass


class ArrowCommand(MovementCommand):
    def _move(self, editor, key_event):
        editor.cursor.move(key_event.value)


class HomeCommand(MovementCommand):
    def _move(self, editor, key_event):
        editor.cursor.home()


class EndCommand(MovementCommand):
    def _move(self, editor, key_event):
        editor.cursor.end()


class PageUpCommand(MovementCommand):
    def _move(self, editor, key_event):
        editor.cursor.page_up(editor.viewport)


class PageDownCommand(MovementCommand):
    def _move(self, editor, key_event):
        editor.cursor.page_down(editor.viewport)


class EditCommand(EditorCommand):
    """Base class for editing commands."""

    def execute(self, editor: 'Editor', key_event: 'KeyEvent') -> bool:
        """Editing commands modify the buffer."""
        before = editor.buffer.dirty
        self._edit(editor, key_event)
        return editor.buffer.dirty != before

    @abstractmethod
    def _edit(self, editor: 'Editor', key_event: 'KeyEvent'):
        """Perform the edit."""
        pass


class BackspaceCommand(EditCommand):
    def _edit(self, editor, key_event):
        edit_ops.backspace(editor.buffer, editor.cursor)


class DeleteCharCommand(EditCommand):
    def _edit(self, editor, key_event):
        edit_ops.forward_delete(editor.buffer, editor.cursor)


class InsertNewlineCommand(EditCommand):
    def _edit(self, editor, key_event):
        edit_ops.split_row(editor.buffer, editor.cursor)


class InsertTextCommand(EditCommand):
    def _edit(self, editor, key_event):
        char = key_event.value
        # Filter out control characters
        if ord(char[0]) >= 32 or char == '\t':
            edit_ops.insert_char(editor.buffer, editor.cursor, key_event.data)


class SystemCommand(EditorCommand):
    """Base class for system commands like save, quit, find."""

    def execute(self, editor: 'Editor', key_event: 'KeyEvent') -> bool:
        """System commands don't modify buffer content directly."""
        self._execute_system(editor, key_event)
        return False

    @abstractmethod
    def _execute_system(self, editor: 'Editor', key_event: 'KeyEvent'):
        """Perform the system action."""
        pass


class NoOpCommand(SystemCommand):
    def _execute_system(self, editor, key_event):
        pass


class QuitCommand(SystemCommand):
    resets_quit = False

    def _execute_system(self, editor, key_event):
        editor.request_quit()


class SaveCommand(SystemCommand):
    def _execute_system(self, editor, key_event):
        editor.handle_save()


class FindCommand(SystemCommand):
    def _execute_system(self, editor, key_event):
        editor.start_search()


class CommandRegistry:
    """Registry for mapping key combinations to commands."""

    def __init__(self):
        self._commands: Dict[Tuple[KeyType, str], EditorCommand] = {}
        self._setup_default_commands()

    def _setup_default_commands(self):
        """Set up the default command mappings."""
        # Movement commands
        for direction in ('up', 'down', 'left', 'right'):
            self.register((KeyType.SPECIAL, direction), ArrowCommand())
        self.register((KeyType.SPECIAL, 'home'), HomeCommand())
        self.register((KeyType.SPECIAL, 'end'), EndCommand())
        self.register((KeyType.SPECIAL, 'page_up'), PageUpCommand())
        self.register((KeyType.SPECIAL, 'page_down'), PageDownCommand())

        # Editing commands
        self.register((KeyType.SPECIAL, 'backspace'), BackspaceCommand())
        self.register((KeyType.SPECIAL, 'delete'), DeleteCharCommand())
        self.register((KeyType.SPECIAL, 'enter'), InsertNewlineCommand())

        # System commands
        self.register((KeyType.CTRL, 'x'), QuitCommand())
        self.register((KeyType.CTRL, 's'), SaveCommand())
        self.register((KeyType.CTRL, 'f'), FindCommand())
        self.register((KeyType.CTRL, 'l'), NoOpCommand())
        self.register((KeyType.SPECIAL, 'escape'), NoOpCommand())

    def register(self, key: Tuple[KeyType, str], command: EditorCommand):
        """Register a command for a key combination."""
        self._commands[key] = command

    def get_command(self, key_type: KeyType, value: str) -> Optional[EditorCommand]:
        """Get the command for a key combination."""
        return self._commands.get((key_type, value))

    def lookup(self, key_event: 'KeyEvent') -> Optional[EditorCommand]:
        """Command bound to the key, falling back to text insertion."""
        command = self.get_command(key_event.key_type, key_event.value)
        if command is None and key_event.key_type == KeyType.REGULAR:
            return InsertTextCommand()
        return command

