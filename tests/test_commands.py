"""Tests for the key-to-command bindings."""

from unittest.mock import Mock

from tin.commands import (
    ArrowCommand, CommandRegistry, FindCommand, InsertNewlineCommand,
    InsertTextCommand, NoOpCommand, QuitCommand, SaveCommand,
)
from tin.keyboard import KeyEvent, KeyType


def ctrl(letter):
    return KeyEvent(key_type=KeyType.CTRL, value=letter, raw=letter, is_ctrl=True)


def test_default_bindings():
    registry = CommandRegistry()
    assert isinstance(registry.lookup(ctrl("x")), QuitCommand)
    assert isinstance(registry.lookup(ctrl("s")), SaveCommand)
    assert isinstance(registry.lookup(ctrl("f")), FindCommand)
    assert isinstance(registry.lookup(ctrl("l")), NoOpCommand)
    assert isinstance(registry.get_command(KeyType.SPECIAL, "left"), ArrowCommand)
    assert isinstance(registry.get_command(KeyType.SPECIAL, "enter"), InsertNewlineCommand)


def test_regular_keys_insert_text():
    registry = CommandRegistry()
    assert isinstance(registry.lookup(KeyEvent(KeyType.REGULAR, "a", "a")), InsertTextCommand)


def test_unbound_ctrl_key_has_no_command():
    assert CommandRegistry().lookup(ctrl("q")) is None


def test_only_quit_keeps_countdown():
    registry = CommandRegistry()
    assert registry.lookup(ctrl("x")).resets_quit is False
    assert registry.lookup(ctrl("s")).resets_quit is True


def test_system_commands_call_editor():
    editor = Mock()
    QuitCommand().execute(editor, ctrl("x"))
    SaveCommand().execute(editor, ctrl("s"))
    FindCommand().execute(editor, ctrl("f"))
    editor.request_quit.assert_called_once_with()
    editor.handle_save.assert_called_once_with()
    editor.start_search.assert_called_once_with()


def test_insert_text_reports_change(editor):
    command = InsertTextCommand()
    assert command.execute(editor, KeyEvent(KeyType.REGULAR, "a", "a")) is True
    assert editor.buffer.lines() == [b"a"]


def test_insert_text_ignores_control_characters(editor):
    command = InsertTextCommand()
    assert command.execute(editor, KeyEvent(KeyType.REGULAR, "\x00", "\x00")) is False
    assert editor.buffer.nrows == 0
