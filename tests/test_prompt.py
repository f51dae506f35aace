"""Tests for the message-bar line prompt."""

from unittest.mock import Mock

from tin.keyboard import KeyEvent, KeyType
from tin.prompt import LinePrompt, PromptState


def key(char):
    return KeyEvent(key_type=KeyType.REGULAR, value=char, raw=char)


def special(name):
    return KeyEvent(key_type=KeyType.SPECIAL, value=name, raw=name)


def test_typing_updates_display():
    prompt = LinePrompt("save as: {}")
    prompt.feed(key("a"))
    prompt.feed(key("b"))
    assert prompt.display == "save as: ab"
    assert prompt.state == PromptState.PENDING
    assert prompt.result is None


def test_backspace_removes_last_character():
    prompt = LinePrompt("{}")
    for char in "abc":
        prompt.feed(key(char))
    prompt.feed(special("backspace"))
    assert prompt.text == "ab"
    prompt.feed(special("delete"))
    assert prompt.text == "a"


def test_backspace_on_empty_input():
    prompt = LinePrompt("{}")
    assert prompt.feed(special("backspace")) == PromptState.PENDING
    assert prompt.text == ""


def test_enter_confirms():
    prompt = LinePrompt("{}")
    prompt.feed(key("x"))
    assert prompt.feed(special("enter")) == PromptState.CONFIRMED
    assert prompt.result == "x"


def test_enter_with_empty_input_confirms_empty_string():
    prompt = LinePrompt("{}")
    prompt.feed(special("enter"))
    assert prompt.result == ""


def test_escape_cancels():
    prompt = LinePrompt("{}")
    prompt.feed(key("x"))
    assert prompt.feed(special("escape")) == PromptState.CANCELLED
    assert prompt.result is None


def test_only_printable_ascii_is_accepted():
    prompt = LinePrompt("{}")
    prompt.feed(key("é"))
    prompt.feed(key("\t"))
    prompt.feed(KeyEvent(key_type=KeyType.CTRL, value="a", raw="\x01", is_ctrl=True))
    prompt.feed(special("left"))
    assert prompt.text == ""


def test_callback_sees_every_key():
    callback = Mock()
    prompt = LinePrompt("{}", callback)
    prompt.feed(key("a"))
    enter = special("enter")
    prompt.feed(enter)
    assert callback.call_count == 2
    callback.assert_called_with("a", enter)
