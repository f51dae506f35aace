"""Tests for the select loop and SIGWINCH handling."""

import os
from unittest.mock import MagicMock, patch

import pytest

from tin.errors import GeometryError
from tin.keyboard import KeyEvent, KeyType


QUIT = KeyEvent(key_type=KeyType.CTRL, value='x', raw='\x18', is_ctrl=True)


def test_resize_signal_triggers_redraw(editor):
    """A byte on the resize pipe re-measures and redraws."""
    with patch.object(editor.terminal, 'raw_mode', MagicMock()):
        with patch.object(editor.keyboard, 'get_key_event', return_value=QUIT):
            with patch.object(editor, 'refresh') as mock_refresh:
                with patch('tin.editor.select.select') as mock_select:
                    mock_select.side_effect = [
                        ([editor._resize_pipe_r], [], []),  # Resize pipe ready
                        ([0], [], []),  # stdin ready
                    ]
                    os.write(editor._resize_pipe_w, b'R')

                    editor.run()

                    # Initial draw plus the one after the resize
                    assert mock_refresh.call_count == 2


def test_resize_picks_up_new_geometry(editor, fake_terminal):
    def resize_then_quit(*args):
        if mock_select.call_count == 1:
            fake_terminal.term.height, fake_terminal.term.width = 30, 100
            return ([editor._resize_pipe_r], [], [])
        return ([0], [], [])

    with patch.object(editor.terminal, 'raw_mode', MagicMock()):
        with patch.object(editor.keyboard, 'get_key_event', return_value=QUIT):
            with patch('tin.editor.select.select') as mock_select:
                mock_select.side_effect = resize_then_quit
                os.write(editor._resize_pipe_w, b'R')
                editor.run()

    assert editor.viewport.visible_rows == 28
    assert editor.viewport.screen_cols == 100
    assert fake_terminal.written[-1].endswith(b'<show>')


def test_no_polling(editor):
    """select blocks without a timeout; keys are then read without waiting."""
    with patch.object(editor.terminal, 'raw_mode', MagicMock()):
        with patch.object(editor.keyboard, 'get_key_event', return_value=QUIT) as mock_get_key_event:
            with patch('tin.editor.select.select') as mock_select:
                mock_select.return_value = ([0], [], [])

                editor.run()

                args = mock_select.call_args[0]
                assert len(args) == 3
                mock_get_key_event.assert_called_with(timeout=0)


def test_key_redraws_until_quit(editor, fake_terminal):
    keys = [KeyEvent(key_type=KeyType.REGULAR, value='a', raw='a'), None, QUIT, QUIT, QUIT, QUIT]
    with patch.object(editor.terminal, 'raw_mode', MagicMock()):
        with patch.object(editor.keyboard, 'get_key_event', side_effect=keys):
            with patch('tin.editor.select.select', return_value=([0], [], [])):
                editor.run()

    assert editor.running is False
    # initial frame, after 'a', then three quit warnings
    assert len(fake_terminal.written) == 5


def test_geometry_failure_restores_terminal(editor):
    with patch.object(editor.terminal, 'raw_mode', MagicMock()):
        with patch.object(editor.terminal, 'measure', side_effect=GeometryError("no size")):
            with patch.object(editor.terminal, 'cleanup') as mock_cleanup:
                with pytest.raises(GeometryError):
                    editor.run()
                mock_cleanup.assert_called_once_with()
    assert editor._resize_pipe_r is None


def test_signal_handler_restored(editor):
    import signal
    before = signal.getsignal(signal.SIGWINCH)
    with patch.object(editor.terminal, 'raw_mode', MagicMock()):
        with patch.object(editor.keyboard, 'get_key_event', return_value=QUIT):
            with patch('tin.editor.select.select', return_value=([0], [], [])):
                editor.run()
    assert signal.getsignal(signal.SIGWINCH) == before
