"""Test the ColorChoice enumeration."""

import io
import sys
import types
from unittest.mock import patch

import pytest

from should_color.choice import CHOICES, ColorChoice, is_terminal


def test_ordering():
    """Test that choices are ordered Never < Auto < Always."""
    assert ColorChoice.NEVER < ColorChoice.AUTO < ColorChoice.ALWAYS
    assert ColorChoice.ALWAYS >= ColorChoice.AUTO
    assert max(ColorChoice) is ColorChoice.ALWAYS
    assert sorted([ColorChoice.ALWAYS, ColorChoice.NEVER, ColorChoice.AUTO]) == list(ColorChoice)


def test_choices():
    """Test the accepted option values."""
    assert CHOICES == ('never', 'auto', 'always')


def test_parse():
    """Test parsing choice names."""
    assert ColorChoice.parse('never') is ColorChoice.NEVER
    assert ColorChoice.parse('Auto') is ColorChoice.AUTO
    assert ColorChoice.parse(' ALWAYS ') is ColorChoice.ALWAYS
    assert ColorChoice.parse(ColorChoice.AUTO) is ColorChoice.AUTO


@pytest.mark.parametrize('value', ['', 'sometimes', '1', None])
def test_parse_invalid(value):
    """Test that unknown names are rejected."""
    with pytest.raises(ValueError, match='expected one of: never, auto, always'):
        ColorChoice.parse(value)


def test_str():
    """Test that choices print as their names."""
    assert str(ColorChoice.AUTO) == 'auto'


def test_for_terminal():
    """Test collapsing a choice for a terminal / non-terminal sink."""
    for is_tty in (True, False):
        assert ColorChoice.NEVER.for_terminal(is_tty) is False
        assert ColorChoice.ALWAYS.for_terminal(is_tty) is True
        assert ColorChoice.AUTO.for_terminal(is_tty) is is_tty


def test_for_stream_auto_tty():
    """Test that AUTO follows the stream's TTY status."""
    tty = types.SimpleNamespace(isatty=lambda: True)
    pipe = types.SimpleNamespace(isatty=lambda: False)
    assert ColorChoice.AUTO.for_stream(tty) is True
    assert ColorChoice.AUTO.for_stream(pipe) is False


def test_for_stream_defaults_to_stdout():
    """Test that the stream defaults to stdout."""
    with patch.object(sys.stdout, 'isatty', return_value=True):
        assert ColorChoice.AUTO.for_stream() is True
    with patch.object(sys.stdout, 'isatty', return_value=False):
        assert ColorChoice.AUTO.for_stream() is False


def test_for_stream_never_always():
    """Test that NEVER and ALWAYS ignore the stream."""
    tty = types.SimpleNamespace(isatty=lambda: True)
    pipe = types.SimpleNamespace(isatty=lambda: False)
    assert ColorChoice.NEVER.for_stream(tty) is False
    assert ColorChoice.ALWAYS.for_stream(pipe) is True


def test_is_terminal_odd_streams():
    """Test that closed streams, and objects without isatty, are not terminals."""
    closed = io.StringIO()
    closed.close()
    assert is_terminal(closed) is False
    assert is_terminal(object()) is False


def test_click_conversion():
    """Test conversion to and from click's color setting."""
    assert ColorChoice.NEVER.to_click() is False
    assert ColorChoice.AUTO.to_click() is None
    assert ColorChoice.ALWAYS.to_click() is True
    for choice in ColorChoice:
        assert ColorChoice.from_click(choice.to_click()) is choice
