"""
Tests for text handler
"""

from taskchat.config.constants import MAX_MESSAGE_LENGTH
from taskchat.services.text_handler import TextHandler


def test_process_collapses_whitespace():
    """Test spaces and tabs are collapsed and the text trimmed"""
    handler = TextHandler()
    assert handler.process("  buy \t milk   ") == "buy milk"


def test_process_normalizes_line_endings():
    """Test CRLF and CR become LF and each line is cleaned"""
    handler = TextHandler()
    assert handler.process("first  line\r\nsecond\rthird ") == "first line\nsecond\nthird"


def test_process_removes_control_characters():
    """Test control characters are dropped"""
    handler = TextHandler()
    assert handler.process("buy\x00 milk\x07") == "buy milk"


def test_process_empty():
    """Test empty and missing input"""
    handler = TextHandler()
    assert handler.process("") == ""
    assert handler.process(None) == ""


def test_validate():
    """Test empty and overlong text is invalid"""
    handler = TextHandler()
    assert handler.validate("buy milk") is True
    assert handler.validate("") is False
    assert handler.validate("   ") is False
    assert handler.validate("a" * MAX_MESSAGE_LENGTH) is True
    assert handler.validate("a" * (MAX_MESSAGE_LENGTH + 1)) is False
