"""
Tests for chat interpreter (end-to-end)
"""

import pytest
from taskchat.services.command_synthesizer import validate_command
from taskchat.services.help_service import GENERAL_HELP, TOPIC_HELP
from taskchat.utils.date_parser import HELP_MESSAGE


@pytest.mark.parametrize(
    "text, command",
    [
        ("meeting tomorrow at 2pm", "event meeting /at tomorrow at 2pm"),
        ("call mom", "todo call mom"),
        ("call mom at 3pm", "event call mom /at 3pm"),
        ("deadline project by friday", "deadline project /by friday"),
        ("what can you do", "help"),
        ("show me work tasks", "search work"),
        ("show my tasks", "list"),
        ("#work", "search #work"),
        ("done 2", "done 2"),
        ("hello", "help"),
        ("add buy milk", "todo buy milk"),
        ("report due friday", "deadline report /by friday"),
        ("schedule meeting", "help event"),
    ],
)
def test_interpret(interpreter, text, command):
    """Test chat text to canonical command"""
    assert interpreter.interpret(text) == command


def test_interpret_is_deterministic(interpreter, now):
    """Test the same text and the same now give the same result"""
    text = "team meeting next friday 2:30 pm"
    first = interpreter.handle(text, now)
    second = interpreter.handle(text, now)
    assert first == second
    assert interpreter.interpret(text) == interpreter.interpret(text)


@pytest.mark.parametrize(
    "text",
    ["buy milk", "call mom", "add water the plants", "Prepare slides !high #work", "listen to music"],
)
def test_todo_commands_are_valid(interpreter, text):
    """Test synthesized todo commands satisfy the strict format"""
    command = interpreter.interpret(text)
    assert command.startswith("todo ")
    assert validate_command(command, strict=True) is True


def test_handle_event_resolves_time(interpreter, now):
    """Test an event carries the resolved timestamp"""
    response = interpreter.handle("meeting tomorrow at 2pm", now)
    assert response.success is True
    assert response.message == "event meeting /at tomorrow at 2pm"
    assert response.data["intent"] == "task_creation"
    assert response.data["date_time"] == "2024-11-07T14:00:00"
    assert response.data["time_defaulted"] is False


def test_handle_deadline_default_time(interpreter, now):
    """Test a date-only deadline gets the default time"""
    response = interpreter.handle("deadline project by friday", now)
    assert response.success is True
    assert response.data["date_time"] == "2024-11-08T09:00:00"
    assert response.data["time_defaulted"] is True


def test_handle_unparseable_time_asks_for_clarification(interpreter, now):
    """Test a time phrase the parser rejects returns the format help"""
    response = interpreter.handle("meeting at the office", now)
    assert response.success is False
    assert response.message == HELP_MESSAGE
    assert response.data["command"] == "event meeting /at the office"
    assert response.data["error_code"] == "date_parse"
    assert response.needs_clarification is True


def test_handle_clarification_returns_topic_help(interpreter, now):
    """Test an event without a time answers with event help"""
    response = interpreter.handle("schedule meeting", now)
    assert response.success is True
    assert response.message == TOPIC_HELP["event"]
    assert response.data["command"] == "help event"
    assert response.needs_clarification is True


def test_handle_question(interpreter, now):
    """Test a question answers with general help"""
    response = interpreter.handle("what can you do", now)
    assert response.message == GENERAL_HELP
    assert response.data["intent"] == "question"
    assert response.data["needs_clarification"] is False


def test_handle_todo_has_no_timestamp(interpreter, now):
    """Test todos never carry a date_time"""
    response = interpreter.handle("buy milk", now)
    assert response.success is True
    assert "date_time" not in response.data


def test_handle_empty_message(interpreter, now):
    """Test empty input is rejected"""
    response = interpreter.handle("   ", now)
    assert response.success is False
    assert response.data["command"] == "help"


def test_handle_too_long_message(interpreter, now):
    """Test overlong input is rejected"""
    response = interpreter.handle("buy milk " * 1000, now)
    assert response.success is False


def test_handle_hedged_event_asks_for_help(interpreter, now):
    """Test a hedged event phrase creates nothing"""
    response = interpreter.handle("meeting with some clients tomorrow at 3pm", now)
    assert response.data["intent"] == "unknown"
    assert response.command == "help"
    assert "date_time" not in response.data
