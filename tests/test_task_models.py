"""
Tests for task, priority and category models
"""

import pytest
from datetime import datetime
from pydantic import ValidationError
from taskchat.models.task import Category, Priority, Task, TaskType


@pytest.mark.parametrize(
    "value, expected",
    [
        ("high", Priority.HIGH),
        ("!high", Priority.HIGH),
        ("!h", Priority.HIGH),
        ("C", Priority.CRITICAL),
        ("urgent", Priority.URGENT),
        ("", Priority.NORMAL),
        (None, Priority.NORMAL),
        ("whatever", Priority.NORMAL),
    ],
)
def test_priority_from_string(value, expected):
    """Test priority keywords and shortcuts"""
    assert Priority.from_string(value) == expected


def test_priority_ordering():
    """Test priorities compare by level"""
    assert Priority.LOW < Priority.NORMAL < Priority.HIGH < Priority.URGENT < Priority.CRITICAL
    assert Priority.CRITICAL.level == 5


def test_priority_from_text():
    """Test the first marker in text wins"""
    assert Priority.from_text("fix bug !urgent later !low") == Priority.URGENT
    assert Priority.from_text("no marker here") == Priority.NORMAL
    assert Priority.from_text("wow!high") == Priority.NORMAL


def test_priority_remove_from_text():
    """Test markers are removed and whitespace collapsed"""
    assert Priority.remove_from_text("fix  bug !high now") == "fix bug now"
    assert Priority.contains_priority("fix bug !c") is True
    assert Priority.contains_priority("fix bug !cool") is False


def test_priority_display():
    """Test keyword, icon and help text"""
    assert Priority.HIGH.keyword == "!high"
    assert Priority.HIGH.shortcut == "h"
    assert str(Priority.CRITICAL) == "🚨 Critical"
    assert "!urgent (!u)" in Priority.help_text()


def test_category_from_text():
    """Test tags and contexts are parsed and lowercased"""
    category = Category.from_text("Prepare slides #Work #project-x @office")
    assert category.tags == {"work", "project-x"}
    assert category.contexts == {"office"}


def test_category_ignores_malformed_markers():
    """Test digit-only, leading hyphen and empty markers"""
    category = Category.from_text("issue #123 and #-x and # alone, mail me@example.com")
    assert category.tags == set()
    assert category.contexts == set()


def test_category_remove_from_text():
    """Test category markers are stripped"""
    assert Category.remove_from_text("Buy milk #shopping @store today") == "Buy milk today"
    assert Category.contains_categories("plain text") is False


def test_category_lookup_and_merge():
    """Test has_tag/has_context accept markers and merge unions"""
    work = Category(tags={"work"}, contexts={"office"})
    assert work.has_tag("#WORK") is True
    assert work.has_context("@office") is True
    assert work.has_context("home") is False

    merged = work.merge(Category(tags={"urgent"}))
    assert merged.tags == {"work", "urgent"}
    assert work.tags == {"work"}
    assert merged.display_string() == "#urgent #work @office"


def test_task_type_properties():
    """Test command words and sort ranks"""
    assert TaskType.DEADLINE.command == "deadline"
    assert TaskType.TODO.rank < TaskType.DEADLINE.rank < TaskType.EVENT.rank


def test_todo_cannot_have_timestamp():
    """Test the timestamp invariant for todos"""
    with pytest.raises(ValidationError):
        Task(task_type=TaskType.TODO, description="buy milk", date_time=datetime(2024, 11, 7))


@pytest.mark.parametrize("task_type", [TaskType.DEADLINE, TaskType.EVENT])
def test_timed_tasks_require_timestamp(task_type):
    """Test deadlines and events need a timestamp"""
    with pytest.raises(ValidationError):
        Task(task_type=task_type, description="something")


def test_task_description_not_blank():
    """Test blank descriptions are rejected"""
    with pytest.raises(ValidationError):
        Task(description="   ")


def test_task_aliases():
    """Test camelCase aliases"""
    task = Task.model_validate(
        {"type": "D", "description": "report", "isDone": True, "dateTime": "2024-11-08T17:00:00"}
    )
    assert task.task_type == TaskType.DEADLINE
    assert task.is_done is True
    assert task.date_time == datetime(2024, 11, 8, 17, 0)


def test_task_from_command_deadline():
    """Test building a deadline from a canonical command"""
    due = datetime(2024, 11, 8, 17, 0)
    task = Task.from_command("deadline Submit report !high #work /by friday 5pm", due)
    assert task.task_type == TaskType.DEADLINE
    assert task.description == "Submit report"
    assert task.priority == Priority.HIGH
    assert task.category.tags == {"work"}
    assert task.date_time == due


def test_task_from_command_todo():
    """Test building a todo from a canonical command"""
    task = Task.from_command("todo buy milk @store")
    assert task.task_type == TaskType.TODO
    assert task.description == "buy milk"
    assert task.category.contexts == {"store"}
    assert task.date_time is None


def test_task_from_command_rejects_other_commands():
    """Test non-task commands are rejected"""
    with pytest.raises(ValueError):
        Task.from_command("search work")
