"""
Tests for message formatters
"""

from datetime import datetime
from taskchat.models.search import SearchCriteria
from taskchat.models.task import Category, Priority, Task, TaskType
from taskchat.utils.formatters import format_search_result, format_task, format_task_list


def test_format_task_line():
    """Test the single-task display line"""
    task = Task(
        task_type=TaskType.DEADLINE,
        description="Submit report",
        priority=Priority.URGENT,
        category=Category(tags={"work"}),
        date_time=datetime(2024, 11, 8, 17, 0),
    )
    assert format_task(task) == "🔴 [D][ ] Submit report (by: Nov 08 2024, 05:00 PM) #work"


def test_format_done_todo():
    """Test a completed todo"""
    task = Task(description="Read chapter 5", is_done=True)
    assert format_task(task) == "🔵 [T][√] Read chapter 5"


def test_format_task_list_empty():
    """Test the empty list message"""
    assert format_task_list([]) == "No tasks found."


def test_format_search_result(search_service, sample_tasks):
    """Test summary line followed by numbered tasks"""
    result = search_service.search(sample_tasks, SearchCriteria(keyword="meeting"))
    text = format_search_result(result)
    lines = text.split("\n")
    assert lines[0] == '🔍 Found 1 task(s) out of 5 (keyword: "meeting")'
    assert lines[1].startswith("1. 🟡 [E][ ] Team meeting (at: Nov 07 2024, 02:00 PM)")
