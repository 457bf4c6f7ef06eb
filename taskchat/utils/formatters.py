"""
Message formatting utilities
"""

from typing import List
from taskchat.models.search import SearchResult
from taskchat.models.task import Task, TaskType


DISPLAY_DATE_FORMAT = "%b %d %Y, %I:%M %p"

_DATE_LABELS = {TaskType.DEADLINE: "by", TaskType.EVENT: "at"}


def format_task(task: Task) -> str:
    """
    Format a single task line

    Example: "🔴 [D][ ] Submit report (by: Nov 08 2024, 05:00 PM) #work"

    Args:
        task: Task to format

    Returns:
        Formatted line
    """
    done_mark = "√" if task.is_done else " "
    line = f"{task.priority.icon} [{task.task_type.value}][{done_mark}] {task.description}"

    label = _DATE_LABELS.get(task.task_type)
    if label and task.date_time is not None:
        line += f" ({label}: {task.date_time.strftime(DISPLAY_DATE_FORMAT)})"

    if task.category.has_categories():
        line += f" {task.category.display_string()}"

    return line


def format_task_list(tasks: List[Task]) -> str:
    """
    Format a numbered task list

    Args:
        tasks: Tasks to format

    Returns:
        Formatted message
    """
    if not tasks:
        return "No tasks found."

    lines = [f"{i}. {format_task(task)}" for i, task in enumerate(tasks, 1)]
    return "\n".join(lines)


def format_search_result(result: SearchResult) -> str:
    """
    Format a search result: summary line followed by the tasks

    Args:
        result: Search result

    Returns:
        Formatted message
    """
    message = f"🔍 {result.summary}"
    if result.total_found == 0:
        return message

    return f"{message}\n{format_task_list(result.tasks)}"
