"""
Pytest configuration and fixtures
"""

import pytest
from datetime import datetime
from taskchat.models.task import Category, Priority, Task, TaskType
from taskchat.services.chat_interpreter import ChatInterpreter
from taskchat.services.intent_classifier import IntentClassifier
from taskchat.services.task_search_service import TaskSearchService
from taskchat.services.task_type_resolver import TaskTypeResolver


@pytest.fixture
def now():
    """Fixed current instant: Wednesday 6 Nov 2024, 10:30"""
    return datetime(2024, 11, 6, 10, 30)


@pytest.fixture
def friday_now():
    """Fixed current instant on a Friday: 8 Nov 2024, 10:00"""
    return datetime(2024, 11, 8, 10, 0)


@pytest.fixture
def resolver():
    """Task type resolver"""
    return TaskTypeResolver()


@pytest.fixture
def classifier(resolver):
    """Intent classifier"""
    return IntentClassifier(resolver=resolver)


@pytest.fixture
def interpreter():
    """Chat interpreter with default collaborators"""
    return ChatInterpreter()


@pytest.fixture
def search_service():
    """Task search service"""
    return TaskSearchService()


@pytest.fixture
def sample_tasks():
    """Mixed task collection, in insertion order"""
    return [
        Task(
            task_type=TaskType.TODO,
            description="Buy groceries",
            priority=Priority.LOW,
            category=Category(tags={"personal"}, contexts={"home"}),
        ),
        Task(
            task_type=TaskType.DEADLINE,
            description="Submit quarterly report",
            priority=Priority.CRITICAL,
            category=Category(tags={"work"}),
            date_time=datetime(2024, 11, 8, 17, 0),
        ),
        Task(
            task_type=TaskType.EVENT,
            description="Team meeting",
            priority=Priority.HIGH,
            category=Category(tags={"work"}, contexts={"office"}),
            date_time=datetime(2024, 11, 7, 14, 0),
        ),
        Task(
            task_type=TaskType.DEADLINE,
            description="Pay rent",
            is_done=True,
            priority=Priority.URGENT,
            category=Category(tags={"personal"}),
            date_time=datetime(2024, 11, 30, 9, 0),
        ),
        Task(
            task_type=TaskType.TODO,
            description="Read chapter 5",
            is_done=True,
            category=Category(tags={"study"}),
        ),
    ]
