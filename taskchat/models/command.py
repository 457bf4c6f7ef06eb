"""
Models for interpreting chat text into canonical commands
"""

from datetime import datetime
from enum import Enum
from typing import Optional
from pydantic import BaseModel, ConfigDict
from taskchat.models.task import TaskType


class IntentType(str, Enum):
    """What the user meant by a chat message"""
    QUESTION = "question"
    SEARCH_REQUEST = "search_request"
    CATEGORY_SHORTHAND = "category_shorthand"
    DIRECT_COMMAND = "direct_command"
    TASK_CREATION = "task_creation"
    UNKNOWN = "unknown"


class Intent(BaseModel):
    """
    Classified intent

    Only the fields belonging to the intent type are set:
    - QUESTION / UNKNOWN: help_topic (empty string for general help)
    - SEARCH_REQUEST: term (None means "list everything")
    - CATEGORY_SHORTHAND: marker ("#work", "@home")
    - DIRECT_COMMAND: text (passed through unchanged)
    - TASK_CREATION: task_type and raw_text
    """

    model_config = ConfigDict(frozen=True)

    type: IntentType
    help_topic: str = ""
    term: Optional[str] = None
    marker: Optional[str] = None
    text: Optional[str] = None
    task_type: Optional[TaskType] = None
    raw_text: Optional[str] = None

    @classmethod
    def question(cls, help_topic: str = "") -> "Intent":
        return cls(type=IntentType.QUESTION, help_topic=help_topic)

    @classmethod
    def search(cls, term: Optional[str]) -> "Intent":
        return cls(type=IntentType.SEARCH_REQUEST, term=term or None)

    @classmethod
    def category(cls, marker: str) -> "Intent":
        return cls(type=IntentType.CATEGORY_SHORTHAND, marker=marker)

    @classmethod
    def direct(cls, text: str) -> "Intent":
        return cls(type=IntentType.DIRECT_COMMAND, text=text)

    @classmethod
    def task(cls, task_type: TaskType, raw_text: str) -> "Intent":
        return cls(type=IntentType.TASK_CREATION, task_type=task_type, raw_text=raw_text)

    @classmethod
    def unknown(cls, help_topic: str = "") -> "Intent":
        return cls(type=IntentType.UNKNOWN, help_topic=help_topic)


class ParsedInstant(BaseModel):
    """Timestamp with provenance of defaulted parts"""

    model_config = ConfigDict(frozen=True)

    value: datetime
    time_defaulted: bool = False
    date_defaulted: bool = False


class TaskTypeDecision(BaseModel):
    """
    Result of task-type disambiguation

    needs_clarification is set when the text clearly names an event or
    deadline but no usable time phrase was found; callers answer with help
    instead of creating a task.
    """

    model_config = ConfigDict(frozen=True)

    task_type: TaskType
    description: str = ""
    time_phrase: Optional[str] = None
    needs_clarification: bool = False

    @classmethod
    def todo(cls, description: str) -> "TaskTypeDecision":
        return cls(task_type=TaskType.TODO, description=description)

    @classmethod
    def clarify(cls, task_type: TaskType) -> "TaskTypeDecision":
        return cls(task_type=task_type, needs_clarification=True)
