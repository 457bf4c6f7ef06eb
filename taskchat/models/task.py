"""
Task model
"""

import re
from datetime import datetime
from enum import Enum
from typing import Optional, Set
from pydantic import BaseModel, Field, ConfigDict, field_validator, model_validator
from taskchat.config.constants import DEADLINE_MARKER, EVENT_MARKER


class Priority(int, Enum):
    """Priority levels, ordered LOW < NORMAL < HIGH < URGENT < CRITICAL"""
    LOW = 1
    NORMAL = 2
    HIGH = 3
    URGENT = 4
    CRITICAL = 5

    @property
    def level(self) -> int:
        return self.value

    @property
    def keyword(self) -> str:
        return f"!{self.name.lower()}"

    @property
    def shortcut(self) -> str:
        return self.name[0].lower()

    @property
    def display_name(self) -> str:
        return self.name.capitalize()

    @property
    def icon(self) -> str:
        return _PRIORITY_ICONS[self]

    @classmethod
    def from_string(cls, value: Optional[str]) -> "Priority":
        """
        Parse a single priority word

        Accepts the keyword with or without "!" and the single-letter
        shortcut ("!high", "high", "h", "!h"). Anything else is NORMAL.
        """
        if not value or not value.strip():
            return cls.NORMAL

        normalized = value.strip().lower().lstrip("!")
        for priority in cls:
            if normalized in (priority.name.lower(), priority.shortcut):
                return priority

        return cls.NORMAL

    @classmethod
    def from_text(cls, text: Optional[str]) -> "Priority":
        """Find the first priority marker in free text (NORMAL if none)"""
        if not text:
            return cls.NORMAL

        match = PRIORITY_PATTERN.search(text)
        if not match:
            return cls.NORMAL
        return cls.from_string(match.group(1))

    @classmethod
    def contains_priority(cls, text: Optional[str]) -> bool:
        if not text:
            return False
        return PRIORITY_PATTERN.search(text) is not None

    @classmethod
    def remove_from_text(cls, text: Optional[str]) -> Optional[str]:
        """Remove all priority markers and collapse whitespace"""
        if text is None:
            return text
        result = PRIORITY_PATTERN.sub(" ", text)
        return re.sub(r"\s+", " ", result).strip()

    @classmethod
    def help_text(cls) -> str:
        lines = ["Priority levels:"]
        for priority in cls:
            lines.append(
                f"  {priority.icon} {priority.keyword} (!{priority.shortcut}) - {priority.display_name}"
            )
        return "\n".join(lines)

    def __str__(self) -> str:
        return f"{self.icon} {self.display_name}"


_PRIORITY_ICONS = {
    Priority.LOW: "🟢",
    Priority.NORMAL: "🔵",
    Priority.HIGH: "🟡",
    Priority.URGENT: "🔴",
    Priority.CRITICAL: "🚨",
}

PRIORITY_PATTERN = re.compile(
    r"(?<!\w)!(low|normal|high|urgent|critical|l|n|h|u|c)(?![\w-])",
    re.IGNORECASE,
)

# Marker bodies must start with a letter or digit and contain at least one letter
_MARKER_BODY = r"(?=[a-z0-9_-]*[a-z])([a-z0-9][a-z0-9_-]*)"
HASHTAG_PATTERN = re.compile(r"(?<!\w)#" + _MARKER_BODY, re.IGNORECASE)
CONTEXT_PATTERN = re.compile(r"(?<!\w)@" + _MARKER_BODY, re.IGNORECASE)


class Category(BaseModel):
    """Tags (#tag) and contexts (@context) attached to a task"""

    tags: Set[str] = Field(default_factory=set)
    contexts: Set[str] = Field(default_factory=set)

    @field_validator("tags", "contexts", mode="after")
    @classmethod
    def _normalize(cls, values: Set[str]) -> Set[str]:
        return {value.strip().lower() for value in values if value and value.strip()}

    @classmethod
    def from_text(cls, text: Optional[str]) -> "Category":
        """
        Parse categories from text

        Malformed markers (digits only, leading hyphen or underscore,
        empty body) are ignored.

        Args:
            text: Text containing #tags and @contexts

        Returns:
            Category with parsed tags and contexts
        """
        if not text:
            return cls()

        return cls(
            tags=set(HASHTAG_PATTERN.findall(text)),
            contexts=set(CONTEXT_PATTERN.findall(text)),
        )

    @classmethod
    def remove_from_text(cls, text: Optional[str]) -> Optional[str]:
        """Remove category markers from text and collapse whitespace"""
        if text is None:
            return text
        result = HASHTAG_PATTERN.sub(" ", text)
        result = CONTEXT_PATTERN.sub(" ", result)
        return re.sub(r"\s+", " ", result).strip()

    @classmethod
    def contains_categories(cls, text: Optional[str]) -> bool:
        if not text:
            return False
        return bool(HASHTAG_PATTERN.search(text) or CONTEXT_PATTERN.search(text))

    @classmethod
    def help_text(cls) -> str:
        return (
            "Categories:\n"
            "  📋 #tag - Add tags (e.g., #work, #personal, #urgent)\n"
            "  📍 @context - Add contexts (e.g., @home, @office, @client-name)\n"
            "\nExamples:\n"
            "  todo Buy groceries #personal @home\n"
            "  deadline Submit report #work @office !high\n"
            "  event Meeting #work @client-abc !urgent"
        )

    def has_categories(self) -> bool:
        return bool(self.tags or self.contexts)

    def has_tag(self, tag: str) -> bool:
        return tag.lower().lstrip("#") in self.tags

    def has_context(self, context: str) -> bool:
        return context.lower().lstrip("@") in self.contexts

    def merge(self, other: Optional["Category"]) -> "Category":
        """Return a new category with the tags and contexts of both"""
        if other is None:
            return self.model_copy(deep=True)
        return Category(
            tags=self.tags | other.tags,
            contexts=self.contexts | other.contexts,
        )

    def display_string(self) -> str:
        parts = [f"#{tag}" for tag in sorted(self.tags)]
        parts.extend(f"@{context}" for context in sorted(self.contexts))
        return " ".join(parts)

    def __str__(self) -> str:
        return self.display_string()


class TaskType(str, Enum):
    """Task variants"""
    TODO = "T"
    DEADLINE = "D"
    EVENT = "E"

    @property
    def command(self) -> str:
        return self.name.lower()

    @property
    def rank(self) -> int:
        """Sort rank: Todo < Deadline < Event"""
        return _TASK_TYPE_RANK[self]


_TASK_TYPE_RANK = {TaskType.TODO: 0, TaskType.DEADLINE: 1, TaskType.EVENT: 2}

_DATE_MARKERS = {TaskType.DEADLINE: DEADLINE_MARKER, TaskType.EVENT: EVENT_MARKER}


class Task(BaseModel):
    """
    Task model

    A closed variant over Todo, Deadline and Event. Todos never carry a
    timestamp; deadlines and events always do.
    """

    model_config = ConfigDict(populate_by_name=True)

    task_type: TaskType = Field(TaskType.TODO, alias="type")
    description: str
    is_done: bool = Field(False, alias="isDone")
    priority: Priority = Priority.NORMAL
    category: Category = Field(default_factory=Category)
    date_time: Optional[datetime] = Field(None, alias="dateTime")

    @field_validator("description")
    @classmethod
    def _description_not_blank(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("Task description cannot be empty")
        return value

    @model_validator(mode="after")
    def _check_timestamp(self) -> "Task":
        if self.task_type == TaskType.TODO and self.date_time is not None:
            raise ValueError("A todo cannot have a date/time")
        if self.task_type != TaskType.TODO and self.date_time is None:
            raise ValueError(f"A {self.task_type.command} requires a date/time")
        return self

    @classmethod
    def from_description(
        cls,
        task_type: TaskType,
        text: str,
        date_time: Optional[datetime] = None,
    ) -> "Task":
        """
        Build a task from a raw description with markers

        Priority and category markers are extracted and removed from the
        description.
        """
        description = Priority.remove_from_text(text)
        description = Category.remove_from_text(description)
        return cls(
            task_type=task_type,
            description=description,
            priority=Priority.from_text(text),
            category=Category.from_text(text),
            date_time=date_time,
        )

    @classmethod
    def from_command(cls, command: str, date_time: Optional[datetime] = None) -> "Task":
        """
        Build a task from a canonical todo/deadline/event command

        Args:
            command: e.g. "deadline report !high #work /by friday"
            date_time: Resolved timestamp for deadlines and events

        Returns:
            Task instance
        """
        parts = command.strip().split(" ", 1)
        try:
            task_type = TaskType[parts[0].upper()]
        except KeyError:
            raise ValueError(f"Not a task command: {command!r}")

        text = parts[1] if len(parts) > 1 else ""
        marker = _DATE_MARKERS.get(task_type)
        if marker:
            marker_index = text.find(f" {marker}")
            if marker_index != -1:
                text = text[:marker_index]

        return cls.from_description(task_type, text, date_time)
