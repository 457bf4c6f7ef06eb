"""
Command completer: suggestions for partially typed canonical commands
"""

from datetime import datetime
from typing import Dict, List, Sequence, Set
from taskchat.config.constants import (
    DEADLINE_MARKER,
    DESCRIPTION_PREVIEW_LENGTH,
    EVENT_MARKER,
    MAX_COMPLETIONS,
    MAX_EDIT_SUGGESTIONS,
    MAX_TASK_NUMBER_SUGGESTIONS,
)
from taskchat.models.task import Priority, Task
from taskchat.utils.logger import logger


COMMANDS = (
    "list", "todo", "deadline", "event", "done", "delete",
    "edit", "search", "view", "help", "reset", "bye",
)

DATE_SUGGESTIONS = (
    "today", "tomorrow", "next week", "next monday", "next tuesday",
    "next wednesday", "next thursday", "next friday", "this friday",
    "next month", "monday 9am", "friday 5pm",
)

# Used when no task carries a tag or context yet
DEFAULT_TAGS = ("work", "personal", "health", "shopping")
DEFAULT_CONTEXTS = ("home", "office", "phone", "computer")

COMMON_COMMANDS = [
    "list",
    "todo Buy groceries !high #personal @home",
    "deadline Submit report /by tomorrow 5pm !urgent #work",
    "event Team meeting /at monday 2pm #work @office",
    "search #work",
    "help",
]

COMMAND_EXAMPLES = {
    "todo": [
        "todo Buy groceries !high #personal @home",
        "todo Call dentist !normal #health @phone",
        "todo Exercise !normal #health @gym",
        "todo Review code !high #work @computer",
    ],
    "deadline": [
        "deadline Submit report /by tomorrow 5pm !urgent #work",
        "deadline Complete project /by next friday !high #work",
    ],
    "event": [
        "event Team meeting /at monday 2pm #work @office",
        "event Lunch with client /at tomorrow 12pm #work @restaurant",
        "event Doctor appointment /at next week 10am #health @clinic",
    ],
}

TASK_TEMPLATES = {
    "Work Meeting": "event Team meeting /at monday 2pm #work @office",
    "Project Deadline": "deadline Complete project /by next friday !high #work",
    "Personal Todo": "todo Buy groceries !normal #personal @home",
    "Health Appointment": "event Doctor visit /at next week 10am #health @clinic",
    "Urgent Task": "todo Important task !urgent #work",
    "Shopping List": "todo Buy items !low #shopping @store",
}

EDIT_FIELDS = ("description", "date", "deadline", "event", "todo")

COMMON_SEARCH_TERMS = ("meeting", "report", "urgent", "project")


class CommandCompleter:
    """Service for command auto-completion"""

    def __init__(self):
        """Initialize command completer"""
        self.logger = logger
        self._handlers = {
            "todo": self._complete_todo,
            "deadline": self._complete_deadline,
            "event": self._complete_event,
            "edit": self._complete_edit,
            "search": self._complete_search,
            "done": self._complete_task_number,
            "delete": self._complete_task_number,
            "view": self._complete_view,
        }

    def get_suggestions(self, tasks: Sequence[Task], partial: str) -> List[str]:
        """
        Suggest completions for a partially typed command

        A single word completes to the matching command names. A known
        command word (alone or with arguments) also gets suggestions for
        what comes next: examples, markers, dates, task numbers and the
        tags and contexts already in use.

        Args:
            tasks: Task collection
            partial: Text typed so far

        Returns:
            Up to MAX_COMPLETIONS suggestions; those that extend the
            typed text come first, shorter before longer
        """
        text = " ".join((partial or "").lower().split())
        if not text:
            return list(COMMON_COMMANDS)

        words = text.split(" ")
        command = words[0]
        suggestions = []

        if len(words) == 1:
            suggestions.extend(f"{name} " for name in COMMANDS if name.startswith(command))

        handler = self._handlers.get(command)
        if handler is not None:
            suggestions.extend(handler(tasks, text, words))

        unique = list(dict.fromkeys(suggestions))
        unique.sort(key=lambda suggestion: (not suggestion.startswith(text), len(suggestion)))

        self.logger.debug(f"[Completer] '{text}' -> {len(unique)} suggestion(s)")
        return unique[:MAX_COMPLETIONS]

    def get_smart_date_suggestions(self, now: datetime) -> List[str]:
        """Date phrases anchored on the current time of day"""
        time_of_day = f"{now.hour}:{now.minute:02d}"
        return [
            f"today {time_of_day}",
            f"tomorrow {time_of_day}",
            "next monday 9am",
            "friday 5pm",
            "next week",
        ]

    def get_task_templates(self) -> Dict[str, str]:
        return dict(TASK_TEMPLATES)

    def _complete_todo(self, tasks: Sequence[Task], text: str, words: List[str]) -> List[str]:
        if len(words) == 1:
            return COMMAND_EXAMPLES["todo"]

        suggestions = []
        if not Priority.contains_priority(text):
            suggestions.extend(priority.keyword for priority in Priority)
        suggestions.extend(self._category_suggestions(tasks, text))
        return suggestions

    def _complete_deadline(self, tasks: Sequence[Task], text: str, words: List[str]) -> List[str]:
        return self._complete_dated(text, words, "deadline", DEADLINE_MARKER, ("tomorrow 5pm", "next friday"))

    def _complete_event(self, tasks: Sequence[Task], text: str, words: List[str]) -> List[str]:
        return self._complete_dated(text, words, "event", EVENT_MARKER, ("tomorrow 2pm", "monday 9am"))

    def _complete_dated(self, text: str, words: List[str], command: str, marker: str, examples) -> List[str]:
        if len(words) == 1:
            return COMMAND_EXAMPLES[command]
        if marker in words:
            return [f"{text} {date}" for date in DATE_SUGGESTIONS]
        return [f"{text} {marker} "] + [f"{text} {marker} {example}" for example in examples]

    def _complete_edit(self, tasks: Sequence[Task], text: str, words: List[str]) -> List[str]:
        if len(words) == 1:
            return [f"edit {number} " for number in range(1, min(len(tasks), MAX_EDIT_SUGGESTIONS) + 1)]
        if len(words) == 2:
            return [f"{text} {field} " for field in EDIT_FIELDS]
        return []

    def _complete_search(self, tasks: Sequence[Task], text: str, words: List[str]) -> List[str]:
        if len(words) > 1:
            return []

        suggestions = [f"search #{tag}" for tag in self._existing_tags(tasks)]
        suggestions.extend(f"search @{context}" for context in self._existing_contexts(tasks))
        suggestions.extend(f"search {term}" for term in COMMON_SEARCH_TERMS)
        return suggestions

    def _complete_task_number(self, tasks: Sequence[Task], text: str, words: List[str]) -> List[str]:
        if len(words) > 1:
            return []

        suggestions = []
        for number, task in enumerate(tasks[:MAX_TASK_NUMBER_SUGGESTIONS], start=1):
            description = task.description
            if len(description) > DESCRIPTION_PREVIEW_LENGTH:
                description = description[:DESCRIPTION_PREVIEW_LENGTH] + "..."
            suggestions.append(f"{text} {number} # {description}")
        return suggestions

    def _complete_view(self, tasks: Sequence[Task], text: str, words: List[str]) -> List[str]:
        return [f"{text} {date}" for date in DATE_SUGGESTIONS]

    def _category_suggestions(self, tasks: Sequence[Task], text: str) -> List[str]:
        suggestions = [f"{text} #{tag}" for tag in self._existing_tags(tasks) if f"#{tag}" not in text]
        suggestions.extend(
            f"{text} @{context}" for context in self._existing_contexts(tasks) if f"@{context}" not in text
        )
        return suggestions

    @staticmethod
    def _existing_tags(tasks: Sequence[Task]) -> List[str]:
        tags: Set[str] = set()
        for task in tasks:
            tags |= task.category.tags
        return sorted(tags or DEFAULT_TAGS)

    @staticmethod
    def _existing_contexts(tasks: Sequence[Task]) -> List[str]:
        contexts: Set[str] = set()
        for task in tasks:
            contexts |= task.category.contexts
        return sorted(contexts or DEFAULT_CONTEXTS)
