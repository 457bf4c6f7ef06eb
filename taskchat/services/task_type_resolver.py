"""
Task type resolver: decides between event, deadline and todo and splits
the description from the time phrase
"""

import re
from typing import List, Optional, Pattern
from taskchat.models.command import TaskTypeDecision
from taskchat.models.task import TaskType
from taskchat.utils.date_parser import WEEKDAY_NAMES, MONTH_NAMES
from taskchat.utils.logger import logger


def _words(words) -> str:
    return "|".join(re.escape(word) for word in words)


_WEEKDAYS = _words(WEEKDAY_NAMES)

# Filler command words removed from the start of a task text (first match only)
COMMAND_WORDS = ("add", "create", "new", "todo", "event", "deadline", "make", "schedule")

EVENT_NOUNS = (
    "meeting", "appointment", "event", "conference", "interview",
    "lunch", "dinner", "visit", "session", "class", "lecture",
)

# Event words that make a missing time worth asking about
STRONG_EVENT_WORDS = ("meeting", "appointment", "conference", "interview", "session")

# Deadline words that make a missing time worth asking about
STRONG_DEADLINE_WORDS = ("submit", "finish", "complete", "turn in", "hand in")

_EVENT_NOUN_PATTERN = re.compile(rf"\b({_words(EVENT_NOUNS)})(e?s)?\b")
_CALL_PATTERN = re.compile(r"\bcall\b")
_DEADLINE_WORD_PATTERN = re.compile(r"\b(deadline|due|by)\b")
_DEADLINE_VERB_PATTERN = re.compile(r"\b(submit|finish|complete)\b")
_DUE_PATTERN = re.compile(r"\bdue\b", re.IGNORECASE)
_LINKING_WORD_PATTERN = re.compile(r"^(at|on|by|due|deadline)\s+", re.IGNORECASE)

# Temporal indicators for "call ..." and event detection
_TIME_INDICATOR_PATTERN = re.compile(
    rf"\b(at|on|tomorrow|today|tonight|next|this|am|pm|{_WEEKDAYS})\b"
    r"|\b\d{1,2}\s?[ap]m\b"
    r"|\b\d{1,2}:\d{2}\b"
)

# Temporal indicators required next to a deadline word
_DEADLINE_TIME_PATTERN = re.compile(
    rf"\b(tomorrow|today|tonight|yesterday|{_WEEKDAYS}|am|pm|noon|midnight|{_words(sorted(MONTH_NAMES))})\b"
    r"|\b(next|this) (week|month)\b"
    r"|\bo'clock\b"
    r"|\b\d{1,2}:\d{2}\b"
    r"|\b\d{1,2}\s?[ap]m\b"
)

# Split points, earliest match after index 0 wins
EVENT_SPLIT_PATTERNS: List[Pattern] = [
    re.compile(r"\bat\b"),
    re.compile(r"\bon\b"),
    re.compile(r"\btomorrow\b"),
    re.compile(r"\btoday\b"),
    re.compile(rf"\b({_WEEKDAYS})\b"),
    re.compile(r"\bnext\b"),
    re.compile(r"\bthis\b"),
    re.compile(r"\b(am|pm)\b"),
    re.compile(r"\b\d{1,2}:\d{2}"),
    re.compile(r"\b\d+\s?pm\b"),
    re.compile(r"\b\d+\s?am\b"),
]

DEADLINE_SPLIT_PATTERNS: List[Pattern] = [
    re.compile(r"\bby\b"),
    re.compile(r"\bdeadline\b"),
    re.compile(r"\bbefore\b"),
    re.compile(r"\buntil\b"),
    re.compile(r"\btomorrow\b"),
    re.compile(r"\btoday\b"),
    re.compile(rf"\b({_WEEKDAYS})\b"),
]


def remove_command_words(text: str) -> str:
    """
    Remove one leading filler command word ("add", "create", "schedule", ...)

    Args:
        text: Task text

    Returns:
        Text without the first matching command word
    """
    result = text.strip()
    lower = result.lower()
    for word in COMMAND_WORDS:
        if lower.startswith(word + " "):
            return result[len(word):].strip()
    return result


def find_time_start_index(text: str, patterns: List[Pattern]) -> int:
    """
    Find where the time phrase starts

    Index 0 is never a split point, so a text that starts with an
    indicator keeps it in the description.

    Args:
        text: Cleaned task text
        patterns: Indicator patterns

    Returns:
        Earliest match index greater than 0, or -1
    """
    lower = text.lower()
    earliest: Optional[int] = None
    for pattern in patterns:
        for match in pattern.finditer(lower):
            if match.start() > 0:
                if earliest is None or match.start() < earliest:
                    earliest = match.start()
                break
    return -1 if earliest is None else earliest


def strip_linking_word(phrase: str) -> str:
    return _LINKING_WORD_PATTERN.sub("", phrase.strip(), count=1).strip()


class TaskTypeResolver:
    """Decides the task type and splits description from time phrase"""

    def __init__(self):
        """Initialize task type resolver"""
        self.logger = logger

    def has_time_indicators(self, text: str) -> bool:
        return _TIME_INDICATOR_PATTERN.search(text.lower()) is not None

    def is_event(self, text: str) -> bool:
        """
        Event: an event noun, or "call" together with a time indicator

        "call mom" stays a todo; "call mom at 3pm" is an event.
        """
        lower = text.lower()
        if _EVENT_NOUN_PATTERN.search(lower):
            return True
        return _CALL_PATTERN.search(lower) is not None and self.has_time_indicators(lower)

    def is_deadline(self, text: str) -> bool:
        """
        Deadline: a deadline word (deadline/due/by) plus a time indicator

        Text that starts with "deadline " needs no indicator. Texts with
        submit/finish/complete need an indicator either way.
        """
        lower = text.lower().strip()
        if lower.startswith("deadline "):
            return True

        has_time = _DEADLINE_TIME_PATTERN.search(lower) is not None
        if _DEADLINE_VERB_PATTERN.search(lower):
            return has_time

        return has_time and _DEADLINE_WORD_PATTERN.search(lower) is not None

    def resolve(self, text: str, task_type: TaskType) -> TaskTypeDecision:
        """
        Resolve the final task type for a creation guess

        Args:
            text: Raw task text (original case)
            task_type: Guess from intent classification

        Returns:
            TaskTypeDecision
        """
        if task_type == TaskType.EVENT:
            decision = self.resolve_event(text)
        elif task_type == TaskType.DEADLINE:
            decision = self.resolve_deadline(text)
        else:
            decision = TaskTypeDecision.todo(remove_command_words(text))

        if decision.task_type != task_type and not decision.needs_clarification:
            self.logger.info(
                f"[TaskType] '{text}' degraded from {task_type.command} to {decision.task_type.command}"
            )
        return decision

    def resolve_event(self, text: str) -> TaskTypeDecision:
        clean = remove_command_words(text)
        lower = clean.lower()

        if not lower or lower in ("meeting", "appointment", "event"):
            return TaskTypeDecision.clarify(TaskType.EVENT)

        if lower.startswith("call") and not self.has_time_indicators(lower):
            return TaskTypeDecision.todo(clean)

        index = find_time_start_index(clean, EVENT_SPLIT_PATTERNS)
        if index == -1:
            if any(word in lower for word in STRONG_EVENT_WORDS):
                return TaskTypeDecision.clarify(TaskType.EVENT)
            return TaskTypeDecision.todo(clean)

        return self._split(clean, index, TaskType.EVENT)

    def resolve_deadline(self, text: str) -> TaskTypeDecision:
        clean = remove_command_words(text)
        lower = clean.lower()

        if not lower or lower == "deadline":
            return TaskTypeDecision.clarify(TaskType.DEADLINE)

        due_decision = self._split_on_due(clean)
        if due_decision is not None:
            return due_decision

        index = find_time_start_index(clean, DEADLINE_SPLIT_PATTERNS)
        if index == -1:
            if any(word in lower for word in STRONG_DEADLINE_WORDS):
                return TaskTypeDecision.clarify(TaskType.DEADLINE)
            return TaskTypeDecision.todo(clean)

        return self._split(clean, index, TaskType.DEADLINE)

    def _split_on_due(self, clean: str) -> Optional[TaskTypeDecision]:
        """
        Split on "due"

        With two or more "due" words the text between the first and the
        second is the description and the text after the second is the
        time. With one, everything before is the description.
        """
        parts = _DUE_PATTERN.split(clean)
        if len(parts) >= 3:
            description, phrase = parts[1], parts[2]
        elif len(parts) == 2:
            description, phrase = parts[0], parts[1]
        else:
            return None

        description = description.strip()
        phrase = strip_linking_word(phrase)
        if not description or not phrase:
            return None

        return TaskTypeDecision(
            task_type=TaskType.DEADLINE,
            description=description,
            time_phrase=phrase,
        )

    def _split(self, clean: str, index: int, task_type: TaskType) -> TaskTypeDecision:
        description = clean[:index].strip()
        phrase = strip_linking_word(clean[index:])

        if not description or not phrase:
            return TaskTypeDecision.todo(clean)

        return TaskTypeDecision(
            task_type=task_type,
            description=description,
            time_phrase=phrase,
        )
