"""
Intent classifier: ordered, first-match-wins rules over chat text
"""

import re
from typing import Callable, List, NamedTuple, Optional
from taskchat.config.constants import SHORT_INPUT_LENGTH, SHORT_PHRASE_WORDS
from taskchat.models.command import Intent
from taskchat.models.task import TaskType
from taskchat.services.task_type_resolver import TaskTypeResolver
from taskchat.services.text_handler import TextHandler
from taskchat.utils.logger import logger


GREETING_PATTERN = re.compile(
    r"^(hi|hello|hey|good morning|good afternoon|good evening|thanks|thank you)\b"
)

QUESTION_WORDS = ("how ", "what ", "when ", "where ", "why ", "who ", "which ")

QUESTION_PHRASES = (
    "can you ", "could you ", "would you ", "do you ",
    "does this ", "is this ", "are there ",
)

# Longer prefixes first so "show me " wins over "show "
SEARCH_PREFIXES = (
    "show me ", "show ", "find me ", "find all ", "find ", "search ",
    "get ", "display ", "list all ", "see ",
)

SEARCH_PHRASES = ("show me", "find all")

# "view 3" is the view command, "view work items" a search
_VIEW_SEARCH_PATTERN = re.compile(r"^view \D")

_GENERIC_NOUN_PATTERN = re.compile(r"\b(tasks?|items?|things?)\b", re.IGNORECASE)
_LEADING_DETERMINER_PATTERN = re.compile(r"^((all|my|the|me)(\s+|$))+", re.IGNORECASE)

CATEGORY_ONLY_PATTERN = re.compile(r"^[#@]\w+$")

DIRECT_COMMANDS = ("list", "help", "search", "done", "delete", "edit", "view", "reset", "bye")

# Deadline and event commands that already carry their date marker
CANONICAL_TASK_PATTERN = re.compile(r"^(deadline\s+\S.*\s/by\s+\S|event\s+\S.*\s/at\s+\S)")

# Single words that are too bare to create anything from
BARE_COMMAND_WORDS = ("add", "create", "new", "todo", "event", "deadline", "meeting", "appointment")

TASK_PREFIXES = (
    "add ", "create ", "new ", "todo ", "make ", "do ",
    "need to ", "remember to ", "should ", "must ",
)

ACTION_VERBS = (
    "buy", "call", "write", "read", "send", "book", "pay", "clean", "wash",
    "fix", "repair", "build", "cook", "eat", "visit", "go", "walk", "run",
    "study", "learn", "practice", "exercise", "work", "plan", "organize",
    "finish", "complete", "submit", "deliver", "prepare", "setup", "install",
    "update", "download", "upload", "backup", "sync", "check", "review",
    "schedule", "cancel", "reschedule", "confirm", "order", "purchase",
    "print", "scan", "copy", "move", "transfer", "delete", "remove",
    "start", "begin", "end", "stop", "pause", "resume", "continue",
    "meet", "contact", "email", "text", "message", "reply", "respond",
)

TASK_NOUNS = (
    "homework", "assignment", "project", "report", "paper", "essay",
    "presentation", "meeting", "appointment", "call", "email", "message",
    "groceries", "shopping", "laundry", "dishes", "cleaning", "workout",
)

VAGUE_WORDS = (
    "maybe", "perhaps", "possibly", "probably", "might", "could be",
    "think about", "consider", "random", "arbitrary", "some", "any",
    "this is", "that is", "it is", "just", "only", "simply",
    "looks like", "seems like", "appears to be", "something like",
    "kind of", "sort of", "i guess", "i think", "i suppose",
    "nothing", "anything", "everything", "something",
)

WEAK_SUBJECTS = ("i ", "this ", "that ", "it ", "there ", "here ", "some ", "any ", "maybe ", "perhaps ")

META_WORDS = ("text that", "sentence", "statement", "phrase", "words", "example")

_VAGUE_PATTERN = re.compile(rf"\b({'|'.join(re.escape(word) for word in VAGUE_WORDS)})\b")
_ACTION_VERB_PATTERN = re.compile(rf"\b({'|'.join(ACTION_VERBS)})\b")
_TASK_NOUN_PATTERN = re.compile(rf"\b({'|'.join(TASK_NOUNS)})s?\b")


class Rule(NamedTuple):
    """One classification rule; handle receives (normalized, original)"""
    name: str
    matches: Callable[[str], bool]
    handle: Callable[[str, str], Optional[Intent]]


class IntentClassifier:
    """
    Maps chat text to an Intent

    Rules are tried in RULE_ORDER and the first one that matches decides.
    A rule whose handler returns None lets the chain fall through to
    UNKNOWN.
    """

    RULE_ORDER = ("greeting", "question", "search", "category", "direct_command", "task_creation")

    def __init__(
        self,
        resolver: Optional[TaskTypeResolver] = None,
        text_handler: Optional[TextHandler] = None,
    ):
        """
        Initialize intent classifier

        Args:
            resolver: Task type resolver used for event/deadline detection
            text_handler: Chat text normalizer
        """
        self.resolver = resolver or TaskTypeResolver()
        self.text_handler = text_handler or TextHandler()
        self.logger = logger
        self.rules: List[Rule] = [
            Rule("greeting", self.is_greeting_or_too_short, lambda normalized, original: Intent.unknown()),
            Rule("question", self.is_question, self._handle_question),
            Rule("search", self.is_search_request, self._handle_search),
            Rule("category", self.is_category_only, lambda normalized, original: Intent.category(original)),
            Rule("direct_command", self.is_direct_command, lambda normalized, original: Intent.direct(original)),
            Rule("task_creation", lambda normalized: True, self._handle_task_creation),
        ]

    def classify(self, text: Optional[str]) -> Intent:
        """
        Classify chat text

        Args:
            text: Raw chat text

        Returns:
            Intent (UNKNOWN when nothing matched)
        """
        original = self.text_handler.process(text or "")
        normalized = original.lower()

        if not normalized:
            return Intent.unknown()

        for rule in self.rules:
            if not rule.matches(normalized):
                continue
            intent = rule.handle(normalized, original)
            if intent is None:
                break
            self.logger.debug(f"[Intent] '{original}' -> {rule.name}: {intent.type.value}")
            return intent

        self.logger.debug(f"[Intent] '{original}' -> unknown")
        return Intent.unknown()

    def is_greeting_or_too_short(self, text: str) -> bool:
        return len(text) <= SHORT_INPUT_LENGTH or GREETING_PATTERN.match(text) is not None

    def is_question(self, text: str) -> bool:
        return (
            "?" in text
            or text.startswith(QUESTION_WORDS)
            or any(phrase in text for phrase in QUESTION_PHRASES)
        )

    def is_search_request(self, text: str) -> bool:
        return (
            text.startswith(SEARCH_PREFIXES)
            or _VIEW_SEARCH_PATTERN.match(text) is not None
            or any(phrase in text for phrase in SEARCH_PHRASES)
        )

    def is_category_only(self, text: str) -> bool:
        return CATEGORY_ONLY_PATTERN.match(text) is not None

    def is_direct_command(self, text: str) -> bool:
        if CANONICAL_TASK_PATTERN.match(text):
            return True
        return text.split(" ", 1)[0] in DIRECT_COMMANDS

    def is_vague_statement(self, text: str) -> bool:
        """Hedging, weak subjects and meta-language are not tasks"""
        if _VAGUE_PATTERN.search(text):
            return True
        if text.startswith(WEAK_SUBJECTS):
            return True
        return any(word in text for word in META_WORDS)

    def is_repeated_or_bare(self, text: str) -> bool:
        words = text.split()
        if len(words) >= 3 and len(set(words)) == 1:
            return True
        return len(words) == 1 and words[0] in BARE_COMMAND_WORDS

    def looks_like_task(self, text: str) -> bool:
        if text.startswith(TASK_PREFIXES):
            return True
        if "!" in text or "#" in text or "@" in text:
            return True
        if _ACTION_VERB_PATTERN.search(text) or _TASK_NOUN_PATTERN.search(text):
            return True
        return len(text.split()) <= SHORT_PHRASE_WORDS and "?" not in text

    def _handle_question(self, text: str, original: str) -> Intent:
        if "category" in text or "categories" in text:
            return Intent.question("categories")
        if "delete" in text or "remove" in text:
            return Intent.question("delete")
        if "command" in text or "available" in text:
            return Intent.question()
        if "search" in text or "find" in text:
            return Intent.question("search")
        return Intent.question()

    def _handle_search(self, text: str, original: str) -> Intent:
        # Cut on the original text; lower() may change its length
        prefix = next((p for p in SEARCH_PREFIXES + ("view ",) if text.startswith(p)), None)
        if prefix is not None:
            match = re.match(re.escape(prefix), original, re.IGNORECASE)
        else:
            phrase = next(p for p in SEARCH_PHRASES if p in text)
            match = re.search(re.escape(phrase), original, re.IGNORECASE)
        term = original[match.end():] if match else ""

        term = _GENERIC_NOUN_PATTERN.sub(" ", term)
        term = " ".join(term.split())
        term = _LEADING_DETERMINER_PATTERN.sub("", term).strip()
        return Intent.search(term or None)

    def _handle_task_creation(self, text: str, original: str) -> Optional[Intent]:
        if self.is_vague_statement(text) or self.is_repeated_or_bare(text):
            self.logger.debug(f"[Intent] '{original}' rejected as vague or bare")
            return None

        task_type = self.detect_task_type(text)
        if task_type is None:
            return None
        return Intent.task(task_type, original)

    def detect_task_type(self, text: str) -> Optional[TaskType]:
        """Event, then deadline, then the generic task heuristic"""
        if self.resolver.is_event(text):
            return TaskType.EVENT
        if self.resolver.is_deadline(text):
            return TaskType.DEADLINE
        if self.looks_like_task(text):
            return TaskType.TODO
        return None
