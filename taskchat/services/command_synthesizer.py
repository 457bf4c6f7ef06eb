"""
Command synthesizer: turns a classified intent into one canonical command
"""

from typing import Optional
from taskchat.config.constants import DEADLINE_MARKER, EVENT_MARKER
from taskchat.models.command import Intent, IntentType, TaskTypeDecision
from taskchat.models.task import TaskType
from taskchat.utils.error_handler import CommandFormatError


NO_ARGUMENT_COMMANDS = ("list", "help", "reset", "bye")
ARGUMENT_COMMANDS = ("todo", "done", "delete", "view", "search", "edit")


class CommandSynthesizer:
    """Builds canonical command strings (pure, no side effects)"""

    def synthesize(self, intent: Intent, decision: Optional[TaskTypeDecision] = None) -> str:
        """
        Synthesize the canonical command for an intent

        Args:
            intent: Classified intent
            decision: Task type decision, required for TASK_CREATION

        Returns:
            One of "todo <desc>", "deadline <desc> /by <time>",
            "event <desc> /at <time>", "search <term>", "list",
            "help [topic]" or the passed-through command
        """
        if intent.type in (IntentType.QUESTION, IntentType.UNKNOWN):
            return self.help(intent.help_topic)

        if intent.type == IntentType.SEARCH_REQUEST:
            return f"search {intent.term}" if intent.term else "list"

        if intent.type == IntentType.CATEGORY_SHORTHAND:
            return f"search {intent.marker}"

        if intent.type == IntentType.DIRECT_COMMAND:
            return intent.text

        if decision is None:
            raise ValueError("Task creation needs a task type decision")
        return self.task_command(decision)

    def task_command(self, decision: TaskTypeDecision) -> str:
        if decision.needs_clarification:
            return self.help(decision.task_type.command)

        if decision.task_type == TaskType.DEADLINE:
            return f"deadline {decision.description} {DEADLINE_MARKER} {decision.time_phrase}"

        if decision.task_type == TaskType.EVENT:
            return f"event {decision.description} {EVENT_MARKER} {decision.time_phrase}"

        return f"todo {decision.description}"

    def help(self, topic: str = "") -> str:
        return f"help {topic}" if topic else "help"


def validate_command(command: Optional[str], strict: bool = False) -> bool:
    """
    Check a command against the canonical grammar

    Args:
        command: Command text
        strict: Raise CommandFormatError instead of returning False

    Returns:
        True if the command is well-formed
    """
    reason = _format_problem(command)
    if reason is None:
        return True
    if strict:
        raise CommandFormatError(command or "", reason)
    return False


def _format_problem(command: Optional[str]) -> Optional[str]:
    if command is None or not command.strip():
        return "Empty command"

    parts = command.strip().split(" ", 1)
    command_type = parts[0].lower()
    remainder = parts[1].strip() if len(parts) > 1 else ""

    if command_type == "event":
        return _marker_problem(remainder, EVENT_MARKER)
    if command_type == "deadline":
        return _marker_problem(remainder, DEADLINE_MARKER)
    if command_type in NO_ARGUMENT_COMMANDS:
        return None
    if command_type in ARGUMENT_COMMANDS:
        return None if remainder else f"'{command_type}' needs an argument"
    return f"Unknown command '{command_type}'"


def _marker_problem(remainder: str, marker: str) -> Optional[str]:
    if marker not in remainder:
        return f"Missing {marker}"
    if remainder.startswith(marker):
        return "Missing description"
    if remainder.endswith(marker):
        return "Missing date/time"
    return None
