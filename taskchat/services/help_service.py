"""
Help service: topic help texts for canonical commands
"""

from typing import Optional
from taskchat.models.task import Category, Priority
from taskchat.utils.date_parser import get_supported_formats
from taskchat.utils.logger import logger


GENERAL_HELP = (
    "Available commands: todo, deadline, event, list, done, delete, search, edit, view, help, bye\n"
    "\n"
    "You can also just chat:\n"
    "  • buy milk\n"
    "  • meeting tomorrow at 2pm\n"
    "  • submit report by friday\n"
    "  • show me work tasks\n"
    "  • #work\n"
    "\n"
    "Type 'help [topic]' for details: todo, deadline, event, search, edit, "
    "delete, categories, priorities, dates, examples"
)

TOPIC_HELP = {
    "todo": "Todo format: todo [description] [!priority] [#category] [@context]",
    "deadline": (
        "Deadline format: deadline [description] /by [date/time] [!priority] [#category] [@context]\n"
        "Example: deadline Submit report /by friday 5pm !urgent #work"
    ),
    "event": (
        "Event format: event [description] /at [date/time] [!priority] [#category] [@context]\n"
        "Example: event Team meeting /at tomorrow 2pm #work @office"
    ),
    "search": "Search format: search [keyword] or search [#category] or search [@context]",
    "edit": "Edit format: edit [task_number] [field] [new_value]",
    "delete": "Delete format: delete [task_number]",
    "examples": (
        "🎯 Personal Task Management:\n"
        "  todo Buy groceries !high #personal @home\n"
        "  event Dentist appointment /at next week 2pm #health @clinic\n"
        "\n"
        "💼 Work Project Management:\n"
        "  deadline Submit quarterly report /by friday 5pm !urgent #work\n"
        "  event Sprint planning meeting /at monday 9am #work @conference-room\n"
        "\n"
        "🎓 Study & Learning:\n"
        "  todo Read chapter 5 !normal #study @library\n"
        "  deadline Assignment /by tomorrow 11:59pm !critical #study"
    ),
}

FALLBACK_HELP = "Type 'help' for general help or 'help [command]' for specific help."


class HelpService:
    """Service for topic help"""

    def __init__(self):
        """Initialize help service"""
        self.logger = logger

    def get_help(self, topic: Optional[str] = None) -> str:
        """
        Get help text for a topic

        Args:
            topic: Help topic; empty or None means general help

        Returns:
            Help text (fallback hint for unknown topics)
        """
        topic = (topic or "").strip().lower()

        if not topic or topic == "general":
            return GENERAL_HELP
        if topic in ("categories", "category"):
            return Category.help_text()
        if topic in ("priorities", "priority"):
            return Priority.help_text()
        if topic in ("dates", "date", "time"):
            return get_supported_formats()
        if topic in TOPIC_HELP:
            return TOPIC_HELP[topic]

        self.logger.debug(f"[Help] Unknown help topic: {topic}")
        return FALLBACK_HELP

    def help_for_command(self, command: str) -> str:
        """Help text for a synthesized 'help [topic]' command"""
        parts = command.strip().split(" ", 1)
        return self.get_help(parts[1] if len(parts) > 1 else None)
