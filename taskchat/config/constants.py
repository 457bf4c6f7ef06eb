"""
Application constants
"""

# Chat input
MAX_MESSAGE_LENGTH = 4096
SHORT_INPUT_LENGTH = 2  # inputs this short are answered with help
SHORT_PHRASE_WORDS = 5  # short non-question phrases count as tasks

# Task defaults
DEFAULT_TIME_MINUTE = 0

# Search
MAX_SEARCH_SUGGESTIONS = 5

# Command completion
MAX_COMPLETIONS = 10
MAX_EDIT_SUGGESTIONS = 10
MAX_TASK_NUMBER_SUGGESTIONS = 5
DESCRIPTION_PREVIEW_LENGTH = 30

# Canonical command markers
DEADLINE_MARKER = "/by"
EVENT_MARKER = "/at"

# Logging
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"
