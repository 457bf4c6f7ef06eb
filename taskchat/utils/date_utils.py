"""
Current date/time for the console entry point
The interpretation pipeline takes "now" as a parameter and never calls this module
"""

from datetime import datetime, timezone, timedelta
from taskchat.config.settings import settings

# Singleton timezone object
USER_TIMEZONE = timezone(timedelta(hours=settings.USER_TIMEZONE_OFFSET))


def get_current_datetime() -> datetime:
    """
    Get current local datetime in the user's timezone

    Returns:
        Naive datetime (wall-clock time at USER_TIMEZONE_OFFSET)
    """
    return datetime.now(USER_TIMEZONE).replace(tzinfo=None)
