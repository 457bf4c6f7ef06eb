"""
Date parsing utilities for converting natural language date/time text to timestamps
"""

import re
from datetime import date, datetime, time, timedelta
from typing import Optional
from dateutil.relativedelta import relativedelta
from taskchat.config.settings import settings
from taskchat.config.constants import DEFAULT_TIME_MINUTE
from taskchat.models.command import ParsedInstant
from taskchat.utils.error_handler import DateParseError
from taskchat.utils.logger import logger


RELATIVE_DAYS = {
    "today": 0,
    "tomorrow": 1,
    "tmr": 1,
    "yesterday": -1,
}

# ISO weekday numbers (Monday = 1)
WEEKDAYS = {
    "monday": 1,
    "tuesday": 2,
    "wednesday": 3,
    "thursday": 4,
    "friday": 5,
    "saturday": 6,
    "sunday": 7,
    "mon": 1,
    "tue": 2,
    "wed": 3,
    "thu": 4,
    "fri": 5,
    "sat": 6,
    "sun": 7,
}

WEEKDAY_NAMES = ("monday", "tuesday", "wednesday", "thursday", "friday", "saturday", "sunday")

MONTH_NAMES = {
    "jan", "feb", "mar", "apr", "may", "jun", "jul", "aug", "sep", "sept", "oct", "nov", "dec",
    "january", "february", "march", "april", "june", "july", "august",
    "september", "october", "november", "december",
}

# Exact formats with time, in priority order
DATE_TIME_FORMATS = [
    "%d/%m/%Y %H%M",     # 31/12/2024 1800
    "%d/%m/%Y %H:%M",    # 31/12/2024 18:00
    "%d/%m/%Y %I:%M %p", # 31/12/2024 6:00 PM
    "%d-%m-%Y %H%M",     # 31-12-2024 1800
    "%Y-%m-%d %H%M",     # 2024-12-31 1800
    "%Y-%m-%d %H:%M",    # 2024-12-31 18:00
    "%Y-%m-%dT%H:%M",    # 2024-12-31T18:00
    "%b %d, %Y %H%M",    # Dec 31, 2024 1800
    "%d %b %Y %H%M",     # 31 Dec 2024 1800
]

# Date-only formats, default time applies
DATE_ONLY_FORMATS = [
    "%d/%m/%Y",
    "%d-%m-%Y",
    "%Y-%m-%d",
    "%b %d, %Y",
    "%B %d, %Y",
    "%d %b %Y",
    "%d %B %Y",
]

_TIME_24H = re.compile(r"^(\d{1,2}):(\d{2})$")
_TIME_COMPACT = re.compile(r"^(\d{2})(\d{2})$")
_TIME_12H = re.compile(r"^(\d{1,2})(?::(\d{2}))?(am|pm)$")
_NUMERIC_DATE = re.compile(r"^\d{1,4}[/-]\d{1,2}([/-]\d{1,4})?(t[\d:]+)?$")

HELP_MESSAGE = (
    "Invalid date/time format. Try these examples:\n"
    "📅 Exact formats:\n"
    "  • 31/12/2024 1800\n"
    "  • 31/12/2024 6:00 PM\n"
    "  • Dec 31, 2024 1800\n"
    "\n"
    "🗣️ Natural language:\n"
    "  • tomorrow 6pm\n"
    "  • next friday 2:30 PM\n"
    "  • today 9am\n"
    "  • monday 3pm\n"
    "\n"
    "⏰ Time only (uses today's date):\n"
    "  • 6pm\n"
    "  • 14:30\n"
    "  • 9am\n"
    "\n"
    "📆 Date only (uses 9 AM):\n"
    "  • 31/12/2024\n"
    "  • tomorrow\n"
    "  • next week"
)


def parse_date_time(text: Optional[str], now: datetime) -> ParsedInstant:
    """
    Parse a free-text date/time fragment

    Order:
    1. Natural language ("tomorrow 6pm", "next friday", "14:30")
    2. Exact date+time formats ("31/12/2024 1800")
    3. Date-only formats, time defaults to 09:00

    Args:
        text: Date/time text
        now: Current instant used to resolve relative expressions

    Returns:
        ParsedInstant with provenance flags

    Raises:
        DateParseError: If no format matches; the message lists supported formats
    """
    if text is None or not text.strip():
        raise DateParseError("Date/time input cannot be empty", text)

    normalized = " ".join(text.split())

    natural = _parse_natural_language(normalized.lower(), now)
    if natural is not None:
        logger.debug(f"Parsed '{text}' as natural language: {natural.value}")
        return natural

    for fmt in DATE_TIME_FORMATS:
        try:
            return ParsedInstant(value=datetime.strptime(normalized, fmt))
        except ValueError:
            continue

    for fmt in DATE_ONLY_FORMATS:
        try:
            parsed = datetime.strptime(normalized, fmt)
        except ValueError:
            continue
        return ParsedInstant(
            value=datetime.combine(parsed.date(), _default_time()),
            time_defaulted=True,
        )

    logger.debug(f"Could not parse date/time: '{text}'")
    raise DateParseError(HELP_MESSAGE, text)


def can_parse(text: Optional[str], now: datetime) -> bool:
    """Check if text can be parsed as a date/time"""
    try:
        parse_date_time(text, now)
    except DateParseError:
        return False
    return True


def get_supported_formats() -> str:
    """Help text listing supported date/time formats"""
    return HELP_MESSAGE


def _default_time() -> time:
    return time(settings.DEFAULT_TASK_HOUR, DEFAULT_TIME_MINUTE)


def _parse_natural_language(text: str, now: datetime) -> Optional[ParsedInstant]:
    """
    Single left-to-right token scan with date/time accumulators

    Later tokens override earlier ones; "next" consumes the following
    token when it forms "next <weekday>", "next week" or "next month".
    Returns None when neither a date nor a time was recognized, or when
    the text is an explicit calendar date left for the exact formats.
    """
    tokens = [token.strip(",.") for token in text.split()]
    if any(_is_calendar_token(token) for token in tokens):
        return None

    today = now.date()
    date_part: Optional[date] = None
    time_part: Optional[time] = None
    previous_was_time = False

    i = 0
    while i < len(tokens):
        token = tokens[i]
        following = tokens[i + 1] if i + 1 < len(tokens) else None
        is_time = False

        if token in RELATIVE_DAYS:
            date_part = today + timedelta(days=RELATIVE_DAYS[token])
        elif token in WEEKDAYS:
            days_to_add = WEEKDAYS[token] - today.isoweekday()
            if days_to_add <= 0:
                days_to_add += 7
            date_part = today + timedelta(days=days_to_add)
        elif token == "next" and following in WEEKDAYS:
            # Always one week out, even when the weekday is still ahead
            days_to_add = WEEKDAYS[following] - today.isoweekday() + 7
            date_part = today + timedelta(days=days_to_add)
            i += 1
        elif token == "next" and following == "week":
            date_part = today + timedelta(weeks=1)
            i += 1
        elif token == "next" and following == "month":
            date_part = today + relativedelta(months=1)
            i += 1
        elif token in ("am", "pm") and previous_was_time and time_part is not None:
            adjusted = _apply_meridiem(time_part.hour, token) if 1 <= time_part.hour <= 12 else None
            if adjusted is not None:
                time_part = time_part.replace(hour=adjusted)
        else:
            parsed_time = parse_time(token)
            if parsed_time is not None:
                time_part = parsed_time
                is_time = True

        previous_was_time = is_time
        i += 1

    if date_part is None and time_part is None:
        return None

    return ParsedInstant(
        value=datetime.combine(date_part or today, time_part or _default_time()),
        time_defaulted=time_part is None,
        date_defaulted=date_part is None,
    )


def _is_calendar_token(token: str) -> bool:
    return token in MONTH_NAMES or _NUMERIC_DATE.match(token) is not None


def parse_time(token: str) -> Optional[time]:
    """
    Parse a single time-of-day token

    Supports "14:30", "1430", "2pm", "09am" and "6:30pm". For 12-hour
    forms 12am is midnight and 12pm stays noon.

    Args:
        token: Lower-cased token without spaces

    Returns:
        time or None if the token is not a time
    """
    match = _TIME_24H.match(token) or _TIME_COMPACT.match(token)
    if match:
        return _build_time(int(match.group(1)), int(match.group(2)))

    match = _TIME_12H.match(token)
    if match:
        hour = _apply_meridiem(int(match.group(1)), match.group(3))
        if hour is None:
            return None
        return _build_time(hour, int(match.group(2) or 0))

    return None


def _apply_meridiem(hour: int, meridiem: str) -> Optional[int]:
    if hour > 23:
        return None
    if meridiem == "pm":
        return hour + 12 if hour < 12 else hour
    if hour == 12:
        return 0
    return hour if hour < 12 else None


def _build_time(hour: int, minute: int) -> Optional[time]:
    if 0 <= hour <= 23 and 0 <= minute <= 59:
        return time(hour, minute)
    return None
