"""
Calendar Day Utility

Reminders and notified-day markers store calendar days as YYYY-MM-DD
strings and times of day as HH:MM, so that plain string comparison orders
them correctly.
"""

from datetime import datetime
import pytz

DAY_FORMAT = '%Y-%m-%d'
TIME_FORMAT = '%H:%M'


def today_str(timezone='UTC', now=None):
    """
    Get today's calendar day in the given timezone.

    Args:
        timezone (str): pytz timezone name (default: 'UTC')
        now (datetime, optional): Aware datetime to use instead of the clock

    Returns:
        str: Today's date in YYYY-MM-DD format
    """
    tz = pytz.timezone(timezone)
    if now is None:
        now = datetime.now(tz)
    else:
        now = now.astimezone(tz)
    return now.strftime(DAY_FORMAT)


def is_day(value):
    """Check that value is a real calendar day written as YYYY-MM-DD."""
    return _matches(value, DAY_FORMAT, 10)


def is_time_of_day(value):
    """Check that value is a time of day written as HH:MM."""
    return _matches(value, TIME_FORMAT, 5)


def _matches(value, fmt, length):
    # strptime accepts unpadded fields, which would break lexical ordering
    if not isinstance(value, str) or len(value) != length:
        return False
    try:
        datetime.strptime(value, fmt)
    except ValueError:
        return False
    return True


def format_display_date(day, time=None):
    """
    Format a reminder date for notification text.

    Args:
        day (str): Date in YYYY-MM-DD format
        time (str, optional): Time in HH:MM format

    Returns:
        str: e.g. "June 01, 2025 at 09:30"
    """
    try:
        text = datetime.strptime(day, DAY_FORMAT).strftime('%B %d, %Y')
    except ValueError:
        text = day
    if time:
        text = f"{text} at {time}"
    return text
