"""
Reminder Store

Creates and lists reminders. Reminders are only ever visible to the user
who owns them.
"""

import logging
from sqlalchemy import select

from config.database import get_db_session
from config.models import Reminder
from utils.dates import is_day, is_time_of_day
from webapp.errors import ValidationError

logger = logging.getLogger(__name__)


def reminder_to_dict(reminder):
    """Public view of a reminder, including its notified-day markers."""
    return {
        'id': reminder.reminder_id,
        'userId': reminder.user_id,
        'title': reminder.title,
        'date': reminder.date,
        'time': reminder.time,
        'createdAt': reminder.created_at.isoformat() if reminder.created_at else None,
        'notifiedDays': [marker.day for marker in reminder.notified_days],
    }


def sort_key(reminder):
    """Order reminders by date, then time; untimed ones come first on a given day."""
    return reminder['date'] + (reminder['time'] or '')


def _text(value):
    return value.strip() if isinstance(value, str) else ''


def create(owner_id, title, date, time=None):
    """
    Create a reminder for a user.

    Args:
        owner_id (str): Owning user's id
        title (str): What is due
        date (str): Due day in YYYY-MM-DD format
        time (str, optional): Time of day in HH:MM format

    Returns:
        dict: The new reminder, with no notified days

    Raises:
        ValidationError: If title or date is missing or malformed
    """
    title = _text(title)
    date = _text(date)
    time = _text(time) or None

    if not title or not date:
        raise ValidationError("Title and date are required")
    if not is_day(date):
        raise ValidationError(f"Invalid date format: {date}. Expected YYYY-MM-DD")
    if time is not None and not is_time_of_day(time):
        raise ValidationError(f"Invalid time format: {time}. Expected HH:MM")

    session = get_db_session()
    try:
        reminder = Reminder(user_id=owner_id, title=title, date=date, time=time)
        session.add(reminder)
        session.commit()
        session.refresh(reminder)
        logger.info(f"Created reminder {reminder.reminder_id} for user {owner_id} on {date}")
        return reminder_to_dict(reminder)
    except Exception:
        session.rollback()
        raise
    finally:
        session.close()


def list_for(owner_id):
    """
    Get a user's reminders, sorted by date and time.

    Ties keep creation order.

    Args:
        owner_id (str): Owning user's id

    Returns:
        list: Reminder dictionaries
    """
    session = get_db_session()
    try:
        stmt = (
            select(Reminder)
            .where(Reminder.user_id == owner_id)
            .order_by(Reminder.created_at.asc(), Reminder.reminder_id.asc())
        )
        reminders = [reminder_to_dict(r) for r in session.execute(stmt).scalars().all()]
        return sorted(reminders, key=sort_key)
    finally:
        session.close()
