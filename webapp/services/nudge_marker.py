"""
Daily Nudge Marker

Periodic sweep that records, per reminder, the calendar days on which the
user has already been accounted for. A reminder is stamped with today's date
at most once, and only while its deadline has not passed. The sweep does not
deliver notifications itself.
"""

import logging
from datetime import datetime
import pytz
from apscheduler.schedulers.background import BackgroundScheduler
from apscheduler.triggers.interval import IntervalTrigger
from sqlalchemy import select
from sqlalchemy.exc import IntegrityError

from config.database import get_db_session
from config.models import Reminder, ReminderNotifiedDay
from utils.dates import today_str, is_day
from webapp.errors import ValidationError

logger = logging.getLogger(__name__)

SWEEP_JOB_ID = "daily_nudge_sweep"


def run_nudge_sweep(today=None, timezone='UTC'):
    """
    Stamp today's date on every reminder that is still due.

    Running it again on the same day changes nothing.

    Args:
        today (str, optional): Day to record in YYYY-MM-DD format; defaults to today
        timezone (str): pytz timezone name used to compute today

    Returns:
        int: Number of reminders newly marked

    Raises:
        ValidationError: If today is not a YYYY-MM-DD day
    """
    if today is None:
        today = today_str(timezone)
    if not is_day(today):
        raise ValidationError(f"Invalid day: {today}. Expected YYYY-MM-DD")

    session = get_db_session()
    try:
        # Lexical comparison is correct for YYYY-MM-DD strings
        stmt = select(Reminder).where(Reminder.date >= today)
        reminders = session.execute(stmt).scalars().all()

        marked = 0
        for reminder in reminders:
            if any(marker.day == today for marker in reminder.notified_days):
                continue
            reminder.notified_days.append(ReminderNotifiedDay(day=today))
            marked += 1

        session.commit()
        if marked:
            logger.info(f"Nudge sweep for {today}: marked {marked} reminders")
        else:
            logger.debug(f"Nudge sweep for {today}: nothing to mark")
        return marked
    except IntegrityError:
        # Another sweep committed the same markers first
        session.rollback()
        logger.info(f"Nudge sweep for {today}: already marked by a concurrent sweep")
        return 0
    except Exception:
        session.rollback()
        raise
    finally:
        session.close()


def _scheduled_sweep(timezone):
    # A failed tick must not stop the schedule; the next tick retries.
    try:
        run_nudge_sweep(timezone=timezone)
    except Exception as e:
        logger.error(f"Error in nudge sweep: {e}", exc_info=True)


def start_nudge_scheduler(interval_minutes=15, timezone='UTC'):
    """
    Start the background scheduler that runs the sweep periodically.

    The first sweep runs immediately.

    Args:
        interval_minutes (int): Minutes between sweeps
        timezone (str): pytz timezone name used to compute today

    Returns:
        BackgroundScheduler: The running scheduler
    """
    scheduler = BackgroundScheduler(
        timezone=timezone,
        job_defaults={
            "coalesce": True,
            "max_instances": 1,
            "misfire_grace_time": 60,
        },
    )
    scheduler.add_job(
        _scheduled_sweep,
        IntervalTrigger(minutes=interval_minutes, timezone=timezone),
        id=SWEEP_JOB_ID,
        kwargs={'timezone': timezone},
        next_run_time=datetime.now(pytz.timezone(timezone)),
        replace_existing=True,
    )
    scheduler.start()
    logger.info(f"Nudge sweep scheduled every {interval_minutes} minutes ({timezone})")
    return scheduler
