"""
Notification Presenter

Decides what to tell the user about their reminders and shows it through a
notification capability. The decision is a pure function of the reminder
list and today's date, so the server and the poller client compute it the
same way.
"""

import logging

logger = logging.getLogger(__name__)

DAILY_NUDGE_TITLE = "Daily Reminder"

UNSUPPORTED = "unsupported"
UNDETERMINED = "undetermined"
GRANTED = "granted"
DENIED = "denied"


def upcoming(reminders, today):
    """
    Filter reminders due today or later.

    Args:
        reminders (list): Reminder dictionaries
        today (str): Today's date in YYYY-MM-DD format

    Returns:
        list: Reminders whose date is on or after today
    """
    return [reminder for reminder in reminders if reminder['date'] >= today]


def summarize(count):
    """Notification body for a number of upcoming deadlines."""
    plural = 's' if count > 1 else ''
    return f"You have {count} upcoming deadline{plural}. Stay on it!"


def daily_nudge(reminders, today):
    """
    Build the single summary notification for a poll.

    Returns:
        dict or None: {'title', 'body'} when something is upcoming, else None
    """
    count = len(upcoming(reminders, today))
    if count == 0:
        return None
    return {'title': DAILY_NUDGE_TITLE, 'body': summarize(count)}


class NotificationCapability:
    """
    Permission-gated notification display.

    States are unsupported, undetermined, granted and denied. Only
    undetermined can change, and only through ``request_permission``.

    Args:
        display: Callable ``display(title, body)``; None means unsupported
        consent: Callable returning True when the user allows notifications
        state: Initial state; defaults to undetermined when display is given
    """

    def __init__(self, display=None, consent=None, state=None):
        self.display = display
        self.consent = consent
        if display is None:
            self.state = UNSUPPORTED
        else:
            self.state = state or UNDETERMINED

    def request_permission(self):
        """Ask for consent once. Returns the resulting state."""
        if self.state != UNDETERMINED:
            return self.state
        try:
            allowed = bool(self.consent()) if self.consent else False
        except Exception as e:
            logger.warning(f"Notification permission prompt failed: {e}")
            allowed = False
        self.state = GRANTED if allowed else DENIED
        logger.info(f"Notification permission {self.state}")
        return self.state

    def notify(self, title, body):
        """
        Show a notification if allowed. Best effort: never raises.

        Returns:
            bool: True if the notification was displayed
        """
        if self.state == UNSUPPORTED:
            return False
        if self.state == UNDETERMINED:
            self.request_permission()
        if self.state != GRANTED:
            return False
        try:
            self.display(title, body)
            return True
        except Exception as e:
            logger.warning(f"Could not display notification '{title}': {e}")
            return False
