"""
Nudge Client

Long-running client that logs in to the tracker API, polls the user's
reminders once at start and then on a fixed period, and raises a local
notification summarizing upcoming deadlines.
"""

import time
import signal
import logging
import requests

from utils.dates import today_str
from webapp.services.notification_presenter import NotificationCapability, daily_nudge

logger = logging.getLogger(__name__)

REQUEST_TIMEOUT = 10


class TrackerClient:
    """Thin HTTP client for the tracker API."""

    def __init__(self, base_url, session=None):
        self.base_url = base_url.rstrip('/')
        self.session = session or requests.Session()
        self.token = None

    def _url(self, path):
        return f"{self.base_url}{path}"

    def _headers(self):
        return {'Authorization': f"Bearer {self.token}"} if self.token else {}

    def login(self, email, password):
        """
        Log in and keep the token for later calls.

        Returns:
            dict: The logged-in user

        Raises:
            requests.HTTPError: If the server rejects the credentials
        """
        response = self.session.post(
            self._url('/api/auth/login'),
            json={'email': email, 'password': password},
            timeout=REQUEST_TIMEOUT,
        )
        response.raise_for_status()
        data = response.json()
        self.token = data['token']
        return data['user']

    def reminders(self):
        """Fetch the caller's reminders."""
        response = self.session.get(
            self._url('/api/reminders'),
            headers=self._headers(),
            timeout=REQUEST_TIMEOUT,
        )
        response.raise_for_status()
        return response.json()['reminders']


class NudgePoller:
    """
    Polls reminders and presents the daily nudge.

    Args:
        client (TrackerClient): Logged-in API client
        capability (NotificationCapability): Where notifications are shown
        timezone (str): pytz timezone name used to compute today
    """

    def __init__(self, client, capability, timezone='UTC'):
        self.client = client
        self.capability = capability
        self.timezone = timezone
        self.running = True

    def poll(self):
        """
        Run one poll.

        Transient fetch failures are reported as a warning and not retried;
        the next scheduled poll tries again.

        Returns:
            dict or None: The notification shown, if any
        """
        try:
            reminders = self.client.reminders()
        except requests.RequestException as e:
            logger.warning(f"Could not load reminders: {e}")
            return None

        notification = daily_nudge(reminders, today_str(self.timezone))
        if notification:
            self.capability.notify(notification['title'], notification['body'])
        return notification

    def stop(self, signum=None, frame=None):
        """Handle shutdown signals gracefully."""
        logger.info("Received shutdown signal. Stopping gracefully...")
        self.running = False

    def run_forever(self, interval_minutes=60):
        """
        Poll now, then every interval until stopped.
        """
        signal.signal(signal.SIGINT, self.stop)
        signal.signal(signal.SIGTERM, self.stop)

        logger.info(f"Starting nudge client (every {interval_minutes} minutes)")
        try:
            while self.running:
                self.poll()
                # Check every second if we should stop (allows responsive shutdown)
                for _ in range(interval_minutes * 60):
                    if not self.running:
                        break
                    time.sleep(1)
        finally:
            logger.info("Nudge client stopped")


def console_capability():
    """Capability that prints notifications to the terminal."""
    def display(title, body):
        print(f"🔔 {title}: {body}")
    return NotificationCapability(display=display, consent=lambda: True)
