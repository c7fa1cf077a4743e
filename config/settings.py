"""
Configuration Management

Loads application settings from environment variables (and an optional
.env file) and provides the defaults used by the web app, the nudge sweep
and the poller client.
"""

import os
import logging
from pathlib import Path
from dotenv import load_dotenv

load_dotenv()

logger = logging.getLogger(__name__)

BASE_DIR = Path(__file__).parent.parent
DATA_DIR = BASE_DIR / "data"

INSECURE_DEFAULT_SECRET = "dev-secret-change-me"


def _env_bool(name, default):
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in ("1", "true", "yes", "on")


def load_settings():
    """
    Read settings from the environment.

    Returns:
        dict: Settings keyed by their Flask config names
    """
    secret = os.getenv("JWT_SECRET")
    insecure = not secret
    if insecure:
        secret = INSECURE_DEFAULT_SECRET

    return {
        'JWT_SECRET': secret,
        'INSECURE_SECRET': insecure,
        'DATABASE_URL': os.getenv("DATABASE_URL", f"sqlite:///{DATA_DIR / 'deadline_tracker.db'}"),
        'TRACKER_TIMEZONE': os.getenv("TRACKER_TIMEZONE", "UTC"),
        'TOKEN_TTL_DAYS': int(os.getenv("TOKEN_TTL_DAYS", "7")),
        'NUDGE_SWEEP_ENABLED': _env_bool("NUDGE_SWEEP_ENABLED", True),
        'NUDGE_SWEEP_MINUTES': int(os.getenv("NUDGE_SWEEP_MINUTES", "15")),
        'TRACKER_API_URL': os.getenv("TRACKER_API_URL", "http://localhost:5000"),
        'NUDGE_POLL_MINUTES': int(os.getenv("NUDGE_POLL_MINUTES", "60")),
    }
