"""Tests for settings loading and app configuration."""

import logging

import pytest

from config.settings import INSECURE_DEFAULT_SECRET, load_settings
from webapp.app import create_app


def test_defaults(monkeypatch):
    for name in ("JWT_SECRET", "TRACKER_TIMEZONE", "NUDGE_SWEEP_MINUTES", "TOKEN_TTL_DAYS", "NUDGE_SWEEP_ENABLED"):
        monkeypatch.delenv(name, raising=False)

    settings = load_settings()

    assert settings['TRACKER_TIMEZONE'] == "UTC"
    assert settings['NUDGE_SWEEP_MINUTES'] == 15
    assert settings['TOKEN_TTL_DAYS'] == 7
    assert settings['NUDGE_SWEEP_ENABLED'] is True


def test_environment_overrides(monkeypatch):
    monkeypatch.setenv("JWT_SECRET", "from-env")
    monkeypatch.setenv("NUDGE_SWEEP_ENABLED", "false")
    monkeypatch.setenv("TRACKER_TIMEZONE", "America/Denver")

    settings = load_settings()

    assert settings['JWT_SECRET'] == "from-env"
    assert settings['INSECURE_SECRET'] is False
    assert settings['NUDGE_SWEEP_ENABLED'] is False
    assert settings['TRACKER_TIMEZONE'] == "America/Denver"


def test_missing_secret_falls_back_to_insecure_default(monkeypatch, database_url, caplog):
    # Known security gap: the app still starts without a configured secret
    monkeypatch.delenv("JWT_SECRET", raising=False)

    with caplog.at_level(logging.WARNING):
        app = create_app({'DATABASE_URL': database_url, 'NUDGE_SWEEP_ENABLED': False})

    assert app.config['INSECURE_SECRET'] is True
    assert app.config['JWT_SECRET'] == INSECURE_DEFAULT_SECRET
    assert "insecure default" in caplog.text


def test_explicit_secret_is_not_flagged(app):
    assert app.config['INSECURE_SECRET'] is False


def test_sweep_scheduler_started_when_enabled(database_url):
    app = create_app({'DATABASE_URL': database_url, 'JWT_SECRET': "config-secret-at-least-32-bytes-long", 'NUDGE_SWEEP_ENABLED': True})
    scheduler = app.extensions['nudge_scheduler']
    try:
        assert scheduler.running
    finally:
        scheduler.shutdown(wait=True)


@pytest.mark.parametrize("secret", ["", INSECURE_DEFAULT_SECRET])
def test_empty_or_default_secret_override_is_flagged(database_url, caplog, secret):
    with caplog.at_level(logging.WARNING):
        app = create_app({'DATABASE_URL': database_url, 'JWT_SECRET': secret, 'NUDGE_SWEEP_ENABLED': False})

    assert app.config['INSECURE_SECRET'] is True
    assert app.config['JWT_SECRET'] == INSECURE_DEFAULT_SECRET
    assert "insecure default" in caplog.text
