"""Tests for the nudge decision and the notification capability."""

from unittest import mock

import pytest

from webapp.services.notification_presenter import (
    DENIED, GRANTED, UNDETERMINED, UNSUPPORTED,
    NotificationCapability, daily_nudge, summarize, upcoming,
)


def _reminder(date, title="r"):
    return {'title': title, 'date': date, 'time': None}


def test_upcoming_includes_today_and_excludes_yesterday():
    reminders = [_reminder("2025-05-31", "yesterday"),
                 _reminder("2025-06-01", "today"),
                 _reminder("2025-06-20", "later")]

    titles = [r['title'] for r in upcoming(reminders, "2025-06-01")]

    assert titles == ["today", "later"]


@pytest.mark.parametrize("count,expected", [
    (1, "You have 1 upcoming deadline. Stay on it!"),
    (2, "You have 2 upcoming deadlines. Stay on it!"),
    (11, "You have 11 upcoming deadlines. Stay on it!"),
])
def test_summarize_pluralizes(count, expected):
    assert summarize(count) == expected


def test_daily_nudge_is_one_summary():
    reminders = [_reminder("2025-06-01"), _reminder("2025-06-02"), _reminder("2025-01-01")]

    assert daily_nudge(reminders, "2025-06-01") == {
        'title': "Daily Reminder",
        'body': "You have 2 upcoming deadlines. Stay on it!",
    }


def test_daily_nudge_nothing_upcoming():
    assert daily_nudge([_reminder("2025-01-01")], "2025-06-01") is None
    assert daily_nudge([], "2025-06-01") is None


def test_capability_without_display_is_unsupported():
    capability = NotificationCapability()

    assert capability.state == UNSUPPORTED
    assert capability.request_permission() == UNSUPPORTED
    assert capability.notify("t", "b") is False


def test_notify_asks_for_consent_once():
    display = mock.Mock()
    consent = mock.Mock(return_value=True)
    capability = NotificationCapability(display=display, consent=consent)
    assert capability.state == UNDETERMINED

    assert capability.notify("Daily Reminder", "body") is True
    assert capability.notify("Daily Reminder", "again") is True

    assert capability.state == GRANTED
    consent.assert_called_once_with()
    assert display.call_count == 2


def test_denied_consent_blocks_display():
    display = mock.Mock()
    capability = NotificationCapability(display=display, consent=lambda: False)

    assert capability.notify("t", "b") is False
    assert capability.state == DENIED
    assert capability.request_permission() == DENIED
    display.assert_not_called()


def test_failing_consent_prompt_counts_as_denied():
    capability = NotificationCapability(display=mock.Mock(), consent=mock.Mock(side_effect=OSError))

    assert capability.request_permission() == DENIED


def test_display_failure_is_best_effort():
    display = mock.Mock(side_effect=RuntimeError("no display"))
    capability = NotificationCapability(display=display, state=GRANTED)

    assert capability.notify("t", "b") is False
