"""Tests for reminder creation, ownership and ordering."""

import pytest

from config.database import get_db_session
from config.models import Reminder
from webapp.errors import ValidationError
from webapp.services import reminder_store


def test_create_starts_with_no_notified_days(db):
    reminder = reminder_store.create("owner-a", "Essay", "2025-06-01")

    assert reminder['title'] == "Essay"
    assert reminder['date'] == "2025-06-01"
    assert reminder['time'] is None
    assert reminder['userId'] == "owner-a"
    assert reminder['notifiedDays'] == []


@pytest.mark.parametrize("title,date", [
    ("", "2025-06-01"),
    (None, "2025-06-01"),
    ("Essay", ""),
    ("Essay", None),
])
def test_create_requires_title_and_date(db, title, date):
    with pytest.raises(ValidationError):
        reminder_store.create("owner-a", title, date)


@pytest.mark.parametrize("date,time", [
    ("2025-6-1", None),
    ("01/06/2025", None),
    ("2025-02-30", None),
    ("2025-06-01", "9:30"),
    ("2025-06-01", "25:00"),
])
def test_create_rejects_malformed_date_or_time(db, date, time):
    with pytest.raises(ValidationError):
        reminder_store.create("owner-a", "Essay", date, time)


def test_blank_time_is_treated_as_absent(db):
    reminder = reminder_store.create("owner-a", "Essay", "2025-06-01", "  ")

    assert reminder['time'] is None


def test_list_for_only_returns_owned_reminders(db):
    mine = reminder_store.create("owner-a", "Essay", "2025-06-01")
    reminder_store.create("owner-b", "Lab report", "2025-06-02")

    listed = reminder_store.list_for("owner-a")

    assert [r['id'] for r in listed] == [mine['id']]
    assert reminder_store.list_for("nobody") == []


def test_list_for_sorts_by_date_then_time(db):
    reminder_store.create("owner-a", "late", "2025-06-02", "08:00")
    reminder_store.create("owner-a", "timed", "2025-06-01", "09:30")
    reminder_store.create("owner-a", "untimed", "2025-06-01")
    reminder_store.create("owner-a", "early", "2025-06-01", "07:15")

    titles = [r['title'] for r in reminder_store.list_for("owner-a")]

    assert titles == ["untimed", "early", "timed", "late"]


def test_list_for_keeps_creation_order_on_ties(db):
    for title in ("first", "second", "third"):
        reminder_store.create("owner-a", title, "2025-06-01", "10:00")

    titles = [r['title'] for r in reminder_store.list_for("owner-a")]

    assert titles == ["first", "second", "third"]


def test_interleaved_writers_do_not_lose_updates(db):
    # Two writers that both started before either committed
    first = get_db_session()
    second = get_db_session()
    try:
        first.add(Reminder(user_id="owner-a", title="one", date="2025-06-01"))
        second.add(Reminder(user_id="owner-a", title="two", date="2025-06-02"))
        first.commit()
        second.commit()
    finally:
        first.close()
        second.close()

    titles = [r['title'] for r in reminder_store.list_for("owner-a")]

    assert titles == ["one", "two"]
