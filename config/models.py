"""
SQLAlchemy ORM Models
"""

import uuid
from datetime import datetime, timezone
from sqlalchemy import Column, String, DateTime, ForeignKey, UniqueConstraint
from sqlalchemy.orm import relationship, declarative_base
from sqlalchemy.sql import func

Base = declarative_base()


def _utcnow():
    # Microsecond precision keeps creation order stable
    return datetime.now(timezone.utc).replace(tzinfo=None)


def _new_id():
    return str(uuid.uuid4())


class User(Base):
    __tablename__ = 'users'

    user_id = Column(String(36), primary_key=True, default=_new_id)
    name = Column(String, nullable=False)
    course = Column(String, nullable=False)
    college = Column(String, nullable=False)
    email = Column(String, unique=True, nullable=False)  # Lower-cased on write
    password_hash = Column(String, nullable=False)
    created_at = Column(DateTime, default=_utcnow)


class Reminder(Base):
    __tablename__ = 'reminders'

    reminder_id = Column(String(36), primary_key=True, default=_new_id)
    # Plain back-reference: no cascade from users
    user_id = Column(String(36), nullable=False, index=True)
    title = Column(String, nullable=False)
    date = Column(String(10), nullable=False)  # YYYY-MM-DD, compared lexically
    time = Column(String(5))  # HH:MM or NULL
    created_at = Column(DateTime, default=_utcnow)

    # Relationships
    notified_days = relationship(
        "ReminderNotifiedDay",
        back_populates="reminder",
        cascade="all, delete-orphan",
        order_by="ReminderNotifiedDay.day",
        lazy="selectin",
    )


class ReminderNotifiedDay(Base):
    __tablename__ = 'reminder_notified_days'
    __table_args__ = (UniqueConstraint('reminder_id', 'day', name='uq_reminder_day'),)

    marker_id = Column(String(36), primary_key=True, default=_new_id)
    reminder_id = Column(String(36), ForeignKey('reminders.reminder_id'), nullable=False)
    day = Column(String(10), nullable=False)
    recorded_at = Column(DateTime, server_default=func.now())

    # Relationships
    reminder = relationship("Reminder", back_populates="notified_days")
