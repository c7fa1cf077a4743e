"""
Utility modules for the deadline tracker.
"""

from .dates import today_str, is_day, is_time_of_day, format_display_date

__all__ = ['today_str', 'is_day', 'is_time_of_day', 'format_display_date']
