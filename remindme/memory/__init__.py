"""
REMINDME Memory - In-Memory Reminder Collection

Reminders live only as long as the running process.
"""

from .reminder_models import (
    Reminder,
    ReminderError,
    ReminderValidationError,
    ReminderNotFoundError,
    ReminderIndexError,
)
from .reminder_collection import ReminderCollection, TextMatcher

__all__ = [
    'Reminder',
    'ReminderError',
    'ReminderValidationError',
    'ReminderNotFoundError',
    'ReminderIndexError',
    'ReminderCollection',
    'TextMatcher',
]
