"""
REMINDME Core - Interactive menu loop and input validation
"""

from .reminder_app import ReminderApp
from .validators import (
    matches,
    validate_input,
    is_yes_no,
    is_menu_item
)

__all__ = [
    # Reminder App
    'ReminderApp',
    # Validators
    'matches',
    'validate_input',
    'is_yes_no',
    'is_menu_item',
]
