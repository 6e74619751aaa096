"""
REMINDME Reminder Models

Data structures for the in-memory reminder manager.

Philosophy:
- A reminder is a short description plus one tag
- Completion is a flag the user flips, nothing more
- Validation happens on every write, including construction
"""

import logging

logger = logging.getLogger(__name__)


class ReminderError(Exception):
    """Base exception for reminder errors"""
    pass


class ReminderValidationError(ReminderError, ValueError):
    """Raised when a reminder field is set to an empty value"""
    pass


class ReminderNotFoundError(ReminderError, LookupError):
    """Raised when no reminder exists at a requested position"""
    pass


class ReminderIndexError(ReminderError, IndexError):
    """Raised when a one-based reminder position is out of range"""
    pass


class Reminder:
    """
    A single reminder entered by the user.

    Fields:
    - description: full text of the reminder (non-empty)
    - tag: keyword used to categorize the reminder (non-empty)
    - is_completed: read-only flag, changed only by toggle_completion()
    """

    def __init__(self, description: str, tag: str):
        """
        Create a new, incomplete reminder.

        Args:
            description: The full description of the reminder
            tag: The keyword used to help categorize the reminder

        Raises:
            ReminderValidationError: If description or tag is empty
        """
        self.description = description
        self.tag = tag
        self._is_completed = False

    @property
    def description(self) -> str:
        return self._description

    @description.setter
    def description(self, description: str):
        if not description:
            logger.warning("Rejected empty reminder description")
            raise ReminderValidationError("Description cannot be empty")
        self._description = description

    @property
    def tag(self) -> str:
        return self._tag

    @tag.setter
    def tag(self, tag: str):
        if not tag:
            logger.warning("Rejected empty reminder tag")
            raise ReminderValidationError("Tag cannot be empty")
        self._tag = tag

    @property
    def is_completed(self) -> bool:
        """True if the reminder has been completed"""
        return self._is_completed

    def toggle_completion(self):
        """Flip completion status: True <-> False"""
        self._is_completed = not self._is_completed

    def __repr__(self) -> str:
        return (
            f"Reminder(description={self._description!r}, tag={self._tag!r}, "
            f"is_completed={self._is_completed})"
        )
