"""
REMINDME Validators - Raw line-input checks for the CLI

Pure functions only. No printing, no prompting.
"""

import re
from typing import TYPE_CHECKING, Optional, Pattern, Tuple, Union

if TYPE_CHECKING:
    from remindme.memory import ReminderCollection

INDEX_PATTERN = re.compile(r"^\d+$")
YES_NO_PATTERN = re.compile(r"^[YNyn]$")
MENU_CHOICES = ("1", "2", "3", "4", "5", "6")

BLANK_INPUT_MESSAGE = "\n  🚨  Input cannot be blank: Please try again.\n"
INDEX_NOT_IN_LIST_MESSAGE = "\n  🚨  Input must be number from the list of reminders: Please try again.\n"
INDEX_NOT_NUMBER_MESSAGE = "\n  🚨  Input must be positive number from the list of reminders: Please try again.\n"


def matches(pattern: Union[str, Pattern], text: str) -> bool:
    """True if text matches the regex pattern"""
    return re.search(pattern, text) is not None


def validate_input(
    text: str,
    is_index_required: bool,
    collection: "ReminderCollection"
) -> Tuple[bool, Optional[str]]:
    """
    Validate a line typed for a menu prompt.

    Args:
        text: The line the user entered
        is_index_required: True when the prompt asks for a one-based
                           reminder number (modify / toggle)
        collection: Collection the number must point into

    Returns:
        (True, None) if valid, otherwise (False, message for the user)
    """
    if not text:
        return False, BLANK_INPUT_MESSAGE

    if is_index_required:
        if not matches(INDEX_PATTERN, text):
            return False, INDEX_NOT_NUMBER_MESSAGE
        if not collection.is_index_valid(int(text) - 1):
            return False, INDEX_NOT_IN_LIST_MESSAGE

    return True, None


def is_yes_no(text: str) -> bool:
    return matches(YES_NO_PATTERN, text)


def is_menu_item(text: str) -> bool:
    return text in MENU_CHOICES
