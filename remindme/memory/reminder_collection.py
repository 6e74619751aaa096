"""
REMINDME Reminder Collection

In-memory, ordered list of reminders.

Design:
- Insertion order is preserved, duplicates are allowed
- No persistence: the collection lives as long as the process
- Failures are raised immediately, never retried or ignored

Indexing (kept per operation, callers convert as needed):
- get_reminder / is_index_valid     -> zero-based
- modify_reminder / toggle_completion -> one-based (as shown to users)
"""

import logging
from typing import Dict, Iterator, List, Optional, Protocol, Sequence

from remindme.tools.fuzzy_search import FuzzySearcher
from .reminder_models import (
    Reminder,
    ReminderIndexError,
    ReminderNotFoundError,
)

logger = logging.getLogger(__name__)


class TextMatcher(Protocol):
    """Anything that can pick the texts in corpus matching query"""

    def match(self, corpus: Sequence[str], query: str) -> List[str]:
        ...


class ReminderCollection:
    """
    Manages the user's list of reminders.

    Search policy:
    1. Reminders whose tag equals the keyword exactly (case-sensitive)
    2. Only if (1) is empty: reminders whose description fuzzy-matches
       the keyword
    """

    def __init__(self, matcher: Optional[TextMatcher] = None):
        """
        Create an empty collection.

        Args:
            matcher: Object with match(corpus, query) used for description
                     search (default: FuzzySearcher())
        """
        self._reminders: List[Reminder] = []
        self._matcher: TextMatcher = matcher if matcher is not None else FuzzySearcher()

    @property
    def reminders(self) -> List[Reminder]:
        """Reminders added so far, in insertion order"""
        return list(self._reminders)

    def __len__(self) -> int:
        return len(self._reminders)

    def __iter__(self) -> Iterator[Reminder]:
        return iter(list(self._reminders))

    def add_reminder(self, description: str, tag: str):
        """
        Create a new reminder and append it.

        Args:
            description: The full description of the reminder
            tag: The keyword used to help categorize the reminder

        Raises:
            ReminderValidationError: If description or tag is empty
        """
        reminder = Reminder(description, tag)
        self._reminders.append(reminder)
        logger.info(f"Added reminder #{len(self._reminders)}: {description} [{tag}]")

    def get_reminder(self, index: int) -> Reminder:
        """
        Get the reminder at a zero-based index.

        Raises:
            ReminderNotFoundError: If no reminder exists at index
        """
        if not self.is_index_valid(index):
            logger.warning(f"No reminder at index {index} (size={self.size()})")
            raise ReminderNotFoundError("Reminder with this index does not exist.")
        return self._reminders[index]

    def is_index_valid(self, index: int) -> bool:
        """True if index is a valid zero-based position"""
        if self.size() == 0:
            return False
        if index < 0 or index >= self.size():
            return False
        return True

    def size(self) -> int:
        return len(self._reminders)

    def modify_reminder(self, index: int, description: str):
        """
        Replace the description of the reminder at a one-based index.

        Args:
            index: One-based position of the reminder
            description: New full description

        Raises:
            ReminderIndexError: If index is out of range
            ReminderValidationError: If description is empty
        """
        reminder = self._reminder_at_position(index)
        reminder.description = description
        logger.info(f"Modified reminder #{index}: {description}")

    def toggle_completion(self, index: int):
        """
        Toggle completion of the reminder at a one-based index.

        Raises:
            ReminderIndexError: If index is out of range
        """
        reminder = self._reminder_at_position(index)
        reminder.toggle_completion()
        logger.info(f"Toggled reminder #{index} (completed={reminder.is_completed})")

    def search(self, keyword: str) -> List[Reminder]:
        """
        Find reminders matching a keyword.

        All reminders with a tag equal to keyword are returned. If there
        are none, reminders whose description matches keyword (even
        partially) are returned instead.

        Args:
            keyword: Text to search for

        Returns:
            Matching reminders, in insertion order
        """
        results = self._search_tags(keyword)
        if not results:
            results = self._search_descriptions(keyword)
            logger.debug(f"Search {keyword!r}: {len(results)} description match(es)")
        else:
            logger.debug(f"Search {keyword!r}: {len(results)} tag match(es)")
        return results

    def group_by_tag(self) -> Dict[str, List[Reminder]]:
        """
        Group reminders by tag, ignoring case.

        Keys are lowercased tags in first-seen order; each group keeps
        insertion order.
        """
        groups: Dict[str, List[Reminder]] = {}
        for reminder in self._reminders:
            groups.setdefault(reminder.tag.lower(), []).append(reminder)
        return groups

    def _reminder_at_position(self, index: int) -> Reminder:
        # one-based -> zero-based
        if not self.is_index_valid(index - 1):
            logger.warning(f"Reminder position {index} out of range (size={self.size()})")
            raise ReminderIndexError(
                f"Reminder #{index} does not exist (valid: 1-{self.size()})"
            )
        return self._reminders[index - 1]

    def _search_tags(self, keyword: str) -> List[Reminder]:
        return [r for r in self._reminders if r.tag == keyword]

    def _search_descriptions(self, keyword: str) -> List[Reminder]:
        descriptions = [r.description for r in self._reminders]
        matched = set(self._matcher.match(descriptions, keyword))
        return [r for r in self._reminders if r.description in matched]
