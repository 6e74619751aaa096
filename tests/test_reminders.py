"""
Tests for REMINDME Reminder Collection

Tests the in-memory reminder functionality including:
- Reminder validation and completion toggling
- Index validation (zero-based) and positional updates (one-based)
- Two-phase search (exact tag, then fuzzy description)
- Case-insensitive grouping by tag
"""

import sys
from pathlib import Path

import pytest

# Add parent to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from remindme.memory import (
    Reminder,
    ReminderCollection,
    ReminderError,
    ReminderIndexError,
    ReminderNotFoundError,
    ReminderValidationError,
)


class RecordingMatcher:
    """Matcher stand-in that records calls and returns fixed texts"""

    def __init__(self, result=None):
        self.result = result or []
        self.calls = []

    def match(self, corpus, query):
        self.calls.append((list(corpus), query))
        return list(self.result)


# ============================================================================
# TEST: Reminder
# ============================================================================

def test_reminder_creation():
    """New reminders start incomplete and keep their fields"""
    reminder = Reminder("Buy milk", "shopping")

    assert reminder.description == "Buy milk"
    assert reminder.tag == "shopping"
    assert reminder.is_completed is False


def test_reminder_setters_round_trip():
    reminder = Reminder("Buy milk", "shopping")

    reminder.description = "Buy oat milk"
    reminder.tag = "Groceries"

    assert reminder.description == "Buy oat milk"
    assert reminder.tag == "Groceries"


@pytest.mark.parametrize("value", ["", None])
def test_reminder_setters_reject_empty(value):
    reminder = Reminder("Buy milk", "shopping")

    with pytest.raises(ReminderValidationError, match="Description cannot be empty"):
        reminder.description = value
    with pytest.raises(ReminderValidationError, match="Tag cannot be empty"):
        reminder.tag = value

    # Failed writes leave the reminder untouched
    assert reminder.description == "Buy milk"
    assert reminder.tag == "shopping"


def test_reminder_constructor_rejects_empty():
    with pytest.raises(ReminderValidationError):
        Reminder("", "shopping")
    with pytest.raises(ReminderValidationError):
        Reminder("Buy milk", "")


def test_validation_error_is_value_error():
    """Callers catching ValueError still see validation failures"""
    with pytest.raises(ValueError):
        Reminder("", "shopping")


def test_toggle_completion_is_own_inverse():
    reminder = Reminder("Buy milk", "shopping")

    reminder.toggle_completion()
    assert reminder.is_completed is True

    reminder.toggle_completion()
    assert reminder.is_completed is False


def test_is_completed_is_read_only():
    reminder = Reminder("Buy milk", "shopping")

    with pytest.raises(AttributeError):
        reminder.is_completed = True


# ============================================================================
# TEST: Collection basics
# ============================================================================

def test_add_and_get_reminder():
    collection = ReminderCollection()
    collection.add_reminder("Buy milk", "shopping")
    collection.add_reminder("Buy milk", "shopping")

    assert collection.size() == 2
    assert len(collection) == 2
    assert collection.get_reminder(0).description == "Buy milk"
    assert collection.get_reminder(1) is not collection.get_reminder(0)


def test_add_reminder_rejects_empty():
    collection = ReminderCollection()

    with pytest.raises(ReminderValidationError):
        collection.add_reminder("", "shopping")
    assert collection.size() == 0


def test_reminders_property_is_a_copy():
    collection = ReminderCollection()
    collection.add_reminder("Buy milk", "shopping")

    snapshot = collection.reminders
    snapshot.clear()

    assert collection.size() == 1
    assert [r.description for r in collection] == ["Buy milk"]


@pytest.mark.parametrize("index", [-1, 1, 5])
def test_get_reminder_missing_raises(index):
    collection = ReminderCollection()
    collection.add_reminder("Buy milk", "shopping")

    with pytest.raises(ReminderNotFoundError):
        collection.get_reminder(index)


def test_get_reminder_on_empty_collection():
    with pytest.raises(ReminderNotFoundError):
        ReminderCollection().get_reminder(0)


@pytest.mark.parametrize("size", [0, 1, 3])
def test_is_index_valid(size):
    collection = ReminderCollection()
    for i in range(size):
        collection.add_reminder(f"Task {i}", "work")

    assert collection.is_index_valid(-1) is False
    assert collection.is_index_valid(size) is False
    assert collection.is_index_valid(size + 1) is False
    for i in range(size):
        assert collection.is_index_valid(i) is True


# ============================================================================
# TEST: One-based modify / toggle
# ============================================================================

def test_modify_reminder_is_one_based():
    collection = ReminderCollection()
    collection.add_reminder("Old text", "work")

    collection.modify_reminder(1, "New text")

    assert collection.get_reminder(0).description == "New text"


def test_modify_reminder_targets_correct_position():
    collection = ReminderCollection()
    collection.add_reminder("First", "work")
    collection.add_reminder("Second", "work")

    collection.modify_reminder(2, "Second, edited")

    assert collection.get_reminder(0).description == "First"
    assert collection.get_reminder(1).description == "Second, edited"


@pytest.mark.parametrize("index", [0, 2, -1])
def test_modify_reminder_out_of_range(index):
    collection = ReminderCollection()
    collection.add_reminder("Only", "work")

    with pytest.raises(ReminderIndexError):
        collection.modify_reminder(index, "New text")
    assert collection.get_reminder(0).description == "Only"


def test_modify_reminder_rejects_empty_description():
    collection = ReminderCollection()
    collection.add_reminder("Only", "work")

    with pytest.raises(ReminderValidationError):
        collection.modify_reminder(1, "")


def test_toggle_completion_is_one_based():
    collection = ReminderCollection()
    collection.add_reminder("First", "work")
    collection.add_reminder("Second", "work")

    collection.toggle_completion(2)

    assert collection.get_reminder(0).is_completed is False
    assert collection.get_reminder(1).is_completed is True

    collection.toggle_completion(2)
    assert collection.get_reminder(1).is_completed is False


def test_toggle_completion_out_of_range():
    collection = ReminderCollection()

    with pytest.raises(ReminderIndexError):
        collection.toggle_completion(1)


def test_index_error_hierarchy():
    """Index failures are both ReminderError and IndexError"""
    collection = ReminderCollection()

    with pytest.raises(IndexError):
        collection.toggle_completion(0)
    with pytest.raises(ReminderError):
        collection.modify_reminder(3, "x")


# ============================================================================
# TEST: Search
# ============================================================================

def test_search_empty_collection():
    assert ReminderCollection().search("anything") == []


def test_search_exact_tag_in_insertion_order():
    collection = ReminderCollection()
    collection.add_reminder("Buy milk", "shopping")
    collection.add_reminder("Call mom", "family")
    collection.add_reminder("Buy eggs", "shopping")

    results = collection.search("shopping")

    assert [r.description for r in results] == ["Buy milk", "Buy eggs"]


def test_search_falls_back_to_description():
    collection = ReminderCollection()
    collection.add_reminder("Call mom", "family")
    collection.add_reminder("Buy milk", "shopping")

    results = collection.search("mom")

    assert [r.description for r in results] == ["Call mom"]


def test_search_tag_match_is_case_sensitive():
    """A tag that differs only in case is not an exact match"""
    collection = ReminderCollection()
    collection.add_reminder("Buy milk", "shopping")
    collection.add_reminder("Shopping list review", "errands")

    results = collection.search("Shopping")

    assert [r.description for r in results] == ["Shopping list review"]


def test_search_description_is_case_insensitive():
    collection = ReminderCollection()
    collection.add_reminder("Buy MILK", "errands")

    results = collection.search("milk")

    assert [r.description for r in results] == ["Buy MILK"]


def test_search_no_match():
    collection = ReminderCollection()
    collection.add_reminder("Buy milk", "shopping")

    assert collection.search("zzzz") == []


def test_search_skips_fuzzy_when_tag_matches():
    matcher = RecordingMatcher(result=["Call mom"])
    collection = ReminderCollection(matcher=matcher)
    collection.add_reminder("Call mom", "family")
    collection.add_reminder("Buy milk", "shopping")

    results = collection.search("shopping")

    assert [r.description for r in results] == ["Buy milk"]
    assert matcher.calls == []


def test_search_uses_injected_matcher():
    matcher = RecordingMatcher(result=["Buy milk"])
    collection = ReminderCollection(matcher=matcher)
    collection.add_reminder("Call mom", "family")
    collection.add_reminder("Buy milk", "shopping")
    collection.add_reminder("Buy milk", "errands")

    results = collection.search("anything")

    assert matcher.calls == [(["Call mom", "Buy milk", "Buy milk"], "anything")]
    # Every reminder with a matched description is returned
    assert [r.tag for r in results] == ["shopping", "errands"]


# ============================================================================
# TEST: Grouping
# ============================================================================

def test_group_by_tag_ignores_case():
    collection = ReminderCollection()
    collection.add_reminder("Write report", "Work")
    collection.add_reminder("Email boss", "work")

    groups = collection.group_by_tag()

    assert list(groups.keys()) == ["work"]
    assert [r.description for r in groups["work"]] == ["Write report", "Email boss"]


def test_group_by_tag_keeps_first_seen_order():
    collection = ReminderCollection()
    collection.add_reminder("Buy milk", "shopping")
    collection.add_reminder("Call mom", "family")
    collection.add_reminder("Buy eggs", "Shopping")

    groups = collection.group_by_tag()

    assert list(groups.keys()) == ["shopping", "family"]
    assert len(groups["shopping"]) == 2
    assert len(groups["family"]) == 1


def test_group_by_tag_empty():
    assert ReminderCollection().group_by_tag() == {}


def test_group_by_tag_reflects_tag_changes():
    collection = ReminderCollection()
    collection.add_reminder("Buy milk", "shopping")
    collection.get_reminder(0).tag = "Errands"

    assert list(collection.group_by_tag().keys()) == ["errands"]


def test_search_symbol_only_keyword_finds_nothing():
    collection = ReminderCollection()
    collection.add_reminder("Buy milk", "shopping")
    collection.add_reminder("???", "misc")

    assert collection.search("!!!") == []
    # An exact tag match still wins, whatever the characters
    assert [r.description for r in collection.search("misc")] == ["???"]
