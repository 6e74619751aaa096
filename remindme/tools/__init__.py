"""
REMINDME Tools - Console rendering and fuzzy matching helpers
"""

from .fuzzy_search import FuzzySearcher, fuzzy_match
from .reminder_logger import ReminderLogger

__all__ = [
    'FuzzySearcher',
    'fuzzy_match',
    'ReminderLogger',
]
