"""
REMINDME Reminder Logger - Console rendering

Everything the user sees on screen goes through here.
Diagnostics go through the logging module instead.
"""

from typing import TYPE_CHECKING, Dict, List

if TYPE_CHECKING:
    from remindme.memory import Reminder

MENU_ITEMS = [
    ("1", "Show all reminders"),
    ("2", "Search reminders"),
    ("3", "Add a reminder"),
    ("4", "Modify a reminder"),
    ("5", "Toggle completion"),
    ("6", "Exit"),
]

DIVIDER = "=" * 50


class ReminderLogger:
    """Stateless console renderer for messages, menus and reminders"""

    @staticmethod
    def log(message: str):
        print(message)

    @staticmethod
    def log_menu():
        print("\n" + DIVIDER)
        print("  📋  REMINDERS MENU")
        print(DIVIDER)
        for number, label in MENU_ITEMS:
            print(f"  [{number}] {label}")
        print(DIVIDER)

    @staticmethod
    def format_reminder(reminder: "Reminder", position: int) -> str:
        """
        Format one reminder as a single line.

        Args:
            reminder: Reminder to format
            position: One-based number shown to the user

        Returns:
            e.g. "  2. [✓] Buy milk  #shopping"
        """
        mark = "✓" if reminder.is_completed else " "
        return f"  {position}. [{mark}] {reminder.description}  #{reminder.tag}"

    @staticmethod
    def log_reminders(reminders: List["Reminder"]):
        """Print a numbered list, numbers matching the one-based index users type"""
        print()
        for position, reminder in enumerate(reminders, start=1):
            print(ReminderLogger.format_reminder(reminder, position))

    @staticmethod
    def log_grouped_reminders(groups: Dict[str, List["Reminder"]]):
        print()
        for tag, reminders in groups.items():
            print(f"  🏷️  {tag.upper()} ({len(reminders)})")
            for position, reminder in enumerate(reminders, start=1):
                print("  " + ReminderLogger.format_reminder(reminder, position))
            print()

    @staticmethod
    def log_search_results(results: List["Reminder"]):
        if not results:
            print("\n  🔍  No reminders found")
            return
        print(f"\n  🔍  Found {len(results)} reminder(s):")
        ReminderLogger.log_reminders(results)
