"""
REMINDME Start - Main Entry Point

Runs the interactive reminder menu:
1. Show reminders (grouped by tag)
2. Search reminders
3. Add a reminder
4. Modify a reminder
5. Toggle completion
6. Exit

Reminders are kept in memory only and are lost on exit.
"""

import logging

from remindme import config
from remindme.core import ReminderApp
from remindme.memory import ReminderCollection

logger = logging.getLogger(__name__)


# ============================================================================
# MAIN
# ============================================================================

def main() -> int:
    """
    Main REMINDME entry point.

    Returns:
        Process exit code
    """
    config.configure_logging()

    print("=" * 50)
    print("REMINDME - Command-Line Reminders")
    print("=" * 50)

    try:
        app = ReminderApp(ReminderCollection())
        logger.info("REMINDME initialized")
        app.start()
    except KeyboardInterrupt:
        print("\n\nInterrupted. Goodbye!")
    except Exception as e:
        logger.error(f"Fatal error: {e}", exc_info=True)
        print(f"\n❌ Error: {e}")
        return 1

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
