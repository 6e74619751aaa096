"""
REMINDME Reminder App - Interactive menu loop

Responsibilities:
- Show the main menu and read a menu choice
- Prompt for (and confirm) descriptions, tags, keywords and indices
- Delegate to ReminderCollection
- Render results with ReminderLogger

Indexing:
Users always see and type one-based numbers. The app converts to
zero-based only for ReminderCollection.is_index_valid(); modify and
toggle receive the one-based number unchanged.
"""

import logging
from typing import Callable, Optional

from remindme.memory import ReminderCollection, ReminderError
from remindme.tools.reminder_logger import ReminderLogger as Logger
from remindme.core.validators import is_menu_item, is_yes_no, validate_input

logger = logging.getLogger(__name__)

NO_REMINDERS_MESSAGE = "\n  ⚠️  You have no reminders"
INVALID_YES_NO_MESSAGE = "\n  🚨  Invalid input: Please enter either y/n.\n"
INVALID_MENU_ITEM_MESSAGE = "\n  🚨  Sorry, input is not a valid menu item.\n"

EXIT_CHOICE = "6"


class ReminderApp:
    """
    Menu-driven reminder manager.

    Menu:
    1. Show reminders (grouped by tag)
    2. Search reminders
    3. Add a reminder
    4. Modify a reminder
    5. Toggle completion
    6. Exit
    """

    def __init__(
        self,
        collection: Optional[ReminderCollection] = None,
        input_func: Callable[[str], str] = input
    ):
        """
        Initialize the app.

        Args:
            collection: Collection to manage (default: new empty collection)
            input_func: Line reader taking a prompt (default: input)
        """
        self._reminders = collection if collection is not None else ReminderCollection()
        self._input = input_func

        self._handlers = {
            "1": self.handle_show_reminders,
            "2": self.handle_search_reminders,
            "3": self.handle_add_reminder,
            "4": self.handle_modify_reminder,
            "5": self.handle_toggle_completion,
        }

        logger.info("ReminderApp initialized")

    @property
    def reminders(self) -> ReminderCollection:
        return self._reminders

    def start(self):
        """
        Run the menu loop until the user exits.

        End of input and Ctrl+C also end the loop.
        """
        try:
            while True:
                item = self._handle_menu_selection()
                if item == EXIT_CHOICE:
                    break
                self._dispatch(item)
        except (EOFError, KeyboardInterrupt):
            logger.info("Input closed, leaving menu loop")

        Logger.log("\n  ❌  Exited application\n")

    def _dispatch(self, item: str):
        try:
            self._handlers[item]()
        except ReminderError as e:
            logger.error(f"Menu item {item} failed: {e}", exc_info=True)
            Logger.log(f"\n  🚨  {e}")

    # ========================================================================
    # Menu handlers
    # ========================================================================

    def handle_show_reminders(self):
        """Log all reminders grouped by tag"""
        if not self._reminders.size():
            Logger.log(NO_REMINDERS_MESSAGE)
            return
        Logger.log_grouped_reminders(self._reminders.group_by_tag())

    def handle_search_reminders(self):
        """
        Log reminders whose tag matches a keyword exactly, or failing
        that, whose description matches it (even partially).
        """
        if not self._reminders.size():
            Logger.log(NO_REMINDERS_MESSAGE)
            return
        keyword = self.get_user_choice("keyword to search for", False)
        Logger.log_search_results(self._reminders.search(keyword))

    def handle_add_reminder(self):
        description = self.get_user_choice("new reminder", False)
        tag = self.get_user_choice("tag for your reminder", False)
        self._reminders.add_reminder(description, tag)
        Logger.log("\n  🏁  Reminder Added")

    def handle_modify_reminder(self):
        if not self._reminders.size():
            Logger.log(NO_REMINDERS_MESSAGE)
            return
        Logger.log_reminders(self._reminders.reminders)
        index = int(self.get_user_choice("index of task", True))
        description = self.get_user_choice("new description of task", False)
        self._reminders.modify_reminder(index, description)

        if self.check_user_toggle_choice():
            self._reminders.toggle_completion(index)

        Logger.log("\n  🏁   Reminder Modified")

    def handle_toggle_completion(self):
        if not self._reminders.size():
            Logger.log(NO_REMINDERS_MESSAGE)
            return
        Logger.log_reminders(self._reminders.reminders)
        index = int(self.get_user_choice("index of task", True))
        self._reminders.toggle_completion(index)
        Logger.log("\n  🏁   Reminder Completion Toggled")

    # ========================================================================
    # Prompts
    # ========================================================================

    def get_user_choice(self, question: str, is_index_required: bool) -> str:
        """
        Prompt until the user enters valid text and confirms it.

        Args:
            question: What to ask for, e.g. "new reminder"
            is_index_required: True if the answer must be a reminder number

        Returns:
            The confirmed text
        """
        while True:
            choice = self._read_until_valid(
                f"\nEnter a {question} here: ",
                lambda text: self._check_input(text, is_index_required)
            )
            if self.check_user_choice(question, choice) == "n":
                Logger.log("\n  🔄  Please try typing it again")
                continue
            return choice

    def check_user_choice(self, question: str, choice: str) -> str:
        """Ask the user to confirm their input; returns 'y' or 'n'"""
        answer = self._read_until_valid(
            f"You entered {question}: '{choice}', is it correct? y/n: ",
            is_yes_no,
            INVALID_YES_NO_MESSAGE
        )
        return answer.lower()

    def check_user_toggle_choice(self) -> bool:
        """True if the user also wants to toggle completion status"""
        answer = self._read_until_valid(
            "\nDo you wish to toggle the completed status? y/n: ",
            is_yes_no,
            INVALID_YES_NO_MESSAGE
        )
        return answer.lower() == "y"

    def get_menu_item(self) -> str:
        """Prompt until the user picks a menu item between 1 and 6"""
        return self._read_until_valid(
            "Choose a [Number] followed by [Enter]: ",
            is_menu_item,
            INVALID_MENU_ITEM_MESSAGE
        )

    def _handle_menu_selection(self) -> str:
        self._input("\nHit [Enter] key to see main menu: ")
        Logger.log_menu()
        return self.get_menu_item()

    def _check_input(self, text: str, is_index_required: bool) -> bool:
        ok, message = validate_input(text, is_index_required, self._reminders)
        if not ok:
            Logger.log(message)
        return ok

    def _read_until_valid(
        self,
        prompt: str,
        is_valid: Callable[[str], bool],
        invalid_message: Optional[str] = None
    ) -> str:
        while True:
            text = self._input(prompt).strip()
            if is_valid(text):
                return text
            if invalid_message:
                Logger.log(invalid_message)
