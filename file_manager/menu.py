"""
Interactive Menu
================

Numbered console menu around a ``FileManager`` session.
"""

from typing import Callable

from file_manager import display
from file_manager.utils.exceptions import DirectoryError
from file_manager.utils.logging_config import get_logger

logger = get_logger(__name__)

MENU_TEXT = """
------------------------------------------------------------
  📂 Current Directory: {directory}
------------------------------------------------------------

  1  Scan Directory
  2  Organize Files by Extension
  3  Search Files by Name
  4  Find Duplicate Files
  5  Display All Files
  6  Change Directory
  7  Show Category Mappings
  0  Exit
"""


class Menu:
    """Reads choices until the user exits.

    Args:
        manager: Session the menu operates on.
        input_func: Line reader, ``input`` by default.
    """

    def __init__(self, manager, input_func: Callable[[str], str] = input):
        self.manager = manager
        self.input_func = input_func
        self.is_running = False
        self._handlers = {
            1: self.handle_scan,
            2: self.handle_organize,
            3: self.handle_search,
            4: self.handle_duplicates,
            5: self.handle_display_files,
            6: self.handle_change_directory,
            7: self.handle_categories,
            0: self.exit,
        }

    def run(self) -> None:
        """Show the menu and dispatch choices until exit or end of input."""
        self.is_running = True
        self.manager.activity_log.log("Application started")
        print("\n        SMART FILE MANAGEMENT SYSTEM")

        while self.is_running:
            print(MENU_TEXT.format(directory=self.manager.directory))
            try:
                choice = self.get_int_input("Enter your choice: ")
                self.process_choice(choice)
            except EOFError:
                # Input closed, possibly in the middle of a sub-prompt
                print()
                self.exit()

        print("\n👋 Thank you for using Smart File Management System!\n")
        self.manager.activity_log.log("Application terminated normally")

    def process_choice(self, choice: int) -> None:
        handler = self._handlers.get(choice)
        if handler is None:
            print("❌ Invalid choice! Please select 0-7.")
            return
        handler()

    def get_user_input(self, prompt: str) -> str:
        return self.input_func(prompt).strip()

    def get_int_input(self, prompt: str) -> int:
        """Prompt until the answer parses as an integer."""
        while True:
            answer = self.get_user_input(prompt)
            try:
                return int(answer)
            except ValueError:
                print("❌ Invalid input! Please enter a number.")

    def _require_files(self, action: str) -> bool:
        if self.manager.files:
            return True
        print(f"\n⚠️  No files loaded. Please scan the directory first before {action}.")
        return False

    def handle_scan(self) -> None:
        print(f"\n🔍 Scanning directory: {self.manager.directory}")
        count = self.manager.scan()
        if count > 0:
            print(f"✅ Scan complete! Found {count} files.")
        else:
            print("⚠️  No files found, or the directory does not exist.")

    def handle_organize(self) -> None:
        if not self._require_files("organizing"):
            return

        count = len(self.manager.files)
        print(f"\n⚠️  This will move {count} files into category folders.")
        answer = self.get_user_input("Proceed with organization? (yes/no): ").lower()
        if answer not in ("yes", "y"):
            print("❌ Organization cancelled.")
            return

        report = self.manager.organize()
        print(f"\n✅ Organization complete! {report.moved_count} files moved.")
        if report.skipped_count:
            print(f"   {report.skipped_count} skipped (already exist at destination).")
        if report.failed_count:
            print(f"   {report.failed_count} failed, see the log for details.")

    def handle_search(self) -> None:
        if not self._require_files("searching"):
            return

        term = self.get_user_input("\nEnter filename to search: ")
        if not term:
            print("❌ Search term cannot be empty!")
            return
        display.display_search_results(self.manager.search(term))

    def handle_duplicates(self) -> None:
        if not self._require_files("finding duplicates"):
            return

        print("\n🔍 Searching for duplicates (same name and size)...")
        display.display_duplicates(self.manager.find_duplicates())

    def handle_display_files(self) -> None:
        if not self._require_files("listing them"):
            return
        display.display_files(self.manager.files)

    def handle_change_directory(self) -> None:
        new_directory = self.get_user_input("\nEnter new directory path: ")
        if not new_directory:
            print("❌ Directory path cannot be empty!")
            return
        try:
            self.manager.change_directory(new_directory)
        except DirectoryError as e:
            logger.info(f"Rejected directory change: {e}")
            print(f"❌ Directory does not exist: {new_directory}")
            return
        print(f"✅ Directory changed to: {new_directory}")
        print("   Please scan the new directory to load files.")

    def handle_categories(self) -> None:
        display.display_categories(self.manager.categories())

    def exit(self) -> None:
        self.is_running = False
        self.manager.activity_log.log("User requested exit")
