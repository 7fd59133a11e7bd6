#!/usr/bin/env python3
"""
SMART TASK MANAGER - Console Menu
==================================
Interactive menu over the in-memory task store.

Usage:
    smart-task-manager
    smart-task-manager --db tasks.db --log-level INFO
    python -m smart_task_manager
"""

import argparse
import logging
import sys
from typing import Callable, List, Optional, Sequence, TypeVar

from .database import DatabaseConnection, DatabaseConnectionError, DEFAULT_DB_PATH
from .manager import TaskStore, TaskEntry, EmptyStoreError, TaskNotFoundError
from .schema import Category, TaskStatus

logger = logging.getLogger("smart_task_manager")

T = TypeVar("T")

MENU_OPTIONS = (
    "Add Task",
    "View Tasks",
    "Delete Task",
    "Filter Tasks",
    "Connect Database",
    "Exit",
)
FILTER_OPTIONS = ("Category", "Status")
SEPARATOR = "_" * 22


class InvalidSelectionError(ValueError):
    """Raised when a numbered choice is not a number or out of range"""


def parse_selection(raw: str, count: int) -> int:
    """Turn a 1-based menu answer into a 0-based index"""
    try:
        choice = int(raw.strip())
    except ValueError:
        raise InvalidSelectionError(f"Not a number: {raw!r}") from None
    if not 1 <= choice <= count:
        raise InvalidSelectionError(f"Choice {choice} out of range 1-{count}")
    return choice - 1


class TaskMenu:
    """
    Console loop for the task store.

    Input and output go through the given callables so the menu can be
    driven from a script instead of a terminal.
    """

    def __init__(
        self,
        store: TaskStore,
        input_fn: Optional[Callable[[str], str]] = None,
        output_fn: Optional[Callable[[str], None]] = None,
        db_path: str = DEFAULT_DB_PATH
    ):
        self.store = store
        self._input = input_fn or input
        self._print = output_fn or print
        self.database = DatabaseConnection(db_path)

    def run(self) -> None:
        """Show the menu until the user exits or input runs out"""
        self._print("Smart Task Manager")
        self._print(SEPARATOR)

        while True:
            self._show_options()
            try:
                choice = parse_selection(self._input("> "), len(MENU_OPTIONS))
                keep_going = self.handle_choice(choice)
            except InvalidSelectionError as e:
                logger.debug(f"Invalid selection: {e}")
                self._print("Invalid choice is selected")
                keep_going = True
            except (EOFError, KeyboardInterrupt):
                self._print("")
                self._print("Input closed. Goodbye.")
                return

            self._print(SEPARATOR)
            if not keep_going:
                return

    def handle_choice(self, choice: int) -> bool:
        """Run one menu entry; returns False when the loop should stop"""
        option = MENU_OPTIONS[choice]
        if option == "Add Task":
            self.add_task()
        elif option == "View Tasks":
            self.show_tasks()
        elif option == "Delete Task":
            self.delete_task()
        elif option == "Filter Tasks":
            self.filter_tasks()
        elif option == "Connect Database":
            self.connect_database()
        else:
            self._print("SmartTaskManager is exited by User.")
            return False
        return True

    # ========================================
    # MENU ACTIONS
    # ========================================

    def add_task(self) -> int:
        title = self._input("Enter the title: ").strip()
        while not title:
            self._print("Title cannot be empty")
            title = self._input("Enter the title: ").strip()

        category = self._select("Select the Category", list(Category))
        status = self._select("Select the Status", list(TaskStatus))

        task_id = self.store.add_task(title, category, status)
        self._print(f"✅ Task added successfully (id {task_id}), {len(self.store)} task(s) in store")
        return task_id

    def show_tasks(self) -> None:
        entries = self.store.list_tasks()
        if not entries:
            self._print("No tasks added yet")
            return
        self._print("All Tasks are listed below")
        self._print_entries(entries)

    def delete_task(self) -> None:
        if self.store.is_empty:
            self._print("No tasks added yet, delete operation is invalid")
            return

        self.show_tasks()
        raw = self._input("Select the task to delete: ")
        try:
            task_id = int(raw.strip())
        except ValueError:
            self._print(f"❌ Invalid task id: {raw!r}. No task was deleted")
            return

        try:
            task = self.store.delete_task(task_id)
        except (EmptyStoreError, TaskNotFoundError) as e:
            self._print(f"❌ {e}. No task was deleted")
            return
        self._print(f"Task {task.title} is removed successfully")

    def filter_tasks(self) -> None:
        by = self._select("Filter by", list(FILTER_OPTIONS))
        if by == "Category":
            category = self._select("Select the Category", list(Category))
            entries = self.store.filter_by_category(category)
        else:
            status = self._select("Select the Status", list(TaskStatus))
            entries = self.store.filter_by_status(status)

        if not entries:
            self._print("No matching tasks")
            return
        self._print_entries(entries)

    def connect_database(self) -> None:
        try:
            con = self.database.open_connection()
        except DatabaseConnectionError as e:
            self._print(f"Exception occurred: {e}")
            self._print("Connection failed.")
            return
        con.close()
        self._print("Connection is established")

    # ========================================
    # HELPERS
    # ========================================

    def _show_options(self) -> None:
        for i, option in enumerate(MENU_OPTIONS, start=1):
            self._print(f"{i}. {option}")
        self._print("Enter choice")

    def _select(self, prompt: str, options: Sequence[T]) -> T:
        self._print(prompt)
        for i, option in enumerate(options, start=1):
            self._print(f"{i}. {option}")
        return options[parse_selection(self._input("> "), len(options))]

    def _print_entries(self, entries: List[TaskEntry]) -> None:
        for task_id, task in entries:
            self._print(f"{task_id}: {task}")


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = argparse.ArgumentParser(
        description="Smart Task Manager - in-memory console task tracker",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  smart-task-manager                        Start the menu
  smart-task-manager --db demo.db           Use demo.db for "Connect Database"
  smart-task-manager --log-level INFO       Show store activity on stderr
        """
    )
    parser.add_argument(
        "--db",
        default=DEFAULT_DB_PATH,
        help="SQLite file for the database check; created if it does not exist"
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level"
    )

    args = parser.parse_args(argv)
    logging.basicConfig(level=getattr(logging, args.log_level))

    menu = TaskMenu(TaskStore(), db_path=args.db)
    menu.run()
    return 0


if __name__ == "__main__":
    sys.exit(main())
