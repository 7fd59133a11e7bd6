# tests/conftest.py

from __future__ import annotations

from datetime import date

import pytest

from smart_task_manager.cli import TaskMenu
from smart_task_manager.manager import TaskStore
from smart_task_manager.schema import Category, TaskStatus


class ScriptedConsole:
    """
    Replays a fixed list of input lines and records everything printed.

    Raises EOFError once the script runs out, the same way input() does
    when stdin is closed.
    """

    def __init__(self, lines: list[str]) -> None:
        self._lines = list(lines)
        self.lines_out: list[str] = []

    def input(self, prompt: str = "") -> str:
        if not self._lines:
            raise EOFError
        return self._lines.pop(0)

    def print(self, text: str = "") -> None:
        self.lines_out.append(str(text))

    @property
    def text(self) -> str:
        return "\n".join(self.lines_out)


class InterruptingConsole(ScriptedConsole):
    """Like ScriptedConsole, but ends with Ctrl-C instead of end of input."""

    def input(self, prompt: str = "") -> str:
        if not self._lines:
            raise KeyboardInterrupt
        return super().input(prompt)


@pytest.fixture()
def store() -> TaskStore:
    return TaskStore()


@pytest.fixture()
def seeded_store() -> TaskStore:
    """Three tasks: ids 1 and 3 are Coding, id 2 is Yoga."""
    s = TaskStore()
    s.add_task("Fix parser", Category.CODING, TaskStatus.PENDING, due_date=date(2026, 1, 5))
    s.add_task("Morning flow", Category.YOGA, TaskStatus.COMPLETED, due_date=date(2026, 1, 6))
    s.add_task("Write tests", Category.CODING, TaskStatus.FORECASTED, due_date=date(2026, 1, 7))
    return s


@pytest.fixture()
def run_menu(tmp_path):
    """Run a TaskMenu against scripted input; returns (console, store)."""

    def _run(lines: list[str], store: TaskStore | None = None, db_path=None):
        console = ScriptedConsole(lines)
        s = store if store is not None else TaskStore()
        menu = TaskMenu(
            s,
            input_fn=console.input,
            output_fn=console.print,
            db_path=str(db_path or tmp_path / "tasks.db"),
        )
        menu.run()
        return console, s

    return _run
