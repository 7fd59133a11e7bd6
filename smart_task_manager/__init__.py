"""
SMART TASK MANAGER - In-Memory Task Tracker
============================================

Single-session task tracking behind a console menu.

Usage:
    from smart_task_manager import TaskStore, Category, TaskStatus

    store = TaskStore()
    task_id = store.add_task("Write report", Category.CODING, TaskStatus.PENDING)

    store.filter_by_category(Category.CODING)
    store.update_status(task_id, TaskStatus.COMPLETED)
    store.delete_task(task_id)
"""

from .schema import (
    Task,
    Category,
    TaskStatus
)

from .manager import (
    TaskStore,
    TaskStoreError,
    EmptyStoreError,
    TaskNotFoundError
)

from .database import DatabaseConnection, DatabaseConnectionError

__version__ = "1.0.0"
__all__ = [
    "TaskStore",
    "TaskStoreError",
    "EmptyStoreError",
    "TaskNotFoundError",
    "Task",
    "Category",
    "TaskStatus",
    "DatabaseConnection",
    "DatabaseConnectionError"
]
