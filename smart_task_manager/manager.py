"""
SMART TASK MANAGER - Task Store
================================
In-memory task collection for a single session.
Assigns identifiers, handles deletion and filtering.

Nothing here prints: operations return results or raise, and the
console layer decides how to show them.
"""

from datetime import date
from typing import Optional, List, Dict, Tuple
import logging

from .schema import Task, Category, TaskStatus

logger = logging.getLogger("smart_task_manager")

TaskEntry = Tuple[int, Task]


class TaskStoreError(Exception):
    """Base class for task store failures"""


class EmptyStoreError(TaskStoreError):
    """Raised when an operation needs tasks but the store has none"""

    def __init__(self, message: str = "No tasks added yet"):
        super().__init__(message)


class TaskNotFoundError(TaskStoreError, KeyError):
    """Raised when a task id is not in the store"""

    def __init__(self, task_id: int):
        self.task_id = task_id
        super().__init__(f"Task not found: {task_id}")

    def __str__(self) -> str:
        return self.args[0]


class TaskStore:
    """
    Session task store

    Tasks are kept in insertion order, keyed by an integer id.
    Ids come from a counter that only moves forward, so a deleted
    task's id is never handed out again.
    """

    def __init__(self):
        self._tasks: Dict[int, Task] = {}
        self._next_id: int = 1

    def __len__(self) -> int:
        return len(self._tasks)

    def __contains__(self, task_id: object) -> bool:
        return task_id in self._tasks

    @property
    def is_empty(self) -> bool:
        return not self._tasks

    @property
    def next_id(self) -> int:
        """Id the next added task will receive"""
        return self._next_id

    # ========================================
    # MUTATIONS
    # ========================================

    def add_task(
        self,
        title: str,
        category: Category,
        status: TaskStatus = TaskStatus.PENDING,
        due_date: Optional[date] = None
    ) -> int:
        """Create a task and return its new id"""
        fields = {"title": title, "category": category, "status": status}
        if due_date is not None:
            fields["due_date"] = due_date
        task = Task(**fields)

        task_id = self._next_id
        self._next_id += 1
        self._tasks[task_id] = task

        logger.info(f"✅ Added task {task_id}: {task.title} ({len(self._tasks)} in store)")
        return task_id

    def delete_task(self, task_id: int) -> Task:
        """Remove a task and return it; other ids are left untouched"""
        if self.is_empty:
            logger.warning(f"⛔ Delete of {task_id} refused: store is empty")
            raise EmptyStoreError()

        task = self.get_task(task_id)
        del self._tasks[task_id]

        logger.info(f"🗑️ Deleted task {task_id}: {task.title}")
        return task

    def update_status(self, task_id: int, status: TaskStatus) -> Task:
        """Change the status of a stored task"""
        task = self.get_task(task_id)
        old_status = task.status
        task.update_status(status)

        logger.info(f"🔄 Task {task_id} status: {old_status} -> {task.status}")
        return task

    # ========================================
    # QUERIES
    # ========================================

    def get_task(self, task_id: int) -> Task:
        """Get task by id"""
        task = self._tasks.get(task_id)
        if task is None:
            logger.warning(f"Task not found: {task_id}")
            raise TaskNotFoundError(task_id)
        return task

    def list_tasks(self) -> List[TaskEntry]:
        """All (id, task) pairs in insertion order"""
        return list(self._tasks.items())

    def filter_by_category(self, category: Category) -> List[TaskEntry]:
        """Tasks in the given category, store order preserved"""
        category = Category(category)
        matches = [(tid, t) for tid, t in self._tasks.items() if t.category == category]
        logger.debug(f"Category filter {category}: {len(matches)} match(es)")
        return matches

    def filter_by_status(self, status: TaskStatus) -> List[TaskEntry]:
        """Tasks with the given status, store order preserved"""
        status = TaskStatus(status)
        matches = [(tid, t) for tid, t in self._tasks.items() if t.status == status]
        logger.debug(f"Status filter {status}: {len(matches)} match(es)")
        return matches
