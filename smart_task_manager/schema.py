"""
SMART TASK MANAGER - Task Schema Definition
============================================
Task record plus the fixed category and status vocabularies.
"""

from enum import Enum
from datetime import date
from pydantic import BaseModel, Field


class Category(str, Enum):
    """Fixed task categories"""
    CODING = "Coding"
    YOGA = "Yoga"
    GYM = "Gym"
    SLEEP = "Sleep"

    def __str__(self) -> str:
        return self.value


class TaskStatus(str, Enum):
    """Task lifecycle states"""
    PENDING = "Pending"         # Not done yet
    COMPLETED = "Completed"     # Finished
    FORECASTED = "Forecasted"   # Planned for later

    def __str__(self) -> str:
        return self.value


class Task(BaseModel):
    """
    Individual task record.

    Title, category and due date are fixed once the task is built;
    status is the only field that changes, via update_status().
    """
    title: str = Field(frozen=True)
    category: Category = Field(frozen=True)
    status: TaskStatus = TaskStatus.PENDING
    due_date: date = Field(default_factory=date.today, frozen=True)

    def update_status(self, new_status: TaskStatus) -> None:
        """Overwrite the status; every transition is allowed"""
        self.status = TaskStatus(new_status)

    def __str__(self) -> str:
        return (
            f"Title: {self.title}, Category: {self.category}, "
            f"Due Date: {self.due_date.isoformat()}, Status: {self.status}"
        )
