# tasks/task_models.py

from __future__ import annotations

import time
from dataclasses import dataclass
from enum import StrEnum
from typing import Any


def now_ms() -> int:
    """Current wall-clock time as integer epoch milliseconds."""
    return int(time.time() * 1000)


class TaskStatus(StrEnum):
    """
    Stored task status.

    Notes:
    - new tasks are always PENDING
    - LATE is usually derived at query time (not DONE and overdue), but
      update_status may store it literally
    """

    PENDING = "PENDING"
    LATE = "LATE"
    DONE = "DONE"


class StatusFilter(StrEnum):
    ALL = "ALL"
    PENDING = "PENDING"
    LATE = "LATE"
    DONE = "DONE"


class SortKey(StrEnum):
    ID = "ID"
    DUE_DATE = "DUE_DATE"
    TITLE = "TITLE"


@dataclass(slots=True)
class Task:
    id: int
    title: str
    content: str
    due_date: int  # epoch ms
    status: TaskStatus = TaskStatus.PENDING

    def is_overdue(self, now: int) -> bool:
        return self.status != TaskStatus.DONE and self.due_date < now

    def to_view(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "title": self.title,
            "content": self.content,
            "status": self.status.value,
            "dueDate": self.due_date,
        }
