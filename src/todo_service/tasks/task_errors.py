# tasks/task_errors.py

"""
Errors raised by TaskStore.

All of them are validation / precondition failures: nothing here is
transient, so callers never retry. The HTTP connector maps each class to a
status code; messages are meant to be shown to the client as-is.
"""

from __future__ import annotations

from typing import Any


class TaskStoreError(Exception):
    """Base class for every TaskStore failure."""


class DuplicateTitleError(TaskStoreError):
    def __init__(self, title: str) -> None:
        self.title = title
        super().__init__(f"Error: TODO with the title [{title}] already exists in the system")


class DueDateInPastError(TaskStoreError):
    def __init__(self, due_date: int) -> None:
        self.due_date = due_date
        super().__init__("Error: Can’t create new TODO that its due date is in the past")


class InvalidDueDateError(TaskStoreError):
    def __init__(self, raw: Any) -> None:
        self.raw = raw
        super().__init__(f"Error: dueDate [{raw}] is not an epoch-millisecond timestamp")


class InvalidFilterError(TaskStoreError):
    def __init__(self, raw: Any) -> None:
        self.raw = raw
        super().__init__(f"Error: invalid status filter [{raw}]")


class InvalidSortKeyError(TaskStoreError):
    def __init__(self, raw: Any) -> None:
        self.raw = raw
        super().__init__(f"Error: invalid sortBy value [{raw}]")


class TaskNotFoundError(TaskStoreError):
    def __init__(self, task_id: Any) -> None:
        self.task_id = task_id
        super().__init__(f"Error: no such TODO with id {task_id}")


class InvalidStatusError(TaskStoreError):
    def __init__(self, raw: Any) -> None:
        self.raw = raw
        super().__init__("Error: status should be one of PENDING, LATE, or DONE")
