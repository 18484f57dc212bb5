# src/todo_service/core/ports.py

from __future__ import annotations

"""
Ports (interfaces) used by the transport layer.

Connectors depend on this Protocol instead of the concrete TaskStore,
which keeps the store swappable and makes testing easier.
"""

from typing import Any, Protocol


class TaskRepo(Protocol):
    def __len__(self) -> int: ...

    def create(self, title: str, content: str, due_date: Any) -> int: ...
    def count(self, status_filter: Any) -> int: ...
    def list_tasks(self, status_filter: Any, sort_key: Any = None) -> list[dict[str, Any]]: ...

    # Returns the previous status (a TaskStatus; kept as Any to avoid import coupling)
    def update_status(self, task_id: int, new_status: Any) -> Any: ...
    def delete(self, task_id: int) -> int: ...
