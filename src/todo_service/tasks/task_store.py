# tasks/task_store.py

from __future__ import annotations

import logging
import math
import threading
from collections.abc import Callable
from typing import Any

from .task_errors import (
    DueDateInPastError,
    DuplicateTitleError,
    InvalidDueDateError,
    InvalidFilterError,
    InvalidSortKeyError,
    InvalidStatusError,
    TaskNotFoundError,
)
from .task_models import SortKey, StatusFilter, Task, TaskStatus, now_ms

logger = logging.getLogger(__name__)

_SORT_KEYS: dict[SortKey, Callable[[Task], Any]] = {
    SortKey.ID: lambda t: t.id,
    SortKey.DUE_DATE: lambda t: t.due_date,
    SortKey.TITLE: lambda t: t.title,
}


def _coerce_due_date(raw: Any) -> int:
    if isinstance(raw, bool):
        raise InvalidDueDateError(raw)
    if isinstance(raw, int):
        return raw
    if isinstance(raw, float):
        if not math.isfinite(raw):
            raise InvalidDueDateError(raw)
        return int(raw)
    if isinstance(raw, str):
        s = raw.strip()
        try:
            return int(s)
        except ValueError:
            pass
        try:
            val = float(s)
        except ValueError:
            raise InvalidDueDateError(raw) from None
        if not math.isfinite(val):
            raise InvalidDueDateError(raw)
        return int(val)
    raise InvalidDueDateError(raw)


def _parse_filter(raw: Any) -> StatusFilter:
    try:
        return StatusFilter(raw)
    except ValueError:
        raise InvalidFilterError(raw) from None


def _parse_sort_key(raw: Any) -> SortKey:
    if raw is None or raw == "":
        return SortKey.ID
    try:
        return SortKey(raw)
    except ValueError:
        raise InvalidSortKeyError(raw) from None


class TaskStore:
    """
    In-memory task store.

    Storage order is append order. Ids are handed out from max_id, which only
    ever grows; delete() renumbers survivors by position (1..n) but leaves
    max_id alone, so new ids can run ahead of the current count.

    Thread-safety:
    - every public method holds one store-wide lock for its whole duration
    """

    def __init__(self, *, clock: Callable[[], int] = now_ms) -> None:
        self._clock = clock
        self._tasks: list[Task] = []
        self._max_id = 0
        self._lock = threading.Lock()
        logger.info("TaskStore ready (in-memory)")

    def __len__(self) -> int:
        with self._lock:
            return len(self._tasks)

    @property
    def max_id(self) -> int:
        return self._max_id

    # ---- low-level helpers ----

    def _index_of(self, task_id: int) -> int | None:
        for idx, t in enumerate(self._tasks):
            if t.id == task_id:
                return idx
        return None

    def _find(self, task_id: int) -> Task | None:
        idx = self._index_of(task_id)
        return None if idx is None else self._tasks[idx]

    # ---- public API ----

    def get(self, task_id: int) -> Task | None:
        with self._lock:
            return self._find(task_id)

    def create(self, title: str, content: str, due_date: Any) -> int:
        with self._lock:
            if any(t.title == title for t in self._tasks):
                raise DuplicateTitleError(title)

            due = _coerce_due_date(due_date)
            if due <= self._clock():
                raise DueDateInPastError(due)

            task_id = self._max_id + 1
            self._max_id = task_id
            self._tasks.append(Task(id=task_id, title=title, content=content, due_date=due))
            logger.debug("Task created id=%s title=%r due_date=%s", task_id, title, due)
            return task_id

    def count(self, status_filter: Any) -> int:
        """
        Count tasks matching the filter.

        LATE here is derived (not DONE and overdue), unlike list_tasks(),
        which matches the stored status literally.
        """
        flt = _parse_filter(status_filter)
        with self._lock:
            if flt is StatusFilter.ALL:
                return len(self._tasks)
            if flt is StatusFilter.LATE:
                now = self._clock()
                return sum(1 for t in self._tasks if t.is_overdue(now))
            return sum(1 for t in self._tasks if t.status.value == flt.value)

    def list_tasks(self, status_filter: Any, sort_key: Any = None) -> list[dict[str, Any]]:
        """
        Return task views filtered by stored status and sorted ascending.

        The sort is stable; sort_key defaults to ID when missing or empty.
        """
        flt = _parse_filter(status_filter)
        key = _parse_sort_key(sort_key)
        with self._lock:
            if flt is StatusFilter.ALL:
                matched = list(self._tasks)
            else:
                matched = [t for t in self._tasks if t.status.value == flt.value]
            matched.sort(key=_SORT_KEYS[key])
            return [t.to_view() for t in matched]

    def update_status(self, task_id: int, new_status: Any) -> TaskStatus:
        with self._lock:
            task = self._find(task_id)
            if task is None:
                raise TaskNotFoundError(task_id)
            try:
                status = TaskStatus(new_status)
            except ValueError:
                raise InvalidStatusError(new_status) from None

            previous = task.status
            task.status = status
            logger.debug("Task status id=%s %s -> %s", task_id, previous.value, status.value)
            return previous

    def delete(self, task_id: int) -> int:
        with self._lock:
            idx = self._index_of(task_id)
            if idx is None:
                raise TaskNotFoundError(task_id)

            del self._tasks[idx]
            # Renumber by storage position; max_id is not reset.
            for pos, t in enumerate(self._tasks, start=1):
                t.id = pos

            remaining = len(self._tasks)
            logger.debug("Task deleted id=%s remaining=%s", task_id, remaining)
            return remaining
