# src/todo_service/core/state.py

from __future__ import annotations

from dataclasses import dataclass

from .ports import TaskRepo


@dataclass
class AppState:
    # Store Settings on the state for easy access in connectors.
    settings: object

    # The single task store for this process (created once in bootstrap).
    task_store: TaskRepo
