"""
Task subsystem.

Components:
- task_models.py: data structures (Task, TaskStatus, StatusFilter, SortKey)
- task_errors.py: validation errors raised by the store
- task_store.py: in-memory store (identity, derived LATE, filter/sort, renumbering)
"""
