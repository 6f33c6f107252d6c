"""Functional core - task model, store and export projection with no I/O."""

from .errors import TaskError, InvalidStatus, ValidationError
from .tasks import Task, TaskStatus, parse_deadline, filter_by_status, filter_overdue, count_by_status
from .store import TaskStore
from .export import EXPORT_COLUMNS, EXPORT_SHEET_NAME, EXPORT_FILENAME, export_rows

__all__ = [
    # Errors
    "TaskError",
    "InvalidStatus",
    "ValidationError",
    # Tasks
    "Task",
    "TaskStatus",
    "parse_deadline",
    "filter_by_status",
    "filter_overdue",
    "count_by_status",
    # Store
    "TaskStore",
    # Export
    "EXPORT_COLUMNS",
    "EXPORT_SHEET_NAME",
    "EXPORT_FILENAME",
    "export_rows",
]
