"""Spreadsheet row projection for task export."""

from .tasks import Task

EXPORT_COLUMNS = ("Task", "Status", "Deadline", "Assignee", "Link")
EXPORT_SHEET_NAME = "Todos"
EXPORT_FILENAME = "todos.xlsx"


def task_row(task: Task) -> list[str]:
    """One export row, in EXPORT_COLUMNS order."""
    return [task.text, task.status.value, task.deadline, task.assignee, task.link]


def export_rows(tasks: list[Task]) -> list[list[str]]:
    """
    Header row followed by one row per task, in the given order.

    Every task is exported regardless of which lane is being viewed.
    """
    return [list(EXPORT_COLUMNS)] + [task_row(t) for t in tasks]
