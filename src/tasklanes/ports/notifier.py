"""Overdue notification interface."""

from typing import Protocol


class Notifier(Protocol):
    """Interface for delivering an overdue-task notification."""

    def notify(self, text: str) -> None:
        """Announce that the task with this text is overdue."""
        ...
