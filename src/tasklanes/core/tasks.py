"""Pure task domain logic - no I/O dependencies."""

from dataclasses import dataclass, replace
from datetime import date, datetime, timezone
from enum import Enum

from .errors import InvalidStatus


class TaskStatus(str, Enum):
    """The four status lanes a task moves through."""

    ACTIVE = "active"
    PENDING = "pending"
    WIP = "wip"
    COMPLETED = "completed"

    @property
    def label(self) -> str:
        """Human-readable tab label."""
        labels = {
            TaskStatus.ACTIVE: "Active",
            TaskStatus.PENDING: "Pending",
            TaskStatus.WIP: "WIP",
            TaskStatus.COMPLETED: "Completed",
        }
        return labels[self]

    @classmethod
    def parse(cls, value: "TaskStatus | str") -> "TaskStatus":
        """Resolve a member or its string value, rejecting anything else."""
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            try:
                return cls(value.strip().lower())
            except ValueError:
                pass
        raise InvalidStatus(value)


@dataclass(frozen=True)
class Task:
    """A single unit of work in one of the status lanes."""

    id: int
    text: str
    status: TaskStatus = TaskStatus.ACTIVE
    deadline: str = ""
    assignee: str = ""
    link: str = ""

    @property
    def is_completed(self) -> bool:
        return self.status == TaskStatus.COMPLETED

    def due_at(self) -> datetime | None:
        """Parsed deadline, or None when unset or unparsable."""
        return parse_deadline(self.deadline)

    def is_overdue(self, now: datetime | None = None) -> bool:
        """Incomplete and past a parsable deadline."""
        if self.is_completed:
            return False
        due = self.due_at()
        if due is None:
            return False
        now = _as_aware(now or datetime.now(timezone.utc))
        return due < now

    def with_status(self, status: TaskStatus) -> "Task":
        """Copy of this task in another lane; every other field is kept."""
        return replace(self, status=status)


def _as_aware(value: datetime) -> datetime:
    # Naive values are local time
    if value.tzinfo is None:
        return value.astimezone()
    return value


def parse_deadline(value: str | None) -> datetime | None:
    """
    Parse a deadline string leniently.

    A bare calendar date (YYYY-MM-DD) is midnight UTC, a naive date-time is
    local time. Empty or malformed input returns None.
    """
    if not value or not value.strip():
        return None
    value = value.strip()
    try:
        return datetime.combine(date.fromisoformat(value), datetime.min.time(), tzinfo=timezone.utc)
    except ValueError:
        pass
    try:
        return _as_aware(datetime.fromisoformat(value))
    except ValueError:
        return None


def filter_by_status(tasks: list[Task], status: TaskStatus | str) -> list[Task]:
    """
    Tasks in one lane, in input order.

    Pure function - no I/O.
    """
    status = TaskStatus.parse(status)
    return [t for t in tasks if t.status == status]


def filter_overdue(tasks: list[Task], now: datetime | None = None) -> list[Task]:
    """Filter to overdue tasks only."""
    now = now or datetime.now(timezone.utc)
    return [t for t in tasks if t.is_overdue(now)]


def count_by_status(tasks: list[Task]) -> dict[TaskStatus, int]:
    """Number of tasks per lane, every lane present."""
    counts = {status: 0 for status in TaskStatus}
    for t in tasks:
        counts[t.status] += 1
    return counts
