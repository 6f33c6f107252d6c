"""In-memory task store."""

import logging
import threading
import time
from typing import Iterator

from .errors import ValidationError
from .tasks import Task, TaskStatus, filter_by_status

logger = logging.getLogger(__name__)


class TaskStore:
    """
    Authoritative in-memory collection of tasks.

    Insertion order is preserved and is the only ordering. Every read and
    write goes through one lock, since the deadline sweeper reads from a
    scheduler thread.
    """

    def __init__(self, clock=time.time_ns):
        self._tasks: list[Task] = []
        self._lock = threading.Lock()
        self._clock = clock
        self._last_id = 0

    def _next_id(self) -> int:
        """Millisecond creation timestamp, bumped to stay unique."""
        candidate = self._clock() // 1_000_000
        if candidate <= self._last_id:
            candidate = self._last_id + 1
        self._last_id = candidate
        return candidate

    def add(
        self,
        text: str,
        deadline: str = "",
        assignee: str = "",
        link: str = "",
        strict: bool = False,
    ) -> Task | None:
        """Create an active task. Blank text creates nothing and returns None."""
        text = (text or "").strip()
        if not text:
            if strict:
                raise ValidationError("Task text must not be empty")
            logger.debug("Ignoring task with blank text")
            return None

        with self._lock:
            task = Task(
                id=self._next_id(),
                text=text,
                status=TaskStatus.ACTIVE,
                deadline=(deadline or "").strip(),
                assignee=(assignee or "").strip(),
                link=(link or "").strip(),
            )
            self._tasks.append(task)

        logger.debug(f"Created task {task.id}: {task.text}")
        return task

    def set_status(self, task_id: int, new_status: TaskStatus | str) -> Task | None:
        """Move a task to another lane. Unknown ids are a no-op."""
        status = TaskStatus.parse(new_status)
        with self._lock:
            for i, task in enumerate(self._tasks):
                if task.id == task_id:
                    updated = task.with_status(status)
                    self._tasks[i] = updated
                    break
            else:
                logger.debug(f"set_status: no task with id {task_id}")
                return None

        logger.debug(f"Task {task_id} moved to {status.value}")
        return updated

    def remove(self, task_id: int) -> bool:
        """Delete a task. Returns False when no such task exists."""
        with self._lock:
            before = len(self._tasks)
            self._tasks = [t for t in self._tasks if t.id != task_id]
            removed = len(self._tasks) != before

        if removed:
            logger.debug(f"Removed task {task_id}")
        return removed

    def get(self, task_id: int) -> Task | None:
        with self._lock:
            for task in self._tasks:
                if task.id == task_id:
                    return task
        return None

    def list_by_status(self, status: TaskStatus | str) -> list[Task]:
        """Tasks in one lane, in insertion order."""
        return filter_by_status(self.snapshot(), status)

    def snapshot(self) -> list[Task]:
        """Consistent copy of every task, in insertion order."""
        with self._lock:
            return list(self._tasks)

    def __len__(self) -> int:
        with self._lock:
            return len(self._tasks)

    def __iter__(self) -> Iterator[Task]:
        return iter(self.snapshot())

    def __contains__(self, task_id: object) -> bool:
        return isinstance(task_id, int) and self.get(task_id) is not None
