"""Task session - the single view that owns the store and its sweeper.

The CLI shell drives one session per run: UI actions call straight into the
store, the sweeper reads it on its own interval, and closing the session
cancels the sweep.
"""

import logging
from pathlib import Path

from .adapters.excel_export import ExcelExporter
from .adapters.log_notifier import LogNotifier
from .config import Config
from .core.export import export_rows
from .core.store import TaskStore
from .core.tasks import Task, TaskStatus, count_by_status
from .ports.notifier import Notifier
from .ports.spreadsheet import SpreadsheetWriter
from .sweeper import DeadlineSweeper

logger = logging.getLogger(__name__)


class TaskSession:
    """One interactive session over an in-memory task list."""

    def __init__(
        self,
        store: TaskStore,
        sweeper: DeadlineSweeper,
        exporter: SpreadsheetWriter,
        config: Config | None = None,
    ):
        self.config = config or Config()
        self.store = store
        self.sweeper = sweeper
        self.exporter = exporter
        self.active_tab = self.config.default_tab

    # ============== Lifecycle ==============

    def open(self) -> None:
        self.sweeper.start()

    def close(self) -> None:
        self.sweeper.stop()

    def __enter__(self) -> "TaskSession":
        self.open()
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    # ============== Tabs ==============

    def select_tab(self, status: TaskStatus | str) -> TaskStatus:
        self.active_tab = TaskStatus.parse(status)
        return self.active_tab

    def visible_tasks(self) -> list[Task]:
        """Tasks in the currently selected lane."""
        return self.store.list_by_status(self.active_tab)

    def tab_counts(self) -> dict[TaskStatus, int]:
        return count_by_status(self.store.snapshot())

    # ============== Actions ==============

    def create_task(self, text: str, deadline: str = "", assignee: str = "", link: str = "") -> Task | None:
        """Add a task; None when the text was blank."""
        return self.store.add(text, deadline=deadline, assignee=assignee, link=link)

    def change_status(self, task_id: int, status: TaskStatus | str) -> Task | None:
        return self.store.set_status(task_id, status)

    def remove_task(self, task_id: int) -> bool:
        return self.store.remove(task_id)

    def check_deadlines(self) -> list[Task]:
        """Run the overdue check now instead of waiting for the interval."""
        return self.sweeper.sweep()

    def download(self, path: Path | str | None = None) -> Path:
        """Export every task, whatever the selected lane."""
        target = Path(path) if path else self.config.export_path
        return self.exporter.write(export_rows(self.store.snapshot()), target)


def build_session(
    config: Config,
    notifier: Notifier | None = None,
    exporter: SpreadsheetWriter | None = None,
    scheduler=None,
) -> TaskSession:
    """Wire a session with the default adapters."""
    store = TaskStore()
    sweeper = DeadlineSweeper(
        store,
        notifier or LogNotifier(),
        interval_seconds=config.sweep_interval_seconds,
        scheduler=scheduler,
    )
    return TaskSession(store, sweeper, exporter or ExcelExporter(), config)
