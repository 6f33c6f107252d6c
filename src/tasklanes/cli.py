"""tasklanes CLI - task lanes in the terminal."""

import json
import logging
import shlex
import sys

import click

from .adapters.excel_export import ExcelExporter
from .config import load_config
from .core.errors import TaskError
from .core.export import export_rows
from .core.tasks import Task, TaskStatus
from .session import TaskSession, build_session

SHELL_HELP = """\
Commands:
  add                     Create a task (prompts for the fields)
  list [--all] [--json]   Show the current lane, or every task
  tab <status>            Switch lane: active, pending, wip, completed
  tabs                    Show lanes with task counts
  status <id> <status>    Move a task to another lane
  remove <id>             Delete a task
  export [path]           Download every task as a spreadsheet
  sweep                   Check deadlines now
  help                    Show this message
  quit                    Leave the shell"""


@click.group()
@click.version_option()
def main():
    """tasklanes - task list with status lanes."""
    pass


def _setup_logging(debug: bool, level: str) -> None:
    logging.basicConfig(
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        level=logging.DEBUG if debug else getattr(logging, level, logging.INFO),
    )


def _task_dict(task: Task) -> dict:
    return {
        "id": task.id,
        "text": task.text,
        "status": task.status.value,
        "deadline": task.deadline,
        "assignee": task.assignee,
        "link": task.link,
    }


def _show_tasks(tasks: list[Task], as_json: bool, empty_msg: str = "No tasks.") -> None:
    """Shared task display logic."""
    if as_json:
        click.echo(json.dumps([_task_dict(t) for t in tasks], indent=2))
        return

    if not tasks:
        click.echo(empty_msg)
        return

    for task in tasks:
        click.echo(f"[{task.id}] {task.text} ({task.status.label})")
        details = f"    Deadline: {task.deadline}  Assignee: {task.assignee}"
        if task.link:
            details += f"  Link: {task.link}"
        click.echo(details)


def _parse_id(raw: str) -> int:
    try:
        return int(raw)
    except ValueError:
        raise click.UsageError(f"Invalid task id: {raw}")


# ============== Shell commands ==============


def _cmd_add(session: TaskSession, args: list[str]) -> None:
    text = click.prompt("Task", default="", show_default=False)
    deadline = click.prompt("Deadline (YYYY-MM-DD)", default="", show_default=False)
    assignee = click.prompt("Assignee", default="", show_default=False)
    link = click.prompt("Link", default="", show_default=False)

    task = session.create_task(text, deadline=deadline, assignee=assignee, link=link)
    if task is None:
        click.echo("Task text is empty, nothing created.")
        return
    click.echo(f"✓ Created [{task.id}] {task.text}")


def _cmd_list(session: TaskSession, args: list[str]) -> None:
    as_json = "--json" in args
    if "--all" in args:
        _show_tasks(session.store.snapshot(), as_json)
    else:
        _show_tasks(session.visible_tasks(), as_json, f"No {session.active_tab.label} tasks.")


def _cmd_tab(session: TaskSession, args: list[str]) -> None:
    if len(args) != 1:
        raise click.UsageError("Usage: tab <status>")
    tab = session.select_tab(args[0])
    click.echo(f"Showing {tab.label}")
    _show_tasks(session.visible_tasks(), False, f"No {tab.label} tasks.")


def _cmd_tabs(session: TaskSession, args: list[str]) -> None:
    for status, count in session.tab_counts().items():
        marker = "*" if status == session.active_tab else " "
        click.echo(f"{marker} {status.label:10} {count}")


def _cmd_status(session: TaskSession, args: list[str]) -> None:
    if len(args) != 2:
        raise click.UsageError("Usage: status <id> <status>")
    task_id = _parse_id(args[0])
    task = session.change_status(task_id, args[1])
    if task is None:
        click.echo(f"No task with id {task_id}.")
        return
    click.echo(f"✓ [{task.id}] {task.text} is now {task.status.label}")


def _cmd_remove(session: TaskSession, args: list[str]) -> None:
    if len(args) != 1:
        raise click.UsageError("Usage: remove <id>")
    task_id = _parse_id(args[0])
    if session.remove_task(task_id):
        click.echo(f"✓ Removed task {task_id}")
    else:
        click.echo(f"No task with id {task_id}.")


def _cmd_export(session: TaskSession, args: list[str]) -> None:
    path = session.download(args[0] if args else None)
    click.echo(f"✓ Exported {len(session.store)} task(s) to {path}")


def _cmd_sweep(session: TaskSession, args: list[str]) -> None:
    overdue = session.check_deadlines()
    if not overdue:
        click.echo("Nothing overdue.")
        return
    for task in overdue:
        click.echo(f"! {task.text} (deadline {task.deadline})")


def _cmd_help(session: TaskSession, args: list[str]) -> None:
    click.echo(SHELL_HELP)


SHELL_COMMANDS = {
    "add": _cmd_add,
    "list": _cmd_list,
    "ls": _cmd_list,
    "tab": _cmd_tab,
    "tabs": _cmd_tabs,
    "status": _cmd_status,
    "remove": _cmd_remove,
    "rm": _cmd_remove,
    "export": _cmd_export,
    "sweep": _cmd_sweep,
    "help": _cmd_help,
}


def run_shell(session: TaskSession) -> None:
    """Read and dispatch shell commands until quit or end of input."""
    while True:
        try:
            line = click.prompt(f"tasklanes [{session.active_tab.value}]", default="", show_default=False)
        except click.Abort:
            click.echo()
            return

        try:
            words = shlex.split(line)
        except ValueError as e:
            click.echo(f"Error: {e}", err=True)
            continue
        if not words:
            continue

        name, args = words[0].lower(), words[1:]
        if name in ("quit", "exit"):
            return

        handler = SHELL_COMMANDS.get(name)
        if handler is None:
            click.echo(f"Unknown command: {name} (try 'help')", err=True)
            continue

        try:
            handler(session, args)
        except click.Abort:
            # Input ended inside a form
            click.echo()
            return
        except (TaskError, click.UsageError, OSError) as e:
            click.echo(f"Error: {e}", err=True)


@main.command()
@click.option("--debug", is_flag=True, help="Enable debug logging")
@click.option("--interval", type=click.IntRange(min=1), default=None,
              help="Seconds between deadline checks (default from config)")
def shell(debug: bool, interval: int | None):
    """Start an interactive task session."""
    config = load_config()
    _setup_logging(debug, config.log_level)
    if interval is not None:
        config.sweep_interval_seconds = interval

    try:
        session = build_session(config)
    except ValueError as e:
        click.echo(f"Configuration error: {e}", err=True)
        sys.exit(1)

    click.echo("Todo App - type 'help' for commands")
    with session:
        run_shell(session)
    click.echo("Session ended, tasks discarded.")


@main.command("export-template")
@click.argument("path", required=False, type=click.Path(dir_okay=False))
def export_template(path: str | None):
    """Write an empty spreadsheet with only the header row."""
    config = load_config()
    target = path or config.export_path
    try:
        written = ExcelExporter().write(export_rows([]), target)
    except OSError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)
    click.echo(f"✓ Template saved to {written}")


@main.command()
def lanes():
    """List the status lanes."""
    for status in TaskStatus:
        click.echo(f"{status.value:10} {status.label}")


if __name__ == "__main__":
    main()
