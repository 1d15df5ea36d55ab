"""Rich renderables for the task list and the form."""

from rich.console import Group
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from taskpad.editor.view import TaskEditorView
from taskpad.tasks.models import Task, TaskPriority

PRIORITY_STYLES = {
    TaskPriority.LOW: "green",
    TaskPriority.MEDIUM: "yellow",
    TaskPriority.HIGH: "bold red",
}


def priority_text(priority: TaskPriority) -> Text:
    return Text(priority.value, style=PRIORITY_STYLES[priority])


def task_table(tasks: list[Task], editing_id: int | None = None) -> Table:
    """Build the task list table.

    One row per task with its title, description and priority. The row
    being edited, if any, is highlighted.
    """
    table = Table(title="Tasks", show_lines=False, padding=(0, 1), expand=False)
    table.add_column("ID", style="dim", no_wrap=True, justify="right")
    table.add_column("Title", style="bold", max_width=40)
    table.add_column("Description", max_width=60)
    table.add_column("Priority", no_wrap=True)
    table.add_column("Actions", style="dim", no_wrap=True)

    for task in tasks:
        table.add_row(
            str(task.id),
            Text(task.title),
            Text(task.description),
            priority_text(task.priority),
            f"/edit {task.id}  /delete {task.id}",
            style="reverse" if task.id == editing_id else None,
        )

    if not tasks:
        table.caption = "No tasks yet. Use /add <title> to create one."

    return table


def form_panel(view: TaskEditorView) -> Panel:
    """Build the form panel, titled with the current submit action."""
    form = Table(show_header=False, box=None, padding=(0, 2, 0, 0))
    form.add_column("Field", style="bold cyan", no_wrap=True)
    form.add_column("Value")
    form.add_row("Title", Text(view.form.title) if view.form.title else Text("(empty)", style="dim"))
    form.add_row(
        "Description",
        Text(view.form.description) if view.form.description else Text("(empty)", style="dim"),
    )
    form.add_row("Priority", priority_text(view.form.priority))

    if view.editing:
        title = f"[bold]Edit task #{view.editing_id}[/bold]"
        border = "yellow"
    else:
        title = "[bold]New task[/bold]"
        border = "cyan"

    footer = Text(f"/submit to {view.submit_label.lower()}", style="dim italic")
    return Panel(
        Group(form, footer),
        title=title,
        subtitle=Text(f"[{view.submit_label}]"),
        border_style=border,
    )
