"""Slash commands that drive the task editor.

Form commands (/title, /description, /priority) only change the form.
/submit, /add, /delete and /edit go through the editor view, which is
the only thing that talks to the store.
"""

from typing import Any

from taskpad.cli.commands import Command, CommandCategory
from taskpad.tasks.models import TaskPriority

_PRIORITY_CHOICES = "|".join(p.value.lower() for p in TaskPriority)


def _parse_task_id(app: Any, raw: str, usage: str) -> int | None:
    """Read a task id argument, reporting bad input on the app."""
    raw = raw.strip().lstrip("#")
    if not raw:
        app.add_error(f"Usage: {usage}")
        return None
    try:
        return int(raw)
    except ValueError:
        app.add_error(f"Invalid task id: {raw}")
        return None


class ListCommand(Command):
    """Show the visible task list."""

    def __init__(self) -> None:
        super().__init__(
            name="list",
            description="Show all tasks",
            aliases=["ls"],
            category=CommandCategory.TASKS,
        )

    async def execute(self, args: str, app: Any) -> None:
        app.show_tasks()


class AddCommand(Command):
    """Fill the form and submit it as a new task."""

    def __init__(self) -> None:
        super().__init__(
            name="add",
            description="Add a task in one step",
            aliases=["new"],
            usage=f"/add <title> [--description=...] [--priority={_PRIORITY_CHOICES}]",
            examples=[
                "/add Write report",
                '/add "Fix login" --description="Users get logged out" --priority=high',
            ],
            category=CommandCategory.TASKS,
        )

    async def execute(self, args: str, app: Any) -> None:
        view = app.view
        if view.editing:
            app.add_error(
                f"Task #{view.editing_id} is being edited. /submit it before adding a new task."
            )
            return

        parsed = self.parse_args(args)
        description = parsed.get_option("description")
        if description is None:
            description = parsed.get_option("d", "")
        priority = parsed.get_option("priority")
        if priority is None:
            priority = parsed.get_option("p", TaskPriority.LOW)

        # all three fields are set so nothing carries over from the form
        try:
            view.update_form(
                title=parsed.positional,
                description=description,
                priority=priority,
            )
        except ValueError as e:
            app.add_error(str(e))
            return

        view.submit()
        added = view.visible_tasks[-1] if view.visible_tasks else None
        if added is not None:
            app.add_success(f"Added task #{added.id}: {added.title}")
        app.show_tasks()


class TitleCommand(Command):
    """Set the form title."""

    def __init__(self) -> None:
        super().__init__(
            name="title",
            description="Set the title field",
            aliases=["t"],
            usage="/title <text>",
            examples=["/title Write report"],
            category=CommandCategory.FORM,
        )

    async def execute(self, args: str, app: Any) -> None:
        app.view.update_form(title=args.strip())
        app.show_form()


class DescriptionCommand(Command):
    """Set the form description."""

    def __init__(self) -> None:
        super().__init__(
            name="description",
            description="Set the description field",
            aliases=["desc", "d"],
            usage="/description <text>",
            examples=["/description Quarterly numbers for the board"],
            category=CommandCategory.FORM,
        )

    async def execute(self, args: str, app: Any) -> None:
        app.view.update_form(description=args.strip())
        app.show_form()


class PriorityCommand(Command):
    """Set the form priority."""

    def __init__(self) -> None:
        super().__init__(
            name="priority",
            description="Set the priority field",
            aliases=["p"],
            usage=f"/priority <{_PRIORITY_CHOICES}>",
            examples=["/priority high"],
            category=CommandCategory.FORM,
        )

    async def execute(self, args: str, app: Any) -> None:
        try:
            app.view.update_form(priority=args.strip())
        except ValueError as e:
            app.add_error(str(e))
            return
        app.show_form()


class FormCommand(Command):
    """Show the form."""

    def __init__(self) -> None:
        super().__init__(
            name="form",
            description="Show the form and the current mode",
            aliases=["f"],
            category=CommandCategory.FORM,
        )

    async def execute(self, args: str, app: Any) -> None:
        app.show_form()


class SubmitCommand(Command):
    """Submit the form: add a task, or update the one being edited."""

    def __init__(self) -> None:
        super().__init__(
            name="submit",
            description="Add the form as a task, or save the task being edited",
            aliases=["save", "s"],
            category=CommandCategory.FORM,
        )

    async def execute(self, args: str, app: Any) -> None:
        view = app.view
        editing_id = view.editing_id
        if editing_id is not None and editing_id not in app.store:
            view.submit()
            app.add_warning(f"Task #{editing_id} no longer exists; edit discarded")
            app.show_tasks()
            return
        view.submit()
        if editing_id is not None:
            app.add_success(f"Updated task #{editing_id}")
        elif view.visible_tasks:
            app.add_success(f"Added task #{view.visible_tasks[-1].id}")
        app.show_tasks()


class EditCommand(Command):
    """Load a task into the form for editing."""

    def __init__(self) -> None:
        super().__init__(
            name="edit",
            description="Load a task into the form for editing",
            aliases=["e"],
            usage="/edit <id>",
            examples=["/edit 3"],
            category=CommandCategory.TASKS,
        )

    async def execute(self, args: str, app: Any) -> None:
        task_id = _parse_task_id(app, args, self.usage)
        if task_id is None:
            return
        task = app.view.find_visible(task_id)
        if task is None:
            app.add_warning(f"No task #{task_id}")
            return
        app.view.begin_edit(task)
        if app.settings.show_form_after_edit:
            app.show_form()
        else:
            app.add_message(f"Editing task #{task_id}. /submit to save.")


class DeleteCommand(Command):
    """Delete a task."""

    def __init__(self) -> None:
        super().__init__(
            name="delete",
            description="Delete a task",
            aliases=["rm", "del"],
            usage="/delete <id>",
            examples=["/delete 2"],
            category=CommandCategory.TASKS,
        )

    async def execute(self, args: str, app: Any) -> None:
        task_id = _parse_task_id(app, args, self.usage)
        if task_id is None:
            return
        task = app.view.find_visible(task_id)
        if task is None:
            app.add_warning(f"No task #{task_id}")
            return
        app.view.remove(task)
        app.add_success(f"Deleted task #{task_id}")
        app.show_tasks()


TASK_COMMANDS: tuple[type[Command], ...] = (
    ListCommand,
    AddCommand,
    TitleCommand,
    DescriptionCommand,
    PriorityCommand,
    FormCommand,
    SubmitCommand,
    EditCommand,
    DeleteCommand,
)
