# src/taskboard/cli/commands.py

from __future__ import annotations

import logging
import shlex
from collections.abc import Callable, Sequence

from ..core.state import AppState, require_store
from ..tasks.task_api import TaskValidationError, build_task, revise_task
from ..tasks.task_filters import filter_options
from ..tasks.task_models import ALL, DueDateFilter, Priority, StatusFilter, Task, TaskFilters
from ..tasks.task_store import TaskStore

CommandHandler = Callable[[AppState, list[str]], str]

logger = logging.getLogger(__name__)

# key=value aliases accepted by /add and /edit
TASK_FIELD_ALIASES: dict[str, str] = {
    "name": "task_name",
    "task": "task_name",
    "priority": "priority",
    "p": "priority",
    "category": "category",
    "cat": "category",
    "user": "assigned_user",
    "assignee": "assigned_user",
    "due": "due_date",
    "on": "assigned_on",
    "assigned_on": "assigned_on",
}

# key=value aliases accepted by /filter
FILTER_FIELD_ALIASES: dict[str, str] = {
    "status": "status",
    "priority": "priority",
    "p": "priority",
    "category": "category",
    "cat": "category",
    "due": "due_date",
    "user": "assigned_user",
    "assignee": "assigned_user",
}


class CommandError(Exception):
    """User-facing command failure; the message is shown as the reply."""


class CommandRegistry:
    """Slash-command registry used by connectors (/help, /add, /filter, ...)."""

    def __init__(self) -> None:
        self._handlers: dict[str, CommandHandler] = {}
        self._help: dict[str, str] = {}

    def register(
        self,
        name: str,
        handler: CommandHandler,
        help_text: str,
        aliases: list[str] | None = None,
    ) -> None:
        aliases = aliases or []
        key = name.lower()
        self._handlers[key] = handler
        self._help[key] = help_text
        for alias in aliases:
            self._handlers[alias.lower()] = handler

    def handle(self, state: AppState, line: str) -> str | None:
        """
        Handle a string like "/command args".
        Returns a reply string or None if not a command.
        """
        if not line.startswith("/"):
            return None

        try:
            parts = shlex.split(line[1:])
        except ValueError as e:
            return f"Could not parse command: {e}."
        if not parts:
            return "Empty command. Use /help to list available commands."

        name = parts[0].lower()
        args = parts[1:]

        handler = self._handlers.get(name)
        if not handler:
            return f"Unknown command: /{name}. Use /help to list available commands."

        try:
            return handler(state, args)
        except (CommandError, TaskValidationError) as e:
            return str(e)

    def build_help(self) -> str:
        lines = ["Available commands:"]
        for name, help_text in self._help.items():
            lines.append(f"  /{name} - {help_text}")
        return "\n".join(lines)


registry = CommandRegistry()


# ---- helpers ----


def _id_len(state: AppState) -> int:
    return int(getattr(state.settings, "id_display_length", 8) or 8)


def _parse_pairs(args: Sequence[str], aliases: dict[str, str]) -> dict[str, str]:
    out: dict[str, str] = {}
    for arg in args:
        key, sep, value = arg.partition("=")
        if not sep:
            raise CommandError(f"Expected key=value, got {arg!r}.")
        field_name = aliases.get(key.strip().lower())
        if field_name is None:
            raise CommandError(
                f"Unknown field {key!r}. Known: {', '.join(sorted(aliases))}."
            )
        out[field_name] = value
    return out


def _resolve_task(store: TaskStore, ref: str) -> Task:
    """Find a task by full id or unique id prefix."""
    ref = ref.strip()
    exact = store.find_task(ref)
    if exact is not None:
        return exact
    hits = [t for t in store.tasks if t.id.startswith(ref)] if ref else []
    if not hits:
        raise CommandError(f"No task matches id {ref!r}.")
    if len(hits) > 1:
        raise CommandError(f"Id {ref!r} is ambiguous ({len(hits)} tasks). Use more characters.")
    return hits[0]


def _single_ref(args: Sequence[str], usage: str) -> str:
    if len(args) != 1:
        raise CommandError(f"Usage: {usage}")
    return args[0]


def _normalize_filter(field_name: str, raw: str) -> str:
    value = raw.strip()
    if not value or value.lower() == ALL:
        return ALL

    if field_name == "status":
        try:
            return StatusFilter(value.lower())
        except ValueError:
            raise CommandError(
                f"Invalid status {raw!r}. Use: {', '.join(s.value for s in StatusFilter)}."
            ) from None
    if field_name == "due_date":
        try:
            return DueDateFilter(value.lower())
        except ValueError:
            raise CommandError(
                f"Invalid due filter {raw!r}. Use: {', '.join(d.value for d in DueDateFilter)}."
            ) from None
    if field_name == "priority":
        try:
            return Priority.parse(value)
        except ValueError:
            raise CommandError(
                f"Invalid priority {raw!r}. Use: all, {', '.join(p.value for p in Priority)}."
            ) from None
    return value


def describe_filters(filters: TaskFilters) -> str:
    active = filters.active()
    if not active:
        return "Filters: none"
    return "Filters: " + ", ".join(f"{k}={v}" for k, v in active.items())


def format_task_table(tasks: Sequence[Task], id_len: int = 8) -> str:
    """Plain-text task table (one row per task)."""
    if not tasks:
        return "No tasks match the selected filters."

    headers = ("ID", "ST", "TASK", "PRIORITY", "CATEGORY", "DUE", "ASSIGNEE")
    rows = [
        (
            t.id[:id_len],
            "[x]" if t.completed else "[ ]",
            t.task_name,
            str(t.priority),
            t.category,
            t.due_date.isoformat() if t.due_date else "-",
            t.assigned_user,
        )
        for t in tasks
    ]
    widths = [max(len(h), *(len(r[i]) for r in rows)) for i, h in enumerate(headers)]

    def fmt(cells: Sequence[str]) -> str:
        return "  ".join(c.ljust(w) for c, w in zip(cells, widths)).rstrip()

    lines = [fmt(headers), "-" * len(fmt(headers))]
    lines.extend(fmt(r) for r in rows)
    return "\n".join(lines)


# ---- commands ----


def cmd_help(state: AppState, args: list[str]) -> str:
    return registry.build_help()


def cmd_list(state: AppState, args: list[str]) -> str:
    store = require_store(state)
    tasks = store.visible_tasks(state.clock.now())
    return (
        f"{describe_filters(store.filters)} | showing {len(tasks)} of {store.count_tasks()}\n"
        f"{format_task_table(tasks, _id_len(state))}"
    )


def cmd_add(state: AppState, args: list[str]) -> str:
    """
    /add name="Write docs" category=Docs user=Alice [priority=High] [due=2025-01-31] [on=2025-01-01]
    """
    if not args:
        return (
            "Usage: /add name=... category=... user=... "
            "[priority=Low|Medium|High] [due=YYYY-MM-DD] [on=YYYY-MM-DD]"
        )

    values = _parse_pairs(args, TASK_FIELD_ALIASES)
    store = require_store(state)
    task = build_task(
        task_name=values.get("task_name", ""),
        category=values.get("category", ""),
        assigned_user=values.get("assigned_user", ""),
        priority=values.get("priority", Priority.MEDIUM),
        due_date=values.get("due_date"),
        assigned_on=values.get("assigned_on"),
        ids=state.ids,
        clock=state.clock,
    )
    store.add_task(task)
    logger.info("Task added id=%s name=%s", task.id, task.task_name)
    return f"Added task {task.id[:_id_len(state)]}: {task.task_name}"


def cmd_edit(state: AppState, args: list[str]) -> str:
    """
    /edit <id> key=value ...   (same keys as /add)
    """
    if len(args) < 2:
        return "Usage: /edit <id> key=value ..."

    store = require_store(state)
    task = _resolve_task(store, args[0])
    changes = _parse_pairs(args[1:], TASK_FIELD_ALIASES)
    edited = revise_task(task, **changes)
    store.update_task(edited)
    logger.info("Task updated id=%s fields=%s", task.id, ",".join(sorted(changes)))
    return f"Updated task {task.id[:_id_len(state)]}: {edited.task_name}"


def cmd_done(state: AppState, args: list[str]) -> str:
    store = require_store(state)
    task = _resolve_task(store, _single_ref(args, "/done <id>"))
    store.toggle_task(task.id)
    now_done = not task.completed
    return f"Task {task.id[:_id_len(state)]} marked as {'complete' if now_done else 'incomplete'}."


def cmd_rm(state: AppState, args: list[str]) -> str:
    store = require_store(state)
    task = _resolve_task(store, _single_ref(args, "/rm <id>"))
    store.delete_task(task.id)
    logger.info("Task deleted id=%s", task.id)
    return f"Deleted task {task.id[:_id_len(state)]}: {task.task_name}"


def cmd_filter(state: AppState, args: list[str]) -> str:
    """
    /filter                      -> show active filters
    /filter status=incomplete due=overdue user=Bob ...
    """
    store = require_store(state)
    if not args:
        return describe_filters(store.filters)

    raw = _parse_pairs(args, FILTER_FIELD_ALIASES)
    partial = {name: _normalize_filter(name, value) for name, value in raw.items()}
    store.set_filters(partial)
    return describe_filters(store.filters)


def cmd_clear(state: AppState, args: list[str]) -> str:
    store = require_store(state)
    store.clear_filters()
    return "Filters cleared."


def cmd_options(state: AppState, args: list[str]) -> str:
    store = require_store(state)
    categories, users = filter_options(store.tasks)
    return (
        "Filter options:\n"
        f"  status: {', '.join(s.value for s in StatusFilter)}\n"
        f"  priority: all, {', '.join(p.value for p in Priority)}\n"
        f"  category: all{''.join(', ' + c for c in categories)}\n"
        f"  due: {', '.join(d.value for d in DueDateFilter)}\n"
        f"  user: all{''.join(', ' + u for u in users)}"
    )


def cmd_status(state: AppState, args: list[str]) -> str:
    store = require_store(state)
    total = store.count_tasks()
    done = sum(1 for t in store.tasks if t.completed)
    shown = len(store.visible_tasks(state.clock.now()))
    return (
        "Status:\n"
        f"  Tasks: {total} ({done} completed, {total - done} open)\n"
        f"  Visible: {shown}\n"
        f"  {describe_filters(store.filters)}"
    )


registry.register("help", cmd_help, help_text="Show available commands.", aliases=["h", "?"])
registry.register("list", cmd_list, help_text="Show tasks matching the active filters.", aliases=["ls"])
registry.register(
    "add",
    cmd_add,
    help_text="Add a task: /add name=... category=... user=... [priority=] [due=] [on=].",
)
registry.register("edit", cmd_edit, help_text="Edit a task: /edit <id> key=value ...")
registry.register("done", cmd_done, help_text="Toggle completion: /done <id>.", aliases=["toggle"])
registry.register("rm", cmd_rm, help_text="Delete a task: /rm <id>.", aliases=["delete", "del"])
registry.register(
    "filter",
    cmd_filter,
    help_text="Set filters: /filter status= priority= category= due= user= (value 'all' resets one).",
)
registry.register("clear", cmd_clear, help_text="Reset all filters to 'all'.")
registry.register("options", cmd_options, help_text="List values available for filtering.")
registry.register("status", cmd_status, help_text="Show task counts and active filters.")
