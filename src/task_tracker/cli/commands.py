# src/task_tracker/cli/commands.py

from __future__ import annotations

import inspect
import logging
from collections.abc import Callable
from typing import cast

from ..core.state import AppState
from ..storage.kv_store import InMemoryKeyValueStore
from ..tasks.task_manager import TaskManager
from ..tasks.task_models import TaskFilter
from .demo import run_demo

CommandEmitter = Callable[[str], None]
CommandHandler2 = Callable[[AppState, list[str]], str]
CommandHandler3 = Callable[[AppState, list[str], CommandEmitter | None], str]
CommandHandler = CommandHandler2 | CommandHandler3

logger = logging.getLogger(__name__)


class CommandRegistry:
    """Simple slash-command registry used by the console connector (/help, /add, ...)."""

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

    def handle(
        self,
        state: AppState,
        line: str,
        emit: CommandEmitter | None = None,
    ) -> str | None:
        """
        Handle a string like "/command args".
        Returns a reply string or None if not a command.
        """
        if not line.startswith("/"):
            return None

        parts = line[1:].split()
        if not parts:
            return "Empty command. Use /help to list available commands."

        name = parts[0].lower()
        args = parts[1:]

        handler = self._handlers.get(name)
        if not handler:
            return f"Unknown command: /{name}. Use /help to list available commands."

        try:
            nparams = len(inspect.signature(handler).parameters)
        except (TypeError, ValueError):
            nparams = 3

        if nparams >= 3:
            h3 = cast(CommandHandler3, handler)
            return h3(state, args, emit)

        h2 = cast(CommandHandler2, handler)
        return h2(state, args)

    def build_help(self) -> str:
        lines = ["Available commands:"]
        for name, help_text in self._help.items():
            lines.append(f"  /{name} - {help_text}")
        return "\n".join(lines)


registry = CommandRegistry()


def cmd_help(state: AppState, args: list[str]) -> str:
    return registry.build_help()


def cmd_add(state: AppState, args: list[str]) -> str:
    """
    /add <title> [| description] [| priority]
    """
    parts = [p.strip() for p in " ".join(args).split("|")]
    title = parts[0]
    if not title:
        return "Usage: /add <title> [| description] [| priority]"
    description = parts[1] if len(parts) > 1 else ""
    priority = parts[2] if len(parts) > 2 and parts[2] else None

    task = state.manager.add_task(title, description, priority)
    return f"Added {task.id}: {task.describe()}"


def cmd_list(state: AppState, args: list[str]) -> str:
    """
    /list            -> all tasks
    /list completed  -> done tasks only
    /list pending    -> open tasks only
    """
    raw = args[0].lower() if args else TaskFilter.ALL.value
    flt = TaskFilter.parse(raw)
    tasks = state.manager.filter_tasks(flt)
    if not tasks:
        return f"No {flt.value} tasks."
    lines = [f"{flt.value.upper()} tasks:"]
    for t in tasks:
        lines.append(f"  {t.id}  {t.describe()}")
    return "\n".join(lines)


def cmd_show(state: AppState, args: list[str]) -> str:
    if len(args) != 1:
        return "Usage: /show <id>"
    task = state.manager.get_task(args[0])
    if task is None:
        return f"No task with id {args[0]}."
    return (
        f"{task.describe()}\n"
        f"  id: {task.id}\n"
        f"  created: {task.created_at}\n"
        f"  description: {task.description or '-'}"
    )


def cmd_done(state: AppState, args: list[str]) -> str:
    if len(args) != 1:
        return "Usage: /done <id>"
    task = state.manager.toggle_task_completion(args[0])
    if task is None:
        return f"No task with id {args[0]}."
    return task.describe()


def cmd_rm(state: AppState, args: list[str]) -> str:
    if len(args) != 1:
        return "Usage: /rm <id>"
    existed = state.manager.get_task(args[0]) is not None
    state.manager.remove_task(args[0])
    return f"Task {args[0]} removed." if existed else f"No task with id {args[0]}."


def cmd_clear(state: AppState, args: list[str]) -> str:
    state.manager.clear()
    return "All tasks cleared."


def cmd_demo(state: AppState, args: list[str], emit: CommandEmitter | None = None) -> str:
    """Run the scripted demo against a throwaway in-memory store."""
    out: list[str] = []
    run_demo(TaskManager(InMemoryKeyValueStore()), emit=emit or out.append)
    return "\n".join(out) if out else "Demo finished."


registry.register("help", cmd_help, help_text="Show available commands.", aliases=["h", "?"])
registry.register("add", cmd_add, help_text="Add a task: /add <title> [| description] [| priority].")
registry.register("list", cmd_list, help_text="List tasks: /list [all|completed|pending].", aliases=["ls"])
registry.register("show", cmd_show, help_text="Show task details: /show <id>.")
registry.register("done", cmd_done, help_text="Toggle completion: /done <id>.", aliases=["toggle"])
registry.register("rm", cmd_rm, help_text="Remove a task: /rm <id>.", aliases=["remove"])
registry.register("clear", cmd_clear, help_text="Delete every stored task.")
registry.register("demo", cmd_demo, help_text="Run the scripted demo (does not touch your tasks).")
