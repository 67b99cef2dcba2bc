# src/task_tracker/cli/demo.py

"""Scripted walkthrough of the task manager (used by `task-tracker --demo` and /demo)."""

from __future__ import annotations

from collections.abc import Callable

from ..tasks.task_manager import TaskManager
from ..tasks.task_models import Priority, TaskFilter

Emit = Callable[[str], None]

DIVIDER = "==============================="


def format_divider(title: str = "") -> str:
    lines = ["", DIVIDER]
    if title:
        lines.append(title)
    lines.extend([DIVIDER, ""])
    return "\n".join(lines)


def show_tasks(manager: TaskManager, filter: str = TaskFilter.ALL, emit: Emit = print) -> list[str]:
    lines = manager.list_tasks(filter)
    emit(format_divider(f"Showing {str(filter).upper()} Tasks"))
    for line in lines:
        emit(line)
    return lines


def run_demo(manager: TaskManager, emit: Emit = print) -> None:
    emit(format_divider("Task Manager Demo"))

    manager.add_task("Build Portfolio", "Finish my developer portfolio", Priority.HIGH)
    manager.add_task("Prepare Resume", "Update resume for internship", Priority.MEDIUM)
    manager.add_task("Study DSA", "Solve 5 LeetCode problems", Priority.HIGH)

    show_tasks(manager, TaskFilter.ALL, emit)

    first = manager.tasks[0]
    manager.toggle_task_completion(first.id)

    show_tasks(manager, TaskFilter.COMPLETED, emit)
    show_tasks(manager, TaskFilter.PENDING, emit)

    manager.remove_task(manager.tasks[1].id)
    show_tasks(manager, TaskFilter.ALL, emit)

    emit(format_divider("Simulation Ended"))
    emit("✅ Task Manager finished execution.")
