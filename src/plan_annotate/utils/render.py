"""Serialize annotated diff trees back to the scheduler's JSON shape."""

from __future__ import annotations

from typing import Any

from plan_annotate.model.diff import (
    FieldDiff,
    JobDiff,
    ObjectDiff,
    TaskDiff,
    TaskGroupDiff,
)


def render_job_diff(diff: JobDiff) -> dict[str, Any]:
    """Serialize *diff* to a JSON-serializable dict.

    Empty lists are written as ``None`` (JSON ``null``), matching what the
    scheduler API emits, so that :func:`~plan_annotate.parser.diff.parse_job_diff`
    and this function round-trip a well-formed payload.

    Returns:
        A dict with keys ``"Type"``, ``"ID"``, ``"Fields"``, ``"Objects"`` and
        ``"TaskGroups"``.
    """
    return {
        "Type": diff.type,
        "ID": diff.id,
        "Fields": _list([_field(f) for f in diff.fields]),
        "Objects": _list([_object(o) for o in diff.objects]),
        "TaskGroups": _list([_task_group(tg) for tg in diff.task_groups]),
    }


def summarize_updates(diff: JobDiff) -> dict[str, dict[str, int]]:
    """Return the merged update counts keyed by task-group name.

    Groups whose ``updates`` map was never populated are left out.
    """
    return {
        tg.name: dict(tg.updates)
        for tg in diff.task_groups
        if tg.updates
    }


def _task_group(tg: TaskGroupDiff) -> dict[str, Any]:
    return {
        "Type": tg.type,
        "Name": tg.name,
        "Fields": _list([_field(f) for f in tg.fields]),
        "Objects": _list([_object(o) for o in tg.objects]),
        "Tasks": _list([_task(t) for t in tg.tasks]),
        "Updates": dict(tg.updates) if tg.updates is not None else None,
        "Annotations": _list(list(tg.annotations)),
    }


def _task(task: TaskDiff) -> dict[str, Any]:
    return {
        "Type": task.type,
        "Name": task.name,
        "Fields": _list([_field(f) for f in task.fields]),
        "Objects": _list([_object(o) for o in task.objects]),
        "Annotations": _list(list(task.annotations)),
    }


def _object(obj: ObjectDiff) -> dict[str, Any]:
    return {
        "Type": obj.type,
        "Name": obj.name,
        "Fields": _list([_field(f) for f in obj.fields]),
        "Objects": _list([_object(o) for o in obj.objects]),
    }


def _field(fd: FieldDiff) -> dict[str, Any]:
    return {
        "Type": fd.type,
        "Name": fd.name,
        "Old": fd.old,
        "New": fd.new,
        "Annotations": _list(list(fd.annotations)),
    }


def _list(items: list[Any]) -> list[Any] | None:
    return items or None
