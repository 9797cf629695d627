"""Decoder for job diffs and plan annotations in the scheduler's JSON shape.

The scheduler API serialises diff trees with capitalised keys::

    {"Type": "Edited", "ID": "web", "TaskGroups": [
        {"Type": "Edited", "Name": "frontend", "Updates": null,
         "Fields": [{"Type": "Edited", "Name": "Count", "Old": "1", "New": "3",
                     "Annotations": null}],
         "Objects": null, "Tasks": [...]}]}

Lists may be ``null``.  Every node is validated as it is built; the first
problem raises :class:`~plan_annotate.errors.DiffParseError` with the path of
the offending key.
"""

from __future__ import annotations

import json
from collections.abc import Mapping
from typing import Any

from plan_annotate.errors import DiffParseError
from plan_annotate.model.diff import (
    DIFF_TYPES,
    DiffType,
    FieldDiff,
    JobDiff,
    ObjectDiff,
    TaskDiff,
    TaskGroupDiff,
)
from plan_annotate.model.plan import DesiredUpdates, PlanAnnotations

# Wire key → DesiredUpdates attribute.
_DESIRED_UPDATE_KEYS: dict[str, str] = {
    "Ignore": "ignore",
    "Place": "place",
    "Migrate": "migrate",
    "Stop": "stop",
    "InPlaceUpdate": "in_place_update",
    "DestructiveUpdate": "destructive_update",
}


def load_job_diff(text: str | bytes) -> JobDiff:
    """Decode JSON *text* into a :class:`JobDiff`.

    Raises:
        DiffParseError: If *text* is not valid JSON or not a job diff.
    """
    return parse_job_diff(_loads(text))


def load_plan_annotations(text: str | bytes) -> PlanAnnotations:
    """Decode JSON *text* into :class:`PlanAnnotations`.

    Raises:
        DiffParseError: If *text* is not valid JSON or not plan annotations.
    """
    return parse_plan_annotations(_loads(text))


def parse_job_diff(payload: Mapping[str, Any]) -> JobDiff:
    """Build a :class:`JobDiff` from its wire-shaped mapping.

    Args:
        payload: Decoded JSON object for the job diff.

    Returns:
        The typed diff tree.

    Raises:
        DiffParseError: If a node has an unexpected shape or ``Type``.
    """
    node = _mapping(payload, "JobDiff")
    return JobDiff(
        type=_diff_type(node, "JobDiff"),
        id=_string(node, "ID", "JobDiff"),
        fields=[_field_diff(f, p) for f, p in _items(node, "Fields", "JobDiff")],
        objects=[_object_diff(o, p) for o, p in _items(node, "Objects", "JobDiff")],
        task_groups=[
            _task_group_diff(tg, p) for tg, p in _items(node, "TaskGroups", "JobDiff")
        ],
    )


def parse_plan_annotations(payload: Mapping[str, Any]) -> PlanAnnotations:
    """Build :class:`PlanAnnotations` from its wire-shaped mapping.

    Only ``DesiredTGUpdates`` is read.  Missing counts default to ``0``.

    Raises:
        DiffParseError: If a count is not a non-negative integer.
    """
    node = _mapping(payload, "PlanAnnotations")
    raw = node.get("DesiredTGUpdates")
    if raw is None:
        raw = {}
    groups = _mapping(raw, "DesiredTGUpdates")

    desired: dict[str, DesiredUpdates] = {}
    for name, counts in groups.items():
        path = f"DesiredTGUpdates[{name!r}]"
        entry = _mapping(counts, path)
        values: dict[str, int] = {}
        for key, attr in _DESIRED_UPDATE_KEYS.items():
            value = entry.get(key, 0)
            if isinstance(value, bool) or not isinstance(value, int) or value < 0:
                raise DiffParseError(
                    f"{path}.{key} must be a non-negative integer, got {value!r}"
                )
            values[attr] = value
        desired[str(name)] = DesiredUpdates(**values)
    return PlanAnnotations(desired_tg_updates=desired)


# ---------------------------------------------------------------------------
# Node builders
# ---------------------------------------------------------------------------

def _task_group_diff(payload: Any, path: str) -> TaskGroupDiff:
    node = _mapping(payload, path)
    return TaskGroupDiff(
        name=_string(node, "Name", path),
        type=_diff_type(node, path),
        fields=[_field_diff(f, p) for f, p in _items(node, "Fields", path)],
        objects=[_object_diff(o, p) for o, p in _items(node, "Objects", path)],
        tasks=[_task_diff(t, p) for t, p in _items(node, "Tasks", path)],
        updates=_updates(node, path),
        annotations=_annotations(node, path),
    )


def _task_diff(payload: Any, path: str) -> TaskDiff:
    node = _mapping(payload, path)
    return TaskDiff(
        name=_string(node, "Name", path),
        type=_diff_type(node, path),
        fields=[_field_diff(f, p) for f, p in _items(node, "Fields", path)],
        objects=[_object_diff(o, p) for o, p in _items(node, "Objects", path)],
        annotations=_annotations(node, path),
    )


def _object_diff(payload: Any, path: str) -> ObjectDiff:
    node = _mapping(payload, path)
    return ObjectDiff(
        name=_string(node, "Name", path),
        type=_diff_type(node, path),
        fields=[_field_diff(f, p) for f, p in _items(node, "Fields", path)],
        objects=[_object_diff(o, p) for o, p in _items(node, "Objects", path)],
    )


def _field_diff(payload: Any, path: str) -> FieldDiff:
    node = _mapping(payload, path)
    return FieldDiff(
        name=_string(node, "Name", path),
        old=_string(node, "Old", path),
        new=_string(node, "New", path),
        type=_diff_type(node, path),
        annotations=_annotations(node, path),
    )


# ---------------------------------------------------------------------------
# Internals
# ---------------------------------------------------------------------------

def _loads(text: str | bytes) -> Any:
    try:
        return json.loads(text)
    except (json.JSONDecodeError, UnicodeDecodeError) as exc:
        raise DiffParseError(f"Invalid JSON: {exc}") from exc


def _mapping(value: Any, path: str) -> Mapping[str, Any]:
    if not isinstance(value, Mapping):
        raise DiffParseError(f"{path} must be an object, got {type(value).__name__}")
    return value


def _items(node: Mapping[str, Any], key: str, path: str) -> list[tuple[Any, str]]:
    """Return ``(item, item_path)`` pairs for the list at *key* (``null`` → empty)."""
    value = node.get(key)
    if value is None:
        return []
    if not isinstance(value, list):
        raise DiffParseError(f"{path}.{key} must be a list, got {type(value).__name__}")
    return [(item, f"{path}.{key}[{i}]") for i, item in enumerate(value)]


def _string(node: Mapping[str, Any], key: str, path: str) -> str:
    value = node.get(key)
    if value is None:
        return ""
    if not isinstance(value, str):
        raise DiffParseError(f"{path}.{key} must be a string, got {value!r}")
    return value


def _diff_type(node: Mapping[str, Any], path: str) -> DiffType:
    value = node.get("Type", "None")
    if not isinstance(value, str) or value not in DIFF_TYPES:
        raise DiffParseError(
            f"{path}.Type must be one of {sorted(DIFF_TYPES)}, got {value!r}"
        )
    return value  # type: ignore[no-any-return]


def _annotations(node: Mapping[str, Any], path: str) -> list[str]:
    labels: list[str] = []
    for item, item_path in _items(node, "Annotations", path):
        if not isinstance(item, str):
            raise DiffParseError(f"{item_path} must be a string, got {item!r}")
        labels.append(item)
    return labels


def _updates(node: Mapping[str, Any], path: str) -> dict[str, int] | None:
    value = node.get("Updates")
    if value is None:
        return None
    updates: dict[str, int] = {}
    for key, count in _mapping(value, f"{path}.Updates").items():
        if isinstance(count, bool) or not isinstance(count, int) or count < 0:
            raise DiffParseError(
                f"{path}.Updates[{key!r}] must be a non-negative integer, got {count!r}"
            )
        updates[str(key)] = count
    return updates
