"""Typed model for job diff trees.

The tree is produced by the scheduler's diff engine (or decoded from its JSON
form by :mod:`plan_annotate.parser.diff`) and annotated in place by
:func:`plan_annotate.annotate.job.annotate`.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Literal

DiffType = Literal["None", "Added", "Deleted", "Edited"]

DIFF_TYPES: frozenset[str] = frozenset({"None", "Added", "Deleted", "Edited"})


@dataclass
class FieldDiff:
    """A change to a single primitive attribute.

    Attributes:
        name: Attribute name (e.g. ``"Count"``, ``"Driver"``).
        old: String-encoded previous value (``""`` when added).
        new: String-encoded new value (``""`` when deleted).
        type: Kind of change for this attribute.
        annotations: Labels explaining the change.
    """

    name: str
    old: str = ""
    new: str = ""
    type: DiffType = "Edited"
    annotations: list[str] = field(default_factory=list)


@dataclass
class ObjectDiff:
    """A change to a structural sub-component (``Service``, ``Template``, ...).

    Only :attr:`name` is interpreted by the annotator; nested content is
    carried as-is.
    """

    name: str
    type: DiffType = "Edited"
    fields: list[FieldDiff] = field(default_factory=list)
    objects: list[ObjectDiff] = field(default_factory=list)


@dataclass
class TaskDiff:
    """Changes to a single task inside a task group.

    Attributes:
        name: Task name.
        type: Kind of change for the task as a whole.
        fields: Changed primitive attributes.
        objects: Changed structural sub-components.
        annotations: Classification labels (in-place vs destructive).
    """

    name: str = ""
    type: DiffType = "None"
    fields: list[FieldDiff] = field(default_factory=list)
    objects: list[ObjectDiff] = field(default_factory=list)
    annotations: list[str] = field(default_factory=list)


@dataclass
class TaskGroupDiff:
    """Changes to a task group.

    Attributes:
        name: Task group name, unique within the job.
        type: Kind of change for the group as a whole.
        fields: Changed primitive attributes (``Count`` among them).
        objects: Changed structural sub-components of the group.
        tasks: Per-task diffs.
        updates: Update-kind label to allocation count.  ``None`` until the
            first nonzero count is merged; a key is present only when its
            count is positive.
        annotations: Labels attached to the group.
    """

    name: str
    type: DiffType = "None"
    fields: list[FieldDiff] = field(default_factory=list)
    objects: list[ObjectDiff] = field(default_factory=list)
    tasks: list[TaskDiff] = field(default_factory=list)
    updates: dict[str, int] | None = None
    annotations: list[str] = field(default_factory=list)


@dataclass
class JobDiff:
    """Root of a diff tree.

    Attributes:
        type: Kind of change for the job.
        id: Job ID.
        fields: Changed job-level attributes (not interpreted).
        objects: Changed job-level sub-components (not interpreted).
        task_groups: Per-task-group diffs in tree order.
    """

    type: DiffType = "None"
    id: str = ""
    fields: list[FieldDiff] = field(default_factory=list)
    objects: list[ObjectDiff] = field(default_factory=list)
    task_groups: list[TaskGroupDiff] = field(default_factory=list)
