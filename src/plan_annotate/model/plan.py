"""Typed model for scheduler plan annotations."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass
class DesiredUpdates:
    """Scheduler-computed allocation counts for one task group.

    Attributes:
        ignore: Allocations left untouched.
        place: Allocations to create.
        migrate: Allocations to move to another node.
        stop: Allocations to destroy.
        in_place_update: Allocations updated without a restart.
        destructive_update: Allocations stopped and recreated.
    """

    ignore: int = 0
    place: int = 0
    migrate: int = 0
    stop: int = 0
    in_place_update: int = 0
    destructive_update: int = 0


@dataclass
class PlanAnnotations:
    """Annotations attached to a scheduler plan.

    Attributes:
        desired_tg_updates: Mapping of task-group name to its
            :class:`DesiredUpdates`.  A missing name means no counts.
    """

    desired_tg_updates: dict[str, DesiredUpdates] = field(default_factory=dict)
