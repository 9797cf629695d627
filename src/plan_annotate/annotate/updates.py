"""Merge scheduler-computed update counts into task group diffs."""

from __future__ import annotations

import logging

from plan_annotate.model.causes import Cause, update_label
from plan_annotate.model.diff import TaskGroupDiff
from plan_annotate.model.plan import PlanAnnotations

logger = logging.getLogger(__name__)

# DesiredUpdates attribute → cause it is reported under, in merge order.
_COUNT_CAUSES: tuple[tuple[str, Cause], ...] = (
    ("ignore", Cause.IGNORE),
    ("place", Cause.CREATE),
    ("migrate", Cause.MIGRATE),
    ("stop", Cause.DESTROY),
    ("in_place_update", Cause.IN_PLACE_UPDATE),
    ("destructive_update", Cause.DESTRUCTIVE_UPDATE),
)


def merge_desired_updates(diff: TaskGroupDiff, plan: PlanAnnotations | None) -> None:
    """Copy the nonzero counts planned for *diff* into :attr:`TaskGroupDiff.updates`.

    Nothing happens when *plan* is ``None`` or has no entry for the group.
    Zero counts never produce a key, and the map itself is only created once
    the first key is written, so a group without an entry and a group whose
    counts are all zero end up identical.
    """
    if plan is None:
        return
    desired = plan.desired_tg_updates.get(diff.name)
    if desired is None:
        return

    for attr, cause in _COUNT_CAUSES:
        count: int = getattr(desired, attr)
        if count == 0:
            continue
        if diff.updates is None:
            diff.updates = {}
        diff.updates[update_label(cause)] = count

    logger.debug("Task group %r updates: %s", diff.name, diff.updates)
