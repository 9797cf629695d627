"""Classify task diffs as in-place or destructive updates."""

from __future__ import annotations

import logging
from collections.abc import Collection

from plan_annotate.model.causes import Cause, annotation_label
from plan_annotate.model.diff import TaskDiff
from plan_annotate.model.options import IN_PLACE_OBJECTS

logger = logging.getLogger(__name__)


def annotate_task(
    diff: TaskDiff,
    in_place_objects: Collection[str] = IN_PLACE_OBJECTS,
) -> None:
    """Append exactly one update classification to an edited task diff.

    Any changed primitive field forces a destructive update.  Object diffs
    force one unless their name is in *in_place_objects*; every object is
    checked, so their order never matters.

    Args:
        diff: Task diff to annotate in place.
        in_place_objects: Object-diff names a running task can absorb.
    """
    if diff.type != "Edited":
        return

    destructive = is_destructive(diff, in_place_objects)
    cause = Cause.DESTRUCTIVE_UPDATE if destructive else Cause.IN_PLACE_UPDATE
    diff.annotations.append(annotation_label(cause))
    logger.debug("Task %r classified as %s", diff.name, cause.name)


def is_destructive(
    diff: TaskDiff,
    in_place_objects: Collection[str] = IN_PLACE_OBJECTS,
) -> bool:
    """Return ``True`` if applying *diff* requires recreating the task."""
    if diff.fields:
        return True
    return any(obj.name not in in_place_objects for obj in diff.objects)
