"""Classify a task group's ``Count`` change as scaling up or down."""

from __future__ import annotations

import logging
import re

from plan_annotate.errors import MalformedCountError
from plan_annotate.model.causes import Cause, annotation_label
from plan_annotate.model.diff import FieldDiff, TaskGroupDiff

logger = logging.getLogger(__name__)

COUNT_FIELD: str = "Count"

# Plain base-10 integer: optional sign, ASCII digits only.
_INT_RE: re.Pattern[str] = re.compile(r"[+-]?[0-9]+")

# Counts must fit a signed 64-bit integer.
_INT64_MIN: int = -(2**63)
_INT64_MAX: int = 2**63 - 1


def annotate_count_change(diff: TaskGroupDiff) -> None:
    """Annotate the ``Count`` field diff of an edited task group.

    Appends ``"forces create"`` when the count grows and ``"forces destroy"``
    when it shrinks.  Values are compared as integers, so ``"03"`` and ``"3"``
    are equal and produce no annotation.

    Raises:
        MalformedCountError: If ``Old`` or ``New`` is not an integer or
            does not fit in 64 bits.
    """
    if diff.type != "Edited":
        return

    count_diff = _find_count_diff(diff.fields)
    if count_diff is None:
        return

    old = _parse_count(diff.name, count_diff, count_diff.old)
    new = _parse_count(diff.name, count_diff, count_diff.new)

    if new > old:
        count_diff.annotations.append(annotation_label(Cause.CREATE))
    elif new < old:
        count_diff.annotations.append(annotation_label(Cause.DESTROY))
    else:
        return
    logger.debug("Task group %r count %d -> %d", diff.name, old, new)


def _find_count_diff(fields: list[FieldDiff]) -> FieldDiff | None:
    """Return the first field diff named ``Count``, or ``None``."""
    for field_diff in fields:
        if field_diff.name == COUNT_FIELD:
            return field_diff
    return None


def _parse_count(task_group: str, count_diff: FieldDiff, value: str) -> int:
    if isinstance(value, str) and _INT_RE.fullmatch(value) is not None:
        parsed = int(value)
        if _INT64_MIN <= parsed <= _INT64_MAX:
            return parsed
    raise MalformedCountError(
        task_group=task_group,
        old=count_diff.old,
        new=count_diff.new,
        value=value,
    )
