"""Job diff annotation entry point.

Walks the three-level diff tree (job → task groups → fields and tasks) and
attaches labels explaining why each change needs the update it gets:

- Task groups receive the scheduler's update counts (creates, destroys,
  migrations, ...), and their ``Count`` field is annotated with the scaling
  direction.
- Tasks are annotated with ``"forces create/destroy update"`` or
  ``"forces in-place update"``.

Only edited nodes are annotated; added and deleted nodes need no explanation.
"""

from __future__ import annotations

import logging

from plan_annotate.annotate.count import annotate_count_change
from plan_annotate.annotate.task import annotate_task
from plan_annotate.annotate.updates import merge_desired_updates
from plan_annotate.errors import AnnotationErrors, MalformedCountError
from plan_annotate.model.diff import JobDiff, TaskGroupDiff
from plan_annotate.model.options import AnnotateOptions
from plan_annotate.model.plan import PlanAnnotations

logger = logging.getLogger(__name__)

_DEFAULT_OPTIONS = AnnotateOptions()


def annotate(
    diff: JobDiff,
    plan: PlanAnnotations | None = None,
    *,
    options: AnnotateOptions | None = None,
) -> None:
    """Annotate *diff* in place with update causes and scheduler counts.

    The call is not transactional.  With the default ``on_error="abort"``
    policy the first malformed task group raises immediately, and task groups
    annotated before it keep their annotations.  Callers that need
    all-or-nothing behaviour should annotate a ``copy.deepcopy`` of the tree.

    Args:
        diff: Job diff to annotate.
        plan: Scheduler plan annotations; ``None`` skips the count merge.
        options: Annotator settings; defaults to :class:`AnnotateOptions`.

    Raises:
        MalformedCountError: A ``Count`` field diff is not an integer
            (``on_error="abort"``).
        AnnotationErrors: One or more task groups failed
            (``on_error="collect"``).
    """
    if diff.type != "Edited":
        logger.debug("Job %r is %s; nothing to annotate", diff.id, diff.type)
        return
    if not diff.task_groups:
        return

    opts = options or _DEFAULT_OPTIONS
    errors: list[MalformedCountError] = []

    for tg_diff in diff.task_groups:
        try:
            annotate_task_group(tg_diff, plan, options=opts)
        except MalformedCountError as exc:
            if opts.on_error == "abort":
                raise
            logger.warning("Skipping task group %r: %s", tg_diff.name, exc)
            errors.append(exc)

    if errors:
        raise AnnotationErrors(errors=errors)


def annotate_task_group(
    diff: TaskGroupDiff,
    plan: PlanAnnotations | None = None,
    *,
    options: AnnotateOptions = _DEFAULT_OPTIONS,
) -> None:
    """Annotate a single task group diff and its task diffs.

    Raises:
        MalformedCountError: The group's ``Count`` field diff is not an
            integer.  Its tasks are left unclassified.
    """
    if diff.type != "Edited":
        logger.debug("Task group %r is %s; skipping", diff.name, diff.type)
        return

    merge_desired_updates(diff, plan)
    annotate_count_change(diff)

    for task_diff in diff.tasks:
        annotate_task(task_diff, options.in_place_objects)
