"""Update causes and their wire labels.

Annotation logic works with :class:`Cause` members only.  The strings that
end up on the diff tree (``Updates`` keys and ``Annotations`` text) come from
the two fixed tables below and are read by plan-preview tooling, so they must
not change.
"""

from __future__ import annotations

from enum import Enum


class Cause(Enum):
    """Why a task group or task is updated the way it is."""

    IGNORE = "ignore"
    CREATE = "create"
    DESTROY = "destroy"
    MIGRATE = "migrate"
    IN_PLACE_UPDATE = "in_place_update"
    DESTRUCTIVE_UPDATE = "destructive_update"


# Keys of TaskGroupDiff.updates.
_UPDATE_LABELS: dict[Cause, str] = {
    Cause.IGNORE: "ignore",
    Cause.CREATE: "create",
    Cause.DESTROY: "destroy",
    Cause.MIGRATE: "migrate",
    Cause.IN_PLACE_UPDATE: "in-place update",
    Cause.DESTRUCTIVE_UPDATE: "create/destroy update",
}

# Text appended to FieldDiff / TaskDiff annotations.
_ANNOTATION_LABELS: dict[Cause, str] = {
    Cause.CREATE: "forces create",
    Cause.DESTROY: "forces destroy",
    Cause.IN_PLACE_UPDATE: "forces in-place update",
    Cause.DESTRUCTIVE_UPDATE: "forces create/destroy update",
}


def update_label(cause: Cause) -> str:
    """Return the ``Updates`` map key for *cause*."""
    return _UPDATE_LABELS[cause]


def annotation_label(cause: Cause) -> str:
    """Return the annotation text for *cause*.

    Raises:
        ValueError: If *cause* is never used as an annotation
            (:attr:`Cause.IGNORE`, :attr:`Cause.MIGRATE`).
    """
    try:
        return _ANNOTATION_LABELS[cause]
    except KeyError:
        raise ValueError(f"{cause.name} has no annotation label") from None
