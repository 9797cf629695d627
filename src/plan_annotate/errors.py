"""Custom exceptions for plan-annotate."""

from __future__ import annotations

from dataclasses import dataclass


class PlanAnnotateError(Exception):
    """Base exception for all plan-annotate errors."""


class DiffParseError(PlanAnnotateError):
    """Raised when a diff or plan-annotations payload has an unexpected shape."""


@dataclass
class MalformedCountError(PlanAnnotateError):
    """Raised when a task group's ``Count`` field diff is not an integer.

    Attributes:
        task_group: Name of the task group owning the field diff.
        old: Raw ``Old`` value of the field diff.
        new: Raw ``New`` value of the field diff.
        value: The value that failed to parse (``old`` or ``new``).
    """

    task_group: str
    old: str
    new: str
    value: str

    def __post_init__(self) -> None:
        super().__init__(
            f"Task group {self.task_group!r}: Count value {self.value!r} "
            f"is not a base-10 integer (old={self.old!r}, new={self.new!r})"
        )


@dataclass
class AnnotationErrors(PlanAnnotateError):
    """Raised after a ``collect`` walk when one or more task groups failed.

    Attributes:
        errors: Every :class:`MalformedCountError` seen, in tree order.
    """

    errors: list[MalformedCountError]

    def __post_init__(self) -> None:
        groups = ", ".join(repr(e.task_group) for e in self.errors)
        super().__init__(
            f"{len(self.errors)} task group(s) could not be annotated: {groups}"
        )
