"""Annotator options."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from typing import Any, Literal

ErrorPolicy = Literal["abort", "collect"]

# Object diffs that a running task can absorb without being recreated.
IN_PLACE_OBJECTS: frozenset[str] = frozenset({"LogConfig", "Service", "Constraint"})

_ERROR_POLICIES: frozenset[str] = frozenset({"abort", "collect"})


@dataclass(frozen=True)
class AnnotateOptions:
    """Immutable settings for :func:`~plan_annotate.annotate.job.annotate`.

    Args:
        in_place_objects: Object-diff names that do not force a destructive
            task update.
        on_error: ``"abort"`` stops at the first malformed task group;
            ``"collect"`` annotates every group and reports all failures
            together.
    """

    in_place_objects: frozenset[str] = IN_PLACE_OBJECTS
    on_error: ErrorPolicy = "abort"

    @classmethod
    def from_mapping(cls, optional_args: Mapping[str, Any] | None = None) -> AnnotateOptions:
        """Build options from a plain dict, ignoring unknown keys.

        Supported keys:

        - ``in_place_objects`` (iterable of str)
        - ``on_error`` (``"abort"`` or ``"collect"``)

        Raises:
            ValueError: If ``on_error`` is not a known policy or
                ``in_place_objects`` is a bare string.
        """
        args: Mapping[str, Any] = optional_args or {}

        on_error = str(args.get("on_error", "abort"))
        if on_error not in _ERROR_POLICIES:
            raise ValueError(
                f"on_error must be one of {sorted(_ERROR_POLICIES)}, got {on_error!r}"
            )

        raw_objects: Iterable[str] | None = args.get("in_place_objects")
        if raw_objects is None:
            in_place = IN_PLACE_OBJECTS
        elif isinstance(raw_objects, str):
            raise ValueError("in_place_objects must be a list of names, not a string")
        else:
            in_place = frozenset(str(name) for name in raw_objects)

        return cls(in_place_objects=in_place, on_error=on_error)  # type: ignore[arg-type]
