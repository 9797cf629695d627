"""Unit tests for plan_annotate.annotate.count.annotate_count_change."""

from __future__ import annotations

import pytest

from plan_annotate.annotate.count import annotate_count_change
from plan_annotate.errors import MalformedCountError, PlanAnnotateError
from plan_annotate.model.diff import DiffType, FieldDiff, TaskGroupDiff

# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def _tg(old: str, new: str, tg_type: DiffType = "Edited") -> TaskGroupDiff:
    return TaskGroupDiff(
        name="web",
        type=tg_type,
        fields=[FieldDiff(name="Count", old=old, new=new)],
    )


def _count_annotations(tg: TaskGroupDiff) -> list[str]:
    return tg.fields[0].annotations


# ---------------------------------------------------------------------------
# Direction
# ---------------------------------------------------------------------------


class TestDirection:
    def test_scale_up_forces_create(self) -> None:
        tg = _tg("3", "5")
        annotate_count_change(tg)
        assert _count_annotations(tg) == ["forces create"]

    def test_scale_down_forces_destroy(self) -> None:
        tg = _tg("5", "3")
        annotate_count_change(tg)
        assert _count_annotations(tg) == ["forces destroy"]

    def test_leading_zero_compares_numerically(self) -> None:
        tg = _tg("03", "3")
        annotate_count_change(tg)
        assert _count_annotations(tg) == []

    def test_numeric_not_lexical_comparison(self) -> None:
        """10 > 9 even though "10" sorts before "9" as text."""
        tg = _tg("9", "10")
        annotate_count_change(tg)
        assert _count_annotations(tg) == ["forces create"]

    def test_scale_to_zero(self) -> None:
        tg = _tg("2", "0")
        annotate_count_change(tg)
        assert _count_annotations(tg) == ["forces destroy"]

    def test_existing_annotations_preserved(self) -> None:
        tg = _tg("1", "2")
        tg.fields[0].annotations.append("pre-existing")
        annotate_count_change(tg)
        assert _count_annotations(tg) == ["pre-existing", "forces create"]


# ---------------------------------------------------------------------------
# No-op cases
# ---------------------------------------------------------------------------


class TestNoOp:
    @pytest.mark.parametrize("tg_type", ["None", "Added", "Deleted"])
    def test_non_edited_group_untouched(self, tg_type: DiffType) -> None:
        tg = _tg("1", "5", tg_type=tg_type)
        annotate_count_change(tg)
        assert _count_annotations(tg) == []

    def test_non_edited_group_with_bad_count_does_not_raise(self) -> None:
        tg = _tg("abc", "3", tg_type="Added")
        annotate_count_change(tg)

    def test_no_count_field(self) -> None:
        tg = TaskGroupDiff(
            name="web",
            type="Edited",
            fields=[FieldDiff(name="Meta[owner]", old="a", new="b")],
        )
        annotate_count_change(tg)
        assert tg.fields[0].annotations == []

    def test_only_first_count_field_used(self) -> None:
        tg = TaskGroupDiff(
            name="web",
            type="Edited",
            fields=[
                FieldDiff(name="Count", old="1", new="2"),
                FieldDiff(name="Count", old="9", new="1"),
            ],
        )
        annotate_count_change(tg)
        assert tg.fields[0].annotations == ["forces create"]
        assert tg.fields[1].annotations == []


# ---------------------------------------------------------------------------
# Malformed counts
# ---------------------------------------------------------------------------


class TestMalformed:
    @pytest.mark.parametrize(
        ("old", "new", "bad"),
        [
            ("abc", "3", "abc"),
            ("3", "abc", "abc"),
            ("", "3", ""),
            ("3.0", "4", "3.0"),
            (" 3", "4", " 3"),
            ("1_000", "4", "1_000"),
        ],
    )
    def test_malformed_count_raises(self, old: str, new: str, bad: str) -> None:
        tg = _tg(old, new)
        with pytest.raises(MalformedCountError) as exc_info:
            annotate_count_change(tg)
        err = exc_info.value
        assert err.task_group == "web"
        assert err.value == bad
        assert (err.old, err.new) == (old, new)
        assert _count_annotations(tg) == []

    def test_error_is_package_error(self) -> None:
        with pytest.raises(PlanAnnotateError, match="'web'"):
            annotate_count_change(_tg("x", "1"))

    @pytest.mark.parametrize(
        ("old", "new", "bad"),
        [
            ("3", "9223372036854775808", "9223372036854775808"),
            ("-9223372036854775809", "3", "-9223372036854775809"),
            ("3", "99999999999999999999", "99999999999999999999"),
        ],
    )
    def test_count_outside_int64_raises(self, old: str, new: str, bad: str) -> None:
        tg = _tg(old, new)
        with pytest.raises(MalformedCountError) as exc_info:
            annotate_count_change(tg)
        assert exc_info.value.value == bad
        assert _count_annotations(tg) == []

    def test_int64_bounds_accepted(self) -> None:
        tg = _tg("-9223372036854775808", "9223372036854775807")
        annotate_count_change(tg)
        assert _count_annotations(tg) == ["forces create"]

    def test_signed_values_parse(self) -> None:
        tg = _tg("-1", "+2")
        annotate_count_change(tg)
        assert _count_annotations(tg) == ["forces create"]
