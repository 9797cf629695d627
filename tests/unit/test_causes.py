"""Unit tests for plan_annotate.model.causes."""

from __future__ import annotations

import pytest

from plan_annotate.model.causes import Cause, annotation_label, update_label


@pytest.mark.parametrize(
    ("cause", "label"),
    [
        (Cause.IGNORE, "ignore"),
        (Cause.CREATE, "create"),
        (Cause.DESTROY, "destroy"),
        (Cause.MIGRATE, "migrate"),
        (Cause.IN_PLACE_UPDATE, "in-place update"),
        (Cause.DESTRUCTIVE_UPDATE, "create/destroy update"),
    ],
)
def test_update_label(cause: Cause, label: str) -> None:
    assert update_label(cause) == label


@pytest.mark.parametrize(
    ("cause", "label"),
    [
        (Cause.CREATE, "forces create"),
        (Cause.DESTROY, "forces destroy"),
        (Cause.IN_PLACE_UPDATE, "forces in-place update"),
        (Cause.DESTRUCTIVE_UPDATE, "forces create/destroy update"),
    ],
)
def test_annotation_label(cause: Cause, label: str) -> None:
    assert annotation_label(cause) == label


@pytest.mark.parametrize("cause", [Cause.IGNORE, Cause.MIGRATE])
def test_annotation_label_rejects_count_only_causes(cause: Cause) -> None:
    with pytest.raises(ValueError, match=cause.name):
        annotation_label(cause)


def test_every_cause_has_update_label() -> None:
    labels = {update_label(c) for c in Cause}
    assert len(labels) == len(Cause)
