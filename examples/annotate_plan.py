#!/usr/bin/env python3
"""Annotate a job diff with the scheduler's plan annotations and print it.

Usage (bundled fixtures):
    python examples/annotate_plan.py

Usage (your own plan output):
    JOB_DIFF=diff.json PLAN_ANNOTATIONS=annotations.json python examples/annotate_plan.py

Set ON_ERROR=collect to annotate every task group even if some have a
malformed Count diff.
"""

from __future__ import annotations

import logging
import os
import pathlib
import pprint

from plan_annotate.annotate.job import annotate
from plan_annotate.errors import PlanAnnotateError
from plan_annotate.model.options import AnnotateOptions
from plan_annotate.parser.diff import load_job_diff, load_plan_annotations
from plan_annotate.utils.render import render_job_diff, summarize_updates

FIXTURES = pathlib.Path(__file__).parent.parent / "tests" / "fixtures"

JOB_DIFF = pathlib.Path(os.getenv("JOB_DIFF", str(FIXTURES / "job_diff.json")))
PLAN_ANNOTATIONS = os.getenv("PLAN_ANNOTATIONS", str(FIXTURES / "plan_annotations.json"))
ON_ERROR = os.getenv("ON_ERROR", "abort")

logging.basicConfig(level=logging.DEBUG if os.getenv("DEBUG") else logging.INFO)

diff = load_job_diff(JOB_DIFF.read_text())
plan = load_plan_annotations(pathlib.Path(PLAN_ANNOTATIONS).read_text()) if PLAN_ANNOTATIONS else None
options = AnnotateOptions.from_mapping({"on_error": ON_ERROR})

try:
    annotate(diff, plan, options=options)
except PlanAnnotateError as exc:
    # Annotations applied before the failure are still on the tree.
    print(f"[WARN] {exc}")

print(f"\n=== Annotated diff for job {diff.id!r} ===\n")
pprint.pprint(render_job_diff(diff), sort_dicts=False)

print("\n=== Update counts ===\n")
pprint.pprint(summarize_updates(diff))
