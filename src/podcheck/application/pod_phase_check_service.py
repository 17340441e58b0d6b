"""Evaluate a pod snapshot against phase count limits."""

from __future__ import annotations

from collections.abc import Iterable

from podcheck.domain.aggregation import emit_metrics, ingest
from podcheck.domain.limit_resolver import resolve
from podcheck.domain.limits import LimitStore
from podcheck.domain.pod_records import PodRecord
from podcheck.domain.ranking import CheckResult, build_check_result
from podcheck.domain.status import evaluate


def evaluate_pod_phases(pods: Iterable[PodRecord], limits: LimitStore) -> CheckResult:
    """Aggregate pods, evaluate every metric and build the status line."""
    namespaces, global_counters = ingest(pods)
    evaluated = [
        evaluate(name, value, resolve(name, limits))
        for name, value in emit_metrics(namespaces, global_counters)
    ]
    return build_check_result(evaluated)
