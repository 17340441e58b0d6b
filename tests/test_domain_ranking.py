"""Tests for metric ranking and status line formatting."""

from __future__ import annotations

from podcheck.domain.metric_names import GlobalCount, GlobalPhase, ProjectPhase
from podcheck.domain.ranking import (
    build_check_result,
    format_messages,
    format_perfdata,
    rank_metrics,
    severity_rank,
)
from podcheck.domain.status import EvaluatedMetric, Status


def _metric(
    name: GlobalPhase | GlobalCount | ProjectPhase,
    value: int,
    status: Status = Status.OK,
    message: str | None = None,
    warn: int | None = None,
    crit: int | None = None,
) -> EvaluatedMetric:
    return EvaluatedMetric(
        name=name, value=value, warn=warn, crit=crit, status=status, message=message
    )


def test_rank_worst_first() -> None:
    ok = _metric(GlobalPhase("a"), 1)
    critical = _metric(GlobalPhase("b"), 1, Status.CRITICAL, "b")
    warning = _metric(GlobalPhase("c"), 1, Status.WARNING, "c")

    ranked = rank_metrics([ok, critical, warning])

    assert [m.status for m in ranked] == [Status.CRITICAL, Status.WARNING, Status.OK]
    assert build_check_result([ok, critical, warning]).status is Status.CRITICAL


def test_rank_ties_broken_by_name() -> None:
    ranked = rank_metrics(
        [
            _metric(GlobalPhase("running"), 1),
            _metric(GlobalCount(), 1),
            _metric(GlobalPhase("failed"), 1),
        ]
    )
    assert [m.rendered_name for m in ranked] == [
        "global.count",
        "global.failed",
        "global.running",
    ]


def test_unknown_ranks_between_warning_and_ok() -> None:
    assert (
        severity_rank(Status.CRITICAL)
        < severity_rank(Status.WARNING)
        < severity_rank(Status.UNKNOWN)
        < severity_rank(Status.OK)
    )


def test_messages_follow_severity_order() -> None:
    ranked = rank_metrics(
        [
            _metric(GlobalPhase("pending"), 3, Status.WARNING, "pending msg"),
            _metric(GlobalPhase("running"), 3),
            _metric(GlobalPhase("failed"), 3, Status.CRITICAL, "failed msg"),
        ]
    )
    assert format_messages(ranked) == "[CRITICAL] failed msg, [WARNING] pending msg"


def test_perfdata_sorted_by_name_with_empty_limits() -> None:
    perfdata = format_perfdata(
        [
            _metric(ProjectPhase("a", "running"), 2),
            _metric(GlobalPhase("running"), 2, warn=1),
            _metric(GlobalCount(), 3, warn=10, crit=20),
        ]
    )
    assert perfdata == (
        "'global.count'=3;10;20;0 "
        "'global.running'=2;1;;0 "
        "'project.a.running'=2;;;0"
    )


def test_all_ok_uses_status_label() -> None:
    result = build_check_result([_metric(GlobalCount(), 4)])
    assert result.status is Status.OK
    assert result.output == "[OK] | 'global.count'=4;;;0"
    assert result.exit_code == 0


def test_empty_metric_set_is_unknown() -> None:
    result = build_check_result([])
    assert result.status is Status.UNKNOWN
    assert result.output == "[UNKNOWN] | "
    assert result.exit_code == 3
    assert result.metrics == ()
