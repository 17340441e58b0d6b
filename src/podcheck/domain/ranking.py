"""Rank evaluated metrics and render the monitoring status line."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

from podcheck.domain.limits import Number, format_number
from podcheck.domain.status import EvaluatedMetric, Status

_SEVERITY_RANK: dict[Status, int] = {
    Status.CRITICAL: 0,
    Status.WARNING: 1,
    Status.UNKNOWN: 2,
    Status.OK: 3,
}

PERFDATA_MIN = 0


@dataclass(frozen=True)
class CheckResult:
    """Overall outcome of one evaluation run."""

    status: Status
    output: str
    metrics: tuple[EvaluatedMetric, ...]

    @property
    def exit_code(self) -> int:
        return int(self.status)


def severity_rank(status: Status) -> int:
    """Sort rank, worst first; unrecognised values rank like OK."""
    return _SEVERITY_RANK.get(status, _SEVERITY_RANK[Status.OK])


def rank_metrics(metrics: Iterable[EvaluatedMetric]) -> list[EvaluatedMetric]:
    """Sort metrics by severity, then by rendered name."""
    return sorted(metrics, key=lambda m: (severity_rank(m.status), m.rendered_name))


def overall_status(ranked: list[EvaluatedMetric]) -> Status:
    if not ranked:
        return Status.UNKNOWN
    return ranked[0].status


def format_messages(ranked: Iterable[EvaluatedMetric]) -> str:
    return ", ".join(
        f"[{metric.status.name}] {metric.message}"
        for metric in ranked
        if metric.message is not None
    )


def _optional(value: Number | None) -> str:
    return "" if value is None else format_number(value)


def format_perfdata(metrics: Iterable[EvaluatedMetric]) -> str:
    """Render ``'name'=value;warn;crit;min`` tokens sorted by name."""
    return " ".join(
        f"'{metric.rendered_name}'={metric.value};"
        f"{_optional(metric.warn)};{_optional(metric.crit)};{PERFDATA_MIN}"
        for metric in sorted(metrics, key=lambda m: m.rendered_name)
    )


def build_check_result(metrics: Iterable[EvaluatedMetric]) -> CheckResult:
    """Reduce evaluated metrics to the overall status and output line."""
    ranked = rank_metrics(metrics)
    status = overall_status(ranked)
    summary = format_messages(ranked) or status.label
    return CheckResult(
        status=status,
        output=f"{summary} | {format_perfdata(ranked)}",
        metrics=tuple(ranked),
    )
