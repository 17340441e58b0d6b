"""Severity levels and per-metric threshold evaluation."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum

from podcheck.domain.limit_resolver import Thresholds
from podcheck.domain.limits import Number, format_number
from podcheck.domain.metric_names import MetricName, render_metric_name


class Status(IntEnum):
    """Monitoring severity; the value is the plugin exit code."""

    OK = 0
    WARNING = 1
    CRITICAL = 2
    UNKNOWN = 3

    @property
    def label(self) -> str:
        """Bracketed label used in the status line."""
        return f"[{self.name}]"


@dataclass(frozen=True)
class EvaluatedMetric:
    """Metric value with its thresholds and resulting status."""

    name: MetricName
    value: int
    warn: Number | None = None
    crit: Number | None = None
    status: Status = Status.OK
    message: str | None = None

    @property
    def rendered_name(self) -> str:
        return render_metric_name(self.name)


def _exceeded_message(name: MetricName, value: int, limit: Number) -> str:
    return f"{render_metric_name(name)} of {value} larger than {format_number(limit)}"


def evaluate(name: MetricName, value: int, limits: Thresholds) -> EvaluatedMetric:
    """Compare a value against its thresholds; equality is not a breach."""
    status = Status.OK
    message = None
    if limits.crit is not None and value > limits.crit:
        status = Status.CRITICAL
        message = _exceeded_message(name, value, limits.crit)
    elif limits.warn is not None and value > limits.warn:
        status = Status.WARNING
        message = _exceeded_message(name, value, limits.warn)
    return EvaluatedMetric(
        name=name,
        value=value,
        warn=limits.warn,
        crit=limits.crit,
        status=status,
        message=message,
    )
