"""Pod counters per namespace and phase, and the metrics derived from them."""

from __future__ import annotations

from collections import Counter, defaultdict
from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field

from podcheck.domain.metric_names import (
    GlobalCount,
    GlobalPhase,
    MetricName,
    ProjectCount,
    ProjectPhase,
    render_metric_name,
)
from podcheck.domain.pod_records import PodRecord


class DuplicateMetricError(ValueError):
    """Raised when two metrics of one run render to the same name."""


@dataclass(frozen=True)
class NamespaceCounters:
    """Observed pod phases of one namespace."""

    namespace: str
    counts: Mapping[str, int] = field(default_factory=dict)

    @property
    def total(self) -> int:
        """Number of pods in this namespace"""
        return sum(self.counts.values())


@dataclass(frozen=True)
class GlobalCounters:
    """Observed pod phases summed over all namespaces."""

    counts: Mapping[str, int] = field(default_factory=dict)

    @property
    def total(self) -> int:
        """Number of pods in the cluster"""
        return sum(self.counts.values())


def ingest(
    pods: Iterable[PodRecord],
) -> tuple[list[NamespaceCounters], GlobalCounters]:
    """Group pods by namespace and lowercase phase.

    Only observed namespaces and phases are reported, so no counter is ever
    zero. Namespaces and phases come out sorted.
    """
    by_namespace: dict[str, Counter[str]] = defaultdict(Counter)
    for pod in pods:
        by_namespace[pod.namespace][pod.phase.lower()] += 1

    namespaces = [
        NamespaceCounters(namespace=namespace, counts=dict(sorted(counts.items())))
        for namespace, counts in sorted(by_namespace.items())
    ]

    global_counts: Counter[str] = Counter()
    for counters in namespaces:
        global_counts.update(counters.counts)
    return namespaces, GlobalCounters(counts=dict(sorted(global_counts.items())))


def emit_metrics(
    namespaces: Iterable[NamespaceCounters],
    global_counters: GlobalCounters,
) -> list[tuple[MetricName, int]]:
    """Return every named metric value derived from the counters.

    An empty snapshot yields no metrics at all, not a zero ``global.count``.
    Rendered names are unique; a phase that would shadow a count metric
    raises ``DuplicateMetricError``.
    """
    namespaces = list(namespaces)
    if not namespaces:
        return []
    metrics: list[tuple[MetricName, int]] = [(GlobalCount(), global_counters.total)]
    metrics.extend(
        (GlobalPhase(phase), count) for phase, count in global_counters.counts.items()
    )
    for counters in namespaces:
        metrics.append((ProjectCount(counters.namespace), counters.total))
        metrics.extend(
            (ProjectPhase(counters.namespace, phase), count)
            for phase, count in counters.counts.items()
        )
    _check_unique(metrics)
    return metrics


def _check_unique(metrics: list[tuple[MetricName, int]]) -> None:
    seen: set[str] = set()
    for name, _ in metrics:
        rendered = render_metric_name(name)
        if rendered in seen:
            raise DuplicateMetricError(f"metric name {rendered!r} is not unique")
        seen.add(rendered)
