"""Resolve the warning and critical thresholds of a metric."""

from __future__ import annotations

from dataclasses import dataclass

from podcheck.domain.limits import LimitKind, LimitStore, Number
from podcheck.domain.metric_names import (
    ALL_PROJECTS_PREFIX,
    COUNT_SUFFIX,
    GlobalCount,
    GlobalPhase,
    MetricName,
    ProjectCount,
    ProjectPhase,
    render_metric_name,
)


@dataclass(frozen=True)
class Thresholds:
    """Resolved limits of one metric; ``None`` means unconstrained."""

    warn: Number | None = None
    crit: Number | None = None


def fallback_limit_name(name: MetricName) -> str | None:
    """Return the any-project limit name for project metrics."""
    if isinstance(name, ProjectPhase):
        return f"{ALL_PROJECTS_PREFIX}.{name.phase}"
    if isinstance(name, ProjectCount):
        return f"{ALL_PROJECTS_PREFIX}.{COUNT_SUFFIX}"
    if isinstance(name, (GlobalPhase, GlobalCount)):
        return None
    raise TypeError(f"unsupported metric name: {name!r}")


def lookup_limit(
    store: LimitStore,
    kind: LimitKind,
    exact: str,
    fallback: str | None,
) -> Number | None:
    """Look up ``exact`` for one kind, then ``fallback`` if given."""
    value = store.lookup(exact, kind)
    if value is None and fallback is not None:
        value = store.lookup(fallback, kind)
    return value


def resolve(name: MetricName, store: LimitStore) -> Thresholds:
    """Resolve thresholds, each kind on its own exact-then-fallback chain."""
    exact = render_metric_name(name)
    fallback = fallback_limit_name(name)
    return Thresholds(
        warn=lookup_limit(store, LimitKind.WARNING, exact, fallback),
        crit=lookup_limit(store, LimitKind.CRITICAL, exact, fallback),
    )
