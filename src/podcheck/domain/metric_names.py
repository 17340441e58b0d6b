"""Structured metric names and their canonical string rendering."""

from __future__ import annotations

from dataclasses import dataclass

GLOBAL_PREFIX = "global"
PROJECT_PREFIX = "project"
ALL_PROJECTS_PREFIX = "all.project"
COUNT_SUFFIX = "count"


@dataclass(frozen=True)
class GlobalPhase:
    """Cluster-wide pod count in one phase."""

    phase: str


@dataclass(frozen=True)
class GlobalCount:
    """Cluster-wide pod count."""


@dataclass(frozen=True)
class ProjectPhase:
    """Pod count in one phase of one namespace."""

    namespace: str
    phase: str


@dataclass(frozen=True)
class ProjectCount:
    """Pod count of one namespace."""

    namespace: str


MetricName = GlobalPhase | GlobalCount | ProjectPhase | ProjectCount


def render_metric_name(name: MetricName) -> str:
    """Return the canonical dotted rendering of a metric name."""
    if isinstance(name, GlobalPhase):
        return f"{GLOBAL_PREFIX}.{name.phase}"
    if isinstance(name, GlobalCount):
        return f"{GLOBAL_PREFIX}.{COUNT_SUFFIX}"
    if isinstance(name, ProjectPhase):
        return f"{PROJECT_PREFIX}.{name.namespace}.{name.phase}"
    if isinstance(name, ProjectCount):
        return f"{PROJECT_PREFIX}.{name.namespace}.{COUNT_SUFFIX}"
    raise TypeError(f"unsupported metric name: {name!r}")
