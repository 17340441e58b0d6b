"""Tests for exact-then-fallback threshold resolution."""

from __future__ import annotations

import pytest

from podcheck.domain.limit_resolver import Thresholds, fallback_limit_name, resolve
from podcheck.domain.limits import build_limit_store
from podcheck.domain.metric_names import (
    GlobalCount,
    GlobalPhase,
    ProjectCount,
    ProjectPhase,
)


def test_global_metrics_use_exact_names_only() -> None:
    store = build_limit_store(
        warning=["global.running=5", "all.project.running=1"],
        critical=["global.count=100"],
    )
    assert resolve(GlobalPhase("running"), store) == Thresholds(warn=5)
    assert resolve(GlobalCount(), store) == Thresholds(crit=100)
    assert resolve(GlobalPhase("pending"), store) == Thresholds()


def test_project_phase_falls_back_to_all_projects() -> None:
    store = build_limit_store(
        warning=["all.project.failed=0"],
        critical=["all.project.failed=3"],
    )
    assert resolve(ProjectPhase("a", "failed"), store) == Thresholds(warn=0, crit=3)


def test_exact_project_limit_wins_over_fallback() -> None:
    store = build_limit_store(
        warning=["all.project.failed=0", "project.batch.failed=10"],
    )
    assert resolve(ProjectPhase("batch", "failed"), store).warn == 10
    assert resolve(ProjectPhase("web", "failed"), store).warn == 0


def test_kinds_resolve_independently() -> None:
    store = build_limit_store(
        warning=["all.project.count=20"],
        critical=["project.a.count=50"],
    )
    assert resolve(ProjectCount("a"), store) == Thresholds(warn=20, crit=50)
    assert resolve(ProjectCount("b"), store) == Thresholds(warn=20)


def test_fallback_names() -> None:
    assert fallback_limit_name(ProjectPhase("a", "pending")) == "all.project.pending"
    assert fallback_limit_name(ProjectCount("a")) == "all.project.count"
    assert fallback_limit_name(GlobalPhase("pending")) is None
    assert fallback_limit_name(GlobalCount()) is None


def test_unknown_shape_fails_fast() -> None:
    with pytest.raises(TypeError):
        resolve(("project", "a"), build_limit_store())  # type: ignore[arg-type]
