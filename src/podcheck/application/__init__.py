"""Application facade exports for stable use-case API."""

from podcheck.application.pod_phase_check_service import evaluate_pod_phases
from podcheck.application.pod_phase_check_use_case import (
    PodPhaseCheckRequest,
    execute_pod_phase_check,
)
from podcheck.application.stdout_renderer import render_metric_table

__all__ = [
    "PodPhaseCheckRequest",
    "evaluate_pod_phases",
    "execute_pod_phase_check",
    "render_metric_table",
]
