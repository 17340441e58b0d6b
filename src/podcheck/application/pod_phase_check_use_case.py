"""Pod phase check use-case."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass, field
from pathlib import Path

from podcheck.application.pod_phase_check_service import evaluate_pod_phases
from podcheck.config import CheckConfig
from podcheck.domain.limits import build_limit_store
from podcheck.domain.namespace_policy import build_namespace_filter
from podcheck.domain.pod_records import pod_records_from_payload
from podcheck.domain.ranking import CheckResult
from podcheck.infrastructure.kubectl_client import fetch_pods, load_pods_file

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PodPhaseCheckRequest:
    """Inputs of one check run, on top of the loaded config."""

    warning: Sequence[str] = ()
    critical: Sequence[str] = ()
    pods_file: Path | None = None
    kubeconfig: Path | None = None
    context: str | None = None
    exclude_system: bool = False
    excluded_namespaces: Sequence[str] = field(default_factory=tuple)


def execute_pod_phase_check(
    request: PodPhaseCheckRequest,
    *,
    config: CheckConfig | None = None,
) -> CheckResult:
    """Fetch the pod snapshot and evaluate it.

    Limits are parsed before the snapshot is fetched, so a malformed limit
    fails the run without touching the cluster. Command-line limits override
    environment defaults for the same name and kind.
    """
    config = config or CheckConfig()
    limits = build_limit_store(
        warning=[*config.limits.warning, *request.warning],
        critical=[*config.limits.critical, *request.critical],
    )
    logger.debug(
        "Loaded %d limits (environment defaults: %s)",
        len(limits),
        "yes" if config.has_default_limits else "no",
    )

    if request.pods_file is not None:
        logger.debug("Reading pod snapshot from %s", request.pods_file)
        payload = load_pods_file(request.pods_file)
    else:
        payload = fetch_pods(
            kubeconfig=request.kubeconfig or config.kubeconfig,
            context=request.context or config.kube_context,
        )

    namespace_filter = build_namespace_filter(
        exclude_system=request.exclude_system or config.exclude_system,
        excluded=request.excluded_namespaces,
    )
    pods = pod_records_from_payload(payload, namespace_filter=namespace_filter)
    logger.debug("Counting %d of %d pods", len(pods), len(payload.get("items", [])))

    result = evaluate_pod_phases(pods, limits)
    logger.info(
        "Pod phase check finished with %s over %d metrics",
        result.status.name,
        len(result.metrics),
    )
    return result


__all__ = ["PodPhaseCheckRequest", "execute_pod_phase_check"]
