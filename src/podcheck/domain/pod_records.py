"""Pod records extracted from ``kubectl get pods -o json`` payloads."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

from podcheck.domain.metric_names import COUNT_SUFFIX

UNKNOWN_PHASE = "Unknown"


class PodPayloadError(ValueError):
    """Raised when a pod list payload lacks required fields."""


@dataclass(frozen=True)
class PodRecord:
    """Namespace and lifecycle phase of a single pod."""

    namespace: str
    phase: str


def _mapping_field(pod: dict[str, Any], key: str, index: int) -> dict[str, Any]:
    value = pod.get(key)
    if value is None:
        return {}
    if not isinstance(value, dict):
        raise PodPayloadError(f"pod item {index} has a non-object {key}")
    return value


def _pod_phase(status: dict[str, Any], index: int) -> str:
    phase = status.get("phase") or UNKNOWN_PHASE
    if not isinstance(phase, str):
        raise PodPayloadError(f"pod item {index} has a non-string status.phase")
    if phase.lower() == COUNT_SUFFIX:
        raise PodPayloadError(
            f"pod item {index} has phase {phase!r}, which clashes with the "
            f"{COUNT_SUFFIX} metrics"
        )
    return phase


def pod_records_from_payload(
    pods: dict[str, Any],
    *,
    namespace_filter: Callable[[str], bool] | None = None,
) -> list[PodRecord]:
    """Extract pod records, keeping namespaces accepted by the filter.

    Malformed items raise ``PodPayloadError`` instead of being skipped.
    """
    items = pods.get("items", [])
    if not isinstance(items, list):
        raise PodPayloadError("pod list payload has no items list")

    records: list[PodRecord] = []
    for index, pod in enumerate(items):
        if not isinstance(pod, dict):
            raise PodPayloadError(f"pod item {index} is not an object")
        namespace = _mapping_field(pod, "metadata", index).get("namespace")
        if not namespace or not isinstance(namespace, str):
            raise PodPayloadError(f"pod item {index} has no metadata.namespace")
        if namespace_filter is not None and not namespace_filter(namespace):
            continue
        phase = _pod_phase(_mapping_field(pod, "status", index), index)
        records.append(PodRecord(namespace=namespace, phase=phase))
    return records
