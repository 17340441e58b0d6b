"""Namespace selection for the pod snapshot."""

from __future__ import annotations

from collections.abc import Callable, Iterable

SYSTEM_NAMESPACES: frozenset[str] = frozenset(
    {
        "kube-system",
        "kube-public",
        "kube-node-lease",
    }
)

SYSTEM_NAMESPACE_PREFIXES: tuple[str, ...] = (
    "kube-",
    "cattle-",
    "rancher-",
    "openshift-",
)


def is_system_namespace(namespace: str) -> bool:
    """Return whether namespace belongs to the cluster control plane."""
    return namespace in SYSTEM_NAMESPACES or namespace.startswith(
        SYSTEM_NAMESPACE_PREFIXES
    )


def build_namespace_filter(
    *,
    exclude_system: bool = False,
    excluded: Iterable[str] = (),
) -> Callable[[str], bool] | None:
    """Return a predicate accepting counted namespaces, or None for all."""
    excluded_set = frozenset(excluded)
    if not exclude_system and not excluded_set:
        return None

    def accept(namespace: str) -> bool:
        if namespace in excluded_set:
            return False
        return not (exclude_system and is_system_namespace(namespace))

    return accept
