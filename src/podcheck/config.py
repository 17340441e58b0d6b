"""Application configuration and environment loading."""

import os
from dataclasses import dataclass, field
from pathlib import Path

from dotenv import load_dotenv

_TRUE_VALUES = frozenset({"1", "true", "yes", "on"})


@dataclass(frozen=True)
class KubeConfig:
    """kubectl connection settings."""

    kubeconfig: Path | None = None
    context: str | None = None


@dataclass(frozen=True)
class LimitDefaults:
    """Limit specs applied before any given on the command line."""

    warning: tuple[str, ...] = ()
    critical: tuple[str, ...] = ()


@dataclass(frozen=True)
class CheckConfig:
    """Top-level config for the pod phase check."""

    kube: KubeConfig = field(default_factory=KubeConfig)
    limits: LimitDefaults = field(default_factory=LimitDefaults)
    exclude_system: bool = False
    log_level: str = "WARNING"

    @property
    def kubeconfig(self) -> Path | None:
        """Return kubeconfig path passed to kubectl."""
        return self.kube.kubeconfig

    @property
    def kube_context(self) -> str | None:
        """Return kubectl context name."""
        return self.kube.context

    @property
    def has_default_limits(self) -> bool:
        """Return whether any limit comes from the environment."""
        return bool(self.limits.warning or self.limits.critical)


def _split_specs(raw: str | None) -> tuple[str, ...]:
    if not raw:
        return ()
    return tuple(spec.strip() for spec in raw.split(",") if spec.strip())


def _flag(raw: str | None) -> bool:
    return raw is not None and raw.strip().lower() in _TRUE_VALUES


def load_config(env_path: Path = Path(".env")) -> CheckConfig:
    """Load config from environment and optional .env file."""
    load_dotenv(env_path, override=False)
    kubeconfig_raw = os.getenv("PODCHECK_KUBECONFIG")
    return CheckConfig(
        kube=KubeConfig(
            kubeconfig=Path(kubeconfig_raw) if kubeconfig_raw else None,
            context=os.getenv("PODCHECK_KUBE_CONTEXT") or None,
        ),
        limits=LimitDefaults(
            warning=_split_specs(os.getenv("PODCHECK_WARNING")),
            critical=_split_specs(os.getenv("PODCHECK_CRITICAL")),
        ),
        exclude_system=_flag(os.getenv("PODCHECK_EXCLUDE_SYSTEM")),
        log_level=os.getenv("PODCHECK_LOG_LEVEL", "WARNING").upper(),
    )
