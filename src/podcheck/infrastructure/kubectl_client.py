"""kubectl execution and pod snapshot loading."""

import json
import shlex
import subprocess
from pathlib import Path
from typing import Any, cast


class KubectlError(RuntimeError):
    """Raised when kubectl fails or a pod snapshot cannot be read."""


def _global_flags(kubeconfig: Path | None, context: str | None) -> list[str]:
    flags: list[str] = []
    if kubeconfig is not None:
        flags.extend(["--kubeconfig", str(kubeconfig)])
    if context:
        flags.extend(["--context", context])
    return flags


def _run_kubectl(
    command: str,
    *,
    kubeconfig: Path | None,
    context: str | None,
) -> subprocess.CompletedProcess[str]:
    args = [
        "kubectl",
        *_global_flags(kubeconfig, context),
        *shlex.split(command),
        "-o",
        "json",
    ]
    try:
        return subprocess.run(
            args,
            capture_output=True,
            text=True,
            check=True,
        )
    except FileNotFoundError as exc:
        raise KubectlError("kubectl executable not found on PATH") from exc
    except subprocess.CalledProcessError as exc:
        stderr = exc.stderr.strip() if exc.stderr else str(exc)
        raise KubectlError(f"kubectl command failed: {stderr}") from exc


def kubectl_json(
    command: str,
    *,
    kubeconfig: Path | None = None,
    context: str | None = None,
) -> dict[str, Any]:
    """Execute kubectl command and parse JSON output."""
    result = _run_kubectl(command, kubeconfig=kubeconfig, context=context)
    try:
        return cast(dict[str, Any], json.loads(result.stdout) if result.stdout else {})
    except json.JSONDecodeError as exc:
        raise KubectlError(f"kubectl returned invalid JSON: {exc}") from exc


def fetch_pods(
    *,
    kubeconfig: Path | None = None,
    context: str | None = None,
) -> dict[str, Any]:
    """Return the pod list of every namespace."""
    return kubectl_json(
        "get pods --all-namespaces",
        kubeconfig=kubeconfig,
        context=context,
    )


def load_pods_file(path: Path) -> dict[str, Any]:
    """Read a saved ``kubectl get pods -o json`` snapshot."""
    try:
        payload = json.loads(path.read_text(encoding="utf-8"))
    except OSError as exc:
        raise KubectlError(f"cannot read pod snapshot {path}: {exc}") from exc
    except json.JSONDecodeError as exc:
        raise KubectlError(f"pod snapshot {path} is not valid JSON: {exc}") from exc
    if not isinstance(payload, dict):
        raise KubectlError(f"pod snapshot {path} is not a pod list object")
    return cast(dict[str, Any], payload)
