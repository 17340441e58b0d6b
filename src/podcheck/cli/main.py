"""CLI entrypoint for the podcheck monitoring plugin."""

from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as package_version
from pathlib import Path
from typing import NoReturn

import typer

from podcheck.application import (
    PodPhaseCheckRequest,
    execute_pod_phase_check,
    render_metric_table,
)
from podcheck.config import load_config
from podcheck.domain.status import Status
from podcheck.logging_config import setup_logging, stderr_console

app = typer.Typer(
    name="podcheck",
    help="Kubernetes pod phase monitoring check",
    no_args_is_help=True,
    add_completion=False,
    invoke_without_command=True,
    context_settings={"help_option_names": ["-h", "--help"]},
)


def _resolve_version() -> str:
    """Return installed package version or local fallback."""
    try:
        return package_version("podcheck")
    except PackageNotFoundError:
        return "0.1.0"


@app.callback()
def callback(
    ctx: typer.Context,
    version: bool = typer.Option(
        False,
        "--version",
        help="Show version and exit.",
    ),
) -> None:
    """Handle global CLI options."""
    if version:
        typer.echo(f"podcheck {_resolve_version()}")
        raise typer.Exit(code=0)
    if ctx.invoked_subcommand is None:
        raise typer.Exit(code=0)


def _handle_error(exc: Exception) -> NoReturn:
    """Report configuration and cluster errors as UNKNOWN plugin results."""
    if isinstance(exc, (ValueError, RuntimeError)):
        typer.echo(f"{Status.UNKNOWN.label} {exc}")
        raise typer.Exit(code=int(Status.UNKNOWN)) from exc
    raise exc


@app.command("pod-phases")
def pod_phases_command(
    warning: list[str] | None = typer.Option(
        None,
        "--warning",
        "-w",
        help="Warning limit as NAME=VALUE, e.g. global.pending=5. Repeatable.",
    ),
    critical: list[str] | None = typer.Option(
        None,
        "--critical",
        "-c",
        help="Critical limit as NAME=VALUE, e.g. all.project.failed=0. Repeatable.",
    ),
    pods_file: Path | None = typer.Option(
        None,
        "--pods-file",
        help="Evaluate a saved `kubectl get pods -A -o json` file instead of kubectl.",
    ),
    kubeconfig: Path | None = typer.Option(
        None,
        "--kubeconfig",
        help="kubeconfig file passed to kubectl.",
    ),
    context: str | None = typer.Option(
        None,
        "--context",
        help="kubectl context to query.",
    ),
    exclude_system: bool = typer.Option(
        False,
        "--exclude-system",
        help="Skip kube-/cattle-/rancher-/openshift- namespaces.",
    ),
    exclude_namespace: list[str] | None = typer.Option(
        None,
        "--exclude-namespace",
        help="Namespace to leave out of the counts. Repeatable.",
    ),
    details: bool = typer.Option(
        False,
        "--details",
        help="Print a table of every metric to stderr.",
    ),
    log_level: str | None = typer.Option(
        None,
        "--log-level",
        help="Logging level for stderr diagnostics (default WARNING).",
    ),
) -> None:
    """Check pod counts per namespace and phase against limits.

    Prints one `<summary> | <perfdata>` line and exits 0/1/2/3 for
    OK/WARNING/CRITICAL/UNKNOWN.
    """
    try:
        config = load_config()
        setup_logging(log_level or config.log_level)
        result = execute_pod_phase_check(
            PodPhaseCheckRequest(
                warning=tuple(warning or ()),
                critical=tuple(critical or ()),
                pods_file=pods_file,
                kubeconfig=kubeconfig,
                context=context,
                exclude_system=exclude_system,
                excluded_namespaces=tuple(exclude_namespace or ()),
            ),
            config=config,
        )
    except (ValueError, RuntimeError) as exc:  # pragma: no cover
        _handle_error(exc)

    if details:
        render_metric_table(result.metrics, stderr_console)
    typer.echo(result.output)
    raise typer.Exit(code=result.exit_code)


def main() -> None:
    """Project entrypoint for `podcheck` script."""
    app()


if __name__ == "__main__":
    main()
