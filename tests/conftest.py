"""Shared fixtures."""

from __future__ import annotations

import os
from collections.abc import Iterator

import pytest

ENV_VARS = (
    "PODCHECK_KUBECONFIG",
    "PODCHECK_KUBE_CONTEXT",
    "PODCHECK_WARNING",
    "PODCHECK_CRITICAL",
    "PODCHECK_EXCLUDE_SYSTEM",
    "PODCHECK_LOG_LEVEL",
)


@pytest.fixture(autouse=True)
def _isolated_env(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    """Hide podcheck settings from the real environment and from .env leaks."""
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    yield
    for name in ENV_VARS:
        os.environ.pop(name, None)
