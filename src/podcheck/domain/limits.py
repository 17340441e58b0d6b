"""Threshold limit parsing and lookup."""

from __future__ import annotations

import math
from collections.abc import Iterable
from enum import Enum

Number = int | float


class ParseError(ValueError):
    """Raised when a limit specification cannot be parsed."""


class LimitKind(Enum):
    """Which threshold a limit specification defines."""

    WARNING = "warning"
    CRITICAL = "critical"


def parse_limit_value(raw: str) -> Number:
    """Parse a limit value, keeping integers integral."""
    value = raw.strip()
    try:
        return int(value)
    except ValueError:
        pass
    try:
        parsed = float(value)
    except ValueError as exc:
        raise ParseError(f"limit value {raw!r} is not numeric") from exc
    if not math.isfinite(parsed):
        raise ParseError(f"limit value {raw!r} is not a finite number")
    return parsed


class LimitStore:
    """Warning/critical limits keyed by rendered metric name."""

    def __init__(self) -> None:
        self._limits: dict[tuple[str, LimitKind], Number] = {}

    def add(self, kind: LimitKind, spec: str) -> None:
        """Store a ``name=value`` spec, replacing any earlier value."""
        name, sep, raw_value = spec.partition("=")
        name = name.strip()
        if not sep or not name or not raw_value.strip():
            raise ParseError(
                f"invalid {kind.value} limit {spec!r}: expected name=value"
            )
        self._limits[(name, kind)] = parse_limit_value(raw_value)

    def add_all(self, kind: LimitKind, specs: Iterable[str]) -> None:
        for spec in specs:
            self.add(kind, spec)

    def lookup(self, name: str, kind: LimitKind) -> Number | None:
        return self._limits.get((name, kind))

    def __len__(self) -> int:
        return len(self._limits)


def build_limit_store(
    *,
    warning: Iterable[str] = (),
    critical: Iterable[str] = (),
) -> LimitStore:
    """Build a store from warning and critical spec lists."""
    store = LimitStore()
    store.add_all(LimitKind.WARNING, warning)
    store.add_all(LimitKind.CRITICAL, critical)
    return store


def format_number(value: Number) -> str:
    """Render a limit or metric value without a trailing ``.0``."""
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)
