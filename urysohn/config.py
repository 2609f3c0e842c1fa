"""
Runtime configuration for urysohn.

Settings come from environment variables and are read at call time, so
tests and CLIs can flip them without reloading modules:

    URYSOHN_CHECK_CONTRACTS    "1" validates every oracle call (default off)
    URYSOHN_DEFAULT_TOLERANCE  float > 0, used by lim() (default 1e-9)
    URYSOHN_MAX_WORKERS        int > 0, thread pool size for evaluate_many
"""

from __future__ import annotations

import os
from dataclasses import dataclass

# Deepest approximation level ever evaluated. Up to 53 levels the depth-n
# value is a dyadic with at most 53 significant bits, so the float result
# is exact and the 2^-n bound holds without rounding slack.
MAX_DEPTH = 53

DEFAULT_TOLERANCE = 1e-9

_TRUTHY = {"1", "true", "yes", "on"}


@dataclass(frozen=True)
class Settings:
    check_contracts: bool = False
    default_tolerance: float = DEFAULT_TOLERANCE
    max_workers: int | None = None


def _env_float(name: str, default: float) -> float:
    raw = os.environ.get(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        value = float(raw)
    except ValueError as e:
        raise ValueError(f"{name} must be a float, got {raw!r}") from e
    if not value > 0:
        raise ValueError(f"{name} must be > 0, got {raw!r}")
    return value


def _env_int(name: str) -> int | None:
    raw = os.environ.get(name)
    if raw is None or raw.strip() == "":
        return None
    try:
        value = int(raw)
    except ValueError as e:
        raise ValueError(f"{name} must be an integer, got {raw!r}") from e
    if value <= 0:
        raise ValueError(f"{name} must be > 0, got {raw!r}")
    return value


def load_settings() -> Settings:
    """Read the current environment into a Settings value."""
    return Settings(
        check_contracts=os.environ.get("URYSOHN_CHECK_CONTRACTS", "0").strip().lower() in _TRUTHY,
        default_tolerance=_env_float("URYSOHN_DEFAULT_TOLERANCE", DEFAULT_TOLERANCE),
        max_workers=_env_int("URYSOHN_MAX_WORKERS"),
    )


def contracts_enabled() -> bool:
    """Check if oracle contract validation is switched on."""
    return load_settings().check_contracts
