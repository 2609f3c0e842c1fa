"""
Pytest configuration for urysohn tests.

Provides:
- Hypothesis profiles (select with HYPOTHESIS_PROFILE, default "default")
- Shared fixtures for the real line and small finite spaces
"""

import os
import pytest

from urysohn import build
from urysohn.spaces import (
    RealLine, ThickeningOracle, FiniteSpace,
    interval, points,
)

# =============================================================================
# Hypothesis Configuration
# =============================================================================
# - print_blob=True makes failures easy to reproduce
# - "ci" derandomizes so CI failures are repeatable

try:
    from hypothesis import settings

    settings.register_profile(
        "default",
        print_blob=True,
        derandomize=False,
    )

    settings.register_profile(
        "ci",
        print_blob=True,
        derandomize=True,
    )

    settings.load_profile(os.environ.get("HYPOTHESIS_PROFILE", "default"))

except ImportError:
    pass  # hypothesis not installed, property tests skip themselves


# =============================================================================
# Shared Fixtures
# =============================================================================

@pytest.fixture(autouse=True)
def _clean_env(monkeypatch):
    """Tests start from default configuration regardless of the caller's shell."""
    for name in ("URYSOHN_CHECK_CONTRACTS", "URYSOHN_DEFAULT_TOLERANCE", "URYSOHN_MAX_WORKERS"):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def line():
    return RealLine()


@pytest.fixture
def oracle(line):
    return ThickeningOracle(line)


@pytest.fixture
def unit_root(line, oracle):
    """C = {0}, U = (-1, 1). The limit function is |x| clipped to 1."""
    return build(points(0.0), interval(-1.0, 1.0), line, oracle)


@pytest.fixture
def clustered_space():
    """
    {1, 2} and {3, 4} are clopen; inside the first cluster 1 is isolated-open
    but 2 is not.
    """
    return FiniteSpace(
        [1, 2, 3, 4],
        [[], [1], [1, 2], [3, 4], [1, 3, 4], [1, 2, 3, 4]],
    )


@pytest.fixture
def non_normal_space():
    """{b} and {c} are disjoint closed sets with no separating open sets."""
    return FiniteSpace(
        ["a", "b", "c"],
        [[], ["a"], ["a", "b"], ["a", "c"], ["a", "b", "c"]],
    )
