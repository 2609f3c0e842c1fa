# urysohn/oracles.py
"""
Oracle wrappers.

    CheckedOracle   validates C ⊆ V and closure(V) ⊆ U on every call
    CountingOracle  counts calls (thread-safe), for memoization checks
    wrap_oracle     applies CheckedOracle when contract checks are enabled
"""

from __future__ import annotations

import logging
import threading

from .config import contracts_enabled
from .core.topology import ClosedSet, NormalityOracle, OpenSet, Space
from .errors import OracleContractViolated, PreconditionViolated

_logger = logging.getLogger(__name__)


class CheckedOracle(NormalityOracle):
    """Guardrail around another oracle; raises instead of returning a bad V."""

    def __init__(self, inner: NormalityOracle, space: Space) -> None:
        self.inner = inner
        self.space = space

    def separate(self, c: ClosedSet, u: OpenSet) -> OpenSet:
        if not self.space.subset(c, u):
            raise PreconditionViolated(f"separate requires C ⊆ U, got C={c!r}, U={u!r}")

        v = self.inner.separate(c, u)

        if not self.space.subset(c, v):
            _logger.warning("oracle contract violated: C ⊄ V (C=%r, V=%r)", c, v)
            raise OracleContractViolated(
                f"oracle returned V={v!r} which does not contain C={c!r}", clause="C ⊆ V"
            )
        if not self.space.subset(self.space.closure(v), u):
            _logger.warning("oracle contract violated: closure(V) ⊄ U (V=%r, U=%r)", v, u)
            raise OracleContractViolated(
                f"closure of V={v!r} is not inside U={u!r}", clause="closure(V) ⊆ U"
            )
        return v


class CountingOracle(NormalityOracle):
    """Pass-through oracle that records how often it was consulted."""

    def __init__(self, inner: NormalityOracle) -> None:
        self.inner = inner
        self._lock = threading.Lock()
        self._calls = 0

    @property
    def calls(self) -> int:
        with self._lock:
            return self._calls

    def reset(self) -> None:
        with self._lock:
            self._calls = 0

    def separate(self, c: ClosedSet, u: OpenSet) -> OpenSet:
        with self._lock:
            self._calls += 1
        return self.inner.separate(c, u)


def wrap_oracle(oracle: NormalityOracle, space: Space, check: bool | None = None) -> NormalityOracle:
    """
    Return oracle, wrapped in a CheckedOracle if checks are on.

    check=None defers to URYSOHN_CHECK_CONTRACTS.
    """
    if check is None:
        check = contracts_enabled()
    if check and not isinstance(oracle, CheckedOracle):
        return CheckedOracle(oracle, space)
    return oracle
