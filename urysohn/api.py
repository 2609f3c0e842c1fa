# urysohn/api.py
"""
High-level Urysohn API.

    separate_closed(A, B, space, oracle)  -> UrysohnFunction, 0 on A, 1 on B
    UrysohnFunction(x)                    -> value within the tolerance

The function is the limit of the CU tree rooted at (A, complement(B)).
"""

from __future__ import annotations

import threading
from typing import Any, Iterable, List, Optional

from .config import load_settings
from .core.node import CU
from .core.topology import ClosedSet, NormalityOracle, Space
from .engine.approx import LimResult, depth_for_tolerance, evaluate
from .engine.continuity import ContinuityCertificate, certify
from .engine.parallel import evaluate_many
from .errors import PreconditionViolated
from .oracles import wrap_oracle


class UrysohnFunction:
    """Continuous [0, 1]-valued function attached to a root node."""

    def __init__(self, root: CU, tolerance: float | None = None) -> None:
        if tolerance is None:
            tolerance = load_settings().default_tolerance
        depth_for_tolerance(tolerance)
        self.root = root
        self.tolerance = tolerance

    def __call__(self, x) -> float:
        return self.evaluate(x).value

    def evaluate(self, x) -> LimResult:
        return evaluate(self.root, x, self.tolerance)

    def evaluate_many(
        self,
        xs: Iterable[Any],
        max_workers: int | None = None,
        cancel: Optional[threading.Event] = None,
    ) -> List[LimResult]:
        return evaluate_many(self.root, xs, self.tolerance, max_workers=max_workers, cancel=cancel)

    def certify(self, x, level: int) -> ContinuityCertificate:
        return certify(self.root, x, level)


def function_from_node(root: CU, tolerance: float | None = None) -> UrysohnFunction:
    return UrysohnFunction(root, tolerance)


def separate_closed(
    a: ClosedSet,
    b: ClosedSet,
    space: Space,
    oracle: NormalityOracle,
    tolerance: float | None = None,
    check: bool | None = None,
) -> UrysohnFunction:
    """
    Urysohn function for disjoint closed sets a and b.

    Raises:
        PreconditionViolated: if a and b intersect.
    """
    u = space.complement(b)
    if not space.subset(a, u):
        raise PreconditionViolated(f"closed sets must be disjoint, got A={a!r}, B={b!r}")
    root = CU.make(a, u, space, wrap_oracle(oracle, space, check), check=False)
    return UrysohnFunction(root, tolerance)
