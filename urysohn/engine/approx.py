# urysohn/engine/approx.py
"""
Depth-n approximations and their limit.

approx(node, 0, x)   = 1 if x ∉ node.U else 0
approx(node, n+1, x) = (approx(node.left(), n, x) + approx(node.right(), n, x)) / 2

Two facts make this cheap to evaluate:

  * boundary values hold at every depth: x ∈ C gives 0, x ∉ U gives 1;
  * left().U ⊆ right().C, so below any node at most one child is undecided.
    If x ∈ left().U the right child is 0; otherwise the left child is 1.

approx() therefore walks a single root-to-leaf path (O(depth) oracle
calls) and returns exactly the value of the full recursion, which is kept
as approx_reference() for cross-checking.

lim is the supremum over depth. At depth n the 2^n leaves form a chain
ℓ1.U ⊆ ℓ2.C, ℓ2.U ⊆ ℓ3.C, ... and only the first leaf whose U contains x
can still move, so lim - approx(n) <= 2^-n.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass

from urysohn.config import MAX_DEPTH, load_settings
from urysohn.core.node import CU

_logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class LimResult:
    """
    Outcome of a certified evaluation.

    value:       approx at the chosen depth (or the exact limit)
    depth:       levels descended before the value was fixed
    exact:       True if the descent stopped on a boundary case, so value == lim
    error_bound: guaranteed bound on lim - value (0.0 when exact)
    """

    value: float
    depth: int
    exact: bool
    error_bound: float


def _check_depth(depth: int) -> None:
    if isinstance(depth, bool) or not isinstance(depth, int):
        raise TypeError(f"depth must be an int, got {type(depth).__name__}")
    if depth < 0:
        raise ValueError(f"depth must be >= 0, got {depth}")


def _descend(node: CU, depth: int, x) -> LimResult:
    value = 0.0
    weight = 1.0
    current = node
    for level in range(depth + 1):
        if not current.in_u(x):
            return LimResult(value + weight, level, True, 0.0)
        if current.in_c(x):
            return LimResult(value, level, True, 0.0)
        if level == depth:
            break
        left = current.left()
        weight /= 2
        if left.in_u(x):
            # x ∈ left.U ⊆ right.C: right half contributes 0
            current = left
        else:
            # x ∉ left.U: left half is identically 1
            value += weight
            current = current.right()
    return LimResult(value, depth, False, weight)


def approx(node: CU, depth: int, x) -> float:
    """Depth-`depth` approximation of the separating function at x."""
    _check_depth(depth)
    return _descend(node, depth, x).value


def approx_reference(node: CU, depth: int, x) -> float:
    """
    The defining recursion, evaluated literally.

    Exponential in depth; meant for inspection and tests at small depth.
    """
    _check_depth(depth)
    if depth == 0:
        return 0.0 if node.in_u(x) else 1.0
    return (approx_reference(node.left(), depth - 1, x)
            + approx_reference(node.right(), depth - 1, x)) / 2


def approx_sequence(node: CU, depth: int, x) -> list[float]:
    """[approx(node, 0, x), ..., approx(node, depth, x)]."""
    _check_depth(depth)
    return [approx(node, d, x) for d in range(depth + 1)]


def depth_for_tolerance(tolerance: float) -> int:
    """
    Smallest n with 2^-n <= tolerance.

    Raises:
        ValueError: if tolerance is not a positive finite number, or needs
            more than MAX_DEPTH levels.
    """
    if isinstance(tolerance, bool) or not isinstance(tolerance, (int, float)):
        raise TypeError(f"tolerance must be a number, got {type(tolerance).__name__}")
    if not (tolerance > 0) or math.isinf(tolerance):
        raise ValueError(f"tolerance must be a positive finite number, got {tolerance!r}")
    if tolerance >= 1:
        return 0
    n = max(0, math.ceil(-math.log2(tolerance)))
    # guard against log2 rounding one level short
    while 2.0 ** -n > tolerance:
        n += 1
    if n > MAX_DEPTH:
        raise ValueError(
            f"tolerance {tolerance!r} needs depth {n}, above the limit of {MAX_DEPTH}"
        )
    return n


def evaluate(node: CU, x, tolerance: float) -> LimResult:
    """Evaluate lim at x to within tolerance, reporting how it was reached."""
    depth = depth_for_tolerance(tolerance)
    _logger.debug("evaluate: tolerance=%g depth=%d", tolerance, depth)
    return _descend(node, depth, x)


def lim_approx(node: CU, x, tolerance: float) -> float:
    """approx at a depth whose error bound is within tolerance of lim."""
    return evaluate(node, x, tolerance).value


def lim(node: CU, x) -> float:
    """lim_approx at the configured default tolerance."""
    return lim_approx(node, x, load_settings().default_tolerance)
