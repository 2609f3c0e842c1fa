# urysohn/engine/continuity.py
"""
Continuity certificates for the limit function.

For a node, a point x and a level n, continuity_neighborhood() builds an
open neighborhood N of x with

    |lim(node, y) - lim(node, x)| <= (3/4)^n   for every y in N.

Construction, by induction on n:

  n = 0    the whole space (both values lie in [0, 1]).

  case A   x ∈ left.U. Near x we stay inside left.U ⊆ right.C, where the
           right child's limit is 0, so only the left child moves:
               N = nbhd_inside(x, left.U) ∩ N(left, x, n-1)
           bound (3/4)^(n-1) / 2.

  case B   x ∉ left.U. The oracle contract on left gives
           closure(left.left.U) ⊆ left.U, so x has a neighborhood missing
           closure(left.left.U), where left.left's limit is 1:
               N = nbhd_inside(x, complement(closure(left.left.U)))
                   ∩ N(left.right, x, n-1) ∩ N(right, x, n-1)
           bound (r/2 + r) / 2 = (3/4) r with r = (3/4)^(n-1).
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Iterable, List, Tuple

from urysohn.core.node import CU
from .approx import lim_approx

_logger = logging.getLogger(__name__)

CONTRACTION = 0.75


@dataclass(frozen=True)
class ContinuityCertificate:
    """
    A neighborhood of `point` on which lim varies by at most `bound`.

    case_trace lists the branch ("A" or "B") taken at each level along
    the first recursive call, from `level` down to 1.
    """

    point: Any
    level: int
    bound: float
    neighborhood: Any
    case_trace: Tuple[str, ...] = field(default_factory=tuple)


def continuity_bound(level: int) -> float:
    """(3/4)^level."""
    _check_level(level)
    return CONTRACTION ** level


def _check_level(level: int) -> None:
    if isinstance(level, bool) or not isinstance(level, int):
        raise TypeError(f"level must be an int, got {type(level).__name__}")
    if level < 0:
        raise ValueError(f"level must be >= 0, got {level}")


def _neighborhood(node: CU, x, level: int, trace: List[str] | None):
    space = node.space
    if level == 0:
        return space.whole()

    left = node.left()
    if left.in_u(x):
        if trace is not None:
            trace.append("A")
        near = space.nbhd_inside(x, left.U)
        return space.meet(near, _neighborhood(left, x, level - 1, trace))

    if trace is not None:
        trace.append("B")
    outside = space.complement(space.closure(left.left().U))
    near = space.nbhd_inside(x, outside)
    n_mid = _neighborhood(left.right(), x, level - 1, trace)
    n_right = _neighborhood(node.right(), x, level - 1, None)
    return space.meet(near, space.meet(n_mid, n_right))


def continuity_neighborhood(node: CU, x, level: int):
    """Open neighborhood of x on which lim moves by at most (3/4)^level."""
    _check_level(level)
    return _neighborhood(node, x, level, None)


def certify(node: CU, x, level: int) -> ContinuityCertificate:
    _check_level(level)
    trace: List[str] = []
    nbhd = _neighborhood(node, x, level, trace)
    _logger.debug("certify: level=%d cases=%s", level, "".join(trace))
    return ContinuityCertificate(
        point=x,
        level=level,
        bound=continuity_bound(level),
        neighborhood=nbhd,
        case_trace=tuple(trace),
    )


def check_certificate(
    node: CU,
    cert: ContinuityCertificate,
    samples: Iterable[Any],
    tolerance: float,
) -> List[Any]:
    """
    Sample points inside the certificate neighborhood that break its bound.

    Each value is only known to within tolerance, so the allowed deviation
    is bound + 2 * tolerance. Samples outside the neighborhood are ignored.
    An empty result means no counterexample was found.
    """
    fx = lim_approx(node, cert.point, tolerance)
    slack = cert.bound + 2 * tolerance
    bad = []
    for y in samples:
        if not node.space.contains(cert.neighborhood, y):
            continue
        if abs(lim_approx(node, y, tolerance) - fx) > slack:
            bad.append(y)
    return bad
