# urysohn/spaces/real_line.py
"""
The real line with finite unions of intervals.

Open sets are finite unions of open intervals (a, b); closed sets are
finite unions of closed intervals [a, b]. Infinite endpoints express rays
and the whole line. Both are kept normalized (sorted, overlapping parts
merged) so equality of the component tuples is equality of sets.

This is enough topology to run the whole construction end to end: every
operation the core asks for (closure, complement, inclusion, basic
neighborhoods, intersection) is exact on these sets. Finite endpoints are
stored as Fractions: the oracle halves its margin at every level, and
float endpoints would stop moving once the margin drops below their ulp.
"""

from __future__ import annotations

import logging
import math
from fractions import Fraction
from typing import Iterable, List, Sequence, Tuple, Union

from urysohn.core.topology import NormalityOracle, Space
from urysohn.errors import PreconditionViolated

_logger = logging.getLogger(__name__)

INF = math.inf

# Radius used for neighborhoods inside unbounded components.
MAX_BALL_RADIUS = 1.0

Endpoint = Union[Fraction, float]
Pair = Tuple[Endpoint, Endpoint]


def _as_endpoint(v) -> Endpoint:
    """Exact Fraction for finite values, float +-inf for unbounded ones."""
    if v is None:
        raise TypeError("use -inf/inf (or None only through from_json) for unbounded endpoints")
    if isinstance(v, bool):
        raise TypeError(f"endpoint must be a number, got {v!r}")
    if isinstance(v, Fraction):
        return v
    if isinstance(v, int):
        return Fraction(v)
    try:
        f = float(v)
    except (TypeError, ValueError) as e:
        raise TypeError(f"endpoint must be a number, got {v!r}") from e
    if f != f:
        raise ValueError("endpoint must not be NaN")
    if math.isinf(f):
        return f
    return Fraction(f)


def _fmt(v: Endpoint) -> str:
    return f"{float(v):g}"


def _left_inside(outer_lo: float, inner_lo: float) -> bool:
    return outer_lo < inner_lo or outer_lo == inner_lo == -INF


def _right_inside(outer_hi: float, inner_hi: float) -> bool:
    return inner_hi < outer_hi or outer_hi == inner_hi == INF


# ---------------------------------------------------------------------------
# Set types
# ---------------------------------------------------------------------------

class OpenUnion:
    """Finite union of open intervals."""

    __slots__ = ("components",)

    def __init__(self, intervals: Iterable[Sequence[float]] = ()) -> None:
        parts: List[Pair] = []
        for iv in intervals:
            a, b = (_as_endpoint(v) for v in iv)
            if a == INF or b == -INF:
                raise ValueError(f"open interval ({a}, {b}) has a misplaced infinite endpoint")
            if a < b:
                parts.append((a, b))
        parts.sort()
        merged: List[Pair] = []
        for a, b in parts:
            # (0, 1) and (1, 2) stay apart: 1 belongs to neither
            if merged and a < merged[-1][1]:
                merged[-1] = (merged[-1][0], max(merged[-1][1], b))
            else:
                merged.append((a, b))
        self.components: Tuple[Pair, ...] = tuple(merged)

    def __contains__(self, x) -> bool:
        return any(a < x < b for a, b in self.components)

    def __eq__(self, other) -> bool:
        return isinstance(other, OpenUnion) and self.components == other.components

    def __hash__(self) -> int:
        return hash(("open", self.components))

    def __bool__(self) -> bool:
        return bool(self.components)

    def __repr__(self) -> str:
        if not self.components:
            return "∅"
        return " ∪ ".join(f"({_fmt(a)}, {_fmt(b)})" for a, b in self.components)

    def component_of(self, x) -> Pair | None:
        for a, b in self.components:
            if a < x < b:
                return (a, b)
        return None

    def to_json(self) -> list:
        return [[_json_endpoint(a), _json_endpoint(b)] for a, b in self.components]


class ClosedUnion:
    """Finite union of closed intervals (degenerate [a, a] allowed)."""

    __slots__ = ("components",)

    def __init__(self, intervals: Iterable[Sequence[float]] = ()) -> None:
        parts: List[Pair] = []
        for iv in intervals:
            a, b = (_as_endpoint(v) for v in iv)
            if a == INF or b == -INF:
                raise ValueError(f"closed interval [{a}, {b}] has a misplaced infinite endpoint")
            if a > b:
                raise ValueError(f"closed interval [{a}, {b}] is reversed")
            parts.append((a, b))
        parts.sort()
        merged: List[Pair] = []
        for a, b in parts:
            if merged and a <= merged[-1][1]:
                merged[-1] = (merged[-1][0], max(merged[-1][1], b))
            else:
                merged.append((a, b))
        self.components: Tuple[Pair, ...] = tuple(merged)

    def __contains__(self, x) -> bool:
        return any(a <= x <= b for a, b in self.components)

    def __eq__(self, other) -> bool:
        return isinstance(other, ClosedUnion) and self.components == other.components

    def __hash__(self) -> int:
        return hash(("closed", self.components))

    def __bool__(self) -> bool:
        return bool(self.components)

    def __repr__(self) -> str:
        if not self.components:
            return "∅"
        return " ∪ ".join(
            f"{{{_fmt(a)}}}" if a == b else f"[{_fmt(a)}, {_fmt(b)}]" for a, b in self.components
        )

    def to_json(self) -> list:
        return [[_json_endpoint(a), _json_endpoint(b)] for a, b in self.components]


def _json_endpoint(v: Endpoint):
    return None if math.isinf(v) else float(v)


def _from_json_pairs(obj, kind: str) -> List[Pair]:
    if not isinstance(obj, list):
        raise TypeError(f"{kind} set must be a JSON list of [lo, hi] pairs")
    pairs: List[Pair] = []
    for i, iv in enumerate(obj):
        if not isinstance(iv, list) or len(iv) != 2:
            raise TypeError(f"{kind}[{i}] must be a [lo, hi] pair, got {iv!r}")
        lo, hi = iv
        pairs.append((-INF if lo is None else lo, INF if hi is None else hi))
    return pairs


def open_from_json(obj) -> OpenUnion:
    """Parse [[lo, hi], ...] with null for an infinite endpoint."""
    return OpenUnion(_from_json_pairs(obj, "open"))


def closed_from_json(obj) -> ClosedUnion:
    """Parse [[lo, hi], ...] with null for an infinite endpoint."""
    return ClosedUnion(_from_json_pairs(obj, "closed"))


# ---------------------------------------------------------------------------
# Constructors
# ---------------------------------------------------------------------------

def interval(a: float, b: float) -> OpenUnion:
    return OpenUnion([(a, b)])


def closed_interval(a: float, b: float) -> ClosedUnion:
    return ClosedUnion([(a, b)])


def points(*xs: float) -> ClosedUnion:
    return ClosedUnion([(x, x) for x in xs])


def ball(center: float, radius: float) -> OpenUnion:
    if not radius > 0:
        raise ValueError(f"ball radius must be > 0, got {radius}")
    c, r = _as_endpoint(center), _as_endpoint(radius)
    return OpenUnion([(c - r, c + r)])


EMPTY_OPEN = OpenUnion()
EMPTY_CLOSED = ClosedUnion()
WHOLE_LINE = OpenUnion([(-INF, INF)])


# ---------------------------------------------------------------------------
# Metric helpers
# ---------------------------------------------------------------------------

def _gap(p: Pair, q: Pair) -> Endpoint:
    return max(0.0, q[0] - p[1], p[0] - q[1])


def distance(a: ClosedUnion, b: ClosedUnion) -> Endpoint:
    """inf over pairs of points; inf when either set is empty."""
    best = INF
    for p in a.components:
        for q in b.components:
            best = min(best, _gap(p, q))
    return best


def thicken(c: ClosedUnion, eps: float) -> OpenUnion:
    """{x : d(x, c) < eps}."""
    eps = _as_endpoint(eps)
    return OpenUnion([(a - eps, b + eps) for a, b in c.components])


# ---------------------------------------------------------------------------
# Space and oracle
# ---------------------------------------------------------------------------

class RealLine(Space):
    """ℝ with the usual topology, restricted to finite interval unions."""

    def subset(self, c: ClosedUnion, u: OpenUnion) -> bool:
        # each closed component is connected, so it must sit in one open component
        for a, b in c.components:
            if not any(
                _left_inside(lo, a) and _right_inside(hi, b) for lo, hi in u.components
            ):
                return False
        return True

    def closure(self, u: OpenUnion) -> ClosedUnion:
        return ClosedUnion(u.components)

    def complement(self, s):
        if isinstance(s, OpenUnion):
            return self._complement_open(s)
        if isinstance(s, ClosedUnion):
            return self._complement_closed(s)
        raise TypeError(f"not a real-line set: {s!r}")

    def _complement_open(self, u: OpenUnion) -> ClosedUnion:
        out: List[Pair] = []
        cursor = -INF
        for a, b in u.components:
            if a > cursor or (a == cursor and a != -INF):
                out.append((cursor, a))
            cursor = b
        if cursor < INF:
            out.append((cursor, INF))
        return ClosedUnion(out)

    def _complement_closed(self, c: ClosedUnion) -> OpenUnion:
        out: List[Pair] = []
        cursor = -INF
        for a, b in c.components:
            if a > cursor:
                out.append((cursor, a))
            cursor = b
        if cursor < INF:
            out.append((cursor, INF))
        return OpenUnion(out)

    def whole(self) -> OpenUnion:
        return WHOLE_LINE

    def nbhd_inside(self, x: float, u: OpenUnion) -> OpenUnion:
        comp = u.component_of(x)
        if comp is None:
            raise PreconditionViolated(f"{x!r} is not in {u!r}")
        a, b = comp
        x = _as_endpoint(x)
        return ball(x, min(x - a, b - x, MAX_BALL_RADIUS))

    def meet(self, a: OpenUnion, b: OpenUnion) -> OpenUnion:
        out: List[Pair] = []
        for p in a.components:
            for q in b.components:
                lo, hi = max(p[0], q[0]), min(p[1], q[1])
                if lo < hi:
                    out.append((lo, hi))
        return OpenUnion(out)


class ThickeningOracle(NormalityOracle):
    """
    Metric normality on the real line.

    separate(C, U) = {x : d(x, C) < ε} with ε half the distance from C to
    the complement of U, so closure(V) = {x : d(x, C) <= ε} stays in U.
    """

    def __init__(self, space: RealLine | None = None) -> None:
        self.space = space if space is not None else RealLine()

    def separate(self, c: ClosedUnion, u: OpenUnion) -> OpenUnion:
        if not c.components:
            return EMPTY_OPEN
        outside = self.space.complement(u)
        gap = distance(c, outside)
        if gap == 0.0:
            raise PreconditionViolated(f"C={c!r} is not inside U={u!r}")
        eps = Fraction(1) if math.isinf(gap) else gap / 2
        v = thicken(c, eps)
        _logger.debug("separate: eps=%g V=%r", float(eps), v)
        return v
