# urysohn/spaces/finite.py
"""
Finite topological spaces.

A FiniteSpace is a finite point set plus an explicit list of open sets.
Sets are plain frozensets. Finite spaces give exact, cheap examples of
phenomena the real line cannot show, e.g. a space that splits into two
clopen pieces, or a space that is not normal.
"""

from __future__ import annotations

import itertools
from typing import FrozenSet, Hashable, Iterable, List

from urysohn.core.topology import NormalityOracle, Space
from urysohn.errors import PreconditionViolated, SpaceNotNormal

PointSet = FrozenSet[Hashable]


class FiniteSpace(Space):
    """
    Finite space with an explicitly listed topology.

    Raises:
        ValueError: if opens is not a topology on points.
    """

    def __init__(self, points: Iterable[Hashable], opens: Iterable[Iterable[Hashable]]) -> None:
        self.points: PointSet = frozenset(points)
        topology = {frozenset(o) for o in opens}
        self._validate(topology)
        # sorted for deterministic iteration (oracle tie-breaks depend on it)
        self.opens: List[PointSet] = sorted(topology, key=_set_key)

    @classmethod
    def discrete(cls, points: Iterable[Hashable]) -> "FiniteSpace":
        pts = list(points)
        opens = [
            combo
            for r in range(len(pts) + 1)
            for combo in itertools.combinations(pts, r)
        ]
        return cls(pts, opens)

    def _validate(self, topology: set) -> None:
        if frozenset() not in topology:
            raise ValueError("topology must contain the empty set")
        if self.points not in topology:
            raise ValueError("topology must contain the whole space")
        for o in topology:
            if not o <= self.points:
                raise ValueError(f"open set {sorted(o, key=repr)} has points outside the space")
        for a, b in itertools.combinations(topology, 2):
            if a | b not in topology:
                raise ValueError("topology is not closed under union")
            if a & b not in topology:
                raise ValueError("topology is not closed under intersection")

    # ------------------------------------------------------------------
    # Space interface
    # ------------------------------------------------------------------

    def subset(self, c: PointSet, u: PointSet) -> bool:
        return frozenset(c) <= frozenset(u)

    def interior(self, s: PointSet) -> PointSet:
        out: PointSet = frozenset()
        for o in self.opens:
            if o <= s:
                out = out | o
        return out

    def closure(self, u: PointSet) -> PointSet:
        return self.points - self.interior(self.points - frozenset(u))

    def complement(self, s: PointSet) -> PointSet:
        return self.points - frozenset(s)

    def whole(self) -> PointSet:
        return self.points

    def minimal_nbhd(self, x: Hashable) -> PointSet:
        """Intersection of every open set containing x."""
        if x not in self.points:
            raise PreconditionViolated(f"{x!r} is not a point of this space")
        out = self.points
        for o in self.opens:
            if x in o:
                out = out & o
        return out

    def nbhd_inside(self, x: Hashable, u: PointSet) -> PointSet:
        if x not in u:
            raise PreconditionViolated(f"{x!r} is not in {sorted(u, key=repr)}")
        return self.minimal_nbhd(x) & frozenset(u)

    def meet(self, a: PointSet, b: PointSet) -> PointSet:
        return frozenset(a) & frozenset(b)

    def is_open(self, s: Iterable[Hashable]) -> bool:
        return frozenset(s) in self.opens

    def is_closed(self, s: Iterable[Hashable]) -> bool:
        return self.complement(frozenset(s)) in self.opens


def _set_key(s: PointSet):
    return (len(s), sorted(repr(p) for p in s))


class FiniteNormalityOracle(NormalityOracle):
    """Smallest open V with C ⊆ V and closure(V) ⊆ U, found by search."""

    def __init__(self, space: FiniteSpace) -> None:
        self.space = space

    def separate(self, c: PointSet, u: PointSet) -> PointSet:
        c, u = frozenset(c), frozenset(u)
        if not c <= u:
            raise PreconditionViolated(f"C={sorted(c, key=repr)} is not inside U={sorted(u, key=repr)}")
        for v in self.space.opens:
            if c <= v and self.space.closure(v) <= u:
                return v
        raise SpaceNotNormal(
            f"no open set separates {sorted(c, key=repr)} from the complement of {sorted(u, key=repr)}"
        )
