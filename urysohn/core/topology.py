"""
Collaborator interfaces consumed by the core.

The core never inspects points or sets. Everything it needs to know about
the ambient space goes through a Space, and the only way it obtains new
open sets is through a NormalityOracle.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any

Point = Any
OpenSet = Any
ClosedSet = Any


class Space(ABC):
    """
    Topology capability object.

    Sets handed out by a Space must support `point in S`. The remaining
    operations are what the node tree and the continuity certificate use.
    """

    def contains(self, s: OpenSet | ClosedSet, x: Point) -> bool:
        return x in s

    @abstractmethod
    def subset(self, c: ClosedSet, u: OpenSet) -> bool:
        """Return True if every point of c lies in u."""

    @abstractmethod
    def closure(self, u: OpenSet) -> ClosedSet:
        """Smallest closed set containing u."""

    @abstractmethod
    def complement(self, s: OpenSet | ClosedSet) -> OpenSet | ClosedSet:
        """Complement; open sets map to closed sets and vice versa."""

    @abstractmethod
    def whole(self) -> OpenSet:
        """The whole space, as an open set."""

    @abstractmethod
    def nbhd_inside(self, x: Point, u: OpenSet) -> OpenSet:
        """
        A basic open neighborhood of x contained in u.

        Precondition: x in u.
        """

    @abstractmethod
    def meet(self, a: OpenSet, b: OpenSet) -> OpenSet:
        """Intersection of two open sets."""


class NormalityOracle(ABC):
    """
    Produces the intermediate open set of the normality axiom.

    For C ⊆ U, separate(C, U) returns V with C ⊆ V and closure(V) ⊆ U.
    Implementations must be deterministic and side-effect free, or at
    least thread-safe when shared across evaluate_many workers.
    """

    @abstractmethod
    def separate(self, c: ClosedSet, u: OpenSet) -> OpenSet:
        ...
