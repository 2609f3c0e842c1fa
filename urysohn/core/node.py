# urysohn/core/node.py
"""
CU nodes: the lazily generated approximation tree.

A node is a pair (C, U) with C closed, U open and C ⊆ U. Its two children
come from a single oracle call V = separate(C, U):

    left()  = (C, V)
    right() = (closure(V), U)

so left().U = V ⊆ closure(V) = right().C at every node of the tree. That
inclusion is what the approximation and continuity code relies on.

The tree is infinite and never materialized. Children are created on
demand; V is memoized per node so the oracle runs at most once per node.
"""

from __future__ import annotations

import logging

from urysohn.errors import PreconditionViolated
from .topology import ClosedSet, NormalityOracle, OpenSet, Space

_logger = logging.getLogger(__name__)

_UNSET = object()


class CU:
    """Immutable (C, U) node with memoized children."""

    __slots__ = ("_c", "_u", "_space", "_oracle", "_depth", "_v", "_left", "_right")

    def __init__(
        self,
        c: ClosedSet,
        u: OpenSet,
        space: Space,
        oracle: NormalityOracle,
        *,
        _depth: int = 0,
    ) -> None:
        self._c = c
        self._u = u
        self._space = space
        self._oracle = oracle
        self._depth = _depth
        self._v = _UNSET
        self._left: CU | None = None
        self._right: CU | None = None

    # ------------------------------------------------------------------
    # Construction
    # ------------------------------------------------------------------

    @classmethod
    def make(
        cls,
        c: ClosedSet,
        u: OpenSet,
        space: Space,
        oracle: NormalityOracle,
        check: bool = True,
    ) -> "CU":
        """
        Build a root node.

        Raises:
            PreconditionViolated: if check is set and C is not a subset of U.
        """
        if check and not space.subset(c, u):
            raise PreconditionViolated(f"root node requires C ⊆ U, got C={c!r}, U={u!r}")
        return cls(c, u, space, oracle)

    def rerooted(self) -> "CU":
        """Same (C, U) with fresh, unshared memoization cells."""
        return CU(self._c, self._u, self._space, self._oracle, _depth=self._depth)

    # ------------------------------------------------------------------
    # Read-only view
    # ------------------------------------------------------------------

    @property
    def C(self) -> ClosedSet:
        return self._c

    @property
    def U(self) -> OpenSet:
        return self._u

    @property
    def space(self) -> Space:
        return self._space

    @property
    def oracle(self) -> NormalityOracle:
        return self._oracle

    @property
    def tree_depth(self) -> int:
        """Distance from the root this node was derived from."""
        return self._depth

    def __setattr__(self, name, value):
        if name in CU.__slots__ and not hasattr(self, name):
            object.__setattr__(self, name, value)
            return
        if name in ("_v", "_left", "_right"):
            # memo cells
            object.__setattr__(self, name, value)
            return
        raise AttributeError(f"CU nodes are immutable (tried to set {name!r})")

    def __repr__(self) -> str:
        return f"CU(C={self._c!r}, U={self._u!r})"

    # ------------------------------------------------------------------
    # Children
    # ------------------------------------------------------------------

    def separator(self) -> OpenSet:
        """The oracle's V for this node; computed on first use."""
        if self._v is _UNSET:
            _logger.debug("oracle.separate at tree depth %d", self._depth)
            self._v = self._oracle.separate(self._c, self._u)
        return self._v

    def left(self) -> "CU":
        if self._left is None:
            self._left = CU(
                self._c, self.separator(), self._space, self._oracle,
                _depth=self._depth + 1,
            )
        return self._left

    def right(self) -> "CU":
        if self._right is None:
            self._right = CU(
                self._space.closure(self.separator()), self._u, self._space, self._oracle,
                _depth=self._depth + 1,
            )
        return self._right

    # ------------------------------------------------------------------
    # Membership shortcuts
    # ------------------------------------------------------------------

    def in_c(self, x) -> bool:
        return self._space.contains(self._c, x)

    def in_u(self, x) -> bool:
        return self._space.contains(self._u, x)


def build(c: ClosedSet, u: OpenSet, space: Space, oracle: NormalityOracle) -> CU:
    """Root constructor; alias for CU.make with the precondition checked."""
    return CU.make(c, u, space, oracle, check=True)
