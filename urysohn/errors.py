"""
Error taxonomy for the Urysohn core.

Programming errors (bad tolerance, negative depth) raise built-in
ValueError/TypeError directly. The classes here mark contract failures
between the core and its collaborators (topology layer, normality oracle).
"""

from __future__ import annotations


class UrysohnError(Exception):
    """Base class for all errors raised by urysohn."""


class PreconditionViolated(UrysohnError, ValueError):
    """A node was requested for (C, U) with C not contained in U."""


class OracleContractViolated(UrysohnError, RuntimeError):
    """
    The normality oracle returned V without C ⊆ V and closure(V) ⊆ U.

    Attributes:
        clause: "C ⊆ V" or "closure(V) ⊆ U", whichever failed first.
    """

    def __init__(self, message: str, clause: str) -> None:
        super().__init__(message)
        self.clause = clause


class SpaceNotNormal(UrysohnError):
    """No open set separates C from the complement of U in this space."""


class EvaluationCancelled(UrysohnError):
    """A batch evaluation was cancelled before this point was reached."""
