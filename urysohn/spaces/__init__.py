"""Concrete spaces and oracles the core can run against."""

from .real_line import (
    OpenUnion, ClosedUnion, RealLine, ThickeningOracle,
    interval, closed_interval, points, ball, distance,
    open_from_json, closed_from_json,
)
from .finite import FiniteSpace, FiniteNormalityOracle

__all__ = [
    "OpenUnion", "ClosedUnion", "RealLine", "ThickeningOracle",
    "interval", "closed_interval", "points", "ball", "distance",
    "open_from_json", "closed_from_json",
    "FiniteSpace", "FiniteNormalityOracle",
]
