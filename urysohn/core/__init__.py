"""Node tree and collaborator interfaces."""

from .topology import Space, NormalityOracle
from .node import CU, build

__all__ = ["Space", "NormalityOracle", "CU", "build"]
