# urysohn/__init__.py
"""
Urysohn separating functions, computed.

Given a closed set C inside an open set U of a normal space, and an oracle
for the normality axiom, this package builds the lazy CU tree and evaluates
the limit function, which is 0 on C, 1 off U and continuous.

Public surface:

    - Nodes: CU, build
    - Collaborator interfaces: Space, NormalityOracle
    - Evaluation: approx, approx_reference, lim, lim_approx, evaluate,
                  evaluate_many, depth_for_tolerance, LimResult
    - Continuity: continuity_neighborhood, certify, check_certificate,
                  continuity_bound, ContinuityCertificate
    - High-level: separate_closed, UrysohnFunction
    - Oracle wrappers: CheckedOracle, CountingOracle, wrap_oracle
    - Errors: UrysohnError, PreconditionViolated, OracleContractViolated,
              SpaceNotNormal, EvaluationCancelled
"""

from __future__ import annotations

from .core.topology import Space, NormalityOracle
from .core.node import CU, build
from .engine.approx import (
    LimResult,
    approx,
    approx_reference,
    approx_sequence,
    depth_for_tolerance,
    evaluate,
    lim,
    lim_approx,
)
from .engine.continuity import (
    ContinuityCertificate,
    certify,
    check_certificate,
    continuity_bound,
    continuity_neighborhood,
)
from .engine.parallel import evaluate_many
from .api import UrysohnFunction, function_from_node, separate_closed
from .oracles import CheckedOracle, CountingOracle, wrap_oracle
from .errors import (
    UrysohnError,
    PreconditionViolated,
    OracleContractViolated,
    SpaceNotNormal,
    EvaluationCancelled,
)

__version__ = "0.1.0"

__all__ = [
    "Space", "NormalityOracle", "CU", "build",
    "LimResult", "approx", "approx_reference", "approx_sequence",
    "depth_for_tolerance", "evaluate", "lim", "lim_approx", "evaluate_many",
    "ContinuityCertificate", "certify", "check_certificate",
    "continuity_bound", "continuity_neighborhood",
    "UrysohnFunction", "function_from_node", "separate_closed",
    "CheckedOracle", "CountingOracle", "wrap_oracle",
    "UrysohnError", "PreconditionViolated", "OracleContractViolated",
    "SpaceNotNormal", "EvaluationCancelled",
]
