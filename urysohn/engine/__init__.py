"""Evaluation of the approximation tree."""

from .approx import (
    LimResult, approx, approx_reference, approx_sequence,
    depth_for_tolerance, evaluate, lim, lim_approx,
)
from .continuity import (
    ContinuityCertificate, certify, check_certificate,
    continuity_bound, continuity_neighborhood,
)
from .parallel import evaluate_many

__all__ = [
    "LimResult", "approx", "approx_reference", "approx_sequence",
    "depth_for_tolerance", "evaluate", "lim", "lim_approx",
    "ContinuityCertificate", "certify", "check_certificate",
    "continuity_bound", "continuity_neighborhood",
    "evaluate_many",
]
