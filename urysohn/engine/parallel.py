# urysohn/engine/parallel.py
"""
Batch evaluation over many points.

Points are independent, so they are spread over a thread pool. Every task
re-roots on a fresh copy of the node so that memo cells are never shared
between threads; only the oracle is shared, and it must be thread-safe.

Cancellation is checked between points, never inside a descent.
"""

from __future__ import annotations

import logging
import threading
from concurrent.futures import ThreadPoolExecutor
from typing import Any, Iterable, List, Optional

from urysohn.config import load_settings
from urysohn.core.node import CU
from urysohn.errors import EvaluationCancelled
from .approx import LimResult, depth_for_tolerance, evaluate

_logger = logging.getLogger(__name__)


def _evaluate_one(root: CU, x, tolerance: float, cancel: Optional[threading.Event]) -> LimResult:
    if cancel is not None and cancel.is_set():
        raise EvaluationCancelled(f"evaluation of {x!r} cancelled")
    return evaluate(root.rerooted(), x, tolerance)


def evaluate_many(
    node: CU,
    points: Iterable[Any],
    tolerance: float,
    max_workers: int | None = None,
    cancel: Optional[threading.Event] = None,
) -> List[LimResult]:
    """
    Evaluate lim at each point, in input order.

    Raises:
        ValueError: bad tolerance (checked once, before any work starts).
        EvaluationCancelled: cancel was set before some point was reached.
    """
    depth_for_tolerance(tolerance)
    xs = list(points)
    if not xs:
        return []
    if max_workers is None:
        max_workers = load_settings().max_workers
    _logger.debug("evaluate_many: %d points, max_workers=%s", len(xs), max_workers)

    with ThreadPoolExecutor(max_workers=max_workers) as pool:
        futures = [pool.submit(_evaluate_one, node, x, tolerance, cancel) for x in xs]
        try:
            return [f.result() for f in futures]
        except EvaluationCancelled:
            for f in futures:
                f.cancel()
            raise
