# urysohn/bench.py
"""
Tiny benchmarking helper for Urysohn evaluations.

This is intentionally simple and does not depend on any external libs.

Usage:

    from urysohn.bench import benchmark_evaluate
    from urysohn import build
    from urysohn.spaces import RealLine, ThickeningOracle, points, interval

    def build_root():
        line = RealLine()
        return build(points(0.0), interval(-1.0, 1.0), line, ThickeningOracle(line))

    stats = benchmark_evaluate(build_root, [0.1, 0.5, 0.9], repeats=20)
    print(stats)

A fresh root is built for every repeat so memoized children from one run
do not make the next one look free.
"""

from __future__ import annotations

import time
from typing import Any, Callable, Dict, Iterable

from .core.node import CU
from .engine.approx import evaluate


def benchmark_evaluate(
    builder: Callable[[], CU],
    points: Iterable[Any],
    tolerance: float = 1e-9,
    repeats: int = 10,
) -> Dict[str, Any]:
    """
    Run `repeats` evaluations of every point against `builder()`.

    Returns a small stats dict:
        {
            "repeats": N,
            "points": P,
            "min_s": ...,
            "max_s": ...,
            "avg_s": ...,
            "total_s": ...,
        }
    """
    if repeats <= 0:
        raise ValueError("repeats must be > 0")

    xs = list(points)
    times = []

    for _ in range(repeats):
        root = builder()
        t0 = time.perf_counter()
        for x in xs:
            evaluate(root, x, tolerance)
        t1 = time.perf_counter()
        times.append(t1 - t0)

    total = sum(times)
    return {
        "repeats": repeats,
        "points": len(xs),
        "min_s": min(times),
        "max_s": max(times),
        "avg_s": total / repeats,
        "total_s": total,
    }
