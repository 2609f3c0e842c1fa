"""
Property-based tests for the approximation tree using Hypothesis.

Random pairs of disjoint closed sets on the real line are drawn from
integer endpoints, so every thickening stays dyadic and the expected
values are easy to reason about. A second family draws arbitrary float
endpoints and runs every oracle call through CheckedOracle down to the
finest tolerance depth_for_tolerance accepts.

Run with: pytest tests/test_approx_fuzzer.py --hypothesis-show-statistics -v
"""

import pytest

# Skip all tests if hypothesis is not installed
hypothesis = pytest.importorskip("hypothesis", reason="hypothesis required for fuzzer tests")

from hypothesis import given, example, strategies as st, settings, HealthCheck
from hypothesis.strategies import composite

from urysohn import (
    CheckedOracle, approx, approx_reference, build, certify, check_certificate,
    evaluate, lim_approx,
)
from urysohn.config import MAX_DEPTH
from urysohn.spaces import (
    ClosedUnion, RealLine, ThickeningOracle, closed_interval, interval,
)


# =============================================================================
# Strategies
# =============================================================================

@composite
def disjoint_closed_pair(draw):
    """Alternating closed intervals [p0, p1], [p2, p3], ... split into A and B."""
    ends = draw(st.lists(st.integers(min_value=-12, max_value=12), min_size=4, max_size=8, unique=True))
    ends.sort()
    if len(ends) % 2:
        ends = ends[:-1]
    pieces = [(ends[i], ends[i + 1]) for i in range(0, len(ends), 2)]
    a = ClosedUnion(pieces[0::2])
    b = ClosedUnion(pieces[1::2])
    return a, b


@composite
def rooted(draw):
    a, b = draw(disjoint_closed_pair())
    line = RealLine()
    return build(a, line.complement(b), line, ThickeningOracle(line))


@composite
def float_rooted(draw):
    """[b, c] inside (a, d) with arbitrary, mostly non-dyadic float endpoints."""
    ends = draw(st.lists(
        st.floats(min_value=-50, max_value=50, allow_nan=False, allow_infinity=False),
        min_size=4, max_size=4, unique=True,
    ))
    a, b, c, d = sorted(ends)
    line = RealLine()
    return build(closed_interval(b, c), interval(a, d), line, CheckedOracle(ThickeningOracle(line), line))


def _checked_root(c_lo, c_hi, u_lo, u_hi):
    line = RealLine()
    return build(
        closed_interval(c_lo, c_hi), interval(u_lo, u_hi), line,
        CheckedOracle(ThickeningOracle(line), line),
    )


FINEST = 2.0 ** -MAX_DEPTH
fine_tolerances = st.sampled_from([1e-9, 1e-12, 1e-15, FINEST])
wide_points = st.floats(min_value=-55, max_value=55, allow_nan=False, allow_infinity=False)

sample_points = st.floats(min_value=-14, max_value=14, allow_nan=False, allow_infinity=False)
depths = st.integers(min_value=0, max_value=10)

PROFILE = settings(max_examples=150, deadline=None, suppress_health_check=[HealthCheck.too_slow])


# =============================================================================
# Properties
# =============================================================================

class TestApproxProperties:
    @PROFILE
    @given(rooted(), depths, sample_points)
    def test_range(self, root, depth, x):
        assert 0.0 <= approx(root, depth, x) <= 1.0

    @PROFILE
    @given(rooted(), depths, sample_points)
    def test_boundary_values(self, root, depth, x):
        v = approx(root, depth, x)
        if x in root.C:
            assert v == 0.0
        if x not in root.U:
            assert v == 1.0

    @PROFILE
    @given(rooted(), depths, sample_points)
    def test_monotone_in_depth(self, root, depth, x):
        assert approx(root, depth, x) <= approx(root, depth + 1, x)

    @PROFILE
    @given(rooted(), depths, sample_points)
    def test_midpoint_recurrence(self, root, depth, x):
        expected = (approx(root.left(), depth, x) + approx(root.right(), depth, x)) / 2
        assert approx(root, depth + 1, x) == expected

    @PROFILE
    @given(rooted(), depths, sample_points)
    def test_antitone_in_node_order(self, root, depth, x):
        assert approx(root.right(), depth, x) <= approx(root.left(), depth, x)

    @PROFILE
    @given(rooted(), st.integers(min_value=0, max_value=5), sample_points)
    def test_descent_matches_reference(self, root, depth, x):
        assert approx(root, depth, x) == approx_reference(root, depth, x)


class TestLimProperties:
    @PROFILE
    @given(rooted(), sample_points)
    def test_error_bound(self, root, x):
        """Deeper evaluation never moves the value by more than the coarser bound."""
        coarse = lim_approx(root, x, 2.0 ** -8)
        fine = lim_approx(root, x, 2.0 ** -20)
        assert coarse <= fine <= coarse + 2.0 ** -8


class TestContinuityProperties:
    @settings(max_examples=60, deadline=None, suppress_health_check=[HealthCheck.too_slow])
    @given(rooted(), st.integers(min_value=0, max_value=4), sample_points)
    def test_certificate_holds_on_samples(self, root, level, x):
        cert = certify(root, x, level)
        assert x in cert.neighborhood
        comp = cert.neighborhood.component_of(x)
        lo, hi = max(comp[0], x - 2.0), min(comp[1], x + 2.0)
        samples = [lo + (hi - lo) * k / 16 for k in range(1, 16)]
        assert check_certificate(root, cert, samples, 2.0 ** -18) == []


# Seed: C = [-4.5718..., -4.2982...] in U = (-4.9329..., -4.0160...). With float
# endpoints the thickening margin fell below one ulp near depth 50 and the
# derived node lost C ⊆ U.
SEED_ROOT = (-4.571852167443885, -4.298261902372540, -4.932987953345466, -4.01605915857083)
SEED_POINT = -4.90765973036188


class TestFloatEndpoints:
    def test_seed_geometry_at_1e_15(self):
        root = _checked_root(*SEED_ROOT)
        assert 0.0 <= lim_approx(root, SEED_POINT, 1e-15) <= 1.0

    def test_seed_geometry_at_finest_tolerance(self):
        root = _checked_root(*SEED_ROOT)
        r = evaluate(root, SEED_POINT, FINEST)
        assert 0.0 <= r.value <= 1.0
        assert r.exact or r.depth == MAX_DEPTH

    def test_spines_keep_contract(self):
        """Walking far past float resolution, every derived node keeps C ⊆ U."""
        root = _checked_root(*SEED_ROOT)
        line = root.space
        node = root
        for _ in range(MAX_DEPTH + 20):
            assert line.subset(node.C, node.U)
            node = node.left()
        node = root
        for _ in range(MAX_DEPTH + 20):
            assert line.subset(node.C, node.U)
            node = node.right()

    @settings(max_examples=80, deadline=None, suppress_health_check=[HealthCheck.too_slow])
    @given(float_rooted(), wide_points, fine_tolerances)
    @example(_checked_root(*SEED_ROOT), SEED_POINT, 1e-15)
    def test_lim_approx_in_range_with_checked_oracle(self, root, x, tol):
        v = lim_approx(root, x, tol)
        assert 0.0 <= v <= 1.0
        if x in root.C:
            assert v == 0.0
        if x not in root.U:
            assert v == 1.0

    @settings(max_examples=60, deadline=None, suppress_health_check=[HealthCheck.too_slow])
    @given(float_rooted(), wide_points)
    def test_error_bound_with_float_endpoints(self, root, x):
        coarse = lim_approx(root, x, 2.0 ** -10)
        fine = lim_approx(root, x, FINEST)
        assert coarse <= fine <= coarse + 2.0 ** -10
