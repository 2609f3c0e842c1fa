import pytest

from urysohn import build
from urysohn.bench import benchmark_evaluate
from urysohn.spaces import RealLine, ThickeningOracle, interval, points


def _builder():
    line = RealLine()
    return build(points(0.0), interval(-1.0, 1.0), line, ThickeningOracle(line))


def test_benchmark_stats_shape():
    stats = benchmark_evaluate(_builder, [0.1, 0.5, 0.9], tolerance=1e-6, repeats=3)
    assert stats["repeats"] == 3
    assert stats["points"] == 3
    assert 0 <= stats["min_s"] <= stats["avg_s"] <= stats["max_s"]
    assert stats["total_s"] == pytest.approx(stats["avg_s"] * 3)


def test_fresh_root_per_repeat():
    built = []

    def builder():
        root = _builder()
        built.append(root)
        return root

    benchmark_evaluate(builder, [0.3], repeats=4)
    assert len(built) == 4
    assert len({id(r) for r in built}) == 4


def test_rejects_zero_repeats():
    with pytest.raises(ValueError):
        benchmark_evaluate(_builder, [0.3], repeats=0)
