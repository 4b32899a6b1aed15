import math

import pytest

from groverlab.speedup import compare_speedup


def test_speedup_single_target():
    cmp = compare_speedup(4, 1)
    assert cmp.num_states == 16
    assert math.isclose(cmp.classical_queries, 8.0)
    assert cmp.quantum_iterations == 3
    assert math.isclose(cmp.speedup, 8.0 / 3.0)


def test_speedup_without_targets_counts_one():
    assert compare_speedup(6, 0) == compare_speedup(6, 1)


def test_speedup_never_divides_by_zero():
    cmp = compare_speedup(1, 2)
    assert cmp.quantum_iterations == 0
    assert math.isclose(cmp.speedup, cmp.classical_queries)


def test_speedup_validation():
    with pytest.raises(ValueError):
        compare_speedup(0, 1)
