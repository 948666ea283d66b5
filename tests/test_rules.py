import numpy as np
import pytest

from lifesim.core.rules import apply_rule, next_cell_state


@pytest.mark.parametrize("neighbors", range(9))
def test_live_cell(neighbors):
    expected = 1 if neighbors in (2, 3) else 0
    assert next_cell_state(1, neighbors) == expected


@pytest.mark.parametrize("neighbors", range(9))
def test_dead_cell(neighbors):
    expected = 1 if neighbors == 3 else 0
    assert next_cell_state(0, neighbors) == expected


def test_apply_rule_matches_scalar_rule():
    counts = np.tile(np.arange(9), (2, 1))
    state = np.array([[0] * 9, [1] * 9], dtype=np.uint8)
    result = apply_rule(state, counts)
    expected = np.array([[next_cell_state(s, n) for s, n in zip(srow, nrow)]
                         for srow, nrow in zip(state, counts)], dtype=np.uint8)
    np.testing.assert_array_equal(result, expected)
    assert result.dtype == np.uint8


def test_apply_rule_writes_into_out():
    state = np.array([[1, 0]], dtype=np.uint8)
    counts = np.array([[2, 3]])
    out = np.zeros_like(state)
    returned = apply_rule(state, counts, out=out)
    assert returned is out
    np.testing.assert_array_equal(out, [[1, 1]])
