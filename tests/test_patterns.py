import numpy as np
import pytest

from lifesim.core.grid import LifeGrid
from lifesim.evaluation.metrics import detect_period
from lifesim.utils.patterns import (
    GLIDER,
    PATTERN_CATEGORIES,
    get_all_patterns,
    get_pattern,
    offsets_to_array,
    pattern_names,
    pattern_size,
    pattern_to_offsets,
)


def test_get_pattern():
    assert get_pattern('glider') == GLIDER
    assert len(get_pattern('glider_gun')) == 36
    assert len(get_pattern('pulsar')) == 48


def test_get_pattern_unknown():
    with pytest.raises(ValueError, match="Available patterns"):
        get_pattern('spaceship')


def test_all_patterns_listed():
    assert get_all_patterns() is PATTERN_CATEGORIES
    names = pattern_names()
    assert 'lwss' in names and 'beacon' in names
    assert len(names) == len(set(names))


def test_offsets_are_unique():
    for name in pattern_names():
        offsets = get_pattern(name)
        assert len(offsets) == len(set(offsets)), name


def test_pattern_size():
    assert pattern_size(GLIDER) == (3, 3)
    assert pattern_size(get_pattern('lwss')) == (4, 5)
    assert pattern_size(get_pattern('glider_gun')) == (9, 36)
    assert pattern_size([]) == (0, 0)


def test_array_conversions():
    array = offsets_to_array(GLIDER)
    np.testing.assert_array_equal(array, [[0, 1, 0], [0, 0, 1], [1, 1, 1]])
    assert set(pattern_to_offsets(array)) == set(GLIDER)


def test_offsets_to_array_normalizes_origin():
    array = offsets_to_array(get_pattern('pulsar'))
    assert array.shape == (13, 13)
    assert array[0].sum() == 6


def test_pattern_to_offsets_requires_2d():
    with pytest.raises(ValueError):
        pattern_to_offsets(np.ones(4))


@pytest.mark.parametrize("name", ['block', 'beehive', 'boat', 'loaf'])
def test_still_lifes(name):
    h, w = pattern_size(get_pattern(name))
    grid = LifeGrid(h + 4, w + 4, 'clamped')
    grid.load_pattern(get_pattern(name), 2, 2)
    assert detect_period(grid.simulate(3)) == 1


@pytest.mark.parametrize("name, period", [('blinker', 2), ('toad', 2), ('beacon', 2), ('pulsar', 3)])
def test_oscillators(name, period):
    h, w = pattern_size(get_pattern(name))
    grid = LifeGrid(h + 6, w + 6, 'clamped')
    grid.load_pattern(get_pattern(name), 3, 3)
    assert detect_period(grid.simulate(2 * period)) == period
