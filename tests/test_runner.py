import io

import numpy as np
import pytest

from lifesim.core.grid import LifeGrid
from lifesim.utils.rendering import CLEAR_SCREEN, TextRenderer
from lifesim.utils.runner import SimulationRunner, simulate


def blinker_grid():
    grid = LifeGrid(5, 5, 'toroidal')
    grid.load_pattern([(0, 0), (0, 1), (0, 2)], 2, 1)
    return grid


def test_runner_advances_exactly_n_times():
    sleeps = []
    stream = io.StringIO()
    grid = blinker_grid()
    runner = SimulationRunner(grid, TextRenderer('o', '.'), delay_ms=250,
                              max_generations=3, stream=stream, sleep=sleeps.append)
    assert runner.run() == 3
    assert grid.generation == 3
    assert sleeps == [0.25, 0.25, 0.25]
    # One frame per generation shown, including the last one
    assert stream.getvalue().count(CLEAR_SCREEN) == 4


def test_runner_zero_generations_only_renders():
    stream = io.StringIO()
    grid = blinker_grid()
    runner = SimulationRunner(grid, max_generations=0, stream=stream,
                              sleep=lambda s: pytest.fail("slept"), clear_screen=False)
    assert runner.run() == 0
    assert grid.generation == 0
    assert CLEAR_SCREEN not in stream.getvalue()
    assert stream.getvalue().count("\n") == 5


def test_runner_callback_sees_each_generation():
    seen = []
    grid = blinker_grid()
    runner = SimulationRunner(grid, max_generations=4, stream=io.StringIO(),
                              sleep=lambda s: None,
                              on_generation=lambda g: seen.append(g.generation))
    runner.run()
    assert seen == [1, 2, 3, 4]


def test_runner_stops_on_interrupt():
    calls = []

    def sleep(seconds):
        calls.append(seconds)
        if len(calls) == 2:
            raise KeyboardInterrupt

    grid = blinker_grid()
    runner = SimulationRunner(grid, delay_ms=10, stream=io.StringIO(), sleep=sleep)
    with pytest.raises(KeyboardInterrupt):
        runner.run()
    assert grid.generation == 2


@pytest.mark.parametrize("kwargs", [{'delay_ms': -1}, {'max_generations': -2}])
def test_runner_rejects_bad_settings(kwargs):
    with pytest.raises(ValueError):
        SimulationRunner(blinker_grid(), **kwargs)


@pytest.mark.parametrize("show_progress", [False, True])
def test_simulate(show_progress):
    grid = blinker_grid()
    start = grid.snapshot()
    trajectory = simulate(grid, 6, show_progress=show_progress)
    assert trajectory.shape == (7, 5, 5)
    np.testing.assert_array_equal(trajectory[0], start)
    np.testing.assert_array_equal(trajectory[6], start)
    assert grid.generation == 6


@pytest.mark.parametrize("show_progress", [False, True])
def test_simulate_rejects_negative_steps(show_progress):
    with pytest.raises(ValueError):
        simulate(blinker_grid(), -1, show_progress=show_progress)
