"""Measurements on Game of Life trajectories."""
import numpy as np
from typing import Optional


def population(state: np.ndarray) -> int:
    """Return the number of live cells."""
    return int(np.sum(state))


def population_history(trajectory: np.ndarray) -> np.ndarray:
    """Return live-cell counts for every generation of a trajectory."""
    trajectory = np.asarray(trajectory)
    return trajectory.reshape(len(trajectory), -1).sum(axis=1).astype(int)


def cell_agreement(a: np.ndarray, b: np.ndarray) -> float:
    """Return the fraction of cells with the same state in both grids."""
    return float(np.mean(a == b))


def hamming_distance(a: np.ndarray, b: np.ndarray) -> int:
    """Return the number of cells that differ between two grids."""
    return int(np.sum(a != b))


def detect_period(trajectory: np.ndarray) -> Optional[int]:
    """Return the period the run settled into, or None if it never repeats.

    The last generation is compared against earlier ones; a still life has
    period 1. An empty grid counts as a still life.
    """
    if len(trajectory) <= 1:
        return None
    last = trajectory[-1]
    for p in range(1, len(trajectory)):
        if np.array_equal(trajectory[-1 - p], last):
            return p
    return None


def find_divergence_step(trajectory_a: np.ndarray, trajectory_b: np.ndarray) -> int:
    """Return the first generation where two runs differ, or -1 if they never do."""
    steps = min(len(trajectory_a), len(trajectory_b))
    for t in range(steps):
        if not np.array_equal(trajectory_a[t], trajectory_b[t]):
            return t
    return -1


def bounding_box(state: np.ndarray) -> Optional[tuple]:
    """Return (min_row, min_col, max_row, max_col) of live cells, or None."""
    rows, cols = np.nonzero(state)
    if len(rows) == 0:
        return None
    return int(rows.min()), int(cols.min()), int(rows.max()), int(cols.max())


def classify_run(trajectory: np.ndarray) -> str:
    """Label a run as 'died_out', 'still_life', 'oscillator_pN' or 'unsettled'."""
    if population(trajectory[-1]) == 0:
        return 'died_out'
    period = detect_period(trajectory)
    if period == 1:
        return 'still_life'
    if period is not None:
        return f'oscillator_p{period}'
    return 'unsettled'


def summarize_run(trajectory: np.ndarray) -> dict:
    """Return summary statistics for a trajectory."""
    pops = population_history(trajectory)
    return {
        'generations': len(trajectory) - 1,
        'initial_population': int(pops[0]),
        'final_population': int(pops[-1]),
        'max_population': int(pops.max()),
        'min_population': int(pops.min()),
        'period': detect_period(trajectory),
        'outcome': classify_run(trajectory),
    }
