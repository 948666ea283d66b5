"""Trajectory measurements and run classification."""

from .metrics import (
    population,
    population_history,
    cell_agreement,
    hamming_distance,
    detect_period,
    find_divergence_step,
    bounding_box,
    classify_run,
    summarize_run
)

__all__ = [
    'population',
    'population_history',
    'cell_agreement',
    'hamming_distance',
    'detect_period',
    'find_divergence_step',
    'bounding_box',
    'classify_run',
    'summarize_run'
]
