"""Collaborators around the core: patterns, rendering, driving loops, plots and storage"""

from .patterns import (
    get_pattern,
    get_all_patterns,
    pattern_names,
    pattern_size,
    pattern_to_offsets,
    offsets_to_array,
    PATTERN_CATEGORIES
)
from .rendering import TextRenderer, CLEAR_SCREEN
from .runner import SimulationRunner, simulate

__all__ = [
    'get_pattern',
    'get_all_patterns',
    'pattern_names',
    'pattern_size',
    'pattern_to_offsets',
    'offsets_to_array',
    'PATTERN_CATEGORIES',
    'TextRenderer',
    'CLEAR_SCREEN',
    'SimulationRunner',
    'simulate',
]
