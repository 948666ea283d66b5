"""Conway's Game of Life simulator with clamped and toroidal boundaries."""

from .core import (
    BoundaryPolicy,
    ClampedBoundary,
    ToroidalBoundary,
    Cell,
    InvalidDimension,
    LifeGrid,
    get_policy
)
from .config import SimulationConfig, PRESETS, get_preset

__version__ = '0.1.0'

__all__ = [
    'BoundaryPolicy',
    'ClampedBoundary',
    'ToroidalBoundary',
    'Cell',
    'InvalidDimension',
    'LifeGrid',
    'get_policy',
    'SimulationConfig',
    'PRESETS',
    'get_preset',
]
