"""Generation-stepping engine: boundary policies, transition rule and grid."""

from .boundary import (
    BoundaryPolicy,
    ClampedBoundary,
    ToroidalBoundary,
    CLAMPED,
    TOROIDAL,
    get_policy
)
from .rules import next_cell_state, apply_rule
from .grid import Cell, InvalidDimension, LifeGrid

__all__ = [
    'BoundaryPolicy',
    'ClampedBoundary',
    'ToroidalBoundary',
    'CLAMPED',
    'TOROIDAL',
    'get_policy',
    'next_cell_state',
    'apply_rule',
    'Cell',
    'InvalidDimension',
    'LifeGrid',
]
