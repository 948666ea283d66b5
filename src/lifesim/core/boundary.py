"""Boundary policies for neighbor resolution at the grid edges."""
import numpy as np
from typing import Optional, Tuple


# The eight (dx, dy) directions around a cell
NEIGHBOR_OFFSETS = tuple(
    (dx, dy)
    for dx in (-1, 0, 1)
    for dy in (-1, 0, 1)
    if not (dx == 0 and dy == 0)
)


class BoundaryPolicy:
    """Maps a candidate neighbor coordinate to an in-grid cell or to nothing."""

    name = 'base'

    def resolve(self, x: int, y: int, dx: int, dy: int,
                rows: int, cols: int) -> Optional[Tuple[int, int]]:
        """Return the neighbor of (x, y) in direction (dx, dy), or None."""
        raise NotImplementedError

    def neighbor_counts(self, state: np.ndarray) -> np.ndarray:
        """Count live neighbors for every cell of a 2D binary array."""
        raise NotImplementedError

    def __eq__(self, other):
        return type(self) is type(other)

    def __hash__(self):
        return hash(type(self))

    def __repr__(self):
        return f"{type(self).__name__}()"


class ClampedBoundary(BoundaryPolicy):
    """Edges are hard walls: cells outside the grid never exist."""

    name = 'clamped'

    def resolve(self, x, y, dx, dy, rows, cols):
        nx = x + dx
        ny = y + dy
        if 0 <= nx < rows and 0 <= ny < cols:
            return nx, ny
        return None

    def neighbor_counts(self, state):
        h, w = state.shape
        padded = np.pad(state.astype(np.uint8), 1, mode='constant')
        counts = np.zeros((h, w), dtype=np.uint8)
        for dx, dy in NEIGHBOR_OFFSETS:
            counts += padded[1 + dx:h + 1 + dx, 1 + dy:w + 1 + dy]
        return counts


class ToroidalBoundary(BoundaryPolicy):
    """Opposite edges are adjacent, so the grid behaves as a torus."""

    name = 'toroidal'

    def resolve(self, x, y, dx, dy, rows, cols):
        # Python's % is already non-negative for a positive modulus
        return (x + dx) % rows, (y + dy) % cols

    def neighbor_counts(self, state):
        b = state.astype(np.uint8)
        counts = np.zeros_like(b)
        for dx, dy in NEIGHBOR_OFFSETS:
            # roll by -dx so that counts[x] picks up state[x + dx]
            counts += np.roll(np.roll(b, -dx, axis=0), -dy, axis=1)
        return counts


CLAMPED = ClampedBoundary()
TOROIDAL = ToroidalBoundary()

POLICIES = {
    'clamped': CLAMPED,
    'toroidal': TOROIDAL,
    'wrap': TOROIDAL,
}


def get_policy(name) -> BoundaryPolicy:
    """Return the boundary policy registered under name.

    A BoundaryPolicy instance is passed through unchanged.
    """
    if isinstance(name, BoundaryPolicy):
        return name
    key = str(name).lower()
    if key in POLICIES:
        return POLICIES[key]
    raise ValueError(f"Boundary policy '{name}' not found. Available policies: {sorted(POLICIES)}")
