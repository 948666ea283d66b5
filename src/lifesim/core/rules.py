"""Conway's B3/S23 transition rule."""
import numpy as np
from typing import Optional


BIRTH = frozenset({3})
SURVIVAL = frozenset({2, 3})


def next_cell_state(alive: int, neighbors: int) -> int:
    """Apply the rule to a single cell and return 1 (alive) or 0 (dead)."""
    if alive:
        # Underpopulation below 2, overpopulation above 3
        return 1 if neighbors in SURVIVAL else 0
    return 1 if neighbors in BIRTH else 0


def apply_rule(state: np.ndarray,
               neighbors: np.ndarray,
               out: Optional[np.ndarray] = None) -> np.ndarray:
    """Compute the next generation from a state and its neighbor counts.

    Args:
        state: Binary array (H x W)
        neighbors: Live-neighbor counts for each cell (H x W)
        out: Optional uint8 array to write the result into

    Returns:
        The next state as a uint8 array (``out`` when given)
    """
    live = state == 1
    born = ~live & (neighbors == 3)
    survive = live & ((neighbors == 2) | (neighbors == 3))
    next_state = born | survive
    if out is None:
        return next_state.astype(np.uint8)
    np.copyto(out, next_state, casting='unsafe')
    return out
