"""Predefined Game of Life patterns as (row, col) offsets of live cells."""
import numpy as np
from typing import Iterable, Tuple


# Still Lifes (period 1)
BLOCK = ((0, 0), (0, 1), (1, 0), (1, 1))

BEEHIVE = ((0, 1), (0, 2), (1, 0), (1, 3), (2, 1), (2, 2))

BOAT = ((0, 0), (0, 1), (1, 0), (1, 2), (2, 1))

LOAF = ((0, 1), (0, 2), (1, 0), (1, 3), (2, 1), (2, 3), (3, 2))


# Oscillators (period 2)
BLINKER = ((0, 0), (0, 1), (0, 2))

TOAD = (
    (0, 1), (0, 2), (0, 3),
    (1, 0), (1, 1), (1, 2),
)

BEACON = (
    (0, 0), (0, 1), (1, 0), (1, 1),  # top-left block
    (2, 2), (2, 3), (3, 2), (3, 3),  # bottom-right block
)


# Oscillators (period 3)
# Offsets start at (1, 1) so the pattern keeps a one-cell margin
PULSAR = (
    (1, 3), (1, 4), (1, 5),
    (1, 9), (1, 10), (1, 11),
    (3, 1), (3, 6), (3, 8), (3, 13),
    (4, 1), (4, 6), (4, 8), (4, 13),
    (5, 1), (5, 6), (5, 8), (5, 13),
    (6, 3), (6, 4), (6, 5),
    (6, 9), (6, 10), (6, 11),
    (8, 3), (8, 4), (8, 5),
    (8, 9), (8, 10), (8, 11),
    (9, 1), (9, 6), (9, 8), (9, 13),
    (10, 1), (10, 6), (10, 8), (10, 13),
    (11, 1), (11, 6), (11, 8), (11, 13),
    (13, 3), (13, 4), (13, 5),
    (13, 9), (13, 10), (13, 11),
)


# Spaceships (period 4)
GLIDER = ((0, 1), (1, 2), (2, 0), (2, 1), (2, 2))

LWSS = (
    (0, 1), (0, 4),
    (1, 0), (2, 0), (2, 4),
    (3, 0), (3, 1), (3, 2), (3, 3),
)


# Glider Gun (period 30)
# Gosper's Glider Gun - emits one glider every 30 generations
GLIDER_GUN = (
    (1, 25), (2, 23), (2, 25),
    (3, 13), (3, 14), (3, 21), (3, 22), (3, 35), (3, 36),
    (4, 12), (4, 16), (4, 21), (4, 22), (4, 35), (4, 36),
    (5, 1), (5, 2), (5, 11), (5, 17), (5, 21), (5, 22),
    (6, 1), (6, 2), (6, 11), (6, 15), (6, 17), (6, 18), (6, 23), (6, 25),
    (7, 11), (7, 17), (7, 25),
    (8, 12), (8, 16),
    (9, 13), (9, 14),
)


PATTERN_CATEGORIES = {
    'still_lifes': {
        'block': BLOCK,
        'beehive': BEEHIVE,
        'boat': BOAT,
        'loaf': LOAF
    },
    'oscillators_p2': {
        'blinker': BLINKER,
        'toad': TOAD,
        'beacon': BEACON
    },
    'oscillators_p3': {
        'pulsar': PULSAR
    },
    'spaceships': {
        'glider': GLIDER,
        'lwss': LWSS
    },
    'guns': {
        'glider_gun': GLIDER_GUN
    }
}


def get_pattern(name: str) -> Tuple[Tuple[int, int], ...]:
    """Return the offsets of the requested pattern by name."""
    for category in PATTERN_CATEGORIES.values():
        if name in category:
            return category[name]

    available = [pattern for cat in PATTERN_CATEGORIES.values() for pattern in cat.keys()]
    raise ValueError(f"Pattern '{name}' not found. Available patterns: {available}")


def get_all_patterns():
    """Return all available patterns organized by category."""
    return PATTERN_CATEGORIES


def pattern_names():
    """Return every pattern name across all categories."""
    return [name for cat in PATTERN_CATEGORIES.values() for name in cat]


def pattern_size(offsets: Iterable[Tuple[int, int]]) -> Tuple[int, int]:
    """Return (height, width) of the bounding box of a pattern."""
    offsets = list(offsets)
    if not offsets:
        return 0, 0
    rows = [r for r, _ in offsets]
    cols = [c for _, c in offsets]
    return max(rows) - min(rows) + 1, max(cols) - min(cols) + 1


def pattern_to_offsets(pattern: np.ndarray) -> Tuple[Tuple[int, int], ...]:
    """Convert a 2D binary array into live-cell offsets."""
    pattern = np.asarray(pattern)
    if pattern.ndim != 2:
        raise ValueError(f"pattern must be 2D, got shape {pattern.shape}")
    rows, cols = np.nonzero(pattern)
    return tuple(zip(rows.tolist(), cols.tolist()))


def offsets_to_array(offsets: Iterable[Tuple[int, int]]) -> np.ndarray:
    """Draw offsets into the smallest array holding them.

    Offsets are shifted so the topmost row and leftmost column land at 0.
    """
    offsets = list(offsets)
    h, w = pattern_size(offsets)
    array = np.zeros((h, w), dtype=np.uint8)
    if not offsets:
        return array
    min_r = min(r for r, _ in offsets)
    min_c = min(c for _, c in offsets)
    for r, c in offsets:
        array[r - min_r, c - min_c] = 1
    return array
