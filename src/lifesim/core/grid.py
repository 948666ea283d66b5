"""Double-buffered Game of Life grid."""
import numbers
from enum import IntEnum
from typing import Iterable, List, Tuple, Union

import numpy as np

from .boundary import NEIGHBOR_OFFSETS, BoundaryPolicy, get_policy
from .rules import apply_rule


class Cell(IntEnum):
    """State of a single cell."""
    DEAD = 0
    ALIVE = 1


class InvalidDimension(ValueError):
    """Raised when a grid is constructed with a non-positive dimension."""


class LifeGrid:
    """Game of Life grid with a selectable boundary policy.

    The grid owns two equally sized buffers. ``advance`` reads only the
    current buffer, writes the whole next generation into the other one,
    then swaps them, so no cell ever sees a partially updated generation.
    """

    def __init__(self, rows: int, cols: int,
                 policy: Union[BoundaryPolicy, str] = 'toroidal'):
        """
        Create an all-dead grid.

        Args:
            rows: Number of rows, must be positive
            cols: Number of columns, must be positive
            policy: Boundary policy instance or name ('clamped' or 'toroidal')

        Raises:
            InvalidDimension: If rows or cols is not a positive integer
        """
        for label, value in (('rows', rows), ('cols', cols)):
            if isinstance(value, bool) or not isinstance(value, numbers.Integral):
                raise InvalidDimension(f"{label} must be an integer, got {value!r}")
            if value <= 0:
                raise InvalidDimension(f"{label} must be positive, got {value}")

        self._rows = int(rows)
        self._cols = int(cols)
        self._policy = get_policy(policy)
        self._current = np.zeros((self._rows, self._cols), dtype=np.uint8)
        self._next = np.zeros_like(self._current)
        self._generation = 0

    def __repr__(self):
        return (f"LifeGrid(rows={self._rows}, cols={self._cols}, "
                f"policy='{self._policy.name}', generation={self._generation})")

    @property
    def rows(self) -> int:
        return self._rows

    @property
    def cols(self) -> int:
        return self._cols

    @property
    def shape(self) -> Tuple[int, int]:
        return self._rows, self._cols

    @property
    def policy(self) -> BoundaryPolicy:
        return self._policy

    @property
    def generation(self) -> int:
        """Number of times ``advance`` has been applied."""
        return self._generation

    @property
    def population(self) -> int:
        """Number of live cells in the current generation."""
        return int(self._current.sum())

    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self._rows and 0 <= y < self._cols

    def load_pattern(self, offsets: Iterable[Tuple[int, int]],
                     origin_row: int = 0, origin_col: int = 0) -> int:
        """
        Stamp a pattern onto the current generation.

        Cells landing outside the grid are dropped without error, which lets
        patterns sit partly over an edge.

        Args:
            offsets: (row_offset, col_offset) pairs of live cells
            origin_row: Row the offsets are relative to
            origin_col: Column the offsets are relative to

        Returns:
            Number of offsets that landed inside the grid
        """
        placed = 0
        for dr, dc in offsets:
            x = origin_row + dr
            y = origin_col + dc
            if self.in_bounds(x, y):
                self._current[x, y] = Cell.ALIVE
                placed += 1
        return placed

    def load_array(self, state: np.ndarray, origin_row: int = 0, origin_col: int = 0) -> int:
        """Stamp the live cells of a 2D binary array onto the grid."""
        state = np.asarray(state)
        if state.ndim != 2:
            raise ValueError(f"state must be 2D, got shape {state.shape}")
        rows, cols = np.nonzero(state)
        return self.load_pattern(zip(rows.tolist(), cols.tolist()), origin_row, origin_col)

    def set_cell(self, x: int, y: int, value: Union[Cell, int] = Cell.ALIVE) -> None:
        """Set one cell of the current generation."""
        if not self.in_bounds(x, y):
            raise IndexError(f"cell ({x}, {y}) is outside a {self._rows}x{self._cols} grid")
        self._current[x, y] = Cell.ALIVE if value else Cell.DEAD

    def clear(self) -> None:
        """Kill every cell and reset the generation counter."""
        self._current.fill(Cell.DEAD)
        self._generation = 0

    def count_live_neighbors(self, x: int, y: int) -> int:
        """Count live neighbors of (x, y) through the boundary policy."""
        count = 0
        for dx, dy in NEIGHBOR_OFFSETS:
            neighbor = self._policy.resolve(x, y, dx, dy, self._rows, self._cols)
            if neighbor is not None and self._current[neighbor] == Cell.ALIVE:
                count += 1
        return count

    def neighbor_counts(self) -> np.ndarray:
        """Return live-neighbor counts for every cell of the current generation."""
        return self._policy.neighbor_counts(self._current)

    def advance(self) -> None:
        """Compute the next generation and make it current."""
        apply_rule(self._current, self.neighbor_counts(), out=self._next)
        self._current, self._next = self._next, self._current
        self._generation += 1

    def step(self, num_steps: int = 1) -> None:
        """Advance the grid num_steps generations."""
        for _ in range(num_steps):
            self.advance()

    def simulate(self, num_steps: int) -> np.ndarray:
        """Advance num_steps generations and return the full trajectory.

        The returned array has shape (num_steps + 1, rows, cols) and starts
        with the generation the grid held before the call.
        """
        if num_steps < 0:
            raise ValueError(f"num_steps must be non-negative, got {num_steps}")
        trajectory = np.zeros((num_steps + 1, self._rows, self._cols), dtype=np.uint8)
        trajectory[0] = self._current
        for t in range(1, num_steps + 1):
            self.advance()
            trajectory[t] = self._current
        return trajectory

    def cell_at(self, x: int, y: int) -> Cell:
        if not self.in_bounds(x, y):
            raise IndexError(f"cell ({x}, {y}) is outside a {self._rows}x{self._cols} grid")
        return Cell(int(self._current[x, y]))

    def snapshot(self) -> np.ndarray:
        """Return a copy of the current generation."""
        return self._current.copy()

    def live_cells(self) -> List[Tuple[int, int]]:
        """Return the coordinates of live cells in row-major order."""
        rows, cols = np.nonzero(self._current)
        return list(zip(rows.tolist(), cols.tolist()))

    def is_empty(self) -> bool:
        return not self._current.any()
