"""Driving loops for a LifeGrid: paced console playback and headless runs."""
import sys
import time
from typing import Callable, Optional

import numpy as np
from tqdm import tqdm

from ..core.grid import LifeGrid
from .rendering import TextRenderer


class SimulationRunner:
    """Render, advance and pause, one generation at a time."""

    def __init__(self,
                 grid: LifeGrid,
                 renderer: Optional[TextRenderer] = None,
                 delay_ms: float = 100,
                 max_generations: Optional[int] = None,
                 stream=None,
                 sleep: Callable[[float], None] = time.sleep,
                 clear_screen: bool = True,
                 on_generation: Optional[Callable[[LifeGrid], None]] = None):
        """
        Create a runner.

        Args:
            grid: Grid to drive
            renderer: Text renderer, None for a default one
            delay_ms: Pause after each generation in milliseconds
            max_generations: Stop after this many advances, None to run until interrupted
            stream: Output stream, defaults to stdout
            sleep: Function called with the delay in seconds
            clear_screen: Clear the terminal before each frame
            on_generation: Called with the grid after every advance
        """
        if delay_ms < 0:
            raise ValueError(f"delay_ms must be non-negative, got {delay_ms}")
        if max_generations is not None and max_generations < 0:
            raise ValueError(f"max_generations must be non-negative, got {max_generations}")
        self.grid = grid
        self.renderer = renderer if renderer is not None else TextRenderer()
        self.delay_ms = delay_ms
        self.max_generations = max_generations
        self.stream = stream if stream is not None else sys.stdout
        self.sleep = sleep
        self.clear_screen = clear_screen
        self.on_generation = on_generation

    def run(self) -> int:
        """
        Play the simulation.

        Returns:
            Number of generations advanced
        """
        advanced = 0
        while self.max_generations is None or advanced < self.max_generations:
            self.renderer.draw(self.grid, self.stream, clear=self.clear_screen)
            self.grid.advance()
            advanced += 1
            if self.on_generation is not None:
                self.on_generation(self.grid)
            self.sleep(self.delay_ms / 1000)
        # Show the generation the loop stopped on
        self.renderer.draw(self.grid, self.stream, clear=self.clear_screen)
        return advanced


def simulate(grid: LifeGrid, num_steps: int, show_progress: bool = False) -> np.ndarray:
    """
    Advance a grid without rendering and collect every generation.

    Args:
        grid: Grid to advance in place
        num_steps: Number of generations to compute
        show_progress: Display a tqdm progress bar

    Returns:
        Trajectory array (num_steps + 1, rows, cols)
    """
    if num_steps < 0:
        raise ValueError(f"num_steps must be non-negative, got {num_steps}")
    if not show_progress:
        return grid.simulate(num_steps)

    trajectory = np.zeros((num_steps + 1,) + grid.shape, dtype=np.uint8)
    trajectory[0] = grid.snapshot()
    for t in tqdm(range(1, num_steps + 1), desc="Simulating"):
        grid.advance()
        trajectory[t] = grid.snapshot()
    return trajectory
