"""Simulation settings and the built-in presets."""
import numbers
from dataclasses import dataclass, field, replace
from typing import Tuple

from .core.boundary import get_policy
from .core.grid import InvalidDimension, LifeGrid
from .utils.patterns import get_pattern
from .utils.rendering import TextRenderer


@dataclass(frozen=True)
class SimulationConfig:
    """Everything needed to build and play one simulation.

    ``placements`` holds (pattern_name, origin_row, origin_col) triples.
    """
    rows: int
    cols: int
    boundary: str = 'toroidal'
    placements: Tuple[Tuple[str, int, int], ...] = field(default_factory=tuple)
    alive_glyph: str = 'O'
    dead_glyph: str = ' '
    cell_separator: str = ''
    delay_ms: float = 100
    clear_screen: bool = True

    def __post_init__(self):
        for label, value in (('rows', self.rows), ('cols', self.cols)):
            if isinstance(value, bool) or not isinstance(value, numbers.Integral) or value <= 0:
                raise InvalidDimension(f"{label} must be a positive integer, got {value!r}")
        # Normalises aliases ('wrap') and rejects unknown names
        object.__setattr__(self, 'boundary', get_policy(self.boundary).name)
        object.__setattr__(self, 'placements',
                           tuple((str(n), int(r), int(c)) for n, r, c in self.placements))
        for name, _, _ in self.placements:
            get_pattern(name)
        if not self.alive_glyph or not self.dead_glyph:
            raise ValueError("glyphs must be non-empty strings")
        if self.delay_ms < 0:
            raise ValueError(f"delay_ms must be non-negative, got {self.delay_ms}")

    def build_grid(self) -> LifeGrid:
        """Create the grid and stamp every placement onto it."""
        grid = LifeGrid(self.rows, self.cols, self.boundary)
        for name, origin_row, origin_col in self.placements:
            grid.load_pattern(get_pattern(name), origin_row, origin_col)
        return grid

    def build_renderer(self) -> TextRenderer:
        return TextRenderer(self.alive_glyph, self.dead_glyph, self.cell_separator)

    def with_overrides(self, **overrides) -> 'SimulationConfig':
        """Return a copy with the given fields replaced; None values are ignored."""
        changes = {key: value for key, value in overrides.items() if value is not None}
        return replace(self, **changes)


PRESETS = {
    'glider': SimulationConfig(
        rows=15, cols=30, boundary='toroidal',
        placements=(('glider', 1, 1), ('glider', 5, 4)),
        alive_glyph='o', dead_glyph='.', cell_separator=' ',
        delay_ms=1000,
    ),
    'blinker': SimulationConfig(
        rows=7, cols=15, boundary='toroidal',
        placements=(('blinker', 3, 7),),
        alive_glyph='o', dead_glyph=' ', cell_separator=' ',
        delay_ms=5,
    ),
    'toad': SimulationConfig(
        rows=15, cols=30, boundary='toroidal',
        placements=(('toad', 5, 9), ('toad', 10, 11)),
        alive_glyph='o', dead_glyph=' ', cell_separator=' ',
        delay_ms=1000,
    ),
    'beacon': SimulationConfig(
        rows=10, cols=30, boundary='clamped',
        placements=(('beacon', 3, 3),),
        alive_glyph='O', dead_glyph=' ',
        delay_ms=500,
    ),
    'pulsar': SimulationConfig(
        rows=30, cols=60, boundary='clamped',
        placements=(('pulsar', 10, 20),),
        alive_glyph='X', dead_glyph=' ',
        delay_ms=0,
    ),
    'gun': SimulationConfig(
        rows=40, cols=100, boundary='clamped',
        placements=(('glider_gun', 5, 5),),
        alive_glyph='X', dead_glyph=' ',
        delay_ms=1,
    ),
    'lwss': SimulationConfig(
        rows=20, cols=40, boundary='clamped',
        placements=(('lwss', 15, 35),),
        alive_glyph='O', dead_glyph=' ',
        delay_ms=1,
    ),
}


def get_preset(name: str) -> SimulationConfig:
    """Return the preset configuration by name."""
    if name in PRESETS:
        return PRESETS[name]
    raise ValueError(f"Preset '{name}' not found. Available presets: {sorted(PRESETS)}")
