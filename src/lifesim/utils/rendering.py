"""
Text rendering of Game of Life generations
"""
import sys
import numpy as np


# Move the cursor home and clear the terminal
CLEAR_SCREEN = "\x1b[2J\x1b[H"


class TextRenderer:
    """
    Renders a grid as lines of glyphs.

    Every cell is drawn as its glyph followed by ``cell_separator``, so
    ``TextRenderer('o', '.', ' ')`` produces rows like ``". o . "``.
    """

    def __init__(self, alive_glyph='O', dead_glyph=' ', cell_separator=''):
        """
        Initialize renderer.

        Args:
            alive_glyph: String drawn for live cells
            dead_glyph: String drawn for dead cells
            cell_separator: String drawn after every cell
        """
        if not alive_glyph or not dead_glyph:
            raise ValueError("glyphs must be non-empty strings")
        self.alive_glyph = alive_glyph
        self.dead_glyph = dead_glyph
        self.cell_separator = cell_separator

    def render_row(self, row):
        alive = self.alive_glyph + self.cell_separator
        dead = self.dead_glyph + self.cell_separator
        return ''.join(alive if cell else dead for cell in row)

    def render(self, state: np.ndarray) -> str:
        """
        Render a 2D binary array.

        Args:
            state: State array (H x W)

        Returns:
            One line per row, joined by newlines
        """
        state = np.asarray(state)
        if state.ndim != 2:
            raise ValueError(f"state must be 2D, got shape {state.shape}")
        return '\n'.join(self.render_row(row) for row in state)

    def draw(self, grid, stream=None, clear=True):
        """Write the current generation of a LifeGrid to a stream."""
        stream = stream if stream is not None else sys.stdout
        if clear:
            stream.write(CLEAR_SCREEN)
        stream.write(self.render(grid.snapshot()))
        stream.write('\n')
        stream.flush()
