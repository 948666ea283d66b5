import io

import numpy as np
import pytest

from lifesim.core.grid import LifeGrid
from lifesim.utils.rendering import CLEAR_SCREEN, TextRenderer


def test_render_default_glyphs():
    state = np.array([[1, 0], [0, 1]], dtype=np.uint8)
    assert TextRenderer().render(state) == "O \n O"


def test_render_with_separator():
    state = np.array([[0, 1, 0]], dtype=np.uint8)
    assert TextRenderer('o', '.', ' ').render(state) == ". o . "


def test_render_requires_2d():
    with pytest.raises(ValueError):
        TextRenderer().render(np.zeros(3))


def test_empty_glyph_rejected():
    with pytest.raises(ValueError):
        TextRenderer('', ' ')


def test_draw_clears_and_flushes():
    grid = LifeGrid(2, 3)
    grid.set_cell(0, 1)
    stream = io.StringIO()
    TextRenderer('X', '-').draw(grid, stream)
    assert stream.getvalue() == CLEAR_SCREEN + "-X-\n---\n"


def test_draw_without_clear():
    grid = LifeGrid(1, 2)
    stream = io.StringIO()
    TextRenderer('X', '-').draw(grid, stream, clear=False)
    assert stream.getvalue() == "--\n"
