"""Shared fixtures for the Pixel Canvas test suite."""

import pytest

from models import Cell, PixelArt

DEFAULT_PALETTE = [(255, 0, 0), (0, 0, 255), (0, 255, 0), (255, 255, 0)]


def make_art(indices, palette=None, colored=()):
    """Build a PixelArt from a nested list of color indices.

    Args:
        indices: Rows of color indices
        palette: Palette colors (defaults to as many as the indices need)
        colored: (row, col) pairs that start out colored
    """
    colored = set(colored)
    if palette is None:
        needed = max(max(row) for row in indices) + 1
        palette = DEFAULT_PALETTE[:needed]
    grid = tuple(
        tuple(
            Cell(color_index=index, is_colored=(r, c) in colored)
            for c, index in enumerate(row)
        )
        for r, row in enumerate(indices)
    )
    return PixelArt(grid=grid, palette=list(palette))


@pytest.fixture
def two_color_art():
    """4x4 artwork: top two rows color 0, bottom two rows color 1."""
    return make_art([[0] * 4, [0] * 4, [1] * 4, [1] * 4])
