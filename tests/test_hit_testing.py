import random

import pytest

from coloring.hit_testing import locate
from coloring.transform import grid_to_screen
from conftest import make_art
from models import Offset, Size, TransformState

# A 10x10 grid in a 100x100 viewport at identity transform: screen pixels
# equal grid pixels and each cell is 10x10.
VIEWPORT = Size(100.0, 100.0)
IDENTITY = TransformState()


def _grid(fill=0, overrides=None):
    indices = [[fill] * 10 for _ in range(10)]
    for (r, c), value in (overrides or {}).items():
        indices[r][c] = value
    return make_art(indices, palette=[(0, 0, 0), (255, 255, 255)]).grid


def test_plain_tap_resolves_cell():
    grid = _grid()

    assert locate(Offset(35.0, 72.0), IDENTITY, grid, 0, VIEWPORT) == (7, 3)


@pytest.mark.parametrize("tap", [Offset(-1.0, 50.0), Offset(50.0, 100.5), Offset(150.0, 10.0)])
def test_taps_outside_grid_miss(tap):
    assert locate(tap, IDENTITY, _grid(), 0, VIEWPORT) is None


def test_letterboxed_area_is_outside_grid():
    # Square grid in a wide viewport leaves empty bands left and right
    grid = _grid()

    assert locate(Offset(20.0, 50.0), IDENTITY, grid, 0, Size(200.0, 100.0)) is None
    assert locate(Offset(100.0, 50.0), IDENTITY, grid, 0, Size(200.0, 100.0)) == (5, 5)


def test_empty_viewport_misses():
    assert locate(Offset(0, 0), IDENTITY, _grid(), 0, Size(0.0, 0.0)) is None


def test_near_edge_snaps_to_neighbour_of_selected_color():
    grid = _grid(fill=0, overrides={(5, 5): 1})

    # x is 1px into column 5, within the 2px margin of its left edge
    assert locate(Offset(51.0, 55.0), IDENTITY, grid, 0, VIEWPORT) == (5, 4)
    assert locate(Offset(59.0, 55.0), IDENTITY, grid, 0, VIEWPORT) == (5, 6)
    assert locate(Offset(55.0, 51.0), IDENTITY, grid, 0, VIEWPORT) == (4, 5)
    assert locate(Offset(55.0, 59.0), IDENTITY, grid, 0, VIEWPORT) == (6, 5)


def test_center_of_wrong_cell_is_not_forgiven():
    grid = _grid(fill=0, overrides={(5, 5): 1})

    assert locate(Offset(55.0, 55.0), IDENTITY, grid, 0, VIEWPORT) == (5, 5)


def test_falls_back_when_no_neighbour_matches():
    grid = _grid(fill=1)

    assert locate(Offset(51.0, 51.0), IDENTITY, grid, 0, VIEWPORT) == (5, 5)


def test_corner_picks_closest_matching_neighbour():
    # Up, left and up-left all match; the tap is closest to the left cell's center
    grid = _grid(fill=1, overrides={(4, 5): 0, (5, 4): 0, (4, 4): 0})

    assert locate(Offset(50.5, 51.5), IDENTITY, grid, 0, VIEWPORT) == (5, 4)


def test_corner_can_reach_diagonal_neighbour():
    grid = _grid(fill=1, overrides={(4, 4): 0})

    assert locate(Offset(50.5, 50.5), IDENTITY, grid, 0, VIEWPORT) == (4, 4)


def test_neighbours_outside_grid_are_ignored():
    grid = _grid(fill=1)

    assert locate(Offset(0.5, 0.5), IDENTITY, grid, 0, VIEWPORT) == (0, 0)


def test_no_selection_returns_tapped_cell():
    grid = _grid(fill=0, overrides={(5, 5): 1})

    assert locate(Offset(51.0, 55.0), IDENTITY, grid, None, VIEWPORT) == (5, 5)


def test_respects_zoom_and_pan():
    grid = _grid()
    state = TransformState(scale=2.0, offset=Offset(-30.0, 10.0))

    # Center of cell (2, 7) at scale 1 is (75, 25)
    tap = grid_to_screen(Offset(75.0, 25.0), state, (10, 10), VIEWPORT)

    assert locate(tap, state, grid, 0, VIEWPORT) == (2, 7)


@pytest.mark.parametrize("seed", range(8))
def test_cell_center_with_own_color_always_resolves(seed):
    rng = random.Random(seed)
    indices = [[rng.randrange(3) for _ in range(12)] for _ in range(9)]
    grid = make_art(indices, palette=[(0, 0, 0)] * 3).grid
    viewport = Size(rng.uniform(200, 900), rng.uniform(200, 900))
    cell_size = min(viewport.width / 12, viewport.height / 9)

    for _ in range(30):
        state = TransformState(
            scale=rng.uniform(1.0, 1.5),
            offset=Offset(rng.uniform(-50, 50), rng.uniform(-50, 50)),
        )
        row, col = rng.randrange(9), rng.randrange(12)
        center = Offset((col + 0.5) * cell_size, (row + 0.5) * cell_size)
        tap = grid_to_screen(center, state, (12, 9), viewport)

        assert locate(tap, state, grid, indices[row][col], viewport) == (row, col)
