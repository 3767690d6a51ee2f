import numpy as np

from image_processing.indexing import index_pixels, nearest_palette_indices


def test_picks_nearest_entry():
    palette = np.array([[0.0, 0.0, 0.0], [50.0, 0.0, 0.0], [100.0, 0.0, 0.0]])
    pixels = np.array([[10.0, 0.0, 0.0], [45.0, 5.0, 0.0], [99.0, 0.0, 1.0]])

    assert list(nearest_palette_indices(pixels, palette)) == [0, 1, 2]


def test_ties_go_to_lowest_index():
    palette = np.array([[1.0, 0.0, 0.0], [-1.0, 0.0, 0.0]])
    pixels = np.array([[0.0, 0.0, 0.0]])

    assert list(nearest_palette_indices(pixels, palette)) == [0]


def test_grid_matches_image_shape_and_indices_are_valid():
    rng = np.random.default_rng(5)
    rows, cols = 150, 7  # more rows than one processing block
    lab_image = rng.uniform([0, -50, -50], [100, 50, 50], size=(rows, cols, 3))
    palette = rng.uniform([0, -50, -50], [100, 50, 50], size=(4, 3))

    grid = index_pixels(lab_image, palette)

    assert len(grid) == rows
    assert all(len(row) == cols for row in grid)
    assert all(0 <= cell.color_index < 4 for row in grid for cell in row)
    assert not any(cell.is_colored for row in grid for cell in row)

    expected = nearest_palette_indices(lab_image.reshape(-1, 3), palette)
    flat = [cell.color_index for row in grid for cell in row]
    assert flat == list(expected)
