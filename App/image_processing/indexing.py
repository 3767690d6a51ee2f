"""Assign every pixel to its nearest palette color."""

import numpy as np

from models import Cell, Grid

# Rows are processed in blocks to bound the (pixels x palette) distance matrix
ROW_BLOCK = 64


def nearest_palette_indices(
    lab_pixels: np.ndarray, lab_palette: np.ndarray
) -> np.ndarray:
    """Index of the closest palette entry for each Lab pixel.

    Distance is squared Euclidean in Lab; ties go to the lowest index.
    """
    pixels = np.asarray(lab_pixels, dtype=np.float64).reshape(-1, 3)
    palette = np.asarray(lab_palette, dtype=np.float64).reshape(-1, 3)
    diff = pixels[:, np.newaxis, :] - palette[np.newaxis, :, :]
    distances = np.einsum("ijk,ijk->ij", diff, diff)
    return np.argmin(distances, axis=1)


def index_pixels(lab_image: np.ndarray, lab_palette: np.ndarray) -> Grid:
    """Build the cell grid for a Lab image of shape (rows, cols, 3).

    Returns:
        Grid of uncolored cells, same rows x cols as the image
    """
    rows, cols = lab_image.shape[:2]
    indices = np.empty((rows, cols), dtype=np.int64)
    for start in range(0, rows, ROW_BLOCK):
        block = lab_image[start : start + ROW_BLOCK]
        indices[start : start + ROW_BLOCK] = nearest_palette_indices(
            block, lab_palette
        ).reshape(block.shape[:2])

    # Cells are immutable, so one instance per palette entry is shared
    cells = [Cell(color_index=i) for i in range(len(lab_palette))]
    return tuple(tuple(cells[index] for index in row) for row in indices)
