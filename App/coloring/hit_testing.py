"""Resolve screen taps to grid cells, forgiving slightly missed taps.

AIDEV-NOTE: At high zoom a fingertip or cursor easily lands just across a
cell border. When the tapped cell is not the selected color but the tap
sits within the forgiveness margin of an edge, a neighbour across that
edge with the selected color wins instead. A cell of the wrong color is
never substituted for one of the right color; the fallback is always the
cell actually under the tap.
"""

import math
from typing import Optional, Tuple

from models import FORGIVENESS_FRACTION, Grid, Offset, Size, TransformState

from .transform import grid_render_size, screen_to_grid


def _edge_side(position: float, cell_size: float, margin: float) -> int:
    """-1 near the low edge, 1 near the high edge, 0 in between."""
    if position < margin:
        return -1
    if position > cell_size - margin:
        return 1
    return 0


def locate(
    tap: Offset,
    transform: TransformState,
    grid: Grid,
    selected_color_index: Optional[int],
    viewport: Size,
    forgiveness: float = FORGIVENESS_FRACTION,
) -> Optional[Tuple[int, int]]:
    """Find the (row, col) a screen tap targets.

    Args:
        tap: Tap position in screen coordinates
        transform: Current pan/zoom state
        grid: Cell grid
        selected_color_index: Color being painted, or None
        viewport: Viewport size in screen pixels
        forgiveness: Edge margin as a fraction of the cell size

    Returns:
        (row, col), or None when the tap misses the grid
    """
    if viewport.is_empty or not grid:
        return None
    rows, cols = len(grid), len(grid[0])

    render = grid_render_size(cols, rows, viewport)
    cell_size = render.width / cols
    point = screen_to_grid(tap, transform, (cols, rows), viewport)

    col = math.floor(point.x / cell_size)
    row = math.floor(point.y / cell_size)
    if not (0 <= row < rows and 0 <= col < cols):
        return None

    if grid[row][col].color_index == selected_color_index:
        return row, col

    margin = cell_size * forgiveness
    vertical = _edge_side(point.y - row * cell_size, cell_size, margin)
    horizontal = _edge_side(point.x - col * cell_size, cell_size, margin)
    if vertical == 0 and horizontal == 0:
        return row, col

    candidates = []
    if vertical:
        candidates.append((row + vertical, col))
    if horizontal:
        candidates.append((row, col + horizontal))
    if vertical and horizontal:
        candidates.append((row + vertical, col + horizontal))

    matches = [
        (r, c)
        for r, c in candidates
        if 0 <= r < rows
        and 0 <= c < cols
        and grid[r][c].color_index == selected_color_index
    ]
    if not matches:
        return row, col

    # min() keeps the first candidate on equal distances
    return min(
        matches,
        key=lambda rc: math.hypot(
            (rc[1] + 0.5) * cell_size - point.x,
            (rc[0] + 0.5) * cell_size - point.y,
        ),
    )
