"""Pan/zoom geometry for the grid viewer.

AIDEV-NOTE: Screen space has its origin at the viewport's top-left corner.
TransformState.offset is measured from the viewport center, and the grid
is drawn centered, fit to the viewport, then scaled by TransformState.scale
around that center. All functions here are pure.
"""

from models import MIN_VISIBLE_CELLS, Offset, Size, TransformState


def grid_render_size(cols: int, rows: int, viewport: Size) -> Size:
    """Size of the grid fit inside the viewport at scale 1, aspect preserved."""
    if viewport.is_empty:
        raise ValueError(f"Viewport must have a positive size, got {viewport}")
    grid_aspect = cols / rows
    viewport_aspect = viewport.width / viewport.height

    if grid_aspect > viewport_aspect:
        return Size(viewport.width, viewport.width / grid_aspect)
    return Size(viewport.height * grid_aspect, viewport.height)


def max_scale(cols: int) -> float:
    """Zoom limit at which MIN_VISIBLE_CELLS cells span the original width.

    Grids narrower than that cannot zoom at all.
    """
    return max(1.0, cols / MIN_VISIBLE_CELLS)


def max_offset(scale: float, cols: int, rows: int, viewport: Size) -> Offset:
    """Largest allowed |offset| per axis at the given scale."""
    render = grid_render_size(cols, rows, viewport)
    return Offset(
        max(0.0, render.width * scale - viewport.width),
        max(0.0, render.height * scale - viewport.height),
    )


def _clamp(value: float, limit: float) -> float:
    return min(max(value, -limit), limit)


def apply_zoom_pan(
    state: TransformState,
    zoom_factor: float,
    pan: Offset,
    centroid: Offset,
    grid_size: "tuple[int, int]",
    viewport: Size,
) -> TransformState:
    """Apply one step of a pinch/pan gesture.

    Args:
        state: Transform before this step
        zoom_factor: Multiplicative zoom of this step (1.0 = none)
        pan: Translation of this step in screen pixels
        centroid: Gesture center in screen coordinates
        grid_size: (cols, rows) of the grid
        viewport: Viewport size in screen pixels

    Returns:
        New clamped TransformState

    AIDEV-NOTE: The grid point under the centroid stays under the centroid:
    with c the centroid relative to the viewport center and z the effective
    zoom, offset' = c * (1 - z) + (offset + pan) * z.
    """
    if viewport.is_empty:
        return state
    if zoom_factor <= 0:
        raise ValueError(f"Zoom factor must be positive, got {zoom_factor}")

    cols, rows = grid_size
    new_scale = min(max(state.scale * zoom_factor, 1.0), max_scale(cols))
    effective_zoom = new_scale / state.scale

    centered_x = centroid.x - viewport.width / 2
    centered_y = centroid.y - viewport.height / 2
    new_x = centered_x * (1 - effective_zoom) + (state.offset.x + pan.x) * effective_zoom
    new_y = centered_y * (1 - effective_zoom) + (state.offset.y + pan.y) * effective_zoom

    limit = max_offset(new_scale, cols, rows, viewport)
    return TransformState(
        scale=new_scale,
        offset=Offset(_clamp(new_x, limit.x), _clamp(new_y, limit.y)),
    )


def screen_to_grid(
    point: Offset,
    state: TransformState,
    grid_size: "tuple[int, int]",
    viewport: Size,
) -> Offset:
    """Map a screen point to unscaled grid-render coordinates.

    The result is in pixels of the scale-1 rendered grid, origin at its
    top-left corner.
    """
    cols, rows = grid_size
    render = grid_render_size(cols, rows, viewport)
    x = (point.x - viewport.width / 2 - state.offset.x) / state.scale
    y = (point.y - viewport.height / 2 - state.offset.y) / state.scale
    return Offset(x + render.width / 2, y + render.height / 2)


def grid_to_screen(
    point: Offset,
    state: TransformState,
    grid_size: "tuple[int, int]",
    viewport: Size,
) -> Offset:
    """Inverse of screen_to_grid."""
    cols, rows = grid_size
    render = grid_render_size(cols, rows, viewport)
    x = (point.x - render.width / 2) * state.scale + state.offset.x
    y = (point.y - render.height / 2) * state.scale + state.offset.y
    return Offset(x + viewport.width / 2, y + viewport.height / 2)
