"""Interactive coloring core: progress, viewport geometry, hit-testing and
the session state machine. Nothing here depends on the UI toolkit.
"""

from .gestures import ColoringStroke
from .hit_testing import locate
from .session import ColoringSession
from .transform import apply_zoom_pan, grid_render_size

__all__ = [
    "ColoringSession",
    "ColoringStroke",
    "apply_zoom_pan",
    "grid_render_size",
    "locate",
]
