"""UI components for the Pixel Canvas app.

This package contains the main window and its panels. All coloring logic
lives in the toolkit-independent `coloring` package.
"""

from ui.coloring_canvas import ColoringCanvas
from ui.create_panel import CreatePanel
from ui.main_window import PixelCanvasWindow
from ui.palette_panel import PalettePanel

__all__ = [
    "PixelCanvasWindow",
    "ColoringCanvas",
    "CreatePanel",
    "PalettePanel",
]
