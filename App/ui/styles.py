"""Centralized styling constants for the Pixel Canvas UI.

This module consolidates colors and sizes used throughout the application
to ensure consistency and easier maintenance.
"""

from PyQt6.QtGui import QColor


class ThemeColors:
    """Application theme colors for the canvas and panels."""

    # Background colors
    BACKGROUND_DARK = QColor(20, 20, 20)
    BACKGROUND_PANEL = "#2a2a2a"

    # Grid drawing
    UNCOLORED_CELL = QColor(235, 235, 235)
    HIGHLIGHT_CELL = QColor(160, 160, 160)  # uncolored cells of the selected color
    GRID_LINE = QColor(200, 200, 200)
    LABEL_TEXT = QColor(90, 90, 90)
    WRONG_CELL_ALPHA = 110  # opacity of the wrongly tried color

    # Palette buttons
    SELECTED_BORDER = "white"
    DONE_TEXT = "#7a7a7a"


class Sizes:
    """Standard widget sizes and constraints."""

    CANVAS_MIN_SIZE = (400, 400)
    PALETTE_BUTTON_SIZE = 44
    PALETTE_COLUMNS = 4

    # Cells smaller than this on screen are drawn without grid lines/numbers
    MIN_CELL_FOR_LINES = 6  # pixels
    MIN_CELL_FOR_LABELS = 18  # pixels

    WHEEL_ZOOM_STEP = 1.15  # zoom factor per wheel notch


COLORS = ThemeColors
SIZES = Sizes


def readable_text_color(rgb: "tuple[int, int, int]") -> str:
    """Black or white, whichever reads better on the given background."""
    r, g, b = rgb
    brightness = (0.299 * r + 0.587 * g + 0.114 * b) / 255.0
    return "black" if brightness > 0.5 else "white"


def palette_button_stylesheet(
    rgb: "tuple[int, int, int]", selected: bool, done: bool
) -> str:
    """Stylesheet for one palette swatch button.

    Args:
        rgb: Swatch color
        selected: Whether this is the active color
        done: Whether every cell of this color is colored

    Returns:
        CSS stylesheet string
    """
    r, g, b = rgb
    border = (
        f"3px solid {ThemeColors.SELECTED_BORDER}" if selected else "1px solid gray"
    )
    text = ThemeColors.DONE_TEXT if done else readable_text_color(rgb)
    return (
        f"background-color: rgb({r}, {g}, {b}); "
        f"border: {border}; border-radius: 6px; color: {text};"
    )
