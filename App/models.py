"""Data models and constants for the Pixel Canvas app."""

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Mapping, NamedTuple, Optional, Tuple

# AIDEV-NOTE: A viewport must always show at least this many cells across
# its width, which bounds the maximum zoom to cols / MIN_VISIBLE_CELLS.
MIN_VISIBLE_CELLS = 8

# Fraction of a cell's size, measured from each edge, where a tap may be
# redirected to a neighbouring cell of the selected color.
FORGIVENESS_FRACTION = 0.2

EXPORT_MAX_DIMENSION = 1200  # px on the long side

# Configuration file path
CONFIG_FILE = Path.home() / ".pixelcanvas_config.json"

RGBColor = Tuple[int, int, int]


# --- Errors ---


class PixelArtError(Exception):
    """Base class for all errors raised by the pixel art core."""


class InvalidInput(PixelArtError, ValueError):
    """Arguments or stored data that the pipeline cannot work with."""


class DecodeError(PixelArtError):
    """The source image could not be opened or decoded."""


# --- Geometry ---


class Offset(NamedTuple):
    """A 2D point or vector in screen pixels."""

    x: float = 0.0
    y: float = 0.0


class Size(NamedTuple):
    """Width and height in screen pixels."""

    width: float
    height: float

    @property
    def is_empty(self) -> bool:
        return self.width <= 0 or self.height <= 0


# --- Artwork ---


@dataclass(frozen=True)
class Cell:
    """One square of the paint-by-number grid.

    AIDEV-NOTE: is_colored only ever flips False -> True during a session.
    """

    color_index: int
    is_colored: bool = False


Grid = Tuple[Tuple[Cell, ...], ...]


@dataclass
class PixelArt:
    """Result of the image pipeline: the indexed grid and its palette."""

    grid: Grid
    palette: "list[RGBColor]"

    @property
    def rows(self) -> int:
        return len(self.grid)

    @property
    def cols(self) -> int:
        return len(self.grid[0]) if self.grid else 0


# --- Progress ---


@dataclass(frozen=True)
class ProgressInfo:
    """Raw completion counters for a grid."""

    total_pixels: int = 0
    per_color_total: Tuple[int, ...] = ()
    per_color_colored: Tuple[int, ...] = ()
    total_colored: int = 0


@dataclass(frozen=True)
class ProgressState:
    """Normalized progress, always derived from a ProgressInfo."""

    global_progress: float = 0.0
    per_color_progress: Tuple[float, ...] = ()


# --- Viewport ---


@dataclass(frozen=True)
class TransformState:
    """Pan/zoom state of the grid viewer.

    Offset is measured from the viewport center, in screen pixels.
    """

    scale: float = 1.0
    offset: Offset = Offset()


# --- Session ---


class SessionStatus(Enum):
    """Coloring session states."""

    ACTIVE = "Active"
    NO_SELECTION = "No color selected"
    COMPLETE = "Complete"


@dataclass(frozen=True)
class SessionSnapshot:
    """Complete, immutable state of a coloring session after one event."""

    grid: Grid
    palette: Tuple[RGBColor, ...]
    selected_color_index: Optional[int]
    progress_info: ProgressInfo
    progress: ProgressState
    # (row, col) -> color index the user wrongly tried to paint there
    wrongly_colored: Mapping[Tuple[int, int], int] = field(default_factory=dict)

    @property
    def status(self) -> SessionStatus:
        if self.progress.global_progress >= 1.0:
            return SessionStatus.COMPLETE
        if self.selected_color_index is None:
            return SessionStatus.NO_SELECTION
        return SessionStatus.ACTIVE

    @property
    def is_complete(self) -> bool:
        return self.status is SessionStatus.COMPLETE


# --- Configuration ---


@dataclass
class ArtConfig:
    """User settings for creating and coloring artworks."""

    # Grid creation
    target_width: int = 64  # cells across
    color_count: int = 16  # palette size requested
    smooth_resize: bool = True  # LANCZOS when True, NEAREST when False
    quantization_method: str = "median_cut"  # "median_cut" or "kmeans"

    # Coloring
    forgiveness: float = FORGIVENESS_FRACTION

    # Export
    export_max_dimension: int = EXPORT_MAX_DIMENSION
