"""Stateful coordinator for coloring one artwork.

AIDEV-NOTE: Single writer. Every mutating call replaces self.snapshot with
a new frozen SessionSnapshot, so observers never see a grid that is ahead
of its progress counters. Rows are tuples; a tap rebuilds only the row it
touches and shares the rest with the previous snapshot.
"""

from dataclasses import replace
from types import MappingProxyType
from typing import Callable, List, Optional, Tuple

from models import (
    FORGIVENESS_FRACTION,
    Offset,
    PixelArt,
    SessionSnapshot,
    SessionStatus,
    Size,
    TransformState,
)

from . import progress
from .hit_testing import locate

SnapshotListener = Callable[[SessionSnapshot], None]


class ColoringSession:
    """Holds the live coloring state for one artwork."""

    def __init__(
        self,
        art: PixelArt,
        selected_color_index: Optional[int] = None,
        forgiveness: float = FORGIVENESS_FRACTION,
    ):
        if art.rows < 1 or art.cols < 1:
            raise ValueError("Grid must have at least one row and one column")
        if any(len(row) != art.cols for row in art.grid):
            raise ValueError("Grid rows must all have the same length")

        self.forgiveness = forgiveness
        self._listeners: List[SnapshotListener] = []

        # AIDEV-NOTE: Resume path: already-colored cells are picked up by the
        # full scan, equivalent to replaying them through apply_tap.
        info = progress.from_grid(art.grid, len(art.palette))
        self.snapshot = SessionSnapshot(
            grid=tuple(tuple(row) for row in art.grid),
            palette=tuple(art.palette),
            selected_color_index=None,
            progress_info=info,
            progress=progress.to_state(info),
            wrongly_colored=MappingProxyType({}),
        )
        if selected_color_index is not None:
            self.select_color(selected_color_index)

    # --- Observers ---

    def subscribe(self, listener: SnapshotListener):
        """Call listener with every new snapshot."""
        self._listeners.append(listener)

    def _publish(self, snapshot: SessionSnapshot) -> SessionSnapshot:
        self.snapshot = snapshot
        for listener in self._listeners:
            listener(snapshot)
        return snapshot

    # --- Queries ---

    @property
    def rows(self) -> int:
        return len(self.snapshot.grid)

    @property
    def cols(self) -> int:
        return len(self.snapshot.grid[0])

    @property
    def status(self) -> SessionStatus:
        return self.snapshot.status

    @property
    def selected_color_index(self) -> Optional[int]:
        return self.snapshot.selected_color_index

    def to_pixel_art(self) -> PixelArt:
        """Current grid and palette, e.g. for saving."""
        return PixelArt(grid=self.snapshot.grid, palette=list(self.snapshot.palette))

    def next_unfinished_color(self) -> Optional[int]:
        """Lowest palette index that still has uncolored cells."""
        for index, value in enumerate(self.snapshot.progress.per_color_progress):
            if value < 1.0:
                return index
        return None

    # --- Events ---

    def select_color(self, color_index: Optional[int]) -> SessionSnapshot:
        """Choose the color to paint with, or None to deselect."""
        if color_index is not None and not 0 <= color_index < len(self.snapshot.palette):
            raise IndexError(
                f"Color {color_index} is outside the palette "
                f"of {len(self.snapshot.palette)} colors"
            )
        return self._publish(
            SessionSnapshot(
                grid=self.snapshot.grid,
                palette=self.snapshot.palette,
                selected_color_index=color_index,
                progress_info=self.snapshot.progress_info,
                progress=self.snapshot.progress,
                wrongly_colored=self.snapshot.wrongly_colored,
            )
        )

    def apply_tap(self, row: int, col: int) -> SessionSnapshot:
        """Paint the cell at (row, col) with the selected color.

        Raises:
            IndexError: If (row, col) is outside the grid. Taps must come
                through hit-testing, which never yields such coordinates.
        """
        current = self.snapshot
        if not (0 <= row < self.rows and 0 <= col < self.cols):
            raise IndexError(
                f"Cell ({row}, {col}) is outside the {self.rows}x{self.cols} grid"
            )

        selected = current.selected_color_index
        cell = current.grid[row][col]
        if selected is None or cell.is_colored:
            return current

        if cell.color_index != selected:
            wrongly_colored = dict(current.wrongly_colored)
            wrongly_colored[(row, col)] = selected
            return self._publish(
                SessionSnapshot(
                    grid=current.grid,
                    palette=current.palette,
                    selected_color_index=selected,
                    progress_info=current.progress_info,
                    progress=current.progress,
                    wrongly_colored=MappingProxyType(wrongly_colored),
                )
            )

        grid_row = list(current.grid[row])
        grid_row[col] = replace(cell, is_colored=True)
        grid = current.grid[:row] + (tuple(grid_row),) + current.grid[row + 1 :]

        info = progress.apply_coloring(current.progress_info, selected)
        wrongly_colored = current.wrongly_colored
        if (row, col) in wrongly_colored:
            wrongly_colored = dict(wrongly_colored)
            del wrongly_colored[(row, col)]
            wrongly_colored = MappingProxyType(wrongly_colored)

        if progress.is_color_done(info, selected):
            selected = None

        return self._publish(
            SessionSnapshot(
                grid=grid,
                palette=current.palette,
                selected_color_index=selected,
                progress_info=info,
                progress=progress.to_state(info),
                wrongly_colored=wrongly_colored,
            )
        )

    def locate(
        self, tap: Offset, transform: TransformState, viewport: Size
    ) -> Optional[Tuple[int, int]]:
        """Hit-test a screen tap against the current grid and selection."""
        return locate(
            tap,
            transform,
            self.snapshot.grid,
            self.snapshot.selected_color_index,
            viewport,
            self.forgiveness,
        )

    def tap_at(
        self, tap: Offset, transform: TransformState, viewport: Size
    ) -> SessionSnapshot:
        """Hit-test a screen tap and apply it; misses leave state unchanged."""
        cell = self.locate(tap, transform, viewport)
        if cell is None:
            return self.snapshot
        return self.apply_tap(*cell)
