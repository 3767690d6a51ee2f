"""Per-gesture bookkeeping for drag coloring."""

from typing import Optional, Set, Tuple

from models import Offset, Size, TransformState

from .session import ColoringSession


class ColoringStroke:
    """One press-drag-release coloring gesture.

    A stroke only starts coloring when the first cell under the pointer is
    uncolored and of the selected color; otherwise the drag belongs to
    panning. While coloring, each cell is sent to the session at most once.
    """

    def __init__(self, session: ColoringSession):
        self.session = session
        self.visited: Set[Tuple[int, int]] = set()
        self.is_coloring = False

    def begin(self, point: Offset, transform: TransformState, viewport: Size) -> bool:
        """Start the stroke at point. Returns True if it paints."""
        self.visited.clear()
        self.is_coloring = False

        cell = self.session.locate(point, transform, viewport)
        if cell is None:
            return False

        snapshot = self.session.snapshot
        target = snapshot.grid[cell[0]][cell[1]]
        if target.is_colored or target.color_index != snapshot.selected_color_index:
            return False

        self.is_coloring = True
        self._visit(cell)
        return True

    def move(
        self, point: Offset, transform: TransformState, viewport: Size
    ) -> Optional[Tuple[int, int]]:
        """Extend the stroke. Returns the newly visited cell, if any."""
        if not self.is_coloring:
            return None
        cell = self.session.locate(point, transform, viewport)
        if cell is None or cell in self.visited:
            return None
        self._visit(cell)
        return cell

    def end(self):
        self.visited.clear()
        self.is_coloring = False

    def _visit(self, cell: Tuple[int, int]):
        self.visited.add(cell)
        self.session.apply_tap(*cell)
