"""Interactive canvas that draws the grid and routes pointer input."""

import math
from typing import Optional

from PyQt6 import QtWidgets
from PyQt6.QtCore import QEvent, QPointF, QRectF, Qt, pyqtSignal
from PyQt6.QtGui import QColor, QPainter, QPen

from coloring import ColoringSession, ColoringStroke, apply_zoom_pan, grid_render_size
from coloring.transform import grid_to_screen, screen_to_grid
from models import Offset, SessionSnapshot, Size, TransformState
from ui.styles import COLORS, SIZES


class ColoringCanvas(QtWidgets.QWidget):
    """Custom widget for coloring a paint-by-number grid.

    AIDEV-NOTE: Left press on an uncolored cell of the selected color starts
    a coloring stroke; any other left drag, and every right/middle drag,
    pans. A left click that does not move is a tap, which is how wrong-color
    attempts get recorded. Wheel and trackpad pinch zoom around the pointer.
    """

    transform_changed = pyqtSignal(object)  # TransformState

    def __init__(self, parent=None):
        super().__init__(parent)
        self.setMinimumSize(*SIZES.CANVAS_MIN_SIZE)
        self.setMouseTracking(False)

        self.session: Optional[ColoringSession] = None
        self.stroke: Optional[ColoringStroke] = None
        self.transform = TransformState()

        self._press_pos: Optional[QPointF] = None
        self._last_pos: Optional[QPointF] = None
        self._panning = False
        self._moved = False

    # === Public Methods ===

    def set_session(self, session: Optional[ColoringSession]):
        """Show a new session, resetting pan and zoom."""
        self.session = session
        self.stroke = ColoringStroke(session) if session else None
        self.transform = TransformState()
        if session:
            session.subscribe(self._on_snapshot)
        self.update()

    def reset_view(self):
        self.transform = TransformState()
        self.transform_changed.emit(self.transform)
        self.update()

    # === Geometry helpers ===

    def _viewport(self) -> Size:
        return Size(float(self.width()), float(self.height()))

    def _grid_size(self) -> "tuple[int, int]":
        return self.session.cols, self.session.rows

    @staticmethod
    def _offset(point: QPointF) -> Offset:
        return Offset(point.x(), point.y())

    def _zoom_pan(self, zoom: float, pan: Offset, centroid: Offset):
        self.transform = apply_zoom_pan(
            self.transform, zoom, pan, centroid, self._grid_size(), self._viewport()
        )
        self.transform_changed.emit(self.transform)
        self.update()

    def _accepts_input(self) -> bool:
        return self.session is not None and not self.session.snapshot.is_complete

    # === Session events ===

    def _on_snapshot(self, snapshot: SessionSnapshot):
        if snapshot.is_complete and self.transform != TransformState():
            self.reset_view()
        self.update()

    # === Input ===

    def mousePressEvent(self, event):
        if not self._accepts_input():
            return
        pos = event.position()
        self._press_pos = self._last_pos = pos
        self._moved = False
        self._panning = True

        if event.button() == Qt.MouseButton.LeftButton:
            if self.stroke.begin(self._offset(pos), self.transform, self._viewport()):
                self._panning = False
        event.accept()

    def mouseMoveEvent(self, event):
        if self._last_pos is None or not self._accepts_input():
            return
        pos = event.position()
        if (pos - self._press_pos).manhattanLength() > 3:
            self._moved = True

        if self.stroke.is_coloring:
            self.stroke.move(self._offset(pos), self.transform, self._viewport())
        elif self._panning and self._moved:
            delta = pos - self._last_pos
            self._zoom_pan(1.0, Offset(delta.x(), delta.y()), self._offset(pos))
        self._last_pos = pos
        event.accept()

    def mouseReleaseEvent(self, event):
        if self._last_pos is None:
            return
        was_coloring = self.stroke is not None and self.stroke.is_coloring
        if self.stroke is not None:
            self.stroke.end()

        # A click that neither colored nor panned is a plain tap
        if (
            event.button() == Qt.MouseButton.LeftButton
            and not was_coloring
            and not self._moved
            and self._accepts_input()
        ):
            self.session.tap_at(self._offset(event.position()), self.transform, self._viewport())

        self._press_pos = self._last_pos = None
        self._panning = False
        event.accept()

    def wheelEvent(self, event):
        if not self._accepts_input():
            return
        notches = event.angleDelta().y() / 120.0
        if notches:
            zoom = SIZES.WHEEL_ZOOM_STEP**notches
            self._zoom_pan(zoom, Offset(), self._offset(event.position()))
        event.accept()

    def event(self, event):
        # Trackpad pinch (macOS) arrives as a native zoom gesture
        if (
            event.type() == QEvent.Type.NativeGesture
            and event.gestureType() == Qt.NativeGestureType.ZoomNativeGesture
            and self._accepts_input()
        ):
            self._zoom_pan(1.0 + event.value(), Offset(), self._offset(event.position()))
            return True
        return super().event(event)

    # === Painting ===

    def paintEvent(self, event):
        """Render visible cells, grid lines and color numbers."""
        painter = QPainter(self)
        painter.fillRect(self.rect(), COLORS.BACKGROUND_DARK)
        if self.session is None or self._viewport().is_empty:
            return

        snapshot = self.session.snapshot
        cols, rows = self._grid_size()
        viewport = self._viewport()
        render = grid_render_size(cols, rows, viewport)
        cell_size = render.width / cols
        screen_cell = cell_size * self.transform.scale

        # Only draw cells intersecting the viewport
        top_left = screen_to_grid(Offset(0, 0), self.transform, (cols, rows), viewport)
        bottom_right = screen_to_grid(
            Offset(viewport.width, viewport.height), self.transform, (cols, rows), viewport
        )
        first_col = max(0, math.floor(top_left.x / cell_size))
        last_col = min(cols, math.ceil(bottom_right.x / cell_size))
        first_row = max(0, math.floor(top_left.y / cell_size))
        last_row = min(rows, math.ceil(bottom_right.y / cell_size))

        origin = grid_to_screen(Offset(0, 0), self.transform, (cols, rows), viewport)
        draw_lines = screen_cell >= SIZES.MIN_CELL_FOR_LINES and not snapshot.is_complete
        draw_labels = screen_cell >= SIZES.MIN_CELL_FOR_LABELS and not snapshot.is_complete
        palette = [QColor(*color) for color in snapshot.palette]
        selected = snapshot.selected_color_index

        if draw_lines:
            painter.setPen(QPen(COLORS.GRID_LINE, 1))
        else:
            painter.setPen(Qt.PenStyle.NoPen)

        for row in range(first_row, last_row):
            for col in range(first_col, last_col):
                cell = snapshot.grid[row][col]
                rect = QRectF(
                    origin.x + col * screen_cell,
                    origin.y + row * screen_cell,
                    screen_cell,
                    screen_cell,
                )
                if cell.is_colored or snapshot.is_complete:
                    fill = palette[cell.color_index]
                elif (row, col) in snapshot.wrongly_colored:
                    fill = QColor(palette[snapshot.wrongly_colored[(row, col)]])
                    fill.setAlpha(COLORS.WRONG_CELL_ALPHA)
                elif cell.color_index == selected:
                    fill = COLORS.HIGHLIGHT_CELL
                else:
                    fill = COLORS.UNCOLORED_CELL
                painter.setBrush(fill)
                painter.drawRect(rect)

                if draw_labels and not cell.is_colored:
                    painter.setPen(COLORS.LABEL_TEXT)
                    painter.drawText(
                        rect, Qt.AlignmentFlag.AlignCenter, str(cell.color_index + 1)
                    )
                    painter.setPen(QPen(COLORS.GRID_LINE, 1))
