"""Palette panel: one swatch per color, showing its number and progress."""

from PyQt6.QtCore import pyqtSignal
from PyQt6.QtWidgets import (
    QGridLayout,
    QGroupBox,
    QLabel,
    QProgressBar,
    QPushButton,
    QVBoxLayout,
    QWidget,
)

from models import SessionSnapshot
from ui.styles import SIZES, palette_button_stylesheet


class PalettePanel(QGroupBox):
    """Panel for choosing the active color."""

    color_selected = pyqtSignal(int)

    def __init__(self, parent: QWidget | None = None):
        super().__init__("Palette", parent)
        self.buttons: "list[QPushButton]" = []
        self._setup_ui()

    def _setup_ui(self):
        """Initialize the UI components."""
        layout = QVBoxLayout()

        self.progress_label = QLabel("No artwork loaded")
        layout.addWidget(self.progress_label)

        self.progress_bar = QProgressBar()
        self.progress_bar.setRange(0, 1000)
        self.progress_bar.setTextVisible(False)
        layout.addWidget(self.progress_bar)

        self.swatch_layout = QGridLayout()
        layout.addLayout(self.swatch_layout)
        layout.addStretch()

        self.setLayout(layout)

    def set_palette(self, palette: "list[tuple[int, int, int]]"):
        """Rebuild the swatch buttons for a new palette."""
        for button in self.buttons:
            self.swatch_layout.removeWidget(button)
            button.deleteLater()
        self.buttons = []

        for index, _ in enumerate(palette):
            button = QPushButton(str(index + 1))
            button.setFixedSize(SIZES.PALETTE_BUTTON_SIZE, SIZES.PALETTE_BUTTON_SIZE)
            button.clicked.connect(lambda _, i=index: self.color_selected.emit(i))
            row, col = divmod(index, SIZES.PALETTE_COLUMNS)
            self.swatch_layout.addWidget(button, row, col)
            self.buttons.append(button)

    def update_from_snapshot(self, snapshot: SessionSnapshot):
        """Refresh selection, per-color progress and the global bar."""
        if len(self.buttons) != len(snapshot.palette):
            self.set_palette(list(snapshot.palette))

        for index, button in enumerate(self.buttons):
            fraction = snapshot.progress.per_color_progress[index]
            done = fraction >= 1.0
            button.setText("✓" if done else str(index + 1))
            button.setToolTip(f"Color {index + 1}: {fraction:.0%}")
            button.setStyleSheet(
                palette_button_stylesheet(
                    snapshot.palette[index],
                    selected=index == snapshot.selected_color_index,
                    done=done,
                )
            )

        info = snapshot.progress_info
        self.progress_bar.setValue(int(snapshot.progress.global_progress * 1000))
        self.progress_label.setText(
            f"{snapshot.status.value}: {info.total_colored}/{info.total_pixels} cells"
        )
