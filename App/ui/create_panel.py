"""Artwork creation panel: pick a photo, choose settings, run the pipeline."""

from __future__ import annotations

from pathlib import Path

from PyQt6.QtCore import QThread, pyqtSignal
from PyQt6.QtWidgets import (
    QComboBox,
    QFileDialog,
    QGroupBox,
    QLabel,
    QProgressBar,
    QPushButton,
    QVBoxLayout,
    QWidget,
)

from image_processing import ImageProcessor
from image_processing.quantization import QUANTIZATION_METHODS
from models import ArtConfig, PixelArt
from ui.widgets import WidgetFactory


class ProcessingThread(QThread):
    """Background thread for image processing to avoid blocking UI."""

    finished = pyqtSignal(object)  # PixelArt
    error = pyqtSignal(str)  # Error message

    def __init__(self, file_path: str, config: ArtConfig):
        super().__init__()
        self.file_path = file_path
        self.config = config

    def run(self):
        """Execute image processing in background."""
        try:
            processor = ImageProcessor(self.config)
            result = processor.generate(self.file_path)
            self.finished.emit(result)
        except Exception as e:
            self.error.emit(str(e))


class CreatePanel(QGroupBox):
    """Panel for creating a new artwork from an image."""

    artwork_created = pyqtSignal(object)  # PixelArt
    config_changed = pyqtSignal(object)  # ArtConfig

    def __init__(self, config: ArtConfig, parent: QWidget | None = None):
        super().__init__("New Artwork", parent)
        self.config = config
        self.current_image_path: str | None = None
        self.processing_thread: ProcessingThread | None = None

        self._setup_ui()
        self._connect_signals()

    def _setup_ui(self):
        """Initialize the UI components."""
        layout = QVBoxLayout()

        self.browse_btn = QPushButton("Choose Image...")
        layout.addWidget(self.browse_btn)
        self.file_label = QLabel("No image selected")
        self.file_label.setWordWrap(True)
        layout.addWidget(self.file_label)

        self.width_spin = WidgetFactory.create_int_spinbox(
            8, 256, self.config.target_width, " cells",
            tooltip="Number of cells across the artwork",
        )
        layout.addLayout(WidgetFactory.create_labeled_row("Width:", self.width_spin))

        self.colors_spin = WidgetFactory.create_int_spinbox(
            1, 64, self.config.color_count,
            tooltip="Maximum number of palette colors",
        )
        layout.addLayout(WidgetFactory.create_labeled_row("Colors:", self.colors_spin))

        self.method_combo = QComboBox()
        self.method_combo.addItems(QUANTIZATION_METHODS)
        self.method_combo.setCurrentText(self.config.quantization_method)
        layout.addLayout(WidgetFactory.create_labeled_row("Method:", self.method_combo))

        self.smooth_check = WidgetFactory.create_checkbox(
            "Smooth resize", self.config.smooth_resize,
            tooltip="Filter the photo while shrinking it (off keeps hard edges)",
        )
        layout.addWidget(self.smooth_check)

        self.create_btn = QPushButton("Create")
        self.create_btn.setEnabled(False)
        layout.addWidget(self.create_btn)

        self.progress_bar = QProgressBar()
        self.progress_bar.setRange(0, 0)  # busy indicator
        self.progress_bar.setVisible(False)
        layout.addWidget(self.progress_bar)

        self.status_label = QLabel("")
        self.status_label.setWordWrap(True)
        layout.addWidget(self.status_label)

        self.setLayout(layout)

    def _connect_signals(self):
        self.browse_btn.clicked.connect(self._on_browse_clicked)
        self.create_btn.clicked.connect(self._on_create_clicked)

    def _read_config(self):
        """Copy widget values into the config."""
        self.config.target_width = self.width_spin.value()
        self.config.color_count = self.colors_spin.value()
        self.config.quantization_method = self.method_combo.currentText()
        self.config.smooth_resize = self.smooth_check.isChecked()
        self.config_changed.emit(self.config)

    def _on_browse_clicked(self):
        file_path, _ = QFileDialog.getOpenFileName(
            self,
            "Choose Image",
            str(Path.home()),
            "Images (*.png *.jpg *.jpeg *.bmp *.gif *.webp *.tif *.tiff)",
        )
        if file_path:
            self.current_image_path = file_path
            self.file_label.setText(Path(file_path).name)
            self.create_btn.setEnabled(True)
            self.status_label.setText("")

    def _on_create_clicked(self):
        """Start image processing in background thread."""
        if not self.current_image_path:
            return
        self._read_config()

        self.create_btn.setEnabled(False)
        self.browse_btn.setEnabled(False)
        self.progress_bar.setVisible(True)
        self.status_label.setText("Processing image...")

        self.processing_thread = ProcessingThread(self.current_image_path, self.config)
        self.processing_thread.finished.connect(self._on_processing_finished)
        self.processing_thread.error.connect(self._on_processing_error)
        self.processing_thread.start()

    def _on_processing_finished(self, result: PixelArt):
        """Handle completed image processing."""
        self.progress_bar.setVisible(False)
        self.create_btn.setEnabled(True)
        self.browse_btn.setEnabled(True)
        self.status_label.setText(
            f"Created {result.cols}x{result.rows} grid with {len(result.palette)} colors"
        )
        self.artwork_created.emit(result)

    def _on_processing_error(self, error_msg: str):
        """Handle processing error."""
        self.progress_bar.setVisible(False)
        self.create_btn.setEnabled(True)
        self.browse_btn.setEnabled(True)

        pretty_msg = error_msg.replace("\n", " ").strip()
        self.status_label.setText(f"Error: {pretty_msg}")
