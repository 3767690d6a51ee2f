"""Main application window for creating and coloring artworks."""

from pathlib import Path
from typing import Optional

from PyQt6.QtCore import Qt
from PyQt6.QtGui import QAction, QKeySequence
from PyQt6.QtWidgets import (
    QDockWidget,
    QFileDialog,
    QMainWindow,
    QMessageBox,
    QVBoxLayout,
    QWidget,
)

from coloring import ColoringSession
from config_manager import ConfigManager
from image_processing import export_png
from models import ArtConfig, PixelArt, PixelArtError, SessionSnapshot
from project_store import load_project, save_project
from ui.coloring_canvas import ColoringCanvas
from ui.create_panel import CreatePanel
from ui.palette_panel import PalettePanel


class PixelCanvasWindow(QMainWindow):
    """Main application window."""

    def __init__(self):
        super().__init__()
        self.setWindowTitle("Pixel Canvas v0.1.0")
        self.setMinimumSize(1000, 750)

        # Application state
        self.config_manager = ConfigManager()
        self.config: ArtConfig = self.config_manager.load()
        self.session: Optional[ColoringSession] = None
        self.project_path: Optional[Path] = None

        # UI component references (created in _setup_ui)
        self.canvas: ColoringCanvas
        self.create_panel: CreatePanel
        self.palette_panel: PalettePanel

        self._setup_ui()
        self._connect_signals()

    def _setup_ui(self):
        """Initialize the user interface."""
        self.canvas = ColoringCanvas()
        self.setCentralWidget(self.canvas)

        self.create_panel = CreatePanel(self.config)
        self.palette_panel = PalettePanel()

        side = QWidget()
        layout = QVBoxLayout(side)
        layout.addWidget(self.create_panel)
        layout.addWidget(self.palette_panel, stretch=1)

        dock = QDockWidget("Tools", self)
        dock.setWidget(side)
        dock.setAllowedAreas(
            Qt.DockWidgetArea.LeftDockWidgetArea | Qt.DockWidgetArea.RightDockWidgetArea
        )
        self.addDockWidget(Qt.DockWidgetArea.RightDockWidgetArea, dock)

        self._create_menu_bar()

    def _create_menu_bar(self):
        """Create the File and View menus."""
        menubar = self.menuBar()
        if menubar is None:
            return

        file_menu = menubar.addMenu("&File")
        actions = [
            ("&Open Project...", QKeySequence.StandardKey.Open, self._on_open_project),
            ("&Save Project", QKeySequence.StandardKey.Save, self._on_save_project),
            ("Save Project &As...", QKeySequence.StandardKey.SaveAs, self._on_save_project_as),
            ("&Export PNG...", None, self._on_export_png),
        ]
        for text, shortcut, handler in actions:
            action = QAction(text, self)
            if shortcut is not None:
                action.setShortcut(shortcut)
            action.triggered.connect(handler)
            file_menu.addAction(action)

        view_menu = menubar.addMenu("&View")
        reset_action = QAction("&Reset Zoom", self)
        reset_action.triggered.connect(self.canvas.reset_view)
        view_menu.addAction(reset_action)

    def _connect_signals(self):
        """Connect component signals to handlers."""
        self.create_panel.artwork_created.connect(self._on_artwork_created)
        self.create_panel.config_changed.connect(self._on_config_changed)
        self.palette_panel.color_selected.connect(self._on_color_selected)

    # === Session management ===

    def start_session(self, art: PixelArt, project_path: Optional[Path] = None):
        """Begin coloring an artwork, new or resumed."""
        self.session = ColoringSession(art, forgiveness=self.config.forgiveness)
        self.project_path = project_path
        self.session.subscribe(self._on_snapshot)

        self.palette_panel.set_palette(list(self.session.snapshot.palette))
        self.canvas.set_session(self.session)
        self.session.select_color(self.session.next_unfinished_color())

    def _on_artwork_created(self, art: PixelArt):
        self.start_session(art)

    def _on_config_changed(self, config: ArtConfig):
        success, error = self.config_manager.save(config)
        if not success:
            print(f"Warning: Could not save config file: {error}")

    def _on_color_selected(self, index: int):
        if self.session is not None and not self.session.snapshot.is_complete:
            self.session.select_color(index)

    def _on_snapshot(self, snapshot: SessionSnapshot):
        self.palette_panel.update_from_snapshot(snapshot)
        if snapshot.is_complete:
            self.statusBar().showMessage("Artwork complete!")
        elif snapshot.selected_color_index is None:
            # Finishing a color clears the selection; move on to the next one
            next_color = self.session.next_unfinished_color()
            self.statusBar().showMessage(
                f"Color done. Next up: color {next_color + 1}", 3000
            )

    # === File actions ===

    def _on_open_project(self):
        file_path, _ = QFileDialog.getOpenFileName(
            self, "Open Project", str(Path.home()), "Pixel Canvas Projects (*.json)"
        )
        if not file_path:
            return
        try:
            art = load_project(file_path)
        except (PixelArtError, OSError) as e:
            QMessageBox.warning(self, "Open Project", f"Could not open project:\n{e}")
            return
        self.start_session(art, Path(file_path))

    def _on_save_project(self):
        if self.session is None:
            return
        if self.project_path is None:
            self._on_save_project_as()
            return
        self._save_to(self.project_path)

    def _on_save_project_as(self):
        if self.session is None:
            return
        file_path, _ = QFileDialog.getSaveFileName(
            self, "Save Project", str(Path.home() / "artwork.json"),
            "Pixel Canvas Projects (*.json)",
        )
        if file_path:
            self._save_to(Path(file_path))

    def _save_to(self, path: Path):
        try:
            self.project_path = save_project(self.session.to_pixel_art(), path)
            self.statusBar().showMessage(f"Saved {path.name}", 3000)
        except OSError as e:
            QMessageBox.warning(self, "Save Project", f"Could not save project:\n{e}")

    def _on_export_png(self):
        if self.session is None:
            return
        file_path, _ = QFileDialog.getSaveFileName(
            self, "Export PNG", str(Path.home() / "artwork.png"), "PNG Images (*.png)"
        )
        if not file_path:
            return
        try:
            export_png(
                self.session.to_pixel_art(), file_path, self.config.export_max_dimension
            )
        except OSError as e:
            QMessageBox.warning(self, "Export PNG", f"Could not export image:\n{e}")
