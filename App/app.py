"""Pixel Canvas - Main entry point."""

import sys

from PyQt6.QtWidgets import QApplication

from ui.main_window import PixelCanvasWindow


def main():
    """Launch the Pixel Canvas application."""
    app = QApplication(sys.argv)

    app.setApplicationDisplayName("Pixel Canvas")
    app.setApplicationName("PixelCanvas")

    window = PixelCanvasWindow()
    window.show()

    sys.exit(app.exec())


if __name__ == "__main__":
    main()
