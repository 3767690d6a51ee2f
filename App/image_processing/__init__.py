"""Image processing pipeline for photo-to-paint-by-number conversion.

AIDEV-NOTE: This package turns a photograph into an indexed cell grid and
a reduced palette. Organized into modular components:
- processor: Main ImageProcessor orchestrator
- color_space: sRGB <-> CIE Lab conversion
- quantization: Palette reduction (median cut, k-means)
- indexing: Nearest-palette assignment per pixel
- export: Rendering artworks back to images
- utils: Image sizing helpers
"""

from .export import export_png, render_image
from .processor import ImageProcessor, generate

__all__ = ["ImageProcessor", "generate", "export_png", "render_image"]
