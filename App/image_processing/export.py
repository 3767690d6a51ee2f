"""Render finished artworks to shareable raster images."""

from pathlib import Path

import numpy as np
from PIL import Image

from models import EXPORT_MAX_DIMENSION, PixelArt


def render_image(art: PixelArt) -> Image.Image:
    """Draw one pixel per cell in its palette color."""
    palette = np.array(art.palette, dtype=np.uint8).reshape(-1, 3)
    indices = np.array(
        [[cell.color_index for cell in row] for row in art.grid], dtype=np.int64
    )
    return Image.fromarray(palette[indices])


def upscale(image: Image.Image, max_dimension: int = EXPORT_MAX_DIMENSION) -> Image.Image:
    """Enlarge so the long side is max_dimension, keeping hard cell edges."""
    width, height = image.size
    aspect_ratio = width / height
    if aspect_ratio >= 1:
        size = (max_dimension, max(1, round(max_dimension / aspect_ratio)))
    else:
        size = (max(1, round(max_dimension * aspect_ratio)), max_dimension)
    return image.resize(size, Image.Resampling.NEAREST)


def export_png(
    art: PixelArt, file_path: str | Path, max_dimension: int = EXPORT_MAX_DIMENSION
) -> Path:
    """Save the artwork as an upscaled PNG and return its path."""
    file_path = Path(file_path)
    with render_image(art) as source:
        final = upscale(source, max_dimension)
    final.save(file_path, format="PNG")
    print(f"Exported artwork to {file_path}")
    return file_path
