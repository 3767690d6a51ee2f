"""Utility functions for preparing source images for the pipeline.

AIDEV-NOTE: Sizing here decides the grid dimensions: one resized pixel
becomes one cell.
"""

from PIL import Image

from models import InvalidInput

BACKGROUND = (255, 255, 255)


def grid_size_for(image_size: "tuple[int, int]", target_width: int) -> "tuple[int, int]":
    """Grid (cols, rows) for an image scaled to target_width cells across.

    Height follows the aspect ratio, rounded, and never drops below 1.
    """
    if target_width < 1:
        raise InvalidInput(f"Target width must be >= 1, got {target_width}")
    orig_width, orig_height = image_size
    if orig_width < 1 or orig_height < 1:
        raise InvalidInput("Image has no pixels")

    target_height = max(1, round(target_width * orig_height / orig_width))
    return target_width, target_height


def flatten_to_rgb(image: Image.Image) -> Image.Image:
    """Convert to RGB, compositing any transparency over white."""
    if image.mode in ("RGBA", "LA", "PA") or (
        image.mode == "P" and "transparency" in image.info
    ):
        rgba = image.convert("RGBA")
        background = Image.new("RGBA", rgba.size, BACKGROUND + (255,))
        return Image.alpha_composite(background, rgba).convert("RGB")
    return image.convert("RGB")


def scale_image_to_grid(
    image: Image.Image, target_width: int, smooth: bool = True
) -> Image.Image:
    """Resize an RGB image so each pixel maps to one grid cell.

    Args:
        image: Input PIL image
        target_width: Number of grid columns
        smooth: LANCZOS filtering when True, NEAREST when False

    Returns:
        Resized image of size (cols, rows)
    """
    size = grid_size_for(image.size, target_width)
    resample = Image.Resampling.LANCZOS if smooth else Image.Resampling.NEAREST
    return image.resize(size, resample)
