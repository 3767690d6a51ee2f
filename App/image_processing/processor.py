"""Main image processor orchestrating the photo-to-grid pipeline.

AIDEV-NOTE: Runs once per artwork, off the UI thread (see
ui.main_window.ProcessingThread). Steps: load -> resize to grid -> Lab ->
quantize -> index. There are no partial results: the caller gets a
complete PixelArt or an exception.
"""

from pathlib import Path
from typing import BinaryIO, Union

import numpy as np
from PIL import Image, UnidentifiedImageError

from models import ArtConfig, DecodeError, InvalidInput, PixelArt

from .color_space import lab_to_rgb, rgb_to_lab
from .indexing import index_pixels
from .quantization import QUANTIZATION_METHODS, quantize_lab
from .utils import flatten_to_rgb, scale_image_to_grid

ImageSource = Union[str, Path, BinaryIO, Image.Image]


class ImageProcessor:
    """Converts photographs into paint-by-number grids."""

    def __init__(self, config: ArtConfig | None = None):
        self.config = config or ArtConfig()

    def load_image(self, source: ImageSource) -> Image.Image:
        """Open and fully decode an image.

        Args:
            source: File path, binary file object or an already open image

        Returns:
            Decoded PIL image, detached from the underlying file

        Raises:
            DecodeError: If the data is missing, corrupt, unsupported or
                larger than Pillow's decompression bomb limit
        """
        if isinstance(source, Image.Image):
            return source
        try:
            with Image.open(source) as image:
                image.load()
                return flatten_to_rgb(image)
        except (
            UnidentifiedImageError,
            Image.DecompressionBombError,
            OSError,
            SyntaxError,
        ) as e:
            raise DecodeError(f"Failed to load image: {e}") from e

    def generate(
        self,
        source: ImageSource,
        target_width: int | None = None,
        color_count: int | None = None,
        smooth: bool | None = None,
    ) -> PixelArt:
        """Execute the complete pipeline.

        Args:
            source: Image to convert
            target_width: Grid columns, uses config default if None
            color_count: Maximum palette size, uses config default if None
            smooth: Resize filtering flag, uses config default if None

        Returns:
            PixelArt with an uncolored grid and its palette

        Raises:
            InvalidInput: If target_width or color_count is < 1
            DecodeError: If the source image cannot be decoded
        """
        target_width = self.config.target_width if target_width is None else target_width
        color_count = self.config.color_count if color_count is None else color_count
        smooth = self.config.smooth_resize if smooth is None else smooth
        method = self.config.quantization_method

        if target_width < 1:
            raise InvalidInput(f"Target width must be >= 1, got {target_width}")
        if color_count < 1:
            raise InvalidInput(f"Color count must be >= 1, got {color_count}")
        if method not in QUANTIZATION_METHODS:
            raise InvalidInput(f"Unknown quantization method {method!r}")

        print("Loading image...")
        image = self.load_image(source)
        try:
            rgb_image = flatten_to_rgb(image)
            print(f"Loaded image with size: {image.size[0]}x{image.size[1]} pixels.")

            scaled = scale_image_to_grid(rgb_image, target_width, smooth)
        finally:
            if image is not source:
                image.close()
        cols, rows = scaled.size
        print(f"Scaled image to a {cols}x{rows} grid.")

        pixels = np.asarray(scaled, dtype=np.uint8).reshape(-1, 3)
        lab_pixels = rgb_to_lab(pixels)

        lab_palette = quantize_lab(lab_pixels, color_count, method)
        palette = [tuple(int(c) for c in color) for color in lab_to_rgb(lab_palette)]
        print(f"Quantized to {len(palette)} colors using {method}.")

        grid = index_pixels(lab_pixels.reshape(rows, cols, 3), lab_palette)
        print("Image processing complete.")

        return PixelArt(grid=grid, palette=palette)


def generate(
    source: ImageSource,
    target_width: int,
    color_count: int,
    smooth: bool = True,
) -> PixelArt:
    """Convert an image to a PixelArt with the default median-cut settings."""
    return ImageProcessor().generate(source, target_width, color_count, smooth)
