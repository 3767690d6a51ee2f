"""Conversion between sRGB and CIE Lab (D65).

AIDEV-NOTE: Lab is where all palette math happens: Euclidean distance in
Lab tracks perceived color difference far better than raw RGB. Functions
operate on (N, 3) numpy arrays; the scalar helpers wrap them for single
colors.
"""

import numpy as np

from models import InvalidInput, RGBColor

# D65 reference white
XN, YN, ZN = 0.95047, 1.0, 1.08883

EPSILON = 0.008856
KAPPA = 903.3


def rgb_to_lab(rgb: np.ndarray) -> np.ndarray:
    """Convert RGB array (0-255) of shape (N, 3) to Lab."""
    rgb = np.asarray(rgb)
    if rgb.size and (rgb.min() < 0 or rgb.max() > 255):
        raise InvalidInput("RGB channels must be in the range 0-255")
    rgb_norm = rgb.reshape(-1, 3).astype(np.float64) / 255.0

    # Undo sRGB gamma
    mask = rgb_norm > 0.04045
    rgb_linear = np.where(
        mask, ((rgb_norm + 0.055) / 1.055) ** 2.4, rgb_norm / 12.92
    )

    r, g, b = rgb_linear[:, 0], rgb_linear[:, 1], rgb_linear[:, 2]
    x = (r * 0.4124564 + g * 0.3575761 + b * 0.1804375) / XN
    y = (r * 0.2126729 + g * 0.7151522 + b * 0.0721750) / YN
    z = (r * 0.0193339 + g * 0.1191920 + b * 0.9503041) / ZN

    fx = np.where(x > EPSILON, np.cbrt(x), (KAPPA * x + 16) / 116)
    fy = np.where(y > EPSILON, np.cbrt(y), (KAPPA * y + 16) / 116)
    fz = np.where(z > EPSILON, np.cbrt(z), (KAPPA * z + 16) / 116)

    L = 116 * fy - 16
    a = 500 * (fx - fy)
    b_val = 200 * (fy - fz)

    return np.column_stack([L, a, b_val])


def lab_to_rgb(lab: np.ndarray) -> np.ndarray:
    """Convert Lab array of shape (N, 3) to RGB (0-255, uint8).

    Channels are rounded, not truncated, so rgb -> lab -> rgb lands back
    on the original values.
    """
    lab = np.asarray(lab, dtype=np.float64).reshape(-1, 3)
    L, a, b = lab[:, 0], lab[:, 1], lab[:, 2]

    fy = (L + 16) / 116
    fx = a / 500 + fy
    fz = fy - b / 200

    x = np.where(fx**3 > EPSILON, fx**3, (116 * fx - 16) / KAPPA) * XN
    y = np.where(L > KAPPA * EPSILON, fy**3, L / KAPPA) * YN
    z = np.where(fz**3 > EPSILON, fz**3, (116 * fz - 16) / KAPPA) * ZN

    r = x * 3.2404542 - y * 1.5371385 - z * 0.4985314
    g = -x * 0.9692660 + y * 1.8760108 + z * 0.0415560
    b_out = x * 0.0556434 - y * 0.2040259 + z * 1.0572252

    # Re-apply sRGB gamma
    rgb_linear = np.column_stack([r, g, b_out])
    mask = rgb_linear > 0.0031308
    rgb = np.where(
        mask,
        1.055 * np.power(np.clip(rgb_linear, 0, None), 1 / 2.4) - 0.055,
        12.92 * rgb_linear,
    )

    return np.clip(np.rint(rgb * 255), 0, 255).astype(np.uint8)


def to_perceptual(rgb: RGBColor) -> "tuple[float, float, float]":
    """Lab coordinates of a single (r, g, b) color."""
    try:
        values = np.asarray(rgb, dtype=np.float64)
    except (TypeError, ValueError) as e:
        raise InvalidInput(f"Expected an (r, g, b) triple, got {rgb!r}") from e
    if values.shape != (3,):
        raise InvalidInput(f"Expected an (r, g, b) triple, got {rgb!r}")
    L, a, b = rgb_to_lab(values[np.newaxis, :])[0]
    return float(L), float(a), float(b)


def to_rgb(L: float, a: float, b: float) -> RGBColor:
    """Nearest displayable (r, g, b) color for a Lab coordinate."""
    r, g, b_out = lab_to_rgb(np.array([[L, a, b]]))[0]
    return int(r), int(g), int(b_out)
