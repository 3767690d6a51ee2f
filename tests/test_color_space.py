import numpy as np
import pytest

from image_processing.color_space import lab_to_rgb, rgb_to_lab, to_perceptual, to_rgb
from models import InvalidInput


def test_reference_colors():
    white = to_perceptual((255, 255, 255))
    black = to_perceptual((0, 0, 0))

    assert white == pytest.approx((100.0, 0.0, 0.0), abs=0.05)
    assert black == pytest.approx((0.0, 0.0, 0.0), abs=1e-9)


def test_red_has_positive_a_and_blue_negative_b():
    _, a_red, _ = to_perceptual((255, 0, 0))
    _, _, b_blue = to_perceptual((0, 0, 255))

    assert a_red > 50
    assert b_blue < -50


def test_round_trip_stays_within_one_unit():
    rng = np.random.default_rng(7)
    colors = rng.integers(0, 256, size=(5000, 3))
    grays = np.repeat(np.arange(256)[:, np.newaxis], 3, axis=1)
    rgb = np.vstack([colors, grays])

    back = lab_to_rgb(rgb_to_lab(rgb)).astype(int)

    assert np.abs(back - rgb).max() <= 1


def test_scalar_helpers_round_trip():
    for color in [(255, 0, 0), (12, 200, 99), (0, 0, 0), (255, 255, 255)]:
        back = to_rgb(*to_perceptual(color))
        assert all(abs(x - y) <= 1 for x, y in zip(back, color))


def test_to_rgb_clips_out_of_gamut_values():
    assert to_rgb(150.0, 0.0, 0.0) == (255, 255, 255)
    assert to_rgb(-20.0, 0.0, 0.0) == (0, 0, 0)


@pytest.mark.parametrize("color", [(256, 0, 0), (0, -1, 0), (10, 10, 300)])
def test_out_of_range_channels_are_rejected(color):
    with pytest.raises(InvalidInput):
        to_perceptual(color)


@pytest.mark.parametrize("color", [(1, 2), (1, 2, 3, 4), "abc", None, ("r", "g", "b")])
def test_non_color_values_are_rejected(color):
    with pytest.raises(InvalidInput):
        to_perceptual(color)
