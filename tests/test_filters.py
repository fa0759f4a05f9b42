import itertools

import pytest
from PIL import Image

from pixeltint.filters import (
    FilterMode,
    apply_filter,
    desaturate,
    filter_function,
    invert,
    sepia,
)

SAMPLES = [
    (0, 0, 0),
    (255, 255, 255),
    (255, 0, 0),
    (0, 255, 0),
    (0, 0, 255),
    (12, 200, 77),
    (128, 64, 32),
    (1, 2, 3),
    (250, 10, 130),
]


def test_desaturate_black_stays_black():
    assert desaturate((0, 0, 0)) == (0, 0, 0)


@pytest.mark.parametrize("color", SAMPLES)
def test_desaturate_is_grey_and_bounded(color):
    grey = desaturate(color)
    assert grey[0] == grey[1] == grey[2]
    assert grey[0] <= max(color)
    assert grey[0] >= min(color) - 3


def test_desaturate_is_monotone_per_channel():
    for base in SAMPLES:
        for index in range(3):
            if base[index] == 255:
                continue
            brighter = list(base)
            brighter[index] += 1
            assert desaturate(tuple(brighter))[0] >= desaturate(base)[0]


def test_desaturate_white_is_below_full():
    assert desaturate((255, 255, 255)) == (254, 254, 254)


def test_sepia_black_stays_black():
    assert sepia((0, 0, 0)) == (0, 0, 0)


@pytest.mark.parametrize("color", SAMPLES)
def test_sepia_channels_ordered_and_in_range(color):
    red, green, blue = sepia(color)
    assert all(0 <= c <= 255 for c in (red, green, blue))
    assert red >= green
    assert red >= blue


def test_sepia_clamps_bright_red_and_green():
    red, green, _ = sepia((255, 255, 255))
    assert red == 255
    assert green == 255


def test_invert_black_is_white():
    assert invert((0, 0, 0)) == (255, 255, 255)


@pytest.mark.parametrize("color", SAMPLES)
def test_invert_is_an_involution(color):
    assert invert(invert(color)) == color


def test_invert_swaps_green_and_blue():
    assert invert((0, 0, 255)) == (255, 0, 255)
    assert invert((0, 255, 0)) == (255, 255, 0)


@pytest.mark.parametrize("func", [desaturate, sepia, invert])
@pytest.mark.parametrize(
    "bad", [(256, 0, 0), (-1, 0, 0), (0, 0), (1.5, 0, 0), "red", None]
)
def test_filters_reject_bad_colours(func, bad):
    with pytest.raises(ValueError):
        func(bad)


def test_filter_function_lookup():
    assert filter_function(FilterMode.DESATURATION) is desaturate
    assert filter_function(FilterMode.SEPIA) is sepia
    assert filter_function("inversion") is invert
    assert filter_function(FilterMode.NONE)((7, 8, 9)) == (7, 8, 9)


def test_filter_function_unknown_mode():
    with pytest.raises(ValueError):
        filter_function("bogus")


def _sample_image():
    image = Image.new("RGB", (3, 3))
    pixels = list(itertools.islice(itertools.cycle(SAMPLES), 9))
    for index, color in enumerate(pixels):
        image.putpixel((index % 3, index // 3), color)
    return image, pixels


@pytest.mark.parametrize(
    "mode", [FilterMode.DESATURATION, FilterMode.SEPIA, FilterMode.INVERSION]
)
def test_apply_filter_matches_pixel_function(mode):
    image, pixels = _sample_image()
    result = apply_filter(image, mode)
    func = filter_function(mode)
    assert result.size == image.size
    for index, color in enumerate(pixels):
        assert result.getpixel((index % 3, index // 3)) == func(color)


def test_apply_filter_leaves_input_untouched():
    image, pixels = _sample_image()
    apply_filter(image, FilterMode.INVERSION)
    for index, color in enumerate(pixels):
        assert image.getpixel((index % 3, index // 3)) == color


def test_apply_filter_none_is_identity():
    image, _ = _sample_image()
    result = apply_filter(image, FilterMode.NONE)
    assert result.tobytes() == image.tobytes()


def test_apply_filter_converts_to_rgb():
    image = Image.new("RGBA", (2, 1), (10, 20, 30, 40))
    result = apply_filter(image, FilterMode.INVERSION)
    assert result.mode == "RGB"
    assert result.getpixel((1, 0)) == invert((10, 20, 30))


def test_apply_filter_twice_inversion_restores():
    image, _ = _sample_image()
    twice = apply_filter(apply_filter(image, "inversion"), "inversion")
    assert twice.tobytes() == image.tobytes()