"""Per-pixel colour filters and their application to whole images."""

from __future__ import annotations

import enum
import struct
from collections.abc import Callable

from PIL import Image

Color = tuple[int, int, int]

_F32 = struct.Struct("<f")


def _f32(value: float) -> float:
    """Round a number to single precision."""
    return _F32.unpack(_F32.pack(value))[0]


def _check(color: Color) -> Color:
    try:
        red, green, blue = color
    except (TypeError, ValueError):
        raise ValueError(f"expected an (r, g, b) triple, got {color!r}") from None
    for channel in (red, green, blue):
        if not isinstance(channel, int) or isinstance(channel, bool):
            raise ValueError(f"colour channels must be integers, got {color!r}")
        if not 0 <= channel <= 255:
            raise ValueError(f"colour channels must lie in 0..255, got {color!r}")
    return red, green, blue


class FilterMode(enum.Enum):
    """The filters an image can be put through."""

    NONE = "none"
    DESATURATION = "desaturation"
    SEPIA = "sepia"
    INVERSION = "inversion"


def desaturate(color: Color) -> Color:
    """Return the grey level of a colour using 0.3/0.59/0.11 weights, truncated per channel."""
    red, green, blue = _check(color)
    grey = int(_f32(red * 0.3)) + int(_f32(green * 0.59)) + int(_f32(blue * 0.11))
    return grey, grey, grey


def _sepia_channel(red: int, green: int, blue: int, weights: tuple[float, float, float]) -> int:
    wr, wg, wb = (_f32(w) for w in weights)
    total = _f32(_f32(red * wr) + _f32(green * wg))
    total = _f32(total + _f32(blue * wb))
    return min(int(total), 255)


def sepia(color: Color) -> Color:
    """Return the sepia tone of a colour, each channel clamped to 255."""
    red, green, blue = _check(color)
    return (
        _sepia_channel(red, green, blue, (0.393, 0.769, 0.189)),
        _sepia_channel(red, green, blue, (0.349, 0.686, 0.168)),
        _sepia_channel(red, green, blue, (0.272, 0.534, 0.189)),
    )


def invert(color: Color) -> Color:
    """Return the negative of a colour; the inverted green and blue trade places."""
    red, green, blue = _check(color)
    return 255 - red, 255 - blue, 255 - green


def _identity(color: Color) -> Color:
    return _check(color)


_FILTERS: dict[FilterMode, Callable[[Color], Color]] = {
    FilterMode.NONE: _identity,
    FilterMode.DESATURATION: desaturate,
    FilterMode.SEPIA: sepia,
    FilterMode.INVERSION: invert,
}


def filter_function(mode: FilterMode | str) -> Callable[[Color], Color]:
    """Return the per-pixel function for a filter mode."""
    return _FILTERS[FilterMode(mode)]


def apply_filter(image: Image.Image, mode: FilterMode | str) -> Image.Image:
    """Return a new RGB image with the filter applied to every pixel."""
    func = filter_function(mode)
    source = image.convert("RGB")
    data = source.tobytes()
    cache: dict[Color, Color] = {}
    out = bytearray(len(data))
    channels = iter(data)
    position = 0
    for pixel in zip(channels, channels, channels):
        result = cache.get(pixel)
        if result is None:
            result = cache[pixel] = func(pixel)
        out[position : position + 3] = bytes(result)
        position += 3
    return Image.frombytes("RGB", source.size, bytes(out))