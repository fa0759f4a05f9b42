"""Fitting an image into a window and mapping window points back to pixels."""

from __future__ import annotations

import struct
from dataclasses import dataclass

_F32 = struct.Struct("<f")


def _f32(value: float) -> float:
    return _F32.unpack(_F32.pack(value))[0]


@dataclass(frozen=True)
class Rect:
    """A rectangle with exclusive right and bottom edges."""

    left: int
    top: int
    right: int
    bottom: int

    @property
    def width(self) -> int:
        return self.right - self.left

    @property
    def height(self) -> int:
        return self.bottom - self.top

    def contains(self, x: int, y: int) -> bool:
        return self.left <= x < self.right and self.top <= y < self.bottom


def _require_positive(**values: int) -> None:
    for name, value in values.items():
        if value <= 0:
            raise ValueError(f"{name} must be positive, got {value}")


def best_fit_rect(
    image_width: int, image_height: int, window_width: int, window_height: int
) -> Rect:
    """Return the largest centred rectangle in the window with the image's aspect ratio."""
    _require_positive(
        image_width=image_width,
        image_height=image_height,
        window_width=window_width,
        window_height=window_height,
    )
    image_aspect = _f32(image_width / image_height)
    window_aspect = _f32(window_width / window_height)

    if image_aspect > window_aspect:
        new_height = int(_f32(window_width / image_aspect))
        top = (window_height - new_height) // 2
        return Rect(0, top, window_width, top + new_height)

    new_width = int(_f32(window_height * image_aspect))
    left = (window_width - new_width) // 2
    return Rect(left, 0, left + new_width, window_height)


def map_point_to_image(
    x: int,
    y: int,
    image_width: int,
    image_height: int,
    window_width: int,
    window_height: int,
) -> tuple[int, int] | None:
    """Return the image pixel under a window point, or None when it misses the image."""
    rect = best_fit_rect(image_width, image_height, window_width, window_height)
    if not rect.contains(x, y):
        return None
    image_x = (x - rect.left) * image_width // rect.width
    image_y = (y - rect.top) * image_height // rect.height
    return image_x, image_y