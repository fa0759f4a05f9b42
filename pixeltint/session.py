"""The state of one editing session: a registered user, an image and the colour picker."""

from __future__ import annotations

import datetime as _dt
import struct
from collections.abc import Callable
from pathlib import Path
from typing import IO

from PIL import Image

from .filters import Color, FilterMode, apply_filter as _apply_filter
from .geometry import map_point_to_image
from .registration import UserLog, generate_log_header, validate_names

WINDOW_WIDTH = 780
WINDOW_HEIGHT = 470

PICKED_LOG_NAME = "PickedLogFile.txt"
PICKED_NORMALIZED_LOG_NAME = "PickedNormalizedLogFile.txt"

RESET_ENTRY = " - > resetting filter\n"

_F32 = struct.Struct("<f")


def _f32(value: float) -> float:
    return _F32.unpack(_F32.pack(value))[0]


class NotRegisteredError(RuntimeError):
    """Raised when an action needs a registered user and none has registered."""


def _filter_entry(mode: FilterMode) -> str:
    return f" - > Applying {mode.value} filter\n"


def _selection_line(color: Color) -> str:
    red, green, blue = color
    return f"\nCurrent Selection : [ R : {red}, G : {green}, B : {blue} ]\n"


def _normalized_line(color: Color) -> str:
    red, green, blue = (f"{_f32(channel / 255.0):g}" for channel in color)
    return f"\nCurrent Selection[Normalized]: [ R : {red}, G : {green}, B : {blue} ]\n"


class EditorSession:
    """One user's editing session, holding the image, its original and the picker logs."""

    def __init__(
        self,
        log_dir: str | Path = ".",
        *,
        window_size: tuple[int, int] = (WINDOW_WIDTH, WINDOW_HEIGHT),
        today: Callable[[], _dt.date] | None = None,
    ) -> None:
        self.log_dir = Path(log_dir)
        self._today = today if today is not None else _dt.date.today
        self._user_log = UserLog()
        self._log_path: Path | None = None
        self._registered = False
        self.image: Image.Image | None = None
        self._original: Image.Image | None = None
        self._window_size = (0, 0)
        self.resize(*window_size)
        self.preview_color: Color = (255, 255, 255)
        self._color_log: IO[str] | None = None
        self._normalized_log: IO[str] | None = None

    @property
    def registered(self) -> bool:
        return self._registered

    @property
    def log_path(self) -> Path | None:
        """Where the user log is written, once a user has registered."""
        return self._log_path

    @property
    def window_size(self) -> tuple[int, int]:
        return self._window_size

    @property
    def color_log_enabled(self) -> bool:
        return self._color_log is not None

    @property
    def normalized_log_enabled(self) -> bool:
        return self._normalized_log is not None

    def _require_registered(self) -> None:
        if not self._registered:
            raise NotRegisteredError("a user must register first")

    def register(self, first: str, middle: str, last: str) -> Path:
        """Register the user, start their log and return its path."""
        if self._registered:
            raise RuntimeError("a user is already registered")
        validation = validate_names(first, middle, last)
        if not validation.all_valid:
            bad = [
                field
                for field, ok in (
                    ("first", validation.first),
                    ("middle", validation.middle),
                    ("last", validation.last),
                )
                if not ok
            ]
            raise ValueError(f"invalid name fields: {', '.join(bad)}")
        header = generate_log_header(first, middle, last, self._today())
        path = self.log_dir / header.file_name
        self._user_log.open(path)
        for line in header.lines:
            self._user_log.add_entry(line)
        self._log_path = path
        self._registered = True
        return path

    def open_image(self, path: str | Path) -> Image.Image:
        """Load an image and keep an untouched copy of it for resets."""
        self._require_registered()
        with Image.open(path) as loaded:
            image = loaded.convert("RGB")
        self.image = image
        self._original = image.copy()
        return image

    def apply_filter(self, mode: FilterMode | str) -> Image.Image | None:
        """Filter the current image, log the action and return the result."""
        self._require_registered()
        mode = FilterMode(mode)
        if self.image is not None:
            self.image = _apply_filter(self.image, mode)
        self._user_log.add_entry(_filter_entry(mode))
        return self.image

    def reset(self) -> Image.Image:
        """Restore the image to how it was when opened."""
        self._require_registered()
        self._user_log.add_entry(RESET_ENTRY)
        if self._original is None:
            raise ValueError("no original image to reset to")
        self.image = self._original.copy()
        return self.image

    def resize(self, width: int, height: int) -> None:
        """Record the size of the area the image is drawn into."""
        if width < 0 or height < 0:
            raise ValueError(f"window size must not be negative, got {width}x{height}")
        self._window_size = (width, height)

    def pick_color(self, x: int, y: int) -> Color | None:
        """Pick the image colour under a window point, or None when it misses the image."""
        if self.image is None:
            return None
        width, height = self._window_size
        if width == 0 or height == 0:
            return None
        point = map_point_to_image(x, y, self.image.width, self.image.height, width, height)
        if point is None:
            return None
        red, green, blue = self.image.getpixel(point)[:3]
        return self.set_preview_color(red, green, blue)

    def set_preview_color(self, red: int, green: int, blue: int) -> Color:
        """Set the preview colour and write it to whichever picker logs are enabled."""
        color = (red, green, blue)
        if not all(0 <= channel <= 255 for channel in color):
            raise ValueError(f"colour channels must lie in 0..255, got {color!r}")
        self.preview_color = color
        if self._color_log is not None:
            self._color_log.write(_selection_line(color))
        if self._normalized_log is not None:
            self._normalized_log.write(_normalized_line(color))
        return color

    def set_color_log(self, enabled: bool) -> None:
        """Start or stop logging picked colours."""
        self._require_registered()
        self._color_log = self._switch_log(self._color_log, enabled, PICKED_LOG_NAME)

    def set_normalized_log(self, enabled: bool) -> None:
        """Start or stop logging picked colours scaled to 0..1."""
        self._require_registered()
        self._normalized_log = self._switch_log(
            self._normalized_log, enabled, PICKED_NORMALIZED_LOG_NAME
        )

    def _switch_log(self, handle: IO[str] | None, enabled: bool, name: str) -> IO[str] | None:
        if enabled:
            if handle is None:
                handle = open(self.log_dir / name, "w", encoding="utf-8")
            return handle
        if handle is not None:
            handle.close()
        return None

    def close(self) -> None:
        """Close the picker logs and finish the user log."""
        self._color_log = self._switch_log(self._color_log, False, PICKED_LOG_NAME)
        self._normalized_log = self._switch_log(
            self._normalized_log, False, PICKED_NORMALIZED_LOG_NAME
        )
        self._user_log.close()

    def __enter__(self) -> EditorSession:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()