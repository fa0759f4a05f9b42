"""Command-line front end: register a user, filter an image and pick colours from it."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Sequence
from pathlib import Path

from PIL import UnidentifiedImageError

from .filters import FilterMode
from .session import WINDOW_HEIGHT, WINDOW_WIDTH, EditorSession, NotRegisteredError

TITLE = "Image Editor & Color Picker"
RESET_STEP = "reset"
MISS_MARK = "-"


def about_text() -> str:
    """Return the text shown by the about box."""
    return (
        "IMAGE EDITOR & COLOR PICKER\n"
        "\n"
        "Apply desaturation, sepia and inversion filters to an image,\n"
        "reset it to the original and pick colours from it.\n"
    )


def _window_size(text: str) -> tuple[int, int]:
    width, sep, height = text.lower().partition("x")
    try:
        if not sep:
            raise ValueError
        size = int(width), int(height)
    except ValueError:
        raise argparse.ArgumentTypeError(
            f"expected WIDTHxHEIGHT, got {text!r}"
        ) from None
    if size[0] <= 0 or size[1] <= 0:
        raise argparse.ArgumentTypeError(f"window size must be positive, got {text!r}")
    return size


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="pixeltint", description=TITLE)
    parser.add_argument("image", nargs="?", type=Path, help="image file to open")
    parser.add_argument("--about", action="store_true", help="show the about text and exit")
    parser.add_argument(
        "--name",
        nargs=3,
        metavar=("FIRST", "MIDDLE", "LAST"),
        help="register the user under this name",
    )
    parser.add_argument(
        "--apply",
        dest="steps",
        action="append",
        default=[],
        choices=[mode.value for mode in FilterMode if mode is not FilterMode.NONE]
        + [RESET_STEP],
        help="filter to apply, or 'reset'; may be repeated and runs in order",
    )
    parser.add_argument(
        "--pick",
        action="append",
        default=[],
        nargs=2,
        type=int,
        metavar=("X", "Y"),
        help="print the colour under a window point; may be repeated",
    )
    parser.add_argument(
        "--window",
        type=_window_size,
        default=(WINDOW_WIDTH, WINDOW_HEIGHT),
        metavar="WIDTHxHEIGHT",
        help=f"size of the drawing area (default {WINDOW_WIDTH}x{WINDOW_HEIGHT})",
    )
    parser.add_argument("--output", type=Path, help="save the edited image here")
    parser.add_argument(
        "--log-dir", type=Path, default=Path("."), help="directory for the log files"
    )
    parser.add_argument(
        "--log-colors", action="store_true", help="log picked colours"
    )
    parser.add_argument(
        "--log-normalized", action="store_true", help="log picked colours scaled to 0..1"
    )
    return parser


def _run(args: argparse.Namespace) -> None:
    with EditorSession(args.log_dir, window_size=args.window) as session:
        session.register(*args.name)
        if args.log_colors:
            session.set_color_log(True)
        if args.log_normalized:
            session.set_normalized_log(True)
        if args.image is not None:
            try:
                session.open_image(args.image)
            except (UnidentifiedImageError, OSError) as exc:
                raise OSError(f"Failed to load bitmap: {exc}") from exc
        for step in args.steps:
            if step == RESET_STEP:
                session.reset()
            else:
                session.apply_filter(step)
        for x, y in args.pick:
            color = session.pick_color(x, y)
            print(MISS_MARK if color is None else " ".join(map(str, color)))
        if args.output is not None:
            if session.image is None:
                raise ValueError("there is no image to save")
            session.image.save(args.output)


def main(argv: Sequence[str] | None = None) -> int:
    """Run the command line and return the exit status."""
    parser = _build_parser()
    args = parser.parse_args(argv)
    if args.about:
        print(about_text(), end="")
        return 0
    if args.name is None:
        parser.error("--name FIRST MIDDLE LAST is required")
    try:
        _run(args)
    except (NotRegisteredError, ValueError, OSError) as exc:
        print(f"pixeltint: error: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())