# pixeltint

pixeltint is a small image editor and colour picker. It has three pixel
filters: desaturation, sepia and inversion. It can read the colour at any point
of an image fitted into a drawing area of a given size. It also keeps a
per-user activity log.

## Installation

```
pip install .
```

## Command line

```
pixeltint --about
pixeltint --name Ada Byron Lovelace photo.bmp --apply sepia --output toned.png
```

Every run except `--about` needs `--name FIRST MIDDLE LAST`. Each name must be
non-empty and hold only ASCII letters and spaces. The options are:

- `image`: the image file to open.
- `--apply {desaturation,sepia,inversion,reset}`: apply a filter, or restore
  the image as opened. You can repeat it, and the steps run in order.
- `--pick X Y`: print the colour at a point of the drawing area as `R G B`, or
  `-` when the point falls outside the image. You can repeat it.
- `--window WIDTHxHEIGHT`: the size of the drawing area. The default is
  `780x470`.
- `--output PATH`: save the edited image.
- `--log-dir DIR`: the directory for all log files. The default is the current
  directory.
- `--log-colors`: log every picked colour.
- `--log-normalized`: log every picked colour scaled to 0..1.

On an error the command prints a message to standard error and exits with
status 1.

## Library use

### Filters

`pixeltint.filters` works on single `(red, green, blue)` colours or on whole
Pillow images:

```python
from PIL import Image
from pixeltint.filters import FilterMode, apply_filter, sepia

sepia((100, 150, 200))
image = Image.open("photo.bmp")
toned = apply_filter(image, FilterMode.SEPIA)
```

- `desaturate` gives a grey made from the weights 0.3, 0.59 and 0.11.
- `sepia` clamps each channel to 255.
- `invert` gives the negative, with the inverted green and blue channels
  swapped.
- `filter_function(mode)` returns the per-pixel function for a `FilterMode`.
- `apply_filter` returns a new RGB image.

A channel outside 0..255 raises `ValueError`.

### Geometry

`pixeltint.geometry` fits an image into a window and keeps its aspect ratio. It
can also map a window point back to an image pixel:

```python
from pixeltint.geometry import best_fit_rect, map_point_to_image

rect = best_fit_rect(640, 480, 780, 470)           # a centred Rect
map_point_to_image(100, 200, 640, 480, 780, 470)   # (x, y) or None
```

### Registration and logs

`pixeltint.registration` provides the following:

- `is_valid_name` and `validate_names` check names. `validate_names` returns a
  `NameValidation` with per-field results and `all_valid`.
- `generate_log_header` builds a `LogHeader`. It holds the log file name
  `<first>_<last>_userlogs_<DD>_<MM>_<YYYY>.txt` and the name and date lines.
- `UserLog` is a text log with `open`, `add_entry` and `close`. Closing it
  writes a ruled footer.

### Editing sessions

`pixeltint.session.EditorSession` brings these together:

```python
from pixeltint.session import EditorSession
from pixeltint.filters import FilterMode

with EditorSession(log_dir="logs") as session:
    session.register("Ada", "Byron", "Lovelace")
    session.open_image("photo.bmp")
    session.apply_filter(FilterMode.DESATURATION)
    session.reset()
    session.pick_color(100, 200)
```

Before a user has registered, opening an image, applying a filter, resetting
or switching on a picker log raises `NotRegisteredError`. Invalid names raise
`ValueError`.

`register` creates the user log in `log_dir`. Every filter applied and every
reset is written to that log. `reset` raises `ValueError` when no image has
been opened.

`set_preview_color` and `pick_color` update `preview_color`. They also write
the colour to whichever picker logs are on:

- `set_color_log` turns on `PickedLogFile.txt`.
- `set_normalized_log` turns on `PickedNormalizedLogFile.txt`.

Both files are created in `log_dir`. `close` shuts the picker logs and writes
the user log's footer.

## What it does not do

pixeltint has no graphical window. You cannot view the image or click on it.
Images are loaded, filtered, picked from and saved only through the command
line or the library.