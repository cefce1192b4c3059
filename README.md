# fdfview

fdfview draws a wireframe view of a height map stored in an `.fdf` file. The
map is shown in isometric projection in a 1920×1080 window.

## Installing

```
pip install .
```

The window is drawn with pygame, which is installed as a dependency. The tests
need pytest (`pip install .[test]`).

## The `.fdf` format

An `.fdf` file is plain text with one row of the grid on each line. Each row
holds integers separated by spaces, which are the heights at those points:

```
0 0 0 0
0 5 5 0
0 5 5 0
0 0 0 0
```

Every row must have as many values as the first row. A value is a decimal
integer with an optional leading `+` or `-` that fits in a signed 32-bit
integer. A file that breaks any of these rules, or that is empty, is rejected.
To be drawn, a map needs at least two rows and two columns.

## Running

```
fdfview path/to/map.fdf
```

The command accepts exactly one argument, and it must end in `.fdf` with at
least one character before the extension. If the map parses, the grid is
printed to standard output (each value followed by a space, one row per line)
and a window titled `title` opens showing the wireframe in white, with the last
point of each row marked in green. Close the window to quit.

When the argument is missing or wrong, when the map cannot be read, or when it
is too small to draw, a message goes to standard error and the command exits
with a non-zero status.

## Using it as a library

- `fdfview.fdfmap.parse_map(path)` reads a map file and returns its grid as a
  list of rows of ints; `parse_map_lines(lines)` does the same for lines you
  already hold. Both raise `fdfview.fdfmap.MapError` (a `ValueError`) on bad
  input. `parse_int`, `split_fields`, `is_valid_row` and `has_fdf_extension`
  are the helpers they are built from.
- `fdfview.render.render_map(grid, image)` draws the wireframe into an
  `fdfview.image.Image` and returns it. `project(x, y, z, x_max, y_max)` gives
  the screen `Point` for one grid cell, and `draw_line(image, start, end,
  color)` draws one segment, dropping pixels that fall outside the image.
- `fdfview.image.Image(width, height, pixel_format=None, endian=0)` is a packed
  pixel buffer with `put_pixel`, `get_pixel` and `rgb_rows`. Its layout comes
  from a `PixelFormat` (32 bits per pixel, 24-bit depth by default), whose
  `convert(color)` turns a `0x00RRGGBB` colour into a pixel value for that
  format.
- `fdfview.xpm.read_xpm(path)` and `parse_xpm(lines)` load XPM pictures into an
  `Image`, raising `fdfview.xpm.XpmError` on bad data. Colours are given as
  `#rrggbb` or by name; names are resolved through
  `fdfview.colors.lookup_color`, and `color_from_text` does the full
  conversion. The colour `none` is stored as `0xFF000000`.
- `fdfview.cli.format_grid(grid)` gives the text the command prints, and
  `fdfview.cli.show(image, title)` opens a pygame window showing an image until
  it is closed.
- `fdfview.events` holds a window and hook model: a `Display` keeps a list of
  `Window` objects, each `Window` takes callbacks through `hook`, `key_hook`,
  `mouse_hook` and `expose_hook`, and `Display.dispatch` and `Display.loop`
  route `Event` values to them. `EventType` and `EventMask` carry the event
  codes and masks.

## What it does not do

- The viewer is static: there is no zooming, panning, rotation or change of
  projection, and no keyboard or mouse controls besides closing the window.
- Colours written in the map file are not read; every line is drawn white.
- `fdfview.events` is not connected to the pygame window that the command
  opens. Its loop runs over events you supply yourself.