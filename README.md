# fractview

An interactive viewer for the Mandelbrot set and for Julia sets, drawn in a
1500 x 1500 window. It also comes with a small toolkit for in-memory pixel
images, named X11 colours and XPM images.

## Installing

```
pip install .
```

To run the tests as well:

```
pip install ".[test]"
pytest
```

## Running the viewer

Draw the Mandelbrot set:

```
fractview mandelbrot
```

Draw a Julia set. Give the real and imaginary parts of its constant. Each one
must be made of digits with at most one `.` and at most one `-`, and its value
must lie from -2 to 2:

```
fractview julia -0.8 0.156
```

Any other arguments print a short usage message, and the command exits with
status 1.

### Controls

| Input              | Effect                                          |
|--------------------|-------------------------------------------------|
| Arrow keys         | Move the view by half the current zoom factor   |
| Right Shift        | Add 10 iterations                               |
| Left Shift         | Remove 10 iterations                            |
| Mouse wheel up     | Zoom in (zoom factor times 0.9)                 |
| Mouse wheel down   | Zoom out (zoom factor times 1.1)                |
| Escape / close     | Quit                                            |

The view starts with 42 iterations, an escape value of 4 and a zoom factor of
1. A point that escapes is coloured from a five-step blue palette, chosen by
the iteration at which it escaped. A point that never escapes stays black.

## Using it as a library

```python
from fractview.parsing import parse_args
from fractview.render import pixel_color, render

fractal = parse_args(["julia", "-0.4", "0.6"])
image = render(fractal, 300, 300)     # an Image
pixels = image.as_array()             # (300, 300) uint32 array of 0xRRGGBB
corner = pixel_color(0, 0, fractal, 300, 300)
```

`parse_args` raises `fractview.parsing.UsageError` for arguments it does not
accept. `Fractal` (in `fractview.fractal`) holds the view state: `kind`,
`julia`, `escape_value`, `iterations`, `shift_x`, `shift_y` and `zoom`, with
`reset()` to restore the defaults. `fractview.events.handle_key` and
`handle_mouse` apply the controls above to a `Fractal`.

Other pieces you can use on their own:

- `fractview.colors`: `lookup_color(name)` returns the 0xRRGGBB value of an
  X11 colour name, case-insensitively (`-1` for `none`, `KeyError` for an
  unknown name); `color_names()` lists every name.
- `fractview.image`: `Image(width, height, endian)` is a 32-bit pixel buffer
  with `put_pixel`, `get_pixel`, `fill` and `as_array`. `color_value` and
  `channel_shifts` convert colours for displays shallower than 24 bits.
- `fractview.xpm`: `xpm_file_to_image(path)` and `xpm_text_to_image(text)`
  read XPM images into an `Image`, and `parse_xpm(lines)` takes the strings
  directly. Only `c` colour keys are used; `none` becomes a transparent pixel
  (0xFF000000) and unknown colour names become black. Malformed input raises
  `XpmError`.
- `fractview.complexmath`: `atodbl`, `map_range`, `sum_complex` and
  `square_complex`.