"""Escape-time rendering of the fractal view."""

from __future__ import annotations

import numpy as np

from fractview.complexmath import map_range, square_complex, sum_complex
from fractview.fractal import BLACK, HEIGHT, PALETTE, WIDTH, Fractal, FractalKind
from fractview.image import Image


def _point(x, y, fractal: Fractal, width: int, height: int):
    real = fractal.zoom * map_range(x, -2, 2, width) + fractal.shift_x
    imag = fractal.zoom * map_range(y, 2, -2, height) + fractal.shift_y
    return real, imag


def pixel_color(x: int, y: int, fractal: Fractal, width: int = WIDTH, height: int = HEIGHT) -> int:
    """Return the colour of pixel (``x``, ``y``) in a ``width`` x ``height`` view."""
    z = complex(*_point(x, y, fractal, width, height))
    c = fractal.seed(z)
    for i in range(fractal.iterations):
        z = sum_complex(square_complex(z), c)
        if z.real * z.real + z.imag * z.imag > fractal.escape_value:
            return PALETTE[i % len(PALETTE)]
    return BLACK


def render(fractal: Fractal, width: int = WIDTH, height: int = HEIGHT) -> Image:
    """Draw the whole view into a new image, pixel for pixel as :func:`pixel_color`."""
    xs = np.arange(width, dtype=np.float64)
    ys = np.arange(height, dtype=np.float64)
    real_row, _ = _point(xs, 0, fractal, width, height)
    _, imag_col = _point(0, ys, fractal, width, height)
    zx = np.broadcast_to(real_row, (height, width)).copy()
    zy = np.broadcast_to(imag_col[:, None], (height, width)).copy()
    if fractal.kind is FractalKind.JULIA:
        cx, cy = fractal.julia.real, fractal.julia.imag
    else:
        cx, cy = zx.copy(), zy.copy()

    colors = np.full((height, width), BLACK, dtype=np.uint32)
    active = np.ones((height, width), dtype=bool)
    with np.errstate(over="ignore", invalid="ignore"):
        for i in range(fractal.iterations):
            zx, zy = zx * zx - zy * zy + cx, 2 * zx * zy + cy
            escaped = active & (zx * zx + zy * zy > fractal.escape_value)
            colors[escaped] = PALETTE[i % len(PALETTE)]
            active &= ~escaped
            if not active.any():
                break

    image = Image(width, height)
    image.data[: width * height * 4] = colors.astype("<u4").tobytes()
    return image