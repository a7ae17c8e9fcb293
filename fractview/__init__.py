"""Mandelbrot and Julia set viewer with pixel-image, colour-name and XPM helpers."""

__version__ = "0.1.0"

__all__ = [
    "app",
    "colors",
    "complexmath",
    "events",
    "fractal",
    "image",
    "parsing",
    "render",
    "xpm",
]