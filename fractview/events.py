"""Keyboard and mouse handling for the fractal view."""

from __future__ import annotations

import enum

from fractview.fractal import Fractal

PAN_STEP = 0.5
ITERATION_STEP = 10
ZOOM_OUT = 1.10
ZOOM_IN = 0.90


class Key(enum.IntEnum):
    """Keys the view reacts to, by X keysym."""

    ESCAPE = 0xFF1B
    LEFT = 0xFF51
    UP = 0xFF52
    RIGHT = 0xFF53
    DOWN = 0xFF54
    SHIFT_L = 0xFFE1
    SHIFT_R = 0xFFE2


class MouseButton(enum.IntEnum):
    """Mouse wheel buttons."""

    WHEEL_UP = 4
    WHEEL_DOWN = 5


def handle_key(fractal: Fractal, key: int) -> bool:
    """Apply a key press to the view.

    Returns False when the key asks to close the view; otherwise True, and
    the view should be drawn again.
    """
    if key == Key.ESCAPE:
        return False
    step = PAN_STEP * fractal.zoom
    if key == Key.LEFT:
        fractal.shift_x -= step
    elif key == Key.RIGHT:
        fractal.shift_x += step
    elif key == Key.UP:
        fractal.shift_y += step
    elif key == Key.DOWN:
        fractal.shift_y -= step
    elif key == Key.SHIFT_R:
        fractal.iterations += ITERATION_STEP
    elif key == Key.SHIFT_L:
        fractal.iterations -= ITERATION_STEP
    return True


def handle_mouse(fractal: Fractal, button: int) -> None:
    """Zoom the view for a mouse wheel button; other buttons change nothing."""
    if button == MouseButton.WHEEL_DOWN:
        fractal.zoom *= ZOOM_OUT
    elif button == MouseButton.WHEEL_UP:
        fractal.zoom *= ZOOM_IN