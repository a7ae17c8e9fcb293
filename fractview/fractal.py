"""Fractal view state and the constants it is drawn with."""

from __future__ import annotations

import enum
from dataclasses import dataclass

WIDTH = 1500
HEIGHT = 1500

BLACK = 0x000000
WHITE = 0xFFFFFF

BLUE1 = 0x0D1F2D
BLUE2 = 0x1E3A5F
BLUE3 = 0x41729F
BLUE4 = 0x69A3D0
BLUE5 = 0xB3DDF2

PALETTE = (BLUE1, BLUE2, BLUE3, BLUE4, BLUE5)

ESCAPE_VALUE = 4.0
DEFAULT_ITERATIONS = 42


class FractalKind(enum.Enum):
    """The fractals that can be drawn."""

    MANDELBROT = "mandelbrot"
    JULIA = "julia"


@dataclass
class Fractal:
    """What to draw and where the view currently is."""

    kind: FractalKind
    julia: complex = 0j
    escape_value: float = ESCAPE_VALUE
    iterations: int = DEFAULT_ITERATIONS
    shift_x: float = 0.0
    shift_y: float = 0.0
    zoom: float = 1.0

    @property
    def name(self) -> str:
        return self.kind.value

    def reset(self) -> None:
        """Restore the default escape value, iteration count, shift and zoom."""
        self.escape_value = ESCAPE_VALUE
        self.iterations = DEFAULT_ITERATIONS
        self.shift_x = 0.0
        self.shift_y = 0.0
        self.zoom = 1.0

    def seed(self, z: complex) -> complex:
        """Return the constant added at each step for the point ``z``."""
        if self.kind is FractalKind.JULIA:
            return self.julia
        return z