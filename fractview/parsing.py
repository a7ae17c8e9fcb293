"""Command-line argument checking."""

from __future__ import annotations

from fractview.complexmath import atodbl
from fractview.fractal import Fractal, FractalKind

_LOWER_LIMIT = "-2"
_UPPER_LIMIT = "2"
_NUMBER_CHARS = frozenset("0123456789.-")


class UsageError(ValueError):
    """Raised when the command line does not describe a fractal."""


def is_number(text: str) -> bool:
    """Tell whether ``text`` is made only of digits, one ``.`` and one ``-``.

    A ``-`` may not be the last character. The empty string is not a number.
    """
    if not text:
        return False
    dots = 0
    minuses = 0
    for pos, char in enumerate(text):
        if char not in _NUMBER_CHARS:
            return False
        if char == ".":
            dots += 1
            if dots > 1:
                return False
        elif char == "-":
            minuses += 1
            if minuses > 1 or pos == len(text) - 1:
                return False
    return True


def inside_limits(text: str) -> bool:
    """Tell whether the value of ``text`` lies within [-2, 2]."""
    return atodbl(_LOWER_LIMIT) <= atodbl(text) <= atodbl(_UPPER_LIMIT)


def julia_error(real: str, imag: str) -> bool:
    """Return True when the two Julia constant parts are not acceptable."""
    return not (
        is_number(real) and is_number(imag) and inside_limits(real) and inside_limits(imag)
    )


def parse_args(args: list[str]) -> Fractal:
    """Build a fractal from the arguments after the program name.

    Accepts ``mandelbrot`` alone, or ``julia`` followed by the real and
    imaginary parts of the constant. Raises :class:`UsageError` otherwise.
    """
    if len(args) == 1 and args[0] == FractalKind.MANDELBROT.value:
        return Fractal(FractalKind.MANDELBROT)
    if len(args) == 3 and args[0] == FractalKind.JULIA.value:
        real, imag = args[1], args[2]
        if julia_error(real, imag):
            raise UsageError(f"invalid julia constant: {real} {imag}")
        return Fractal(FractalKind.JULIA, julia=complex(atodbl(real), atodbl(imag)))
    raise UsageError("incorrect fractal name or arguments: " + " ".join(args))