"""Coordinate mapping, complex arithmetic and lenient number parsing."""

from __future__ import annotations

_SPACES = frozenset("\t\n\v\f\r ")


def map_range(value, new_min, new_max, old_max):
    """Scale ``value`` from ``[0, old_max]`` onto ``[new_min, new_max]``.

    Works on plain numbers and on numpy arrays alike.
    """
    return (new_max - new_min) * value / old_max + new_min


def sum_complex(z1: complex, z2: complex) -> complex:
    """Return the sum of two complex numbers."""
    return complex(z1.real + z2.real, z1.imag + z2.imag)


def square_complex(z: complex) -> complex:
    """Return ``z`` squared, computed component by component."""
    return complex(z.real * z.real - z.imag * z.imag, 2 * z.real * z.imag)


def atodbl(text: str) -> float:
    """Read a decimal number the lenient way the command line expects.

    Leading whitespace is skipped and any run of signs is folded. Digits up
    to a ``.`` form the integer part; a ``.`` or ``,`` after them is skipped
    and the rest is read as fractional digits. Characters are not checked,
    so non-digits contribute their offset from ``'0'``.
    """
    pos = 0
    end = len(text)
    while pos < end and text[pos] in _SPACES:
        pos += 1
    sign = 1
    while pos < end and text[pos] in "+-":
        if text[pos] == "-":
            sign = -sign
        pos += 1
    result = 0.0
    while pos < end and text[pos] != ".":
        result = result * 10 + ord(text[pos]) - ord("0")
        pos += 1
    if pos < end and text[pos] in ".,":
        pos += 1
    power = 1.0
    for char in text[pos:]:
        power = power / 10
        result = result + (ord(char) - ord("0")) * power
    return result * sign