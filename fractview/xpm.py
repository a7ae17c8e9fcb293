"""Reading of XPM images into :class:`~fractview.image.Image` buffers."""

from __future__ import annotations

import os
import re
from collections.abc import Iterable, Iterator

from fractview.colors import lookup_color
from fractview.image import Image

TRANSPARENT = 0xFF000000
_NAME_LIMIT = 63
_WORD_SPLIT = re.compile(r"[ \t]+")
_LEADING_INT = re.compile(r"[ \t\n\v\f\r]*([+-]?\d+)")
_LEADING_HEX = re.compile(r"[0-9a-fA-F]*")


class XpmError(ValueError):
    """Raised when XPM data cannot be turned into an image."""


def split_words(text: str) -> list[str]:
    """Split ``text`` on runs of spaces and tabs, dropping empty words."""
    return [word for word in _WORD_SPLIT.split(text) if word]


def find_unquoted(text: str, needle: str) -> int:
    """Return the first index of ``needle`` outside double quotes, or -1."""
    if not needle:
        raise ValueError("needle must not be empty")
    if len(needle) > len(text):
        return -1
    quoted = False
    for pos in range(len(text) - len(needle) + 1):
        if text[pos] == '"':
            quoted = not quoted
        if not quoted and text.startswith(needle, pos):
            return pos
    return -1


def strip_comments(text: str) -> str:
    """Blank out C comments that lie outside strings, keeping the length."""
    while (begin := find_unquoted(text, "/*")) != -1:
        close = text.find("*/", begin + 2)
        stop = len(text) if close == -1 else close + 2
        text = text[:begin] + " " * (stop - begin) + text[stop:]
    while (begin := find_unquoted(text, "//")) != -1:
        newline = text.find("\n", begin + 2)
        stop = len(text) if newline == -1 else newline + 1
        text = text[:begin] + " " * (stop - begin) + text[stop:]
    return text


def quoted_lines(text: str) -> Iterator[str]:
    """Yield the contents of successive double-quoted strings in ``text``."""
    pos = 0
    while True:
        start = text.find('"', pos)
        if start < 0:
            return
        end = text.find('"', start + 1)
        if end < 0:
            return
        yield text[start + 1:end]
        pos = end + 1


def _to_int32(value: int) -> int:
    value &= 0xFFFFFFFF
    return value - (1 << 32) if value >= 1 << 31 else value


def _atoi(word: str) -> int:
    match = _LEADING_INT.match(word)
    return int(match.group(1)) if match else 0


def text_color(name: str, extra: str | None = None) -> int:
    """Resolve an XPM colour specification to 0xRRGGBB.

    ``#hex`` values are read as hexadecimal. Otherwise ``name`` (joined with
    ``extra`` by a space when given) is looked up in the colour table;
    ``none`` gives -1 and an unknown name gives 0.
    """
    if name.startswith("#"):
        digits = _LEADING_HEX.match(name, 1).group(0)
        return _to_int32(int(digits, 16)) if digits else 0
    if extra is not None:
        name = f"{name} {extra}"[:_NAME_LIMIT]
    try:
        return lookup_color(name)
    except KeyError:
        return 0


def parse_xpm(lines: Iterable[str]) -> Image:
    """Build an image from the strings of an XPM: header, colours, pixels."""
    remaining = iter(lines)

    def next_line(what: str) -> str:
        try:
            return next(remaining)
        except StopIteration:
            raise XpmError(f"XPM data ends before the {what}") from None

    header = split_words(next_line("header"))
    if len(header) < 4:
        raise XpmError("XPM header needs width, height, colour count and chars per pixel")
    width, height, ncolors, cpp = (_atoi(word) for word in header[:4])
    if min(width, height, ncolors, cpp) <= 0:
        raise XpmError(f"invalid XPM header: {' '.join(header[:4])!r}")

    # Small keys index a direct table, so a later definition overrides an
    # earlier one; longer keys are searched in definition order.
    last_wins = cpp <= 2
    palette: dict[str, int] = {}
    for _ in range(ncolors):
        line = next_line("colour table")
        words = split_words(line[cpp:])
        try:
            index = words.index("c")
        except ValueError:
            raise XpmError(f"colour line without a 'c' key: {line!r}") from None
        if index + 1 >= len(words):
            raise XpmError(f"colour line without a colour value: {line!r}")
        extra = words[index + 2] if index + 2 < len(words) else None
        value = text_color(words[index + 1], extra)
        key = line[:cpp]
        if last_wins or key not in palette:
            palette[key] = value

    image = Image(width, height)
    row_length = width * cpp
    for y in range(height):
        row = next_line("pixel rows")
        if len(row) < row_length:
            raise XpmError(f"pixel row {y} is shorter than {row_length} characters")
        keys = (row[start:start + cpp] for start in range(0, row_length, cpp))
        for x, key in enumerate(keys):
            color = palette.get(key, 0)
            image.put_pixel(x, y, TRANSPARENT if color == -1 else color)
    return image


def xpm_text_to_image(text: str) -> Image:
    """Parse the text of an XPM file, comments included."""
    return parse_xpm(quoted_lines(strip_comments(text)))


def xpm_file_to_image(path: str | os.PathLike[str]) -> Image:
    """Read an XPM file from ``path`` and return its image."""
    with open(path, encoding="latin-1") as handle:
        return xpm_text_to_image(handle.read())