"""Reading XPM pixmaps into 32-bit pixel arrays."""

from __future__ import annotations

import os
import string
from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from pathlib import Path

from cubkit.colors import lookup_color

TRANSPARENT = 0xFF000000
"""Pixel value stored for the ``None`` colour (alpha byte set)."""

_NAME_BUFFER = 63
_WORD_SEPARATORS = " \t"
_C_SPACE = " \t\n\v\f\r"


class XpmError(ValueError):
    """Raised when XPM data cannot be turned into an image."""


@dataclass(frozen=True)
class XpmImage:
    """A decoded pixmap: row-major 0xAARRGGBB pixel values."""

    width: int
    height: int
    pixels: tuple[int, ...]

    def pixel(self, x: int, y: int) -> int:
        """Return the pixel at column ``x`` of row ``y``."""
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"pixel ({x}, {y}) outside {self.width}x{self.height}")
        return self.pixels[y * self.width + x]


def split_words(text: str) -> list[str]:
    """Split ``text`` on runs of spaces and tabs only."""
    words: list[str] = []
    current: list[str] = []
    for char in text:
        if char in _WORD_SEPARATORS:
            if current:
                words.append("".join(current))
                current = []
        else:
            current.append(char)
    if current:
        words.append("".join(current))
    return words


def find_unquoted(text: str, needle: str) -> int:
    """Return the first position of ``needle`` outside double quotes, or -1."""
    if not needle:
        raise ValueError("needle must not be empty")
    quoted = False
    for pos, char in enumerate(text[: len(text) - len(needle) + 1]):
        if char == '"':
            quoted = not quoted
        if not quoted and text.startswith(needle, pos):
            return pos
    return -1


def _blank(text: str, start: int, stop: int) -> str:
    stop = min(stop, len(text))
    return text[:start] + " " * (stop - start) + text[stop:]


def strip_comments(text: str) -> str:
    """Replace C comments outside quoted strings with spaces, keeping length."""
    while (begin := find_unquoted(text, "/*")) != -1:
        end = text.find("*/", begin + 2)
        stop = end + 2 if end != -1 else begin + 3
        text = _blank(text, begin, stop)
    while (begin := find_unquoted(text, "//")) != -1:
        end = text.find("\n", begin + 2)
        stop = end + 1 if end != -1 else begin + 2
        text = _blank(text, begin, stop)
    return text


def _to_int32(value: int) -> int:
    value &= 0xFFFFFFFF
    return value - (1 << 32) if value >= 1 << 31 else value


def _parse_hex(text: str) -> int:
    """Parse a leading hexadecimal number the way ``strtol(s, 0, 16)`` does."""
    rest = text.lstrip(_C_SPACE)
    sign = 1
    if rest[:1] in ("+", "-"):
        sign = -1 if rest[0] == "-" else 1
        rest = rest[1:]
    if rest[:2].lower() == "0x" and rest[2:3] and rest[2] in string.hexdigits:
        rest = rest[2:]
    digits = []
    for char in rest:
        if char not in string.hexdigits:
            break
        digits.append(char)
    if not digits:
        return 0
    return sign * int("".join(digits), 16)


def _parse_int(text: str) -> int:
    """Parse a leading decimal number the way ``atoi`` does."""
    rest = text.lstrip(_C_SPACE)
    sign = 1
    if rest[:1] in ("+", "-"):
        sign = -1 if rest[0] == "-" else 1
        rest = rest[1:]
    digits = []
    for char in rest:
        if not ("0" <= char <= "9"):
            break
        digits.append(char)
    return sign * int("".join(digits)) if digits else 0


def text_to_rgb(name: str, end: str | None) -> int:
    """Resolve an XPM colour value: ``#hex`` or a (possibly two-word) name.

    Unknown names give 0; ``None`` gives -1.
    """
    if name.startswith("#"):
        return _to_int32(_parse_hex(name[1:]))
    if end is not None:
        name = f"{name} {end}"[:_NAME_BUFFER]
    value = lookup_color(name)
    return 0 if value is None else value


def _take(lines: Iterator[str], what: str) -> str:
    try:
        return next(lines)
    except StopIteration:
        raise XpmError(f"XPM data ends before the {what}") from None


def parse_xpm(lines: Iterable[str]) -> XpmImage:
    """Decode XPM from its quoted strings: header, colours, then pixel rows."""
    source = iter(lines)
    header = split_words(_take(source, "header"))
    if len(header) < 4:
        raise XpmError("XPM header needs width, height, colours and chars per pixel")
    width, height, ncolors, cpp = (_parse_int(word) for word in header[:4])
    if min(width, height, ncolors, cpp) <= 0:
        raise XpmError("XPM header values must be positive")

    # Short keys overwrite earlier definitions; long keys keep the first one.
    first_wins = cpp > 2
    colors: dict[str, int] = {}
    for _ in range(ncolors):
        line = _take(source, "colour table end")
        words = split_words(line[cpp:])
        try:
            index = words.index("c") + 1
        except ValueError:
            raise XpmError(f"colour line without a 'c' key: {line!r}") from None
        if index >= len(words):
            raise XpmError(f"colour line without a colour value: {line!r}")
        end = words[index + 1] if index + 1 < len(words) else None
        rgb = text_to_rgb(words[index], end)
        key = line[:cpp]
        if first_wins:
            colors.setdefault(key, rgb)
        else:
            colors[key] = rgb

    pixels: list[int] = []
    for _ in range(height):
        row = _take(source, "last pixel row")
        for x in range(width):
            color = colors.get(row[x * cpp:(x + 1) * cpp], 0) & 0xFFFFFFFF
            pixels.append(TRANSPARENT if color == 0xFFFFFFFF else color)
    return XpmImage(width, height, tuple(pixels))


def _quoted_strings(text: str) -> Iterator[str]:
    pos = 0
    while True:
        start = text.find('"', pos)
        if start == -1:
            return
        stop = text.find('"', start + 1)
        if stop == -1:
            return
        yield text[start + 1:stop]
        pos = stop + 1


def parse_xpm_text(text: str) -> XpmImage:
    """Decode the text of an XPM file (a C array of strings)."""
    return parse_xpm(_quoted_strings(strip_comments(text)))


def load_xpm(path: str | os.PathLike[str]) -> XpmImage:
    """Read and decode an XPM file."""
    try:
        data = Path(path).read_bytes()
    except OSError as error:
        raise XpmError(f"cannot read {os.fspath(path)}: {error}") from error
    return parse_xpm_text(data.decode("latin-1"))