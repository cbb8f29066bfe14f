"""Character classification, case mapping and small output helpers."""

from __future__ import annotations

import sys
from typing import TextIO, TypeVar

CharT = TypeVar("CharT", str, int)


def _code(char: str | int) -> int:
    """Return the character code of a one-character string or an int."""
    if isinstance(char, int):
        return char
    if len(char) != 1:
        raise ValueError(f"expected a single character, got {char!r}")
    return ord(char)


def is_alnum(char: str | int) -> bool:
    """Tell whether ``char`` is an ASCII letter or digit."""
    return is_alpha(char) or is_digit(char)


def is_alpha(char: str | int) -> bool:
    """Tell whether ``char`` is an ASCII letter."""
    code = _code(char)
    return ord("A") <= code <= ord("Z") or ord("a") <= code <= ord("z")


def is_ascii(char: str | int) -> bool:
    """Tell whether ``char`` lies in the 7-bit ASCII range."""
    return 0 <= _code(char) <= 127


def is_digit(char: str | int) -> bool:
    """Tell whether ``char`` is an ASCII decimal digit."""
    return ord("0") <= _code(char) <= ord("9")


def is_print(char: str | int) -> bool:
    """Tell whether ``char`` is a printable ASCII character, space included."""
    return 32 <= _code(char) <= 126


def _shift(char: CharT, low: str, high: str, offset: int) -> CharT:
    code = _code(char)
    if ord(low) <= code <= ord(high):
        code += offset
    return chr(code) if isinstance(char, str) else code


def to_upper(char: CharT) -> CharT:
    """Map an ASCII lower-case letter to upper case; leave anything else."""
    return _shift(char, "a", "z", -32)


def to_lower(char: CharT) -> CharT:
    """Map an ASCII upper-case letter to lower case; leave anything else."""
    return _shift(char, "A", "Z", 32)


def _target(stream: TextIO | None) -> TextIO:
    return sys.stdout if stream is None else stream


def write_number(number: int, stream: TextIO | None = None) -> None:
    """Write the decimal form of ``number`` to ``stream`` (stdout by default)."""
    _target(stream).write(str(int(number)))


def write_text(text: str | None, stream: TextIO | None = None) -> None:
    """Write ``text`` to ``stream``; None writes nothing."""
    if text is None:
        return
    _target(stream).write(text)


def write_line(text: str | None, stream: TextIO | None = None) -> None:
    """Write ``text`` followed by a newline; None writes nothing."""
    if text is None:
        return
    out = _target(stream)
    out.write(text)
    out.write("\n")