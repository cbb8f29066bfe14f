"""String helpers with the exact edge-case behaviour the map loader relies on."""

from __future__ import annotations

_ATOI_SPACE = "\t\r\n \v\f"


def _wrap_int32(value: int) -> int:
    value &= 0xFFFFFFFF
    return value - (1 << 32) if value >= 1 << 31 else value


def atoi(text: str) -> int:
    """Parse a leading decimal integer, ignoring leading whitespace.

    Parsing stops at the first non-digit, and text without digits gives 0.
    The result wraps around like a 32-bit signed int.
    """
    rest = text.lstrip(_ATOI_SPACE)
    sign = 1
    if rest[:1] == "-":
        sign = -1
        rest = rest[1:]
    elif rest[:1] == "+":
        rest = rest[1:]
    value = 0
    for char in rest:
        if not "0" <= char <= "9":
            break
        value = value * 10 + (ord(char) - ord("0"))
    return _wrap_int32(value * sign)


def itoa(number: int) -> str:
    """Return the decimal representation of ``number``."""
    return str(int(number))


def split(text: str, separator: str) -> list[str]:
    """Split ``text`` on a single-character separator, dropping empty words."""
    if len(separator) != 1:
        raise ValueError("separator must be exactly one character")
    return [word for word in text.split(separator) if word]


def trim(text: str, chars: str | None) -> str:
    """Remove every character of ``chars`` from both ends of ``text``.

    With ``chars`` of None the text comes back unchanged.
    """
    if chars is None:
        return text
    return text.strip(chars)


def substring(text: str, start: int, length: int) -> str:
    """Return at most ``length`` characters of ``text`` beginning at ``start``.

    A start past the end of the text gives an empty string.
    """
    if start < 0 or length < 0:
        raise ValueError("start and length must not be negative")
    if start > len(text):
        return ""
    return text[start:start + length]


def find_bounded(haystack: str, needle: str, limit: int) -> int:
    """Find ``needle`` within the first ``limit`` characters of ``haystack``.

    Returns the index of the first match lying wholly inside the limit, 0 for
    an empty needle, and -1 when there is no match.
    """
    if limit < 0:
        raise ValueError("limit must not be negative")
    if not needle:
        return 0
    return haystack[:limit].find(needle)


def _as_bytes(value: str | bytes) -> bytes:
    return value.encode("utf-8") if isinstance(value, str) else bytes(value)


def _signed(byte: int) -> int:
    return byte - 256 if byte >= 128 else byte


def compare_prefix(first: str | bytes, second: str | bytes, limit: int) -> int:
    """Compare at most ``limit`` bytes of two strings.

    Returns 0 when they match, otherwise a value whose sign orders the first
    differing byte as unsigned: negative when ``first`` sorts before ``second``.
    Text is compared as UTF-8 and a NUL byte ends a string.
    """
    if limit < 0:
        raise ValueError("limit must not be negative")
    left, right = _as_bytes(first), _as_bytes(second)
    for index in range(limit):
        a = left[index] if index < len(left) else 0
        b = right[index] if index < len(right) else 0
        if a == 0 and b == 0:
            break
        sa, sb = _signed(a), _signed(b)
        if sa < 0 and sb < 0:
            return sa - sb
        if sa < 0 or sb < 0:
            return sb - sa
        if sa != sb:
            return sa - sb
    return 0


def is_digits(text: str) -> bool:
    """Tell whether every character is an ASCII digit; empty text counts."""
    return all("0" <= char <= "9" for char in text)