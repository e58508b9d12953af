"""Bounded string and byte-buffer helpers with C-library semantics.

Searches return an index, or None when nothing is found. Counted
operations see only their first ``length`` elements.
"""

from __future__ import annotations

from itertools import islice, zip_longest

_NUL = "\0"


def _single_char(char: str) -> str:
    if len(char) != 1:
        raise ValueError(f"expected a single character, got {char!r}")
    return char


def _non_negative(name: str, value: int) -> int:
    if value < 0:
        raise ValueError(f"{name} must not be negative, got {value}")
    return value


def _check_span(name: str, data: bytes, length: int) -> None:
    _non_negative("length", length)
    if length > len(data):
        raise ValueError(
            f"length {length} exceeds the {len(data)} bytes of {name}"
        )


def strchr(text: str, char: str) -> int | None:
    """Index of the first ``char`` in ``text``.

    Searching for the NUL character finds the end of the string,
    so it yields ``len(text)``.
    """
    char = _single_char(char)
    if char == _NUL:
        return len(text)
    index = text.find(char)
    return None if index < 0 else index


def strrchr(text: str, char: str) -> int | None:
    """Index of the last ``char`` in ``text``; NUL yields ``len(text)``."""
    char = _single_char(char)
    if char == _NUL:
        return len(text)
    index = text.rfind(char)
    return None if index < 0 else index


def memchr(data: bytes, byte: int, length: int) -> int | None:
    """Index of the first ``byte`` (taken modulo 256) in ``data[:length]``."""
    _check_span("data", data, length)
    index = data.find(byte & 0xFF, 0, length)
    return None if index < 0 else index


def memcmp(first: bytes, second: bytes, length: int) -> int:
    """Compare the first ``length`` bytes as unsigned values.

    Returns the difference of the first pair that differs, or 0.
    """
    _check_span("first", first, length)
    _check_span("second", second, length)
    for left, right in zip(first[:length], second[:length]):
        if left != right:
            return left - right
    return 0


def strncmp(first: str, second: str, length: int) -> int:
    """Compare at most ``length`` characters.

    A string that ends early compares as if followed by NUL. Returns the
    difference of the first pair of codes that differs, or 0.
    """
    _non_negative("length", length)
    pairs = zip_longest(first, second, fillvalue=_NUL)
    for left, right in islice(pairs, length):
        if left != right:
            return ord(left) - ord(right)
    return 0


def strnstr(haystack: str, needle: str, length: int) -> int | None:
    """Index of ``needle`` lying wholly within ``haystack[:length]``.

    An empty needle is found at index 0.
    """
    _non_negative("length", length)
    if not needle:
        return 0
    index = haystack[:length].find(needle)
    return None if index < 0 else index


def strlcpy(src: str, size: int) -> tuple[str, int]:
    """Copy ``src`` into a buffer of ``size`` characters, NUL included.

    Returns the stored text and the length of ``src``; truncation has
    happened when that length is not below ``size``.
    """
    _non_negative("size", size)
    if size == 0:
        return "", len(src)
    return src[: size - 1], len(src)


def strlcat(dest: str, src: str, size: int) -> tuple[str, int]:
    """Append ``src`` to ``dest`` in a buffer of ``size`` characters.

    Returns the resulting text and the length the full result would have.
    When ``size`` does not exceed ``len(dest)`` nothing is appended and the
    reported length is ``size + len(src)``.
    """
    _non_negative("size", size)
    if size <= len(dest):
        return dest, size + len(src)
    room = size - len(dest) - 1
    return dest + src[:room], len(dest) + len(src)


def substr(text: str, start: int, length: int) -> str:
    """At most ``length`` characters of ``text`` from ``start``.

    A start at or past the end gives an empty string.
    """
    _non_negative("start", start)
    _non_negative("length", length)
    if start >= len(text):
        return ""
    return text[start : start + length]


def strtrim(text: str, charset: str) -> str:
    """Remove characters of ``charset`` from both ends of ``text``."""
    return text.strip(charset)


def split(text: str, sep: str) -> list[str]:
    """Split ``text`` on ``sep``, dropping empty fields."""
    sep = _single_char(sep)
    return [field for field in text.split(sep) if field]