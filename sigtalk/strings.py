"""String helpers: splitting, searching, bounded copying, comparing and trimming."""

from __future__ import annotations

from collections.abc import Callable, MutableSequence
from itertools import islice, zip_longest
from typing import Any

_NUL = "\0"


def _check_non_negative(name: str, value: int) -> None:
    if value < 0:
        raise ValueError(f"{name} must not be negative")


def split(s: str, sep: str) -> list[str]:
    """Split ``s`` on the single character ``sep``, dropping empty pieces."""
    if len(sep) != 1:
        raise ValueError(f"separator must be a single character, got {sep!r}")
    return [piece for piece in s.split(sep) if piece]


def strchr(s: str, c: str) -> int | None:
    """Return the index of the first ``c`` in ``s``, or None.

    Searching for the NUL character finds the terminator at ``len(s)``.
    """
    if c == _NUL:
        return len(s)
    index = s.find(c)
    return None if index < 0 else index


def strrchr(s: str, c: str) -> int | None:
    """Return the index of the last ``c`` in ``s``, or None.

    Searching for the NUL character finds the terminator at ``len(s)``.
    """
    if c == _NUL:
        return len(s)
    index = s.rfind(c)
    return None if index < 0 else index


def strjoin(a: str | None, b: str | None) -> str | None:
    """Concatenate two strings; a missing one is treated as absent.

    Returns None only when both are missing.
    """
    if a is None and b is None:
        return None
    return (a or "") + (b or "")


def strlcpy(src: str, size: int) -> tuple[str, int]:
    """Copy ``src`` into a buffer of ``size`` characters including the terminator.

    Returns the copied text, truncated to ``size - 1`` characters, and the full
    length of ``src`` so the caller can detect truncation. With ``size`` 0
    nothing is copied.
    """
    _check_non_negative("size", size)
    if size == 0:
        return "", len(src)
    return src[: size - 1], len(src)


def strlcat(dst: str, src: str, size: int) -> tuple[str, int]:
    """Append ``src`` to ``dst`` within a buffer of ``size`` characters.

    Returns the resulting text and the length the full result would have had.
    When ``size`` does not exceed ``len(dst)``, ``dst`` is left unchanged and
    the length reported is ``len(src) + size``.
    """
    _check_non_negative("size", size)
    if size <= len(dst):
        return dst, len(src) + size
    room = size - 1 - len(dst)
    return dst + src[:room], len(dst) + len(src)


def _code(ch: str) -> int:
    return ord(ch) if ch else 0


def strncmp(a: str, b: str, n: int) -> int:
    """Compare at most ``n`` characters of two strings.

    Returns the difference of the first unequal pair of code points, the end
    of a string counting as 0, or 0 if the compared parts match.
    """
    _check_non_negative("n", n)
    for x, y in islice(zip_longest(a, b, fillvalue=""), n):
        if x != y:
            return _code(x) - _code(y)
    return 0


def strnstr(haystack: str, needle: str, n: int) -> int | None:
    """Find ``needle`` lying wholly within the first ``n`` characters of ``haystack``.

    Returns its index, 0 for an empty needle, or None when absent.
    """
    _check_non_negative("n", n)
    if not needle:
        return 0
    index = haystack[:n].find(needle)
    return None if index < 0 else index


def strmapi(s: str, f: Callable[[int, str], str]) -> str:
    """Build a new string from ``f(index, char)`` applied to each character of ``s``."""
    return "".join(f(index, ch) for index, ch in enumerate(s))


def striteri(buf: MutableSequence[Any], f: Callable[[int, Any], Any]) -> None:
    """Call ``f(index, item)`` on each item of ``buf``, updating it in place.

    Whatever ``f`` returns replaces the item, unless it returns None, in which
    case the item is left as it was.
    """
    for index, item in enumerate(buf):
        replacement = f(index, item)
        if replacement is not None:
            buf[index] = replacement


def strtrim(s: str, charset: str | None) -> str:
    """Remove characters found in ``charset`` from both ends of ``s``.

    With no charset the string is returned unchanged.
    """
    if charset is None:
        return s
    return s.strip(charset)


def substr(s: str, start: int, length: int) -> str:
    """Return at most ``length`` characters of ``s`` starting at ``start``.

    A start at or past the end gives an empty string.
    """
    _check_non_negative("start", start)
    _check_non_negative("length", length)
    if start >= len(s):
        return ""
    return s[start : start + length]