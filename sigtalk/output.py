"""Writing characters, strings and numbers to a text stream."""

from __future__ import annotations

from typing import TextIO

from sigtalk.ctype import itoa


def putchar_fd(c: str, stream: TextIO) -> None:
    """Write the single character ``c`` to ``stream``."""
    if len(c) != 1:
        raise ValueError(f"expected a single character, got {c!r}")
    stream.write(c)


def putstr_fd(s: str | None, stream: TextIO) -> None:
    """Write ``s`` to ``stream``; a missing string writes nothing."""
    if s is None:
        return
    stream.write(s)


def putendl_fd(s: str | None, stream: TextIO) -> None:
    """Write ``s`` followed by a newline; a missing string writes nothing at all."""
    if s is None:
        return
    stream.write(s + "\n")


def putnbr_fd(n: int, stream: TextIO) -> None:
    """Write the 32-bit signed integer ``n`` in decimal to ``stream``."""
    stream.write(itoa(n))